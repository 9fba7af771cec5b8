from pygame_gui_console.dispatcher import (ExecutionOutcome, FAULT_MESSAGES, HandlerResult,
                                          invoke_handler, tokenize)


def test_tokenize_splits_on_spaces_and_tabs():
    assert tokenize("cmd \t a  b\tc") == ["cmd", "a", "b", "c"]


def test_every_registered_handler_runs_in_order(dispatcher):
    calls = []
    dispatcher.commands.register("go", lambda name, args, ts: calls.append(("first", args)))
    dispatcher.commands.register("go", lambda name, args, ts: calls.append(("second", args)))

    outcome = dispatcher.submit("go 1 2")

    assert outcome == ExecutionOutcome.SUCCESS
    assert calls == [("first", ["1", "2"]), ("second", ["1", "2"])]


def test_handler_receives_name_and_timestamp(dispatcher):
    received = {}

    def handler(name, args, timestamp):
        received.update(name=name, args=args, timestamp=timestamp)

    dispatcher.commands.register("stamp", handler)
    dispatcher.submit("  stamp\tx  ")

    assert received["name"] == "stamp"
    assert received["args"] == ["x"]
    assert isinstance(received["timestamp"], float)


def test_known_command_is_echoed_and_recorded(dispatcher, recording_log):
    dispatcher.commands.register("go", lambda name, args, ts: None)

    dispatcher.submit("  go now ")

    assert recording_log.lines == [("> go now", 0)]
    assert dispatcher.history.entries == ["go now"]


def test_log_on_execute_false_skips_echo(dispatcher, recording_log):
    dispatcher.commands.register("quiet", lambda name, args, ts: None, log_on_execute=False)

    dispatcher.submit("quiet")

    assert recording_log.lines == []
    assert dispatcher.history.entries == ["quiet"]


def test_empty_input_logs_bare_prompt(dispatcher, recording_log):
    assert dispatcher.submit("   ") == ExecutionOutcome.SUCCESS
    assert recording_log.lines == [("> ", 0)]
    assert len(dispatcher.history) == 0

    assert dispatcher.submit("", add_to_log=False) == ExecutionOutcome.SUCCESS
    assert len(recording_log.lines) == 1


def test_unknown_command_reports_once(dispatcher, recording_log):
    outcome = dispatcher.submit("unknown_cmd")

    assert outcome == ExecutionOutcome.COMMAND_NOT_FOUND
    assert dispatcher.history.entries == ["unknown_cmd"]
    assert recording_log.messages == ["> unknown_cmd", "Command 'unknown_cmd' not found."]
    assert len(recording_log.at_level(1)) == 1


def test_unknown_command_without_error_reporting(dispatcher, recording_log):
    dispatcher.report_on_error = False

    dispatcher.submit("unknown_cmd")

    assert recording_log.lines == [("> unknown_cmd", 0)]
    assert dispatcher.history.entries == ["unknown_cmd"]


def test_submitting_same_line_twice_keeps_one_history_entry(dispatcher):
    dispatcher.commands.register("foo", lambda name, args, ts: None)
    dispatcher.commands.register("bar", lambda name, args, ts: None)

    dispatcher.submit("foo")
    dispatcher.submit("foo")
    assert dispatcher.history.entries == ["foo"]

    dispatcher.submit("bar")
    dispatcher.submit("foo")
    assert dispatcher.history.entries == ["foo", "bar", "foo"]


def test_missing_argument_is_an_argument_count_fault(dispatcher, recording_log):
    dispatcher.commands.register("need", lambda name, args, ts: args[1])

    outcome = dispatcher.submit("need one")

    assert outcome == ExecutionOutcome.ARGUMENT_COUNT_FAULT
    assert recording_log.at_level(1) == [FAULT_MESSAGES[ExecutionOutcome.ARGUMENT_COUNT_FAULT]]
    assert dispatcher.history.entries == ["need one"]


def test_bad_number_is_an_argument_format_fault(dispatcher, recording_log):
    dispatcher.commands.register("num", lambda name, args, ts: int(args[0]))

    outcome = dispatcher.submit("num abc")

    assert outcome == ExecutionOutcome.ARGUMENT_FORMAT_FAULT
    assert recording_log.at_level(1) == [FAULT_MESSAGES[ExecutionOutcome.ARGUMENT_FORMAT_FAULT]]


def test_other_exceptions_are_handler_faults(dispatcher, recording_log):
    def explode(name, args, ts):
        raise RuntimeError("boom")

    dispatcher.commands.register("explode", explode)

    outcome = dispatcher.submit("explode")

    assert outcome == ExecutionOutcome.HANDLER_FAULT
    assert recording_log.at_level(1) == ["Error: boom"]
    assert dispatcher.history.entries == ["explode"]


def test_fault_stops_remaining_handlers(dispatcher):
    calls = []

    def explode(name, args, ts):
        raise RuntimeError("boom")

    dispatcher.commands.register("chain", explode)
    dispatcher.commands.register("chain", lambda name, args, ts: calls.append("after"))

    dispatcher.submit("chain")

    assert calls == []


def test_fault_is_silent_without_logging(dispatcher, recording_log):
    dispatcher.commands.register("need", lambda name, args, ts: args[0])

    outcome = dispatcher.submit("need", add_to_log=False)

    assert outcome == ExecutionOutcome.ARGUMENT_COUNT_FAULT
    assert recording_log.lines == []
    assert dispatcher.history.entries == ["need"]


def test_fault_is_silent_without_error_reporting(dispatcher, recording_log):
    dispatcher.report_on_error = False
    dispatcher.commands.register("need", lambda name, args, ts: args[0])

    dispatcher.submit("need")

    assert recording_log.lines == [("> need", 0)]


def test_handler_can_skip_history_for_one_call(dispatcher):
    def secret(name, args, ts):
        dispatcher.commands.lookup(name).history_on_execute = False

    command = dispatcher.commands.register("secret", secret)

    dispatcher.submit("secret")

    assert len(dispatcher.history) == 0
    assert command.history_on_execute is True


def test_history_flag_is_restored_after_a_fault(dispatcher):
    def secret_fault(name, args, ts):
        dispatcher.commands.lookup(name).history_on_execute = False
        raise RuntimeError("nope")

    command = dispatcher.commands.register("secret", secret_fault)

    dispatcher.submit("secret")

    assert len(dispatcher.history) == 0
    assert command.history_on_execute is True


def test_history_disabled_command_is_not_recorded(dispatcher):
    dispatcher.commands.register("hidden", lambda name, args, ts: None, history_on_execute=False)

    dispatcher.submit("hidden")

    assert len(dispatcher.history) == 0


def test_invoke_handler_returns_tagged_results():
    assert invoke_handler(lambda n, a, t: None, "x", [], 0.0) == HandlerResult()

    result = invoke_handler(lambda n, a, t: {}["key"], "x", [], 0.0)
    assert result.outcome == ExecutionOutcome.HANDLER_FAULT
    assert not result.ok


def test_repeated_unknown_command_keeps_one_history_entry(dispatcher, recording_log):
    dispatcher.submit("typo")
    dispatcher.submit("typo")

    assert dispatcher.history.entries == ["typo"]
    # Both attempts are still reported
    assert recording_log.at_level(1) == ["Command 'typo' not found."] * 2
