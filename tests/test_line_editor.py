import random

import pytest

from pygame_gui_console.dispatcher import ExecutionOutcome
from pygame_gui_console.line_editor import LineEditor, longest_common_prefix


def noop(name, args, timestamp):
    pass


@pytest.fixture
def editor(dispatcher):
    for name in ("clear", "clear_x", "close"):
        dispatcher.commands.register(name, noop)
    return LineEditor(dispatcher)


def type_text(editor: LineEditor, text: str):
    for char in text:
        editor.insert_char(char)


def test_insert_and_cursor_movement(editor):
    type_text(editor, "helo")
    editor.move_left()
    editor.insert_char("l")

    assert editor.text == "hello"
    assert editor.cursor == 4

    editor.home()
    editor.insert_char(">")
    assert editor.text == ">hello"
    assert editor.cursor == 1

    editor.end()
    assert editor.cursor == 6


def test_nul_character_is_ignored(editor):
    editor.insert_char("\0")
    assert editor.text == ""
    assert editor.cursor == 0


def test_insert_text_is_not_filtered(editor):
    type_text(editor, "ab")
    editor.move_left()

    editor.insert_text("X\0Y")

    assert editor.text == "aX\0Yb"
    assert editor.cursor == 4


def test_backspace_and_delete_respect_bounds(editor):
    editor.backspace()
    editor.delete()
    assert editor.text == ""

    type_text(editor, "abc")
    editor.delete()
    assert editor.text == "abc"

    editor.move_left()
    editor.backspace()
    assert editor.text == "ac"
    assert editor.cursor == 1

    editor.delete()
    assert editor.text == "a"
    assert editor.cursor == 1


def test_moves_are_clamped(editor):
    editor.move_left()
    assert editor.cursor == 0

    type_text(editor, "ab")
    editor.move_right()
    assert editor.cursor == 2


def test_cursor_invariant_holds_for_random_edits(editor):
    rng = random.Random(1234)
    operations = [
        lambda: editor.insert_char(rng.choice("ab \0")),
        lambda: editor.insert_text(rng.choice(["", "xy", "long paste"])),
        editor.backspace,
        editor.delete,
        editor.move_left,
        editor.move_right,
        editor.home,
        editor.end,
    ]

    for _ in range(500):
        rng.choice(operations)()
        assert 0 <= editor.cursor <= len(editor.text)


def test_text_setter_clamps_cursor(editor):
    type_text(editor, "abcdef")
    editor.text = "ab"

    assert editor.cursor == 2


def test_history_browsing(editor):
    editor.dispatcher.submit("foo")
    editor.dispatcher.submit("bar")

    assert editor.history_up()
    assert editor.text == "bar"
    assert editor.cursor == 3
    assert editor.history_up()
    assert editor.text == "foo"
    assert not editor.history_up()
    assert editor.text == "foo"

    assert editor.history_down()
    assert editor.text == "bar"
    # Down stops at the newest entry instead of returning to an empty line
    assert not editor.history_down()
    assert editor.text == "bar"


def test_typing_ends_history_browsing(editor):
    editor.dispatcher.submit("foo")
    editor.history_up()

    editor.insert_char("!")

    assert not editor.dispatcher.history.is_browsing


def test_tab_with_unique_match_completes(editor):
    type_text(editor, "clo")

    assert editor.tab_complete() == ["close"]
    assert editor.text == "close"
    assert editor.cursor == 5


def test_tab_on_complete_name_keeps_it(editor):
    type_text(editor, "close")

    editor.tab_complete()

    assert editor.text == "close"


def test_tab_with_several_matches_lists_them(editor, recording_log):
    type_text(editor, "cl")

    candidates = editor.tab_complete()

    assert candidates == ["clear", "clear_x", "close"]
    assert editor.text == "cl"
    assert editor.cursor == 2
    assert recording_log.messages == ["> cl", " -> clear", " -> clear_x", " -> close"]


def test_tab_extends_to_longest_common_prefix(editor):
    type_text(editor, "cle")

    editor.tab_complete()

    assert editor.text == "clear"


def test_repeated_tab_alternates_first_and_last(editor, recording_log):
    type_text(editor, "cl")
    editor.tab_complete()

    editor.tab_complete()
    assert editor.text == "clear"
    editor.tab_complete()
    assert editor.text == "close"
    editor.tab_complete()
    assert editor.text == "clear"
    assert editor.cursor == 5

    # Candidates are only listed on the first press
    assert len(recording_log.messages) == 4


def test_repeated_tab_skips_unregistered_commands(editor, recording_log):
    type_text(editor, "cl")
    editor.tab_complete()

    editor.dispatcher.commands.unregister("close")
    seen = set()
    for _ in range(4):
        assert editor.tab_complete() == ["clear", "clear_x"]
        seen.add(editor.text)

    assert seen == {"clear", "clear_x"}
    # The shrunken set is listed again once
    assert recording_log.messages[-3:] == ["> clear", " -> clear", " -> clear_x"]


def test_repeated_tab_picks_up_new_commands(editor):
    type_text(editor, "cl")
    editor.tab_complete()

    editor.dispatcher.commands.register("clone", noop)

    assert editor.tab_complete() == ["clear", "clear_x", "clone", "close"]
    assert editor.text == "cl"
    editor.tab_complete()
    assert editor.text == "clear"
    editor.tab_complete()
    assert editor.text == "close"


def test_edit_resets_tab_cycle(editor, recording_log):
    type_text(editor, "cl")
    editor.tab_complete()
    editor.insert_char("e")

    editor.tab_complete()

    assert editor.text == "clear"
    assert recording_log.messages[-3:] == ["> clear", " -> clear", " -> clear_x"]


def test_tab_without_matches_is_a_noop(editor, recording_log):
    type_text(editor, "zz")

    assert editor.tab_complete() == []
    assert editor.text == "zz"
    assert recording_log.lines == []


def test_submit_resets_buffer(editor):
    type_text(editor, "close now")

    outcome = editor.submit()

    assert outcome == ExecutionOutcome.SUCCESS
    assert editor.text == ""
    assert editor.cursor == 0
    assert editor.dispatcher.history.entries == ["close now"]


def test_submit_resets_buffer_after_failure(editor):
    type_text(editor, "missing")

    assert editor.submit() == ExecutionOutcome.COMMAND_NOT_FOUND
    assert editor.text == ""


def test_longest_common_prefix():
    assert longest_common_prefix("clear", "close") == "cl"
    assert longest_common_prefix("same", "same") == "same"
    assert longest_common_prefix("a", "b") == ""
