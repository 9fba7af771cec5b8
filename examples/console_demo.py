import pygame
import pygame_gui
from dataclasses import dataclass, field
from typing import List

from pygame_gui.core import ObjectID

from pygame_gui_console.console_panel import ConsolePanel, CONSOLE_THEME, add_sample_commands
from pygame_gui_console.game_console import GameConsole, ConsoleConfig, UI_CONSOLE_COMMAND_EXECUTED


# A tiny "game" the console can poke at
@dataclass
class Ball:
    x: float = 100.0
    y: float = 450.0
    speed: float = 200.0
    radius: int = 20
    color: pygame.Color = field(default_factory=lambda: pygame.Color(240, 200, 60))

    def update(self, time_delta: float, width: int):
        self.x += self.speed * time_delta
        if self.x - self.radius < 0 or self.x + self.radius > width:
            self.speed = -self.speed
            self.x = max(self.radius, min(width - self.radius, self.x))


def register_game_commands(console: GameConsole, ball: Ball):
    def speed_command(name: str, args: List[str], timestamp: float):
        ball.speed = float(args[0])
        console.log(f"Ball speed set to {ball.speed:g}")

    def ball_color_command(name: str, args: List[str], timestamp: float):
        ball.color = pygame.Color(args[0])
        console.log(f"Ball color set to {args[0]}")

    def where_command(name: str, args: List[str], timestamp: float):
        console.log(f"Ball at ({ball.x:.0f}, {ball.y:.0f}), speed {ball.speed:g}")

    console.add_command("speed", speed_command, "Sets the ball speed.", "speed <pixels per second>")
    console.add_command("ball_color", ball_color_command, "Sets the ball color.", "ball_color <name or #rrggbb>")
    console.add_command("where", where_command, "Prints the ball position.")


def main():
    pygame.init()
    screen_size = (1000, 700)
    screen = pygame.display.set_mode(screen_size)
    pygame.display.set_caption("Console Demo")
    clock = pygame.time.Clock()

    manager = pygame_gui.UIManager(screen_size, CONSOLE_THEME)

    config = ConsoleConfig()
    config.behavior.log_debug_messages = True
    config.behavior.show_log_time = True
    config.log_level_colors = {1: pygame.Color(255, 80, 80), 255: pygame.Color(160, 160, 160)}

    console = GameConsole(config)
    ball = Ball()
    add_sample_commands(console)
    register_game_commands(console, ball)

    running = True

    def stop():
        nonlocal running
        running = False

    console.exit_handler = stop

    ConsolePanel(pygame.Rect(0, 0, screen_size[0], 320), manager, console,
                 object_id=ObjectID(object_id='#console_panel', class_id='@console_panel'))

    print("\nConsole Demo")
    print("- F1 opens the console, the same key closes it")
    print("- Try: speed 500, ball_color red, where, man speed, exit")

    while running:
        time_delta = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == UI_CONSOLE_COMMAND_EXECUTED:
                print(f"[{event.outcome.value}] {event.command}")

            consumed = manager.process_events(event)

            if not consumed and event.type == pygame.KEYDOWN and event.key == pygame.K_F1:
                console.open(pygame.K_F1)

        # Game keeps running while the console is open
        ball.update(time_delta, screen_size[0])
        manager.update(time_delta)

        screen.fill((30, 40, 55))
        pygame.draw.circle(screen, ball.color, (int(ball.x), int(ball.y)), ball.radius)
        manager.draw_ui(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
