"""The game: playfield objects, the frame loop and the main menu."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from pathlib import Path
from typing import Iterable, Iterator

from .cheeseburger import Cheeseburger
from .console import Color, Console, Key, terminal_keys
from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .friend import Friend
from .highscore import load_high_score, record_score
from .nyancat import NyanCat
from .powerup import Powerup

MAX_NYAN_CATS = 5
MAX_POWER_UPS = 3
MAX_FRIENDS = 2
FRIEND_NAME = "wishi"
DEFAULT_HIGHSCORE_PATH = "highscore.txt"

_INDENT = "\t" * 5
_WIDE_INDENT = "\t" * 6

_MENU_OPTIONS = (
    "1. Start Game",
    "2. Display Score",
    "3. Replay game",
    "4. Game Instructions and rules",
    "5. Team members",
    "6. Exit",
)

_INSTRUCTIONS = (
    "",
    "**",
    "*                    GAME INSTRUCTIONS               *",
    "**",
    "",
    "|1. Welcome to the Ultimate Game Challenge!          |",
    "|  Get ready to test your skills and have fun.       |",
    "",
    "**",
    "*                       GAME RULES                   *",
    "**",
    "",
    "|1. Each level will increase in difficulty.          |",
    "|2. You earn points by completing challenges.        |",
    "|3. Make sure to beat the timer to advance.          |",
    "|4. If you lose all your lives, the game ends.       |",
    "",
    "**",
    "*                      HOW TO PLAY                   *",
    "**",
    "",
    "|1. Use arrow keys to navigate.                      |",
    "|2. Press 'Enter' to select an option.               |",
    "|3. Collect powerups/friends and avoid nyancats.     |",
    "|4. Press 'ESC' to pause the game anytime.           |",
    "|5. Press 'R' to resume the game.                    |",
    "",
    "**",
    "*                     ENJOY THE GAME!                *",
    "**",
    "                 Press any key to exit!              ",
)


def _random_kind(rng: random.Random) -> str:
    if rng.randrange(3) == 0:
        return "Shield"
    return "Speed" if rng.randrange(3) == 1 else "Score"


def _parse_choice(value) -> int | None:
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class Game:
    """Holds the player and the falling objects and runs menu and frames."""

    frame_delay = 0.1

    def __init__(
        self,
        console: Console | None = None,
        rng: random.Random | None = None,
        highscore_path: str | os.PathLike = DEFAULT_HIGHSCORE_PATH,
    ):
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self.highscore_path = Path(highscore_path)
        self.level = 1
        self.game_over = False
        self.paused = False
        self.player = Cheeseburger(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 1)
        rng = self.rng
        self.nyan_cats = [
            NyanCat(rng.randrange(SCREEN_WIDTH), rng.randrange(10), rng.randrange(5), rng)
            for _ in range(MAX_NYAN_CATS)
        ]
        self.power_ups = [
            Powerup(rng.randrange(SCREEN_WIDTH), rng.randrange(SCREEN_HEIGHT), _random_kind(rng), rng)
            for _ in range(MAX_POWER_UPS)
        ]
        self.friends = [
            Friend(
                rng.randrange(SCREEN_WIDTH),
                rng.randrange(SCREEN_HEIGHT),
                FRIEND_NAME,
                rng.randrange(3) + 1,
                rng,
            )
            for _ in range(MAX_FRIENDS)
        ]

    @property
    def _falling(self):
        yield from self.nyan_cats
        yield from self.power_ups
        yield from self.friends

    def _say(self, messages: Iterable[str | None]) -> None:
        for message in messages:
            if message:
                self.console.write(message + "\n")

    def draw(self) -> None:
        """Clear the screen and render every object and the status line."""
        self.console.clear()
        self.player.draw(self.console)
        for obj in self._falling:
            obj.draw(self.console)
        self.display_score()
        self.console.flush()

    def update(self) -> None:
        """Advance all objects by one frame and resolve collisions."""
        if self.game_over:
            return
        self.player.update()
        if self.console.key_pressed():
            self.player.steer(self.console.read_key())
        self.player.move()
        for obj in self._falling:
            obj.move()
        self.check_collisions()

    def check_collisions(self) -> list[str]:
        """Apply hits, pickups and friends touching the player; return the messages shown."""
        messages: list[str] = []
        player = self.player
        for cat in self.nyan_cats:
            if player.overlaps(cat) and player.score > 0:
                messages.extend(player.handle_collision(cat))
                cat.reset_position()
        for power_up in self.power_ups:
            if power_up.collides_with(player):
                player.increase_score(5)
                message = power_up.activate(player)
                if message:
                    messages.append(message)
                power_up.deactivate()
        for friend in self.friends:
            if friend.collides_with(player):
                player.increase_score(10)
                friend.active = True
                messages.extend(friend.offer_help(player))
        self._say(messages)
        return messages

    def level_up(self) -> None:
        score = self.player.score
        if 100 < score < 200 or 200 <= score < 300:
            self.level += 1

    def handle_user_input(self) -> None:
        """ESC pauses; the next key press after a key resumes."""
        if not self.console.key_pressed():
            return
        if self.console.read_key() == Key.ESCAPE:
            self.pause()
        if self.console.read_key():
            self.resume()

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def display_menu(self) -> None:
        write = self.console.write
        write("\n" * 5)
        write(f"{_INDENT}*\n", Color.GREEN)
        write(f"{_INDENT}****     Cheeseburger vs. Nyan Cat     ****\n", Color.GREEN)
        write(f"{_INDENT}*\n", Color.GREEN)
        for option in _MENU_OPTIONS:
            write(f"{_INDENT}{option}\n", Color.YELLOW)
        write(f"{_INDENT}*\n", Color.CYAN)
        write(f"{_INDENT}Enter your choice: ", Color.CYAN)
        self.console.flush()

    def display_score(self) -> None:
        self.console.move_to(0, SCREEN_HEIGHT)
        self.console.write(
            f"Level: {self.level} Lives: {self.player.lives} Score: {self.player.score}\n",
            Color.CYAN,
        )

    def reset(self) -> None:
        """Put the player, the objects and the level back to a fresh start."""
        self.player.reset()
        for cat in self.nyan_cats:
            cat.reset_position()
        for power_up in self.power_ups:
            power_up.reset_position()
            power_up.deactivate()
        for friend in self.friends:
            friend.active = False
        self.level = 1
        self.game_over = False
        self.console.write("Game has been reset. Good luck!\n")

    def tick(self) -> None:
        """Run one pass of the play loop and keep the high score file current."""
        if self.paused:
            return
        self.level_up()
        if self.player.lives <= 0:
            self.game_over = True
        else:
            self.update()
            self.draw()
            self.check_collisions()
            if self.frame_delay > 0:
                time.sleep(self.frame_delay)
        record_score(self.highscore_path, self.player.score)

    def _wait_for_key(self) -> None:
        self.console.read_key()
        self.console.clear()

    def show_high_score(self) -> int | None:
        """Show the stored best score; return it, or None when no file exists."""
        if not self.highscore_path.exists():
            self.console.write("No highscore data found!\n")
            return None
        best = load_high_score(self.highscore_path)
        write = self.console.write
        write(f"Highest Score: {best}\n")
        self.console.clear()
        lines = (
            "\n\n",
            f"{_WIDE_INDENT}*\n",
            f"{_WIDE_INDENT}*                             *\n",
            f"{_WIDE_INDENT}*      HIGHEST SCORE          *\n",
            f"{_WIDE_INDENT}*                             *\n",
            f"{_WIDE_INDENT}*\n",
            f"{_WIDE_INDENT}*     Highest Score: {best}       *\n",
            f"{_WIDE_INDENT}*\n",
            f"{_WIDE_INDENT}    Press any key to exit!      \n",
        )
        for line in lines:
            write(line, Color.RED)
        self.console.flush()
        self._wait_for_key()
        return best

    def show_instructions(self) -> None:
        self.console.clear()
        for line in _INSTRUCTIONS:
            self.console.write(f"{_INDENT}{line}\n" if line else "\n", Color.DARK_YELLOW)
        self.console.flush()
        self._wait_for_key()

    def show_team(self) -> None:
        self.console.clear()
        write = self.console.write
        write(f"{_INDENT}*\n", Color.CYAN)
        write(f"{_INDENT}*                  GAME TEAM                *\n", Color.CYAN)
        write(f"{_INDENT}*                Pixel Pioneers             *\n", Color.CYAN)
        write(f"{_INDENT}*\n", Color.CYAN)
        write(f"{_INDENT}             Let the Games Begin!            \n", Color.PINK)
        write(f"{_INDENT}            Press any key to exit!\n", Color.PINK)
        self.console.flush()
        self._wait_for_key()

    def run_menu_choice(self, choice) -> bool:
        """Carry out one menu choice; return False once the player chose to exit."""
        choice = _parse_choice(choice) if choice is not None else None
        if choice == 1:
            while not self.game_over:
                self.tick()
            self.console.clear()
        elif choice == 2:
            self.show_high_score()
        elif choice == 3:
            self.console.write("Replaying game...\n")
            self.reset()
        elif choice == 4:
            self.show_instructions()
        elif choice == 5:
            self.show_team()
        elif choice == 6:
            self.console.write("Exiting Game\n")
            return False
        else:
            self.console.write("Invalid choice. Please try again.\n")
        return True

    def start(self, choices: Iterable) -> None:
        """Show the menu and act on each choice until exit or choices run out."""
        self.game_over = False
        pending = iter(choices)
        while True:
            self.display_menu()
            try:
                choice = next(pending)
            except StopIteration:
                return
            if not self.run_menu_choice(choice):
                return


def _typed_choices(term, console: Console) -> Iterator[str]:
    """Yield lines typed on the terminal, echoing them as they are typed."""
    while True:
        text = ""
        while True:
            stroke = term.inkey()
            if stroke.code == term.KEY_ENTER or str(stroke) in ("\n", "\r"):
                break
            if stroke.code in (term.KEY_BACKSPACE, term.KEY_DELETE):
                if text:
                    text = text[:-1]
                    console.write("\b \b")
            elif not stroke.is_sequence and str(stroke):
                text += str(stroke)
                console.write(str(stroke))
            console.flush()
        console.write("\n")
        yield text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="nyanburger", description="Cheeseburger vs. Nyan Cat")
    parser.add_argument("--highscore", default=DEFAULT_HIGHSCORE_PATH, help="high score file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    from blessed import Terminal

    term = Terminal()
    with term.cbreak(), term.hidden_cursor():
        console = Console(sys.stdout, terminal_keys(term))
        game = Game(console, random.Random(args.seed), args.highscore)
        game.start(_typed_choices(term, console))
        console.write("Press any key to continue . . .")
        console.flush()
        term.inkey()
    console.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())