"""Command that asks which game to play and starts it."""

import argparse
from typing import NamedTuple

from .game import Game
from .invaders.main_menu import StateMainMenu
from .pong.main_menu import PongStateMainMenu


class _Choice(NamedTuple):
    title: str
    state: type


GAMES = (
    _Choice("Space Invaders", StateMainMenu),
    _Choice("Pong", PongStateMainMenu),
)
EXIT_OPTION = len(GAMES) + 1


def is_valid_choice(option):
    """True for a game's number or the exit option."""
    return 0 < option <= EXIT_OPTION


def _menu_text():
    lines = ["Which Game would you like to play?"]
    lines += [f"{number}. {choice.title}" for number, choice in enumerate(GAMES, start=1)]
    lines.append(f"{EXIT_OPTION}. Exit")
    return "\n".join(lines)


def _read_choice():
    """The chosen option, or None when input runs out."""
    while True:
        try:
            line = input()
        except EOFError:
            return None
        try:
            option = int(line.strip())
        except ValueError:
            option = 0
        if is_valid_choice(option):
            return option
        print(f"Invalid option, please pick a number between 1 and {EXIT_OPTION}")


def _play(state_class):
    print("\nTo choose another Game, simply close the window")
    game = Game()
    game.init_game(state_class)
    game.run()
    print()


def main(argv=None):
    """Offer the games until the player chooses to exit."""
    parser = argparse.ArgumentParser(prog="pixelarcade", description="A collection of small arcade games.")
    parser.parse_args(argv)
    while True:
        print(_menu_text())
        option = _read_choice()
        if option is None or option == EXIT_OPTION:
            return 0
        _play(GAMES[option - 1].state)


if __name__ == "__main__":
    raise SystemExit(main())