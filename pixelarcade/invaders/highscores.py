"""The high-score table: its file format and the screen that shows it."""

import enum
import re
from pathlib import Path

import pygame

from ..game import StateBase
from ..gui.button import Button
from ..gui.stack_menu import StackMenu
from ..gui.textbox import TextBox, TextVar
from ..gui.widget import BLACK, GREEN, Rectangle, Text
from ..resources import resources
from .collidable import INVADERS_HEIGHT, INVADERS_WIDTH
from .starry_background import StarryBackground

SCORES_PATH = Path("res/space_invaders/scores.txt")
SHOWN_ENTRIES = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ENTRY_HEIGHT = 35
_ODD_ROW_COLOR = (50, 40, 50)


def _resolve(path):
    return SCORES_PATH if path is None else Path(path)


def _parse_score(token):
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"invalid score: {token!r}")
    return int(match.group(1))


def _tokens(path):
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return []
    tokens = text.split(",")
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def _sorted(scores):
    return sorted(scores, key=lambda entry: entry[1], reverse=True)


def load_scores(path=None):
    """Read ``name,score,`` pairs from the file, highest score first.

    A missing file holds no scores; a score that is not a number raises ValueError.
    """
    tokens = _tokens(_resolve(path))
    return _sorted((name, _parse_score(score)) for name, score in zip(tokens[0::2], tokens[1::2]))


def write_scores(path, scores):
    """Write the scores, highest first, and return them in that order."""
    ordered = _sorted(scores)
    target = _resolve(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("".join(f"{name},{score}," for name, score in ordered), encoding="utf-8")
    return ordered


def highest_score(path=None):
    """The score of the first entry in the file, or 0 when there is none."""
    tokens = _tokens(_resolve(path))
    if len(tokens) < 2 or tokens[1] == "":
        return 0
    return _parse_score(tokens[1])


def submit_score(path, name, score):
    """Add an entry to the file and return the resulting table."""
    scores = load_scores(path)
    scores.append((name, score))
    return write_scores(path, scores)


def _mouse_pos(event):
    pos = getattr(event, "pos", None)
    if pos is not None:
        return pos
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return (0, 0)


class HighscoreView(enum.Enum):
    SUBMITTING = enum.auto()
    VIEWING = enum.auto()


class EntryBox:
    """One row of the table: rank and name on the left, score on the right."""

    def __init__(self, position, name, score):
        y = 200 + position * (_ENTRY_HEIGHT - 2)
        width = INVADERS_WIDTH / 1.5
        self.background = Rectangle(INVADERS_WIDTH / 2 - width / 2, y, width, _ENTRY_HEIGHT)

        self.name_text = Text(f"{position}     {name}", _ENTRY_HEIGHT - 5)
        self.score_text = Text(str(score), _ENTRY_HEIGHT - 5)
        self.name_text.position = self.background.position
        bg_x, _ = self.background.position
        self.score_text.position = (bg_x + width - self.score_text.bounds().width - 10, y)

        self.background.outline_thickness = 2
        self.background.outline_color = GREEN
        self.background.fill_color = BLACK if position % 2 == 0 else _ODD_ROW_COLOR

    def draw(self, surface):
        self.background.render(surface)
        self.name_text.render(surface)
        self.score_text.render(surface)


class StateHighscores(StateBase):
    """Shows the best scores; given a score, first offers to submit it."""

    def __init__(self, game, score=None):
        super().__init__(game, "Highscores", None)
        self._game = game
        self.scores_path = SCORES_PATH
        self.submit_menu = StackMenu.centered(INVADERS_WIDTH, 100.0)
        self.highscore_menu = StackMenu.centered(INVADERS_WIDTH, INVADERS_HEIGHT - 100.0)
        self.background = StarryBackground()
        self.scores = []
        self.entry_boxes = []
        self.submit_name = TextVar()
        self.score_to_submit = 0

        self.banner = Rectangle(0, 0, INVADERS_WIDTH, 200)
        self.banner.texture = resources().textures.get("si/highscores")

        self._init_view_menu()
        self.view = HighscoreView.VIEWING
        self.active_menu = self.highscore_menu
        self._create_highscore_view()

        if score is not None:
            self._init_submit_menu()
            self.score_to_submit = score
            self.active_menu = self.submit_menu
            self.view = HighscoreView.SUBMITTING

    def _init_view_menu(self):
        self.scores = load_scores(self.scores_path)
        self.highscore_menu.add_widget(Button(text="Main Menu", on_click=self._game.pop_state))

    def _init_submit_menu(self):
        self.submit_menu.add_widget(TextBox(self.submit_name, "Click text box to enter name"))
        self.submit_menu.add_widget(Button(text="Submit Score", on_click=self._on_submit))
        self.submit_menu.add_widget(Button(text="View HighScores", on_click=self._on_view))

    def _on_submit(self):
        if self.submit_name.value:
            self.scores = submit_score(self.scores_path, self.submit_name.value, self.score_to_submit)
            self._switch_to_view_menu()

    def _on_view(self):
        self.scores = load_scores(self.scores_path)
        self._switch_to_view_menu()

    def _switch_to_view_menu(self):
        self.view = HighscoreView.VIEWING
        self.active_menu = self.highscore_menu
        self._create_highscore_view()

    def _create_highscore_view(self):
        self.scores = load_scores(self.scores_path)
        self.entry_boxes = [
            EntryBox(rank, name, score)
            for rank, (name, score) in enumerate(self.scores[:SHOWN_ENTRIES], start=1)
        ]

    def handle_event(self, event):
        self.active_menu.handle_event(event, _mouse_pos(event))

    def update(self, delta_time):
        self.background.update(delta_time)

    def render(self, surface):
        self.background.draw(surface)
        self.active_menu.render(surface)
        if self.view is HighscoreView.VIEWING:
            for entry in self.entry_boxes:
                entry.draw(surface)
            self.banner.render(surface)