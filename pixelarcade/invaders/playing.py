"""The state in which the game is played."""

import pygame

from ..game import StateBase
from ..gui.button import Button
from ..gui.stack_menu import StackMenu
from ..gui.widget import Text
from ..resources import resources
from .animation_renderer import draw_region
from .collidable import INVADERS_HEIGHT, INVADERS_WIDTH
from .highscores import StateHighscores, highest_score
from .player import Player
from .world import World

_LIFE_FRAME = (0, 0, 11, 8)


def _mouse_pos(event):
    pos = getattr(event, "pos", None)
    if pos is not None:
        return pos
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return (0, 0)


class ScoreDisplay:
    """A score with a caption, centred on a horizontal position."""

    def __init__(self, centre_x, text):
        self.text = text
        self.centre_x = centre_x
        self.current_score = 0
        self.label = Text()
        self.label.outline_thickness = 0
        self._update_display()

    def update(self, new_score):
        """Show a new score."""
        self.current_score = new_score
        self._update_display()

    def _update_display(self):
        self.label.string = f"{self.text}   {self.current_score}"
        self.label.position = (self.centre_x - self.label.bounds().width / 2, 15)

    def draw(self, surface):
        self.label.render(surface)


class LifeDisplay:
    """Shows how many lives the player has left as small cannons."""

    def __init__(self):
        self.stamp_size = (Player.WIDTH // 2, Player.WIDTH // 2)
        self.texture = resources().textures.get("si/player")
        self.label = Text("LIVES")
        self.label.position = (INVADERS_WIDTH - Player.WIDTH * 5, 10)
        self.label.outline_thickness = 0

    def stamp_positions(self, lives):
        """Where each life stamp is drawn."""
        bounds = self.label.bounds()
        x, y = self.label.position
        x_origin = x + bounds.width + 10
        y_origin = y + bounds.height / 2
        return [
            (x_origin + i * Player.WIDTH // 2 + i * 10, y_origin) for i in range(max(lives, 0))
        ]

    def draw(self, surface, lives):
        self.label.render(surface)
        for position in self.stamp_positions(lives):
            draw_region(surface, self.texture, _LIFE_FRAME, position, self.stamp_size)


class StatePlaying(StateBase):
    """Where the gameplay happens; offers a menu once the game is over."""

    def __init__(self, game):
        super().__init__(game, "Playing the game", None)
        self._game = game
        self.world = World()
        self.score = 0
        self.is_game_over = False

        self.game_over_menu = StackMenu.centered(INVADERS_WIDTH, INVADERS_HEIGHT // 3)
        self.game_over_menu.set_title("GAME  OVER")
        self.game_over_menu.add_widget(Button(text="Main Menu\n", on_click=game.pop_state))
        self.game_over_menu.add_widget(Button(text="Submit Score", on_click=self._submit))
        self.game_over_menu.add_widget(Button(text="Exit game\n", on_click=game.exit_game))

        self.life_display = LifeDisplay()
        self.score_display = ScoreDisplay(INVADERS_WIDTH / 8, "Score")
        self.highest_score_display = ScoreDisplay(INVADERS_WIDTH / 2, "HighScore")
        self.highest_score_display.update(highest_score())

    def _submit(self):
        self._game.change_state(StateHighscores(self._game, self.score))

    def handle_event(self, event):
        if self.is_game_over:
            self.game_over_menu.handle_event(event, _mouse_pos(event))

    def handle_input(self):
        self.world.input()

    def update(self, delta_time):
        if not self.is_game_over:
            self.score += self.world.update(delta_time)
            self.score_display.update(self.score)
            if self.score > self.highest_score_display.current_score:
                self.highest_score_display.update(self.score)
        self.is_game_over = self.world.is_game_over()

    def render(self, surface):
        self.world.draw(surface)
        self.life_display.draw(surface, self.world.player.lives)
        self.score_display.draw(surface)
        self.highest_score_display.draw(surface)
        if self.is_game_over:
            self.game_over_menu.render(surface)