"""Drawing many entities that share one two-frame animation."""

import pygame

_WHITE = (255, 255, 255)


def draw_region(surface, sheet, region, position, size):
    """Draw ``region`` of ``sheet`` scaled to ``size`` at ``position``.

    Without a sheet a plain white rectangle is drawn.
    """
    x, y = position
    width, height = size
    target = pygame.Rect(round(x), round(y), round(width), round(height))
    if sheet is None:
        pygame.draw.rect(surface, _WHITE, target)
        return
    area = pygame.Rect(region).clip(sheet.get_rect())
    if area.width == 0 or area.height == 0:
        return
    image = pygame.transform.scale(sheet.subsurface(area), target.size)
    surface.blit(image, target.topleft)


class AnimationRenderer:
    """Sprite sheet with one row per entity kind and two frames per row."""

    def __init__(self, frame_width, frame_height, entity_width, entity_height, sprite_sheet):
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.entity_size = (entity_width, entity_height)
        self.sprite_sheet = sprite_sheet
        self.current_frame = 0

    def next_frame(self):
        """Advance every entity to the next frame."""
        self.current_frame += 1

    def texture_rect(self, kind):
        """The sheet area of the current frame for an entity kind."""
        left = (self.current_frame % 2) * self.frame_width
        top = int(kind) * self.frame_height
        return (left, top, self.frame_width, self.frame_height)

    def render_entity(self, surface, kind, position):
        """Draw one entity of the given kind at ``position``."""
        draw_region(surface, self.sprite_sheet, self.texture_rect(kind), position, self.entity_size)