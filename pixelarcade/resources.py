"""Lazy loading and caching of fonts, textures and sounds."""

from functools import lru_cache
from pathlib import Path

import pygame

_LOAD_ERRORS = (OSError, RuntimeError)


class ResourceManager:
    """Loads named resources from ``<root>/<folder>/<name>.<extension>`` on demand.

    A resource that fails to load is replaced by the folder's ``_fail_`` file,
    or by ``None`` when that cannot be loaded either.
    """

    def __init__(self, folder, extension, loader, root="res"):
        self._folder = Path(root) / folder
        self._extension = f".{extension}"
        self._loader = loader
        self._resources = {}

    def get(self, name):
        """Return the resource, loading it the first time it is asked for."""
        if not self.exists(name):
            self.add(name)
        return self._resources[name]

    def exists(self, name):
        """True if the resource is already loaded."""
        return name in self._resources

    def add(self, name):
        """Load a resource, falling back to the ``_fail_`` resource."""
        try:
            resource = self._loader(self.full_filename(name))
        except _LOAD_ERRORS:
            try:
                resource = self._loader(self.full_filename("_fail_"))
            except _LOAD_ERRORS:
                resource = None
        self._resources.setdefault(name, resource)

    def full_filename(self, name):
        """Path of the file holding the named resource."""
        return self._folder / f"{name}{self._extension}"


def _load_font(path):
    if not Path(path).is_file():
        raise FileNotFoundError(path)
    return Path(path)


def _load_texture(path):
    return pygame.image.load(str(path))


def _load_sound(path):
    return pygame.mixer.Sound(str(path))


class ResourceHolder:
    """All resource managers of the games.

    Fonts are given as file paths, since their size is chosen when text is drawn.
    """

    def __init__(self, root="res"):
        self.fonts = ResourceManager("fonts", "ttf", _load_font, root)
        self.textures = ResourceManager("txrs", "png", _load_texture, root)
        self.sound_buffers = ResourceManager("sfx", "ogg", _load_sound, root)


@lru_cache(maxsize=None)
def resources():
    """The shared resource holder."""
    return ResourceHolder()