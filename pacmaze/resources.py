"""Cache of loaded images and sounds, keyed by file path."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

import pygame


class ResourceError(Exception):
    """A resource file could not be loaded."""


def _load_image(path: str) -> Any:
    try:
        return pygame.image.load(path)
    except (FileNotFoundError, pygame.error) as exc:
        raise ResourceError(f"{path} is missing") from exc


def _load_sound(path: str) -> Any:
    try:
        return pygame.mixer.Sound(path)
    except (FileNotFoundError, pygame.error) as exc:
        raise ResourceError(f"{path} is missing") from exc


class ResourceManager:
    """Loads each image sheet and sound once and hands out the cached objects."""

    def __init__(
        self,
        image_loader: Callable[[str], Any] = _load_image,
        sound_loader: Callable[[str], Any] = _load_sound,
    ) -> None:
        self._image_loader = image_loader
        self._sound_loader = sound_loader
        self._images: dict[str, tuple[Any, ...]] = {}
        self._sounds: dict[str, Any] = {}

    @property
    def image_paths(self) -> frozenset[str]:
        """Paths of the images currently cached."""
        return frozenset(self._images)

    @property
    def sound_paths(self) -> frozenset[str]:
        """Paths of the sounds currently cached."""
        return frozenset(self._sounds)

    def get_images(
        self,
        file_name: str | Path,
        all_num: int = 1,
        num_x: int = 1,
        num_y: int = 1,
        size_x: int = 0,
        size_y: int = 0,
    ) -> tuple[Any, ...]:
        """Images from a file, split into ``all_num`` cells of ``size_x`` by ``size_y``.

        Cells are taken left to right, then top to bottom, ``num_x`` per row.
        With ``all_num`` of 1 the whole image is the single entry.
        """
        key = str(file_name)
        if key not in self._images:
            sheet = self._image_loader(key)
            if all_num == 1:
                self._images[key] = (sheet,)
            else:
                self._images[key] = self._split(key, sheet, all_num, num_x, num_y, size_x, size_y)
        return self._images[key]

    @staticmethod
    def _split(
        key: str,
        sheet: Any,
        all_num: int,
        num_x: int,
        num_y: int,
        size_x: int,
        size_y: int,
    ) -> tuple[Any, ...]:
        if all_num <= 0 or num_x <= 0 or num_y <= 0 or all_num > num_x * num_y:
            raise ResourceError(f"{key} cannot be divided into {all_num} images")
        try:
            return tuple(
                sheet.subsurface(
                    pygame.Rect(
                        (index % num_x) * size_x,
                        (index // num_x) * size_y,
                        size_x,
                        size_y,
                    )
                )
                for index in range(all_num)
            )
        except ValueError as exc:
            raise ResourceError(f"{key} is too small to divide") from exc

    def get_sound(self, file_path: str | Path) -> Any:
        """The sound loaded from ``file_path``."""
        key = str(file_path)
        if key not in self._sounds:
            self._sounds[key] = self._sound_loader(key)
        return self._sounds[key]

    def unload_images(self) -> None:
        """Forget every cached image."""
        self._images.clear()

    def unload_sounds(self) -> None:
        """Stop and forget every cached sound."""
        for sound in self._sounds.values():
            stop = getattr(sound, "stop", None)
            if callable(stop):
                stop()
        self._sounds.clear()


@lru_cache(maxsize=1)
def get_resource_manager() -> ResourceManager:
    """The shared resource manager, created on first use."""
    return ResourceManager()


def reset_resource_manager() -> None:
    """Release the shared manager's resources and drop it."""
    if get_resource_manager.cache_info().currsize:
        manager = get_resource_manager()
        manager.unload_images()
        manager.unload_sounds()
    get_resource_manager.cache_clear()