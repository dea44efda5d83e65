"""
Light/dark presentation mode.

ThemeController is the only writer of the theme class in the
PresentationScope. The style layer reads the scope to pick its CSS.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class ThemeMode(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def css_class(self) -> str:
        return self.value


class PresentationScope:
    """Session-wide class list observed by the renderer"""

    def __init__(self, classes=()):
        self._classes = []
        for name in classes:
            self.add_class(name)

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(self._classes)

    def has_class(self, name: str) -> bool:
        return name in self._classes

    def add_class(self, name: str):
        if name not in self._classes:
            self._classes.append(name)

    def remove_class(self, name: str):
        if name in self._classes:
            self._classes.remove(name)


class ThemeController:
    """
    Owns the ThemeMode of a session.

    Exactly one theme class is present in the scope at any time.
    """

    def __init__(self, scope: Optional[PresentationScope] = None):
        self._scope = scope if scope is not None else PresentationScope()
        self._mode = ThemeMode.LIGHT
        self._apply()

    @property
    def scope(self) -> PresentationScope:
        return self._scope

    def current(self) -> ThemeMode:
        return self._mode

    def toggle(self) -> ThemeMode:
        self._mode = ThemeMode.DARK if self._mode is ThemeMode.LIGHT else ThemeMode.LIGHT
        self._apply()
        logger.debug("🎨 Theme switched to %s", self._mode.value)
        return self._mode

    def toggle_label(self) -> str:
        if self._mode is ThemeMode.DARK:
            return "Switch to light mode"
        return "Switch to dark mode"

    def _apply(self):
        for mode in ThemeMode:
            if mode is not self._mode:
                self._scope.remove_class(mode.css_class)
        self._scope.add_class(self._mode.css_class)
