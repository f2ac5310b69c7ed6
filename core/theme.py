# core/theme.py

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional
import logging

from .constants import DEFAULT_THEME

logger = logging.getLogger(__name__)


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> ThemeMode:
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT

    @classmethod
    def parse(cls, value: str, default: Optional[ThemeMode] = None) -> ThemeMode:
        """Parses a mode name (case-insensitive), falling back to `default` or the app default."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return default or cls(DEFAULT_THEME)


@dataclass(frozen=True)
class Palette:
    primary: str
    secondary: str
    background: str
    card: str
    text: str
    muted_text: str


PALETTES: Dict[ThemeMode, Palette] = {
    # Teal family on white.
    ThemeMode.LIGHT: Palette(
        primary="#009688",
        secondary="#00BFA5",
        background="#FFFFFF",
        card="#FAFAFA",
        text="#1F1F1F",
        muted_text="#5F6368",
    ),
    # Vibrant blue on near-black.
    ThemeMode.DARK: Palette(
        primary="#2196F3",
        secondary="#2979FF",
        background="#121212",
        card="#1E1E1E",
        text="#FFFFFF",
        muted_text="#FFFFFF99",
    ),
}

ThemeObserver = Callable[["ThemeMode"], None]


class ThemeController:
    """
    Owns the single active theme mode and fans changes out to observers.

    Built once per session and handed to every view that reads the theme.
    Observers are called synchronously, in subscription order, before
    `toggle()` returns.
    """

    def __init__(self, mode: ThemeMode = ThemeMode(DEFAULT_THEME)) -> None:
        self._mode = mode
        self._observers: List[ThemeObserver] = []

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    @property
    def palette(self) -> Palette:
        return PALETTES[self._mode]

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def toggle(self) -> ThemeMode:
        """Flips LIGHT <-> DARK and notifies every observer."""
        self._mode = self._mode.opposite
        logger.info("Theme toggled to %s", self._mode.value)
        self._notify()
        return self._mode

    def set_mode(self, mode: ThemeMode) -> None:
        if mode is self._mode:
            return
        self._mode = mode
        self._notify()

    def subscribe(self, observer: ThemeObserver) -> Callable[[], None]:
        """Registers an observer and returns a callable that removes it again."""
        self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: ThemeObserver) -> None:
        # Unsubscribing twice is harmless; views may unmount more than once.
        if observer in self._observers:
            self._observers.remove(observer)

    @contextmanager
    def observing(self, observer: ThemeObserver) -> Iterator[ThemeController]:
        """Keeps `observer` subscribed for the duration of a `with` block."""
        unsubscribe = self.subscribe(observer)
        try:
            yield self
        finally:
            unsubscribe()

    def _notify(self) -> None:
        # Snapshot so observers may unsubscribe while being notified.
        for observer in list(self._observers):
            try:
                observer(self._mode)
            except Exception:
                logger.error("Theme observer %r failed", observer, exc_info=True)
