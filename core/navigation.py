# core/navigation.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Protocol
import asyncio
import logging

from slugify import slugify

from .constants import SCROLL_DURATION_S, SCROLL_FRAME_INTERVAL_S
from .errors import NavigationTargetMissing

logger = logging.getLogger(__name__)

Easing = Callable[[float], float]


def ease_in_out(t: float) -> float:
    """Cubic ease-in-out. Monotonic on [0, 1] with f(0) == 0 and f(1) == 1."""
    t = min(max(t, 0.0), 1.0)
    if t < 0.5:
        return 4 * t * t * t
    return 1 - ((-2 * t + 2) ** 3) / 2


@dataclass(frozen=True)
class Anchor:
    """A section's position in the scrollable page."""

    key: str
    offset: float = 0.0

    @classmethod
    def for_section(cls, name: str, offset: float = 0.0) -> Anchor:
        return cls(key=section_key(name), offset=offset)


def section_key(name: str) -> str:
    """Stable DOM id for a section name, e.g. 'About' -> 'section-about'."""
    return f"section-{slugify(name)}"


class SectionRegistry:
    """
    Arena of section anchors keyed by section name.

    Anchors are recreated on every full layout pass, so registration is an
    overwrite and `sync` replaces the whole arena at once.
    """

    def __init__(self, anchors: Optional[Mapping[str, Anchor]] = None) -> None:
        self._anchors: Dict[str, Anchor] = dict(anchors or {})

    def register(self, name: str, anchor: Anchor) -> None:
        if not name:
            raise ValueError("Section name must not be empty")
        self._anchors[name] = anchor

    def sync(self, anchors: Mapping[str, Anchor]) -> None:
        """Replaces every anchor with the ones produced by the latest layout pass."""
        self._anchors = {}
        for name, anchor in anchors.items():
            self.register(name, anchor)
        logger.debug("Section registry synced: %s", ", ".join(self._anchors))

    def resolve(self, name: str) -> Anchor:
        try:
            return self._anchors[name]
        except KeyError:
            raise NavigationTargetMissing(name) from None

    @property
    def names(self) -> List[str]:
        return list(self._anchors)

    def __contains__(self, name: object) -> bool:
        return name in self._anchors

    def __len__(self) -> int:
        return len(self._anchors)


class ScrollDriver(Protocol):
    """Something that can animate the page towards an anchor, one transition at a time."""

    def start(self, anchor: Anchor, duration: float, easing: Easing) -> None: ...

    def cancel(self) -> None: ...


class Navigator:
    """Maps section names to animated scroll transitions. The latest request always wins."""

    def __init__(
        self,
        registry: SectionRegistry,
        driver: ScrollDriver,
        duration: float = SCROLL_DURATION_S,
        easing: Easing = ease_in_out,
    ) -> None:
        self.registry = registry
        self.driver = driver
        self.duration = duration
        self.easing = easing

    def scroll_to(self, name: str) -> Anchor:
        """
        Starts scrolling to `name`, replacing any transition still in flight.
        Raises NavigationTargetMissing (leaving the page untouched) for unknown names.
        """
        anchor = self.registry.resolve(name)
        self.driver.cancel()
        self.driver.start(anchor, self.duration, self.easing)
        logger.info("Scrolling to section '%s' (%s)", name, anchor.key)
        return anchor

    def request(self, name: str) -> bool:
        """UI entry point: like `scroll_to`, but a missing target is logged and dropped."""
        try:
            self.scroll_to(name)
        except NavigationTargetMissing as e:
            logger.warning("Navigation dropped: %s", e)
            return False
        return True


class AnimatedViewport:
    """
    In-process scroll driver: animates `offset` with an asyncio task.

    `start` must be called from inside a running event loop. The section's
    top edge is aligned with the viewport's top edge, clamped to the
    scrollable extent when `max_offset` is known.
    """

    def __init__(
        self,
        offset: float = 0.0,
        max_offset: Optional[float] = None,
        frame_interval: float = SCROLL_FRAME_INTERVAL_S,
    ) -> None:
        self.offset = offset
        self.max_offset = max_offset
        self.frame_interval = frame_interval
        self._task: Optional[asyncio.Task] = None

    @property
    def animating(self) -> bool:
        return self._task is not None and not self._task.done()

    def target_for(self, anchor: Anchor) -> float:
        target = max(anchor.offset, 0.0)
        if self.max_offset is not None:
            target = min(target, self.max_offset)
        return target

    def start(self, anchor: Anchor, duration: float, easing: Easing) -> None:
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(
            self._animate(self.offset, self.target_for(anchor), duration, easing)
        )

    def cancel(self) -> None:
        if self.animating:
            self._task.cancel()

    async def settle(self) -> None:
        """Waits for the current transition (if any) to finish or be cancelled."""
        if self._task is not None:
            await asyncio.wait({self._task})

    async def _animate(self, start: float, target: float, duration: float, easing: Easing) -> None:
        loop = asyncio.get_running_loop()
        began = loop.time()
        while True:
            elapsed = loop.time() - began
            progress = 1.0 if duration <= 0 else min(elapsed / duration, 1.0)
            if progress >= 1.0:
                break
            self.offset = start + (target - start) * easing(progress)
            await asyncio.sleep(self.frame_interval)
        self.offset = target


def anchors_for(names: Iterable[str], offsets: Optional[Mapping[str, float]] = None) -> Dict[str, Anchor]:
    """Builds one anchor per section name, using measured offsets where available."""
    offsets = offsets or {}
    return {name: Anchor.for_section(name, offsets.get(name, 0.0)) for name in names}
