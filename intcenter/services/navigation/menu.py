"""
Dropdown menu state and scroll locking.

A dropdown is either closed or open for exactly one category. Opening the
mobile menu locks page scrolling through a ``ScrollLock`` handle that puts
the previous ``overflow`` style back exactly once.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Self

from intcenter.utils.logger import logger


class MenuEvent(str, Enum):
    CLICK = "click"
    HOVER = "hover"
    HOVER_LEAVE_TIMEOUT = "hover_leave_timeout"
    ESCAPE = "escape"
    OUTSIDE_CLICK = "outside_click"


_TARGETED_EVENTS = frozenset({MenuEvent.CLICK, MenuEvent.HOVER})


@dataclass(frozen=True, slots=True)
class MenuState:
    """``open_for is None`` is the closed state."""

    open_for: str | None = None

    @property
    def is_open(self) -> bool:
        return self.open_for is not None

    @classmethod
    def closed(cls) -> Self:
        return cls()

    @classmethod
    def opened(cls, category_id: str) -> Self:
        return cls(open_for=category_id)


def transition(state: MenuState, event: MenuEvent, category_id: str | None = None) -> MenuState:
    """Next menu state after ``event``.

    Raises:
        ValueError: If a click or hover carries no category
    """
    if event in _TARGETED_EVENTS:
        if not category_id:
            raise ValueError(f"{event.value} requires a category id")
        if event == MenuEvent.CLICK and state.open_for == category_id:
            return MenuState.closed()
        return MenuState.opened(category_id)
    return MenuState.closed()


class ScrollLock:
    """Scoped scroll lock over a mutable style mapping.

    Example:
        ```python
        with ScrollLock(body_style):
            ...  # body_style["overflow"] == "hidden"
        ```
    """

    def __init__(self, style: MutableMapping[str, str]) -> None:
        self._style = style
        self._saved: str | None = None
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def acquire(self) -> Self:
        if self._held:
            logger.warning("Scroll lock already held")
            return self
        self._saved = self._style.get("overflow")
        self._style["overflow"] = "hidden"
        self._held = True
        return self

    def release(self) -> None:
        if not self._held:
            return
        if self._saved is None:
            self._style.pop("overflow", None)
        else:
            self._style["overflow"] = self._saved
        self._held = False

    def __enter__(self) -> Self:
        return self.acquire()

    def __exit__(self, *args: object) -> None:
        self.release()
