"""Interfaces the puzzle core consumes from its rendering/input driver."""

from __future__ import annotations

from enum import Flag, auto
from typing import Protocol


class Button(Flag):
    NONE = 0
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PRIMARY = auto()
    ALTERNATE = auto()
    START = auto()


DIRECTIONS = Button.UP | Button.DOWN | Button.LEFT | Button.RIGHT
ACTIONS = Button.PRIMARY | Button.ALTERNATE


class Display(Protocol):
    """Two parallel tile layers addressed by screen tile coordinates."""

    def write_content(self, x: int, y: int, tile: int) -> None: ...

    def write_attribute(self, x: int, y: int, band: int) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def power_on(self) -> None: ...

    def power_off(self) -> None: ...


class InputSource(Protocol):
    """Per-tick snapshot of held buttons."""

    @property
    def closed(self) -> bool: ...

    def poll(self) -> Button: ...


class FrameClock(Protocol):
    def wait(self) -> None:
        """Block until the next display interval."""
        ...
