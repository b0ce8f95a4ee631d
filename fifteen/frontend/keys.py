"""Keyboard state shared by the windowed frontends."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping

from fifteen.backend.drivers import Button


def fold_buttons(held: Iterable[Hashable], mapping: Mapping[Hashable, Button]) -> Button:
    """Button set for the physical keys in *held*.

    Several keys may map to one button; the button stays set while any of
    them is down. Unmapped keys are ignored.
    """
    buttons = Button.NONE
    for key in held:
        buttons |= mapping.get(key, Button.NONE)
    return buttons
