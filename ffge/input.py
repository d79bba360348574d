"""Per-frame keyboard state for both players."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Collection, Iterator, Mapping

BUTTONS: tuple[str, ...] = (
    "left",
    "right",
    "up",
    "down",
    "bt1",
    "bt2",
    "bt3",
    "bt4",
    "bt5",
    "bt6",
    "select",
    "start",
)

P1_BINDINGS: Mapping[str, str] = MappingProxyType(
    {
        "left": "left",
        "right": "right",
        "up": "up",
        "down": "down",
        "bt1": "z",
        "bt2": "x",
        "bt3": "c",
        "bt4": "v",
        "bt5": "b",
        "bt6": "n",
        "select": "space",
        "start": "return",
    }
)

P2_BINDINGS: Mapping[str, str] = MappingProxyType(
    {
        "left": "a",
        "right": "d",
        "up": "w",
        "down": "s",
        "bt1": "u",
        "bt2": "i",
        "bt3": "o",
        "bt4": "j",
        "bt5": "k",
        "bt6": "l",
        "select": "tab",
        "start": "backspace",
    }
)


@dataclass
class KeyState:
    """Edge-aware state of a single key."""

    pressed: bool = False
    held: bool = False
    released: bool = False

    @property
    def status(self) -> bool:
        """True while the key is down."""
        return self.held

    def update(self, down: bool) -> None:
        """Advance one frame with the key's current up/down state."""
        was_held = self.held
        self.held = bool(down)
        self.pressed = self.held and not was_held
        self.released = was_held and not self.held

    def reset(self) -> None:
        """Return to the all-released state."""
        self.pressed = self.held = self.released = False


class PlayerControls:
    """The set of buttons of one player, each bound to a key name."""

    def __init__(self, bindings: Mapping[str, str]) -> None:
        missing = set(BUTTONS) - set(bindings)
        if missing:
            raise ValueError(f"missing bindings for: {', '.join(sorted(missing))}")
        self.bindings: Mapping[str, str] = MappingProxyType(dict(bindings))
        self._states = {button: KeyState() for button in BUTTONS}

    def __getitem__(self, button: str) -> KeyState:
        return self._states[button]

    def __iter__(self) -> Iterator[str]:
        return iter(BUTTONS)

    def __len__(self) -> int:
        return len(self._states)

    def update(self, pressed_keys: Collection[str]) -> None:
        """Advance every button by one frame from the set of keys currently down."""
        for button, state in self._states.items():
            state.update(self.bindings[button] in pressed_keys)

    def reset(self) -> None:
        """Clear every button."""
        for state in self._states.values():
            state.reset()


class InputManager:
    """Input state for player 1 and player 2."""

    def __init__(
        self,
        p1_bindings: Mapping[str, str] = P1_BINDINGS,
        p2_bindings: Mapping[str, str] = P2_BINDINGS,
    ) -> None:
        self.p1 = PlayerControls(p1_bindings)
        self.p2 = PlayerControls(p2_bindings)

    @property
    def players(self) -> tuple[PlayerControls, PlayerControls]:
        return (self.p1, self.p2)

    def update(self, pressed_keys: Collection[str]) -> None:
        """Advance both players by one frame."""
        for controls in self.players:
            controls.update(pressed_keys)

    def reset(self) -> None:
        """Clear both players' buttons."""
        for controls in self.players:
            controls.reset()