"""A stack of game states whose changes take effect after each update."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from tilerunner.constants import PendingChange


class State(ABC):
    """One screen of the game: it receives events, updates and draws itself."""

    @abstractmethod
    def handle_event(self, event: Any) -> None:
        """React to an input event."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the state."""

    @abstractmethod
    def handle_window_resize(self, new_size: tuple[int, int]) -> None:
        """Adapt to a new window size."""


class StateManager:
    """Runs the top state, draws all states, and queues one stack change at a time."""

    def __init__(self) -> None:
        self._states: list[State] = []
        self._pending_state: State | None = None
        self._pending_change = PendingChange.NONE

    @property
    def states(self) -> tuple[State, ...]:
        """The stack, bottom first."""
        return tuple(self._states)

    def handle_event(self, event: Any) -> None:
        if self._states:
            self._states[-1].handle_event(event)

    def update(self, dt: float) -> None:
        """Update the top state, then apply any queued change."""
        if self._states:
            self._states[-1].update(dt)
        self._apply_pending_change()

    def render(self) -> None:
        for state in self._states:
            state.render()

    def handle_window_resize(self, new_size: tuple[int, int]) -> None:
        if self._states:
            self._states[-1].handle_window_resize(new_size)

    def push_state(self, state: State) -> None:
        self._pending_change = PendingChange.PUSH
        self._pending_state = state

    def pop_state(self) -> None:
        self._pending_change = PendingChange.POP

    def change_state(self, state: State) -> None:
        """Queue replacing the top state."""
        self._pending_change = PendingChange.CHANGE
        self._pending_state = state

    def replace_states(self, state: State) -> None:
        """Queue replacing the whole stack with one state."""
        self._pending_change = PendingChange.REPLACE
        self._pending_state = state

    def _apply_pending_change(self) -> None:
        change, state = self._pending_change, self._pending_state
        if change is PendingChange.NONE:
            return

        if change is PendingChange.PUSH:
            self._states.append(state)
        elif change is PendingChange.POP:
            if self._states:
                self._states.pop()
        elif change is PendingChange.CHANGE:
            if self._states:
                self._states.pop()
            self._states.append(state)
        elif change is PendingChange.REPLACE:
            self._states.clear()
            self._states.append(state)

        self._pending_change = PendingChange.NONE
        self._pending_state = None