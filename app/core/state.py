"""
In-memory, per-user dashboard state.

Each user owns one state object per surface (student dashboard, registration form,
faculty dashboard, ...). State is created on first access and is only mutated from
request handlers running on the event loop.
"""

from typing import Callable, Dict, Generic, List, TypeVar

T = TypeVar("T")

_registries: List["StateRegistry"] = []


class StateRegistry(Generic[T]):
    def __init__(self, factory: Callable[[str], T]) -> None:
        self._factory = factory
        self._states: Dict[str, T] = {}
        _registries.append(self)

    def get(self, user_id: str) -> T:
        state = self._states.get(user_id)
        if state is None:
            state = self._factory(user_id)
            self._states[user_id] = state
        return state

    def reset(self, user_id: str) -> T:
        """Drop the user's state and build a fresh one."""
        self._states.pop(user_id, None)
        return self.get(user_id)

    def values(self) -> List[T]:
        return list(self._states.values())

    def clear(self) -> None:
        self._states.clear()


def clear_all_state() -> None:
    """Forget every user's state (used on shutdown and in tests)."""
    for registry in _registries:
        registry.clear()
