"""
Session context shared by every view of the client application.

The provider owns a single ``SessionState`` for the lifetime of the app and
is handed to the app shell and views explicitly. Listeners subscribed to the
provider are called after every state change so they can re-render.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

SessionListener = Callable[["SessionState"], None]


@dataclass(frozen=True)
class SessionState:
    user: Optional[Any] = None
    users: Optional[Any] = None
    loading: bool = False


class SessionProvider:
    """Holds the current user, a user list and a loading flag."""

    def __init__(self, initial: SessionState | None = None):
        self._state = initial or SessionState()
        self._listeners: list[SessionListener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def user(self) -> Optional[Any]:
        return self._state.user

    @property
    def users(self) -> Optional[Any]:
        return self._state.users

    @property
    def loading(self) -> bool:
        return self._state.loading

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes: Any) -> None:
        with self._lock:
            self._state = replace(self._state, **changes)
            state = self._state
            listeners = list(self._listeners)
        for listener in listeners:
            listener(state)

    def set_user(self, user: Optional[Any]) -> None:
        self._update(user=user)

    def set_users(self, users: Optional[Any]) -> None:
        self._update(users=users)

    def login(self, user_data: Any) -> None:
        """Store ``user_data`` as the current user. Accepts any value."""
        self._update(loading=True)
        self._update(user=user_data)
        self._update(loading=False)

    def logout(self) -> None:
        self._update(user=None)
