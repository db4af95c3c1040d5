"""
Views rendered by the client router.

Each view is mounted when its route becomes active and unmounted when the
router leaves it. ``render`` returns the view's current text.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol

from frontend.api import ApiClient
from frontend.errors import ApiError

logger = logging.getLogger(__name__)

USERS_PATH = "/users"


class View(Protocol):
    def mount(self) -> Optional[threading.Thread]:
        ...

    def unmount(self) -> None:
        ...

    def render(self) -> str:
        ...


class CancellationToken:
    """Marks the end of the scope that issued a request."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class HomeView:
    """
    Loads the user list once per mount and shows how many users came back.

    A failed request is logged and the view keeps showing its loading text.
    A response that arrives after ``unmount`` is dropped.
    """

    def __init__(
        self, api: ApiClient, on_change: Optional[Callable[[], None]] = None
    ):
        self.api = api
        self.on_change = on_change
        self.users: Optional[list] = None
        self._token: Optional[CancellationToken] = None
        self._lock = threading.Lock()

    def mount(self) -> threading.Thread:
        self._token = CancellationToken()
        thread = threading.Thread(
            target=self.fetch_users, args=(self._token,), daemon=True
        )
        thread.start()
        return thread

    def unmount(self) -> None:
        with self._lock:
            if self._token:
                self._token.cancel()

    def fetch_users(self, token: CancellationToken) -> None:
        try:
            data = self.api.get(USERS_PATH)
        except ApiError as exc:
            logger.error("Failed to fetch users: %s", exc)
            return

        if not isinstance(data, list):
            logger.error(
                "Failed to fetch users: expected a list, got %s", type(data).__name__
            )
            return

        # unmount() cancels under the same lock.
        with self._lock:
            if token.cancelled:
                logger.debug("Discarding users response for unmounted view")
                return
            self.users = data
        logger.debug("Fetched users: %s", data)
        if self.on_change:
            self.on_change()

    def render(self) -> str:
        lines = ["Home"]
        if self.users is not None:
            lines.append(f"Users loaded: {len(self.users)}")
        else:
            lines.append("Loading users…")
        return "\n".join(lines)


class SignupView:
    def mount(self) -> None:
        return None

    def unmount(self) -> None:
        pass

    def render(self) -> str:
        return "Sign up"


class Nav:
    LINKS = (("Home", "/"), ("Sign up", "/signup"))

    def render(self) -> str:
        return " | ".join(f"{label} ({path})" for label, path in self.LINKS)


class Footer:
    def render(self) -> str:
        return "MERN TypeScript starter"
