"""
Exact-path router that owns the lifecycle of the active view.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, Optional

from frontend.views import View

ViewFactory = Callable[[], View]


class Router:
    def __init__(self, routes: Dict[str, ViewFactory]):
        self.routes = dict(routes)
        self.path: Optional[str] = None
        self.current: Optional[View] = None
        self.pending: Optional[threading.Thread] = None

    def navigate(self, path: str) -> Optional[View]:
        """Unmount the active view, then mount the one bound to ``path``."""
        self.unmount()
        self.path = path
        factory = self.routes.get(path)
        if factory is None:
            return None
        self.current = factory()
        self.pending = self.current.mount()
        return self.current

    def unmount(self) -> None:
        if self.current is not None:
            self.current.unmount()
        self.current = None
        self.pending = None

    def render(self) -> str:
        if self.current is None:
            return ""
        return self.current.render()
