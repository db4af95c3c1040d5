"""
Client application shell: session banners, navigation and the routed view.
"""

from __future__ import annotations

from typing import Callable, Optional

from frontend.api import ApiClient
from frontend.router import Router
from frontend.session import SessionProvider, SessionState
from frontend.views import Footer, HomeView, Nav, SignupView


class App:
    def __init__(
        self,
        api: ApiClient,
        session: SessionProvider | None = None,
        on_render: Optional[Callable[[str], None]] = None,
    ):
        self.api = api
        self.session = session or SessionProvider()
        self.on_render = on_render
        self.nav = Nav()
        self.footer = Footer()
        self.router = Router(
            {
                "/": lambda: HomeView(self.api, on_change=self.refresh),
                "/signup": SignupView,
            }
        )
        self._unsubscribe = self.session.subscribe(self._on_session_change)

    def _on_session_change(self, state: SessionState) -> None:
        self.refresh()

    def navigate(self, path: str):
        view = self.router.navigate(path)
        self.refresh()
        return view

    def refresh(self) -> None:
        if self.on_render:
            self.on_render(self.render())

    def render(self) -> str:
        parts = []
        if self.session.loading:
            parts.append("Loading…")
        if self.session.user is not None:
            parts.append("Welcome!")
        parts.append(self.nav.render())
        view_text = self.router.render()
        if view_text:
            parts.append(view_text)
        parts.append(self.footer.render())
        return "\n".join(parts)

    def close(self) -> None:
        self.router.unmount()
        self._unsubscribe()
