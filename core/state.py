# core/state.py

from __future__ import annotations
from typing import Callable, List, Optional
import logging

import streamlit as st
from pydantic import BaseModel, ConfigDict, PrivateAttr

from .errors import LinkOpenFailed
from .links import LINK_FAILURE_MESSAGE, LinkDispatcher, Opener
from .navigation import Navigator, ScrollDriver, SectionRegistry
from .theme import ThemeController, ThemeMode

logger = logging.getLogger(__name__)

SESSION_KEY = "portfolio_state"


class AppState(BaseModel):
    """
    Session-scoped owner of the page's view state.
    Built once per browser session and passed explicitly to every render function.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    theme: ThemeController
    registry: SectionRegistry
    navigator: Navigator
    links: LinkDispatcher
    notices: List[str] = []

    _initial_section: Optional[str] = PrivateAttr(default=None)

    @classmethod
    def create(
        cls,
        driver: ScrollDriver,
        opener: Opener,
        theme: ThemeMode = ThemeMode.DARK,
        initial_section: Optional[str] = None,
    ) -> AppState:
        registry = SectionRegistry()
        state = cls(
            theme=ThemeController(theme),
            registry=registry,
            navigator=Navigator(registry, driver),
            links=LinkDispatcher(opener),
        )
        state._initial_section = initial_section or None
        return state

    @classmethod
    def from_streamlit(
        cls,
        driver_factory: Callable[[], ScrollDriver],
        opener_factory: Callable[[], Opener],
        default_theme: str,
    ) -> AppState:
        """
        Returns this session's state, creating it on the first script run.
        Priority for the starting theme: Query Param > site default.
        """
        state = st.session_state.get(SESSION_KEY)
        if state is None:
            theme = ThemeMode.parse(_get_query_param("theme"), default=ThemeMode.parse(default_theme))
            state = cls.create(
                driver_factory(),
                opener_factory(),
                theme=theme,
                initial_section=_get_query_param("section"),
            )
            state.theme.subscribe(_sync_theme_query_param)
            st.session_state[SESSION_KEY] = state
            logger.info("New session started with %s theme", theme.value)
        return state

    def apply_to_streamlit(self) -> None:
        """Writes the state that belongs in the URL back to the query parameters."""
        _set_query_param("theme", self.theme.mode.value)

    # --- Actions (wired to widget callbacks) ---

    def toggle_theme(self) -> None:
        self.theme.toggle()

    def go_to(self, name: str) -> bool:
        return self.navigator.request(name)

    def open_link(self, uri: str, failure_message: str = LINK_FAILURE_MESSAGE) -> bool:
        try:
            self.links.open(uri, failure_message)
        except LinkOpenFailed:
            self.notify(failure_message)
            return False
        return True

    def consume_initial_section(self) -> Optional[str]:
        """The section requested through ?section=..., returned once per session."""
        section, self._initial_section = self._initial_section, None
        return section

    # --- Transient notifications ---

    def notify(self, message: str) -> None:
        self.notices.append(message)

    def drain_notices(self) -> List[str]:
        notices, self.notices = self.notices, []
        return notices


def _sync_theme_query_param(mode: ThemeMode) -> None:
    _set_query_param("theme", mode.value)

# --- Helper functions to interact with Streamlit's query params ---
def _get_query_param(name: str, default: str = "") -> str:
    """A robust way to get a single query parameter."""
    params = st.query_params
    value = params.get(name)
    if isinstance(value, list):
        return str(value[0]) if value else default
    return str(value) if value is not None else default

def _set_query_param(name: str, value: str):
    """Sets a query parameter."""
    st.query_params[name] = value
