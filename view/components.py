# view/components.py

from __future__ import annotations
from datetime import datetime
import html

import streamlit as st

from core.links import LINK_FAILURE_MESSAGE
from core.models import SiteConfig
from core.state import AppState
from core.theme import ThemeMode


def _theme_toggle_icon(mode: ThemeMode) -> str:
    # The icon shows the mode the button switches to.
    return "🌙" if mode is ThemeMode.LIGHT else "☀️"


def render_header(site_config: SiteConfig, state: AppState, section_names: list[str]):
    """Renders the app bar: title, one button per section and the theme toggle."""
    left, right = st.columns([1, 3], vertical_alignment="center")
    with left:
        st.markdown(f"### {html.escape(site_config.site_name)}")

    with right:
        nav_col, toggle_col = st.columns([12, 1], vertical_alignment="center")
        with nav_col:
            with st.container(key="nav-bar"):
                cols = st.columns(len(section_names))
                for col, name in zip(cols, section_names):
                    col.button(name, key=f"nav-{name}", on_click=state.go_to, args=(name,),
                               use_container_width=True)
        with toggle_col:
            st.button(
                _theme_toggle_icon(state.theme.mode),
                key="theme-toggle",
                help="Toggle light/dark theme",
                on_click=state.toggle_theme,
            )


def render_sidebar_navigation(site_config: SiteConfig, state: AppState, section_names: list[str]):
    """Renders the drawer: the same navigation as the app bar, for narrow screens."""
    st.sidebar.header(site_config.site_name)
    for name in section_names:
        st.sidebar.button(name, key=f"drawer-{name}", on_click=state.go_to, args=(name,),
                          use_container_width=True)

    st.sidebar.write("---")
    st.sidebar.button(
        f"{_theme_toggle_icon(state.theme.mode)} Toggle theme",
        key="drawer-theme-toggle",
        on_click=state.toggle_theme,
        use_container_width=True,
    )


def render_link_button(label: str, uri: str, state: AppState, key: str,
                       failure_message: str = LINK_FAILURE_MESSAGE, primary: bool = False):
    """A button whose click has the visitor's browser open `uri`; failures surface as a notice."""
    st.button(
        label,
        key=key,
        type="primary" if primary else "secondary",
        on_click=state.open_link,
        args=(uri, failure_message),
        disabled=not uri,
    )


def render_notices(state: AppState):
    """Shows transient, dismissible notifications queued by callbacks."""
    for message in state.drain_notices():
        st.toast(message, icon="⚠️")


def render_footer(site_config: SiteConfig):
    """Renders the page footer."""
    year = datetime.now().year
    st.markdown(
        f'<div class="footer muted">© {year} {html.escape(site_config.author)} '
        f'| Built with {html.escape(site_config.built_with)}</div>',
        unsafe_allow_html=True,
    )
