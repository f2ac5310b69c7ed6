import streamlit as st
import logging

from core.state import AppState
from core.services import load_site_config
from core.constants import SECTION_NAMES
from view.components import render_header, render_footer, render_sidebar_navigation, render_notices
from view.presentation import (
    render_section_anchor, render_divider, render_intro, render_about,
    render_projects, render_skills, render_contact,
)
from view.opener import BrowserLinkOpener
from view.scroll import BrowserScrollDriver
from view.styles import StyleSheet

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

STYLESHEET_KEY = "portfolio_stylesheet"

# One renderer per navigable section, in page order.
SECTION_RENDERERS = {
    "Home": lambda site_config, state: render_intro(site_config, state),
    "About": lambda site_config, state: render_about(site_config),
    "Projects": lambda site_config, state: render_projects(site_config.projects),
    "Skills": lambda site_config, state: render_skills(site_config.skills),
    "Contact": lambda site_config, state: render_contact(site_config, state),
}


def get_stylesheet(state: AppState) -> StyleSheet:
    """One stylesheet per session, kept current by subscribing to the theme."""
    sheet = st.session_state.get(STYLESHEET_KEY)
    if sheet is None:
        sheet = StyleSheet(state.theme.mode).attach(state.theme)
        st.session_state[STYLESHEET_KEY] = sheet
    return sheet


def render_sections(site_config, state: AppState) -> dict:
    """A full layout pass over every section; returns the anchors it placed."""
    anchors = {}
    for index, name in enumerate(SECTION_NAMES):
        if index:
            render_divider()
        anchors[name] = render_section_anchor(name)
        SECTION_RENDERERS[name](site_config, state)
    return anchors


def main():
    """
    The main execution flow of the Streamlit application.
    """
    # --- 1. Initial Setup ---
    site_config = load_site_config()

    st.set_page_config(
        page_title=site_config.page_title,
        page_icon=site_config.branding.page_icon or "💼",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    # --- 2. State Initialization ---
    state = AppState.from_streamlit(
        BrowserScrollDriver, BrowserLinkOpener, site_config.branding.default_theme
    )
    state.apply_to_streamlit()
    get_stylesheet(state).render()

    # --- 3. Navigation ---
    section_names = list(SECTION_NAMES)
    if site_config.features.use_sidebar_nav:
        render_sidebar_navigation(site_config, state, section_names)
    render_header(site_config, state, section_names)

    # --- 4. Sections ---
    anchors = render_sections(site_config, state)

    # --- 5. Footer ---
    render_footer(site_config)

    # --- 6. Re-sync anchors, then run pending scroll, link opens and notifications ---
    state.registry.sync(anchors)
    initial_section = state.consume_initial_section()
    if initial_section:
        state.go_to(initial_section)
    state.navigator.driver.flush()
    state.links.opener.flush()
    render_notices(state)


if __name__ == "__main__":
    main()
