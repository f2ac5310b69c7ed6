# view/styles.py

from __future__ import annotations
from typing import Callable, Optional

import streamlit as st

from core.layout import LayoutMode, grid_columns, is_stacked, media_query
from core.theme import PALETTES, Palette, ThemeController, ThemeMode


def _layout_rules(mode: LayoutMode) -> str:
    """Grid and stacking rules for one layout mode."""
    columns = grid_columns(mode)
    direction = "column" if is_stacked(mode) else "row"
    # Header nav buttons collapse into the sidebar drawer on narrow screens.
    nav_display = "none" if is_stacked(mode) else "flex"
    return f"""
@media {media_query(mode)} {{
  .project-grid, .highlight-grid {{ grid-template-columns: repeat({columns}, minmax(0, 1fr)); }}
  .intro {{ flex-direction: {direction}; }}
  .skill-list {{ flex-direction: {direction}; }}
  .st-key-nav-bar {{ display: {nav_display}; }}
}}"""


def build_stylesheet(palette: Palette) -> str:
    """Full page CSS for a palette, with one media block per layout mode."""
    responsive = "".join(_layout_rules(mode) for mode in LayoutMode)
    return f"""
.stApp {{ background-color: {palette.background}; color: {palette.text}; }}
.stApp p, .stApp li, .stApp span, .stApp label {{ color: {palette.text}; }}
[data-testid="stSidebar"] {{ background-color: {palette.card}; }}
.stButton > button {{ border: 2px solid {palette.secondary}; color: {palette.secondary}; background: transparent; border-radius: 12px; }}
.stButton > button:hover {{ background: {palette.secondary}; color: #FFFFFF; }}
.section-title {{ font-size: 32px; font-weight: 700; color: {palette.primary}; margin-bottom: 20px; }}
.section-divider {{ border: 0; border-top: 1px solid {palette.primary}4D; margin: 0 50px; }}
.intro {{ display: flex; align-items: center; justify-content: space-around; gap: 50px; padding: 40px 0; }}
.intro-greeting {{ font-size: 24px; font-weight: 300; color: {palette.primary}; }}
.intro-headline {{ font-size: 52px; font-weight: 800; line-height: 1.1; }}
.avatar {{ width: 240px; height: 240px; border-radius: 50%; object-fit: cover;
  border: 4px solid {palette.secondary}; box-shadow: 0 0 20px {palette.secondary}4D; }}
.avatar-placeholder {{ display: flex; align-items: center; justify-content: center; font-size: 72px; font-weight: 800;
  color: {palette.secondary}; background: {palette.secondary}1A; }}
.highlight-grid, .project-grid {{ display: grid; gap: 30px; }}
.card {{ background: {palette.card}; border-radius: 15px; padding: 20px; box-shadow: 0 4px 12px rgba(0,0,0,0.15); }}
.highlight-card {{ text-align: center; }}
.highlight-icon {{ font-size: 40px; color: {palette.secondary}; }}
.highlight-title {{ font-size: 24px; font-weight: 700; }}
.muted {{ color: {palette.muted_text} !important; }}
.project-card {{ padding: 0; overflow: hidden; display: flex; flex-direction: column; }}
.project-cover {{ height: 180px; background: {palette.secondary}1A; border-bottom: 1px solid {palette.secondary}4D; }}
.project-cover img {{ width: 100%; height: 100%; object-fit: cover; display: block; }}
.project-body {{ padding: 10px; }}
.project-title {{ font-size: 18px; font-weight: 700; white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }}
.project-links {{ text-align: right; margin-top: 20px; }}
.project-links a {{ color: {palette.primary}; font-size: 12px; margin-left: 8px; text-decoration: none; }}
.skill-list {{ display: flex; gap: 40px; justify-content: space-between; }}
.skill {{ flex: 1; }}
.skill-header {{ display: flex; gap: 10px; font-weight: 600; }}
.skill-percent {{ margin-left: auto; color: {palette.primary} !important; }}
.skill-track {{ height: 8px; border-radius: 4px; background: {palette.card}; margin-top: 10px; }}
.skill-fill {{ height: 8px; border-radius: 4px; background: {palette.primary}; }}
.footer {{ padding: 20px; font-size: 12px; }}
{responsive}
"""


class StyleSheet:
    """Keeps the page CSS in step with a ThemeController."""

    def __init__(self, mode: ThemeMode) -> None:
        self.css = build_stylesheet(PALETTES[mode])
        self._unsubscribe: Optional[Callable[[], None]] = None

    def attach(self, theme: ThemeController) -> StyleSheet:
        self.detach()
        self.on_theme_changed(theme.mode)
        self._unsubscribe = theme.subscribe(self.on_theme_changed)
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_theme_changed(self, mode: ThemeMode) -> None:
        self.css = build_stylesheet(PALETTES[mode])

    def render(self) -> None:
        st.markdown(f"<style>{self.css}</style>", unsafe_allow_html=True)
