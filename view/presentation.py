from __future__ import annotations
from typing import List
import html

import streamlit as st

from core.models import Highlight, Project, SiteConfig, Skill
from core.navigation import Anchor
from core.services import get_image_uri
from core.state import AppState
from view.components import render_link_button


def _render_html(markup: str):
    # Markdown treats indented lines as code and blank lines as block ends; flatten first.
    st.markdown("".join(line.strip() for line in markup.splitlines()), unsafe_allow_html=True)


def render_section_anchor(name: str) -> Anchor:
    """Drops an invisible marker the navigator can scroll to, and returns its anchor."""
    anchor = Anchor.for_section(name)
    _render_html(f'<div id="{anchor.key}" class="section-anchor"></div>')
    return anchor


def render_divider():
    _render_html('<hr class="section-divider">')


def _section_title(title: str):
    _render_html(f'<div class="section-title">{html.escape(title)}</div>')


# --- Intro ---

def _render_avatar(site_config: SiteConfig) -> str:
    image_uri = get_image_uri(site_config.branding.profile_image)
    if image_uri:
        return f'<img class="avatar" src="{image_uri}" alt="{html.escape(site_config.author)}">'
    initials = "".join(part[0] for part in site_config.author.split()[:2]).upper()
    return f'<div class="avatar avatar-placeholder">{html.escape(initials)}</div>'


def render_intro(site_config: SiteConfig, state: AppState):
    """Greeting, headline and profile picture, side by side unless the screen is narrow."""
    _render_html(
        f"""
        <div class="intro">
            <div class="intro-text">
                <div class="intro-greeting">{html.escape(site_config.greeting)}</div>
                <div class="intro-headline">{html.escape(site_config.headline)}</div>
            </div>
            {_render_avatar(site_config)}
        </div>
        """)

    hire_col, cv_col, _ = st.columns([1, 1, 4])
    with hire_col:
        render_link_button("✉ Hire Me", site_config.contact.hire_me_uri, state,
                           key="hire-me", primary=True)
    with cv_col:
        render_link_button("⬇ Download CV", site_config.resources.cv_download_url, state,
                           key="download-cv",
                           failure_message="Failed to open CV. Please try again.")


# --- About ---

def _highlight_card(highlight: Highlight) -> str:
    return f"""
    <div class="card highlight-card">
        <div class="highlight-icon">{html.escape(highlight.icon)}</div>
        <div class="highlight-title">{html.escape(highlight.title)}</div>
        <div class="muted">{html.escape(highlight.subtitle)}</div>
    </div>"""


def render_about(site_config: SiteConfig):
    _section_title("About Me")
    _render_html(f"<p>{html.escape(site_config.bio)}</p>")
    cards = "".join(_highlight_card(h) for h in site_config.highlights)
    _render_html(f'<div class="highlight-grid">{cards}</div>')


# --- Projects ---

def _project_card(project: Project) -> str:
    """Renders a single project card as a self-contained HTML block."""
    image_uri = get_image_uri(project.image)
    cover = f'<img src="{image_uri}" alt="{html.escape(project.title)}">' if image_uri else ""

    links = [f'<a href="{html.escape(project.repo_url)}" target="_blank">⌨ Code</a>']
    if project.has_live_demo:
        links.append(f'<a href="{html.escape(project.live_url)}" target="_blank">↗ Live</a>')

    return f"""
    <div class="card project-card">
        <div class="project-cover">{cover}</div>
        <div class="project-body">
            <div class="project-title">{html.escape(project.title)}</div>
            <div class="muted">{html.escape(project.description)}</div>
            <div class="project-links">{"".join(links)}</div>
        </div>
    </div>"""


def render_projects(projects: List[Project]):
    """Project grid; the column count follows the layout mode through the stylesheet."""
    _section_title("Featured Projects")
    cards = "".join(_project_card(p) for p in projects)
    _render_html(f'<div class="project-grid">{cards}</div>')


# --- Skills ---

def _skill_indicator(skill: Skill) -> str:
    return f"""
    <div class="skill">
        <div class="skill-header">
            <span>{html.escape(skill.icon)}</span>
            <span>{html.escape(skill.name)}</span>
            <span class="skill-percent">{skill.percent_label}</span>
        </div>
        <div class="skill-track"><div class="skill-fill" style="width: {skill.percent}%"></div></div>
    </div>"""


def render_skills(skills: List[Skill]):
    _section_title("My Technical Skills")
    bars = "".join(_skill_indicator(s) for s in skills)
    _render_html(f'<div class="skill-list">{bars}</div>')


# --- Contact ---

def render_contact(site_config: SiteConfig, state: AppState):
    st.markdown("#### Connect with Me")
    for link in site_config.social:
        render_link_button(f"{link.icon} {link.label}", link.url, state, key=f"social-{link.label}")
