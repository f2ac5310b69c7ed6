# core/models.py

from __future__ import annotations
from typing import List, Optional
from pathlib import Path
import logging

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import ASSETS_DIR, DEFAULT_THEME
from .links import build_mailto
from .utils import resolve_within

logger = logging.getLogger(__name__)


def resolve_asset(asset_name: str, base_dir: Path = ASSETS_DIR) -> Optional[Path]:
    """
    Returns a secure, absolute path to a bundled asset, or None when it cannot be used.
    Prevents path traversal attacks.
    """
    if not asset_name:
        return None
    try:
        return resolve_within(base_dir, asset_name)
    except (ValueError, FileNotFoundError) as e:
        logger.warning("Could not resolve asset '%s': %s", asset_name, e)
        return None


# --- Portfolio Content Models ---

class Project(BaseModel):
    """A featured project card. Defined once, never edited at runtime."""
    title: str
    description: str
    repo_url: str
    live_url: Optional[str] = None
    image: str = ""

    model_config = {"frozen": True}

    @field_validator("live_url")
    @classmethod
    def drop_placeholder_url(cls, v: Optional[str]) -> Optional[str]:
        # "#" is used as a "no demo yet" placeholder.
        if v is None or v.strip() in ("", "#"):
            return None
        return v.strip()

    @property
    def has_live_demo(self) -> bool:
        return self.live_url is not None

    def get_image_path(self, base_dir: Path = ASSETS_DIR) -> Optional[Path]:
        return resolve_asset(self.image, base_dir)


class Skill(BaseModel):
    name: str
    proficiency: float
    icon: str = ""

    model_config = {"frozen": True}

    @field_validator("proficiency")
    @classmethod
    def validate_proficiency(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"proficiency must be within [0, 1], got {v}")
        return v

    @property
    def percent(self) -> int:
        """Whole percent, truncated (0.659 -> 65)."""
        return int(self.proficiency * 100)

    @property
    def percent_label(self) -> str:
        return f"{self.percent}%"


class Highlight(BaseModel):
    title: str
    subtitle: str
    icon: str = ""

    model_config = {"frozen": True}


class SocialLink(BaseModel):
    label: str
    url: str
    icon: str = ""

    model_config = {"frozen": True}


# --- Site Configuration Models ---

class ContactConfig(BaseModel):
    email: str = "ahmadalirj99@gmail.com"
    hire_subject: str = "Hiring Inquiry"
    hire_body: str = (
        "Hi Ahmad, I found your portfolio and would like to discuss a project with you."
    )

    @property
    def hire_me_uri(self) -> str:
        return build_mailto(self.email, self.hire_subject, self.hire_body)


class ResourcesConfig(BaseModel):
    cv_file_id: str = "1uMDojJWcSRD_Y7MvCtpIvudcw9N68GYk"

    @property
    def cv_download_url(self) -> str:
        if not self.cv_file_id:
            return ""
        return f"https://drive.google.com/uc?export=download&id={self.cv_file_id}"


class SiteFeatures(BaseModel):
    use_sidebar_nav: bool = True


class Branding(BaseModel):
    page_icon: str = "💼"
    profile_image: str = "images/profile_pic.jpg"
    default_theme: str = DEFAULT_THEME


DEFAULT_PROJECTS = [
    Project(
        title="Course App UI",
        description="A clean and responsive UI that allows users to browse, search, "
                    "and explore a variety of Course with detail.",
        repo_url="https://github.com/AhmadAli3234/courses_ui_app",
        live_url="#",
        image="images/720.png",
    ),
    Project(
        title="Shoes Store App",
        description="A clean and responsive UI that allows users to browse, search, "
                    "and explore a variety of shoes",
        repo_url="https://github.com/AhmadAli3234/shoes_store_app",
        live_url="#",
        image="images/420.png",
    ),
    Project(
        title="Weather App",
        description="A responsive weather application consuming a REST API to display forecasts.",
        repo_url="https://github.com/AhmadAli3234/Weather-App",
        live_url="#",
        image="images/weather apps.jpeg",
    ),
    Project(
        title="Car Rental App UI",
        description="A clean and responsive UI for car rental App.",
        repo_url="https://github.com/AhmadAli3234/car_rental_ui",
        live_url="#",
        image="images/620.png",
    ),
]

DEFAULT_SKILLS = [
    Skill(name="Flutter", proficiency=0.9, icon="📱"),
    Skill(name="UI/UX Design", proficiency=0.95, icon="🎨"),
    Skill(name="Firebase", proficiency=0.65, icon="🔥"),
    Skill(name="REST API", proficiency=0.65, icon="🖧"),
]

DEFAULT_HIGHLIGHTS = [
    Highlight(title="1 Year", subtitle="Flutter Experience", icon="📅"),
    Highlight(title="10+ Projects", subtitle="Completed Portfolio Apps", icon="🧩"),
    Highlight(title="Cross-Platform", subtitle="Mobile, Web, & Desktop", icon="💻"),
]

DEFAULT_SOCIAL_LINKS = [
    SocialLink(label="LinkedIn", url="https://www.linkedin.com/in/ahmad-ali-6205a2310/", icon="in"),
    SocialLink(label="GitHub", url="https://github.com/AhmadAli3234", icon="gh"),
    SocialLink(label="Email", url="mailto:ahmadalirj99@gmail.com", icon="✉"),
]


class SiteConfig(BaseSettings):
    """
    Everything the page shows. Defaults are the built-in portfolio;
    config/site.yaml and APP_* environment variables may override them.
    """
    site_name: str = "Portfolio"
    page_title: str = "Ahmad Ali | Flutter Developer"
    author: str = "Ahmad Ali"
    greeting: str = "Hi, I’m Ahmad Ali"
    headline: str = "A Flutter Developer."
    bio: str = (
        "I am a passionate cross-platform mobile and web developer specializing in Flutter. "
        "My journey started one year ago, focusing on building beautiful, fast, and scalable "
        "applications backed by Firebase and REST APIs. I thrive on translating UI/UX designs "
        "into pixel-perfect, smooth user interfaces, and I am committed to continuous learning "
        "in the rapidly evolving Flutter ecosystem."
    )
    built_with: str = "Streamlit"
    contact: ContactConfig = ContactConfig()
    resources: ResourcesConfig = ResourcesConfig()
    features: SiteFeatures = SiteFeatures()
    branding: Branding = Branding()
    projects: List[Project] = DEFAULT_PROJECTS
    skills: List[Skill] = DEFAULT_SKILLS
    highlights: List[Highlight] = DEFAULT_HIGHLIGHTS
    social: List[SocialLink] = DEFAULT_SOCIAL_LINKS

    model_config = SettingsConfigDict(env_prefix="APP_", env_nested_delimiter="__")
