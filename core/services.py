from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

import streamlit as st

from .models import SiteConfig, resolve_asset
from .utils import read_yaml_mapping, image_to_data_uri
from .constants import CONFIG_DIR

logger = logging.getLogger(__name__)


# --- Configuration Loading ---

@st.cache_data(show_spinner=False)
def load_site_config(config_path: Optional[Path] = None) -> SiteConfig:
    """Loads the site configuration from site.yaml, falling back to the built-in portfolio."""
    config_path = config_path or CONFIG_DIR / "site.yaml"
    if not config_path.exists():
        logger.info("%s not found, using the built-in portfolio content.", config_path)
        return SiteConfig()

    data = read_yaml_mapping(config_path)
    return SiteConfig.model_validate(data)


# --- Assets ---

def get_image_uri(asset_name: str) -> str:
    """Inline data URI for a bundled image, or "" when the asset is missing."""
    path = resolve_asset(asset_name)
    if path is None:
        return ""
    try:
        return image_to_data_uri(path)
    except OSError:
        logger.warning("Could not decode image '%s'", path, exc_info=True)
        return ""

