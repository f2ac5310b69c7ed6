from __future__ import annotations
from typing import Any, Dict, Tuple
from pathlib import Path
from io import BytesIO
import base64
import yaml
import logging

import streamlit as st
from PIL import Image

logger = logging.getLogger(__name__)


@st.cache_data(show_spinner=False)
def read_yaml_mapping(path: str | Path) -> Dict[str, Any]:
    """Reads a YAML document whose top level must be a mapping; an empty file reads as {}."""
    with Path(path).open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return data


@st.cache_data(show_spinner=False)
def image_to_data_uri(path: str | Path, max_size: Tuple[int, int] = (640, 640)) -> str:
    """
    Downscales an image and inlines it as a PNG data URI,
    so it can be embedded in hand-written HTML blocks.
    """
    with Image.open(Path(path)) as source:
        image = source.copy()
    image.thumbnail(max_size)
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def resolve_within(base_dir: Path, relative: str) -> Path:
    """
    Resolves `relative` under `base_dir`. Raises ValueError when the result
    escapes the base directory and FileNotFoundError when it does not exist.
    """
    base = base_dir.resolve()
    resolved = (base / relative).resolve()

    if not resolved.is_relative_to(base):
        logger.warning("Asset path '%s' escapes '%s'", relative, base_dir)
        raise ValueError(f"'{relative}' escapes {base_dir}")
    if not resolved.exists():
        raise FileNotFoundError(f"No asset at {resolved}")
    return resolved
