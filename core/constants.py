from pathlib import Path

# --- Project Paths ---
# Defines the absolute root path of the project.
ROOT_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = ROOT_DIR / "config"
ASSETS_DIR = ROOT_DIR / "assets"

# --- Sections ---
# Navigation targets, in page order. The footer is rendered but not navigable.
SECTION_NAMES = ("Home", "About", "Projects", "Skills", "Contact")

# --- Breakpoints (px) ---
NARROW_MAX_WIDTH = 450
MEDIUM_MAX_WIDTH = 800

# --- Navigation ---
SCROLL_DURATION_S = 0.6
SCROLL_FRAME_INTERVAL_S = 1 / 60

# --- Default Values ---
DEFAULT_THEME = "dark"
