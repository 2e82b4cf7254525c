"""
Unified settings module for Fit Tracker.

- Chart geometry is expressed in logical pixels; the chart widget multiplies
  every value by the device pixel ratio at render time.
- A handful of values can be overridden from ``fittrack.env`` at the project
  root (see ``_ENV_OVERRIDES`` below). Missing or malformed overrides fall
  back to the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import dotenv_values

from fittrack.config.paths import ENV_FILE_PATH


_ENV_OVERRIDES: Dict[str, Optional[str]] = (
    dotenv_values(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else {}
)


def _env_float(key: str, default: float) -> float:
    raw = _ENV_OVERRIDES.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---- App metadata ----
@dataclass(frozen=True)
class AppInfo:
    name: str = "Fit Tracker"
    version: str = "1.0.0"
    description: str = "Daily weight & calories log with an animated trend chart"


APP_INFO = AppInfo()

# ---- Timezone ----
# None -> local wall clock
TIMEZONE: Optional[str] = _ENV_OVERRIDES.get("FITTRACK_TZ") or None

# ---- Units ----
WEIGHT_UNIT = _ENV_OVERRIDES.get("FITTRACK_UNIT") or "kg"
CHART_FIELD_DEFAULT = "weight"

# ---- Chart geometry (logical px) ----
CHART_HEIGHT = 170
CHART_PAD_X = 18
CHART_PAD_TOP = 18
CHART_PAD_BOTTOM = 28
CHART_GRID_LINES = 3

VALUE_LABEL_MAX_OFFSET = 6   # above plot top
VALUE_LABEL_MIN_OFFSET = 2   # below plot bottom
DATE_LABEL_OFFSET = 16       # below plot bottom
DATE_LABEL_WIDTH = 5         # "DD.MM"

# ---- Chart animation ----
CHART_DURATION_MS = _env_float("FITTRACK_CHART_DURATION_MS", 450.0)
CHART_TICK_MS = 16  # ~60 Hz refresh

# ---- Label crowding ----
DATE_LABEL_CROWDING_THRESHOLD = 10
DATE_LABEL_CROWDED_STRIDE = 2

# ---- Trend classification ----
TREND_EPSILON = 0.05
TREND_COLOR_FALLING = "#2ecc71"  # weight going down
TREND_COLOR_RISING = "#ff5c5c"
TREND_COLOR_FLAT = "#2d7dff"

# ---- Chart styling ----
CHART_BACKGROUND = "#0f172a"
GRID_COLOR_RGBA = (255, 255, 255, 0.12)
GRID_LINE_WIDTH = 1.0
SERIES_LINE_WIDTH = 2.6
POINT_RADIUS = 3.3
POINT_OUTLINE_RGBA = (255, 255, 255, 0.35)
POINT_OUTLINE_WIDTH = 1.2
TEXT_COLOR = "#ffffff"
VALUE_LABEL_FONT_PX = 12
VALUE_LABEL_ALPHA = 0.85
DATE_LABEL_FONT_PX = 10
DATE_LABEL_ALPHA = 0.75
PLACEHOLDER_FONT_PX = 14
PLACEHOLDER_ALPHA = 0.9
PLACEHOLDER_POS = (12, 28)
PLACEHOLDER_TEXT = "Add at least 2 entries with {field} 🙂"
FONT_FAMILY = "system-ui"

# ---- GUI ----
STATUS_MESSAGE_MS = 2200
