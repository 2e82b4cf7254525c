from __future__ import annotations

"""Helpers for persisting lightweight GUI preferences to ``data/ui_state.json``."""

import json
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from fittrack.config.paths import UI_STATE_PATH


@dataclass
class UIState:
    """Serializable container for persisted window preferences."""

    dark_mode: bool = True
    font_size: str = "Normal"  # Small | Normal | Large
    window_width: int = 720
    window_height: int = 860


_UI_STATE_PATH = UI_STATE_PATH


def load_ui_state() -> UIState:
    """Return persisted :class:`UIState`, falling back to defaults on error."""

    path = _UI_STATE_PATH
    if not path.exists():
        return UIState()

    try:
        with path.open("r", encoding="utf-8") as handle:
            payload: Dict[str, Any] = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return UIState()
    if not isinstance(payload, dict):
        return UIState()

    state_kwargs: Dict[str, Any] = {}
    for field in fields(UIState):
        if field.name in payload:
            state_kwargs[field.name] = payload[field.name]

    return UIState(**state_kwargs)


def save_ui_state(ui_state: UIState) -> None:
    """Persist ``ui_state``; disk errors are ignored."""

    path = _UI_STATE_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(asdict(ui_state), handle, indent=2, sort_keys=True)
    except OSError:
        return
