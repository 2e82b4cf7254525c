from __future__ import annotations

from dataclasses import dataclass

from fittrack.config.paths import APP_CONFIG_PATH, ENTRIES_PATH
from fittrack.config.settings import CHART_FIELD_DEFAULT
from fittrack.core.storage import read_json, write_json_atomic

CHART_FIELDS = ("weight", "calories")


@dataclass
class AppConfig:
    entries_path: str = str(ENTRIES_PATH)
    chart_field: str = CHART_FIELD_DEFAULT
    @staticmethod
    def load() -> "AppConfig":
        data = read_json(APP_CONFIG_PATH, default={}) or {}
        field = data.get("chart_field", CHART_FIELD_DEFAULT)
        if field not in CHART_FIELDS:
            field = CHART_FIELD_DEFAULT
        return AppConfig(entries_path=data.get("entries_path", str(ENTRIES_PATH)), chart_field=field)
    def save(self) -> None:
        write_json_atomic(APP_CONFIG_PATH, {"entries_path": self.entries_path, "chart_field": self.chart_field})
