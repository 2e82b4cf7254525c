from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = PROJECT_ROOT / "data"
LOGS_DIR = PROJECT_ROOT / "logs"
ENV_FILE_PATH = PROJECT_ROOT / "fittrack.env"
APP_CONFIG_PATH = DATA_DIR / "app_config.json"
ENTRIES_PATH = DATA_DIR / "entries.json"
UI_STATE_PATH = DATA_DIR / "ui_state.json"
LOG_FILE_PATH = LOGS_DIR / "app.log"
def ensure_runtime_dirs():
    for p in (DATA_DIR, LOGS_DIR):
        p.mkdir(parents=True, exist_ok=True)
