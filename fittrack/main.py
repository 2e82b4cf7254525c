from fittrack.config.paths import ensure_runtime_dirs
from fittrack.config.settings import APP_INFO
from fittrack.core.logging_setup import setup_logging
from fittrack.gui.main_window import launch_gui


def main():
    ensure_runtime_dirs()
    logger = setup_logging()
    logger.info("Starting %s %s", APP_INFO.name, APP_INFO.version)
    launch_gui()
if __name__ == "__main__":
    main()
