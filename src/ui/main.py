import logging
import os
from pathlib import Path

import flet as ft

from src.config.loader import apply_env_overrides, load_settings
from src.ui.context import ServiceContext
from src.ui.layout import PeopleHome
from src.ui.theme import AppTheme

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Configuration from environment (with sensible defaults for local dev)
SETTINGS_PATH = os.environ.get("PEOPLE_SETTINGS_PATH", "settings.yaml")


def main(page: ft.Page) -> None:
    # 1. Settings
    try:
        settings = apply_env_overrides(load_settings(Path(SETTINGS_PATH)))
    except ValueError as e:
        logger.error(str(e))
        page.add(ft.Text(f"Error: {e}", color="red", size=20))
        return

    logging.getLogger().setLevel(settings.logging.level)
    if settings.api.offline:
        logger.info("Offline mode: using the in-memory people store")
    else:
        logger.info(f"People API: {settings.api.base_url}{settings.api.collection_path}")

    # 2. Theme
    page.title = settings.ui.title
    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()
    page.theme_mode = ft.ThemeMode.LIGHT

    # 3. Context
    ctx = ServiceContext.create(settings)

    def handle_disconnect(_: ft.ControlEvent) -> None:
        logger.info("Session closed")
        ctx.close()

    page.on_disconnect = handle_disconnect

    # 4. Layout
    page.add(PeopleHome(ctx))

if __name__ == "__main__":
    ft.app(target=main)
