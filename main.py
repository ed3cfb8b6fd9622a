import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from artwork.fetcher import CoverFetcher
from artwork.loader import ImageLoader
from core.catalog import CatalogError, demo_playlist, load_playlist
from core.config import Settings
from core.state import AppState, Notify
from ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def init_app_state(settings: Settings) -> AppState:
    app_state = AppState(settings)

    app_state.playlist = demo_playlist()
    if settings.catalog_path:
        try:
            app_state.playlist = load_playlist(settings.catalog_path)
        except CatalogError as e:
            logger.error("Falling back to the built-in playlist: %s", e)
            app_state.queued_notifications.append(
                Notify(message=f"Could not load playlist: {e}", notify_type="error")
            )

    fetcher = CoverFetcher(user_agent=settings.user_agent, timeout_s=settings.image_timeout_s)
    app_state.image_loader = ImageLoader(fetcher, offline=settings.offline)

    return app_state


def main() -> int:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    qt_app = QApplication(sys.argv)

    app_state = init_app_state(settings)
    main_window = MainWindow(app_state)
    main_window.show()

    return qt_app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
