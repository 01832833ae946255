# main.py
from __future__ import annotations
import sys
import logging
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

from app.config import LOG_FILE
from app.words import WordStream
from ui.main_window import MainWindow
from utils.file_handler import load_default_words


def setup_logging(log_file: str = LOG_FILE) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        if QApplication.instance() is not None:
            QMessageBox.critical(None, "Application Error", f"{exctype.__name__}: {value}")
        sys.exit(1)

    sys.excepthook = excepthook


def load_stylesheet(app: QApplication) -> None:
    qss = Path("resources/style.qss")
    if qss.exists():
        try:
            app.setStyleSheet(qss.read_text(encoding="utf-8"))
        except OSError as e:
            logging.warning("Failed to load stylesheet: %s", e)


def main() -> int:
    setup_logging()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Smashkeys")
    app.setOrganizationName("Smashkeys")

    load_stylesheet(app)

    win = MainWindow(words=WordStream(load_default_words()))
    win.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
