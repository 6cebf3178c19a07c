from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication, QDialog, QMessageBox, QStyleFactory

from eisenhower.config import PROJECT_ROOT, SETTINGS
from eisenhower.domain.errors import ValidationError
from eisenhower.infra.logging import setup_logging
from eisenhower.infra.storage import create_repository
from eisenhower.services.task_store import TaskStore
from eisenhower.ui.dialogs import LoginDialog
from eisenhower.ui.main_window import MainWindow


def _apply_dark_palette(app: QApplication) -> None:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor("#0F172A"))
    palette.setColor(QPalette.WindowText, QColor("#E6EDF3"))
    palette.setColor(QPalette.Base, QColor("#111827"))
    palette.setColor(QPalette.AlternateBase, QColor("#1B2230"))
    palette.setColor(QPalette.Text, QColor("#E6EDF3"))
    palette.setColor(QPalette.Button, QColor("#202A3B"))
    palette.setColor(QPalette.ButtonText, QColor("#E6EDF3"))
    palette.setColor(QPalette.Highlight, QColor("#2563EB"))
    palette.setColor(QPalette.HighlightedText, QColor("#FFFFFF"))
    app.setPalette(palette)


def _find_qss_path() -> Path | None:
    candidates = [
        Path(__file__).resolve().parent / "ui" / "styles.qss",
        PROJECT_ROOT / "eisenhower" / "ui" / "styles.qss",
    ]
    meipass = getattr(sys, "_MEIPASS", None)
    if getattr(sys, "frozen", False) and meipass:
        candidates.append(Path(meipass) / "eisenhower" / "ui" / "styles.qss")

    for path in candidates:
        if path.exists():
            return path
    return None


def load_styles(app: QApplication) -> None:
    qss_path = _find_qss_path()
    if qss_path:
        app.setStyleSheet(qss_path.read_text(encoding="utf-8"))


def _ask_user_id(repo) -> str | None:
    if SETTINGS.default_user:
        return SETTINGS.default_user
    dialog = LoginDialog(repo.list_users())
    if dialog.exec() != QDialog.Accepted:
        return None
    return dialog.user_id


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    try:
        repo = create_repository(SETTINGS)
    except Exception as exc:  # noqa: BLE001
        QMessageBox.critical(None, "Storage error", str(exc))
        return

    app.setStyle(QStyleFactory.create("Fusion"))
    _apply_dark_palette(app)
    app.setFont(QFont("Bahnschrift", 10))
    load_styles(app)

    user_id = _ask_user_id(repo)
    if not user_id:
        return
    try:
        store = TaskStore(repo, user_id)
    except ValidationError as exc:
        QMessageBox.warning(None, "Вхід", str(exc))
        return

    window = MainWindow(store)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
