from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QLabel,
    QLineEdit,
    QTextEdit,
    QVBoxLayout,
)

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category

from .widgets import CATEGORY_LABELS


class LoginDialog(QDialog):
    def __init__(self, known_users: list[str] | None = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Матриця Ейзенхауера")
        self.setObjectName("LoginDialog")
        self.setMinimumWidth(320)

        title = QLabel("Матриця Ейзенхауера")
        title.setProperty("class", "panel-title")

        self.user_combo = QComboBox()
        self.user_combo.setEditable(True)
        self.user_combo.addItems(known_users or [])
        self.user_combo.setCurrentText("")
        self.user_combo.lineEdit().setPlaceholderText("Ім'я користувача")

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Увійти")
        self.buttons.button(QDialogButtonBox.Cancel).setText("Скасувати")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        self.user_combo.editTextChanged.connect(self._sync_ok)
        self._sync_ok()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)
        layout.addWidget(title)
        layout.addWidget(self.user_combo)
        layout.addWidget(self.buttons)

    @property
    def user_id(self) -> str:
        return self.user_combo.currentText().strip()

    def _sync_ok(self) -> None:
        self.buttons.button(QDialogButtonBox.Ok).setEnabled(bool(self.user_id))


class TaskDialog(QDialog):
    def __init__(
        self,
        task: TaskEntity | None = None,
        category: Category = Category.URGENT_IMPORTANT,
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Нова задача" if task is None else "Редагування задачі")
        self.setObjectName("TaskDialog")
        self.setMinimumWidth(420)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Назва задачі")

        self.notes_input = QTextEdit()
        self.notes_input.setObjectName("NotesInput")
        self.notes_input.setPlaceholderText("Нотатки")
        self.notes_input.setMaximumHeight(140)

        self.category_combo = QComboBox()
        for key, (label, subtitle) in CATEGORY_LABELS.items():
            self.category_combo.addItem(f"{label} · {subtitle}", key.value)

        if task is not None:
            self.title_input.setText(task.title)
            self.notes_input.setPlainText(task.notes)
            category = task.category
        index = self.category_combo.findData(Category(category).value)
        if index >= 0:
            self.category_combo.setCurrentIndex(index)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Save).setText("Зберегти")
        self.buttons.button(QDialogButtonBox.Cancel).setText("Скасувати")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        self.title_input.textChanged.connect(self._sync_save)
        self._sync_save()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)
        layout.addWidget(QLabel("Назва"))
        layout.addWidget(self.title_input)
        layout.addWidget(QLabel("Нотатки"))
        layout.addWidget(self.notes_input)
        layout.addWidget(QLabel("Квадрант"))
        layout.addWidget(self.category_combo)
        layout.addWidget(self.buttons)

    def values(self) -> tuple[str, str, Category]:
        return (
            self.title_input.text().strip(),
            self.notes_input.toPlainText().strip(),
            Category(self.category_combo.currentData()),
        )

    def _sync_save(self) -> None:
        enabled = bool(self.title_input.text().strip())
        self.buttons.button(QDialogButtonBox.Save).setEnabled(enabled)
