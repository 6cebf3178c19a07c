from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMenu,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from eisenhower.domain.enums import Category
from eisenhower.domain.errors import PersistenceWarning, ValidationError
from eisenhower.services.task_store import TaskStore

from .dialogs import TaskDialog
from .widgets import CATEGORY_COLORS, CATEGORY_LABELS, QuadrantListWidget


class QuadrantPanel(QFrame):
    def __init__(self, category: Category, on_drop, can_drop, on_add, parent=None):
        super().__init__(parent)
        self.category = category
        self.setObjectName("QuadrantPanel")
        color = CATEGORY_COLORS[category]
        self.setStyleSheet(f"#QuadrantPanel {{ border: 1px solid {color}; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)

        title_text, subtitle_text = CATEGORY_LABELS[category]
        title = QLabel(title_text)
        title.setProperty("class", "panel-title")
        subtitle = QLabel(subtitle_text)
        subtitle.setProperty("class", "quadrant-subtitle")
        subtitle.setStyleSheet(f"color: {color};")

        self.counts_label = QLabel("0")
        self.counts_label.setProperty("class", "stats-badge")
        self.counts_label.setStyleSheet(f"background-color: {color};")

        add_button = QPushButton("+")
        add_button.setProperty("variant", "ghost")
        add_button.setFixedWidth(32)
        add_button.clicked.connect(lambda: on_add(category))

        header = QHBoxLayout()
        header.addWidget(title)
        header.addStretch()
        header.addWidget(self.counts_label)
        header.addWidget(add_button)

        self.list_widget = QuadrantListWidget(category, on_drop, can_drop)
        self.list_widget.setObjectName("QuadrantList")

        layout.addLayout(header)
        layout.addWidget(subtitle)
        layout.addWidget(self.list_widget, 1)

    def set_counts(self, total: int, done: int) -> None:
        self.counts_label.setText(f"{done}/{total}" if done else str(total))


class MainWindow(QWidget):
    def __init__(self, store: TaskStore):
        super().__init__()
        self.store = store
        self.setWindowTitle(f"Матриця Ейзенхауера · {store.user_id}")
        self.resize(1100, 760)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(12)

        main_layout.addWidget(self._build_header())

        grid = QGridLayout()
        grid.setSpacing(12)
        self.panels: dict[Category, QuadrantPanel] = {}
        for index, category in enumerate(Category):
            panel = QuadrantPanel(category, self.on_drop, self.can_drop, self.new_task)
            panel.list_widget.itemDoubleClicked.connect(
                lambda item: self.edit_task(item.data(Qt.UserRole))
            )
            panel.list_widget.setContextMenuPolicy(Qt.CustomContextMenu)
            panel.list_widget.customContextMenuRequested.connect(
                lambda pos, lw=panel.list_widget: self._show_context_menu(lw, pos)
            )
            grid.addWidget(panel, index // 2, index % 2)
            self.panels[category] = panel
        main_layout.addLayout(grid, 1)

        self.status_label = QLabel("")
        self.status_label.setProperty("class", "stats")
        main_layout.addWidget(self.status_label)

        store.subscribe(self.refresh)
        store.set_warning_handler(self.on_persistence_warning)
        self.refresh()

        QShortcut(QKeySequence("Ctrl+N"), self, lambda: self.new_task(Category.URGENT_IMPORTANT))
        QShortcut(QKeySequence.Delete, self, self.delete_selected)

    def _build_header(self) -> QWidget:
        frame = QFrame()
        frame.setObjectName("Header")
        layout = QHBoxLayout(frame)
        layout.setContentsMargins(12, 10, 12, 10)

        titles = QVBoxLayout()
        title = QLabel("Матриця Ейзенхауера")
        title.setProperty("class", "panel-title")
        subtitle = QLabel("Розстав пріоритети своїх задач")
        subtitle.setProperty("class", "task-meta")
        titles.addWidget(title)
        titles.addWidget(subtitle)

        add_button = QPushButton("Нова задача")
        add_button.clicked.connect(lambda: self.new_task(Category.URGENT_IMPORTANT))

        reset_button = QPushButton("Скинути приклади")
        reset_button.setProperty("variant", "danger")
        reset_button.clicked.connect(self.reset_sample_data)

        layout.addLayout(titles)
        layout.addStretch()
        layout.addWidget(add_button)
        layout.addWidget(reset_button)
        return frame

    def refresh(self) -> None:
        for category, panel in self.panels.items():
            list_widget = panel.list_widget
            list_widget.clear()
            for task in self.store.filter_by_category(category):
                list_widget.add_task(task, self.on_toggle)
            panel.set_counts(*self.store.counts(category))

    def on_drop(self, task_id: str, category: Category, anchor_id: str | None) -> None:
        self.store.drop(task_id, category, anchor_id)

    def can_drop(self, task_id: str, category: Category, anchor_id: str | None) -> bool:
        return not self.store.preview_drop(task_id, category, anchor_id).is_noop

    def on_toggle(self, task_id: str) -> None:
        self.store.toggle_completed(task_id)

    def on_persistence_warning(self, warning: PersistenceWarning) -> None:
        self.status_label.setText(f"Не вдалося зберегти зміни: {warning.message}")

    def new_task(self, category: Category) -> None:
        dialog = TaskDialog(category=category, parent=self)
        if dialog.exec() != TaskDialog.Accepted:
            return
        title, notes, chosen = dialog.values()
        try:
            self.store.add(title, notes, chosen)
        except ValidationError as exc:
            QMessageBox.warning(self, "Потрібна назва", str(exc))

    def edit_task(self, task_id: str | None) -> None:
        task = self.store.get(task_id) if task_id else None
        if task is None:
            return
        dialog = TaskDialog(task=task, parent=self)
        if dialog.exec() != TaskDialog.Accepted:
            return
        title, notes, category = dialog.values()
        try:
            self.store.update(task.id, title, notes, category)
        except ValidationError as exc:
            QMessageBox.warning(self, "Потрібна назва", str(exc))

    def delete_task(self, task_id: str) -> None:
        task = self.store.get(task_id)
        if task is None:
            return
        confirm = QMessageBox.question(self, "Видалити задачу", f"Видалити «{task.title}»?")
        if confirm != QMessageBox.Yes:
            return
        self.store.delete(task_id)

    def delete_selected(self) -> None:
        focused = self.focusWidget()
        if not isinstance(focused, QuadrantListWidget):
            return
        item = focused.currentItem()
        if item:
            self.delete_task(item.data(Qt.UserRole))

    def reset_sample_data(self) -> None:
        confirm = QMessageBox.question(
            self,
            "Скинути приклади",
            "Усі твої задачі буде замінено прикладами. Продовжити?",
        )
        if confirm != QMessageBox.Yes:
            return
        self.store.reset_sample_data()
        self.status_label.setText("")

    def _show_context_menu(self, list_widget: QuadrantListWidget, pos) -> None:
        item = list_widget.itemAt(pos)
        if item is None:
            return
        task_id = item.data(Qt.UserRole)

        menu = QMenu(self)
        menu.addAction("Редагувати", lambda: self.edit_task(task_id))
        menu.addAction("Виконано / не виконано", lambda: self.on_toggle(task_id))
        move_menu = menu.addMenu("Перемістити до")
        for category in Category:
            if category == list_widget.category:
                continue
            label, _subtitle = CATEGORY_LABELS[category]
            move_menu.addAction(
                label, lambda c=category: self.store.move_to_category(task_id, c)
            )
        menu.addSeparator()
        menu.addAction("Видалити", lambda: self.delete_task(task_id))
        menu.exec(list_widget.viewport().mapToGlobal(pos))
