from __future__ import annotations

from PySide6.QtCore import QMimeData, QPoint, QSize, Qt
from PySide6.QtGui import QDrag
from PySide6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category

CATEGORY_LABELS = {
    Category.URGENT_IMPORTANT: ("Терміново і важливо", "Зробити зараз"),
    Category.URGENT_NOT_IMPORTANT: ("Терміново, не важливо", "Делегувати"),
    Category.NOT_URGENT_IMPORTANT: ("Не терміново, важливо", "Запланувати"),
    Category.NOT_URGENT_NOT_IMPORTANT: ("Не терміново, не важливо", "Відкинути"),
}

CATEGORY_COLORS = {
    Category.URGENT_IMPORTANT: "#E24A4A",
    Category.URGENT_NOT_IMPORTANT: "#E0B25B",
    Category.NOT_URGENT_IMPORTANT: "#2563EB",
    Category.NOT_URGENT_NOT_IMPORTANT: "#9CA3AF",
}

MIME_PREFIX = "task:"


def _task_id_from_mime(mime: QMimeData) -> str | None:
    if not mime.hasText():
        return None
    text = mime.text()
    if not text.startswith(MIME_PREFIX):
        return None
    return text[len(MIME_PREFIX):] or None


class TaskItemWidget(QWidget):
    def __init__(self, task: TaskEntity, on_toggle, parent=None):
        super().__init__(parent)
        self.task = task
        self._on_toggle = on_toggle

        self.setObjectName("TaskCard")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setProperty("completed", task.completed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 6, 10, 6)
        layout.setSpacing(8)

        self.done_check = QCheckBox()
        self.done_check.setChecked(task.completed)
        self.done_check.toggled.connect(self._handle_toggle)

        title = QLabel(task.title)
        title.setProperty("class", "task-title")
        title.setWordWrap(True)
        font = title.font()
        font.setStrikeOut(task.completed)
        title.setFont(font)

        text_column = QVBoxLayout()
        text_column.setSpacing(2)
        text_column.addWidget(title)
        if task.notes:
            notes = QLabel(task.notes)
            notes.setProperty("class", "task-meta")
            notes.setWordWrap(True)
            notes.setFont(font)
            text_column.addWidget(notes)

        created = QLabel(task.created_at.strftime("%d.%m.%Y"))
        created.setProperty("class", "task-meta")

        layout.addWidget(self.done_check, 0, Qt.AlignTop)
        layout.addLayout(text_column, 1)
        layout.addWidget(created, 0, Qt.AlignTop)

    def _handle_toggle(self, _checked: bool) -> None:
        self._on_toggle(self.task.id)


class QuadrantListWidget(QListWidget):
    """Task list of one quadrant.

    Accepts drops from any quadrant. The drop is reported as
    ``on_drop(task_id, category, anchor_id)`` where the anchor is the task the
    dropped one should land before, or None for the end of the list. While
    hovering, ``can_drop`` with the same arguments decides whether the drop
    is offered at all. Nothing is rearranged locally; the owner refreshes
    from the store.
    """

    def __init__(self, category: Category, on_drop, can_drop=None, parent=None):
        super().__init__(parent)
        self.category = category
        self._on_drop = on_drop
        self._can_drop = can_drop
        self.setAcceptDrops(True)
        self.setDragEnabled(True)
        self.setDropIndicatorShown(True)
        self.setDragDropMode(QAbstractItemView.DragDrop)
        self.setDefaultDropAction(Qt.MoveAction)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setSpacing(4)

    def add_task(self, task: TaskEntity, on_toggle) -> None:
        item = QListWidgetItem()
        item.setData(Qt.UserRole, task.id)
        widget = TaskItemWidget(task, on_toggle)
        self.addItem(item)
        self.setItemWidget(item, widget)
        item.setSizeHint(QSize(self.viewport().width(), widget.sizeHint().height()))

    def task_id_at(self, row: int) -> str | None:
        item = self.item(row)
        return item.data(Qt.UserRole) if item else None

    def startDrag(self, supportedActions: Qt.DropActions) -> None:  # type: ignore[name-defined]
        item = self.currentItem()
        if not item:
            return
        task_id = item.data(Qt.UserRole)
        if not task_id:
            return
        mime = QMimeData()
        mime.setText(f"{MIME_PREFIX}{task_id}")
        drag = QDrag(self)
        drag.setMimeData(mime)
        drag.exec(Qt.MoveAction)

    def dragEnterEvent(self, event) -> None:  # type: ignore[override]
        if _task_id_from_mime(event.mimeData()) is not None:
            event.acceptProposedAction()

    def dragMoveEvent(self, event) -> None:  # type: ignore[override]
        task_id = _task_id_from_mime(event.mimeData())
        if task_id is None:
            return
        pos = event.position().toPoint() if hasattr(event, "position") else event.pos()
        if self._can_drop and not self._can_drop(task_id, self.category, self._anchor_at(pos)):
            event.ignore()
            return
        event.acceptProposedAction()

    def dropEvent(self, event) -> None:  # type: ignore[override]
        task_id = _task_id_from_mime(event.mimeData())
        if task_id is None:
            return
        pos = event.position().toPoint() if hasattr(event, "position") else event.pos()
        event.acceptProposedAction()
        self._on_drop(task_id, self.category, self._anchor_at(pos))

    def _anchor_at(self, pos: QPoint) -> str | None:
        item = self.itemAt(pos)
        if item is None:
            return None
        row = self.row(item)
        # Lower half of a card means "after it", i.e. before the next card.
        if pos.y() > self.visualItemRect(item).center().y():
            row += 1
        return self.task_id_at(row)
