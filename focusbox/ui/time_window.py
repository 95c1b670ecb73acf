from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QAction, QFont, QKeySequence, QMouseEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from focusbox.core.config import AppConfig
from focusbox.core.events import (
    DistractionRequested,
    DurationAdjustRequested,
    Intent,
    PauseToggleRequested,
)
from focusbox.core.session import SessionSnapshot, TaskDefinition
from focusbox.core.urgency import UrgencyTier
from focusbox.ui.styles import PAUSE_FONT_SIZE, PAUSED_FONT_SIZE, tier_stylesheet


def step_label(seconds: int) -> str:
    sign = "+" if seconds > 0 else "-"
    amount = abs(seconds)
    if amount % 60 == 0:
        return f"{sign}{amount // 60}m"
    return f"{sign}{amount}s"


class TimeWindow(QWidget):
    """Frameless always-on-top countdown that can be dragged from anywhere."""

    def __init__(self, post: Callable[[Intent], None], config: AppConfig) -> None:
        super().__init__(
            None,
            Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint | Qt.WindowType.Tool,
        )
        self.setObjectName("TimeWindow")
        self.setWindowTitle("Time Window")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        geometry = config.session_geometry
        self.setGeometry(geometry.x, geometry.y, geometry.width, geometry.height)

        self._post = post
        self._tier: UrgencyTier | None = None
        self._paused: bool | None = None
        self._drag_offset: QPoint | None = None

        self._build_ui(config.adjust_steps)

    def _build_ui(self, adjust_steps: tuple[int, ...]) -> None:
        layout = QVBoxLayout(self)

        self.project_label = QLabel("Project")
        self.project_label.setObjectName("ProjectLabel")
        self.project_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.project_label.setWordWrap(True)
        self.project_label.setFixedHeight(40)

        self.task_label = QLabel("Task")
        self.task_label.setObjectName("TaskLabel")
        self.task_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.task_label.setWordWrap(True)
        self.task_label.setFixedHeight(80)

        self.pause_btn = QPushButton("Time")
        self.pause_btn.setObjectName("PauseButton")
        self.pause_btn.clicked.connect(lambda: self._post(PauseToggleRequested()))

        layout.addWidget(self.project_label)
        layout.addWidget(self.task_label)
        layout.addWidget(self.pause_btn, 1)

        adjust_row = QHBoxLayout()
        self.adjust_buttons: list[QPushButton] = []
        for seconds in adjust_steps:
            button = QPushButton(step_label(seconds))
            button.setFixedHeight(40)
            button.clicked.connect(lambda _checked=False, s=seconds: self._post(DurationAdjustRequested(float(s))))
            adjust_row.addWidget(button)
            self.adjust_buttons.append(button)
        layout.addLayout(adjust_row)

        distraction_row = QHBoxLayout()
        self.distractions_label = QLabel("Distractions: 0")
        self.distractions_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.distraction_btn = QPushButton("+")
        self.distraction_btn.setFixedSize(80, 40)
        self.distraction_btn.clicked.connect(lambda: self._post(DistractionRequested()))
        distraction_row.addWidget(self.distractions_label, 1)
        distraction_row.addWidget(self.distraction_btn)
        layout.addLayout(distraction_row)

        # Escape abandons the session; the next tick sees the window hidden.
        escape_action = QAction(self)
        escape_action.setShortcut(QKeySequence(Qt.Key.Key_Escape))
        escape_action.triggered.connect(self.hide)
        self.addAction(escape_action)

    def present(self, task: TaskDefinition) -> None:
        self.project_label.setText(task.project)
        self.task_label.setText(task.description)
        self._tier = None
        self._paused = None
        self.show()
        self.raise_()

    def dismiss(self) -> None:
        self.hide()

    def is_visible(self) -> bool:
        return self.isVisible()

    def display(self, snapshot: SessionSnapshot) -> None:
        self.pause_btn.setText(snapshot.label_text)
        self.distractions_label.setText(f"Distractions: {snapshot.distraction_count}")

        if snapshot.is_paused != self._paused:
            self._paused = snapshot.is_paused
            font = QFont(self.pause_btn.font())
            font.setBold(True)
            font.setPixelSize(PAUSED_FONT_SIZE if snapshot.is_paused else PAUSE_FONT_SIZE)
            self.pause_btn.setFont(font)

        if snapshot.urgency != self._tier:
            self._tier = snapshot.urgency
            self.setStyleSheet(tier_stylesheet(snapshot.urgency))

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_offset = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if self._drag_offset is not None and event.buttons() & Qt.MouseButton.LeftButton:
            self.move(event.globalPosition().toPoint() - self._drag_offset)
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        self._drag_offset = None
        super().mouseReleaseEvent(event)
