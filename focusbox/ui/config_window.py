from __future__ import annotations

from typing import Callable

from PyQt6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from focusbox.core.config import AppConfig
from focusbox.core.events import Intent, NewTaskRequested
from focusbox.core.parsing import parse_duration
from focusbox.core.session import TaskDefinition


class ConfigWindow(QWidget):
    """Collects project, task and duration for the next session."""

    def __init__(self, post: Callable[[Intent], None], config: AppConfig) -> None:
        super().__init__()
        self.setObjectName("ConfigWindow")
        self.setWindowTitle("Configure your task")
        geometry = config.config_geometry
        self.setGeometry(geometry.x, geometry.y, geometry.width, geometry.height)

        self._post = post
        self._build_ui(config)

    def _build_ui(self, config: AppConfig) -> None:
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.project_edit = QLineEdit(config.default_project)
        self.task_edit = QPlainTextEdit(config.default_task)
        self.time_edit = QLineEdit(config.default_duration)
        self.time_edit.setPlaceholderText("25m, 90s, 1h or seconds")

        form.addRow("Project", self.project_edit)
        form.addRow("Task", self.task_edit)
        form.addRow("Time", self.time_edit)
        layout.addLayout(form, 1)

        self.error_label = QLabel("")
        self.error_label.setObjectName("ErrorLabel")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        row = QHBoxLayout()
        self.start_btn = QPushButton("Start")
        self.start_btn.setObjectName("StartButton")
        row.addStretch()
        row.addWidget(self.start_btn)
        row.addStretch()
        layout.addLayout(row)

        self.start_btn.clicked.connect(lambda: self._post(NewTaskRequested()))
        self.time_edit.returnPressed.connect(lambda: self._post(NewTaskRequested()))

    def read_task(self) -> TaskDefinition:
        seconds = parse_duration(self.time_edit.text().strip())
        return TaskDefinition(
            project=self.project_edit.text(),
            description=self.task_edit.toPlainText(),
            duration_seconds=seconds,
        )

    def show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.show()
        self.time_edit.setFocus()
        self.time_edit.selectAll()

    def show(self) -> None:
        self.error_label.clear()
        self.error_label.hide()
        super().show()
        self.raise_()
        self.activateWindow()
