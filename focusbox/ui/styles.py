from __future__ import annotations

from PyQt6.QtWidgets import QApplication

from focusbox.core.urgency import UrgencyTier


THEME_QSS = """
QWidget {
    color: #2f2a26;
}

QWidget#ConfigWindow {
    background: #f4f1ee;
}

QLabel#ProjectLabel {
    font-size: 20px;
    font-weight: 700;
    color: #008000;
}

QLabel#TaskLabel {
    font-size: 32px;
    font-weight: 700;
    color: #ff0000;
}

QLabel#ErrorLabel {
    color: #c62828;
}

QPushButton#PauseButton {
    color: #0000ff;
}

QPushButton#StartButton {
    background: #eb8f60;
    color: #ffffff;
    border: none;
    border-radius: 16px;
    padding: 8px 24px;
    font-weight: 600;
}

QPushButton#StartButton:hover {
    background: #de8050;
}

QLineEdit, QPlainTextEdit {
    background: #fff7f1;
    border: none;
    border-radius: 8px;
    padding: 4px 8px;
}
"""

# Normal keeps the theme default background.
TIER_COLORS: dict[UrgencyTier, str | None] = {
    UrgencyTier.NORMAL: None,
    UrgencyTier.WARNING: "#ffff00",
    UrgencyTier.CRITICAL: "#ffa500",
}

PAUSE_FONT_SIZE = 40
PAUSED_FONT_SIZE = 32


def tier_stylesheet(tier: UrgencyTier) -> str:
    color = TIER_COLORS[tier]
    if color is None:
        return ""
    return f"QWidget#TimeWindow, QPushButton#PauseButton {{ background: {color}; }}"


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
