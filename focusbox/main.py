from __future__ import annotations

"""Entry point: wires the session controller, dispatcher and Qt windows."""

import logging
import sys
from typing import Optional

import typer
from PyQt6.QtWidgets import QApplication

from focusbox.core.config import AppConfig
from focusbox.core.dispatcher import EventDispatcher
from focusbox.core.session import SessionController
from focusbox.ui.config_window import ConfigWindow
from focusbox.ui.styles import apply_theme
from focusbox.ui.ticker import QtTickSource
from focusbox.ui.time_window import TimeWindow


cli = typer.Typer(add_completion=False, help="Floating countdown timer for time-boxed tasks.")


def launch(config: AppConfig) -> int:
    """Builds the windows around one dispatcher and runs the Qt event loop."""
    app = QApplication(sys.argv[:1])
    apply_theme(app)

    controller = SessionController(
        warning_ratio=config.warning_ratio,
        critical_ratio=config.critical_ratio,
    )
    dispatcher = EventDispatcher(
        controller,
        QtTickSource(app),
        tick_interval_ms=config.tick_interval_ms,
    )
    config_window = ConfigWindow(dispatcher.post, config)
    time_window = TimeWindow(dispatcher.post, config)
    dispatcher.attach(config_window, time_window)

    config_window.show()
    return app.exec()


@cli.command()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    project: Optional[str] = typer.Option(None, "--project", help="Pre-filled project name."),
    task: Optional[str] = typer.Option(None, "--task", help="Pre-filled task description."),
    duration: Optional[str] = typer.Option(
        None,
        "--duration",
        help="Pre-filled duration, e.g. 25m, 90s, 1h or plain seconds.",
    ),
    tick_ms: Optional[int] = typer.Option(
        None,
        "--tick-ms",
        min=10,
        help="Countdown refresh interval in milliseconds.",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    config = AppConfig().with_overrides(
        project=project,
        task=task,
        duration=duration,
        tick_interval_ms=tick_ms,
    )
    raise typer.Exit(code=launch(config))


def run() -> None:
    cli()


if __name__ == "__main__":
    run()
