"""Qt application bootstrap for the demo board."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from chessboard.core.enums import MoveOutcome, Orientation
from chessboard.core.notation import is_valid_notation
from chessboard.widget.config import START

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication, QWidget

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessboard-demo", description="Drag-and-drop chessboard demo."
    )
    parser.add_argument(
        "--position", default=START, help="'start' or board notation (default: start)"
    )
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=Orientation.WHITE.value,
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _log_drop(source: str, target: str, outcome: MoveOutcome) -> None:
    _LOGGER.info("%s -> %s (%s)", source, target, outcome)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("Chessboard")
    app.setStyle("Fusion")


def build_window(position: str = START, orientation: str = "white") -> QWidget:
    """Main window hosting one board with a flip button."""
    from PyQt6.QtWidgets import QPushButton, QVBoxLayout, QWidget

    from chessboard.ui.widget import create_board

    window = QWidget()
    window.setWindowTitle("Chessboard")
    layout = QVBoxLayout(window)

    board = create_board(layout, position=position, orientation=orientation)
    board.controller.events.on_drop_finished.append(_log_drop)
    board.controller.events.on_change.append(
        lambda notation: _LOGGER.info("Position: %s", notation)
    )

    flip = QPushButton("Flip board", window)
    flip.clicked.connect(board.controller.flip)
    layout.addWidget(flip)
    return window


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the demo Qt application."""
    from PyQt6.QtWidgets import QApplication

    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not is_valid_notation(args.position) and args.position != START:
        parser.error(f"invalid board notation: {args.position!r}")

    app = QApplication(sys.argv[:1])
    _configure_application(app)

    window = build_window(args.position, args.orientation)
    window.show()

    return app.exec()
