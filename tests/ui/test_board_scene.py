"""Tests for BoardScene drawing, orientation and drag-and-drop wiring."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PyQt6.QtCore import QPointF

from chessboard.core.enums import MoveOutcome
from chessboard.core.notation import STARTING_LAYOUT
from chessboard.ui.board.board_scene import BoardScene
from chessboard.widget.controller import BoardController
from chessboard.widget.interfaces import SNAPBACK


def _center(scene: BoardScene, square: str) -> QPointF:
    half = scene.TILE / 2
    corner = scene._square_pos(square)
    return QPointF(corner.x() + half, corner.y() + half)


def _drag(scene: BoardScene, source: str, target: QPointF) -> list[tuple[str, str, str]]:
    """Pick up *source*, move the item to *target* and release it there."""
    results: list[tuple[str, str, str]] = []
    scene.drop_finished.connect(lambda s, t, o: results.append((s, t, o)))
    assert scene.begin_drag(source)
    scene._piece_items[source].setPos(target)
    scene.finish_drop(scene._pos_to_square(target))
    return results


def test_pos_to_square_respects_orientation() -> None:
    ctrl = BoardController()
    scene = BoardScene(ctrl)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "a8"

    ctrl.set_orientation("black")
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "h1"


def test_pos_outside_board_is_none() -> None:
    scene = BoardScene(BoardController())
    assert scene._pos_to_square(QPointF(-5, 10)) is None
    assert scene._pos_to_square(QPointF(10, 8 * scene.TILE + 1)) is None


def test_squares_tagged_with_names() -> None:
    ctrl = BoardController()
    scene = BoardScene(ctrl)
    names = scene.square_names()
    assert len(names) == 64
    assert names[0] == "a8"
    assert scene._square_items["e4"].data(0) == "e4"

    ctrl.flip()
    assert scene.square_names()[0] == "h1"


def test_square_colours_alternate() -> None:
    scene = BoardScene(BoardController())
    a8 = scene._square_items["a8"].brush().color()
    b8 = scene._square_items["b8"].brush().color()
    assert a8 == scene._theme.light_square
    assert b8 == scene._theme.dark_square


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene(BoardController())
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_show_coordinates_config_respected() -> None:
    scene = BoardScene(BoardController(show_coordinates=False))
    assert all(not item.isVisible() for item in scene._coord_items)


def test_render_syncs_piece_items() -> None:
    ctrl = BoardController()
    scene = BoardScene(ctrl)
    assert len(scene._piece_items) == 32

    ctrl.set_position("8/8/8/3k4/8/8/8/4K3")
    assert sorted(scene._piece_items) == ["d5", "e1"]


def test_piece_items_relabelled_on_flip() -> None:
    ctrl = BoardController(position="k7/8/8/8/8/8/8/8")
    scene = BoardScene(ctrl)
    assert list(scene._piece_items) == ["a8"]

    ctrl.flip()
    assert list(scene._piece_items) == ["h1"]


def test_missing_piece_image_falls_back_to_glyph(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    theme = str(tmp_path / "{piece}.svg")
    ctrl = BoardController(position="8/8/8/8/8/8/8/4K3", piece_theme=theme)
    with caplog.at_level(logging.WARNING, logger="chessboard.ui.resources"):
        scene = BoardScene(ctrl)

    item = scene._piece_items["e1"]
    assert not item.has_image
    assert "wK.svg" in caplog.text


def test_drag_and_drop_accepted() -> None:
    ctrl = BoardController()
    scene = BoardScene(ctrl)

    results = _drag(scene, "e2", _center(scene, "e4"))

    assert results == [("e2", "e4", "accepted")]
    assert "e4" in scene._piece_items
    assert "e2" not in scene._piece_items
    assert ctrl.get_notation() == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"


def test_drag_and_drop_rejected_snaps_back() -> None:
    ctrl = BoardController(on_drop=lambda s, t: SNAPBACK)
    scene = BoardScene(ctrl)
    item = scene._piece_items["e2"]
    origin = item.pos()

    results = _drag(scene, "e2", _center(scene, "e4"))

    assert results == [("e2", "e4", "rejected")]
    assert scene._piece_items["e2"] is item
    assert item.pos() == origin
    assert ctrl.get_notation() == STARTING_LAYOUT


def test_drop_outside_board_ignored() -> None:
    ctrl = BoardController()
    scene = BoardScene(ctrl)

    results = _drag(scene, "e2", QPointF(-40, -40))

    assert results == [("e2", "", str(MoveOutcome.IGNORED))]
    assert ctrl.get_notation() == STARTING_LAYOUT


def test_empty_square_does_not_start_drag() -> None:
    scene = BoardScene(BoardController())
    assert not scene.begin_drag("e4")
    assert scene._dragging_item is None


def test_not_draggable_does_not_start_drag() -> None:
    scene = BoardScene(BoardController(draggable=False))
    assert not scene.begin_drag("e2")
    assert scene._dragging_item is None


def test_begin_drag_highlights_origin() -> None:
    scene = BoardScene(BoardController())
    assert scene.begin_drag("e2")
    assert scene._origin_highlight is not None

    scene.finish_drop("e2")
    assert scene._origin_highlight is None


def test_finish_drop_without_drag_is_noop() -> None:
    scene = BoardScene(BoardController())
    assert scene.finish_drop("e4") is None


def test_cancel_drop_restores_piece_without_drop() -> None:
    ctrl = BoardController()
    scene = BoardScene(ctrl)
    results: list[tuple[str, str, str]] = []
    scene.drop_finished.connect(lambda s, t, o: results.append((s, t, o)))
    item = scene._piece_items["e2"]
    origin = item.pos()

    assert scene.begin_drag("e2")
    item.setPos(_center(scene, "e4"))
    scene.cancel_drop()

    assert results == []
    assert item.pos() == origin
    assert scene._dragging_item is None
    assert scene._origin_highlight is None
    assert ctrl.get_notation() == STARTING_LAYOUT


def test_cancel_drop_without_drag_is_noop() -> None:
    scene = BoardScene(BoardController())
    scene.cancel_drop()
    assert scene._dragging_item is None


def test_default_theme_missing_images_logged_at_debug(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    from chessboard.ui import resources

    monkeypatch.setattr(resources, "_renderers", {})
    with caplog.at_level(logging.DEBUG, logger="chessboard.ui.resources"):
        scene = BoardScene(BoardController(position="8/8/8/8/8/8/8/4K3"))

    assert not scene._piece_items["e1"].has_image
    records = [r for r in caplog.records if r.name == "chessboard.ui.resources"]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)
