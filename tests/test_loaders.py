from __future__ import annotations

import json
import logging

import pytest

from pallet_optimizer.errors import InvalidInputError
from pallet_optimizer.io.loaders import color_for, expand_boxes, load_boxes_csv, load_input
from pallet_optimizer.io.schemas import BoxEntrySchema
from pallet_optimizer.pallets import PALLET_PRESETS_CM, get_pallet


def test_expand_boxes_quantity_and_generated_ids() -> None:
    entries = [
        BoxEntrySchema(id="A", length=40, width=30, height=20, weight=10, quantity=3),
        BoxEntrySchema(length=10, width=10, height=10, weight=1, color="#123456"),
    ]

    boxes = expand_boxes(entries)

    assert [b.id for b in boxes] == ["A-001", "A-002", "A-003", "box-2"]
    assert boxes[3].color == "#123456"
    assert boxes[0].color == color_for("A-001")


def test_color_for_is_stable_hex() -> None:
    color = color_for("box-1")

    assert color == color_for("box-1")
    assert color.startswith("#") and len(color) == 7
    int(color[1:], 16)


def test_load_boxes_csv_skips_invalid_rows(tmp_path, caplog) -> None:
    path = tmp_path / "boxes.csv"
    path.write_text(
        "name,length,width,height,weight\n"
        "Crate,40,30,20,10\n"
        "Broken,-5,30,20,10\n"
        "Drum,60,60,90,35\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        entries = load_boxes_csv(path)

    assert [e.name for e in entries] == ["Crate", "Drum"]
    assert "line 3" in caplog.text


def test_load_boxes_csv_without_valid_rows(tmp_path) -> None:
    path = tmp_path / "boxes.csv"
    path.write_text("name,length,width,height,weight\nBroken,0,0,0,0\n", encoding="utf-8")

    with pytest.raises(InvalidInputError):
        load_boxes_csv(path)


def test_load_boxes_csv_with_excel_bom(tmp_path) -> None:
    path = tmp_path / "boxes.csv"
    path.write_text("\ufefflength,width,height,weight,name\n40,30,20,10,Crate\n", encoding="utf-8")

    entries = load_boxes_csv(path)

    assert [(e.name, e.length) for e in entries] == [("Crate", 40)]


def test_load_boxes_csv_ids_follow_row_numbers(tmp_path) -> None:
    path = tmp_path / "boxes.csv"
    path.write_text(
        "name,length,width,height,weight\n"
        "Broken,-5,30,20,10\n"
        "Crate,40,30,20,10\n"
        "Drum,60,60,90,35\n",
        encoding="utf-8",
    )

    boxes = expand_boxes(load_boxes_csv(path))

    assert [b.id for b in boxes] == ["box-2", "box-3"]


def test_load_boxes_csv_reports_physical_line(tmp_path, caplog) -> None:
    path = tmp_path / "boxes.csv"
    path.write_text(
        "name,length,width,height,weight\n"
        "\"Crate\nlarge\",40,30,20,10\n"
        "\n"
        "Broken,-5,30,20,10\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        entries = load_boxes_csv(path)

    assert [e.name for e in entries] == ["Crate\nlarge"]
    assert "line 5" in caplog.text


def test_load_input_csv(tmp_path) -> None:
    path = tmp_path / "boxes.csv"
    path.write_text("id,name,length,width,height,weight,quantity\nP,Pail,30,30,40,12,2\n", encoding="utf-8")

    boxes, pallet = load_input(path)

    assert [b.id for b in boxes] == ["P-001", "P-002"]
    assert boxes[0].name == "Pail"
    assert pallet is None


def test_load_input_json_with_preset(tmp_path) -> None:
    path = tmp_path / "load.json"
    path.write_text(json.dumps({
        "pallet_preset": "eur2",
        "boxes": [{"id": "A", "length": 40, "width": 30, "height": 20, "weight": 10}],
    }), encoding="utf-8")

    boxes, pallet = load_input(path)

    assert [b.id for b in boxes] == ["A"]
    assert (pallet.length, pallet.width, pallet.max_height) == (120, 100, 200)


def test_load_input_json_explicit_pallet_wins(tmp_path) -> None:
    path = tmp_path / "load.json"
    path.write_text(json.dumps({
        "pallet_preset": "EUR",
        "pallet": {"length": 100, "width": 50, "max_height": 80},
        "boxes": [],
    }), encoding="utf-8")

    boxes, pallet = load_input(path)

    assert boxes == []
    assert (pallet.length, pallet.width, pallet.max_height) == (100, 50, 80)


def test_load_input_json_bare_list(tmp_path) -> None:
    path = tmp_path / "load.json"
    path.write_text(json.dumps([{"length": 1, "width": 2, "height": 3, "weight": 4}]), encoding="utf-8")

    boxes, pallet = load_input(path)

    assert [b.id for b in boxes] == ["box-1"]
    assert pallet is None


@pytest.mark.parametrize(
    "name, content",
    [
        ("load.json", "{not json"),
        ("load.json", json.dumps({"boxes": [{"length": 1}]})),
        ("load.txt", "anything"),
    ],
)
def test_load_input_errors(tmp_path, name: str, content: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidInputError):
        load_input(path)


def test_load_input_missing_file(tmp_path) -> None:
    with pytest.raises(InvalidInputError):
        load_input(tmp_path / "missing.csv")


def test_get_pallet() -> None:
    pallet = get_pallet(" eur ")

    assert (pallet.length, pallet.width, pallet.max_height) == (120, 80, 200)
    assert get_pallet("EUR6", max_height=120).max_height == 120
    assert set(PALLET_PRESETS_CM) >= {"EUR", "EUR2", "US"}


def test_get_pallet_unknown() -> None:
    with pytest.raises(InvalidInputError, match="Unknown pallet preset"):
        get_pallet("XL")
