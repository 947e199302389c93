"""Tests for OpenLocationCodeAdapter against the real openlocationcode library."""

from __future__ import annotations

import logging
import math

import pytest

from domain.ubid.errors import GridCodeError
from domain.ubid.value_objects import GridCell
from infrastructure.olc import OpenLocationCodeAdapter

# Cell size of a 10-digit (pair) Open Location Code, in degrees
PAIR_CELL_DEG = 0.000125


def test_grammar_constants():
    adapter = OpenLocationCodeAdapter()

    assert adapter.separator == "+"
    assert adapter.code_alphabet == "23456789CFGHJMPQRVWX"
    assert adapter.pair_code_length == 10


def test_encode_pair_length_layout():
    code = OpenLocationCodeAdapter().encode(47.645, -122.135, 10)

    assert len(code) == 11
    assert code.index("+") == 8


def test_decode_returns_cell_containing_point():
    adapter = OpenLocationCodeAdapter()

    cell = adapter.decode(adapter.encode(47.6451, -122.1352, 10))

    assert isinstance(cell, GridCell)
    assert cell.south_latitude <= 47.6451 < cell.north_latitude
    assert cell.west_longitude <= -122.1352 < cell.east_longitude
    assert cell.height == pytest.approx(PAIR_CELL_DEG)
    assert cell.width == pytest.approx(PAIR_CELL_DEG)
    assert cell.latitude_center == pytest.approx(
        (cell.north_latitude + cell.south_latitude) / 2
    )
    assert cell.longitude_center == pytest.approx(
        (cell.east_longitude + cell.west_longitude) / 2
    )
    assert cell.code_length == 10


def test_decode_code_length_follows_precision():
    adapter = OpenLocationCodeAdapter()

    cell = adapter.decode(adapter.encode(47.645, -122.135, 8))

    assert cell.code_length == 8
    assert cell.height == pytest.approx(PAIR_CELL_DEG * 20)


@pytest.mark.parametrize("code_length", [1, 3, 5, 7, 9])
def test_encode_unsupported_code_length_raises(code_length):
    with pytest.raises(GridCodeError) as excinfo:
        OpenLocationCodeAdapter().encode(47.645, -122.135, code_length)

    assert excinfo.value.value == (47.645, -122.135, code_length)
    assert isinstance(excinfo.value.__cause__, ValueError)


@pytest.mark.parametrize(
    ("latitude", "longitude"),
    [(math.nan, 0.0), (0.0, math.inf), ("47.6", -122.1), (None, 0.0)],
)
def test_encode_non_numeric_coordinates_raise(latitude, longitude):
    with pytest.raises(GridCodeError):
        OpenLocationCodeAdapter().encode(latitude, longitude, 10)


@pytest.mark.parametrize(
    "code",
    [
        "",
        "invalid+chars",
        "QJQ6+25",  # short code: valid but not decodable
        "849VQJQ6",  # missing separator
    ],
)
def test_decode_invalid_code_raises(code):
    with pytest.raises(GridCodeError) as excinfo:
        OpenLocationCodeAdapter().decode(code)

    assert excinfo.value.value == code


def test_decode_rejection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="infrastructure.olc.olc_adapter"):
        with pytest.raises(GridCodeError):
            OpenLocationCodeAdapter().decode("invalid+chars")

    assert any("OLC decode rejected" in r.message for r in caplog.records)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("849VQJQ6+25", True),
        ("849VQJQ6+", True),
        ("QJQ6+25", True),  # short codes are valid
        ("849VQJQ6+2I", False),
        ("849VQ+25", False),  # odd separator position
        ("invalid+chars", False),
        ("", False),
    ],
)
def test_is_valid(code, expected):
    assert OpenLocationCodeAdapter().is_valid(code) is expected
