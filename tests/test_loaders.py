from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest

from loaders import (
    DataLoadError,
    parse_borders_line,
    read_borders,
    read_distances,
    read_state_ids,
)


def test_parse_borders_line_strips_lengths() -> None:
    record = parse_borders_line("France = Spain 623 km; Belgium 620 km; Andorra 55 km\n")

    assert record == ("France", ["Spain", "Belgium", "Andorra"])


def test_parse_borders_line_handles_empty_and_blank_records() -> None:
    assert parse_borders_line("Iceland =\n") == ("Iceland", [])
    assert parse_borders_line("Chile = Peru 168 km; ") == ("Chile", ["Peru"])
    assert parse_borders_line("   \n") is None


def test_parse_borders_line_keeps_punctuation_in_names() -> None:
    record = parse_borders_line(
        "Zambia = Congo, Democratic Republic of the 2332 km; Cote d'Ivoire 3 km"
    )

    assert record == ("Zambia", ["Congo, Democratic Republic of the", "Cote d'Ivoire"])


def test_parse_borders_line_requires_separator() -> None:
    with pytest.raises(ValueError):
        parse_borders_line("France Spain 623 km")


def test_read_borders(data_files: Tuple[Path, Path, Path]) -> None:
    borders = read_borders(data_files[0])

    assert len(borders) == 7
    assert borders["Germany"] == ["France", "Belgium"]
    assert borders["Iceland"] == []


def test_read_borders_reports_bad_line(tmp_path: Path) -> None:
    path = tmp_path / "borders.txt"
    path.write_text("France = Spain 623 km\nnonsense\n", encoding="utf-8")

    with pytest.raises(DataLoadError, match=":2:"):
        read_borders(path)


def test_read_distances_skips_header(data_files: Tuple[Path, Path, Path]) -> None:
    distances = read_distances(data_files[1])

    assert len(distances) == 6
    assert distances[("220", "230")] == 1054
    assert ("230", "220") not in distances
    assert ("numa", "numb") not in distances


def test_read_distances_last_row_wins(tmp_path: Path) -> None:
    path = tmp_path / "capdist.csv"
    path.write_text(
        "numa,ida,numb,idb,kmdist,midist\n2,USA,20,CAN,731,454\n2,USA,20,CAN,800,497\n",
        encoding="utf-8",
    )

    assert read_distances(path) == {("2", "20"): 800}


def test_read_distances_rejects_non_integer(tmp_path: Path) -> None:
    path = tmp_path / "capdist.csv"
    path.write_text("numa,ida,numb,idb,kmdist,midist\n2,USA,20,CAN,far,454\n", encoding="utf-8")

    with pytest.raises(DataLoadError):
        read_distances(path)


def test_read_distances_requires_five_columns(tmp_path: Path) -> None:
    path = tmp_path / "capdist.csv"
    path.write_text("numa,ida,numb\n2,USA,20\n", encoding="utf-8")

    with pytest.raises(DataLoadError):
        read_distances(path)


@pytest.mark.parametrize("reader", [read_borders, read_distances, read_state_ids])
def test_missing_file_raises(tmp_path: Path, reader) -> None:
    with pytest.raises(DataLoadError):
        reader(tmp_path / "does-not-exist")


def test_read_state_ids_keeps_current_records(data_files: Tuple[Path, Path, Path]) -> None:
    state_ids = read_state_ids(data_files[2])

    assert state_ids["German Federal Republic"] == "260"
    assert "Germany" not in state_ids
    assert "countryname" not in state_ids
    assert len(state_ids) == 6


def test_read_state_ids_last_record_wins(tmp_path: Path) -> None:
    path = tmp_path / "state_name.tsv"
    path.write_text(
        "1\tAAA\tAtlantis\t1900-01-01\t2020-12-31\n"
        "2\tAAB\tAtlantis\t1950-01-01\t2020-12-31\n",
        encoding="utf-8",
    )

    assert read_state_ids(path) == {"Atlantis": "2"}


def test_read_state_ids_uses_reference_date(data_files: Tuple[Path, Path, Path]) -> None:
    state_ids = read_state_ids(data_files[2], reference_date="1945-05-08")

    assert state_ids == {"Germany": "255"}


def test_read_distances_ignores_extra_fields(tmp_path: Path) -> None:
    path = tmp_path / "capdist.csv"
    path.write_text(
        "numa,ida,numb,idb,kmdist\n"
        "220,FRN,230,SPN,1054,655\n"
        "235,POR,230,SPN,503,313,extra\n",
        encoding="utf-8",
    )

    assert read_distances(path) == {("220", "230"): 1054, ("235", "230"): 503}


def test_read_state_ids_ignores_extra_fields(tmp_path: Path) -> None:
    path = tmp_path / "state_name.tsv"
    path.write_text(
        "220\tFRN\tFrance\t1816-01-01\t2020-12-31\n"
        "230\tSPN\tSpain\t1816-01-01\t2020-12-31\tnote\n",
        encoding="utf-8",
    )

    assert read_state_ids(path) == {"France": "220", "Spain": "230"}


@pytest.mark.parametrize("content", ["", "numa,ida,numb,idb,kmdist,midist\n"])
def test_read_distances_empty_file_gives_empty_table(tmp_path: Path, content: str) -> None:
    path = tmp_path / "capdist.csv"
    path.write_text(content, encoding="utf-8")

    assert read_distances(path) == {}


def test_read_state_ids_empty_file_gives_empty_table(tmp_path: Path) -> None:
    path = tmp_path / "state_name.tsv"
    path.write_text("", encoding="utf-8")

    assert read_state_ids(path) == {}
