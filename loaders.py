"""Readers for the three country data files.

* borders:    ``Country = Neighbour 123 km; Other 45 km``
* capdist:    CSV with a header row; columns 1 and 3 hold the two state
  numbers, column 5 the capital-to-capital distance in km.
* state_name: TSV without a header; column 1 holds the state number,
  column 3 the country name and column 5 the end date of the record.
"""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd


logger = logging.getLogger(__name__)

REFERENCE_DATE = "2020-12-31"

_DIGITS = re.compile(r"\d+")

DistanceTable = Dict[Tuple[str, str], int]


class DataLoadError(RuntimeError):
    """Raised when one of the data files cannot be read or parsed."""


def parse_borders_line(line: str) -> Tuple[str, List[str]] | None:
    """Split one borders record into the country and its neighbour names.

    Returns None for blank lines. Each neighbour token is cut at its first
    run of digits, so ``"Spain 623 km"`` becomes ``"Spain"``.
    """
    if not line.strip():
        return None
    country, separator, rest = line.partition("=")
    if not separator:
        raise ValueError(f"Missing '=' in borders record: {line.strip()!r}")

    neighbors: List[str] = []
    for token in rest.split(";"):
        name = _DIGITS.split(token, maxsplit=1)[0].strip()
        if name:
            neighbors.append(name)
    return country.strip(), neighbors


def read_borders(path: Path) -> Dict[str, List[str]]:
    borders: Dict[str, List[str]] = {}
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                try:
                    record = parse_borders_line(line)
                except ValueError as exc:
                    raise DataLoadError(f"{path}:{line_number}: {exc}") from exc
                if record is None:
                    continue
                country, neighbors = record
                borders[country] = neighbors
    except OSError as exc:
        raise DataLoadError(f"Error reading borders file: {path}") from exc

    logger.info("Loaded borders for %d countries from %s", len(borders), path)
    return borders


def _read_table(path: Path, sep: str = ",", skiprows: int = 0) -> pd.DataFrame:
    """Read the first five fields of every row; extra trailing fields are ignored."""
    try:
        frame = pd.read_csv(
            path,
            sep=sep,
            header=None,
            skiprows=skiprows,
            usecols=range(5),
            index_col=False,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
        )
    except FileNotFoundError as exc:
        raise DataLoadError(f"File not found: {path}") from exc
    except pd.errors.EmptyDataError:
        logger.warning("No rows in %s", path)
        return pd.DataFrame(columns=range(5), dtype=str)
    except (OSError, ValueError) as exc:
        raise DataLoadError(f"Error reading file: {path}") from exc

    if len(frame.columns) < 5:
        raise DataLoadError(
            f"Expected at least 5 columns in {path}, found {len(frame.columns)}."
        )
    # Short rows come back as NaN even with keep_default_na off.
    return frame.fillna("")


def read_distances(path: Path) -> DistanceTable:
    frame = _read_table(path, skiprows=1)

    distances: DistanceTable = {}
    for row in frame.itertuples(index=False):
        first = row[0].strip()
        second = row[2].strip()
        try:
            distance = int(row[4].strip())
        except ValueError as exc:
            raise DataLoadError(
                f"Error parsing distance {row[4]!r} for {first}-{second} in {path}"
            ) from exc
        distances[(first, second)] = distance

    logger.info("Loaded %d capital distances from %s", len(distances), path)
    return distances


def read_state_ids(path: Path, reference_date: str = REFERENCE_DATE) -> Dict[str, str]:
    """Map country name -> state id for records valid on reference_date."""
    frame = _read_table(path, sep="\t")

    state_ids: Dict[str, str] = {}
    for row in frame.itertuples(index=False):
        if row[4].strip() != reference_date:
            continue
        state_ids[row[2].strip()] = row[0].strip()

    logger.info(
        "Loaded %d state ids valid on %s from %s", len(state_ids), reference_date, path
    )
    return state_ids
