from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest

from aliases import AliasTable
from roadtrip import RoadTrip


BORDERS = """\
France = Spain 623 km; Belgium 620 km; Germany 451 km; Andorra 55 km
Spain = France 623 km; Portugal 1214 km; Andorra 63 km
Portugal = Spain 1214 km

Belgium = France 620 km; Germany 133 km
Germany = France 451 km; Belgium 133 km
Andorra = France 55 km; Spain 63 km
Iceland =
"""

CAPDIST = """\
numa,ida,numb,idb,kmdist,midist
220,FRN,230,SPN,1054,655
235,POR,230,SPN,503,313
211,BEL,220,FRN,262,163
211,BEL,260,GFR,489,304
260,GFR,220,FRN,878,546
395,ICE,220,FRN,2237,1390
"""

STATE_NAME = (
    "statenumber\tstateid\tcountryname\tstart\tend\n"
    "220\tFRN\tFrance\t1816-01-01\t2020-12-31\n"
    "230\tSPN\tSpain\t1816-01-01\t2020-12-31\n"
    "235\tPOR\tPortugal\t1816-01-01\t2020-12-31\n"
    "211\tBEL\tBelgium\t1830-01-01\t2020-12-31\n"
    "255\tGMY\tGermany\t1816-01-01\t1945-05-08\n"
    "260\tGFR\tGerman Federal Republic\t1955-05-05\t2020-12-31\n"
    "395\tICE\tIceland\t1944-06-17\t2020-12-31\n"
)


@pytest.fixture
def data_files(tmp_path: Path) -> Tuple[Path, Path, Path]:
    borders = tmp_path / "borders.txt"
    capdist = tmp_path / "capdist.csv"
    state_name = tmp_path / "state_name.tsv"
    borders.write_text(BORDERS, encoding="utf-8")
    capdist.write_text(CAPDIST, encoding="utf-8")
    state_name.write_text(STATE_NAME, encoding="utf-8")
    return borders, capdist, state_name


@pytest.fixture
def trip(data_files: Tuple[Path, Path, Path]) -> RoadTrip:
    return RoadTrip.from_files(*data_files, aliases=AliasTable.default())
