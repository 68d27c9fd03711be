from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping


# Alternate spelling used in the borders data -> name used by the state-name data.
DEFAULT_ALIASES: Dict[str, str] = {
    "US": "United States of America",
    "United States": "United States of America",
    "Suriname": "Surinam",
    "UK": "United Kingdom",
    "Spain (Ceuta)": "Spain",
    "Germany": "German Federal Republic",
    "Czechia": "Czech Republic",
    "Italy": "Italy/Sardinia",
    "North Macedonia": "Macedonia (Former Yugoslav Republic of)",
    "Macedonia": "Macedonia (Former Yugoslav Republic of)",
    "Bosnia and Herzegovina": "Bosnia-Herzegovina",
    "Romania": "Rumania",
    "Russia": "Russia (Soviet Union)",
    "Belarus": "Belarus (Byelorussia)",
    "Denmark (Greenland)": "Denmark",
    "cabo verde": "cape verde",
    "Gambia, The": "Gambia",
    "The Gambia": "Gambia",
    "Cote d'Ivoire": "Cote D'Ivoire",
    "Burkina Faso": "Burkina Faso (Upper Volta)",
    "Congo, Democratic Republic of the": "Congo, Democratic Republic of (Zaire)",
    "Democratic Republic of the Congo": "Congo, Democratic Republic of (Zaire)",
    "Congo, Republic of the": "Congo",
    "Republic of the Congo": "Congo",
    "Tanzania": "Tanzania/Tanganyika",
    "Zimbabwe": "Zimbabwe (Rhodesia)",
    "Eswatini": "Swaziland",
    "Iran": "Iran (Persia)",
    "Morocco (Ceuta)": "Morocco",
    "Turkey": "Turkey (Ottoman Empire)",
    "Yemen": "Yemen (Arab Republic of Yemen)",
    "UAE": "United Arab Emirates",
    "Kyrgyzstan": "Kyrgyz Republic",
    "North Korea": "Korea, People's Republic of",
    "Korea, North": "Korea, People's Republic of",
    "Korea, South": "Korea, Republic of",
    "South Korea": "Korea, Republic of",
    "Burma": "Myanmar (Burma)",
    "Sri Lanka": "Sri Lanka (Ceylon)",
    "Cambodia": "Cambodia (Kampuchea)",
    "Vietnam": "Vietnam, Democratic Republic of",
    "Timor-Leste": "East Timor",
    "Gaza Strip": "West Bank",
}


@dataclass(frozen=True)
class AliasTable:
    """Read-only mapping from alternate country spellings to canonical names."""

    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

    @classmethod
    def default(cls) -> "AliasTable":
        return cls(DEFAULT_ALIASES)

    def normalize(self, name: str) -> str:
        return self.aliases.get(name, name)

    def with_overrides(self, extra: Mapping[str, str]) -> "AliasTable":
        merged = dict(self.aliases)
        merged.update(extra)
        return AliasTable(merged)

    def __len__(self) -> int:
        return len(self.aliases)
