"""
ATCF models - Immutable records decoded from ATCF deck files.
"""
import json
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..utils.time import format_dtg


@dataclass(frozen=True)
class StormCode:
    """Compact storm identifier, e.g. wp902015 -> basin 'wp', id '90', year '2015'."""

    basin: Optional[str] = None
    id: Optional[str] = None
    year: Optional[str] = None


@dataclass(frozen=True)
class LineageTransition:
    """A system moving from one storm code to another (invest -> TC, TC -> invest)."""

    from_code: Optional[StormCode] = None
    to_code: Optional[StormCode] = None


@dataclass(frozen=True)
class RadiusSet:
    """
    Wind or seas radii for one threshold.

    With code AAA (full circle) only ``ne`` carries the radius; with NEQ the
    four values are the NE, SE, SW and NW quadrants.
    """

    rad: Optional[int] = None
    code: Optional[str] = None
    ne: Optional[int] = None
    se: Optional[int] = None
    sw: Optional[int] = None
    nw: Optional[int] = None


@dataclass(frozen=True)
class AtcfRecord:
    """One fix (line) of an ATCF deck."""

    basin: Optional[str] = None
    storm_no: Optional[int] = None
    date: Optional[datetime] = None
    tech_num: Optional[str] = None
    tech: Optional[str] = None
    tau: Optional[int] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    max_sustained_wind: Optional[int] = None  # kt
    min_sea_level_pressure: Optional[int] = None  # mb
    level: Optional[str] = None
    wind_radius: RadiusSet = field(default_factory=RadiusSet)
    outer_pressure: Optional[int] = None  # mb
    outer_radius: Optional[int] = None  # n mi
    max_wind_radius: Optional[int] = None  # n mi
    wind_gust: Optional[int] = None  # kt
    eye_diameter: Optional[int] = None  # n mi
    subregion: Optional[str] = None
    max_seas: Optional[int] = None  # ft
    forecaster: Optional[str] = None
    direction: Optional[int] = None  # degrees
    speed: Optional[int] = None  # kt
    name: Optional[str] = None
    depth: Optional[str] = None
    seas_radius: RadiusSet = field(default_factory=RadiusSet)
    # Read-only, and left out of the hash so records stay hashable
    user_data: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    # Lineage annotations, only set when this line carries them
    genesis_num: Optional[int] = None
    invest: Optional[LineageTransition] = None
    transitioned: Optional[LineageTransition] = None
    dissipated: Optional[LineageTransition] = None

    def __repr__(self):
        dtg = format_dtg(self.date) if self.date else None
        return f"<AtcfRecord {self.basin}{self.storm_no} {dtg} {self.tech} tau={self.tau}>"

    @property
    def has_lineage(self) -> bool:
        """True if this line carries a genesis number or any lineage transition."""
        return any(v is not None for v in (
            self.genesis_num, self.invest, self.transitioned, self.dissipated
        ))

    def to_dict(self) -> Dict:
        from ..schemas import AtcfRecordSchema
        return AtcfRecordSchema().dump(self)


@dataclass(frozen=True)
class AtcfFile:
    """
    A decoded ATCF deck.

    Records keep the order of the input lines. The lineage fields hold the
    last value defined by any record, scanning in that order.
    """

    records: Tuple[AtcfRecord, ...] = ()
    genesis_num: Optional[int] = None
    invest: Optional[LineageTransition] = None
    transitioned: Optional[LineageTransition] = None
    dissipated: Optional[LineageTransition] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[AtcfRecord]:
        return iter(self.records)

    def __repr__(self):
        return f"<AtcfFile {len(self.records)} records genesis={self.genesis_num}>"

    @property
    def latest(self) -> Optional[AtcfRecord]:
        """The last record in the file, the most recent fix for a chronological deck."""
        return self.records[-1] if self.records else None

    def to_dict(self) -> Dict:
        from ..schemas import AtcfFileSchema
        return AtcfFileSchema().dump(self)

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
