"""
ATCF Record Parse Service - Decode one line of an ATCF a/b-deck.

Format documentation:
https://science.nrlmry.navy.mil/atcf/docs/database/new/abdeck.txt
"""
import logging
from types import MappingProxyType
from typing import Dict, Optional

from ...models.atcf import AtcfRecord, LineageTransition, RadiusSet
from ...utils.parsing import FieldList, parse_int, parse_tenths_coordinate, split_fields
from ...utils.time import parse_dtg
from .codes import depth_label, level_label, subregion_label
from .lineage import (
    DISSIPATED,
    GENESIS_NUM,
    SPAWN_INVEST,
    TRANSITIONED,
    parse_transition,
)

logger = logging.getLogger(__name__)

# First USERDEFINED position; names and values alternate from here
USER_DEFINED_START = 35
USER_DEFINED_PAIRS = 5

# USERDEFINED keyword -> lineage slot on the record
LINEAGE_SLOTS = {
    SPAWN_INVEST: 'invest',
    TRANSITIONED: 'transitioned',
    DISSIPATED: 'dissipated',
}


class _LineageBuilder:
    """Collects user-defined fields while a line is being decoded."""

    def __init__(self):
        self.user_data: Dict[str, str] = {}
        self.genesis_num: Optional[int] = None
        self.invest: Optional[LineageTransition] = None
        self.transitioned: Optional[LineageTransition] = None
        self.dissipated: Optional[LineageTransition] = None

    def add(self, name: Optional[str], value: Optional[str]):
        if not name or not value:
            return

        slot = LINEAGE_SLOTS.get(name)
        if slot:
            transition = parse_transition(value)
            if transition:
                setattr(self, slot, transition)
                return

        if name == GENESIS_NUM:
            self.genesis_num = parse_int(value)
            return

        # Unknown user data
        self.user_data[name] = value


class AtcfRecordParser:
    """
    Decoder for single ATCF lines.

    Line format (comma-separated, 45 positions):
    BASIN, CY, YYYYMMDDHH, TECHNUM/MIN, TECH, TAU, LatN/S, LonE/W, VMAX, MSLP, TY,
    RAD, WINDCODE, RAD1, RAD2, RAD3, RAD4, POUTER, ROUTER, RMW, GUSTS, EYE,
    SUBREGION, MAXSEAS, INITIALS, DIR, SPEED, STORMNAME, DEPTH,
    SEAS, SEASCODE, SEAS1, SEAS2, SEAS3, SEAS4, USERDEFINED1, userdata1, ...

    Missing or malformed fields decode to None; parsing never raises for
    malformed content.
    """

    def parse_line(self, line: str) -> AtcfRecord:
        """
        Parse a single ATCF line.

        Example line:
        AL, 02, 2024062900, , BEST, 0, 92N, 427W, 35, 1006, TS, 34, NEQ, 40, 0, 0, 40, ...

        Returns:
            AtcfRecord for the line
        """
        f = split_fields(line)

        lineage = _LineageBuilder()
        for i in range(USER_DEFINED_PAIRS):
            pos = USER_DEFINED_START + 2 * i
            lineage.add(f.get(pos), f.get(pos + 1))

        return AtcfRecord(
            basin=f.get(0),
            storm_no=f.get_int(1),
            date=parse_dtg(f.get(2)),
            tech_num=f.get(3),
            tech=f.get(4),
            # -24 through 240, negative for CARQ and WRNG
            tau=f.get_int(5),
            lat=parse_tenths_coordinate(f.get(6), '0N'),
            lon=parse_tenths_coordinate(f.get(7), '0E'),
            max_sustained_wind=f.get_int(8),
            min_sea_level_pressure=f.get_int(9),
            level=level_label(f.get(10)),
            wind_radius=self._parse_radius(f, 11),
            outer_pressure=f.get_int(17),
            outer_radius=f.get_int(18),
            max_wind_radius=f.get_int(19),
            wind_gust=f.get_int(20),
            eye_diameter=f.get_int(21),
            subregion=subregion_label(f.get(22)),
            max_seas=f.get_int(23),
            forecaster=f.get(24),
            direction=f.get_int(25),
            speed=f.get_int(26),
            name=f.get(27),
            depth=depth_label(f.get(28)),
            seas_radius=self._parse_radius(f, 29),
            user_data=MappingProxyType(lineage.user_data),
            genesis_num=lineage.genesis_num,
            invest=lineage.invest,
            transitioned=lineage.transitioned,
            dissipated=lineage.dissipated,
        )

    def _parse_radius(self, f: FieldList, start: int) -> RadiusSet:
        """
        Parse a radius block: threshold, code, then four quadrant radii.

        Wind radii start at 11 (RAD, WINDCODE, RAD1-4), seas at 29
        (SEAS, SEASCODE, SEAS1-4).
        """
        return RadiusSet(
            rad=f.get_int(start),
            code=f.get(start + 1),
            ne=f.get_int(start + 2),
            se=f.get_int(start + 3),
            sw=f.get_int(start + 4),
            nw=f.get_int(start + 5),
        )


# Singleton instance
_atcf_record_parser = None

def get_atcf_record_parser() -> AtcfRecordParser:
    """Get or create the singleton ATCF record parser."""
    global _atcf_record_parser
    if _atcf_record_parser is None:
        _atcf_record_parser = AtcfRecordParser()
    return _atcf_record_parser
