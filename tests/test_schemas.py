"""
Tests for ATCF JSON serialization.
"""
import json

from atcf_parser.schemas import AtcfFileSchema, AtcfRecordSchema, StormCodeSchema
from atcf_parser.models.atcf import StormCode

RECORD_KEYS = [
    "basin", "stormNo", "date", "techNum", "tech", "tau", "lat", "lon",
    "maxSusWind", "minSeaLevelPsur", "level", "windRad", "outerPsur", "outerRad",
    "maxWindRad", "windGust", "eyeDia", "subRegion", "maxSeas", "forecaster",
    "dir", "speed", "name", "depth", "seaRad", "userData",
    "genNo", "invest", "trans", "diss",
]


class TestAtcfRecordSchema:
    """Tests for record serialization."""

    def test_keys(self, record_parser, full_line):
        data = AtcfRecordSchema().dump(record_parser.parse_line(full_line))

        assert sorted(data) == sorted(RECORD_KEYS)

    def test_values(self, record_parser, full_line):
        data = record_parser.parse_line(full_line).to_dict()

        assert data["basin"] == "AL"
        assert data["stormNo"] == 2
        assert data["date"] == "2024-06-29T00:00:00.000Z"
        assert data["lat"] == 9.2
        assert data["lon"] == -42.7
        assert data["level"] == "tropical storm"
        assert data["windRad"] == {"rad": 34, "code": "NEQ", "ne": 40, "se": 0, "sw": 0, "nw": 40}
        assert data["genNo"] == 8
        assert data["trans"] == {
            "from": {"ba": "al", "id": "A5", "yr": "2024"},
            "to": {"ba": "al", "id": "02", "yr": "2024"},
        }
        assert data["invest"] is None
        assert data["diss"] is None
        assert data["userData"] == {}

    def test_absent_fields_null(self, record_parser):
        data = record_parser.parse_line("AL, 02").to_dict()

        assert data["date"] is None
        assert data["tau"] is None
        assert data["seaRad"] == {"rad": None, "code": None, "ne": None, "se": None, "sw": None, "nw": None}

    def test_user_data(self, record_parser):
        line = "AL, 02, 2024062812" + ", " * 32 + ", FOO, bar"
        data = record_parser.parse_line(line).to_dict()

        assert data["userData"] == {"FOO": "bar"}


class TestAtcfFileSchema:
    """Tests for file serialization."""

    def test_file_keys(self, file_parser, best_track_content):
        data = AtcfFileSchema().dump(file_parser.parse_file(best_track_content))

        assert set(data) == {"data", "genNo", "invest", "trans", "diss"}
        assert len(data["data"]) == 3
        assert data["data"][0]["date"] == "2024-06-28T12:00:00.000Z"

    def test_to_json(self, file_parser, full_line):
        deck = file_parser.parse_file(full_line)
        data = json.loads(deck.to_json())

        assert data["genNo"] == 8
        assert data["trans"]["to"] == {"ba": "al", "id": "02", "yr": "2024"}

    def test_to_json_indent(self, file_parser, best_track_content):
        text = file_parser.parse_file(best_track_content).to_json(indent=2)

        assert text.startswith("{\n  ")

    def test_empty_file(self, file_parser):
        assert file_parser.parse_file("").to_dict() == {
            "data": [], "genNo": None, "invest": None, "trans": None, "diss": None
        }


def test_storm_code_schema():
    assert StormCodeSchema().dump(StormCode("wp", "90", "2015")) == {"ba": "wp", "id": "90", "yr": "2015"}
