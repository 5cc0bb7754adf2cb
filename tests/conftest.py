"""
Shared fixtures for ATCF parser tests.
"""
import logging

import pytest

from atcf_parser.logging_config import PACKAGE_LOGGER
from atcf_parser.services.decode.file_parse import AtcfFileParser
from atcf_parser.services.decode.record_parse import AtcfRecordParser


# Beryl (AL02 2024) best track, trimmed to the first 29 positions
BEST_TRACK_LINES = [
    "AL, 02, 2024062812,   , BEST,   0,  89N,  394W,  30, 1007, DB,   0,    ,    0,    0,    0,    0, 1012,  150,  50,  40,   0,   L,   0,    ,   0,   0,     INVEST, S",
    "AL, 02, 2024062818,   , BEST,   0,  90N,  410W,  30, 1007, TD,   0,    ,    0,    0,    0,    0, 1011,  150,  50,  40,   0,   L,   0,    ,   0,   0,        TWO, S",
    "AL, 02, 2024062900,   , BEST,   0,  92N,  427W,  35, 1006, TS,  34, NEQ,   40,    0,    0,   40, 1011,  150,  40,  45,   0,   L,   0,    ,   0,   0,      BERYL, M",
]

FULL_LINE = (
    "AL, 02, 2024062900,   , BEST,   0,  92N,  427W,  35, 1006, TS,  34, NEQ,   40,    0,    0,   40, "
    "1011,  150,  40,  45,   0,   L,   0,    ,   0,   0,      BERYL, M,   0,    ,    0,    0,    0,    0, "
    "genesis-num, 008, TRANSITIONED, alA52024 to al022024"
)


@pytest.fixture
def record_parser():
    return AtcfRecordParser()


@pytest.fixture
def file_parser():
    return AtcfFileParser()


@pytest.fixture
def best_track_lines():
    return list(BEST_TRACK_LINES)


@pytest.fixture
def full_line():
    """A complete line with seas radii and two user-defined pairs."""
    return FULL_LINE


@pytest.fixture
def best_track_content():
    """Three line deck ending in a newline."""
    return "\n".join(BEST_TRACK_LINES) + "\n"


@pytest.fixture
def deck_file(best_track_content, tmp_path):
    """Write the best track deck to a temporary file."""
    path = tmp_path / "bal022024.dat"
    path.write_text(best_track_content)
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that setup_logging attached during a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
