"""
ATCF File Parse Service - Decode a whole ATCF deck and roll up lineage.
"""
import re
import logging
from typing import List

from ...models.atcf import AtcfFile, AtcfRecord
from .record_parse import AtcfRecordParser, get_atcf_record_parser

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r'\r\n|\r|\n')

ROLLUP_FIELDS = ('genesis_num', 'invest', 'transitioned', 'dissipated')


class AtcfFileParser:
    """
    Parser for complete ATCF deck files.

    Every line becomes a record, in input order. Genesis number and the
    invest/transitioned/dissipated lineage are rolled up to the file level
    from the last record that defines each of them.
    """

    def __init__(self, record_parser: AtcfRecordParser = None):
        self.record_parser = record_parser or get_atcf_record_parser()

    def split_lines(self, content: str) -> List[str]:
        """
        Split deck text into lines, ignoring trailing whitespace and newlines.

        Empty or whitespace-only content has no lines, so it produces a file
        with zero records rather than one empty record. Blank lines between
        fixes are kept.
        """
        content = content.rstrip()
        if not content:
            return []
        return LINE_BREAK.split(content)

    def parse_file(self, content: str) -> AtcfFile:
        """
        Parse ATCF file content.

        Args:
            content: Raw text content of an ATCF deck

        Returns:
            AtcfFile with one record per line

        Raises:
            TypeError: If content is not text
        """
        if not isinstance(content, str):
            raise TypeError(f"ATCF content must be str, not {type(content).__name__}")

        records: List[AtcfRecord] = []
        rollup = dict.fromkeys(ROLLUP_FIELDS)

        for line in self.split_lines(content):
            record = self.record_parser.parse_line(line)
            records.append(record)

            # Latest wins: lineage normally sits on the last lines of a track
            for name in ROLLUP_FIELDS:
                value = getattr(record, name)
                if value is not None:
                    rollup[name] = value

        lineage_count = sum(1 for r in records if r.has_lineage)
        logger.info(f"Parsed {len(records)} records from ATCF deck "
                    f"({lineage_count} with lineage annotations)")

        return AtcfFile(records=tuple(records), **rollup)


def parse_atcf(content: str) -> AtcfFile:
    """Parse ATCF text into an AtcfFile."""
    return get_atcf_file_parser().parse_file(content)


# Singleton instance
_atcf_file_parser = None

def get_atcf_file_parser() -> AtcfFileParser:
    """Get or create the singleton ATCF file parser."""
    global _atcf_file_parser
    if _atcf_file_parser is None:
        _atcf_file_parser = AtcfFileParser()
    return _atcf_file_parser
