"""
Parsing utilities - Field splitting and tolerant numeric decoding for ATCF text.
"""
import re
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# ATCF fields are separated by a comma with optional padding on either side
FIELD_DELIMITER = re.compile(r'\s*,\s*')

# Leading signed integer, the same prefix a lenient integer parse would accept
INT_PREFIX = re.compile(r'\s*([+-]?\d+)')

NEGATIVE_HEMISPHERES = ('S', 'W')


class FieldList:
    """
    Positional view over the fields of one ATCF line.

    Positions past the end of the line are absent and come back as None,
    so short lines never raise.
    """

    def __init__(self, fields: List[str]):
        self._fields = fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"<FieldList {len(self._fields)} fields>"

    def get(self, index: int) -> Optional[str]:
        """Return the field at index, or None if the line is shorter."""
        if 0 <= index < len(self._fields):
            return self._fields[index]
        return None

    def get_int(self, index: int) -> Optional[int]:
        """Return the field at index parsed as an integer, or None."""
        return parse_int(self.get(index))


def split_fields(line: str) -> FieldList:
    """
    Split an ATCF line into trimmed positional fields.

    Args:
        line: Raw text line

    Returns:
        FieldList (empty for an empty or blank line)
    """
    if not line or not line.strip():
        return FieldList([])

    return FieldList([f.strip() for f in FIELD_DELIMITER.split(line)])


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a field.

    Args:
        text: Field text (e.g., "008", "-12", " 35")

    Returns:
        Integer value, or None if absent, empty or not numeric
    """
    if not text:
        return None

    match = INT_PREFIX.match(text)
    if not match:
        return None

    return int(match.group(1))


def parse_tenths_coordinate(text: Optional[str], default: str) -> Optional[float]:
    """
    Parse an ATCF coordinate in tenths of degrees with a hemisphere suffix.

    Examples: "89N" -> 8.9, "89S" -> -8.9, "394W" -> -39.4, "1453E" -> 145.3

    Args:
        text: Coordinate text, None when the field is missing
        default: Text to use when the field is missing ("0N" or "0E")

    Returns:
        Signed decimal degrees, or None if the magnitude is not numeric
    """
    if text is None:
        text = default

    tenths = parse_int(text[:-1])
    if tenths is None:
        return None

    value = tenths / 10.0
    if text[-1].upper() in NEGATIVE_HEMISPHERES:
        value = -value

    return value
