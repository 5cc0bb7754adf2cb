"""
Lineage decoding - Storm codes carried in ATCF user-defined fields.

Examples of USERDEFINED/userdata pairs:
    SPAWNINVEST, wp712015 to wp902015    (invest spawned from a genesis area)
    TRANSITIONED, shE92015 to sh152015   (invest area became a TC)
    DISSIPATED, sh162015 sh982015        (TC dissipated to an invest area)
    genesis-num, 001                     (genesis area number)
"""
import logging
from typing import Optional, Tuple

from ...models.atcf import LineageTransition, StormCode

logger = logging.getLogger(__name__)

# basin (2) + id (2) + year (4)
STORM_CODE_WIDTH = 8

SEPARATOR_WORD = 'to'

SPAWN_INVEST = 'SPAWNINVEST'
TRANSITIONED = 'TRANSITIONED'
DISSIPATED = 'DISSIPATED'
GENESIS_NUM = 'genesis-num'

LINEAGE_KEYWORDS = (SPAWN_INVEST, TRANSITIONED, DISSIPATED)


def split_storm_code(text: str) -> StormCode:
    """Split an 8 character code such as 'al022024' into basin, id and year."""
    return StormCode(basin=text[0:2], id=text[2:4], year=text[4:8])


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _tokenize_at(text: str, start: int) -> Optional[Tuple[str, str]]:
    """Try to read '<code> [to] <code>' with the first code at start."""
    end = start + STORM_CODE_WIDTH
    first = text[start:end]
    pos = _skip_whitespace(text, end)
    if pos == end:
        return None

    # Optional "to", which itself must be followed by whitespace
    if text.startswith(SEPARATOR_WORD, pos):
        after = pos + len(SEPARATOR_WORD)
        skipped = _skip_whitespace(text, after)
        if skipped > after and len(text) - skipped >= STORM_CODE_WIDTH:
            pos = skipped

    second = text[pos:pos + STORM_CODE_WIDTH]
    if len(second) < STORM_CODE_WIDTH:
        return None

    return first, second


def tokenize_transition(value: str) -> Optional[Tuple[str, str]]:
    """
    Pull the two storm codes out of a lineage value.

    Accepts '<code> to <code>' and '<code> <code>' anywhere in the value,
    so leading text such as 'from alA52024 to al022024' is skipped. Each
    code is exactly eight characters and the two must be separated by
    whitespace. The leftmost position that fits wins.

    Args:
        value: userdata text

    Returns:
        (from_code, to_code) text, or None if the value does not fit
    """
    if not value:
        return None

    text = value.strip()

    # Smallest fit is code + one whitespace character + code
    for start in range(len(text) - 2 * STORM_CODE_WIDTH):
        tokens = _tokenize_at(text, start)
        if tokens:
            return tokens

    return None


def parse_transition(value: str) -> Optional[LineageTransition]:
    """
    Decode a lineage value into a from/to transition.

    Args:
        value: userdata text (e.g., "wp712015 to wp902015")

    Returns:
        LineageTransition, or None if the value holds no pair of storm codes
    """
    tokens = tokenize_transition(value)
    if tokens is None:
        logger.debug(f"No storm codes in lineage value '{value}'")
        return None

    first, second = tokens
    return LineageTransition(
        from_code=split_storm_code(first),
        to_code=split_storm_code(second),
    )
