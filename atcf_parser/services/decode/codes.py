"""
ATCF code tables - Translate coded fields into descriptive labels.
"""
from typing import Dict, Optional

# 10 - TY - highest level of tc development
LEVEL_CODES = {
    'DB': 'disturbance',
    'TD': 'tropical depression',
    'TS': 'tropical storm',
    'TY': 'typhoon',
    'ST': 'super typhoon',
    'TC': 'tropical cyclone',
    'HU': 'hurricane',
    'SD': 'subtropical depression',
    'SS': 'subtropical storm',
    'EX': 'extratropical system',
    'PT': 'post tropical',
    'IN': 'inland',
    'DS': 'dissipating',
    'LO': 'low',
    'WV': 'tropical wave',
    'ET': 'extrapolated',
    'MD': 'monsoon depression',
    'XX': 'unknown',
}

# 22 - SUBREGION
SUBREGION_CODES = {
    'A': 'Arabian Sea',
    'B': 'Bay of Bengal',
    'C': 'Central Pacific',
    'E': 'Eastern Pacific',
    'L': 'Atlantic',
    'P': 'South Pacific (135E - 120W)',
    'Q': 'South Atlantic',
    'S': 'South IO (20E - 135E)',
    'W': 'Western Pacific',
}

# 28 - DEPTH - system depth
DEPTH_CODES = {
    'D': 'Deep',
    'M': 'Medium',
    'S': 'Shallow',
    'X': 'Unknown',
}


def translate_code(code: Optional[str], table: Dict[str, str]) -> Optional[str]:
    """
    Look up a code case-insensitively.

    Args:
        code: Raw field text
        table: Code table to search

    Returns:
        Label for a known code, the code itself when unknown, None when absent
    """
    if code is None:
        return None

    return table.get(code.upper(), code)


def level_label(code: Optional[str]) -> Optional[str]:
    return translate_code(code, LEVEL_CODES)


def subregion_label(code: Optional[str]) -> Optional[str]:
    return translate_code(code, SUBREGION_CODES)


def depth_label(code: Optional[str]) -> Optional[str]:
    return translate_code(code, DEPTH_CODES)
