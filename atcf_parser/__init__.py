"""
ATCF parser - Decode ATCF tropical cyclone deck files into structured records.

NOTE: This is not an official NHC/JTWC library.
"""
from .models.atcf import AtcfFile, AtcfRecord, LineageTransition, RadiusSet, StormCode
from .services.decode.file_parse import AtcfFileParser, get_atcf_file_parser, parse_atcf
from .services.decode.record_parse import AtcfRecordParser, get_atcf_record_parser

__version__ = "1.0.0"

__all__ = [
    'AtcfFile',
    'AtcfFileParser',
    'AtcfRecord',
    'AtcfRecordParser',
    'LineageTransition',
    'RadiusSet',
    'StormCode',
    'get_atcf_file_parser',
    'get_atcf_record_parser',
    'parse_atcf',
]
