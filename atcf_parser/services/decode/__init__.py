"""
Decode Package - ATCF line decoder and file aggregator.
"""
from .file_parse import AtcfFileParser, get_atcf_file_parser, parse_atcf
from .record_parse import AtcfRecordParser, get_atcf_record_parser

__all__ = [
    'AtcfFileParser',
    'AtcfRecordParser',
    'get_atcf_file_parser',
    'get_atcf_record_parser',
    'parse_atcf',
]
