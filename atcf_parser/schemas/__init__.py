"""
Schemas package - Marshmallow schemas for ATCF serialization.
"""
from .atcf import (
    AtcfFileSchema,
    AtcfRecordSchema,
    LineageTransitionSchema,
    RadiusSetSchema,
    StormCodeSchema,
)

__all__ = [
    'AtcfFileSchema',
    'AtcfRecordSchema',
    'LineageTransitionSchema',
    'RadiusSetSchema',
    'StormCodeSchema',
]
