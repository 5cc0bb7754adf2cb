"""
ATCF schemas - JSON serialization for decoded ATCF records and files.
"""
from marshmallow import Schema, fields

from ..utils.time import JSON_DATETIME_FORMAT


class StormCodeSchema(Schema):
    """Schema for a compact storm code (e.g., wp902015)."""

    ba = fields.Str(attribute='basin', allow_none=True)
    id = fields.Str(allow_none=True)
    yr = fields.Str(attribute='year', allow_none=True)


class LineageTransitionSchema(Schema):
    """Schema for an invest/transition/dissipation from -> to pair."""

    from_code = fields.Nested(StormCodeSchema, data_key='from', allow_none=True)
    to_code = fields.Nested(StormCodeSchema, data_key='to', allow_none=True)


class RadiusSetSchema(Schema):
    """Schema for wind or seas radii."""

    rad = fields.Int(allow_none=True)
    code = fields.Str(allow_none=True)  # AAA full circle, NEQ quadrants
    ne = fields.Int(allow_none=True)
    se = fields.Int(allow_none=True)
    sw = fields.Int(allow_none=True)
    nw = fields.Int(allow_none=True)


class AtcfRecordSchema(Schema):
    """Schema for one ATCF fix."""

    basin = fields.Str(allow_none=True)
    storm_no = fields.Int(data_key='stormNo', allow_none=True)
    date = fields.DateTime(format=JSON_DATETIME_FORMAT, allow_none=True)
    tech_num = fields.Str(data_key='techNum', allow_none=True)
    tech = fields.Str(allow_none=True)
    tau = fields.Int(allow_none=True)

    # Position
    lat = fields.Float(allow_none=True)
    lon = fields.Float(allow_none=True)

    # Intensity
    max_sustained_wind = fields.Int(data_key='maxSusWind', allow_none=True)
    min_sea_level_pressure = fields.Int(data_key='minSeaLevelPsur', allow_none=True)
    level = fields.Str(allow_none=True)

    # Structure
    wind_radius = fields.Nested(RadiusSetSchema, data_key='windRad', allow_none=True)
    outer_pressure = fields.Int(data_key='outerPsur', allow_none=True)
    outer_radius = fields.Int(data_key='outerRad', allow_none=True)
    max_wind_radius = fields.Int(data_key='maxWindRad', allow_none=True)
    wind_gust = fields.Int(data_key='windGust', allow_none=True)
    eye_diameter = fields.Int(data_key='eyeDia', allow_none=True)
    subregion = fields.Str(data_key='subRegion', allow_none=True)
    max_seas = fields.Int(data_key='maxSeas', allow_none=True)
    forecaster = fields.Str(allow_none=True)

    # Motion
    direction = fields.Int(data_key='dir', allow_none=True)
    speed = fields.Int(allow_none=True)

    name = fields.Str(allow_none=True)
    depth = fields.Str(allow_none=True)
    seas_radius = fields.Nested(RadiusSetSchema, data_key='seaRad', allow_none=True)
    user_data = fields.Dict(keys=fields.Str(), values=fields.Str(), data_key='userData')

    # Lineage
    genesis_num = fields.Int(data_key='genNo', allow_none=True)
    invest = fields.Nested(LineageTransitionSchema, allow_none=True)
    transitioned = fields.Nested(LineageTransitionSchema, data_key='trans', allow_none=True)
    dissipated = fields.Nested(LineageTransitionSchema, data_key='diss', allow_none=True)


class AtcfFileSchema(Schema):
    """Schema for a complete ATCF deck."""

    records = fields.List(fields.Nested(AtcfRecordSchema), data_key='data')
    genesis_num = fields.Int(data_key='genNo', allow_none=True)
    invest = fields.Nested(LineageTransitionSchema, allow_none=True)
    transitioned = fields.Nested(LineageTransitionSchema, data_key='trans', allow_none=True)
    dissipated = fields.Nested(LineageTransitionSchema, data_key='diss', allow_none=True)
