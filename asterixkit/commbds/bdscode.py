"""Decoding of the Comm-B transponder registers 4,0, 5,0 and 6,0.

Each register is carried in the 56-bit MB field, given here as 7 octets.
"""

import math
from dataclasses import dataclass

from ..complement import two_complement16

__all__ = ["Code40", "Code50", "Code60", "decode_code40", "decode_code50", "decode_code60"]

_MB_SIZE = 7


def _mb_field(data) -> bytes:
    octets = bytes(data)
    if len(octets) != _MB_SIZE:
        raise ValueError(f"an MB field is {_MB_SIZE} octets, got {len(octets)}")
    return octets


def _to_int8(value: float) -> int:
    """Truncate toward zero and keep the low 8 bits as a signed value."""
    wrapped = int(value) & 0xFF
    return wrapped - 0x100 if wrapped & 0x80 else wrapped


def _to_int16(value: float) -> int:
    """Truncate toward zero and keep the low 16 bits as a signed value."""
    wrapped = int(value) & 0xFFFF
    return wrapped - 0x10000 if wrapped & 0x8000 else wrapped


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Code40:
    """Selected vertical intention.

    Altitudes are in feet ([0, 65520]); the barometric pressure setting is
    in millibars above 800.  A field whose status is false holds 0.
    """

    mcp_select_altitude_status: bool = False
    mcp_select_altitude: int = 0
    fms_select_altitude_status: bool = False
    fms_select_altitude: int = 0
    barometric_pressure_setting_status: bool = False
    barometric_pressure_setting: int = 0
    mcp_mode_bits_status: bool = False
    vnav_mode: int = 0
    althold_mode: int = 0
    approach_mode: int = 0
    target_alt_source_bits_status: bool = False
    target_alt_source_bits: int = 0


@dataclass(frozen=True)
class Code50:
    """Track and turn report.

    Angles are in degrees, speeds in knots and the track angle rate in
    degrees per second.  A field whose status is false holds 0.
    """

    roll_angle_status: bool = False
    roll_angle: int = 0
    true_track_angle_status: bool = False
    true_track_angle: int = 0
    ground_speed_status: bool = False
    ground_speed: int = 0
    track_angle_rate_status: bool = False
    track_angle_rate: int = 0
    true_air_speed_status: bool = False
    true_air_speed: int = 0


@dataclass(frozen=True)
class Code60:
    """Heading and speed report.

    The heading is in degrees, the airspeed in knots, the Mach number to
    three decimals and the vertical rates in feet per minute.  A field whose
    status is false holds 0.
    """

    magnetic_heading_status: bool = False
    magnetic_heading: int = 0
    indicated_airspeed_status: bool = False
    indicated_airspeed: int = 0
    mach_status: bool = False
    mach: float = 0.0
    barometric_altitude_rate_status: bool = False
    barometric_altitude_rate: int = 0
    inertial_vertical_velocity_status: bool = False
    inertial_vertical_velocity: int = 0


def decode_code40(data) -> Code40:
    """Decode register 4,0 from a 7-octet MB field."""
    d = _mb_field(data)
    values = {}

    if d[0] & 0x80:
        mcp = ((d[0] & 0x7F) << 5) + ((d[1] & 0xF8) >> 3)
        values.update(mcp_select_altitude_status=True, mcp_select_altitude=(mcp * 16) & 0xFFFF)

    if d[1] & 0x04:
        fms = ((d[1] & 0x03) << 10) + (d[2] << 2) + ((d[3] & 0xC0) >> 6)
        values.update(fms_select_altitude_status=True, fms_select_altitude=(fms * 16) & 0xFFFF)

    if d[3] & 0x20:
        bps = ((d[3] & 0x1F) << 7) + ((d[4] & 0xFE) >> 1)
        values.update(
            barometric_pressure_setting_status=True,
            barometric_pressure_setting=(int(bps * 0.1) + 800) & 0xFFFF,
        )

    if d[5] & 0x01:
        values.update(
            mcp_mode_bits_status=True,
            vnav_mode=(d[6] & 0x80) >> 7,
            althold_mode=(d[6] & 0x40) >> 6,
            approach_mode=(d[6] & 0x20) >> 5,
        )

    if d[6] & 0x04:
        values.update(target_alt_source_bits_status=True, target_alt_source_bits=d[6] & 0x03)

    return Code40(**values)


def decode_code50(data) -> Code50:
    """Decode register 5,0 from a 7-octet MB field."""
    d = _mb_field(data)
    values = {}

    if d[0] & 0x80:
        ra = ((d[0] & 0x7F) << 3) + ((d[1] & 0xE0) >> 5)
        values.update(
            roll_angle_status=True,
            roll_angle=_to_int8(two_complement16(10, ra) * 45 / 256),
        )

    if d[1] & 0x10:
        tta = ((d[1] & 0x0F) << 7) + ((d[2] & 0xFE) >> 1)
        values.update(
            true_track_angle_status=True,
            true_track_angle=_to_int8(two_complement16(11, tta) * 90 / 512),
        )

    if d[2] & 0x01:
        gs = (d[3] << 2) + ((d[4] & 0xC0) >> 6)
        values.update(ground_speed_status=True, ground_speed=(gs * 2) & 0xFFFF)

    if d[4] & 0x20:
        tar = ((d[4] & 0x1F) << 5) + ((d[5] & 0xF8) >> 3)
        values.update(
            track_angle_rate_status=True,
            track_angle_rate=_to_int8(two_complement16(10, tar) * 8 / 256),
        )

    if d[5] & 0x04:
        tas = ((d[5] & 0x03) << 8) + d[6]
        values.update(true_air_speed_status=True, true_air_speed=(tas * 2) & 0xFFFF)

    return Code50(**values)


def decode_code60(data) -> Code60:
    """Decode register 6,0 from a 7-octet MB field."""
    d = _mb_field(data)
    values = {}

    if d[0] & 0x80:
        mh = ((d[0] & 0x7F) << 4) + ((d[1] & 0xF0) >> 4)
        values.update(
            magnetic_heading_status=True,
            magnetic_heading=_to_int16(two_complement16(11, mh) * 90 / 512),
        )

    if d[1] & 0x08:
        ias = ((d[1] & 0x07) << 7) + ((d[2] & 0xFE) >> 1)
        values.update(indicated_airspeed_status=True, indicated_airspeed=ias)

    if d[2] & 0x01:
        mach = (d[3] << 2) + ((d[4] & 0xC0) >> 6)
        values.update(
            mach_status=True,
            mach=_round_half_away(mach * 2.048 / 512 * 1000) / 1000,
        )

    if d[4] & 0x20:
        bar = ((d[4] & 0x1F) << 5) + ((d[5] & 0xF8) >> 3)
        values.update(
            barometric_altitude_rate_status=True,
            barometric_altitude_rate=_to_int16(two_complement16(10, bar) * 32),
        )

    if d[5] & 0x04:
        ivv = ((d[5] & 0x03) << 8) + d[6]
        values.update(
            inertial_vertical_velocity_status=True,
            inertial_vertical_velocity=_to_int16(two_complement16(10, ivv) * 32),
        )

    return Code60(**values)