# -*- coding: utf-8 -*-
"""
Band Units - Canonical unit strings and unit-type resolution.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Optional, Tuple, Union

# SARTBX internal
from sartbx.datamodel.product import Band
from sartbx.vocabulary import UnitType

AMPLITUDE = 'amplitude'
INTENSITY = 'intensity'
PHASE = 'phase'
ABS_PHASE = 'abs_phase'
REAL = 'real'
IMAGINARY = 'imaginary'
COHERENCE = 'coherence'
METERS = 'meters'
DEGREES = 'degrees'
DB = 'db'

AMPLITUDE_DB = AMPLITUDE + '_' + DB
INTENSITY_DB = INTENSITY + '_' + DB

# Order matters: 'abs_phase' contains 'phase'.
_UNIT_RULES: Tuple[Tuple[str, UnitType, Optional[UnitType]], ...] = (
    (AMPLITUDE, UnitType.AMPLITUDE, UnitType.AMPLITUDE_DB),
    (INTENSITY, UnitType.INTENSITY, UnitType.INTENSITY_DB),
    (ABS_PHASE, UnitType.ABS_PHASE, None),
    (PHASE, UnitType.PHASE, None),
    (REAL, UnitType.REAL, None),
    (IMAGINARY, UnitType.IMAGINARY, None),
    (COHERENCE, UnitType.COHERENCE, None),
    (METERS, UnitType.METERS, None),
    (DEGREES, UnitType.DEGREES, None),
)


def get_unit_type(band_or_unit: Union[Band, str, None]) -> UnitType:
    """Resolve the unit type of a band or a unit string.

    Matching is case-insensitive and by substring, so ``'Intensity_dB'``
    resolves to ``UnitType.INTENSITY_DB``.

    Parameters
    ----------
    band_or_unit : Band, str, or None
        A band (its ``unit`` is used) or a raw unit string.

    Returns
    -------
    UnitType
        ``UnitType.UNKNOWN`` when the unit is absent or unrecognised.
    """
    unit = band_or_unit.unit if isinstance(band_or_unit, Band) else band_or_unit
    if not unit:
        return UnitType.UNKNOWN

    unit = unit.lower()
    for token, linear, decibel in _UNIT_RULES:
        if token in unit:
            if decibel is not None and DB in unit:
                return decibel
            return linear
    return UnitType.UNKNOWN
