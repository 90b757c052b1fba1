# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the SARTBX framework.

Defines the single source of truth for controlled vocabularies shared by
the reader plug-ins and the polarimetric utilities: reader decode
qualifications, polarimetric matrix kinds, and band unit types.

Author
------
Steven Siebert

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

from enum import Enum


class DecodeQualification(Enum):
    """How well a reader plug-in can decode a given input.

    Ordered from worst to best so that a registry can pick the most
    qualified plug-in.
    """

    UNABLE = "unable"
    SUITABLE = "suitable"
    INTENDED = "intended"

    @property
    def rank(self) -> int:
        """Ordinal rank, higher is better."""
        return _QUALIFICATION_RANK[self]


_QUALIFICATION_RANK = {
    DecodeQualification.UNABLE: 0,
    DecodeQualification.SUITABLE: 1,
    DecodeQualification.INTENDED: 2,
}


class MatrixType(Enum):
    """Polarimetric matrix representation encoded by a product's bands.

    ``FULL`` is the quad-pol scattering matrix stored as real/imaginary
    band pairs. The covariance (``C*``) and coherency (``T*``) kinds
    store diagonal power terms and real/imaginary off-diagonal terms.
    ``LCHCP`` and ``RCHCP`` are left/right circular hybrid compact-pol
    scattering vectors.
    """

    FULL = "FULL"
    C2 = "C2"
    C3 = "C3"
    C4 = "C4"
    T3 = "T3"
    T4 = "T4"
    LCHCP = "LCHCP"
    RCHCP = "RCHCP"


class UnitType(Enum):
    """Physical unit of a band's pixel values."""

    AMPLITUDE = "amplitude"
    INTENSITY = "intensity"
    REAL = "real"
    IMAGINARY = "imaginary"
    PHASE = "phase"
    ABS_PHASE = "abs_phase"
    COHERENCE = "coherence"
    AMPLITUDE_DB = "amplitude_db"
    INTENSITY_DB = "intensity_db"
    METERS = "meters"
    DEGREES = "degrees"
    UNKNOWN = "unknown"
