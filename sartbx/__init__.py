# -*- coding: utf-8 -*-
"""
SARTBX - SAR Toolbox plug-ins.

A Sentinel-1 ETAD product reader plug-in and helper routines that
classify and extract band subsets from polarimetric SAR products,
built on a small in-memory product model.

Dependencies
------------
numpy
h5py (optional)

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from sartbx.exceptions import (
    SartbxError,
    ValidationError,
    OperatorError,
    ClassificationError,
    BandLookupError,
    DependencyError,
)
from sartbx.vocabulary import (
    DecodeQualification,
    MatrixType,
    UnitType,
)

__all__ = [
    'SartbxError',
    'ValidationError',
    'OperatorError',
    'ClassificationError',
    'BandLookupError',
    'DependencyError',
    'DecodeQualification',
    'MatrixType',
    'UnitType',
]
