# -*- coding: utf-8 -*-
"""
SAR Readers - Synthetic Aperture Radar product reader plug-ins.

Provides the Sentinel-1 ETAD reader plug-in and reader.

Dependencies
------------
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

from sartbx.IO.sar.sentinel1_etad import (
    Sentinel1ETADProductReaderPlugIn,
    Sentinel1ETADProductReader,
)

__all__ = [
    'Sentinel1ETADProductReaderPlugIn',
    'Sentinel1ETADProductReader',
]
