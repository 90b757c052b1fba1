# -*- coding: utf-8 -*-
"""
Polarimetry Module - Polarimetric matrix band classification and extraction.

Helper routines consumed by polarimetric processing operators: decide
which matrix representation a product's bands encode, gather the bands
into fixed-order groups (one per coregistered stack constituent), write
new band names back into stack bookkeeping, and report the acquisition
polarization mode.

Dependencies
------------
numpy

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

from sartbx.polarimetry.bands import (
    QUAD_POL_BAND_COUNT,
    SourceBandGroup,
    classify_band_names,
    get_source_product_type,
    get_source_bands,
    get_bands,
    get_band_names,
    get_g4_band_names,
    get_lch_mode_s2_band_names,
    get_rch_mode_s2_band_names,
    get_c2_band_names,
    get_c3_band_names,
    get_c4_band_names,
    get_t3_band_names,
    get_t4_band_names,
    save_new_band_names,
    get_polar_type,
)

__all__ = [
    'QUAD_POL_BAND_COUNT',
    'SourceBandGroup',
    'classify_band_names',
    'get_source_product_type',
    'get_source_bands',
    'get_bands',
    'get_band_names',
    'get_g4_band_names',
    'get_lch_mode_s2_band_names',
    'get_rch_mode_s2_band_names',
    'get_c2_band_names',
    'get_c3_band_names',
    'get_c4_band_names',
    'get_t3_band_names',
    'get_t4_band_names',
    'save_new_band_names',
    'get_polar_type',
]
