# -*- coding: utf-8 -*-
"""
Data Model - In-memory products, bands, and metadata trees.

Provides the object model that reader plug-ins produce and the
polarimetric utilities consume: ``Product``, ``Band``, and
``MetadataElement``, plus helpers for abstracted metadata, band units,
band polarizations, and coregistered stack bookkeeping.

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

from sartbx.datamodel.metadata import (
    MetadataElement,
    get_abstracted_metadata,
    add_abstracted_metadata,
    get_original_product_metadata,
    get_polarisations,
)
from sartbx.datamodel.product import Band, Product
from sartbx.datamodel.unit import get_unit_type
from sartbx.datamodel.polarization import (
    get_band_polarization,
    get_polarization_from_band_name,
)
from sartbx.datamodel.stack import (
    is_coregistered_stack,
    get_master_band_names,
    get_slave_product_names,
    get_slave_band_names,
    save_master_product_band_names,
    save_slave_product_band_names,
    bands_to_names,
)

__all__ = [
    'MetadataElement',
    'Band',
    'Product',
    'get_abstracted_metadata',
    'add_abstracted_metadata',
    'get_original_product_metadata',
    'get_polarisations',
    'get_unit_type',
    'get_band_polarization',
    'get_polarization_from_band_name',
    'is_coregistered_stack',
    'get_master_band_names',
    'get_slave_product_names',
    'get_slave_band_names',
    'save_master_product_band_names',
    'save_slave_product_band_names',
    'bands_to_names',
]
