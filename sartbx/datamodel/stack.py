# -*- coding: utf-8 -*-
"""
Coregistered Stacks - Master/slave band bookkeeping for stacked products.

A coregistered stack bundles a master acquisition with one or more
spatially aligned slave acquisitions in a single product. The abstracted
metadata flags the product as a stack (``coregistered_stack == 1``) and
the ``Slave_Metadata`` element records which bands belong to which
constituent:

- ``Slave_Metadata.Master_bands`` -- space-separated master band names.
- ``Slave_Metadata/<slave product>.Slave_bands`` -- space-separated band
  names of each slave product.

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
import logging
from typing import Iterable, List, Optional, Sequence

# SARTBX internal
from sartbx.datamodel.metadata import (
    COREGISTERED_STACK,
    MASTER_BANDS,
    SLAVE_BANDS,
    SLAVE_METADATA_ROOT,
    MetadataElement,
    get_abstracted_metadata,
)
from sartbx.datamodel.product import Band, Product

logger = logging.getLogger(__name__)

MASTER_TAG = '_mst'
SLAVE_TAG = '_slv'


def _split_names(value: str) -> List[str]:
    return [name for name in value.split(' ') if name]


def get_slave_metadata_root(product: Product) -> Optional[MetadataElement]:
    """Return the product's ``Slave_Metadata`` element, or None."""
    return product.get_metadata_root().get_element(SLAVE_METADATA_ROOT)


def _get_or_create_slave_metadata_root(product: Product) -> MetadataElement:
    root = product.get_metadata_root()
    slv_root = root.get_element(SLAVE_METADATA_ROOT)
    if slv_root is None:
        slv_root = root.add_element(MetadataElement(SLAVE_METADATA_ROOT))
    return slv_root


def is_coregistered_stack(product: Product) -> bool:
    """Whether ``product`` is flagged as a coregistered stack."""
    abs_root = get_abstracted_metadata(product)
    if abs_root is None:
        return False
    return abs_root.get_attribute_int(COREGISTERED_STACK, 0) == 1


def get_master_band_names(product: Product) -> List[str]:
    """Return the master band names of a stack.

    Reads ``Slave_Metadata.Master_bands``; when that is absent or empty,
    falls back to the product bands whose name contains ``_mst``.

    Parameters
    ----------
    product : Product
        Coregistered stack product.

    Returns
    -------
    List[str]
        Master band names in recorded order.
    """
    slv_root = get_slave_metadata_root(product)
    if slv_root is not None:
        names = _split_names(slv_root.get_attribute_string(MASTER_BANDS, ''))
        if names:
            return names

    return [
        name for name in product.get_band_names()
        if MASTER_TAG in name.lower()
    ]


def get_slave_product_names(product: Product) -> List[str]:
    """Return the names of the slave products recorded in a stack."""
    slv_root = get_slave_metadata_root(product)
    if slv_root is None:
        return []
    return slv_root.get_element_names()


def get_slave_band_names(product: Product, slave_product_name: str) -> List[str]:
    """Return the band names recorded for one slave product.

    Returns an empty list if the slave product is not recorded.
    """
    slv_root = get_slave_metadata_root(product)
    if slv_root is None:
        return []
    elem = slv_root.get_element(slave_product_name)
    if elem is None:
        return []
    return _split_names(elem.get_attribute_string(SLAVE_BANDS, ''))


def bands_to_names(bands: Iterable[Band]) -> List[str]:
    return [band.name for band in bands]


def save_master_product_band_names(
    product: Product, band_names: Sequence[str],
) -> None:
    """Record ``band_names`` as the stack's master bands."""
    slv_root = _get_or_create_slave_metadata_root(product)
    slv_root.set_attribute_string(MASTER_BANDS, ' '.join(band_names))
    logger.debug("Saved %d master band names on %s",
                 len(band_names), product.name)


def save_slave_product_band_names(
    product: Product,
    slave_product_name: str,
    band_names: Sequence[str],
) -> None:
    """Record ``band_names`` as the bands of ``slave_product_name``.

    The slave element is created if it does not exist yet.
    """
    slv_root = _get_or_create_slave_metadata_root(product)
    elem = slv_root.get_element(slave_product_name)
    if elem is None:
        elem = slv_root.add_element(MetadataElement(slave_product_name))
    elem.set_attribute_string(SLAVE_BANDS, ' '.join(band_names))
    logger.debug("Saved %d slave band names for %s on %s",
                 len(band_names), slave_product_name, product.name)
