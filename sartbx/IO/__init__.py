# -*- coding: utf-8 -*-
"""
IO Module - Product reader plug-ins and the reader registry.

Reader plug-ins are registered by format name and imported lazily, so
optional dependencies are only required when the corresponding plug-in
is used. ``find_reader_plugin`` asks every registered plug-in how well it
can decode an input and returns the best one; ``open_product`` reads the
input with it.

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

# Standard library
import importlib
import logging
from typing import Any, Dict, List, Optional

# SARTBX internal
from sartbx.datamodel.product import Product
from sartbx.IO.base import ProductFileFilter, ProductReader, ProductReaderPlugIn
from sartbx.IO.models import ETADManifest
from sartbx.IO.utils import find_in_zip, get_path_from_input
from sartbx.vocabulary import DecodeQualification

logger = logging.getLogger(__name__)

# Reader registry: maps format names to (module_path, class_name)
_READER_REGISTRY: Dict[str, tuple] = {
    'SENTINEL-1 ETAD': (
        'sartbx.IO.sar.sentinel1_etad', 'Sentinel1ETADProductReaderPlugIn',
    ),
}


def get_reader_plugin_formats() -> List[str]:
    """Return the registered format names, sorted."""
    return sorted(_READER_REGISTRY)


def get_reader_plugin(format_name: str) -> ProductReaderPlugIn:
    """Create the reader plug-in registered for ``format_name``.

    Parameters
    ----------
    format_name : str
        Registered format name (case-insensitive), e.g.
        ``'SENTINEL-1 ETAD'``.

    Returns
    -------
    ProductReaderPlugIn

    Raises
    ------
    ValueError
        If *format_name* is not registered.

    Examples
    --------
    >>> from sartbx.IO import get_reader_plugin
    >>> plugin = get_reader_plugin('SENTINEL-1 ETAD')
    """
    key = format_name.upper()
    if key not in _READER_REGISTRY:
        raise ValueError(
            f"Unknown reader format: {format_name!r}. "
            f"Supported formats: {get_reader_plugin_formats()}"
        )
    module_path, class_name = _READER_REGISTRY[key]
    module = importlib.import_module(module_path)
    plugin_cls = getattr(module, class_name)
    return plugin_cls()


def find_reader_plugin(input: Any) -> Optional[ProductReaderPlugIn]:
    """Return the registered plug-in best qualified to decode ``input``.

    ``INTENDED`` beats ``SUITABLE``; ties go to the first registered
    plug-in. Returns None when every plug-in is ``UNABLE``.
    """
    best = None
    best_rank = DecodeQualification.UNABLE.rank
    for format_name in _READER_REGISTRY:
        plugin = get_reader_plugin(format_name)
        qualification = plugin.get_decode_qualification(input)
        logger.debug("%s: %s", format_name, qualification.value)
        if qualification.rank > best_rank:
            best, best_rank = plugin, qualification.rank
    return best


def open_product(input: Any) -> Product:
    """Read ``input`` with the best qualified reader plug-in.

    Parameters
    ----------
    input : str or Path
        Product path.

    Returns
    -------
    Product

    Raises
    ------
    ValueError
        If no registered plug-in can decode the input.
    """
    plugin = find_reader_plugin(input)
    if plugin is None:
        raise ValueError(
            f"No reader found for {input!r}. "
            f"Supported formats: {get_reader_plugin_formats()}"
        )
    reader = plugin.create_reader_instance()
    return reader.read_product_nodes(input)


__all__ = [
    'ProductReaderPlugIn',
    'ProductReader',
    'ProductFileFilter',
    'ETADManifest',
    'get_path_from_input',
    'find_in_zip',
    'get_reader_plugin',
    'get_reader_plugin_formats',
    'find_reader_plugin',
    'open_product',
]
