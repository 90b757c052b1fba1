# -*- coding: utf-8 -*-
"""
Product Model - In-memory products and bands consumed by SARTBX utilities.

A ``Product`` is an ordered collection of named ``Band`` handles plus a
metadata tree. Bands may carry a numpy array of pixel values, but the
model never decodes imagery itself; readers and operators fill it in.

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
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

# Third-party
import numpy as np

# SARTBX internal
from sartbx.datamodel.metadata import METADATA_ROOT, MetadataElement


@dataclass(eq=False)
class Band:
    """A single named raster band.

    Parameters
    ----------
    name : str
        Band name, unique within its product.
    unit : str, optional
        Unit string (e.g. ``'real'``, ``'imaginary'``, ``'intensity'``).
    data : numpy.ndarray, optional
        Pixel values, if loaded.
    description : str, optional
        Free-text description.
    """

    name: str
    unit: Optional[str] = None
    data: Optional[np.ndarray] = None
    description: Optional[str] = None


class Product:
    """An ordered set of bands with an attached metadata tree.

    Parameters
    ----------
    name : str
        Product name.
    product_type : str
        Product type identifier (e.g. ``'ETAD'``, ``'SLC'``).
    bands : iterable of Band, optional
        Initial bands, in order.

    Raises
    ------
    ValueError
        If two bands share a name.

    Examples
    --------
    >>> product = Product('S1A_test', 'SLC')
    >>> product.add_band(Band('i_HH', unit='real'))
    >>> product.get_band_names()
    ['i_HH']
    """

    def __init__(
        self,
        name: str,
        product_type: str = '',
        bands: Optional[Iterable[Band]] = None,
    ) -> None:
        self.name = name
        self.product_type = product_type
        self._bands: List[Band] = []
        self._metadata_root = MetadataElement(METADATA_ROOT)
        for band in bands or ():
            self.add_band(band)

    def __repr__(self) -> str:
        return (
            f"Product({self.name!r}, {self.product_type!r}, "
            f"bands={len(self._bands)})"
        )

    def __iter__(self) -> Iterator[Band]:
        return iter(self._bands)

    def __len__(self) -> int:
        return len(self._bands)

    # ------------------------------------------------------------------
    # Bands
    # ------------------------------------------------------------------

    def add_band(self, band: Band) -> Band:
        """Append a band to the product.

        Raises
        ------
        ValueError
            If a band with the same name already exists.
        """
        if self.contains_band(band.name):
            raise ValueError(
                f"Product {self.name!r} already contains a band "
                f"named {band.name!r}"
            )
        self._bands.append(band)
        return band

    def remove_band(self, band: Band) -> bool:
        for i, existing in enumerate(self._bands):
            if existing is band:
                del self._bands[i]
                return True
        return False

    def get_band(self, name: str) -> Optional[Band]:
        """Return the band named exactly ``name``, or None."""
        for band in self._bands:
            if band.name == name:
                return band
        return None

    def contains_band(self, name: str) -> bool:
        return self.get_band(name) is not None

    def get_bands(self) -> List[Band]:
        return list(self._bands)

    def get_band_names(self) -> List[str]:
        return [band.name for band in self._bands]

    def get_num_bands(self) -> int:
        return len(self._bands)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def get_metadata_root(self) -> MetadataElement:
        return self._metadata_root
