# -*- coding: utf-8 -*-
"""
Metadata Tree - Named metadata elements and the abstracted metadata root.

``MetadataElement`` is a small tree of named nodes, each holding ordered
attributes and child elements. Every product carries one metadata root;
the ``Abstracted_Metadata`` element beneath it collects the sensor- and
format-independent attributes (mission, polarisations, stack flag) that
processing operators query by name.

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
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sartbx.datamodel.product import Product


# ===================================================================
# Attribute names
# ===================================================================

METADATA_ROOT = 'metadata'
ABSTRACT_METADATA_ROOT = 'Abstracted_Metadata'
ORIGINAL_PRODUCT_METADATA = 'Original_Product_Metadata'
SLAVE_METADATA_ROOT = 'Slave_Metadata'

PRODUCT = 'PRODUCT'
PRODUCT_TYPE = 'PRODUCT_TYPE'
MISSION = 'MISSION'
ACQUISITION_MODE = 'ACQUISITION_MODE'
PASS = 'PASS'
ABS_ORBIT = 'ABS_ORBIT'
FIRST_LINE_TIME = 'first_line_time'
LAST_LINE_TIME = 'last_line_time'
MDS1_TX_RX_POLAR = 'mds1_tx_rx_polar'
MDS2_TX_RX_POLAR = 'mds2_tx_rx_polar'
MDS3_TX_RX_POLAR = 'mds3_tx_rx_polar'
MDS4_TX_RX_POLAR = 'mds4_tx_rx_polar'
COREGISTERED_STACK = 'coregistered_stack'

MDS_TX_RX_POLARS = (
    MDS1_TX_RX_POLAR,
    MDS2_TX_RX_POLAR,
    MDS3_TX_RX_POLAR,
    MDS4_TX_RX_POLAR,
)

# Stack bookkeeping attributes under Slave_Metadata
MASTER_BANDS = 'Master_bands'
SLAVE_BANDS = 'Slave_bands'

NO_METADATA_STRING = ' '

_ABSTRACTED_DEFAULTS: Dict[str, Any] = {
    PRODUCT: NO_METADATA_STRING,
    PRODUCT_TYPE: NO_METADATA_STRING,
    MISSION: NO_METADATA_STRING,
    ACQUISITION_MODE: NO_METADATA_STRING,
    PASS: NO_METADATA_STRING,
    ABS_ORBIT: 0,
    FIRST_LINE_TIME: NO_METADATA_STRING,
    LAST_LINE_TIME: NO_METADATA_STRING,
    MDS1_TX_RX_POLAR: NO_METADATA_STRING,
    MDS2_TX_RX_POLAR: NO_METADATA_STRING,
    MDS3_TX_RX_POLAR: NO_METADATA_STRING,
    MDS4_TX_RX_POLAR: NO_METADATA_STRING,
    COREGISTERED_STACK: 0,
}


class MetadataElement:
    """A named node in a product's metadata tree.

    Parameters
    ----------
    name : str
        Element name. Child elements are looked up by this name.

    Examples
    --------
    >>> root = MetadataElement('metadata')
    >>> abs_root = root.add_element(MetadataElement('Abstracted_Metadata'))
    >>> abs_root.set_attribute_string('MISSION', 'SENTINEL-1A')
    >>> abs_root.get_attribute_string('MISSION')
    'SENTINEL-1A'
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._attributes: Dict[str, Any] = {}
        self._elements: List['MetadataElement'] = []

    def __repr__(self) -> str:
        return (
            f"MetadataElement({self.name!r}, "
            f"attributes={len(self._attributes)}, "
            f"elements={len(self._elements)})"
        )

    # ------------------------------------------------------------------
    # Child elements
    # ------------------------------------------------------------------

    def add_element(self, element: 'MetadataElement') -> 'MetadataElement':
        """Append a child element and return it."""
        self._elements.append(element)
        return element

    def get_element(self, name: str) -> Optional['MetadataElement']:
        """Return the first child element with ``name``, or None."""
        for elem in self._elements:
            if elem.name == name:
                return elem
        return None

    def get_elements(self) -> List['MetadataElement']:
        return list(self._elements)

    def get_element_names(self) -> List[str]:
        return [elem.name for elem in self._elements]

    def remove_element(self, element: 'MetadataElement') -> bool:
        """Remove ``element`` if it is a direct child.

        Returns
        -------
        bool
            True if the element was removed.
        """
        for i, elem in enumerate(self._elements):
            if elem is element:
                del self._elements[i]
                return True
        return False

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def contains_attribute(self, name: str) -> bool:
        return name in self._attributes

    def get_attribute_names(self) -> List[str]:
        return list(self._attributes)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def get_attribute_string(self, name: str, default: str = '') -> str:
        """Return an attribute as a string.

        Parameters
        ----------
        name : str
            Attribute name.
        default : str
            Returned when the attribute is absent. Default ``''``.

        Returns
        -------
        str
        """
        if name not in self._attributes:
            return default
        value = self._attributes[name]
        if isinstance(value, bytes):
            return value.decode('utf-8', errors='replace')
        return str(value)

    def get_attribute_int(self, name: str, default: int = 0) -> int:
        """Return an attribute as an int.

        Non-numeric values fall back to ``default``.
        """
        if name not in self._attributes:
            return default
        try:
            return int(self._attributes[name])
        except (TypeError, ValueError):
            return default

    def get_attribute_double(self, name: str, default: float = 0.0) -> float:
        if name not in self._attributes:
            return default
        try:
            return float(self._attributes[name])
        except (TypeError, ValueError):
            return default

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def set_attribute_string(self, name: str, value: str) -> None:
        self._attributes[name] = str(value)

    def set_attribute_int(self, name: str, value: int) -> None:
        self._attributes[name] = int(value)

    def remove_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)


# ===================================================================
# Abstracted metadata access
# ===================================================================

def get_abstracted_metadata(product: 'Product') -> Optional[MetadataElement]:
    """Return the product's ``Abstracted_Metadata`` element, or None."""
    return product.get_metadata_root().get_element(ABSTRACT_METADATA_ROOT)


def add_abstracted_metadata(product: 'Product') -> MetadataElement:
    """Return the product's abstracted metadata, creating it if absent.

    A newly created element is populated with the empty defaults for
    every known attribute.

    Parameters
    ----------
    product : Product
        Product whose metadata root receives the element.

    Returns
    -------
    MetadataElement
    """
    abs_root = get_abstracted_metadata(product)
    if abs_root is not None:
        return abs_root

    abs_root = MetadataElement(ABSTRACT_METADATA_ROOT)
    for name, value in _ABSTRACTED_DEFAULTS.items():
        abs_root.set_attribute(name, value)
    product.get_metadata_root().add_element(abs_root)
    return abs_root


def get_original_product_metadata(product: 'Product') -> MetadataElement:
    """Return the ``Original_Product_Metadata`` element, creating it if absent."""
    root = product.get_metadata_root()
    orig = root.get_element(ORIGINAL_PRODUCT_METADATA)
    if orig is None:
        orig = root.add_element(MetadataElement(ORIGINAL_PRODUCT_METADATA))
    return orig


def get_polarisations(abs_root: Optional[MetadataElement]) -> List[str]:
    """Return the populated ``mdsN_tx_rx_polar`` values, trimmed and in order."""
    if abs_root is None:
        return []
    pols = []
    for name in MDS_TX_RX_POLARS:
        value = abs_root.get_attribute_string(name, '').strip()
        if value:
            pols.append(value)
    return pols
