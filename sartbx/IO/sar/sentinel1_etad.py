# -*- coding: utf-8 -*-
"""
Sentinel-1 ETAD Reader - ESA Sentinel-1 Extended Timing Annotation products.

Provides the reader plug-in that recognises Sentinel-1 ETAD products
(``_ETA_`` in the product name) delivered as an unpacked ``.SAFE``
directory, a ``manifest.safe`` file, or a ``.zip`` archive, and the
reader that turns one into a ``Product``.

The reader parses ``manifest.safe`` into a typed ``ETADManifest``,
exposes it as abstracted metadata, and mirrors the full manifest under
``Original_Product_Metadata/Manifest``. The ETAD correction layers in
the measurement NetCDF file are inventoried with h5py for unpacked
products; pixel data is never decoded.

Dependencies
------------
h5py (optional, measurement inventory)

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
from collections import Counter
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union
import xml.etree.ElementTree as ET

try:
    import h5py
    _HAS_H5PY = True
except ImportError:
    _HAS_H5PY = False

# SARTBX internal
from sartbx.datamodel import metadata as meta
from sartbx.datamodel.metadata import MetadataElement
from sartbx.datamodel.product import Product
from sartbx.exceptions import DependencyError
from sartbx.IO.base import ProductReader, ProductReaderPlugIn
from sartbx.IO.models import ETADManifest
from sartbx.IO.utils import find_in_zip, find_zip_entry, get_path_from_input, read_from_zip
from sartbx.vocabulary import DecodeQualification

logger = logging.getLogger(__name__)

FORMAT_NAMES = ['SENTINEL-1 ETAD']
FORMAT_FILE_EXTENSIONS = ['.safe', '.zip']
PLUGIN_DESCRIPTION = 'SENTINEL-1 ETAD Products'

PRODUCT_PREFIX = 'MANIFEST'
PRODUCT_HEADER_NAME = 'manifest.safe'
PRODUCT_EXT = '.SAFE'
IDENTIFIER = '_ETA_'

# Root prefixes of the SAFE directory inside a zip archive
ZIP_ROOT_PREFIXES = ('s1', 'rs2')

VALID_INPUT_TYPES: Tuple[type, ...] = (Path, str)


def is_etad(path: Union[str, Path]) -> bool:
    """Whether the path string carries the ETAD marker (case-insensitive)."""
    return IDENTIFIER in str(path).upper()


# ===================================================================
# Sentinel1ETADProductReaderPlugIn
# ===================================================================

class Sentinel1ETADProductReaderPlugIn(ProductReaderPlugIn):
    """Reader plug-in for Sentinel-1 ETAD products.

    Examples
    --------
    >>> plugin = Sentinel1ETADProductReaderPlugIn()
    >>> plugin.get_decode_qualification('S1A_IW_ETA__AXDV_..._ETA_.SAFE')
    <DecodeQualification.INTENDED: 'intended'>
    >>> reader = plugin.create_reader_instance()
    """

    def get_decode_qualification(self, input: Any) -> DecodeQualification:
        """Classify ``input`` as an ETAD product or not.

        A directory qualifies through the ``manifest.safe`` inside it; a
        ``manifest.safe`` file qualifies when its path carries the
        ``_ETA_`` marker; a zip archive qualifies when its name starts
        with ``s1``, carries the marker, and lists a ``manifest.safe``
        under an ``s1`` or ``rs2`` root.

        Parameters
        ----------
        input : Any
            Path or path string.

        Returns
        -------
        DecodeQualification
            ``INTENDED`` or ``UNABLE``; never raises.
        """
        path = get_path_from_input(input)
        if path is None:
            return DecodeQualification.UNABLE

        try:
            if path.is_dir():
                path = path / PRODUCT_HEADER_NAME
                if not path.exists():
                    return DecodeQualification.UNABLE
        except (OSError, ValueError) as e:
            logger.debug("Unable to probe %s: %s", path, e)
            return DecodeQualification.UNABLE

        filename = path.name.lower()
        if not filename:
            return DecodeQualification.UNABLE

        if filename == PRODUCT_HEADER_NAME and is_etad(path):
            return DecodeQualification.INTENDED

        if (filename.endswith('.zip') and filename.startswith('s1')
                and IDENTIFIER.lower() in filename
                and any(find_in_zip(path, prefix, PRODUCT_HEADER_NAME)
                        for prefix in ZIP_ROOT_PREFIXES)):
            return DecodeQualification.INTENDED

        return DecodeQualification.UNABLE

    def create_reader_instance(self) -> 'Sentinel1ETADProductReader':
        return Sentinel1ETADProductReader(self)

    def get_input_types(self) -> Tuple[type, ...]:
        return VALID_INPUT_TYPES

    def get_format_names(self) -> List[str]:
        return list(FORMAT_NAMES)

    def get_default_file_extensions(self) -> List[str]:
        return list(FORMAT_FILE_EXTENSIONS)

    def get_description(self, locale: Optional[str] = None) -> str:
        return PLUGIN_DESCRIPTION

    def get_product_metadata_file_extensions(self) -> List[str]:
        return [PRODUCT_EXT]

    def get_product_metadata_file_prefixes(self) -> List[str]:
        return [PRODUCT_PREFIX]


# ===================================================================
# manifest.safe parsing helpers
# ===================================================================

def _local(tag: str) -> str:
    """Strip the ``{namespace}`` from an ElementTree tag."""
    return tag.rsplit('}', 1)[-1]


def _find_local(root: ET.Element, name: str) -> Optional[ET.Element]:
    """First descendant (or self) with local tag ``name``."""
    for elem in root.iter():
        if _local(elem.tag) == name:
            return elem
    return None


def _text_local(root: Optional[ET.Element], name: str) -> Optional[str]:
    if root is None:
        return None
    elem = _find_local(root, name)
    if elem is None or elem.text is None:
        return None
    return elem.text.strip() or None


def _child_text(parent: Optional[ET.Element], name: str) -> Optional[str]:
    """Text of the first direct child with local tag ``name``."""
    if parent is None:
        return None
    for child in parent:
        if _local(child.tag) == name and child.text:
            return child.text.strip() or None
    return None


def _extract_mission(root: ET.Element) -> Optional[str]:
    platform = _find_local(root, 'platform')
    family = _child_text(platform, 'familyName')
    number = _child_text(platform, 'number')
    if family is None:
        return None
    return f"{family}{number}" if number else family


def _extract_absolute_orbit(root: ET.Element) -> Optional[int]:
    first = None
    for elem in root.iter():
        if _local(elem.tag) != 'orbitNumber' or not elem.text:
            continue
        if elem.get('type') == 'start':
            return int(elem.text.strip())
        if first is None:
            first = int(elem.text.strip())
    return first


def _extract_measurement_files(root: ET.Element) -> List[str]:
    files = []
    for elem in root.iter():
        if _local(elem.tag) != 'fileLocation':
            continue
        href = elem.get('href', '')
        if href.startswith('./'):
            href = href[2:]
        if href.startswith('measurement/'):
            files.append(href)
    return files


def parse_manifest(xml_bytes: bytes, product_name: str) -> Tuple[ETADManifest, ET.Element]:
    """Parse ``manifest.safe`` content.

    Parsing is namespace agnostic: elements are matched on their local
    tag names only.

    Parameters
    ----------
    xml_bytes : bytes
        Raw manifest XML.
    product_name : str
        SAFE product name to record.

    Returns
    -------
    manifest : ETADManifest
    root : xml.etree.ElementTree.Element
        Parsed XML root.

    Raises
    ------
    ValueError
        If the XML is malformed.
    """
    try:
        root = ET.fromstring(xml_bytes)
    except ET.ParseError as e:
        raise ValueError(f"Malformed manifest for {product_name}: {e}") from e

    pass_text = _text_local(root, 'pass')
    manifest = ETADManifest(
        product_name=product_name,
        mission=_extract_mission(root),
        product_type=_text_local(root, 'productType'),
        mode=_text_local(root, 'mode'),
        orbit_pass=pass_text.upper() if pass_text else None,
        absolute_orbit=_extract_absolute_orbit(root),
        start_time=_text_local(root, 'startTime'),
        stop_time=_text_local(root, 'stopTime'),
        polarisations=[
            elem.text.strip() for elem in root.iter()
            if _local(elem.tag) == 'transmitterReceiverPolarisation'
            and elem.text and elem.text.strip()
        ],
        measurement_files=_extract_measurement_files(root),
    )
    return manifest, root


def xml_to_metadata(elem: ET.Element) -> MetadataElement:
    """Mirror an XML element tree as a ``MetadataElement`` tree.

    XML attributes and text-only children without attributes become
    attributes; everything else becomes a child element. Every occurrence
    of a repeated text-only child becomes an element holding a ``value``
    attribute, so no value is lost.
    """
    node = MetadataElement(_local(elem.tag))
    for key, value in elem.attrib.items():
        node.set_attribute_string(_local(key), value)

    leaf_counts = Counter(
        _local(child.tag) for child in elem
        if len(child) == 0 and not child.attrib
    )
    for child in elem:
        name = _local(child.tag)
        is_leaf = len(child) == 0 and not child.attrib
        if (is_leaf and leaf_counts[name] == 1
                and not node.contains_attribute(name)):
            node.set_attribute_string(name, (child.text or '').strip())
        elif is_leaf:
            leaf = node.add_element(MetadataElement(name))
            leaf.set_attribute_string('value', (child.text or '').strip())
        else:
            node.add_element(xml_to_metadata(child))
    return node


def _strip_safe_ext(name: str) -> str:
    if name.upper().endswith(PRODUCT_EXT):
        return name[:-len(PRODUCT_EXT)]
    return name


# ===================================================================
# Sentinel1ETADProductReader
# ===================================================================

class Sentinel1ETADProductReader(ProductReader):
    """Read Sentinel-1 ETAD product structure and metadata.

    Parameters
    ----------
    plugin : Sentinel1ETADProductReaderPlugIn
        The plug-in that created this reader.

    Attributes
    ----------
    manifest : ETADManifest
        Parsed manifest of the product read last.
    safe_dir : Path
        SAFE directory for unpacked products, None for zip archives.

    Examples
    --------
    >>> plugin = Sentinel1ETADProductReaderPlugIn()
    >>> with plugin.create_reader_instance() as reader:
    ...     product = reader.read_product_nodes('S1A_..._ETA_....SAFE')
    ...     print(reader.manifest.mission)
    """

    def __init__(self, plugin: ProductReaderPlugIn) -> None:
        super().__init__(plugin)
        self.manifest: Optional[ETADManifest] = None
        self.safe_dir: Optional[Path] = None

    def _read_product_nodes_impl(self) -> Product:
        path = get_path_from_input(self.input)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        xml_bytes, product_name = self._load_manifest(path)
        self.manifest, root = parse_manifest(xml_bytes, product_name)

        product = Product(product_name, self.manifest.product_type or 'ETAD')
        self._add_abstracted_metadata(product)
        orig = meta.get_original_product_metadata(product)
        manifest_elem = xml_to_metadata(root)
        manifest_elem.name = 'Manifest'
        orig.add_element(manifest_elem)

        if self.safe_dir is not None:
            self._add_measurement_inventory(product)

        logger.debug("Read ETAD product %s (%s)",
                     product_name, self.manifest.mission)
        return product

    def _load_manifest(self, path: Path) -> Tuple[bytes, str]:
        """Locate and read ``manifest.safe``; return its bytes and the product name."""
        if path.is_dir():
            manifest_path = path / PRODUCT_HEADER_NAME
            if not manifest_path.exists():
                raise ValueError(
                    f"Directory does not contain {PRODUCT_HEADER_NAME}: {path}"
                )
            self.safe_dir = path
            return manifest_path.read_bytes(), _strip_safe_ext(path.name)

        if path.name.lower() == PRODUCT_HEADER_NAME:
            self.safe_dir = path.parent
            return path.read_bytes(), _strip_safe_ext(path.parent.name)

        if path.name.lower().endswith('.zip'):
            for prefix in ZIP_ROOT_PREFIXES:
                entry = find_zip_entry(path, prefix, PRODUCT_HEADER_NAME)
                if entry is not None:
                    break
            else:
                raise ValueError(
                    f"No {PRODUCT_HEADER_NAME} found in zip archive: {path}"
                )
            self.safe_dir = None
            parts = entry.replace('\\', '/').split('/')
            name = parts[-2] if len(parts) > 1 else path.stem
            return read_from_zip(path, entry), _strip_safe_ext(name)

        raise ValueError(
            f"Not a Sentinel-1 ETAD product: {path}. Expected a "
            f"{PRODUCT_EXT} directory, {PRODUCT_HEADER_NAME}, or .zip"
        )

    def _add_abstracted_metadata(self, product: Product) -> None:
        m = self.manifest
        abs_root = meta.add_abstracted_metadata(product)
        abs_root.set_attribute_string(meta.PRODUCT, m.product_name)
        abs_root.set_attribute_string(meta.PRODUCT_TYPE, product.product_type)
        for name, value in (
            (meta.MISSION, m.mission),
            (meta.ACQUISITION_MODE, m.mode),
            (meta.PASS, m.orbit_pass),
            (meta.FIRST_LINE_TIME, m.start_time),
            (meta.LAST_LINE_TIME, m.stop_time),
        ):
            if value is not None:
                abs_root.set_attribute_string(name, value)
        if m.absolute_orbit is not None:
            abs_root.set_attribute_int(meta.ABS_ORBIT, m.absolute_orbit)
        for name, pol in zip(meta.MDS_TX_RX_POLARS, m.polarisations):
            abs_root.set_attribute_string(name, pol)

    def _add_measurement_inventory(self, product: Product) -> None:
        if not _HAS_H5PY:
            logger.debug("h5py not installed; skipping measurement inventory")
            return

        inventory = MetadataElement('Measurement')
        for href in self.manifest.measurement_files:
            filepath = self.safe_dir / href
            if not filepath.is_file():
                logger.debug("Measurement file missing: %s", filepath)
                continue
            try:
                datasets = self.list_measurement_datasets(filepath)
            except OSError as e:
                logger.warning("Unable to inventory measurement file %s: %s",
                               filepath, e)
                continue
            file_elem = inventory.add_element(MetadataElement(filepath.name))
            for ds_path, shape, dtype in datasets:
                ds_elem = file_elem.add_element(MetadataElement(ds_path))
                ds_elem.set_attribute_string(
                    'shape', 'x'.join(str(s) for s in shape),
                )
                ds_elem.set_attribute_string('dtype', dtype)
        if inventory.get_elements():
            meta.get_original_product_metadata(product).add_element(inventory)

    @staticmethod
    def list_measurement_datasets(
        filepath: Union[str, Path],
    ) -> List[Tuple[str, Tuple[int, ...], str]]:
        """List the numeric datasets of an ETAD measurement NetCDF file.

        Parameters
        ----------
        filepath : str or Path
            Measurement file (NetCDF4/HDF5).

        Returns
        -------
        List[Tuple[str, Tuple[int, ...], str]]
            ``(path, shape, dtype)`` per dataset, in file order.

        Raises
        ------
        DependencyError
            If h5py is not installed.
        FileNotFoundError
            If the file does not exist.
        """
        if not _HAS_H5PY:
            raise DependencyError(
                "h5py is required to inventory ETAD measurements. "
                "Install with: pip install h5py"
            )
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        datasets: List[Tuple[str, Tuple[int, ...], str]] = []

        def _visitor(name: str, obj: Any) -> None:
            if isinstance(obj, h5py.Dataset) and obj.dtype.kind in 'biufc':
                datasets.append((name, tuple(obj.shape), str(obj.dtype)))

        with h5py.File(str(filepath), 'r') as f:
            f.visititems(_visitor)
        return datasets
