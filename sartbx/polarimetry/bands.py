# -*- coding: utf-8 -*-
"""
Polarimetric Bands - Classify and gather polarimetric matrix bands.

Inspects a product's band names to decide which polarimetric matrix
representation they encode (quad-pol scattering matrix, covariance or
coherency 2x2/3x3/4x4, compact-pol hybrid scattering vectors), then
gathers the matching band handles into fixed-order ``SourceBandGroup``
arrays, one per constituent of a coregistered stack.

Classification is a single scan over the band names. ``C44``/``T44``
short-circuit; otherwise the first of ``C33``, ``T33``, ``C22``, ``LH``,
``RH`` each name contains raises a flag, and the flags are resolved in
the fixed order C3, T3, C2, LCHCP, RCHCP. A product matching none of
them is treated as full quad-pol.

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
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

# Third-party
import numpy as np

# SARTBX internal
from sartbx.datamodel.metadata import (
    MDS1_TX_RX_POLAR,
    MDS2_TX_RX_POLAR,
    MDS3_TX_RX_POLAR,
    MDS4_TX_RX_POLAR,
    get_abstracted_metadata,
)
from sartbx.datamodel.polarization import get_band_polarization
from sartbx.datamodel.product import Band, Product
from sartbx.datamodel.stack import (
    bands_to_names,
    get_master_band_names,
    get_slave_band_names,
    get_slave_product_names,
    is_coregistered_stack,
    save_master_product_band_names,
    save_slave_product_band_names,
)
from sartbx.datamodel.unit import get_unit_type
from sartbx.exceptions import (
    BandLookupError,
    ClassificationError,
    ValidationError,
)
from sartbx.vocabulary import MatrixType, UnitType

logger = logging.getLogger(__name__)


# ===================================================================
# Band name tables
# ===================================================================

_G4_BAND_NAMES = ('g0', 'g1', 'g2', 'g3')

_LCH_S2_BAND_NAMES = ('i_LH', 'q_LH', 'i_LV', 'q_LV')

_RCH_S2_BAND_NAMES = ('i_RH', 'q_RH', 'i_RV', 'q_RV')

_C2_BAND_NAMES = ('C11', 'C12_real', 'C12_imag', 'C22')

_C3_BAND_NAMES = (
    'C11',
    'C12_real', 'C12_imag',
    'C13_real', 'C13_imag',
    'C22',
    'C23_real', 'C23_imag',
    'C33',
)

_C4_BAND_NAMES = (
    'C11',
    'C12_real', 'C12_imag',
    'C13_real', 'C13_imag',
    'C14_real', 'C14_imag',
    'C22',
    'C23_real', 'C23_imag',
    'C24_real', 'C24_imag',
    'C33',
    'C34_real', 'C34_imag',
    'C44',
)

_T3_BAND_NAMES = tuple('T' + name[1:] for name in _C3_BAND_NAMES)

_T4_BAND_NAMES = tuple('T' + name[1:] for name in _C4_BAND_NAMES)

_BAND_NAME_TABLES: Dict[MatrixType, Tuple[str, ...]] = {
    MatrixType.C2: _C2_BAND_NAMES,
    MatrixType.C3: _C3_BAND_NAMES,
    MatrixType.C4: _C4_BAND_NAMES,
    MatrixType.T3: _T3_BAND_NAMES,
    MatrixType.T4: _T4_BAND_NAMES,
    MatrixType.LCHCP: _LCH_S2_BAND_NAMES,
    MatrixType.RCHCP: _RCH_S2_BAND_NAMES,
}

# Full-pol slot order: (polarization, unit) -> index
_QUAD_POL_SLOTS: Dict[Tuple[str, UnitType], int] = {
    ('hh', UnitType.REAL): 0,
    ('hh', UnitType.IMAGINARY): 1,
    ('hv', UnitType.REAL): 2,
    ('hv', UnitType.IMAGINARY): 3,
    ('vh', UnitType.REAL): 4,
    ('vh', UnitType.IMAGINARY): 5,
    ('vv', UnitType.REAL): 6,
    ('vv', UnitType.IMAGINARY): 7,
}

QUAD_POL_BAND_COUNT = len(_QUAD_POL_SLOTS)

# Markers that identify a 4x4 matrix and end the scan immediately.
_SHORT_CIRCUIT_MARKERS = (
    ('C44', MatrixType.C4),
    ('T44', MatrixType.T4),
)

# Per-name markers, first contained marker wins; list order is also
# the resolution precedence across names.
_FLAG_MARKERS = (
    ('C33', MatrixType.C3),
    ('T33', MatrixType.T3),
    ('C22', MatrixType.C2),
    ('LH', MatrixType.LCHCP),
    ('RH', MatrixType.RCHCP),
)


def get_g4_band_names() -> List[str]:
    """Band names of a compact-pol Stokes vector product."""
    return list(_G4_BAND_NAMES)


def get_lch_mode_s2_band_names() -> List[str]:
    """Band names of a left circular hybrid compact-pol scattering vector."""
    return list(_LCH_S2_BAND_NAMES)


def get_rch_mode_s2_band_names() -> List[str]:
    """Band names of a right circular hybrid compact-pol scattering vector."""
    return list(_RCH_S2_BAND_NAMES)


def get_c2_band_names() -> List[str]:
    """Band names of a compact-pol 2x2 covariance matrix product."""
    return list(_C2_BAND_NAMES)


def get_c3_band_names() -> List[str]:
    return list(_C3_BAND_NAMES)


def get_c4_band_names() -> List[str]:
    return list(_C4_BAND_NAMES)


def get_t3_band_names() -> List[str]:
    return list(_T3_BAND_NAMES)


def get_t4_band_names() -> List[str]:
    return list(_T4_BAND_NAMES)


def get_band_names(matrix_type: MatrixType) -> List[str]:
    """Return the canonical band name table for a matrix kind.

    Parameters
    ----------
    matrix_type : MatrixType
        Any kind except ``MatrixType.FULL``.

    Returns
    -------
    List[str]
        Canonical band-name substrings in table order.

    Raises
    ------
    ValidationError
        If ``matrix_type`` is ``FULL`` (full-pol bands are resolved by
        polarization and unit, not by name) or not a ``MatrixType``.
    """
    try:
        return list(_BAND_NAME_TABLES[matrix_type])
    except KeyError:
        raise ValidationError(
            f"No band name table for matrix type {matrix_type!r}. "
            f"Tables exist for: {[m.value for m in _BAND_NAME_TABLES]}"
        ) from None


# ===================================================================
# Source band groups
# ===================================================================

@dataclass(eq=False)
class SourceBandGroup:
    """Bands of one constituent product, in matrix table order.

    Parameters
    ----------
    product_name : str
        Name of the constituent product (the stack itself for the
        master, the slave product name otherwise).
    src_bands : List[Band]
        Resolved source bands, 8 for full-pol or one per table entry.
    suffix : str
        Name suffix distinguishing this constituent's bands in a stack.
        Empty for a non-stack product.

    Attributes
    ----------
    target_bands : List[Band], optional
        Target bands created by a consuming operator.
    span_min, span_max : float
        Running span statistics, updated with ``update_span``.
    span_min_max_set : bool
        Whether ``span_min``/``span_max`` hold real values yet.
    """

    product_name: str
    src_bands: List[Band]
    suffix: str
    target_bands: Optional[List[Band]] = None
    span_min: float = 1e+30
    span_max: float = -1e+30
    span_min_max_set: bool = False

    def add_target_bands(self, target_bands: Sequence[Band]) -> None:
        self.target_bands = list(target_bands)

    def update_span(self, values: np.ndarray) -> None:
        """Fold the finite values of ``values`` into the span statistics.

        Arrays with no finite values leave the statistics untouched.
        """
        values = np.asarray(values)
        finite = values[np.isfinite(values)]
        if finite.size == 0:
            return
        self.span_min = min(self.span_min, float(finite.min()))
        self.span_max = max(self.span_max, float(finite.max()))
        self.span_min_max_set = True


# ===================================================================
# Classification
# ===================================================================

def classify_band_names(band_names: Iterable[str]) -> MatrixType:
    """Determine the matrix kind encoded by a list of band names.

    Parameters
    ----------
    band_names : iterable of str
        Band names of the product.

    Returns
    -------
    MatrixType
        ``C4``/``T4`` as soon as a ``C44``/``T44`` name is seen,
        otherwise the first of C3, T3, C2, LCHCP, RCHCP whose marker
        was found, otherwise ``FULL``.
    """
    found = set()
    for name in band_names:
        for marker, matrix_type in _SHORT_CIRCUIT_MARKERS:
            if marker in name:
                return matrix_type
        for marker, matrix_type in _FLAG_MARKERS:
            if marker in name:
                found.add(matrix_type)
                break

    for _, matrix_type in _FLAG_MARKERS:
        if matrix_type in found:
            return matrix_type
    return MatrixType.FULL


def get_source_product_type(product: Product) -> MatrixType:
    """Classify the polarimetric matrix kind of ``product``'s bands."""
    matrix_type = classify_band_names(product.get_band_names())
    logger.debug("Product %s classified as %s",
                 product.name, matrix_type.value)
    return matrix_type


# ===================================================================
# Extraction
# ===================================================================

def _get_quad_pol_src_bands(
    product: Product, band_names: Sequence[str],
) -> List[Band]:
    """Gather the eight real/imaginary quad-pol bands in slot order."""
    abs_root = get_abstracted_metadata(product)
    slots: List[Optional[Band]] = [None] * QUAD_POL_BAND_COUNT

    for name in band_names:
        band = product.get_band(name)
        if band is None:
            raise BandLookupError(f"Band {name} not found")

        unit_type = get_unit_type(band)
        if unit_type not in (UnitType.REAL, UnitType.IMAGINARY):
            continue

        pol = get_band_polarization(band.name, abs_root)
        index = _QUAD_POL_SLOTS.get((pol, unit_type))
        if index is None:
            continue
        if slots[index] is not None:
            raise ClassificationError(
                "A full polarization product is expected as input."
            )
        slots[index] = band

    if any(band is None for band in slots):
        raise ClassificationError(
            "A full polarization product is expected as input."
        )
    return slots


def _get_product_bands(
    product: Product,
    band_names: Sequence[str],
    valid_band_names: Sequence[str],
) -> List[Band]:
    """Place each band at the table index of the entry its name contains."""
    slots: List[Optional[Band]] = [None] * len(valid_band_names)

    for name in band_names:
        band = product.get_band(name)
        if band is None:
            raise BandLookupError(f"Band {name} not found")

        for index, valid_name in enumerate(valid_band_names):
            if valid_name in name:
                if slots[index] is not None:
                    raise ClassificationError(
                        "Input is not a valid polarimetric matrix"
                    )
                slots[index] = band
                break

    if any(band is None for band in slots):
        raise ClassificationError("Input is not a valid polarimetric matrix")
    return slots


def get_bands(
    product: Product,
    matrix_type: MatrixType,
    band_names: Sequence[str],
) -> List[Band]:
    """Resolve ``band_names`` on ``product`` into a fixed-order band array.

    Parameters
    ----------
    product : Product
        Product owning the bands.
    matrix_type : MatrixType
        Matrix kind the bands are expected to encode.
    band_names : sequence of str
        Candidate band names, e.g. one constituent of a stack.

    Returns
    -------
    List[Band]
        Eight bands (hh, hv, vh, vv; real then imaginary) for ``FULL``,
        otherwise one band per entry of the kind's band name table.

    Raises
    ------
    BandLookupError
        If a candidate name is not a band of ``product``.
    ClassificationError
        If the bands do not fill the expected slots exactly once.
    """
    if matrix_type == MatrixType.FULL:
        return _get_quad_pol_src_bands(product, band_names)
    return _get_product_bands(
        product, band_names, get_band_names(matrix_type),
    )


def _stack_suffix(band_names: Sequence[str], product_name: str) -> str:
    """Text after the last underscore of the first band name."""
    if not band_names:
        raise BandLookupError(
            f"No bands recorded for stack constituent {product_name}"
        )
    return band_names[0].rsplit('_', 1)[-1]


def get_source_bands(
    product: Product, matrix_type: MatrixType,
) -> List[SourceBandGroup]:
    """Gather the polarimetric source bands of a product.

    A coregistered stack yields one group for the master bands followed
    by one group per slave product, each suffixed with the trailing
    token of its first band name. Any other product yields a single
    group over all bands with an empty suffix.

    Parameters
    ----------
    product : Product
        Source product.
    matrix_type : MatrixType
        Kind returned by ``get_source_product_type``.

    Returns
    -------
    List[SourceBandGroup]

    Raises
    ------
    BandLookupError
        If a recorded band is missing from the product.
    ClassificationError
        If a constituent's bands do not form a valid matrix.

    Examples
    --------
    >>> matrix_type = get_source_product_type(product)
    >>> groups = get_source_bands(product, matrix_type)
    >>> groups[0].src_bands[0].name
    'C11'
    """
    groups: List[SourceBandGroup] = []

    if is_coregistered_stack(product):
        mst_band_names = get_master_band_names(product)
        suffix = _stack_suffix(mst_band_names, product.name)
        groups.append(SourceBandGroup(
            product.name,
            get_bands(product, matrix_type, mst_band_names),
            suffix,
        ))

        for slv_product in get_slave_product_names(product):
            slv_band_names = get_slave_band_names(product, slv_product)
            suffix = _stack_suffix(slv_band_names, slv_product)
            groups.append(SourceBandGroup(
                slv_product,
                get_bands(product, matrix_type, slv_band_names),
                suffix,
            ))
    else:
        groups.append(SourceBandGroup(
            product.name,
            get_bands(product, matrix_type, product.get_band_names()),
            '',
        ))

    logger.debug("Extracted %d %s source band group(s) from %s",
                 len(groups), matrix_type.value, product.name)
    return groups


def save_new_band_names(
    target_product: Product, groups: Sequence[SourceBandGroup],
) -> None:
    """Record each group's target band names in a stack's bookkeeping.

    The first group is saved as the master, every later one as the slave
    product named by its ``product_name``. Does nothing unless
    ``target_product`` is a coregistered stack.

    Raises
    ------
    ValidationError
        If a group has no target bands.
    """
    if not is_coregistered_stack(target_product):
        return

    for i, group in enumerate(groups):
        if group.target_bands is None:
            raise ValidationError(
                f"Source band group {group.product_name!r} has no "
                f"target bands to save"
            )
        names = bands_to_names(group.target_bands)
        if i == 0:
            save_master_product_band_names(target_product, names)
        else:
            save_slave_product_band_names(
                target_product, group.product_name, names,
            )


def get_polar_type(product: Product) -> str:
    """Report the acquisition polarization mode from abstracted metadata.

    Returns
    -------
    str
        ``'full'`` when all four ``mdsN_tx_rx_polar`` attributes are
        populated, ``'dual'`` when only the first two are, ``'single'``
        otherwise.
    """
    abs_root = get_abstracted_metadata(product)
    if abs_root is not None:
        pol1, pol2, pol3, pol4 = (
            abs_root.get_attribute_string(name, '').strip()
            for name in (MDS1_TX_RX_POLAR, MDS2_TX_RX_POLAR,
                         MDS3_TX_RX_POLAR, MDS4_TX_RX_POLAR)
        )
        if pol1 and pol2:
            if pol3 and pol4:
                return 'full'
            return 'dual'
    return 'single'
