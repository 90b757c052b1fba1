# -*- coding: utf-8 -*-
"""
Band Polarization - Resolve the transmit/receive polarization of a band.

Band names produced by SAR readers and polarimetric operators carry the
polarization as an underscore-delimited token (``i_HH``, ``Sigma0_VV_db``,
``q_LH``). When the name carries no such token, a single-polarization
product's abstracted metadata supplies the answer.

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
from typing import Optional

# SARTBX internal
from sartbx.datamodel.metadata import MetadataElement, get_polarisations

LINEAR_POLARIZATIONS = ('hh', 'hv', 'vh', 'vv')
COMPACT_POLARIZATIONS = ('lh', 'lv', 'rh', 'rv')

_KNOWN = frozenset(LINEAR_POLARIZATIONS + COMPACT_POLARIZATIONS)


def get_polarization_from_band_name(band_name: str) -> Optional[str]:
    """Return the polarization token in ``band_name``, or None.

    Examples
    --------
    >>> get_polarization_from_band_name('i_HH_mst_01Jan2020')
    'hh'
    >>> get_polarization_from_band_name('C11') is None
    True
    """
    for token in band_name.lower().split('_'):
        if token in _KNOWN:
            return token
    return None


def get_band_polarization(
    band_name: str,
    abs_root: Optional[MetadataElement] = None,
) -> str:
    """Resolve a band's polarization.

    Parameters
    ----------
    band_name : str
        Band name.
    abs_root : MetadataElement, optional
        Abstracted metadata of the owning product, used when the name
        carries no polarization token.

    Returns
    -------
    str
        Lower-case polarization (``'hh'``, ``'hv'``, ``'vh'``, ``'vv'``,
        or a compact-pol ``'lh'``/``'lv'``/``'rh'``/``'rv'``), or ``''``
        if it cannot be determined.
    """
    pol = get_polarization_from_band_name(band_name)
    if pol is not None:
        return pol

    pols = get_polarisations(abs_root)
    if len(pols) == 1:
        return pols[0].lower()
    return ''
