# -*- coding: utf-8 -*-
"""
IO Models - Typed metadata containers for reader plug-ins.

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
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ETADManifest:
    """Sentinel-1 ETAD product information parsed from ``manifest.safe``.

    Parameters
    ----------
    product_name : str
        SAFE product name without the ``.SAFE`` extension.
    mission : str, optional
        Mission identifier (``'SENTINEL-1A'``, ``'SENTINEL-1B'``, ...),
        built from the platform family name and number.
    product_type : str, optional
        Product type (``'ETA'``).
    mode : str, optional
        Acquisition mode (``'IW'``, ``'EW'``, ``'SM'``).
    orbit_pass : str, optional
        ``'ASCENDING'`` or ``'DESCENDING'``.
    absolute_orbit : int, optional
        Absolute orbit number at product start.
    start_time : str, optional
        UTC acquisition start time (ISO 8601).
    stop_time : str, optional
        UTC acquisition stop time (ISO 8601).
    polarisations : List[str]
        Transmit/receive polarisations (``['VV', 'VH']``).
    measurement_files : List[str]
        Manifest-relative paths of the measurement files.
    """

    product_name: str
    mission: Optional[str] = None
    product_type: Optional[str] = None
    mode: Optional[str] = None
    orbit_pass: Optional[str] = None
    absolute_orbit: Optional[int] = None
    start_time: Optional[str] = None
    stop_time: Optional[str] = None
    polarisations: List[str] = field(default_factory=list)
    measurement_files: List[str] = field(default_factory=list)
