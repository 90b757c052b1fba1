# -*- coding: utf-8 -*-
"""
IO Utilities - Input resolution and zip archive probes for reader plug-ins.

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
import os
import zipfile
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


def get_path_from_input(input: Any) -> Optional[Path]:
    """Resolve a reader input to a filesystem path.

    Parameters
    ----------
    input : Any
        ``str``, ``pathlib.Path``, or any other ``os.PathLike``.

    Returns
    -------
    Path or None
        None for any other input type.
    """
    if isinstance(input, Path):
        return input
    if isinstance(input, str):
        return Path(input)
    if isinstance(input, os.PathLike):
        path = os.fspath(input)
        if isinstance(path, bytes):
            path = os.fsdecode(path)
        return Path(path)
    return None


def find_in_zip(
    filepath: Union[str, Path],
    prefix: str,
    suffix: str,
) -> bool:
    """Whether a zip archive lists a file entry with ``prefix`` and ``suffix``.

    Entry names are compared lower-case, so ``prefix`` and ``suffix``
    should be given in lower case. Directory entries are ignored.

    Parameters
    ----------
    filepath : str or Path
        Zip archive.
    prefix : str
        Required start of the entry name (e.g. ``'s1'``).
    suffix : str
        Required end of the entry name (e.g. ``'manifest.safe'``).

    Returns
    -------
    bool
        False when no entry matches or the archive cannot be read.
    """
    return find_zip_entry(filepath, prefix, suffix) is not None


def find_zip_entry(
    filepath: Union[str, Path],
    prefix: str,
    suffix: str,
) -> Optional[str]:
    """Return the first file entry name matching ``prefix``/``suffix``.

    See ``find_in_zip``. Unreadable archives are logged and yield None.
    """
    try:
        with zipfile.ZipFile(str(filepath), 'r') as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                name = info.filename.lower()
                if name.startswith(prefix) and name.endswith(suffix):
                    return info.filename
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        logger.warning("Unable to read zip archive %s: %s", filepath, e)
    return None


def read_from_zip(filepath: Union[str, Path], entry_name: str) -> bytes:
    """Read one entry of a zip archive into memory.

    Raises
    ------
    ValueError
        If the archive is invalid or does not contain ``entry_name``.
    """
    try:
        with zipfile.ZipFile(str(filepath), 'r') as zf:
            return zf.read(entry_name)
    except (zipfile.BadZipFile, KeyError) as e:
        raise ValueError(
            f"Failed to read {entry_name!r} from {filepath}: {e}"
        ) from e
