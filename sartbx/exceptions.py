# -*- coding: utf-8 -*-
"""
SARTBX Exception Hierarchy - Domain-specific exceptions for SARTBX operations.

Provides a small exception hierarchy that lets processing operators catch
SARTBX-specific errors distinctly from Python built-in exceptions. All
SARTBX exceptions subclass both ``SartbxError`` and the appropriate
built-in exception for backward compatibility.

Author
------
Steven Siebert

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


class SartbxError(Exception):
    """Base exception for all SARTBX errors."""


class ValidationError(SartbxError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for unknown matrix types, missing target bands, and other
    input validation failures.
    """


class OperatorError(SartbxError, RuntimeError):
    """Fatal failure of a processing step.

    The calling operator must abort; no partial or degraded result
    is produced.
    """


class ClassificationError(OperatorError):
    """Band layout does not match the expected polarimetric matrix.

    Raised when a band required by a matrix table is missing, or when
    a full-pol product does not fill every real/imaginary slot exactly
    once.
    """


class BandLookupError(OperatorError, KeyError):
    """A named band does not exist on the product."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ''


class DependencyError(SartbxError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when a module requires an optional package (h5py) that
    is not installed.
    """
