# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for product reader plug-ins.

A ``ProductReaderPlugIn`` describes one product format: which inputs it
accepts, how well it can decode a given input, and how to create a
``ProductReader`` for it. Readers turn an input into a ``Product``.
``ProductFileFilter`` offers the plug-in's naming conventions to file
choosers.

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from sartbx.datamodel.product import Product
from sartbx.vocabulary import DecodeQualification


class ProductReaderPlugIn(ABC):
    """
    Abstract base class for all product reader plug-ins.

    Concrete plug-ins declare their format names, file extensions, and
    metadata file hints, decide whether they can decode an input, and
    act as the factory for their reader.

    Notes
    -----
    ``get_decode_qualification`` must never raise; any failure to probe
    an input means ``DecodeQualification.UNABLE``.
    """

    @abstractmethod
    def get_decode_qualification(self, input: Any) -> DecodeQualification:
        """
        Decide whether this plug-in can decode ``input``.

        Parameters
        ----------
        input : Any
            Candidate input, typically a path or path string.

        Returns
        -------
        DecodeQualification
            ``INTENDED`` if the input is this plug-in's format,
            ``SUITABLE`` if it can be read, ``UNABLE`` otherwise.
        """
        pass

    @abstractmethod
    def create_reader_instance(self) -> 'ProductReader':
        """
        Create a new reader for this format.

        Returns
        -------
        ProductReader
            A new reader instance, never None.
        """
        pass

    @abstractmethod
    def get_input_types(self) -> Tuple[type, ...]:
        """Types of input accepted by ``get_decode_qualification``."""
        pass

    @abstractmethod
    def get_format_names(self) -> List[str]:
        """Names of the product formats handled by this plug-in."""
        pass

    @abstractmethod
    def get_default_file_extensions(self) -> List[str]:
        """Default file extensions, each with a leading ``'.'``."""
        pass

    @abstractmethod
    def get_description(self, locale: Optional[str] = None) -> str:
        """Short human-readable description of the plug-in."""
        pass

    def get_product_metadata_file_extensions(self) -> List[str]:
        """Extensions of the product's metadata container (e.g. ``.SAFE``)."""
        return []

    def get_product_metadata_file_prefixes(self) -> List[str]:
        """Name prefixes of the product's metadata file (e.g. ``MANIFEST``)."""
        return []

    def get_product_file_filter(self) -> 'ProductFileFilter':
        """File filter built from this plug-in's naming conventions."""
        return ProductFileFilter(self)


class ProductReader(ABC):
    """
    Abstract base class for all product readers.

    Parameters
    ----------
    plugin : ProductReaderPlugIn
        The plug-in that created this reader.

    Attributes
    ----------
    input : Any
        The input passed to ``read_product_nodes``.
    product : Product
        The product read last, or None.
    """

    def __init__(self, plugin: ProductReaderPlugIn) -> None:
        self.plugin = plugin
        self.input: Any = None
        self.product: Optional[Product] = None

    def get_reader_plugin(self) -> ProductReaderPlugIn:
        return self.plugin

    def read_product_nodes(self, input: Any) -> Product:
        """
        Read the product structure and metadata from ``input``.

        Parameters
        ----------
        input : Any
            Input accepted by the reader's plug-in.

        Returns
        -------
        Product

        Raises
        ------
        ValueError
            If ``input`` is not an accepted input type or cannot be read.
        FileNotFoundError
            If the input path does not exist.
        """
        if not isinstance(input, self.plugin.get_input_types()):
            raise ValueError(
                f"Invalid input type {type(input).__name__} for "
                f"{type(self).__name__}"
            )
        self.input = input
        self.product = self._read_product_nodes_impl()
        return self.product

    @abstractmethod
    def _read_product_nodes_impl(self) -> Product:
        """Format-specific product construction from ``self.input``."""
        pass

    def close(self) -> None:
        """
        Close the reader and release resources.

        Default implementation drops the reference to the product.
        """
        self.product = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class ProductFileFilter:
    """
    File filter derived from a reader plug-in's naming conventions.

    Accepts files whose extension is one of the plug-in's default
    extensions, files whose name starts with one of its metadata file
    prefixes, and directories whose name ends with one of its metadata
    file extensions. All comparisons are case-insensitive.

    Parameters
    ----------
    plugin : ProductReaderPlugIn
        Plug-in supplying the naming conventions.

    Examples
    --------
    >>> file_filter = plugin.get_product_file_filter()
    >>> file_filter.accept('S1A_ETA_...SAFE')
    True
    """

    def __init__(self, plugin: ProductReaderPlugIn) -> None:
        self.plugin = plugin
        self.format_name = plugin.get_format_names()[0]
        self.extensions = [
            e.lower() for e in plugin.get_default_file_extensions()
        ]
        self.description = plugin.get_description()

    def accept(self, filepath: Union[str, Path]) -> bool:
        """Whether ``filepath`` looks like a product of this format."""
        filepath = Path(filepath)
        name = filepath.name.lower()

        if filepath.is_dir():
            return any(
                name.endswith(ext.lower())
                for ext in self.plugin.get_product_metadata_file_extensions()
            )

        if any(name.endswith(ext) for ext in self.extensions):
            return True
        return any(
            name.startswith(prefix.lower())
            for prefix in self.plugin.get_product_metadata_file_prefixes()
        )
