"""Catalogue-backed translation package.

Provides the translation stack: type aliases, catalogue storage, directory
loading and the Translator facade.

Submodules:
    types      - PEP 695 type aliases (Domain, MessageId, RawTemplate, LocaleLike)
    catalogue  - Catalogue, CatalogueBag
    loading    - scan_directory, load_directory, load_directory_async
    translator - Translator, FallbackInfo

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from tarjama.localization.catalogue import Catalogue, CatalogueBag
from tarjama.localization.loading import (
    CatalogueLayout,
    load_directory,
    load_directory_async,
    read_catalogue_file,
    scan_directory,
)
from tarjama.localization.translator import FallbackInfo, Translator
from tarjama.localization.types import ContextLike, Domain, LocaleLike, MessageId, RawTemplate

__all__ = [
    # Facade
    "Translator",
    # Storage
    "Catalogue",
    "CatalogueBag",
    # Loading
    "CatalogueLayout",
    "load_directory",
    "load_directory_async",
    "read_catalogue_file",
    "scan_directory",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "ContextLike",
    "Domain",
    "LocaleLike",
    "MessageId",
    "RawTemplate",
]
