"""Catalogue loading from a directory of TOML files.

Files are named ``{domain}.{locale}.{ext}``, e.g. ``messages.fr.toml`` or
``errors.pt-BR.toml``. Each TOML file is a flat table mapping message ids
to raw templates:

    greeting = "Hello, {name}!"
    apple = "{0} There are no apples | {1} There is one apple | There are {?} apples"

Components:
    scan_directory - Discover catalogue files, grouped by locale and domain
    load_directory - Build a CatalogueBag (one catalogue per locale)
    load_directory_async - Same, reading and parsing files concurrently

Loading fails fast: the first unreadable, misnamed or malformed file raises
a LoadingError naming it.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tomllib
from collections.abc import Iterable
from datetime import date, datetime, time
from pathlib import Path

from tarjama.constants import DEFAULT_EXTENSIONS, FILE_ENCODING
from tarjama.diagnostics import ErrorTemplate, InvalidLocaleError, LoadingError
from tarjama.locale_utils import Locale
from tarjama.localization.catalogue import Catalogue, CatalogueBag
from tarjama.localization.types import Domain, MessageId, RawTemplate

__all__ = [
    "CatalogueLayout",
    "load_directory",
    "load_directory_async",
    "read_catalogue_file",
    "scan_directory",
]

logger = logging.getLogger(__name__)

type CatalogueLayout = dict[Locale, dict[Domain, list[str]]]
"""Catalogue files grouped by locale, then domain."""


def _reason(error: OSError) -> str:
    return (error.strerror or str(error)).lower()


def _toml_type_name(value: object) -> str:
    match value:
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case dict():
            return "table"
        case list():
            return "array"
        case datetime() | date() | time():
            return "datetime"
        case _:
            return type(value).__name__


def scan_directory(
    directory: str | os.PathLike[str],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> CatalogueLayout:
    """Discover catalogue files in a directory (non-recursive).

    Only regular files whose extension is in extensions are considered;
    they are visited in name order.

    Args:
        directory: Directory holding ``{domain}.{locale}.{ext}`` files
        extensions: Extensions to consider, without the dot

    Returns:
        Mapping locale -> domain -> file paths

    Raises:
        LoadingError: If the directory cannot be listed, or a candidate file
            name lacks a domain or carries an unknown locale

    Example:
        >>> layout = scan_directory("examples/translations")  # doctest: +SKIP
        >>> layout[Locale("fr")]["messages"]  # doctest: +SKIP
        ['examples/translations/messages.fr.toml']
    """
    root = Path(directory)
    allowed = frozenset(extensions)

    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        logger.error("Failed to read catalogue directory %s: %s", root, e)
        raise LoadingError(
            ErrorTemplate.directory_unreadable(_reason(e)), path=str(root)
        ) from e

    layout: CatalogueLayout = {}
    for entry in entries:
        extension = entry.suffix.removeprefix(".")
        if not extension or extension not in allowed or not entry.is_file():
            continue

        domain, separator, locale_code = entry.stem.rpartition(".")
        if not separator:
            logger.error("Catalogue file %s is not named {domain}.{locale}.{ext}", entry)
            raise LoadingError(ErrorTemplate.filename_invalid_format(entry.name), path=str(entry))

        try:
            locale = Locale.parse(locale_code)
        except InvalidLocaleError as e:
            logger.error("Catalogue file %s has an unknown locale: %s", entry, locale_code)
            raise LoadingError(
                ErrorTemplate.filename_invalid_locale(locale_code, entry.name), path=str(entry)
            ) from e

        layout.setdefault(locale, {}).setdefault(domain, []).append(str(entry))
        logger.debug("Found catalogue file %s (locale=%s, domain=%s)", entry, locale, domain)

    return layout


def read_catalogue_file(path: str) -> dict[MessageId, RawTemplate]:
    """Read one TOML catalogue file.

    Args:
        path: File path

    Returns:
        Message id -> raw template, in file order

    Raises:
        LoadingError: If the file cannot be read or decoded, is not valid
            TOML, or maps a key to a non-string value
    """
    try:
        content = Path(path).read_text(encoding=FILE_ENCODING)
    except OSError as e:
        logger.error("Failed to read catalogue file %s: %s", path, e)
        raise LoadingError(ErrorTemplate.file_unreadable(path, _reason(e)), path=path) from e
    except UnicodeDecodeError as e:
        logger.error("Failed to decode catalogue file %s: %s", path, e)
        raise LoadingError(ErrorTemplate.file_unreadable(path, str(e)), path=path) from e

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        logger.error("Failed to parse catalogue file %s: %s", path, e)
        raise LoadingError(ErrorTemplate.file_unparsable(path, str(e)), path=path) from e

    for key, value in data.items():
        if not isinstance(value, str):
            diagnostic = ErrorTemplate.file_invalid_value(_toml_type_name(value), key, path)
            logger.error("Invalid catalogue file %s: %s", path, diagnostic.message)
            raise LoadingError(diagnostic, path=path)

    logger.debug("Read %d messages from %s", len(data), path)
    return data


def _assemble(
    layout: CatalogueLayout,
    contents: dict[str, dict[MessageId, RawTemplate]],
) -> CatalogueBag:
    bag = CatalogueBag()
    for locale, domains in layout.items():
        catalogue = Catalogue(locale)
        for domain, paths in domains.items():
            for path in paths:
                for message_id, message in contents[path].items():
                    catalogue.insert(domain, message_id, message)
        bag.insert(catalogue)
    return bag


def load_directory(
    directory: str | os.PathLike[str],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> CatalogueBag:
    """Load every ``{domain}.{locale}.toml`` file of a directory.

    Args:
        directory: Directory holding the catalogue files
        extensions: Extensions to consider, without the dot; files are
            parsed as TOML whatever their extension

    Returns:
        CatalogueBag with one catalogue per locale

    Raises:
        LoadingError: On the first directory, file name, read or parse failure

    Example:
        >>> bag = load_directory("examples/translations")  # doctest: +SKIP
        >>> Translator(bag).trans("fr", "messages", "greeting", context(name="Rust"))  # doctest: +SKIP
        'Bonjour, Rust!'
    """
    layout = scan_directory(directory, extensions)
    contents = {
        path: read_catalogue_file(path)
        for domains in layout.values()
        for paths in domains.values()
        for path in paths
    }
    bag = _assemble(layout, contents)
    logger.info("Loaded %d catalogues from %s", len(bag), directory)
    return bag


async def load_directory_async(
    directory: str | os.PathLike[str],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> CatalogueBag:
    """Load a catalogue directory, reading and parsing files concurrently.

    File I/O and TOML parsing run in worker threads; the result is the same
    as load_directory().

    Raises:
        LoadingError: On the first directory, file name, read or parse failure
    """
    layout = await asyncio.to_thread(scan_directory, directory, tuple(extensions))
    paths = [path for domains in layout.values() for files in domains.values() for path in files]
    results = await asyncio.gather(
        *(asyncio.to_thread(read_catalogue_file, path) for path in paths)
    )
    bag = _assemble(layout, dict(zip(paths, results, strict=True)))
    logger.info("Loaded %d catalogues from %s", len(bag), directory)
    return bag
