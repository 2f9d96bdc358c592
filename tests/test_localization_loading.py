"""Tests for directory scanning and TOML catalogue loading.

Python 3.13+.
"""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from tarjama import Context, Locale, Translator
from tarjama.diagnostics import DiagnosticCode, LoadingError
from tarjama.localization import (
    load_directory,
    load_directory_async,
    read_catalogue_file,
    scan_directory,
)

type WriteCatalogue = Callable[[str, str], Path]

EN_MESSAGES = """\
greeting = "Hello, {name}!"
apple = "{0} There are no apples | {1} There is one apple | There are {?} apples"
"""

FR_MESSAGES = """\
greeting = "Bonjour, {name}!"
"""


@pytest.fixture
def translations(tmp_path: Path, write_catalogue: WriteCatalogue) -> Path:
    write_catalogue("messages.en.toml", EN_MESSAGES)
    write_catalogue("messages.fr.toml", FR_MESSAGES)
    write_catalogue("errors.en-US.toml", 'not_found = "Not found"\n')
    write_catalogue("notes.txt", "ignored")
    (tmp_path / "nested.en.toml").mkdir()
    return tmp_path


class TestScanDirectory:
    """Discovery of {domain}.{locale}.{ext} files."""

    def test_layout(self, translations: Path) -> None:
        layout = scan_directory(translations)
        assert layout == {
            Locale("en", "US"): {"errors": [str(translations / "errors.en-US.toml")]},
            Locale("en"): {"messages": [str(translations / "messages.en.toml")]},
            Locale("fr"): {"messages": [str(translations / "messages.fr.toml")]},
        }

    def test_extensions_filter(self, tmp_path: Path, write_catalogue: WriteCatalogue) -> None:
        write_catalogue("messages.en.toml", EN_MESSAGES)
        write_catalogue("messages.fr.tml", FR_MESSAGES)
        assert list(scan_directory(tmp_path, extensions=("tml",))) == [Locale("fr")]
        assert list(scan_directory(tmp_path)) == [Locale("en")]

    def test_dotted_domain(self, tmp_path: Path, write_catalogue: WriteCatalogue) -> None:
        write_catalogue("app.errors.fr.toml", FR_MESSAGES)
        assert scan_directory(tmp_path) == {
            Locale("fr"): {"app.errors": [str(tmp_path / "app.errors.fr.toml")]}
        }

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert scan_directory(tmp_path) == {}

    def test_missing_directory(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing"
        with pytest.raises(LoadingError) as exc_info:
            scan_directory(missing)
        assert str(exc_info.value) == "unreadable node: directory, no such file or directory."
        assert exc_info.value.path == str(missing)

    def test_filename_without_locale(
        self, tmp_path: Path, write_catalogue: WriteCatalogue
    ) -> None:
        write_catalogue("messages.toml", EN_MESSAGES)
        with pytest.raises(LoadingError) as exc_info:
            scan_directory(tmp_path)
        assert str(exc_info.value) == (
            "invalid filename: format, expected `{domain}.{locale}.{ext}` for `messages.toml`."
        )

    def test_filename_with_unknown_locale(
        self, tmp_path: Path, write_catalogue: WriteCatalogue
    ) -> None:
        write_catalogue("messages.foo.toml", EN_MESSAGES)
        with pytest.raises(LoadingError) as exc_info:
            scan_directory(tmp_path)
        assert str(exc_info.value) == (
            "invalid filename: locale, expected valid locale code, "
            "found `foo` in `messages.foo.toml`."
        )
        assert exc_info.value.code is DiagnosticCode.FILENAME_INVALID_LOCALE


class TestReadCatalogueFile:
    """Single-file parsing and validation."""

    def test_reads_flat_table(self, write_catalogue: WriteCatalogue) -> None:
        path = write_catalogue("messages.en.toml", EN_MESSAGES)
        messages = read_catalogue_file(str(path))
        assert list(messages) == ["greeting", "apple"]

    def test_invalid_toml(self, write_catalogue: WriteCatalogue) -> None:
        path = str(write_catalogue("messages.en.toml", "greeting = \n"))
        with pytest.raises(LoadingError) as exc_info:
            read_catalogue_file(path)
        assert exc_info.value.code is DiagnosticCode.FILE_UNPARSABLE
        assert str(exc_info.value).startswith(f"unparsable node: file `{path}`, ")

    @pytest.mark.parametrize(
        ("content", "type_name"),
        [
            ("count = 3\n", "integer"),
            ("count = 3.5\n", "float"),
            ("count = true\n", "boolean"),
            ("count = [1, 2]\n", "array"),
            ("[count]\nkey = \"v\"\n", "table"),
            ("count = 1979-05-27\n", "datetime"),
        ],
    )
    def test_non_string_value(
        self, write_catalogue: WriteCatalogue, content: str, type_name: str
    ) -> None:
        path = str(write_catalogue("messages.en.toml", content))
        with pytest.raises(LoadingError) as exc_info:
            read_catalogue_file(path)
        assert str(exc_info.value) == (
            f"invalid type: {type_name}, expected a string for key `count` in `{path}`."
        )

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "messages.en.toml"
        path.write_bytes(b'greeting = "\xff"\n')
        with pytest.raises(LoadingError) as exc_info:
            read_catalogue_file(str(path))
        assert exc_info.value.code is DiagnosticCode.FILE_UNREADABLE

    def test_missing_file(self, tmp_path: Path) -> None:
        path = str(tmp_path / "messages.en.toml")
        with pytest.raises(LoadingError) as exc_info:
            read_catalogue_file(path)
        assert str(exc_info.value) == (
            f"unreadable node: file `{path}`, no such file or directory."
        )


class TestLoadDirectory:
    """Building a CatalogueBag from a directory."""

    def test_one_catalogue_per_locale(self, translations: Path) -> None:
        bag = load_directory(translations)
        assert len(bag) == 3
        assert {str(locale) for locale in bag.locales()} == {"en", "en_US", "fr"}
        (english,) = bag.get(Locale("en"))
        assert english.get("messages", "greeting") == "Hello, {name}!"

    def test_translate_loaded_bag(self, translations: Path) -> None:
        translator = Translator(load_directory(translations), fallback_locale="en")
        assert translator.trans("fr", "messages", "apple", Context.from_count(4)) == (
            "There are 4 apples"
        )
        assert translator.trans("en-US", "errors", "not_found") == "Not found"

    def test_first_bad_file_fails(
        self, translations: Path, write_catalogue: WriteCatalogue
    ) -> None:
        write_catalogue("broken.de.toml", "key = [")
        with pytest.raises(LoadingError) as exc_info:
            load_directory(translations)
        assert exc_info.value.path == str(translations / "broken.de.toml")

    def test_logs_summary(self, translations: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="tarjama.localization.loading"):
            load_directory(translations)
        assert "Loaded 3 catalogues" in caplog.text


class TestLoadDirectoryAsync:
    """Concurrent loading yields the same bag."""

    def test_same_result_as_sync(self, translations: Path) -> None:
        assert asyncio.run(load_directory_async(translations)) == load_directory(translations)

    def test_errors_propagate(self, tmp_path: Path, write_catalogue: WriteCatalogue) -> None:
        write_catalogue("messages.en.toml", "count = 1\n")
        with pytest.raises(LoadingError):
            asyncio.run(load_directory_async(tmp_path))

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(LoadingError) as exc_info:
            asyncio.run(load_directory_async(tmp_path / "missing"))
        assert exc_info.value.code is DiagnosticCode.DIRECTORY_UNREADABLE
