"""Catalogue storage: locale -> domain -> message id -> raw template.

Components:
    Catalogue - Messages of one locale, grouped by domain
    CatalogueBag - Ordered collection of catalogues, queried by locale

Several catalogues may share a locale (e.g. one per source directory);
lookups scan them in insertion order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from tarjama.locale_utils import Locale
from tarjama.localization.types import Domain, MessageId, RawTemplate

__all__ = ["Catalogue", "CatalogueBag"]


class Catalogue:
    """Messages of a single locale, grouped by domain.

    Example:
        >>> catalogue = Catalogue(Locale("en"), {"messages": {"greeting": "Hello, {name}!"}})
        >>> catalogue.get("messages", "greeting")
        'Hello, {name}!'
        >>> catalogue.insert("messages", "greeting", "Hi, {name}!")
        'Hello, {name}!'
        >>> catalogue.domains()
        ['messages']
    """

    __slots__ = ("_locale", "_messages")

    def __init__(
        self,
        locale: Locale,
        messages: Mapping[Domain, Mapping[MessageId, RawTemplate]] | None = None,
    ) -> None:
        """Initialize a catalogue.

        Args:
            locale: Locale of every message in the catalogue
            messages: Initial domain -> id -> template mapping (copied)
        """
        self._locale = locale
        self._messages: dict[Domain, dict[MessageId, RawTemplate]] = {
            domain: dict(entries) for domain, entries in (messages or {}).items()
        }

    @property
    def locale(self) -> Locale:
        """Locale of this catalogue (read-only)."""
        return self._locale

    def domains(self) -> list[Domain]:
        """Return the catalogue's domains, sorted."""
        return sorted(self._messages)

    def get(self, domain: Domain, message_id: MessageId) -> RawTemplate | None:
        """Return the raw template for (domain, message_id), or None."""
        entries = self._messages.get(domain)
        return None if entries is None else entries.get(message_id)

    def get_all(self, domain: Domain) -> Mapping[MessageId, RawTemplate] | None:
        """Return a read-only view of a domain's messages, or None."""
        entries = self._messages.get(domain)
        return None if entries is None else MappingProxyType(entries)

    def insert(
        self, domain: Domain, message_id: MessageId, message: RawTemplate
    ) -> RawTemplate | None:
        """Store a message, returning the template it replaced, if any."""
        entries = self._messages.setdefault(domain, {})
        previous = entries.get(message_id)
        entries[message_id] = message
        return previous

    def remove(self, domain: Domain, message_id: MessageId) -> RawTemplate | None:
        """Remove a message, returning it if it existed."""
        entries = self._messages.get(domain)
        return None if entries is None else entries.pop(message_id, None)

    def remove_all(self, domain: Domain) -> dict[MessageId, RawTemplate] | None:
        """Remove a whole domain, returning its messages if it existed."""
        return self._messages.pop(domain, None)

    def __len__(self) -> int:
        """Total number of messages across all domains."""
        return sum(len(entries) for entries in self._messages.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalogue):
            return NotImplemented
        return self._locale == other._locale and self._messages == other._messages

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Catalogue(locale={str(self._locale)!r}, domains={self.domains()!r})"


class CatalogueBag:
    """Ordered collection of catalogues.

    Example:
        >>> bag = CatalogueBag()
        >>> bag.insert(Catalogue(Locale("en")))
        >>> bag.insert(Catalogue(Locale("fr")))
        >>> [str(c.locale) for c in bag.get(Locale("fr"))]
        ['fr']
    """

    __slots__ = ("_catalogues",)

    def __init__(self, catalogues: Iterable[Catalogue] = ()) -> None:
        self._catalogues: list[Catalogue] = list(catalogues)

    def insert(self, catalogue: Catalogue) -> None:
        """Add a catalogue after the existing ones."""
        self._catalogues.append(catalogue)

    def append(self, other: CatalogueBag) -> None:
        """Move every catalogue of other into this bag, leaving other empty."""
        if other is self:
            return
        self._catalogues.extend(other._catalogues)
        other._catalogues.clear()

    def get(self, locale: Locale) -> list[Catalogue]:
        """Return the catalogues of locale, in insertion order."""
        return [catalogue for catalogue in self._catalogues if catalogue.locale == locale]

    def locales(self) -> list[Locale]:
        """Return the distinct locales held, in first-insertion order."""
        return list(dict.fromkeys(catalogue.locale for catalogue in self._catalogues))

    def is_empty(self) -> bool:
        return not self._catalogues

    def __len__(self) -> int:
        return len(self._catalogues)

    def __iter__(self) -> Iterator[Catalogue]:
        return iter(self._catalogues)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogueBag):
            return NotImplemented
        return self._catalogues == other._catalogues

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CatalogueBag({self._catalogues!r})"
