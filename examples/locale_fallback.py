"""Directory loading and locale fallback example for tarjama.

Loads ``examples/translations/{domain}.{locale}.toml``, then translates
into several locales with English as the fallback. Chinese has no plural
messages, so ``apple`` falls back to English.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from tarjama import FallbackInfo, Translator, context, load_directory, load_directory_async

TRANSLATIONS = Path(__file__).parent / "translations"


def report_fallback(info: FallbackInfo) -> None:
    print(f"  [fallback] {info.message_id}: {info.requested_locale} -> {info.resolved_locale}")


def example_1_sync() -> None:
    """Example 1: Synchronous loading with a fallback locale."""
    print("=" * 60)
    print("Example 1: load_directory + fallback (* -> en)")
    print("=" * 60)

    translator = Translator(
        load_directory(TRANSLATIONS),
        fallback_locale="en",
        on_fallback=report_fallback,
    )

    for locale in ["en", "fr", "zh", "ar"]:
        print(f"\n{locale}:")
        print("  " + translator.trans(locale, "messages", "greeting", context(name="Rust")))
        for count in [0, 1, 4, 10]:
            print("  " + translator.trans(locale, "messages", "apple", count))


async def example_2_async() -> None:
    """Example 2: Concurrent loading."""
    print("\n" + "=" * 60)
    print("Example 2: load_directory_async")
    print("=" * 60)

    translator = Translator(await load_directory_async(TRANSLATIONS))
    english = translator.trans("en", "messages", "greeting", context(name="Rust"))
    french = translator.trans("fr", "messages", "greeting", context(name="Rust"))
    print(f"en: {english} / fr: {french}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    example_1_sync()
    asyncio.run(example_2_async())
