"""Translator Example - Locale Fallback, Namespaces and Plurals.

Demonstrates real-world usage of Translator for handling incomplete
translations, vendor namespaces and pluralized lines.

Scenarios covered:
1. E-commerce site with partial Latvian translations
2. Vendor namespace with application overrides
3. Pluralization with CLDR rules
4. Flat JSON lines keyed by source text

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path

from phrasebook import MemoryLoader, Translator, TranslatorConfig


def _write(path: Path, data: dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def example_1_basic_fallback() -> None:
    """Example 1: Basic two-locale fallback (Latvian → English)."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv → en)")
    print("=" * 60)

    loader = MemoryLoader()

    # Latvian translations (incomplete)
    loader.add_messages("lv", "shop", {"welcome": "Sveiki, :name!", "cart": "Grozs"})

    # English translations (complete)
    loader.add_messages(
        "en",
        "shop",
        {
            "welcome": "Hello, :name!",
            "cart": "Cart",
            "payment": {"success": "Payment successful!", "error": "Payment failed: :reason"},
        },
    )

    translator = Translator(loader, "lv", fallback="en")

    print("\nMessages in Latvian:")
    print(f"  welcome: {translator.get('shop.welcome', {'name': 'Anna'})}")
    print(f"  cart: {translator.get('shop.cart')}")

    print("\nMessages falling back to English:")
    print(f"  payment.success: {translator.get('shop.payment.success')}")
    print(f"  payment.error: {translator.get('shop.payment.error', {'reason': 'card declined'})}")

    print("\nMissing keys echo back:")
    print(f"  shop.refund: {translator.get('shop.refund')}")


def example_2_vendor_namespace() -> None:
    """Example 2: Namespaced package lines with application overrides."""
    print("\n" + "=" * 60)
    print("Example 2: Vendor Namespace")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _write(
            root / "billing" / "en" / "invoice.json",
            {"title": "Invoice", "labels": {"total": "Total", "tax": "Tax"}},
        )
        # Application override: only replaces labels.total
        _write(
            root / "lang" / "vendor" / "billing" / "en" / "invoice.json",
            {"labels": {"total": "Amount due"}},
        )

        config = TranslatorConfig(
            root / "lang", "en", namespaces={"billing": root / "billing"}
        )
        translator = Translator.from_config(config)

        for key in ("billing::invoice.title", "billing::invoice.labels.total",
                    "billing::invoice.labels.tax"):
            print(f"  {key}: {translator.get(key)}")


def example_3_plurals() -> None:
    """Example 3: Plural variants selected by CLDR rules."""
    print("\n" + "=" * 60)
    print("Example 3: Pluralization")
    print("=" * 60)

    loader = MemoryLoader()
    loader.add_messages("en", "cart", {"items": ":count item|:count items"})
    loader.add_messages("ru", "cart", {"items": ":count товар|:count товара|:count товаров"})
    loader.add_messages(
        "en", "cart", {"summary": "{0} Your cart is empty|{1} One item|[2,*] :count items"}
    )

    translator = Translator(loader, "en")
    for count in (1, 3):
        print(f"  en {count}: {translator.choice('cart.items', count)}")
    for count in (1, 3, 5, 21):
        print(f"  ru {count}: {translator.choice('cart.items', count, locale='ru')}")
    for count in (0, 1, 7):
        print(f"  summary {count}: {translator.choice('cart.summary', count)}")


def example_4_json_lines() -> None:
    """Example 4: Flat JSON lines keyed by their source text."""
    print("\n" + "=" * 60)
    print("Example 4: JSON Lines")
    print("=" * 60)

    loader = MemoryLoader()
    loader.add_json_messages("lv", {"Log out": "Iziet", "Hello, :name": "Sveiki, :name"})

    translator = Translator(loader, "lv")
    print(f"  Log out: {translator.get_from_json('Log out')}")
    print(f"  Hello, :name: {translator.get_from_json('Hello, :name', {'name': 'Anna'})}")
    print(f"  Untranslated: {translator.get_from_json('Settings')}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    example_1_basic_fallback()
    example_2_vendor_namespace()
    example_3_plurals()
    example_4_json_lines()
