"""Quickstart example for catalogtrans.

This example demonstrates catalogue lookup, locale fallback, plural variant
selection and untranslated-message reporting.

Note: Missing translations never raise. translate() returns the message id
and reports the miss through the on_untranslated notifier and the
catalogtrans.translator logger.
"""

import json
import logging
import tempfile
from pathlib import Path

from catalogtrans import LoadType, Translator, TranslatorConfig, UntranslatedMessage, pluralize
from catalogtrans.catalogue import PathCatalogueLoader

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

CATALOGUE = {
    "en": {
        "messages": {
            "hello": "Hello %name%!",
            "apples": "{0} There are no apples|{1} There is one apple|]1,Inf] There are %count% apples",
            "files": "one: One file|other: %count% files",
        },
        "validators": {
            "blank": "This value should not be blank.",
        },
    },
    "fr": {
        "messages": {
            "hello": "Bonjour %name% !",
            "files": "Un fichier|%count% fichiers",
        },
    },
    "ru": {
        "messages": {
            "files": "%count% файл|%count% файла|%count% файлов",
        },
    },
}

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

translator = Translator(CATALOGUE)
print(translator.translate("hello", {"%name%": "Alice"}))
# Output: Hello Alice!

print(translator.translate("hello", {"%name%": "Alice"}, locale="fr"))
# Output: Bonjour Alice !

# Example 2: Explicit plural rules
print("\n" + "=" * 50)
print("Example 2: Sets and Intervals")
print("=" * 50)

for count in (0, 1, 7):
    print(translator.translate("apples", {"%count%": count}))
# Output:
# There are no apples
# There is one apple
# There are 7 apples

# Example 3: Plural positions per language
print("\n" + "=" * 50)
print("Example 3: Language Plural Rules")
print("=" * 50)

for locale in ("en", "fr", "ru"):
    rendered = [translator.translate("files", {"%count%": n}, locale=locale) for n in (0, 1, 3, 5)]
    print(f"{locale}: {rendered}")
# Output:
# en: ['0 files', 'One file', '3 files', '5 files']
# fr: ['Un fichier', 'Un fichier', '3 fichiers', '5 fichiers']
# ru: ['0 файлов', '1 файл', '3 файла', '5 файлов']

print(pluralize("{{ count }} item|{{ count }} items", {"{{ count }}": 2}, "en"))
# Output: {{ count }} items

# Example 4: Fallback and untranslated messages
print("\n" + "=" * 50)
print("Example 4: Fallback Locale")
print("=" * 50)

missing: list[UntranslatedMessage] = []
translator = Translator(CATALOGUE, current_locale="fr", on_untranslated=missing.append)

print(translator.translate("apples", {"%count%": 2}))
# Output: There are 2 apples  (fr has no 'apples', en is the fallback)

print(translator.translate("Save changes"))
# Output: Save changes
print(missing)
# Output: [UntranslatedMessage(message_id='Save changes', domain='messages', locale='fr')]

# Example 5: Incremental catalogue and configuration
print("\n" + "=" * 50)
print("Example 5: add() and TranslatorConfig")
print("=" * 50)

config = TranslatorConfig.from_options({"fallbackLocale": "de", "pluralSeparator": "||"})
translator = Translator(config=config)
translator.add("days", "ein Tag||%count% Tage").add("days", "un jour||%count% jours", locale="fr")

print(translator.translate("days", {"%count%": 3}))
# Output: 3 Tage
print(translator.translate("days", {"%count%": 0}, locale="fr"))
# Output: un jour
print(translator.get_catalogue(locales=["de", "fr"]))
# Output: {'de': {'messages': {'days': 'ein Tag||%count% Tage'}},
#          'fr': {'messages': {'days': 'un jour||%count% jours'}}}

# Example 6: Loading from JSON
print("\n" + "=" * 50)
print("Example 6: Serialized and File Catalogues")
print("=" * 50)

translator = Translator().load_catalogue(json.dumps(CATALOGUE), LoadType.SERIALIZED)
print(translator.get_domains("en"))
# Output: ('messages', 'validators')

with tempfile.TemporaryDirectory() as tmpdir:
    path = Path(tmpdir) / "catalogue.json"
    path.write_text(json.dumps(CATALOGUE, ensure_ascii=False), encoding="utf-8")
    translator = Translator().load_catalogue(PathCatalogueLoader(path), LoadType.LOADER)
    print(translator.translate("blank", domain="validators"))
    # Output: This value should not be blank.

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
