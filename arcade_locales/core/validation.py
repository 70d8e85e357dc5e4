"""Completeness checks for locale tables.

A table is valid when it defines exactly the supported locales, every locale
carries the same message keys, every key is dotted (``game.score``) and every
text is a non-blank string. Checks work on any nested mapping so they can run
on raw JSON before it becomes a ``TranslationTable``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, List

from .config import SUPPORTED_LOCALES


KEY_RE = re.compile(r"^[a-z][A-Za-z0-9]*(\.[A-Za-z0-9]+)+$")


def find_problems(table: Mapping[str, Mapping[str, Any]]) -> List[str]:
    problems: List[str] = []
    if not isinstance(table, Mapping):
        return ["table is not a mapping"]

    locales = set(table)
    expected = set(SUPPORTED_LOCALES)
    for locale in sorted(expected - locales):
        problems.append(f"missing locale {locale}")
    for locale in sorted(locales - expected):
        problems.append(f"unexpected locale {locale}")

    all_keys: set[str] = set()
    for locale in sorted(locales):
        if isinstance(table[locale], Mapping):
            all_keys.update(table[locale])
        else:
            problems.append(f"{locale} is not a mapping")

    for locale in sorted(locales):
        messages = table[locale]
        if not isinstance(messages, Mapping):
            continue
        for key in sorted(all_keys - set(messages)):
            problems.append(f"{locale} is missing key {key}")
        for key in sorted(messages):
            value = messages[key]
            if not isinstance(value, str) or not value.strip():
                problems.append(f"{locale}/{key} is empty")

    for key in sorted(all_keys):
        if not KEY_RE.match(key):
            problems.append(f"malformed key {key!r}")

    return problems


def validate_table(name: str, table: Mapping[str, Mapping[str, Any]]) -> None:
    problems = find_problems(table)
    if problems:
        raise ValueError(f"{name}: " + "; ".join(problems))
