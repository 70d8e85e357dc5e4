#!/usr/bin/env python3
"""Check every packaged locale table for missing locales, keys and texts."""

from __future__ import annotations

import json

from arcade_locales.core.i18n import LOCALES_PACKAGE, available_tables
from arcade_locales.core.validation import find_problems
from importlib import resources


def check_locales() -> bool:
    ok = True
    for name in available_tables():
        resource = resources.files(LOCALES_PACKAGE).joinpath(f"{name}.json")
        try:
            with resource.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            print(f"❌ {name}: cannot read table: {e}")
            ok = False
            continue

        problems = find_problems(data)
        if problems:
            ok = False
            for problem in problems:
                print(f"❌ {name}: {problem}")
        else:
            print(f"✅ {name}: {len(data)} locales OK")
    return ok


if __name__ == "__main__":
    success = check_locales()
    exit(0 if success else 1)
