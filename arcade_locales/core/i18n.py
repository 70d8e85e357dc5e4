from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Tuple

from pydantic import StrictStr, TypeAdapter

from .config import SUPPORTED_LOCALES, settings
from .validation import validate_table


log = logging.getLogger(__name__)

LOCALES_PACKAGE = "arcade_locales.locales"

_SHAPE = TypeAdapter(Dict[str, Dict[str, StrictStr]])


class TranslationTable(Mapping):
    """Read-only ``locale -> key -> text`` table for one game.

    The table copies what it is given, so later changes to the source dict
    are not visible here and the inner mappings cannot be written through.
    Lookups never fall back to another locale; that is left to the caller.
    """

    def __init__(self, data: Mapping[str, Mapping[str, str]], name: str | None = None) -> None:
        checked = _SHAPE.validate_python(data)
        self.name = name
        self._data: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {locale: MappingProxyType(dict(messages)) for locale, messages in checked.items()}
        )

    def __getitem__(self, locale: str) -> Mapping[str, str]:
        return self._data[locale]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TranslationTable):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            if not all(isinstance(v, Mapping) for v in other.values()):
                return False
            return self.to_dict() == {k: dict(v) for k, v in other.items()}
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TranslationTable(name={self.name!r}, locales={list(self.locales)!r})"

    @property
    def locales(self) -> Tuple[str, ...]:
        return tuple(self._data)

    def message_keys(self, locale: str | None = None) -> FrozenSet[str]:
        """Message keys of one locale, or the union over all locales."""
        if locale is not None:
            return frozenset(self._data.get(locale, {}))
        result: set[str] = set()
        for messages in self._data.values():
            result.update(messages)
        return frozenset(result)

    def lookup(self, locale: str, key: str) -> str | None:
        messages = self._data.get(locale)
        if messages is None:
            return None
        return messages.get(key)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {locale: dict(messages) for locale, messages in self._data.items()}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @classmethod
    def from_json(cls, text: str, name: str | None = None) -> "TranslationTable":
        return cls(json.loads(text), name=name)


def available_tables() -> List[str]:
    """Names of the JSON tables packaged in ``arcade_locales.locales``."""
    root = resources.files(LOCALES_PACKAGE)
    return sorted(
        entry.name[: -len(".json")]
        for entry in root.iterdir()
        if entry.is_file() and entry.name.endswith(".json")
    )


@lru_cache(maxsize=None)
def load_table(name: str) -> TranslationTable:
    resource = resources.files(LOCALES_PACKAGE).joinpath(f"{name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"No locale table named {name!r} in {LOCALES_PACKAGE}")
    with resource.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    log.debug("Loaded locale table %s", name)
    return TranslationTable(data, name=name)


class I18N:
    _tables: Dict[str, TranslationTable] = {}

    @classmethod
    def load_locales(cls, strict: bool | None = None) -> None:
        """Load and validate every packaged table into the catalog."""
        if strict is None:
            strict = settings.STRICT_LOCALES
        tables: Dict[str, TranslationTable] = {}
        for name in available_tables():
            try:
                table = load_table(name)
                validate_table(name, table)
            except (OSError, ValueError) as e:
                if strict:
                    raise
                log.warning("Failed to load locale table %s: %s", name, e)
                continue
            tables[name] = table
        cls._tables = tables
        log.info("Loaded %d locale tables: %s", len(cls._tables), ", ".join(sorted(cls._tables)))

    @classmethod
    def table(cls, game: str) -> TranslationTable:
        try:
            return cls._tables[game]
        except KeyError:
            raise KeyError(f"Locale table {game!r} is not loaded") from None

    @classmethod
    def games(cls) -> List[str]:
        return sorted(cls._tables)

    @staticmethod
    def pick_locale(language_tag: str | None, fallback: str | None = None) -> str:
        # Browser tags like "zh-HK" or "ja-JP" collapse onto the shipped locales
        fallback = fallback or settings.DEFAULT_LANG
        if fallback not in SUPPORTED_LOCALES:
            fallback = "en"
        if not language_tag:
            return fallback
        tag = language_tag.strip()
        if tag in SUPPORTED_LOCALES:
            return tag
        lowered = tag.lower()
        if "zh" in lowered:
            return "zh-TW"
        if "ja" in lowered:
            return "ja"
        return fallback


def t(game: str, locale: str, key: str) -> str:
    try:
        table = I18N.table(game)
    except KeyError:
        log.warning("No locale table for game %s, showing key %s", game, key)
        return key
    msg = table.lookup(locale, key)
    if msg is None:
        # fallback to the default locale, then to the key itself
        log.debug("Missing %s/%s in %s", locale, key, game)
        msg = table.lookup(settings.DEFAULT_LANG, key)
    return key if msg is None else msg
