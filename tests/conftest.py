from __future__ import annotations

import pytest

from arcade_locales.core.config import settings
from arcade_locales.core.i18n import I18N


@pytest.fixture(autouse=True)
def empty_catalog(monkeypatch):
    """Each test starts with no loaded tables and English as default locale."""
    monkeypatch.setattr(I18N, "_tables", {})
    monkeypatch.setattr(settings, "DEFAULT_LANG", "en")
    yield I18N


@pytest.fixture
def sample_data():
    return {
        "zh-TW": {"game.title": "測試", "game.score": "分數"},
        "en": {"game.title": "Test", "game.score": "Score"},
        "ja": {"game.title": "テスト", "game.score": "スコア"},
    }
