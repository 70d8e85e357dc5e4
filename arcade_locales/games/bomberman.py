"""HUD, overlay and power-up strings for Bomberman."""

from __future__ import annotations

from ..core.i18n import load_table

translations = load_table("bomberman")
