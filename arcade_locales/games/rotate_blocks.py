from __future__ import annotations

from ..core.i18n import load_table

translations = load_table("rotate_blocks")
