from __future__ import annotations

from ..core.i18n import load_table

# Includes the line-clear callouts shown after 1 to 4 cleared rows
translations = load_table("tetris")
