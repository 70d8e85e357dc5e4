from __future__ import annotations

import logging
import sys
from typing import List

from .core.config import settings
from .core.i18n import I18N
from .core.logging_config import setup_logging

log = logging.getLogger(__name__)


def make_catalog(strict: bool | None = None) -> List[str]:
    """Load every packaged locale table and return the loaded game names."""
    I18N.load_locales(strict=strict)
    return I18N.games()


def main() -> int:
    setup_logging(log_file=settings.LOG_FILE, debug=settings.DEBUG)
    log.info("Default locale: %s", settings.DEFAULT_LANG)

    for game in make_catalog():
        table = I18N.table(game)
        log.info(
            "%s: %d keys in %d locales (%s)",
            game,
            len(table.message_keys()),
            len(table),
            ", ".join(table.locales),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
