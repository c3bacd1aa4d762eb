from __future__ import annotations

import logging
import sys

from .config import load_config, log_path


def setup_logging() -> None:
    # the terminal belongs to the UI, so log to a file only
    path = log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[handler],
    )


def main() -> int:
    setup_logging()
    from .app import TerminalTypeApp

    TerminalTypeApp(config=load_config()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
