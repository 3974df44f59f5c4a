"""Entry point: python -m splashwalls."""

import traceback

from .app import main
from .logging import log

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        log(f"[FATAL] Fatal error: {e!r}")
        log(f"[FATAL] Traceback:\n{traceback.format_exc()}")
        raise
