from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure stdlib logging for labutils."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger("labutils")
    root.setLevel(numeric_level)

    # Reconfigure the handler installed by an earlier call instead of stacking another
    for existing in root.handlers:
        if getattr(existing, "_labutils_handler", False):
            existing.setFormatter(formatter)
            existing.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)
    handler._labutils_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
