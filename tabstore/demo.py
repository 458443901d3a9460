from __future__ import annotations

import os

from .console import get_logger

log = get_logger("demo")

DEMO_ROWS = (
    "ItemID,Category,Price,UnitsSold,Location",
    "101,Electronics,49.99,150,East",
    "102,Books,19.50,300,West",
    "103,Electronics,129.00,80,North",
    "104,Clothing,35.75,220,East",
    "105,Books,15.00,450,South",
)


def ensure_demo_file(path: str | os.PathLike) -> bool:
    """
    Write the demo dataset to ``path`` unless something is already there.

    Returns True when the path exists afterwards.
    """
    path = os.fspath(path)
    if os.path.exists(path):
        log.info("%s already exists, it will not be created.", path)
        return True

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write("\n".join(DEMO_ROWS) + "\n")
    except OSError as e:
        log.error("Could not create demo file %s: %s", path, e)
        return False

    log.info("Created demo file '%s' for demonstration.", path)
    return True
