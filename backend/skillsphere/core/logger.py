"""
Logging setup for the Skill Sphere backend.
"""

import logging
import sys

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the ``skillsphere`` logger hierarchy with a console handler.

    Calling it again only updates the level.
    """
    root = logging.getLogger("skillsphere")
    root.setLevel(level.upper())

    if not any(getattr(h, "_skillsphere", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        handler._skillsphere = True
        root.addHandler(handler)
