"""Logger access for the practice package.

Handlers and levels are left to the application that imports the
package; domain modules only ask for a named logger.
"""

from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "practice"


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return a logger; module loggers should pass ``__name__``."""
    return logging.getLogger(name)
