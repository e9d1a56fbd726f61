"""
Utility functions for textpaths.

The ``logger`` defined here is the one logger of the package. Its level
defaults to WARN and can be set with the ``TEXTPATHS_LOG_LEVEL`` environment
variable, either as a number or as a level name (e.g. "debug").
"""

import os
import logging


logger = logging.getLogger("textpaths")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("TEXTPATHS_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid textpaths log level: {level}")


_set_log_level()
