"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the size limit and defaults out of the model code.
2. Single source: The CLI and the model read the same values.

Exports:
    MAX_BOX_SIZE_M (float): Largest allowed box dimension, in meters.
    DEFAULT_UNIT (str): Unit used when none is given.
    DEFAULT_FORMAT (str): Format selector used by str(box). Format selectors
        are the UnitOfMeasure values.
    LOG_FORMAT (str): Record format used by setup_logging().
"""

# Global Constants
MAX_BOX_SIZE_M: float = 10.0
DEFAULT_UNIT: str = "m"
DEFAULT_FORMAT: str = "m"

# Logging
LOGGER_NAMESPACE: str = "boxsize"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
