"""
Logging utilities for azprobe.
"""

import logging

logger = logging.getLogger("azprobe")

# Color codes for terminal output
RED = "\033[0;31m"
GRN = "\033[0;32m"
RST = "\033[0m"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Azure SDK loggers follow the verbosity switch
AZURE_SDK_LOGGERS = (
    "azure",
    "azure.core.pipeline.policies.http_logging_policy",
    "azure.identity",
)


def setup_logging(verbose):
    """Configure logging based on verbosity level"""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    sdk_level = logging.DEBUG if verbose else logging.WARNING
    for name in AZURE_SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
