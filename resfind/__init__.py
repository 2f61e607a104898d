import logging

PROGRAM = "resfind"
DESCRIPTION = "Standard resistor network finder"

# Get package version.
try:
    from ._version import version as __version__
except ImportError:
    # Packaging resources are not installed.
    __version__ = '?.?.?'

# Suppress warnings when the user code does not include a handler.
logging.getLogger().addHandler(logging.NullHandler())

def add_log_handler(logger, handler=None, format_str="{levelname}: {message} ({name})"):
    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_str, style="{"))
    logger.addHandler(handler)

# Create base logger.
LOGGER = logging.getLogger(__name__)
add_log_handler(LOGGER)

def set_log_verbosity(level, logger=None):
    """Enable logging to stdout with a certain level"""
    if logger is None:
        logger = LOGGER
    logger.setLevel(level)

# Make the main entry points available from the main package.
# This is placed here because dependent imports need the code above.
from .misc import InvalidInputError
from .series import Set
from .network import Resistor, Collection
from .search import leaves, enumerate_networks, NetworkSet
from .ranking import rank_results, find_networks, Ranking
from .codes import four_band_code, five_band_code, smd_code
from .ladder import compute_ladder, LadderSpec
