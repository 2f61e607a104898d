"""Formatting and parsing functionality for values with units"""

import re
import logging
from quantiphy import Quantity, QuantiPhyError

from .misc import InvalidInputError

LOGGER = logging.getLogger(__name__)

# RKM code, e.g. 4R7, 4k7, 2M2
RKM_REGEX = re.compile(r"^(\d*)([RrKkMm])(\d+)$")
RKM_SCALES = {"r": 1, "k": 1e3, "m": 1e6}
# decimal value followed by R, e.g. 10R or 4.7R, which quantiphy reads as the ronna prefix
TRAILING_R_REGEX = re.compile(r"^(\d+(?:\.\d+)?)\s*[Rr]$")

# decimal value followed by an upper case kilo prefix, which quantiphy does not accept
UPPER_KILO_REGEX = re.compile(r"^([+-]?[\d.]+(?:[eE][+-]?\d+)?)\s*K")

# unit spellings stripped before parsing
OHM_SUFFIXES = ("Ω", "Ω", "ohms", "ohm", "Ohms", "Ohm")


def parse_resistance(value):
    """Parse a resistance.

    Parameters
    ----------
    value : :class:`str`, :class:`float` or :class:`int`
        The value. Strings can contain SI prefixes ("4.7k", "1 MΩ") or use RKM notation
        ("4k7", "4R7").

    Returns
    -------
    :class:`float`
        The resistance, in ohms.

    Raises
    ------
    :class:`.InvalidInputError`
        If the value cannot be interpreted as a number.
    """
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()

    for suffix in OHM_SUFFIXES:
        if text.endswith(suffix):
            text = text[:-len(suffix)].strip()
            break

    rkm = RKM_REGEX.match(text)
    if rkm:
        whole, scale, fraction = rkm.groups()
        number = float(f"{whole or 0}.{fraction or 0}")
        return number * RKM_SCALES[scale.lower()]

    trailing_r = TRAILING_R_REGEX.match(text)
    if trailing_r:
        return float(trailing_r.group(1))

    text = UPPER_KILO_REGEX.sub(r"\1k", text)

    try:
        return float(Quantity(text))
    except (QuantiPhyError, ValueError):
        raise InvalidInputError(f"cannot interpret '{value}' as a resistance")


def format_resistance(ohms, prec=3):
    """Format resistance with SI prefix, e.g. "4.7 kΩ"."""
    return Quantity(ohms, "Ω").render(prec=prec)


def format_voltage(volts, prec=4):
    """Format voltage with SI prefix, e.g. "19.53 mV"."""
    return Quantity(volts, "V").render(prec=prec)
