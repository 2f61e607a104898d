"""R-2R ladder digital-to-analog converter calculations"""

import logging
import numpy as np

from .misc import InvalidInputError
from .codes import ComponentCode

LOGGER = logging.getLogger(__name__)

# supported converter widths
MIN_BITS = 2
MAX_BITS = 24

# widths at or below which every code is sampled
FULL_TABLE_BITS = 4
# number of samples otherwise
N_SAMPLES = 16
# widths above which codes are written in hexadecimal
MAX_BINARY_BITS = 12


class LadderSample:
    """Output of the ladder for one input code"""
    def __init__(self, code, bits, vref):
        self.code = int(code)
        self.voltage = vref * self.code / 2 ** bits

        if bits <= MAX_BINARY_BITS:
            self.text = format(self.code, f"0{bits}b")
        else:
            self.text = "0x" + format(self.code, f"0{-(-bits // 4)}X")

    def __iter__(self):
        yield self.text
        yield self.code
        yield self.voltage

    def __repr__(self):
        return f"<LadderSample {self.text} = {self.voltage:g} V>"


class LadderSpec:
    """Bill of materials and electrical characteristics of an R-2R ladder

    Parameters
    ----------
    base_resistance : :class:`float`
        Value of the R resistors, in ohms.
    bits : :class:`int`
        Converter width.
    vref : :class:`float`
        Reference voltage.
    """
    def __init__(self, base_resistance, bits, vref):
        self.r = float(base_resistance)
        self.bits = int(bits)
        self.vref = float(vref)

        self.r2 = 2 * self.r
        # series resistors between the bit nodes
        self.r_count = self.bits - 1
        # one shunt resistor per bit plus the termination
        self.r2_count = self.bits + 1
        self.levels = 2 ** self.bits
        self.lsb = self.vref / self.levels
        self.max_output = self.vref * (self.levels - 1) / self.levels

        self.r_codes = ComponentCode(self.r)
        self.r2_codes = ComponentCode(self.r2)

        self.samples = [LadderSample(code, self.bits, self.vref) for code in self.sample_codes()]

    @property
    def total_resistors(self):
        return self.r_count + self.r2_count

    @property
    def output_impedance(self):
        """Thevenin resistance seen at the output, equal to R"""
        return self.r

    def sample_codes(self):
        """Input codes sampled for the voltage table"""
        if self.bits <= FULL_TABLE_BITS:
            return list(range(self.levels))

        # evenly spaced, including both ends
        spacing = np.arange(N_SAMPLES, dtype=np.int64) * (self.levels - 1) // (N_SAMPLES - 1)
        return [int(code) for code in spacing]

    def voltage(self, code):
        """Output voltage for an input code"""
        code = int(code)

        if not 0 <= code < self.levels:
            raise InvalidInputError(f"code must be between 0 and {self.levels - 1}")

        return self.vref * code / self.levels

    def __repr__(self):
        return f"<LadderSpec {self.bits} bit, R = {self.r:g} Ω, Vref = {self.vref:g} V>"


def compute_ladder(base_resistance, bits, vref=5.0):
    """Compute the components and output levels of an R-2R ladder

    Raises
    ------
    :class:`.InvalidInputError`
        If `bits` is not an integer between 2 and 24, the base resistance is not positive or an
        input is not a number.
    """
    try:
        width = float(bits)
        base_resistance = float(base_resistance)
        vref = float(vref)
    except (TypeError, ValueError):
        raise InvalidInputError("bits, base resistance and reference voltage must be numbers")

    if not width.is_integer():
        raise InvalidInputError("bits must be an integer")

    bits = int(width)

    if not MIN_BITS <= bits <= MAX_BITS:
        raise InvalidInputError(f"bits must be between {MIN_BITS} and {MAX_BITS}")
    if not base_resistance > 0:
        raise InvalidInputError("base resistance must be greater than 0")

    LOGGER.debug("computing %i bit ladder with R = %g Ω", bits, base_resistance)

    return LadderSpec(base_resistance, bits, vref)
