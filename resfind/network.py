"""Resistor networks"""

import abc

from .misc import InvalidInputError
from .format import format_resistance

# individual resistor values tracked per network
MAX_PARTS = 8

# operators used in network expressions
SERIES_OPERATOR = "+"
PARALLEL_OPERATOR = "∥"
PARALLEL_OPERATOR_ASCII = "||"


class Network(metaclass=abc.ABCMeta):
    """Represents a resistor or a series/parallel network of resistors

    A network is a node of an expression tree. Its resistance and resistor count are computed
    from its children when it is created and never changed afterwards.

    Networks compare equal when they have the same structure (see :attr:`key`); two different
    trees with the same resistance are different networks.
    """
    def __init__(self, resistance, count, parts, expression, key):
        self._resistance = float(resistance)
        self._count = int(count)
        self._parts = tuple(parts[:MAX_PARTS])
        self._expression = expression
        self._key = key

    @property
    def resistance(self):
        """Equivalent resistance, in ohms"""
        return self._resistance

    @property
    def count(self):
        """Number of resistors in the network

        This is never capped, even when :attr:`parts` is.
        """
        return self._count

    @property
    def parts(self):
        """Values of the individual resistors, at most :data:`MAX_PARTS` of them

        Values beyond the first :data:`MAX_PARTS` are dropped; use :attr:`count` for the true
        number of resistors.
        """
        return self._parts

    @property
    def expression(self):
        """Text rendering of the network using the default operators"""
        return self._expression

    @property
    def key(self):
        """Canonical structural identity of the network, as nested tuples"""
        return self._key

    @abc.abstractmethod
    def label(self, parallel=PARALLEL_OPERATOR):
        """Text rendering of the network with the specified parallel operator"""
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Network):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return f"{self.expression} = {format_resistance(self.resistance)}"

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.expression}>"


class Resistor(Network):
    """Single resistor"""
    def __init__(self, value):
        value = float(value)
        super().__init__(resistance=value, count=1, parts=(value,),
                         expression="%.2f" % value, key=("R", value))

    def label(self, parallel=PARALLEL_OPERATOR):
        return self.expression


class Collection(Network):
    """Two networks combined in series or parallel

    Parameters
    ----------
    first, second : :class:`Network`
        The networks to combine.
    vtype : :class:`str`, optional
        Configuration type, :attr:`TYPE_SERIES` (default) or :attr:`TYPE_PARALLEL`.

    Raises
    ------
    :class:`.InvalidInputError`
        If a parallel combination is requested for a network without positive resistance.
    """
    # configuration types
    TYPE_SERIES = "S"
    TYPE_PARALLEL = "P"

    def __init__(self, first, second, vtype=None):
        if vtype is None:
            vtype = self.TYPE_SERIES

        if vtype == self.TYPE_SERIES:
            resistance = first.resistance + second.resistance
            operator = SERIES_OPERATOR
        elif vtype == self.TYPE_PARALLEL:
            if first.resistance <= 0 or second.resistance <= 0:
                raise InvalidInputError("parallel combination requires positive resistances")

            resistance = 1 / (1 / first.resistance + 1 / second.resistance)
            operator = PARALLEL_OPERATOR
        else:
            raise ValueError("unrecognised vtype")

        self.first = first
        self.second = second
        self.vtype = vtype

        super().__init__(resistance=resistance,
                         count=first.count + second.count,
                         parts=first.parts + second.parts,
                         expression=f"({first.expression} {operator} {second.expression})",
                         key=(vtype, first.key, second.key))

    @property
    def is_series(self):
        return self.vtype == self.TYPE_SERIES

    @property
    def is_parallel(self):
        return self.vtype == self.TYPE_PARALLEL

    def label(self, parallel=PARALLEL_OPERATOR):
        operator = SERIES_OPERATOR if self.is_series else parallel
        return f"({self.first.label(parallel)} {operator} {self.second.label(parallel)})"
