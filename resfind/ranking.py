"""Result filtering and ranking"""

import logging

from .misc import InvalidInputError
from .search import enumerate_networks, MAX_SIZE, MAX_PER_SIZE

LOGGER = logging.getLogger(__name__)

# default number of results to present
MAX_RESULTS = 50


class Result:
    """A network matching a target resistance

    Parameters
    ----------
    network : :class:`.Network`
        The matching network.
    target : :class:`float`
        The target resistance.
    """
    def __init__(self, network, target):
        self.network = network
        self.target = float(target)
        self.error = abs(network.resistance - self.target) / self.target

    @property
    def resistance(self):
        return self.network.resistance

    @property
    def count(self):
        return self.network.count

    @property
    def expression(self):
        return self.network.expression

    @property
    def parts(self):
        return self.network.parts

    @property
    def deviation(self):
        """Signed relative deviation from the target"""
        return (self.network.resistance - self.target) / self.target

    @property
    def error_percent(self):
        return 100 * self.error

    def sort_key(self):
        return self.error, self.count

    def __repr__(self):
        return f"<Result {self.expression} error={self.error:.3g}>"


class Ranking:
    """Ranked results of a network query

    Attributes
    ----------
    results : :class:`list` of :class:`Result`
        The best results, at most the requested number.
    total : :class:`int`
        The number of networks within tolerance, including those not in :attr:`results`.
    status : :class:`str`
        :attr:`MATCHED` or :attr:`NO_MATCH`.
    """
    MATCHED = "matched"
    NO_MATCH = "no match"

    def __init__(self, results, total, target, tolerance, networks=None):
        self.results = list(results)
        self.total = int(total)
        self.target = float(target)
        self.tolerance = float(tolerance)
        # the enumerated networks, if known
        self.networks = networks
        self.status = self.MATCHED if self.total > 0 else self.NO_MATCH

    @property
    def found(self):
        return self.status == self.MATCHED

    @property
    def remaining(self):
        """Number of matches not included in :attr:`results`"""
        return self.total - len(self.results)

    @property
    def best(self):
        """Best result, or None when no result was kept"""
        if not self.results:
            return None
        return self.results[0]

    def __iter__(self):
        return iter(self.results)

    def __len__(self):
        return len(self.results)

    def __repr__(self):
        return f"<Ranking {self.status}: {len(self.results)} of {self.total}>"


def rank_results(networks, target, tolerance, max_results=MAX_RESULTS):
    """Select networks within tolerance of a target and sort them

    Results are sorted by relative error, then by number of resistors. Ties on both keep the
    order in which the networks were enumerated.

    Parameters
    ----------
    networks : :class:`.NetworkSet` or iterable of :class:`.Network`
        The networks to scan.
    target : :class:`float`
        The target resistance, in ohms.
    tolerance : :class:`float`
        The maximum relative error, as a fraction (0.05 for 5%).
    max_results : :class:`int`, optional
        The maximum number of results to return. The total number of matches is still counted.

    Returns
    -------
    :class:`Ranking`

    Raises
    ------
    :class:`.InvalidInputError`
        If the target is not positive, or the tolerance or maximum number of results is negative.
    """
    target = float(target)
    tolerance = float(tolerance)
    max_results = int(max_results)

    if not target > 0:
        raise InvalidInputError("target resistance must be greater than 0")
    if not tolerance >= 0:
        raise InvalidInputError("tolerance must be >= 0")
    if max_results < 0:
        raise InvalidInputError("maximum number of results must be >= 0")

    matches = []

    for network in networks:
        result = Result(network, target)

        if result.error <= tolerance:
            matches.append(result)

    # stable sort
    matches.sort(key=Result.sort_key)

    LOGGER.info("%i networks within %g%% of %g Ω", len(matches), 100 * tolerance, target)

    return Ranking(matches[:max_results], len(matches), target, tolerance, networks=networks)


def find_networks(catalog, target, tolerance, max_size=MAX_SIZE, max_per_size=MAX_PER_SIZE,
                  max_results=MAX_RESULTS, **kwargs):
    """Enumerate the networks buildable from a catalog and rank them against a target

    Extra keyword arguments are passed to :func:`.enumerate_networks`. The inputs are
    validated before enumeration starts.
    """
    target = float(target)
    tolerance = float(tolerance)

    if not target > 0:
        raise InvalidInputError("target resistance must be greater than 0")
    if not tolerance >= 0:
        raise InvalidInputError("tolerance must be >= 0")

    networks = enumerate_networks(catalog, max_size=max_size, max_per_size=max_per_size,
                                  **kwargs)

    return rank_results(networks, target, tolerance, max_results=max_results)
