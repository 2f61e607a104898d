"""Resistor network finder command line interface"""

import sys
import logging
from pprint import pformat
import click

from . import __version__, PROGRAM, DESCRIPTION, set_log_verbosity
from .misc import InvalidInputError
from .format import parse_resistance
from .series import Set
from .ranking import find_networks
from .ladder import compute_ladder
from .network import PARALLEL_OPERATOR_ASCII
from .display import ranking_report, codes_table, ladder_report
from .config import ResfindConfig, ConfigDoesntExistException, ConfigAlreadyExistsException

LOGGER = logging.getLogger(__name__)
CONF = ResfindConfig()

SERIES_CHOICE = click.Choice(Set.names(), case_sensitive=False)


# Shared arguments:
# https://github.com/pallets/click/issues/108
class State:
    """CLI state"""
    MIN_VERBOSITY = logging.WARNING
    MAX_VERBOSITY = logging.DEBUG

    def __init__(self):
        self._verbosity = self.MIN_VERBOSITY

    @property
    def verbosity(self):
        """Verbosity on stdout"""
        return self._verbosity

    @verbosity.setter
    def verbosity(self, verbosity):
        self._verbosity = self.MIN_VERBOSITY - 10 * int(verbosity)

        if self._verbosity < self.MAX_VERBOSITY:
            self._verbosity = self.MAX_VERBOSITY

        set_log_verbosity(self._verbosity)

        # write some debug info now that we've set up the logger
        LOGGER.debug("%s %s", PROGRAM, __version__)

    @property
    def verbose(self):
        """Verbose output enabled

        Returns True if the verbosity is enough for INFO or DEBUG messages to be displayed.
        """
        return self.verbosity <= logging.INFO


def set_verbosity(ctx, _, value):
    """Set stdout verbosity"""
    state = ctx.ensure_object(State)
    state.verbosity = value


def _resistance(ctx, param, value):
    """Parse resistance argument(s)"""
    try:
        if isinstance(value, tuple):
            return tuple(parse_resistance(item) for item in value)
        return parse_resistance(value)
    except InvalidInputError as error:
        raise click.BadParameter(str(error), ctx=ctx, param=param)


def _fail(error):
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group(help=DESCRIPTION)
@click.version_option(version=__version__, prog_name=PROGRAM)
@click.option("-v", "--verbose", count=True, default=0, callback=set_verbosity, expose_value=False,
              help="Enable verbose output. Supply extra flag for greater verbosity, i.e. \"-vv\".")
def cli():
    """Base CLI command group"""
    pass


@cli.command()
@click.argument("target", callback=_resistance)
@click.option("-t", "--tolerance", type=click.FloatRange(min=0),
              default=CONF["ranking"]["tolerance"], show_default=True,
              help="Tolerance, in percent.")
@click.option("-r", "--value", "values", multiple=True, callback=_resistance,
              help="Available resistor value, e.g. \"4.7k\". Can be specified multiple times. "
              "If not specified, a standard series is used.")
@click.option("-s", "--series", type=SERIES_CHOICE, default=CONF["search"]["series"],
              show_default=True, help="Standard series to use when no values are given.")
@click.option("--min-exp", type=int, default=CONF["search"]["min_exp"], show_default=True,
              help="Smallest decade exponent of the series.")
@click.option("--max-exp", type=int, default=CONF["search"]["max_exp"], show_default=True,
              help="Largest decade exponent of the series.")
@click.option("-n", "--max-size", type=click.IntRange(min=1),
              default=CONF["search"]["max_size"], show_default=True,
              help="Maximum number of resistors in a network.")
@click.option("--max-per-size", type=click.IntRange(min=1),
              default=CONF["search"]["max_per_size"], show_default=True,
              help="Maximum number of networks kept for each network size.")
@click.option("--max-results", type=click.IntRange(min=0),
              default=CONF["ranking"]["max_results"], show_default=True,
              help="Maximum number of results to show.")
@click.option("--top-codes", type=click.IntRange(min=0),
              default=CONF["ranking"]["top_codes"], show_default=True,
              help="Number of results to list component codes for.")
@click.option("--canonical/--mirrored", default=CONF["search"]["canonical_partitions"],
              show_default=True, help="Visit each partition of a network size once, or from "
              "both sides.")
@click.option("--node-budget", type=click.IntRange(min=0), default=CONF["search"]["node_budget"],
              help="Maximum number of networks to generate.")
@click.option("--ascii", "ascii_", is_flag=True, default=False,
              help=f"Write parallel combinations as \"{PARALLEL_OPERATOR_ASCII}\".")
@click.option("--legend/--no-legend", default=True, show_default=True,
              help="Show color code reference.")
@click.pass_context
def find(ctx, target, tolerance, values, series, min_exp, max_exp, max_size, max_per_size,
         max_results, top_codes, canonical, node_budget, ascii_, legend):
    """Find series/parallel networks of standard resistors close to TARGET."""
    state = ctx.ensure_object(State)

    try:
        if values:
            catalog = list(values)
        else:
            catalog = Set(series, max_exp=max_exp, min_exp=min_exp).values()
            LOGGER.info("using %i values from the %s series", len(catalog), series)

        ranking = find_networks(catalog, target, tolerance / 100, max_size=max_size,
                                max_per_size=max_per_size, max_results=max_results,
                                canonical=canonical, node_budget=node_budget,
                                print_progress=state.verbose, stream=sys.stderr)
    except InvalidInputError as error:
        _fail(error)

    parallel = PARALLEL_OPERATOR_ASCII if ascii_ else CONF["format"]["parallel"]
    click.echo(ranking_report(ranking, top_codes=top_codes, parallel=parallel,
                              tablefmt=CONF["format"]["table"], show_legend=legend))


@cli.command()
@click.argument("values", nargs=-1, required=True, callback=_resistance)
def codes(values):
    """Print 4-band, 5-band and SMD codes of resistor VALUES."""
    click.echo(codes_table(values, tablefmt=CONF["format"]["table"]))


@cli.command()
@click.argument("base", callback=_resistance)
@click.argument("bits", type=int)
@click.option("--vref", type=float, default=CONF["ladder"]["vref"], show_default=True,
              help="Reference voltage.")
@click.option("--snap", is_flag=True, default=False,
              help="Use the E24 value closest to BASE.")
def ladder(base, bits, vref, snap):
    """Compute an R-2R ladder DAC with BASE resistance and BITS bits."""
    try:
        if snap:
            snapped = Set("E24").closest(base)
            LOGGER.info("snapped %g Ω to %g Ω", base, snapped)
            base = snapped

        spec = compute_ladder(base, bits, vref)
    except InvalidInputError as error:
        _fail(error)

    click.echo(ladder_report(spec, tablefmt=CONF["format"]["table"]))


@cli.command("series")
@click.argument("name", type=SERIES_CHOICE, default=CONF["search"]["series"])
@click.option("--min-exp", type=int, default=0, show_default=True,
              help="Smallest decade exponent.")
@click.option("--max-exp", type=int, default=0, show_default=True,
              help="Largest decade exponent.")
def series_values(name, min_exp, max_exp):
    """Print the values of standard series NAME."""
    try:
        values = Set(name, max_exp=max_exp, min_exp=min_exp).values()
    except InvalidInputError as error:
        _fail(error)

    click.echo(" ".join(f"{value:g}" for value in values))


@cli.group()
def config():
    """Resfind configuration functions."""
    pass

@config.command("path")
def config_path():
    """Print user config file path.

    Note: this path may not exist.
    """
    click.echo(click.format_filename(CONF.user_config_path))

@config.command("create")
def config_create():
    """Create empty config file in user directory."""
    # create config
    try:
        CONF.create_user_config()
    except ConfigAlreadyExistsException as e:
        click.echo(e, err=True)
    else:
        click.echo(f"Config created at {CONF.user_config_path}")

@config.command("edit")
def config_edit():
    """Open user config file in default editor."""
    try:
        CONF.open_user_config()
    except ConfigDoesntExistException:
        click.echo("Configuration file doesn't exist. Try 'resfind config create'.", err=True)

@config.command("remove")
def config_remove():
    """Remove user config file."""
    path = click.format_filename(CONF.user_config_path)
    click.confirm(f"Delete config file at {path}?", abort=True)
    try:
        CONF.remove_user_config()
    except ConfigDoesntExistException as e:
        click.echo(e, err=True)

@config.command("show")
@click.option("--paged", is_flag=True, default=False, help="Print with paging.")
def config_show(paged):
    """Print the config that resfind uses."""
    echo = click.echo_via_pager if paged else click.echo
    echo(pformat(CONF))


if __name__ == "__main__":
    cli()
