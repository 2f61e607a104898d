"""Test suite runner"""

import sys
from pathlib import Path
import logging
from unittest import TestSuite, TestLoader, TextTestRunner
import click
from resfind import set_log_verbosity

# This directory.
THIS_DIR = Path(__file__).resolve().parent

# Test loader.
LOADER = TestLoader()

# Test suites.
UNIT_TESTS = LOADER.discover(THIS_DIR / "unit", top_level_dir=THIS_DIR / "unit")
INTEGRATION_TESTS = LOADER.discover(THIS_DIR / "integration",
                                    top_level_dir=THIS_DIR / "integration")

# Derived suites.
ALL_TESTS = TestSuite((UNIT_TESTS, INTEGRATION_TESTS))

# Test name map.
TESTS = {
    "unit": UNIT_TESTS,
    "integration": INTEGRATION_TESTS,
    "all": ALL_TESTS,
}

@click.group()
def tests():
    """Resfind testing facility."""
    pass

@tests.command()
@click.argument("suite_names", nargs=-1, required=True)
@click.option("-v", "--verbose", count=True, default=0,
              help="Enable verbose output. Supply extra flag for greater verbosity, i.e. \"-vv\".")
def run(suite_names, verbose):
    """Run test suites."""
    if verbose > 2:
        verbose = 2

    # Tune in to resfind's logs.
    logger = logging.getLogger("resfind")
    # Show only warnings with no verbosity, or more if higher.
    set_log_verbosity(logging.WARNING - 10 * verbose, logger)

    # test suite to run
    try:
        test_suites = [TESTS[suite_name] for suite_name in suite_names]
    except KeyError as e:
        click.echo(f"Suite name {e} is invalid (use \"suites\" to list available suites)", err=True)
        sys.exit(1)

    suite = TestSuite(test_suites)
    ntests = suite.countTestCases()
    click.echo(f"Running {ntests} tests")
    run_and_exit(suite, verbosity=verbose)

@tests.command()
def suites():
    click.echo(", ".join(TESTS))

def run_and_exit(suite, verbosity=1):
    """Run tests and exit with a status code representing the test result"""
    runner = TextTestRunner(verbosity=verbosity)
    result = runner.run(suite)
    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    tests()
