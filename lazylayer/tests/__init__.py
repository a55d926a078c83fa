# -*- coding: utf-8 -*-

'''

    lazylayer: testsuite
    -------------------------------------------------
    |                                               |
    |   `lazylayer.tests`                           |
    |                                               |
    |   unit testing tools and test cases for       |
    |   lazylayer and models built on it.           |
    |                                               |
    -------------------------------------------------

'''

# Base Imports
import sys
import unittest

# lazylayer config
from lazylayer.util import appconfig


# Builtin Test Paths
_TEST_PATHS = [
    'lazylayer.tests.test_util',  # util testsuite
    'lazylayer.tests.test_model.test_exports',  # model API exports
    'lazylayer.tests.test_model.test_descriptor',  # property specs and readers
    'lazylayer.tests.test_model.test_meta',  # property registry
    'lazylayer.tests.test_model.test_model'  # attribute resolver
]


## LazyLayerTestCase - Parent class for lazylayer and application-level tests.
class LazyLayerTestCase(unittest.TestCase):

    ''' A test case that resets lazylayer config between tests. '''

    def setUp(self):

        ''' Start each test from the default config. '''

        for section in appconfig._DEFAULT_CONFIG:
            appconfig.override(section)

    def tearDown(self):

        ''' Drop any config overrides a test registered. '''

        for section in appconfig._DEFAULT_CONFIG:
            appconfig.override(section)


## LazyLayerTest - Test case for a test that is part of lazylayer.
class LazyLayerTest(LazyLayerTestCase):
    pass


## `load_test_module` - Load a single testsuite module.
def load_test_module(path):

    ''' Load a testsuite from a dotted module path. '''

    suite = unittest.TestSuite()
    suite.addTest(unittest.TestLoader().loadTestsFromName(path))
    return suite


## `load_testsuite` - Gather lazylayer testsuites.
def load_testsuite(paths=None):

    ''' Build a suite from ``paths``, or every builtin test path. '''

    suite = unittest.TestSuite()
    for path in (paths if paths is not None else _TEST_PATHS[:]):
        suite.addTest(load_test_module(path))
    return suite


## `run_testsuite` - Run a suite of tests loaded via `load_testsuite`.
def run_testsuite(suite=None):

    ''' Run ``suite`` (default: everything) with a verbose text runner. '''

    if suite is None:
        suite = load_testsuite()
    return unittest.TextTestRunner(verbosity=2, stream=sys.stderr).run(suite)


if __name__ == '__main__':  # pragma: no cover
    sys.exit(not run_testsuite().wasSuccessful())
