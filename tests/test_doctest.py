# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import doctest
import logging

from arraykit import config, core, equality, helpers, kinds, log

logger = logging.getLogger("arraykit.tests")

def load_tests(loader, tests, ignore):
	logger.info("Adding doctests to unittest.")
	tests.addTests(doctest.DocTestSuite(config))
	tests.addTests(doctest.DocTestSuite(core))
	tests.addTests(doctest.DocTestSuite(equality))
	tests.addTests(doctest.DocTestSuite(helpers))
	tests.addTests(doctest.DocTestSuite(kinds))
	tests.addTests(doctest.DocTestSuite(log))
	return tests
