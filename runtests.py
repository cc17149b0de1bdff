#!/usr/bin/env python
"""
Script to run all tests in the entire project
"""

import unittest
from sys import exit
import seisread
from io import StringIO
import logging


if __name__ == '__main__':
    # enable propagating to higher loggers
    seisread.logger.propagate = 1
    # disable writing log to console
    seisread.logger.removeHandler(seisread.ch)
    ######
    # add StringIO handler to prevent message "No handlers could be found"
    log = StringIO()
    ch = logging.StreamHandler(log)
    seisread.logger.addHandler(ch)
    ######
    test_suite = unittest.defaultTestLoader.discover('seisread')
    result = unittest.TextTestRunner(verbosity=3).run(test_suite)
    exit(0 if result.wasSuccessful() else 1)
