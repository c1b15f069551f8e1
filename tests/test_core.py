#!/usr/bin/env python

import logging
import unittest

from potalg.core import utils


class Test(unittest.TestCase):

    def test_tipify(self):
        from potalg.core.utils import tipify
        self.assertTrue(type(tipify("2.0")) is float)
        self.assertTrue(type(tipify("2")) is int)
        self.assertTrue(type(tipify("t2")) is str)

    def test_parse_params(self):
        params = {'epsilon': 1.0}
        self.assertEqual(utils.parse_params(params), params)
        self.assertIsNot(utils.parse_params(params), params)
        self.assertEqual(utils.parse_params('epsilon=1.0,n=12,kind=lj'),
                         {'epsilon': 1.0, 'n': 12, 'kind': 'lj'})
        self.assertEqual(utils.parse_params(''), {})
        self.assertEqual(utils.parse_params(None), {})
        self.assertRaises(ValueError, utils.parse_params, 'epsilon')

    def test_null_handler(self):
        import potalg
        log = logging.getLogger('potalg')
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in log.handlers))

    def test_setup_logging(self):
        log = utils.setup_logging('potalg.test', level=20)
        self.assertLessEqual(log.level, 20)
        self.assertEqual(len(log.handlers), 1)
        log.info('hello %s', 'world')
        log.removeHandler(log.handlers[0])
        log = utils.setup_logging('potalg.test', level=10, update=True)
        self.assertEqual(log.level, 10)

    def test_log_to_stderr(self):
        log = utils.log_to_stderr(logging.WARNING)
        self.assertEqual(log.name, 'potalg')
        self.assertEqual(log.level, logging.WARNING)
        log.removeHandler(log.handlers[-1])
        log.setLevel(logging.NOTSET)


if __name__ == '__main__':
    unittest.main()
