#!/usr/bin/env python

import unittest

import numpy

from potalg.potential import Mode, VALUE, D, DD, GRAD, Potential, \
    PairPotential, UnsupportedCapability, call, evaluate, evaluate_d, \
    evaluate_dd, grad, cutoff, is_potential


class ValueOnly(Potential):

    """Implements only the value and its first derivative."""

    def evaluate(self, r):
        return r**2

    def evaluate_d(self, r):
        return 2 * r

    def cutoff(self):
        return 3.0


class Duck(object):

    """Not a Potential subclass, but it quacks like one."""

    def evaluate(self, r):
        return 1.0 / r

    def evaluate_d(self, r):
        return - 1.0 / r**2

    def evaluate_dd(self, r):
        return 2.0 / r**3

    def grad(self, r, R):
        return - numpy.asarray(R) / r**3

    def cutoff(self):
        return 5.0


class Test(unittest.TestCase):

    def setUp(self):
        self.lj = PairPotential('lennard_jones', {'epsilon': 1.0, 'sigma': 1.0}, cutoff=2.5)

    def test_mode(self):
        self.assertEqual(len(Mode), 4)
        self.assertIs(Mode.FIRST, Mode.D)
        self.assertIs(Mode.SECOND, Mode.DD)
        self.assertIs(Mode.GRADIENT, Mode.GRAD)
        self.assertIs(VALUE, Mode.VALUE)
        self.assertEqual([m.method for m in Mode],
                         ['evaluate', 'evaluate_d', 'evaluate_dd', 'grad'])

    def test_dispatch(self):
        r = 1.3
        R = numpy.array([0.0, 1.3, 0.0])
        self.assertEqual(call(self.lj, r), self.lj.evaluate(r))
        self.assertEqual(call(self.lj, VALUE, r), self.lj.evaluate(r))
        self.assertEqual(call(self.lj, D, r), self.lj.evaluate_d(r))
        self.assertEqual(call(self.lj, DD, r), self.lj.evaluate_dd(r))
        numpy.testing.assert_array_equal(call(self.lj, GRAD, r, R), self.lj.grad(r, R))

    def test_call_syntax(self):
        r = 1.3
        self.assertEqual(self.lj(r), self.lj.evaluate(r))
        self.assertEqual(self.lj(D, r), self.lj.evaluate_d(r))
        self.assertEqual(self.lj(Mode.SECOND, r), self.lj.evaluate_dd(r))

    def test_functions(self):
        r = 1.3
        R = [1.3, 0.0, 0.0]
        self.assertEqual(evaluate(self.lj, r), self.lj(r))
        self.assertEqual(evaluate_d(self.lj, r), self.lj(D, r))
        self.assertEqual(evaluate_dd(self.lj, r), self.lj(DD, r))
        numpy.testing.assert_array_equal(grad(self.lj, r, R), self.lj(GRAD, r, R))
        self.assertEqual(cutoff(self.lj), 2.5)

    def test_unsupported_gradient(self):
        p = ValueOnly()
        self.assertEqual(p(2.0), 4.0)
        self.assertEqual(p(D, 2.0), 4.0)
        with self.assertRaises(UnsupportedCapability) as cm:
            p(GRAD, 2.0)
        self.assertEqual(cm.exception.capability, 'grad')
        self.assertEqual(cm.exception.potential, 'ValueOnly')
        self.assertEqual(cm.exception.nargs, 1)
        self.assertIn('ValueOnly', str(cm.exception))
        self.assertRaises(UnsupportedCapability, p, DD, 2.0)
        self.assertRaises(NotImplementedError, p, DD, 2.0)

    def test_missing_method(self):
        self.assertRaises(UnsupportedCapability, call, object(), D, 1.0)
        self.assertRaises(UnsupportedCapability, cutoff, object())

    def test_duck_typing(self):
        duck = Duck()
        self.assertTrue(is_potential(duck))
        self.assertTrue(is_potential(self.lj))
        self.assertFalse(is_potential(1.0))
        self.assertEqual(call(duck, 2.0), 0.5)
        self.assertEqual(call(duck, D, 2.0), -0.25)
        self.assertEqual(cutoff(duck), 5.0)


if __name__ == '__main__':
    unittest.main()
