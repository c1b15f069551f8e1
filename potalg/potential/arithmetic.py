# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

"""
Sums and products of potentials.

Composite potentials hold two children and combine their values and
derivatives. The argument list is passed unchanged to both children,
so composites work for plain distances `(r,)` as well as for extended
signatures `(r, aux)`.

Trees are evaluated as built: no flattening or simplification takes
place, and `str()` prints the expression without parentheses

    str((A + B) * C) == 'A + B * C'

Use `repr()` to see the actual structure of the tree.
"""

import logging

import numpy

from .base import Potential, call, cutoff
from .mode import Mode

__all__ = ['SumPotential', 'ProductPotential']

_log = logging.getLogger(__name__)


class _BinaryPotential(Potential):

    symbol = None

    def __init__(self, p1, p2):
        self.p1 = p1
        self.p2 = p2
        _log.debug('built %r', self)

    def __str__(self):
        return '{} {} {}'.format(self.p1, self.symbol, self.p2)

    def __repr__(self):
        return '{}({!r}, {!r})'.format(self.__class__.__name__, self.p1, self.p2)


class SumPotential(_BinaryPotential):

    """Sum of two potentials."""

    symbol = '+'

    def evaluate(self, *args):
        return call(self.p1, *args) + call(self.p2, *args)

    def evaluate_d(self, *args):
        return call(self.p1, Mode.D, *args) + call(self.p2, Mode.D, *args)

    def evaluate_dd(self, *args):
        return call(self.p1, Mode.DD, *args) + call(self.p2, Mode.DD, *args)

    def grad(self, *args):
        g1 = numpy.asarray(call(self.p1, Mode.GRAD, *args), dtype=float)
        g2 = numpy.asarray(call(self.p2, Mode.GRAD, *args), dtype=float)
        return g1 + g2

    def cutoff(self):
        """The sum is non-zero wherever either term is."""
        return max(cutoff(self.p1), cutoff(self.p2))


class ProductPotential(_BinaryPotential):

    """Product of two potentials."""

    symbol = '*'

    def evaluate(self, *args):
        return call(self.p1, *args) * call(self.p2, *args)

    def evaluate_d(self, *args):
        u1, u2 = call(self.p1, *args), call(self.p2, *args)
        d1, d2 = call(self.p1, Mode.D, *args), call(self.p2, Mode.D, *args)
        return u1 * d2 + d1 * u2

    def evaluate_dd(self, *args):
        u1, u2 = call(self.p1, *args), call(self.p2, *args)
        d1, d2 = call(self.p1, Mode.D, *args), call(self.p2, Mode.D, *args)
        dd1, dd2 = call(self.p1, Mode.DD, *args), call(self.p2, Mode.DD, *args)
        return dd1 * u2 + 2 * d1 * d2 + u1 * dd2

    def grad(self, *args):
        # Values are evaluated on the gradient arguments, e.g. (r, R)
        u1, u2 = call(self.p1, *args), call(self.p2, *args)
        g1 = numpy.asarray(call(self.p1, Mode.GRAD, *args), dtype=float)
        g2 = numpy.asarray(call(self.p2, Mode.GRAD, *args), dtype=float)
        return u1 * g2 + g1 * u2

    def cutoff(self):
        """The product vanishes wherever either factor does."""
        return min(cutoff(self.p1), cutoff(self.p2))
