# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

"""Leaf potentials built on closed-form functions."""

import inspect
import logging

import numpy

from potalg.core.utils import parse_params
from . import library
from .base import Potential, UnsupportedCapability

__all__ = ['PairPotential', 'AnalyticPotential']

_log = logging.getLogger(__name__)


class PairPotential(Potential):

    """Pair potential between two particles."""

    def __init__(self, func, params=None, cutoff=None):
        """
        If `func` is a function, it will be used to compute the
        potential u(r) and its derivatives. `func` takes the distance
        between the particles as a first argument plus an arbitrary
        number of keyword arguments. The `params` dict will be passed
        to the function. It must return the tuple (u, du, ddu), see
        `potalg.potential.library`.

        If `func` is a string, it will be looked up in the `library`
        module.

        `params` can also be a string of comma separated `key=value`
        pairs. Beyond the `cutoff` radius the potential and its
        derivatives are exactly zero. If `cutoff` is `None`, the
        potential is never truncated.

        The distance modes accept either `(r,)` or `(r, R)`, where `R`
        is the bond vector, as used in tight-binding models. `R` does
        not affect the values. The gradient with respect to `R` is
        available as `grad(r, R)`.

        Examples:
        --------
        The Lennard-Jones potential:

        `PairPotential('lennard_jones', {'epsilon': 1.0, 'sigma': 1.0}, cutoff=2.5)`
        """
        if not hasattr(func, '__call__'):
            # If func is not callable, look up the potential in the
            # potential library
            if func in library.__all__:
                func = getattr(library, func)
            else:
                raise ValueError('unknown potential %s' % func)
        self.func = func
        self.params = parse_params(params)
        self.radius = float('inf') if cutoff is None else float(cutoff)
        _log.debug('pair potential %s with %s, cutoff %s', self, self.params, self.radius)

    def __str__(self):
        return self.func.__name__

    def __repr__(self):
        return 'PairPotential({!r}, {!r}, cutoff={!r})'.format(self.func.__name__,
                                                               self.params, self.radius)

    def report(self):
        return """\
potential: {0.func.__name__}
parameters: {0.params}
cutoff: {0.radius}
""".format(self)

    def _compute(self, capability, args):
        if len(args) not in (1, 2):
            raise UnsupportedCapability(capability, self, len(args))
        r = args[0]
        if self.is_zero(r):
            return 0.0, 0.0, 0.0
        return self.func(r, **self.params)

    def is_zero(self, r):
        """Returns `True` if `r` is beyond the cutoff distance."""
        return r > self.radius

    def evaluate(self, *args):
        return self._compute('evaluate', args)[0]

    def evaluate_d(self, *args):
        return self._compute('evaluate_d', args)[1]

    def evaluate_dd(self, *args):
        return self._compute('evaluate_dd', args)[2]

    def grad(self, *args):
        """Gradient with respect to the bond vector: u'(r) R / r."""
        if len(args) != 2:
            raise UnsupportedCapability('grad', self, len(args))
        r, R = args
        du = self._compute('grad', args)[1]
        return du * numpy.asarray(R, dtype=float) / r

    def cutoff(self):
        return self.radius


def _accepts(func, args):
    try:
        signature = inspect.signature(func)
    except ValueError:
        # No signature available (some builtins), let the call decide
        return True
    try:
        signature.bind(*args)
    except TypeError:
        return False
    return True


class AnalyticPotential(Potential):

    """
    Potential defined by explicit callables.

    `f`, `df`, `ddf` and `gradf` compute the value, the first and
    second derivatives and the gradient. They can take any number of
    arguments, e.g. a distance and some auxiliary data

        AnalyticPotential(lambda r, z: exp(-r) * z,
                          lambda r, z: -exp(-r) * z)

    Missing callables and argument lists a callable does not accept
    raise `UnsupportedCapability`. The callables are responsible for
    vanishing beyond `cutoff`.
    """

    def __init__(self, f, df=None, ddf=None, gradf=None, cutoff=None, name=None):
        self.f = f
        self.df = df
        self.ddf = ddf
        self.gradf = gradf
        self.radius = float('inf') if cutoff is None else float(cutoff)
        if name is None:
            name = getattr(f, '__name__', self.__class__.__name__)
            if name == '<lambda>':
                name = self.__class__.__name__
        self.name = name
        _log.debug('analytic potential %s, cutoff %s', self.name, self.radius)

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'AnalyticPotential({!r})'.format(self.name)

    def _apply(self, capability, func, args):
        if func is None or not _accepts(func, args):
            raise UnsupportedCapability(capability, self, len(args))
        return func(*args)

    def evaluate(self, *args):
        return self._apply('evaluate', self.f, args)

    def evaluate_d(self, *args):
        return self._apply('evaluate_d', self.df, args)

    def evaluate_dd(self, *args):
        return self._apply('evaluate_dd', self.ddf, args)

    def grad(self, *args):
        return self._apply('grad', self.gradf, args)

    def cutoff(self):
        return self.radius
