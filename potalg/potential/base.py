# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

"""
Base potential class and uniform call protocol.

Every potential, leaf or composite, exposes the same capabilities

- `evaluate(*args)`: value
- `evaluate_d(*args)`: first derivative
- `evaluate_dd(*args)`: second derivative
- `grad(*args)`: gradient with respect to a vector of coordinates
- `cutoff()`: distance beyond which the potential vanishes

The arguments are either a distance `(r,)` or a distance plus some
auxiliary data `(r, aux)`. A potential only overrides the
capabilities it supports; the others raise `UnsupportedCapability`.

Potentials are evaluated through `call()`, which `Potential.__call__`
forwards to. An optional `Mode` as first argument selects the
capability, see `potalg.potential.mode`.
"""

import numbers

from .mode import Mode

__all__ = ['Potential', 'UnsupportedCapability', 'call', 'evaluate',
           'evaluate_d', 'evaluate_dd', 'grad', 'cutoff', 'is_potential']

CAPABILITIES = ('evaluate', 'evaluate_d', 'evaluate_dd', 'grad', 'cutoff')


class UnsupportedCapability(NotImplementedError):

    """Raised when a potential does not implement a mode or an arity."""

    def __init__(self, capability, potential, nargs=None):
        self.capability = capability
        self.potential = type(potential).__name__
        self.nargs = nargs
        if nargs is None:
            msg = '{} does not implement {}'.format(self.potential, capability)
        else:
            msg = '{} does not implement {} with {} argument(s)'.format(self.potential,
                                                                        capability, nargs)
        super().__init__(msg)


def is_potential(obj):
    """Return `True` if `obj` exposes all the potential capabilities."""
    return all(callable(getattr(obj, name, None)) for name in CAPABILITIES)


def call(potential, *args):
    """
    Evaluate `potential` on `args`.

    If the first argument is a `Mode`, it selects which capability is
    evaluated and it is not passed on. Otherwise the value is
    returned. Examples:

        call(lj, r)             -> lj.evaluate(r)
        call(lj, Mode.D, r)     -> lj.evaluate_d(r)
        call(lj, Mode.DD, r)    -> lj.evaluate_dd(r)
        call(lj, Mode.GRAD, R)  -> lj.grad(R)

    Any object exposing the capability methods can be called this way.
    """
    if len(args) > 0 and isinstance(args[0], Mode):
        mode, args = args[0], args[1:]
    else:
        mode = Mode.VALUE
    method = getattr(potential, mode.method, None)
    if method is None:
        raise UnsupportedCapability(mode.method, potential, len(args))
    return method(*args)


def evaluate(potential, *args):
    return call(potential, Mode.VALUE, *args)


def evaluate_d(potential, *args):
    return call(potential, Mode.D, *args)


def evaluate_dd(potential, *args):
    return call(potential, Mode.DD, *args)


def grad(potential, *args):
    return call(potential, Mode.GRAD, *args)


def cutoff(potential):
    """Return the cutoff radius of `potential`."""
    method = getattr(potential, 'cutoff', None)
    if method is None:
        raise UnsupportedCapability('cutoff', potential)
    return method()


class Potential(object):

    """
    Base class for potentials.

    Subclasses override the capabilities they support. Potentials
    are immutable once built and can be combined with `+` and `*`:

        lj + morse   -> SumPotential(lj, morse)
        lj * morse   -> ProductPotential(lj, morse)
    """

    def __call__(self, *args):
        return call(self, *args)

    def evaluate(self, *args):
        raise UnsupportedCapability('evaluate', self, len(args))

    def evaluate_d(self, *args):
        raise UnsupportedCapability('evaluate_d', self, len(args))

    def evaluate_dd(self, *args):
        raise UnsupportedCapability('evaluate_dd', self, len(args))

    def grad(self, *args):
        raise UnsupportedCapability('grad', self, len(args))

    def cutoff(self):
        raise UnsupportedCapability('cutoff', self)

    def __str__(self):
        return self.__class__.__name__

    def __add__(self, other):
        if not is_potential(other):
            return NotImplemented
        from .arithmetic import SumPotential
        return SumPotential(self, other)

    def __radd__(self, other):
        # Allow sum() over a list of potentials
        if isinstance(other, numbers.Number) and other == 0:
            return self
        if not is_potential(other):
            return NotImplemented
        from .arithmetic import SumPotential
        return SumPotential(other, self)

    def __mul__(self, other):
        if not is_potential(other):
            return NotImplemented
        from .arithmetic import ProductPotential
        return ProductPotential(self, other)

    def __rmul__(self, other):
        if not is_potential(other):
            return NotImplemented
        from .arithmetic import ProductPotential
        return ProductPotential(other, self)
