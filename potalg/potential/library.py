"""
Library of pair functions.

`PairPotential` instances are built on top of plain functions that
return the energy and its derivatives. In this module we collect some
common pair functions. Each function takes the distance `r` as first
argument plus an arbitrary number of keyword parameters and returns
the tuple (u, du, ddu) where

- u = u(r)
- du = du/dr
- ddu = d^2u/dr^2

Example:
-------

The Lennard-Jones potential at a reduced distance equal to 1.0:

    u, du, ddu = lennard_jones(1.0, epsilon=1.0, sigma=1.0)
"""

from math import exp

__all__ = ['constant', 'inverse_power', 'sum_inverse_power',
           'lennard_jones', 'morse', 'harmonic_sphere', 'exponential']


def constant(r, epsilon):
    """Constant potential."""
    return epsilon, 0.0, 0.0


def inverse_power(r, n, epsilon, sigma):
    """
    Inverse power potential.

    u(r) = epsilon * (sigma/r)^n
    """
    u = epsilon * (sigma / r)**n
    du = - n * u / r
    ddu = n * (n+1) * u / r**2
    return u, du, ddu


def sum_inverse_power(r, n, epsilon, sigma):
    """
    Sum of inverse power potentials.

    u(r) = sum_i epsilon_i * (sigma_i/r)^n_i
    """
    u, du, ddu = 0.0, 0.0, 0.0
    for n_i, epsilon_i, sigma_i in zip(n, epsilon, sigma):
        u_i, du_i, ddu_i = inverse_power(r, n_i, epsilon_i, sigma_i)
        u += u_i
        du += du_i
        ddu += ddu_i
    return u, du, ddu


def lennard_jones(r, epsilon, sigma):
    """
    Lennard-Jones potential.

    u(r) = 4 * epsilon * [(sigma/r)^12 - (sigma/r)^6]
    """
    x6 = (sigma / r)**6
    x12 = x6**2
    u = 4 * epsilon * (x12 - x6)
    du = 4 * epsilon * (-12 * x12 + 6 * x6) / r
    ddu = 4 * epsilon * (156 * x12 - 42 * x6) / r**2
    return u, du, ddu


def morse(r, epsilon, r0, a):
    """
    Morse potential.

    u(r) = epsilon * [exp(-2a(r-r0)) - 2 exp(-a(r-r0))]

    The minimum is at r0 with value -epsilon.
    """
    e = exp(-a * (r - r0))
    u = epsilon * (e**2 - 2 * e)
    du = 2 * a * epsilon * (e - e**2)
    ddu = 2 * a**2 * epsilon * (2 * e**2 - e)
    return u, du, ddu


def harmonic_sphere(r, epsilon, sigma):
    """
    Harmonic sphere potential.

    u(r) = 0.5 * epsilon * [1-(r/sigma)]**2 if r<=sigma else 0
    """
    if r > sigma:
        return 0.0, 0.0, 0.0
    return 0.5 * epsilon * (1.0 - r/sigma)**2, \
        - epsilon * (1.0 - r/sigma) / sigma, \
        epsilon / sigma**2


def exponential(r, epsilon, alpha):
    """
    Exponential decay, as used for hopping integrals.

    u(r) = epsilon * exp(-alpha * r)
    """
    u = epsilon * exp(-alpha * r)
    return u, - alpha * u, alpha**2 * u
