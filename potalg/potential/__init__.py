# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

"""
Potentials and their algebra.

Individual particles interact via a `Potential`. Leaf potentials,
such as `PairPotential`, compute closed-form functions of the
distance. Potentials can be summed and multiplied to build new ones

    lj = PairPotential('lennard_jones', 'epsilon=1.0,sigma=1.0', cutoff=2.5)
    morse = PairPotential('morse', 'epsilon=1.0,r0=1.0,a=2.0', cutoff=3.0)
    pot = lj + morse
    pot(1.1), pot(D, 1.1), pot(DD, 1.1)

The derivatives follow the sum and product rules, and the cutoff of a
sum (product) is the largest (smallest) cutoff of its terms.
"""


from .mode import Mode, VALUE, D, DD, GRAD
from .base import Potential, UnsupportedCapability, call, evaluate, \
    evaluate_d, evaluate_dd, grad, cutoff, is_potential
from .arithmetic import SumPotential, ProductPotential
from .leaf import PairPotential, AnalyticPotential
from .table import tabulate, write_table

__all__ = ['Mode', 'VALUE', 'D', 'DD', 'GRAD', 'Potential',
           'UnsupportedCapability', 'call', 'evaluate', 'evaluate_d',
           'evaluate_dd', 'grad', 'cutoff', 'is_potential',
           'SumPotential', 'ProductPotential', 'PairPotential',
           'AnalyticPotential', 'tabulate', 'write_table']
