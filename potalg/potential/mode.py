# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

"""
Derivative-order selectors.

A `Mode` tells the call protocol which capability of a potential to
evaluate. The module level shortcuts `D`, `DD` and `GRAD` read well at
the call site

    lj(r)           # value
    lj(D, r)        # first derivative
    lj(DD, r)       # second derivative
    lj(GRAD, r, R)  # gradient with respect to the bond vector R
"""

from enum import Enum

__all__ = ['Mode', 'VALUE', 'D', 'DD', 'GRAD']


class Mode(Enum):

    VALUE = 'evaluate'
    D = 'evaluate_d'
    DD = 'evaluate_dd'
    GRAD = 'grad'

    # Aliases
    FIRST = 'evaluate_d'
    SECOND = 'evaluate_dd'
    GRADIENT = 'grad'

    @property
    def method(self):
        """Name of the capability method this mode dispatches to."""
        return self.value


VALUE = Mode.VALUE
D = Mode.D
DD = Mode.DD
GRAD = Mode.GRAD
