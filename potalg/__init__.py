# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

"""
An algebra of interatomic potentials.

Potentials are evaluated in four modes (value, first and second
derivative, gradient) through a single call and can be combined with
`+` and `*`.
"""

import logging

from .core import __version__
from .core.utils import NullHandler
from .potential import *

logging.getLogger(__name__).addHandler(NullHandler())
