# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Lattices of coupled point masses

from .lattice import LatticeBase
from .chain import Lattice1D
from .grid import Lattice2D

__all__ = [
    "LatticeBase",
    "Lattice1D",
    "Lattice2D",
]
