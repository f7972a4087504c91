# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
"""
chladni: driven spring lattices on Warp

    sim/            Point-mass state and the shared symplectic Euler step
    lattices/       1D chain and 2D plate lattices (force kernels)
    tracers/        Amplitude sampling and tracer advection (nodal patterns)
    config.py       Host-side configuration dataclasses
    running_loop.py Fixed-timestep drivers for a host frame loop
"""

from .sim import PointState
from .lattices import LatticeBase, Lattice1D, Lattice2D
from .tracers import TracerParticles
from .config import ChainConfig, PlateConfig
from .running_loop import ChainLoop, PlateLoop

__version__ = "0.1.0"

__all__ = [
    "PointState",
    "LatticeBase",
    "Lattice1D",
    "Lattice2D",
    "TracerParticles",
    "ChainConfig",
    "PlateConfig",
    "ChainLoop",
    "PlateLoop",
]
