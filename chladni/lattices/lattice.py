# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Base class for lattices of coupled point masses

import numpy as np

from ..sim import PointState


class LatticeBase:
    """
    Generic lattice of unit point masses joined by linear springs.

    Holds the point state, the spring stiffness and the accumulated
    simulation time. Concrete lattices define the neighbour topology by
    implementing step() and spring_edges().

    Args:
        count: Number of points
        stiffness: Spring coefficient k (may be changed between steps)
        dt: Fixed sub-step size
        device: Warp device (None = Warp default device)
        verbose: Print construction info
    """

    def __init__(self, count: int, stiffness: float, dt: float, device=None, verbose: bool = False):
        if count < 1:
            raise ValueError(f"Lattice size must be positive, got {count}")
        if dt <= 0.0:
            raise ValueError(f"Sub-step size must be positive, got {dt}")
        if stiffness < 0.0:
            raise ValueError(f"Stiffness must be non-negative, got {stiffness}")

        self.state = PointState(count, device=device)
        self.stiffness = float(stiffness)
        self.dt = float(dt)
        self.time = 0.0
        self.verbose = verbose

    @property
    def device(self):
        return self.state.device

    @property
    def count(self) -> int:
        return self.state.count

    def step(self, *args, **kwargs):
        """
        Advance the lattice by one sub-step.

        Must be implemented by concrete lattices.
        """
        raise NotImplementedError("Concrete lattices must implement step()")

    def spring_edges(self) -> np.ndarray:
        """Spring connectivity as an int array of shape [n_springs, 2]."""
        raise NotImplementedError("Concrete lattices must implement spring_edges()")

    def reset(self):
        """Return every point to rest and the clock to zero."""
        self.state.zero()
        self.time = 0.0

    def positions(self) -> np.ndarray:
        return self.state.position.numpy().copy()

    def velocities(self) -> np.ndarray:
        return self.state.velocity.numpy().copy()

    # ------------------------------------------------------------------
    # Energy diagnostics (host side, unit masses)
    # ------------------------------------------------------------------

    def kinetic_energy(self) -> float:
        v = self.state.velocity.numpy().astype(np.float64)
        return float(0.5 * np.sum(v * v))

    def potential_energy(self) -> float:
        """Elastic energy 0.5 * k * (x_j - x_i)^2 summed over every spring."""
        edges = self.spring_edges()
        if len(edges) == 0:
            return 0.0
        x = self.state.position.numpy().astype(np.float64)
        dx = x[edges[:, 1]] - x[edges[:, 0]]
        return float(0.5 * self.stiffness * np.sum(dx * dx))

    def total_energy(self) -> float:
        return self.kinetic_energy() + self.potential_energy()
