# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# 2D square plate of point masses driven at its center

import math

import numpy as np
import warp as wp

from .lattice import LatticeBase
from .kernels_grid import eval_grid_forces
from ..tracers.kernels_tracer import interpolate_points


class Lattice2D(LatticeBase):
    """
    Square grid of point masses, each coupled to its four axis neighbours.

    The single center cell follows sin(t). The side length is forced to
    be odd so that this cell is unique.

    Every step copies the positions into a snapshot buffer first and the
    stencil reads neighbours only from that snapshot (double buffering).

    Args:
        side: Grid side length. Even values are bumped by one. Default 101.
        stiffness: Spring coefficient. Default 35.0.
        dt: Fixed sub-step size. Default 0.001.
        device: Warp device (None = default device)
        verbose: Print construction info

    Example:
        >>> plate = Lattice2D(side=101)
        >>> t += plate.dt * frequency
        >>> plate.step(t, damping=0.1)
        >>> z = plate.positions()   # shape (101, 101)
    """

    def __init__(self, side: int = 101, stiffness: float = 35.0, dt: float = 0.001,
                 device=None, verbose: bool = False):
        if side < 1:
            raise ValueError(f"Grid side must be positive, got {side}")
        if side % 2 == 0:
            if verbose:
                print(f"  ⚠ Grid side {side} is even, using {side + 1} so the center is unique")
            side += 1

        super().__init__(side * side, stiffness, dt, device=device, verbose=verbose)
        self.side = side

        self._snapshot = wp.zeros(self.count, dtype=float, device=self.device)

        if verbose:
            print(f"✓ Created {side}x{side} plate = {self.count} points (k={self.stiffness}, dt={self.dt})")

    @property
    def center(self):
        """(row, col) of the driven cell."""
        return self.side // 2, self.side // 2

    @property
    def center_index(self) -> int:
        row, col = self.center
        return row * self.side + col

    def spring_edges(self) -> np.ndarray:
        side = self.side
        idx = np.arange(self.count, dtype=np.int64).reshape(side, side)

        # Horizontal and vertical neighbour pairs
        horizontal = np.stack([idx[:, :-1].ravel(), idx[:, 1:].ravel()], axis=1)
        vertical = np.stack([idx[:-1, :].ravel(), idx[1:, :].ravel()], axis=1)
        return np.concatenate([horizontal, vertical], axis=0)

    def step(self, t: float, damping: float):
        """
        Advance the plate by one sub-step.

        Args:
            t: Drive phase; the caller advances it by dt * frequency per
                sub-step so the center follows sin(t)
            damping: Viscous damping coefficient (>= 0)
        """
        if damping < 0.0:
            raise ValueError(f"Damping must be non-negative, got {damping}")

        state = self.state

        wp.copy(self._snapshot, state.position)

        wp.launch(
            kernel=eval_grid_forces,
            dim=(self.side, self.side),
            inputs=[
                self._snapshot,
                state.position,
                state.velocity,
                state.acceleration,
                self.side,
                self.center_index,
                math.sin(t),
                self.stiffness,
                float(damping),
            ],
            device=self.device,
        )

        state.integrate(self.dt)

    def reset(self):
        super().reset()
        self._snapshot.zero_()

    def positions(self) -> np.ndarray:
        return super().positions().reshape(self.side, self.side)

    def velocities(self) -> np.ndarray:
        return super().velocities().reshape(self.side, self.side)

    def assign_positions(self, values):
        """Load a (side, side) or flat array of positions."""
        self.state.assign_positions(values)

    def interpolate(self, x: float, y: float) -> float:
        """Amplitude estimate at continuous grid coordinate (x, y)."""
        return float(self.interpolate_many([[x, y]])[0])

    def interpolate_many(self, points) -> np.ndarray:
        """
        Amplitude estimates for an array of coordinates.

        Args:
            points: Array-like of shape [n, 2] holding (x, y) pairs

        Returns:
            np.ndarray of shape [n]
        """
        points_np = np.asarray(points, dtype=np.float32).reshape(-1, 2)
        n = points_np.shape[0]

        points_wp = wp.array(points_np, dtype=wp.vec2, device=self.device)
        amplitude = wp.zeros(n, dtype=float, device=self.device)

        wp.launch(
            kernel=interpolate_points,
            dim=n,
            inputs=[self.state.position, self.side, points_wp],
            outputs=[amplitude],
            device=self.device,
        )
        return amplitude.numpy().copy()
