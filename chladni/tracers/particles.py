# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Tracer particles advected by the plate amplitude

import numpy as np
import warp as wp

from .kernels_tracer import advect_particles


class TracerParticles:
    """
    Massless tracers that drift towards the nodal lines of a plate.

    Positions live in the plate's continuous grid coordinates and are kept
    inside [0.5, side - 0.5] on both axes.

    Args:
        count: Number of tracers
        side: Side length of the plate they sample (must match the plate)
        seed: Seed for the initial layout and the per-pass random streams
        device: Warp device (None = default device)
        verbose: Print construction info

    Example:
        >>> plate = Lattice2D(side=101)
        >>> tracers = TracerParticles(2000, plate.side)
        >>> tracers.advect(plate)
        >>> xy = tracers.positions()   # shape (2000, 2)
    """

    def __init__(self, count: int, side: int, seed: int = 42, device=None, verbose: bool = False):
        if count < 1:
            raise ValueError(f"Need at least one tracer, got {count}")
        if side < 1:
            raise ValueError(f"Grid side must be positive, got {side}")

        self.count = count
        self.side = side
        self.seed = seed
        self.device = wp.get_device(device)

        self._rng = np.random.default_rng(seed)
        self._pass = 0

        self.particles = wp.zeros(count, dtype=wp.vec2, device=self.device)
        self.scatter()

        if verbose:
            print(f"✓ Created {count} tracers on a {side}x{side} plate")

    @property
    def bounds(self):
        return 0.5, float(self.side) - 0.5

    def scatter(self):
        """Redistribute all tracers uniformly over the plate."""
        lo, hi = self.bounds
        xy = self._rng.uniform(lo, hi, size=(self.count, 2)).astype(np.float32)
        self.particles.assign(wp.array(xy, dtype=wp.vec2, device=self.device))

    def assign_positions(self, xy):
        xy_np = np.asarray(xy, dtype=np.float32).reshape(-1, 2)
        if xy_np.shape[0] != self.count:
            raise ValueError(f"Expected {self.count} tracer positions, got {xy_np.shape[0]}")
        self.particles.assign(wp.array(xy_np, dtype=wp.vec2, device=self.device))

    def advect(self, lattice, step_scale: float = 1.0):
        """
        Run one advection pass against the current plate displacement.

        Args:
            lattice: Lattice2D to sample (not modified)
            step_scale: Multiplier on the amplitude-scaled random step
        """
        if lattice.side != self.side:
            raise ValueError(
                f"Tracers were created for side {self.side}, plate has side {lattice.side}"
            )

        # Fresh random stream per pass
        seed = (self.seed + self._pass) % 2147483647
        self._pass += 1

        wp.launch(
            kernel=advect_particles,
            dim=self.count,
            inputs=[
                lattice.state.position,
                self.side,
                self.particles,
                seed,
                float(step_scale),
            ],
            device=self.device,
        )

    def positions(self) -> np.ndarray:
        return self.particles.numpy().copy()
