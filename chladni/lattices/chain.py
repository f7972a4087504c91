# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# 1D chain of point masses driven at one end

import math

import numpy as np
import warp as wp

from .lattice import LatticeBase
from .kernels_chain import eval_chain_forces


class Lattice1D(LatticeBase):
    """
    Linear chain of point masses coupled to their nearest neighbours.

    Index 0 follows the forcing function sin(t * frequency) directly. The
    far end is either free or clamped to zero.

    Args:
        count: Number of points in the chain. Default 100.
        stiffness: Spring coefficient. Default 35.0.
        dt: Fixed sub-step size. Default 0.005.
        device: Warp device (None = default device)
        verbose: Print construction info

    Example:
        >>> chain = Lattice1D(count=100, stiffness=35.0)
        >>> for _ in range(20):
        >>>     chain.step(t, frequency=1.0, damping=0.1, clamp_far_end=False)
        >>> y = chain.positions()
    """

    def __init__(self, count: int = 100, stiffness: float = 35.0, dt: float = 0.005,
                 device=None, verbose: bool = False):
        super().__init__(count, stiffness, dt, device=device, verbose=verbose)

        if verbose:
            print(f"✓ Created 1D chain with {count} points (k={self.stiffness}, dt={self.dt})")

    def spring_edges(self) -> np.ndarray:
        idx = np.arange(self.count - 1, dtype=np.int64)
        return np.stack([idx, idx + 1], axis=1)

    def step(self, t: float, frequency: float, damping: float, clamp_far_end: bool):
        """
        Advance the chain by one sub-step.

        Args:
            t: Absolute simulation time
            frequency: Driving frequency of point 0
            damping: Viscous damping coefficient (>= 0)
            clamp_far_end: Pin the last point to zero after integration
        """
        if damping < 0.0:
            raise ValueError(f"Damping must be non-negative, got {damping}")

        state = self.state

        # Hard drive at the near end
        state.pin(0, math.sin(t * frequency))

        wp.launch(
            kernel=eval_chain_forces,
            dim=self.count,
            inputs=[
                state.position,
                state.velocity,
                state.acceleration,
                self.count,
                self.stiffness,
                float(damping),
            ],
            device=self.device,
        )

        state.integrate(self.dt)

        if clamp_far_end:
            state.pin(self.count - 1, 0.0)
