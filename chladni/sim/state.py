# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Point-mass state and the shared integration primitive

import numpy as np
import warp as wp


@wp.func
def integrate_point(
    x: wp.array(dtype=float),
    v: wp.array(dtype=float),
    a: wp.array(dtype=float),
    i: int,
    dt: float,
):
    """
    Semi-implicit (symplectic) Euler for a single point.

        v_{n+1} = v_n + a_n * dt
        x_{n+1} = x_n + v_{n+1} * dt

    The acceleration accumulator is cleared afterwards so the next sub-step
    starts from zero.
    """
    vel = v[i] + a[i] * dt
    v[i] = vel
    x[i] = x[i] + vel * dt
    a[i] = 0.0


@wp.kernel
def integrate_points(
    x: wp.array(dtype=float),
    v: wp.array(dtype=float),
    a: wp.array(dtype=float),
    dt: float,
):
    tid = wp.tid()
    integrate_point(x, v, a, tid, dt)


@wp.kernel
def pin_point(
    x: wp.array(dtype=float),
    index: int,
    value: float,
):
    """Force a single point to a prescribed position (drive or clamp)."""
    x[index] = value


class PointState:
    """
    Time-varying state of a lattice of scalar point masses.

    Stored as a structure of arrays, one entry per point (unit mass).

    Attributes:
        position: Displacement of each point, shape [count], float
        velocity: Velocity of each point, shape [count], float
        acceleration: Per-step force accumulator, shape [count], float.
            Zero at the start of every sub-step.
    """

    def __init__(self, count: int, device=None):
        if count < 1:
            raise ValueError(f"PointState needs at least one point, got {count}")

        self.count = count
        self.device = wp.get_device(device)

        self.position = wp.zeros(count, dtype=float, device=self.device)
        self.velocity = wp.zeros(count, dtype=float, device=self.device)
        self.acceleration = wp.zeros(count, dtype=float, device=self.device)

    def integrate(self, dt: float):
        """Advance every point by one sub-step of size dt."""
        wp.launch(
            kernel=integrate_points,
            dim=self.count,
            inputs=[self.position, self.velocity, self.acceleration, dt],
            device=self.device,
        )

    def pin(self, index: int, value: float):
        """Overwrite the position of one point."""
        wp.launch(
            kernel=pin_point,
            dim=1,
            inputs=[self.position, index, float(value)],
            device=self.device,
        )

    def zero(self):
        """Clear position, velocity and acceleration of every point."""
        self.position.zero_()
        self.velocity.zero_()
        self.acceleration.zero_()

    def assign_positions(self, values):
        self.position.assign(self._to_device(values))

    def assign_velocities(self, values):
        self.velocity.assign(self._to_device(values))

    def _to_device(self, values) -> wp.array:
        values_np = np.asarray(values, dtype=np.float32).reshape(-1)
        if values_np.shape[0] != self.count:
            raise ValueError(
                f"Expected {self.count} values, got {values_np.shape[0]}"
            )
        return wp.array(values_np, dtype=float, device=self.device)
