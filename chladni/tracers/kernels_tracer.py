# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Amplitude sampling and tracer advection kernels
#
# Grid coordinates: cell (row, col) covers [col, col+1) x [row, row+1),
# so cell centers sit at half-integer coordinates and x maps to columns.

import warp as wp


@wp.func
def sample_amplitude(
    x: wp.array(dtype=float),
    side: int,
    px: float,
    py: float,
) -> float:
    """
    Approximate wave amplitude |x| at a continuous grid coordinate.

    Along each axis the magnitude of the containing cell is blended with
    the neighbour on the side of the offset from the cell center. A
    neighbour outside the grid is replaced by the cell itself. The two
    single-axis blends are then averaged rather than composed into a
    full bilinear patch.

    Args:
        x: Grid positions, shape [side*side], row-major
        side: Grid side length
        px, py: Query coordinate (x = column axis, y = row axis)

    Returns:
        Non-negative amplitude estimate
    """
    cx = wp.clamp(int(wp.floor(px)), 0, side - 1)
    cy = wp.clamp(int(wp.floor(py)), 0, side - 1)

    # Offsets from the cell center, in [-0.5, 0.5) inside the grid
    fx = px - float(cx) - 0.5
    fy = py - float(cy) - 0.5

    own = wp.abs(x[cy * side + cx])

    nx = cx + 1
    if fx < 0.0:
        nx = cx - 1
    if nx < 0 or nx > side - 1:
        nx = cx

    ny = cy + 1
    if fy < 0.0:
        ny = cy - 1
    if ny < 0 or ny > side - 1:
        ny = cy

    wx = wp.abs(fx)
    wy = wp.abs(fy)

    blend_x = own * (1.0 - wx) + wp.abs(x[cy * side + nx]) * wx
    blend_y = own * (1.0 - wy) + wp.abs(x[ny * side + cx]) * wy

    return (blend_x + blend_y) * 0.5


@wp.kernel
def interpolate_points(
    x: wp.array(dtype=float),
    side: int,
    points: wp.array(dtype=wp.vec2),
    amplitude: wp.array(dtype=float),
):
    tid = wp.tid()
    p = points[tid]
    amplitude[tid] = sample_amplitude(x, side, p[0], p[1])


@wp.kernel
def advect_particles(
    x: wp.array(dtype=float),
    side: int,
    particles: wp.array(dtype=wp.vec2),
    seed: int,
    step_scale: float,
):
    """
    Amplitude-scaled random walk, one thread per tracer.

    Each tracer draws two uniform values in [-1, 1], scales them by the
    local amplitude and moves by that amount. Tracers therefore stall on
    nodal lines and scatter away from antinodes. Coordinates are clamped
    to the cell-center extent [0.5, side - 0.5].
    """
    tid = wp.tid()

    p = particles[tid]
    amp = sample_amplitude(x, side, p[0], p[1]) * step_scale

    rng = wp.rand_init(seed, tid)
    dx = wp.randf(rng, -1.0, 1.0) * amp
    dy = wp.randf(rng, -1.0, 1.0) * amp

    hi = float(side) - 0.5
    particles[tid] = wp.vec2(
        wp.clamp(p[0] + dx, 0.5, hi),
        wp.clamp(p[1] + dy, 0.5, hi),
    )
