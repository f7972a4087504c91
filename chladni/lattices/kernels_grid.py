# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Stencil kernel for the 2D plate lattice

import warp as wp


@wp.kernel
def eval_grid_forces(
    x_prev: wp.array(dtype=float),
    x: wp.array(dtype=float),
    v: wp.array(dtype=float),
    a: wp.array(dtype=float),
    side: int,
    center: int,
    drive: float,
    stiffness: float,
    damping: float,
):
    """
    Five-point spring stencil on a square grid, one thread per cell.

    Neighbour positions are read from x_prev, a copy of the grid taken
    before launch, so cells may be processed in any order. Each thread
    writes only its own accumulator. The center cell is driven: its
    position is set to the forcing value and it gets no force.

    Args:
        x_prev: Position snapshot, shape [side*side], row-major
        x: Live positions (only the center is written)
        v: Velocities
        a: Acceleration accumulators
        side: Grid side length (odd)
        center: Flat index of the driven cell
        drive: Forcing value sin(t)
    """
    row, col = wp.tid()
    i = row * side + col

    if i == center:
        x[i] = drive
        return

    xi = x_prev[i]
    acc = a[i]

    # North / south
    if row > 0:
        acc = acc + (x_prev[i - side] - xi) * stiffness
    if row < side - 1:
        acc = acc + (x_prev[i + side] - xi) * stiffness
    # West / east
    if col > 0:
        acc = acc + (x_prev[i - 1] - xi) * stiffness
    if col < side - 1:
        acc = acc + (x_prev[i + 1] - xi) * stiffness

    acc = acc - v[i] * damping
    a[i] = acc
