# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Force kernel for the 1D chain lattice

import warp as wp


@wp.kernel
def eval_chain_forces(
    x: wp.array(dtype=float),
    v: wp.array(dtype=float),
    a: wp.array(dtype=float),
    count: int,
    stiffness: float,
    damping: float,
):
    """
    Accumulate nearest-neighbour spring forces and viscous damping.

    Point 0 is the driven boundary and receives no force. Interior points
    are pulled by both neighbours, the last point only by its left one.
    Each thread writes only its own accumulator and no positions are
    written here, so neighbour reads see the pre-update values.
    """
    i = wp.tid()

    if i == 0:
        return

    acc = a[i]
    if i != count - 1:
        acc = acc + (x[i + 1] - x[i]) * stiffness
    acc = acc + (x[i - 1] - x[i]) * stiffness
    acc = acc - v[i] * damping
    a[i] = acc
