# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Host-side configuration for the chain and plate simulations

from dataclasses import dataclass
from typing import Optional, Tuple


# Slider ranges of the interactive front end
FREQUENCY_RANGE: Tuple[float, float] = (0.0, 5.0)
STIFFNESS_RANGE: Tuple[float, float] = (10.0, 5000.0)
DAMPING_RANGE: Tuple[float, float] = (0.0, 1.0)


def clamp_to_range(value: float, bounds: Tuple[float, float]) -> float:
    """Clamp a raw control value into its slider range."""
    lo, hi = bounds
    return min(max(float(value), lo), hi)


@dataclass
class ChainConfig:
    """Configuration for the driven 1D chain."""
    # Lattice
    count: int = 100
    stiffness: float = 35.0

    # Drive / physics
    frequency: float = 1.0
    damping: float = 0.1
    clamp_far_end: bool = False

    # Integration
    dt: float = 0.005
    substeps_per_frame: int = 20
    device: Optional[str] = None


@dataclass
class PlateConfig:
    """Configuration for the center-driven 2D plate and its tracers."""
    # Lattice
    side: int = 101
    stiffness: float = 35.0

    # Drive / physics
    frequency: float = 1.0
    damping: float = 0.1

    # Integration
    dt: float = 0.001
    device: Optional[str] = None

    # Tracers
    particle_count: int = 2000
    step_scale: float = 1.0
    seed: int = 42
    advect_every_frame: bool = True
