# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Tracer particles and amplitude sampling for plate visualization

from .kernels_tracer import sample_amplitude, interpolate_points, advect_particles
from .particles import TracerParticles

__all__ = [
    "TracerParticles",
    "sample_amplitude",
    "interpolate_points",
    "advect_particles",
]
