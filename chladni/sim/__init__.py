# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .state import PointState, integrate_point, integrate_points, pin_point

__all__ = [
    "PointState",
    "integrate_point",
    "integrate_points",
    "pin_point",
]
