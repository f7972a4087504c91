# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
"""
Running Loops for the Chain and Plate Simulations

Fixed-timestep drivers that sit between a host frame loop (window, sliders,
drawing) and the lattices. The host reports the real time elapsed since the
last frame; the loop runs as many fixed sub-steps as fit into it and keeps
the remainder for the next frame.

Usage:
    from chladni import PlateLoop, PlateConfig

    loop = PlateLoop(PlateConfig(side=101, frequency=2.0))
    while running:
        loop.config.damping = damping_slider.value
        loop.advance(frame_seconds)
        draw(loop.lattice.positions(), loop.tracers.positions())
"""

from typing import Optional

from .config import ChainConfig, PlateConfig
from .lattices import Lattice1D, Lattice2D
from .tracers import TracerParticles


class ChainLoop:
    """
    Host driver for the 1D chain.

    Control values are read from self.config at every call, so a host may
    mutate the config object between frames.

    Example:
        >>> loop = ChainLoop(ChainConfig(count=100))
        >>> loop.config.clamp_far_end = True
        >>> loop.advance(1.0 / 60.0)
        >>> y = loop.lattice.positions()
    """

    def __init__(self, config: Optional[ChainConfig] = None, verbose: bool = True):
        """
        Initialize the chain loop.

        Args:
            config: Chain configuration (uses defaults if None)
            verbose: Print setup information
        """
        self.config = config or ChainConfig()
        self.verbose = verbose
        cfg = self.config

        if cfg.substeps_per_frame < 1:
            raise ValueError(f"substeps_per_frame must be positive, got {cfg.substeps_per_frame}")

        if verbose:
            print("=" * 60)
            print("ChainLoop: Setting up 1D chain")
            print("=" * 60)

        self.lattice = Lattice1D(
            count=cfg.count,
            stiffness=cfg.stiffness,
            dt=cfg.dt,
            device=cfg.device,
            verbose=verbose,
        )

        self._frequency = float(cfg.frequency)
        self._accumulator = 0.0

        if verbose:
            print(f"  Frequency: {cfg.frequency}, damping: {cfg.damping}, clamped end: {cfg.clamp_far_end}")
            print("=" * 60)

    @property
    def time(self) -> float:
        return self.lattice.time

    def set_frequency(self, frequency: float):
        """
        Change the driving frequency without a phase jump.

        sin(t * f) is continuous across the change when t is rescaled by
        old_f / new_f. A zero frequency on either side leaves t unchanged.
        """
        frequency = float(frequency)
        old = self._frequency
        if frequency != old and old != 0.0 and frequency != 0.0:
            self.lattice.time = self.lattice.time * old / frequency
        self._frequency = frequency
        self.config.frequency = frequency

    def _sync_controls(self):
        if self.config.frequency != self._frequency:
            self.set_frequency(self.config.frequency)
        self.lattice.stiffness = float(self.config.stiffness)

    def _substep(self):
        cfg = self.config
        self.lattice.step(self.lattice.time, cfg.frequency, cfg.damping, cfg.clamp_far_end)

    def advance(self, elapsed: float) -> int:
        """
        Consume elapsed real time in fixed sub-steps.

        Args:
            elapsed: Seconds since the previous frame (>= 0)

        Returns:
            Number of sub-steps taken
        """
        if elapsed < 0.0:
            raise ValueError(f"Elapsed time must be non-negative, got {elapsed}")

        self._sync_controls()
        self._accumulator += elapsed

        dt = self.lattice.dt
        n_steps = 0
        while self._accumulator >= dt:
            self.lattice.time += dt
            self._substep()
            self._accumulator -= dt
            n_steps += 1
        return n_steps

    def run_frame(self) -> int:
        """
        Advance one frame of fixed size.

        The clock moves by dt * substeps_per_frame up front and all of the
        frame's sub-steps are driven with that time.
        """
        self._sync_controls()
        n_steps = self.config.substeps_per_frame
        self.lattice.time += self.lattice.dt * n_steps
        for _ in range(n_steps):
            self._substep()
        return n_steps

    def reset(self):
        self.lattice.reset()
        self._accumulator = 0.0


class PlateLoop:
    """
    Host driver for the 2D plate and its tracer particles.

    The drive phase advances by dt * frequency per sub-step, so the plate
    center follows sin(phase). One tracer advection pass runs per frame
    after the sub-steps.

    Example:
        >>> loop = PlateLoop(PlateConfig(side=51, particle_count=500))
        >>> loop.advance(1.0 / 60.0)
        >>> xy = loop.tracers.positions()
    """

    def __init__(self, config: Optional[PlateConfig] = None, verbose: bool = True):
        """
        Initialize the plate loop.

        Args:
            config: Plate configuration (uses defaults if None)
            verbose: Print setup information
        """
        self.config = config or PlateConfig()
        self.verbose = verbose
        cfg = self.config

        if verbose:
            print("=" * 60)
            print("PlateLoop: Setting up 2D plate")
            print("=" * 60)

        self.lattice = Lattice2D(
            side=cfg.side,
            stiffness=cfg.stiffness,
            dt=cfg.dt,
            device=cfg.device,
            verbose=verbose,
        )
        self.tracers = TracerParticles(
            cfg.particle_count,
            self.lattice.side,
            seed=cfg.seed,
            device=cfg.device,
            verbose=verbose,
        )

        self._accumulator = 0.0

        if verbose:
            print(f"  Frequency: {cfg.frequency}, damping: {cfg.damping}")
            print("=" * 60)

    @property
    def time(self) -> float:
        return self.lattice.time

    def advance(self, elapsed: float) -> int:
        """
        Consume elapsed real time in fixed sub-steps, then move the tracers.

        Args:
            elapsed: Seconds since the previous frame (>= 0)

        Returns:
            Number of sub-steps taken
        """
        if elapsed < 0.0:
            raise ValueError(f"Elapsed time must be non-negative, got {elapsed}")

        cfg = self.config
        lattice = self.lattice
        lattice.stiffness = float(cfg.stiffness)

        self._accumulator += elapsed

        dt = lattice.dt
        n_steps = 0
        while self._accumulator >= dt:
            lattice.time += dt * cfg.frequency
            lattice.step(lattice.time, cfg.damping)
            self._accumulator -= dt
            n_steps += 1

        if cfg.advect_every_frame:
            self.tracers.advect(lattice, cfg.step_scale)

        return n_steps

    def reset(self):
        self.lattice.reset()
        self.tracers.scatter()
        self._accumulator = 0.0
