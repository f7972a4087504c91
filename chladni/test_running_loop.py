"""
Tests for the fixed-timestep running loops and their configuration.
"""

import math

import numpy as np
import pytest

from chladni import ChainConfig, ChainLoop, PlateConfig, PlateLoop
from chladni.config import DAMPING_RANGE, FREQUENCY_RANGE, STIFFNESS_RANGE, clamp_to_range


DEVICE = "cpu"


def make_chain_loop(**overrides):
    cfg = ChainConfig(count=16, device=DEVICE, **overrides)
    return ChainLoop(cfg, verbose=False)


def make_plate_loop(**overrides):
    cfg = PlateConfig(side=11, particle_count=400, device=DEVICE, **overrides)
    return PlateLoop(cfg, verbose=False)


def test_chain_advance_accumulates_fixed_steps():
    loop = make_chain_loop()
    dt = loop.lattice.dt

    assert loop.advance(10.5 * dt) == 10
    assert np.isclose(loop.time, 10 * dt)

    # Leftover half step plus 0.6 of a step gives one more
    assert loop.advance(0.6 * dt) == 1
    assert np.isclose(loop.time, 11 * dt)

    assert loop.advance(0.0) == 0
    print("✓ Fixed-step accumulation carries the remainder")


def test_chain_advance_drives_point_zero():
    loop = make_chain_loop(frequency=2.0)
    loop.advance(0.1)

    expected = np.float32(math.sin(loop.time * 2.0))
    assert loop.lattice.positions()[0] == expected


def test_chain_run_frame():
    loop = make_chain_loop(substeps_per_frame=20)

    assert loop.run_frame() == 20
    assert np.isclose(loop.time, 20 * loop.lattice.dt)
    assert loop.lattice.positions()[0] == np.float32(math.sin(loop.time * loop.config.frequency))


def test_frequency_change_keeps_phase():
    loop = make_chain_loop(frequency=1.0)
    loop.lattice.time = 2.0
    phase_before = loop.time * 1.0

    loop.set_frequency(2.0)
    assert np.isclose(loop.time, 1.0)
    assert np.isclose(loop.time * loop.config.frequency, phase_before)

    # Changes made through the config are picked up on the next frame
    loop.config.frequency = 4.0
    loop.advance(0.0)
    assert np.isclose(loop.time, 0.5)

    # A zero frequency on either side leaves the clock alone
    loop.set_frequency(0.0)
    assert np.isclose(loop.time, 0.5)
    loop.set_frequency(3.0)
    assert np.isclose(loop.time, 0.5)


def test_chain_controls_are_read_each_frame():
    loop = make_chain_loop(clamp_far_end=False)
    loop.config.stiffness = 200.0
    loop.config.clamp_far_end = True
    loop.advance(0.05)

    assert loop.lattice.stiffness == 200.0
    assert loop.lattice.positions()[-1] == 0.0


def test_chain_reset():
    loop = make_chain_loop()
    loop.advance(0.2)
    loop.reset()

    assert loop.time == 0.0
    assert np.all(loop.lattice.positions() == 0.0)
    assert loop.advance(0.5 * loop.lattice.dt) == 0


def test_negative_elapsed_rejected():
    with pytest.raises(ValueError):
        make_chain_loop().advance(-0.01)
    with pytest.raises(ValueError):
        make_plate_loop().advance(-0.01)


def test_invalid_substeps_rejected():
    with pytest.raises(ValueError):
        ChainLoop(ChainConfig(count=4, substeps_per_frame=0, device=DEVICE), verbose=False)


def test_plate_advance_drives_center_and_tracers():
    loop = make_plate_loop(frequency=2.0, step_scale=5.0)
    dt = loop.lattice.dt
    start = loop.tracers.positions()

    n_steps = loop.advance(200.5 * dt)
    assert n_steps == 200
    assert np.isclose(loop.time, 200 * dt * 2.0)

    z = loop.lattice.positions()
    assert z[loop.lattice.center] == np.float32(math.sin(loop.time))

    xy = loop.tracers.positions()
    lo, hi = loop.tracers.bounds
    assert np.all(xy >= lo) and np.all(xy <= hi)
    assert not np.array_equal(xy, start)


def test_plate_advection_can_be_disabled():
    loop = make_plate_loop(advect_every_frame=False)
    start = loop.tracers.positions()
    loop.advance(0.05)
    assert np.array_equal(loop.tracers.positions(), start)


def test_plate_reset():
    loop = make_plate_loop()
    loop.advance(0.05)
    loop.reset()

    assert loop.time == 0.0
    assert np.all(loop.lattice.positions() == 0.0)
    assert np.all(loop.lattice.velocities() == 0.0)
    xy = loop.tracers.positions()
    assert np.all(xy >= 0.5) and np.all(xy <= loop.lattice.side - 0.5)


def test_plate_even_side_from_config():
    loop = PlateLoop(PlateConfig(side=10, particle_count=8, device=DEVICE), verbose=False)
    assert loop.lattice.side == 11
    assert loop.tracers.side == 11


def test_clamp_to_range():
    assert clamp_to_range(7.0, FREQUENCY_RANGE) == 5.0
    assert clamp_to_range(-1.0, DAMPING_RANGE) == 0.0
    assert clamp_to_range(35.0, STIFFNESS_RANGE) == 35.0
    assert clamp_to_range(1.0, STIFFNESS_RANGE) == 10.0
