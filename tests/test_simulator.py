"""Tests for the simulator controller."""

import dataclasses
import io
import numpy as np
import pytest
import nbody_sim
from nbody_sim.physics.simulator import Simulator
from nbody_sim.physics.force_calculator import compute_acceleration
from nbody_sim.presets import RandomCube
from nbody_sim.utils.config import SimulationConfig


def test_create_defaults():
    """Test create() builds a 1000-particle system with consistent accelerations."""
    sim = nbody_sim.create(SimulationConfig(seed=1))
    system = sim.system

    assert system.n_particles == 1000
    assert system.positions.shape == (1000, 3)
    assert system.velocities.shape == (1000, 3)
    assert system.accelerations.shape == (1000, 3)
    assert system.masses.shape == (1000,)
    assert np.all(system.masses > 0)
    assert sim.dt == 0.001
    assert np.array_equal(
        system.accelerations,
        compute_acceleration(system.positions, system.masses, G=1.0, softening=0.001),
    )


def test_step_advances_state():
    """Test step() updates time, counters and keeps accelerations current."""
    config = SimulationConfig(n_particles=20, seed=3)
    sim = Simulator.create(config)
    before = sim.system.positions.copy()

    result = sim.step()

    assert result is None
    assert sim.step_count == 1
    assert sim.time == pytest.approx(config.dt)
    assert sim.system.generation == 1
    assert not np.array_equal(sim.system.positions, before)
    assert np.array_equal(
        sim.system.accelerations,
        compute_acceleration(sim.system.positions, sim.system.masses, G=config.G, softening=config.softening),
    )


def test_step_is_deterministic():
    """Test identical initial states evolve identically."""
    config = SimulationConfig(n_particles=30, seed=11)
    first = Simulator.create(config)
    second = Simulator.create(config)

    first.run(5)
    second.run(5)

    assert np.array_equal(first.system.positions, second.system.positions)
    assert np.array_equal(first.system.velocities, second.system.velocities)
    assert np.array_equal(first.system.accelerations, second.system.accelerations)


def test_single_particle_moves_linearly():
    """Test a lone particle drifts at constant velocity."""
    config = SimulationConfig(n_particles=1, dt=0.01)
    sim = Simulator(config)
    start = np.array([[0.1, 0.2, 0.3]])
    velocity = np.array([[1.0, -2.0, 0.5]])
    sim.initialize(start, velocity, [0.4])

    for k in range(1, 11):
        sim.step()
        assert np.array_equal(sim.system.accelerations, np.zeros((1, 3)))
        assert np.array_equal(sim.system.velocities, velocity)
        assert np.allclose(sim.system.positions, start + velocity * config.dt * k)


def test_two_body_orbit_conserves_energy():
    """Test leapfrog keeps a softened circular orbit and its energy."""
    softening = 0.001
    M, m, r = 1.0, 1e-6, 1.0
    v_circ = np.sqrt(M * r ** 2 / (r ** 2 + softening) ** 1.5)
    config = SimulationConfig(n_particles=2, dt=0.001, softening=softening)
    sim = Simulator(config)
    sim.initialize(
        [[0.0, 0.0, 0.0], [r, 0.0, 0.0]],
        [[0.0, 0.0, 0.0], [0.0, v_circ, 0.0]],
        [M, m],
    )
    E0 = sim.get_energy()

    radii = []
    for _ in range(1000):
        sim.step()
        pos = sim.system.positions
        radii.append(np.linalg.norm(pos[1] - pos[0]))

    assert abs(sim.get_energy() - E0) / abs(E0) < 1e-5
    assert np.allclose(radii, r, rtol=1e-3)


def test_create_with_custom_preset():
    preset = RandomCube(n_particles=8, seed=5, position_range=(-10.0, 10.0))
    sim = Simulator.create(SimulationConfig(n_particles=8), preset=preset)

    assert sim.system.n_particles == 8
    assert np.all(np.abs(sim.system.positions) <= 10.0)


def test_initialize_warns_on_count_mismatch():
    sim = Simulator(SimulationConfig(n_particles=5))
    with pytest.warns(UserWarning):
        sim.initialize(np.zeros((2, 3)), np.zeros((2, 3)), [1.0, 1.0])
    assert sim.system.n_particles == 2


def test_initialize_rejects_bad_shapes():
    sim = Simulator(SimulationConfig(n_particles=2))
    with pytest.raises(ValueError):
        sim.initialize(np.zeros((2, 2)), np.zeros((2, 3)), [1.0, 1.0])
    with pytest.raises(ValueError):
        sim.initialize(np.zeros((2, 3)), np.zeros((2, 3)), [1.0, -1.0])


def test_uninitialized_simulator_raises():
    sim = Simulator()
    with pytest.raises(RuntimeError):
        sim.step()
    with pytest.raises(RuntimeError):
        sim.positions_view()


def test_debug_dump_writes_positions():
    """Test debug_dump prints one position triple per particle."""
    sim = Simulator(SimulationConfig(n_particles=3))
    positions = np.array([[0.0, 1.0, 2.0], [3.0, 4.0, 5.0], [-1.0, -2.0, -3.0]])
    sim.initialize(positions, np.zeros((3, 3)), [1.0, 1.0, 1.0])
    sink = io.StringIO()

    sim.debug_dump(sink)

    lines = sink.getvalue().strip().splitlines()
    assert len(lines) == 3
    parsed = np.array([[float(v) for v in line.split()] for line in lines])
    assert np.array_equal(parsed, positions)


def test_total_speed_and_callback():
    sim = Simulator(SimulationConfig(n_particles=2))
    sim.initialize(
        [[0.0, 0.0, 0.0], [5.0, 0.0, 0.0]],
        [[3.0, 4.0, 0.0], [0.0, 0.0, 2.0]],
        [1.0, 1.0],
    )
    assert sim.total_speed() == pytest.approx(7.0)

    seen = []
    sim.on_step_callback = lambda s: seen.append(s.step_count)
    sim.run(3)
    assert seen == [1, 2, 3]


def test_get_state_returns_copies():
    sim = Simulator.create(SimulationConfig(n_particles=4, seed=2))
    positions, velocities, masses, time, step_count = sim.get_state()

    positions[:] = 0.0

    assert not np.array_equal(sim.system.positions, positions)
    assert time == 0.0
    assert step_count == 0


def test_kinetic_and_potential_energy_two_body():
    """Test energy getters against the closed-form two-body values."""
    softening = 0.001
    sim = Simulator(SimulationConfig(n_particles=2, softening=softening))
    sim.initialize(
        [[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]],
        [[1.0, 0.0, 0.0], [0.0, 2.0, 0.0]],
        [2.0, 0.5],
    )

    K = sim.get_kinetic_energy()
    U = sim.get_potential_energy()

    assert K == pytest.approx(0.5 * 2.0 * 1.0 + 0.5 * 0.5 * 4.0)
    assert U == pytest.approx(-2.0 * 0.5 / np.sqrt(4.0 + softening))
    assert sim.get_energy() == pytest.approx(K + U)


def test_config_changes_cannot_desync_running_simulation():
    """Test constants are fixed for the simulator's lifetime."""
    sim = Simulator.create(SimulationConfig(n_particles=4, seed=6))

    with pytest.raises(dataclasses.FrozenInstanceError):
        sim.config.G = 2.0

    sim.step()
    assert sim.time == pytest.approx(sim.config.dt)
    assert np.array_equal(
        sim.system.accelerations,
        compute_acceleration(sim.system.positions, sim.system.masses,
                             G=sim.config.G, softening=sim.config.softening),
    )
