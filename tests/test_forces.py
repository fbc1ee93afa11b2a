"""Tests for gravitational force accumulation."""

import numpy as np
import pytest
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator, pair_force
from nbody_sim.physics.nbody import NBodySystem


def _system(positions, masses):
    system = NBodySystem()
    system.initialize([Body(mass=m, position=p) for p, m in zip(positions, masses)])
    return system


def _random_system(n=6, seed=1):
    rng = np.random.default_rng(seed)
    return _system(rng.uniform(-10.0, 10.0, (n, 3)), rng.uniform(0.5, 5.0, n))


def test_two_body_force_magnitude():
    """Test F = G m1 m2 / r^2 along the separation."""
    system = _system([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]], [3.0, 4.0])
    forces = ForceCalculator(G=1.0).compute_forces(system)
    
    assert np.allclose(forces[0], [3.0, 0.0, 0.0])
    assert np.allclose(forces[1], [-3.0, 0.0, 0.0])


def test_default_gravitational_constant():
    """Test that SI G is the default."""
    calculator = ForceCalculator()
    
    assert calculator.G == constants.G == 6.67430e-11


def test_newtons_third_law_pair():
    """Test that pair contributions are exact negatives."""
    rng = np.random.default_rng(7)
    for _ in range(20):
        p_i, p_j = rng.normal(size=3), rng.normal(size=3)
        m_i, m_j = rng.uniform(0.1, 10.0, 2)
        f_ij = pair_force(p_i, p_j, m_i, m_j, G=1.0)
        f_ji = pair_force(p_j, p_i, m_j, m_i, G=1.0)
        assert np.array_equal(f_ij, -f_ji)


def test_newtons_third_law_system():
    """Test that two-body forces are exact negatives and net force vanishes."""
    system = _system([[0.3, -1.2, 4.0], [-2.5, 0.7, 1.1]], [5.0, 0.25])
    forces = ForceCalculator(G=1.0).compute_forces(system)
    assert np.array_equal(forces[0], -forces[1])
    
    system = _random_system()
    forces = ForceCalculator(G=1.0).compute_forces(system)
    scale = np.max(np.abs(forces))
    assert np.allclose(np.sum(forces, axis=0), 0.0, atol=1e-12 * scale)


def test_force_points_towards_other_body():
    """Test attraction direction in 3D."""
    system = _system([[0.0, 0.0, 0.0], [0.0, 0.0, -3.0]], [1.0, 1.0])
    forces = ForceCalculator(G=1.0).compute_forces(system)
    
    assert forces[0][2] < 0.0
    assert forces[1][2] > 0.0
    assert np.allclose(forces[:, :2], 0.0)


def test_forces_reset_each_pass():
    """Test that accumulators are cleared before every pass."""
    system = _system([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], [1.0, 1.0])
    calculator = ForceCalculator(G=1.0)
    first = calculator.compute_forces(system).copy()
    second = calculator.compute_forces(system)
    
    assert np.array_equal(first, second)


def test_zero_distance_pair_skipped():
    """Test that coincident bodies contribute no force and produce no NaN."""
    system = _system([[1.0, 1.0, 1.0], [1.0, 1.0, 1.0], [4.0, 1.0, 1.0]], [2.0, 3.0, 1.0])
    
    for method in ("pairwise", "vectorized"):
        forces = ForceCalculator(method=method, G=1.0).compute_forces(system)
        assert np.all(np.isfinite(forces))
        expected_0 = pair_force(system.positions[0], system.positions[2], 2.0, 1.0, G=1.0)
        expected_1 = pair_force(system.positions[1], system.positions[2], 3.0, 1.0, G=1.0)
        assert np.allclose(forces[0], expected_0)
        assert np.allclose(forces[1], expected_1)
    
    assert pair_force(np.ones(3), np.ones(3), 1.0, 1.0) is None


def test_single_body_has_no_force():
    """Test the degenerate one-body system."""
    system = _system([[1.0, 2.0, 3.0]], [1.0])
    forces = ForceCalculator(G=1.0).compute_forces(system)
    
    assert forces.shape == (1, 3)
    assert np.allclose(forces, 0.0)


def test_vectorized_matches_pairwise():
    """Test that both methods agree."""
    system = _random_system(n=8, seed=3)
    pairwise = ForceCalculator(method="pairwise", G=1.0).compute_forces(system).copy()
    vectorized = ForceCalculator(method="vectorized", G=1.0).compute_forces(system)
    
    scale = np.max(np.abs(pairwise))
    assert np.allclose(pairwise, vectorized, rtol=1e-10, atol=1e-12 * scale)


def test_unknown_method():
    """Test that unknown methods are rejected."""
    with pytest.raises(ValueError):
        ForceCalculator(method="barnes_hut")
