#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ising Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from compphys.ising import (
    ALGORITHMS,
    IsingConfig,
    IsingSimulation,
    initialize_lattice,
    validate_lattice,
    neighbor_sum,
    total_energy,
    magnetization,
    delta_energy,
    seed_numba,
    metropolis_sweep,
    heat_bath_sweep,
    wolff_update,
    checkerboard_gibbs_update,
    create_ising_simulation
)


class TestLattice:
    """Tests for lattice creation and validation."""

    def test_random_lattice(self):
        """A random lattice holds only ±1 and has both values."""
        lattice = initialize_lattice(16, "random", np.random.default_rng(0))
        assert lattice.shape == (16, 16)
        assert set(np.unique(lattice)) == {-1, 1}
        validate_lattice(lattice)

    def test_ordered_lattices(self):
        """'up' and 'down' starts are uniform."""
        assert np.all(initialize_lattice(4, "up") == 1)
        assert np.all(initialize_lattice(4, "down") == -1)

    def test_invalid_state(self):
        """Unknown initial states are rejected."""
        with pytest.raises(ValueError):
            initialize_lattice(4, "checkerboard")

    def test_too_small(self):
        """A single site has no neighbours."""
        with pytest.raises(ValueError):
            initialize_lattice(1)

    def test_validate_rejects_bad_values(self):
        """Zeros and non-square shapes are invalid."""
        with pytest.raises(ValueError):
            validate_lattice(np.zeros((4, 4), dtype=np.int64))
        with pytest.raises(ValueError):
            validate_lattice(np.ones((4, 5), dtype=np.int64))


class TestEnergy:
    """Tests for energy and magnetization."""

    def test_ground_state_energy(self):
        """All-up lattice has two satisfied bonds per site."""
        lattice = initialize_lattice(8, "up")
        assert total_energy(lattice) == -2.0 * 64
        assert total_energy(lattice, coupling=1.0, field=0.5) == -2.0 * 64 - 0.5 * 64

    def test_antiferromagnetic_pattern(self):
        """A checkerboard pattern has every bond unsatisfied."""
        ii, jj = np.indices((6, 6))
        lattice = np.where((ii + jj) % 2 == 0, 1, -1).astype(np.int64)
        assert total_energy(lattice) == 2.0 * 36
        assert magnetization(lattice) == 0.0

    def test_magnetization(self):
        """Magnetization per spin of ordered lattices."""
        assert magnetization(initialize_lattice(4, "up")) == 1.0
        assert magnetization(initialize_lattice(4, "down")) == -1.0

    def test_neighbor_sum_periodic(self):
        """Corner sites see neighbours across the boundary."""
        lattice = initialize_lattice(4, "up")
        lattice[3, 0] = -1
        sums = neighbor_sum(lattice)
        assert sums[0, 0] == 2      # (3, 0) is above (0, 0) via wraparound
        assert sums[1, 1] == 4

    def test_delta_energy_matches_difference(self):
        """ΔE equals the change in total energy after a flip."""
        lattice = initialize_lattice(8, "random", np.random.default_rng(4))
        for i, j in [(0, 0), (3, 5), (7, 7)]:
            before = total_energy(lattice, 1.0, 0.3)
            dE = delta_energy(lattice, i, j, 1.0, 0.3)
            lattice[i, j] *= -1
            after = total_energy(lattice, 1.0, 0.3)
            assert abs((after - before) - dE) < 1e-12

    def test_delta_energy_ground_state(self):
        """Flipping a spin in the ground state costs 8J."""
        assert delta_energy(initialize_lattice(4, "up"), 1, 2) == 8.0


class TestMetropolis:
    """Tests for the Metropolis sweep."""

    def test_infinite_temperature_accepts_all(self):
        """At β = 0 every proposal is accepted."""
        seed_numba(0)
        lattice = initialize_lattice(8, "up")
        assert metropolis_sweep(lattice, 0.0, 1.0, 0.0) == 64
        validate_lattice(lattice)

    def test_zero_temperature_frozen(self):
        """At very low temperature the ground state does not move."""
        seed_numba(0)
        lattice = initialize_lattice(8, "up")
        assert metropolis_sweep(lattice, 20.0, 1.0, 0.0) == 0
        assert np.all(lattice == 1)

    def test_orders_below_tc(self):
        """Starting ordered at T = 1.5 the lattice stays magnetized."""
        seed_numba(1)
        lattice = initialize_lattice(16, "up")
        for _ in range(200):
            metropolis_sweep(lattice, 1.0 / 1.5, 1.0, 0.0)
        assert abs(magnetization(lattice)) > 0.9


class TestHeatBath:
    """Tests for the heat-bath sweep."""

    def test_preserves_spin_values(self):
        """Spins remain ±1 after a sweep."""
        seed_numba(2)
        lattice = initialize_lattice(8, "random", np.random.default_rng(2))
        heat_bath_sweep(lattice, 0.0, 1.0, 0.0)
        validate_lattice(lattice)

    def test_zero_temperature_frozen(self):
        """Large β keeps every aligned spin aligned."""
        seed_numba(2)
        lattice = initialize_lattice(8, "up")
        assert heat_bath_sweep(lattice, 10.0, 1.0, 0.0) == 0
        assert np.all(lattice == 1)

    def test_strong_field_aligns(self):
        """A strong field drives every spin along it."""
        seed_numba(3)
        lattice = initialize_lattice(8, "down")
        for _ in range(20):
            heat_bath_sweep(lattice, 1.0, 1.0, 20.0)
        assert np.all(lattice == 1)


class TestWolff:
    """Tests for the Wolff cluster update."""

    def test_zero_bond_probability(self):
        """At β = 0 the cluster is just the seed site."""
        seed_numba(5)
        lattice = initialize_lattice(8, "up")
        assert wolff_update(lattice, 0.0, 1.0) == 1
        assert np.sum(lattice == -1) == 1

    def test_whole_lattice_cluster(self):
        """At very low temperature an ordered lattice flips as one cluster."""
        seed_numba(5)
        lattice = initialize_lattice(8, "up")
        assert wolff_update(lattice, 100.0, 1.0) == 64
        assert np.all(lattice == -1)

    def test_cluster_only_contains_aligned_spins(self):
        """Only spins aligned with the seed can join the cluster."""
        seed_numba(6)
        lattice = initialize_lattice(8, "up")
        lattice[:, 4:] = -1
        before = lattice.copy()
        size = wolff_update(lattice, 100.0, 1.0)
        flipped = before != lattice
        assert size == 32
        assert np.sum(flipped) == 32
        assert len(np.unique(before[flipped])) == 1


class TestCheckerboard:
    """Tests for the sublattice Gibbs update."""

    def test_odd_size_rejected(self):
        """Odd lattices cannot be two-coloured with periodic boundaries."""
        with pytest.raises(ValueError):
            checkerboard_gibbs_update(initialize_lattice(5, "up"), 1.0)

    def test_zero_temperature_frozen(self):
        """Large β keeps the ground state."""
        lattice = initialize_lattice(8, "up")
        changed = checkerboard_gibbs_update(lattice, 10.0, rng=np.random.default_rng(0))
        assert changed == 0
        assert np.all(lattice == 1)

    def test_infinite_temperature_randomizes(self):
        """At β = 0 about half the spins point each way."""
        lattice = initialize_lattice(32, "up")
        checkerboard_gibbs_update(lattice, 0.0, rng=np.random.default_rng(0))
        validate_lattice(lattice)
        assert abs(magnetization(lattice)) < 0.15


class TestIsingSimulation:
    """Tests for the simulation driver."""

    def test_step_before_initialize(self):
        """Stepping an uninitialized simulation is an error."""
        sim = IsingSimulation(IsingConfig(size=8))
        assert sim.state is None
        with pytest.raises(RuntimeError):
            sim.step()

    def test_invalid_config(self):
        """Bad configurations are rejected up front."""
        with pytest.raises(ValueError):
            IsingSimulation(IsingConfig(algorithm="swendsen_wang"))
        with pytest.raises(ValueError):
            IsingSimulation(IsingConfig(temperature=0.0))
        with pytest.raises(ValueError):
            IsingSimulation(IsingConfig(algorithm="wolff", field=0.1))
        with pytest.raises(ValueError):
            IsingSimulation(IsingConfig(algorithm="checkerboard", size=7))
        with pytest.raises(ValueError):
            IsingSimulation(IsingConfig(initial_state="sideways"))

    def test_config_properties(self):
        """β and the number of sites follow from the configuration."""
        config = IsingConfig(size=10, temperature=2.0)
        assert config.beta == 0.5
        assert config.n_sites == 100

    def test_initialize_with_lattice(self):
        """A supplied lattice is copied, not shared."""
        lattice = initialize_lattice(8, "up")
        sim = IsingSimulation(IsingConfig(size=8))
        state = sim.initialize(lattice)
        assert state.lattice is not lattice
        assert state.energy == -128.0
        assert state.magnetization == 1.0

    def test_initialize_size_mismatch(self):
        """The supplied lattice must match the configured size."""
        sim = IsingSimulation(IsingConfig(size=8))
        with pytest.raises(ValueError):
            sim.initialize(initialize_lattice(4, "up"))

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_state_tracks_lattice(self, algorithm):
        """Stored observables agree with the lattice after each step."""
        sim = create_ising_simulation(size=8, temperature=2.5, algorithm=algorithm, seed=3)
        for _ in range(5):
            state = sim.step()
            assert state.energy == total_energy(state.lattice)
            assert state.magnetization == magnetization(state.lattice)
        assert sim.state.sweep == 5

    def test_run_sampling(self):
        """run records every measure_every steps after equilibration."""
        sim = create_ising_simulation(size=8, temperature=2.5, seed=1)
        sample = sim.run(100, measure_every=10, n_equilibration=20)
        assert len(sample.energy) == 10
        assert len(sample.magnetization) == 10
        assert sample.sweeps[0] == 30
        assert sample.sweeps[-1] == 120
        assert 0.0 <= sample.acceptance_rate <= 1.0

    def test_run_invalid_arguments(self):
        """Non-positive sweep counts are rejected."""
        sim = create_ising_simulation(size=8, seed=1)
        with pytest.raises(ValueError):
            sim.run(0)

    def test_seed_reproducible(self):
        """The same seed reproduces the same trajectory."""
        a = create_ising_simulation(size=8, temperature=2.3, seed=42).run(50)
        b = create_ising_simulation(size=8, temperature=2.3, seed=42).run(50)
        assert np.array_equal(a.energy, b.energy)
        assert np.array_equal(a.magnetization, b.magnetization)

    @pytest.mark.parametrize("algorithm", ["metropolis", "checkerboard"])
    def test_reinitialize_reproducible(self, algorithm):
        """Re-initializing a seeded simulation repeats its random start and trajectory."""
        sim = IsingSimulation(IsingConfig(size=8, temperature=2.3, algorithm=algorithm, seed=5))
        first_lattice = sim.initialize().lattice.copy()
        first = sim.run(20)
        second_lattice = sim.initialize().lattice.copy()
        second = sim.run(20)
        assert np.array_equal(first_lattice, second_lattice)
        assert np.array_equal(first.energy, second.energy)
        assert np.array_equal(first.magnetization, second.magnetization)

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_ordered_phase(self, algorithm):
        """Every update rule keeps the lattice magnetized at T = 1.5."""
        sim = create_ising_simulation(
            size=16, temperature=1.5, algorithm=algorithm, initial_state="up", seed=7
        )
        sample = sim.run(200, n_equilibration=50)
        assert np.mean(sample.abs_magnetization) > 0.9

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_disordered_phase(self, algorithm):
        """Every update rule demagnetizes the lattice at T = 5."""
        sim = create_ising_simulation(
            size=16, temperature=5.0, algorithm=algorithm, initial_state="up", seed=7
        )
        sample = sim.run(300, n_equilibration=1000)
        assert np.mean(sample.abs_magnetization) < 0.25


def exact_mean_energy(size: int, temperature: float) -> float:
    """⟨E⟩ by summing over all 2^(L²) configurations of a small periodic lattice."""
    n = size * size
    codes = np.arange(2 ** n, dtype=np.int64)
    bits = (codes[:, np.newaxis] >> np.arange(n)) & 1
    spins = (2 * bits - 1).reshape(-1, size, size)
    bonds = spins * (np.roll(spins, 1, axis=1) + np.roll(spins, 1, axis=2))
    energy = -bonds.sum(axis=(1, 2)).astype(float)
    weights = np.exp(-(energy - energy.min()) / temperature)
    return float(np.sum(energy * weights) / np.sum(weights))


class TestBoltzmannSampling:
    """Every update rule samples the Boltzmann distribution exp(-E/T)."""

    def test_enumeration_ground_state(self):
        """At low temperature the exact average approaches the ground state -2N."""
        assert abs(exact_mean_energy(2, 0.1) - (-8.0)) < 1e-6

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_mean_energy_matches_enumeration(self, algorithm):
        """⟨E⟩ on a 4x4 lattice at T = 2.5 agrees with the exact sum over 2^16 states."""
        exact = exact_mean_energy(4, 2.5)
        sim = create_ising_simulation(size=4, temperature=2.5, algorithm=algorithm, seed=11)
        sample = sim.run(40_000, n_equilibration=1000)
        assert abs(np.mean(sample.energy) - exact) < 0.4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
