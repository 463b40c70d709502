#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Observables Module Tests
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
from compphys.observables import (
    CRITICAL_TEMPERATURE,
    Phase,
    onsager_magnetization,
    specific_heat,
    susceptibility,
    autocorrelation,
    integrated_autocorrelation_time,
    binning_error,
    default_bin_count,
    identify_phase,
    temperature_sweep
)


def ar1_series(phi: float, n: int, seed: int) -> np.ndarray:
    """AR(1) process x_t = φ x_{t-1} + ε_t, with ρ(t) = φ^t."""
    rng = np.random.default_rng(seed)
    noise = rng.standard_normal(n)
    x = np.zeros(n)
    for t in range(1, n):
        x[t] = phi * x[t - 1] + noise[t]
    return x


class TestExactResults:
    """Tests for Onsager's results."""

    def test_critical_temperature(self):
        """T_c = 2 / ln(1 + √2) ≈ 2.269185."""
        assert abs(CRITICAL_TEMPERATURE - 2.269185) < 1e-6

    def test_magnetization_vanishes_above_tc(self):
        """No spontaneous magnetization above T_c."""
        assert onsager_magnetization(CRITICAL_TEMPERATURE + 0.01) == 0.0
        assert onsager_magnetization(5.0) == 0.0

    def test_magnetization_saturates_at_low_t(self):
        """Almost fully magnetized at T = 1."""
        assert onsager_magnetization(1.0) > 0.999

    def test_magnetization_decreasing(self):
        """|m| decreases with temperature below T_c."""
        temps = np.linspace(0.5, 2.2, 20)
        values = [onsager_magnetization(t) for t in temps]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_invalid_temperature(self):
        """Temperature must be positive."""
        with pytest.raises(ValueError):
            onsager_magnetization(0.0)


class TestFluctuations:
    """Tests for specific heat and susceptibility."""

    def test_constant_energy(self):
        """No fluctuations means no specific heat."""
        assert specific_heat(np.full(100, -2.0), 2.0, 64) == 0.0

    def test_specific_heat_formula(self):
        """C = var(E) / (N T²)."""
        energies = np.array([-10.0, -12.0, -10.0, -12.0])
        assert abs(specific_heat(energies, 2.0, 4) - 1.0 / 16.0) < 1e-12

    def test_susceptibility_uses_abs(self):
        """Sign flips between ordered states do not count as fluctuations."""
        m = np.array([0.9, -0.9, 0.9, -0.9])
        assert susceptibility(m, 1.5, 64) == 0.0


class TestAutocorrelation:
    """Tests for autocorrelation analysis."""

    def test_zero_lag(self):
        """ρ(0) = 1."""
        rho = autocorrelation(np.random.default_rng(0).standard_normal(1000), max_lag=10)
        assert len(rho) == 11
        assert rho[0] == 1.0

    def test_constant_series(self):
        """A constant series gives ρ = 0 beyond lag 0."""
        rho = autocorrelation(np.ones(50), max_lag=5)
        assert rho[0] == 1.0
        assert np.all(rho[1:] == 0.0)

    def test_ar1_decay(self):
        """ρ(1) ≈ φ for an AR(1) process."""
        rho = autocorrelation(ar1_series(0.9, 50_000, 1), max_lag=5)
        assert abs(rho[1] - 0.9) < 0.02
        assert abs(rho[2] - 0.81) < 0.03

    def test_too_short(self):
        """A single sample has no autocorrelation."""
        with pytest.raises(ValueError):
            autocorrelation(np.array([1.0]))

    def test_tau_white_noise(self):
        """Uncorrelated samples have τ_int ≈ 1/2."""
        tau = integrated_autocorrelation_time(np.random.default_rng(2).standard_normal(10_000))
        assert abs(tau - 0.5) < 0.1

    def test_tau_ar1(self):
        """τ_int = (1 + φ) / (2(1 - φ)) = 9.5 for φ = 0.9."""
        tau = integrated_autocorrelation_time(ar1_series(0.9, 100_000, 3))
        assert abs(tau - 9.5) < 2.0


class TestBinning:
    """Tests for binning error bars."""

    def test_independent_samples(self):
        """For independent data the binning error is σ/√N."""
        x = np.random.default_rng(4).standard_normal(10_000)
        error = binning_error(x, n_bins=20)
        assert 0.005 < error < 0.02

    def test_correlated_samples_larger(self):
        """Correlations make the naive error an underestimate."""
        x = ar1_series(0.9, 20_000, 5)
        naive = x.std(ddof=1) / np.sqrt(len(x))
        assert binning_error(x, n_bins=20) > 2 * naive

    def test_invalid_bins(self):
        """Too few bins or too short series are rejected."""
        with pytest.raises(ValueError):
            binning_error(np.ones(10), n_bins=1)
        with pytest.raises(ValueError):
            binning_error(np.ones(10), n_bins=20)

    def test_default_bin_count(self):
        """Short series get two bins, long series are capped at twenty."""
        assert default_bin_count(2) == 2
        assert default_bin_count(9) == 4
        assert default_bin_count(10_000) == 20
        with pytest.raises(ValueError):
            default_bin_count(1)

    def test_default_bins_short_series(self):
        """Without n_bins any series of two or more samples can be binned."""
        assert binning_error(np.array([1.0, 3.0])) == pytest.approx(1.0)
        assert binning_error(np.arange(10.0)) > 0.0
        with pytest.raises(ValueError):
            binning_error(np.ones(1))


class TestPhaseIdentification:
    """Tests for phase classification."""

    def test_ordered(self):
        assert identify_phase(1.5, 0.98).phase == Phase.ORDERED

    def test_disordered(self):
        assert identify_phase(4.0, 0.02).phase == Phase.DISORDERED

    def test_critical(self):
        info = identify_phase(2.27, 0.5)
        assert info.phase == Phase.CRITICAL
        assert "Critical" in info.description


class TestTemperatureSweep:
    """Tests for the temperature sweep driver."""

    def test_magnetization_drops_through_tc(self):
        """Low-temperature runs are magnetized, high-temperature runs are not."""
        results = temperature_sweep([1.5, 4.0], size=8, n_sweeps=400,
                                    n_equilibration=200, seed=1)
        assert len(results) == 2
        low, high = results
        assert low.temperature == 1.5
        assert low.abs_magnetization > 0.9
        assert high.abs_magnetization < low.abs_magnetization
        assert low.energy_per_site < high.energy_per_site
        assert low.abs_magnetization_error >= 0.0
        assert high.tau_int >= 0.5

    def test_shortest_run(self):
        """Two measured steps per temperature are enough for every estimate."""
        results = temperature_sweep([2.0, 3.0], size=8, n_sweeps=2,
                                    n_equilibration=0, seed=0)
        assert len(results) == 2
        for r in results:
            assert 0.0 <= r.abs_magnetization <= 1.0
            assert r.abs_magnetization_error >= 0.0
            assert r.tau_int >= 0.5

    def test_single_step_rejected(self):
        """One measured step cannot give an error bar."""
        with pytest.raises(ValueError):
            temperature_sweep([2.0], size=8, n_sweeps=1, n_equilibration=0, seed=0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
