#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ising Observables and Error Analysis
================================================================================

Project:        Part II Computational Physics
Module:         observables.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Analysis of Monte Carlo time series for the 2D Ising model:
- Exact results (Onsager critical temperature and spontaneous magnetization)
- Fluctuation estimators for specific heat and susceptibility
- Autocorrelation functions and integrated autocorrelation time
- Binning error bars for correlated samples
- Ordered / disordered phase identification and temperature sweeps
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

import numpy as np

from .ising import IsingConfig, IsingSimulation

logger = logging.getLogger(__name__)

# T_c = 2J / ln(1 + √2) ≈ 2.269 for J = k_B = 1
CRITICAL_TEMPERATURE = 2.0 / np.log(1.0 + np.sqrt(2.0))


class Phase(Enum):
    """Phases of the 2D ferromagnetic Ising model."""
    ORDERED = "ordered"
    CRITICAL = "critical"
    DISORDERED = "disordered"


@dataclass
class PhaseInfo:
    """Information about the current phase."""
    phase: Phase
    temperature: float
    abs_magnetization: float
    description: str


def onsager_magnetization(temperature: float, coupling: float = 1.0) -> float:
    """
    Exact spontaneous magnetization of the infinite 2D Ising model.

    m = (1 - sinh⁻⁴(2J/T))^(1/8) for T < T_c, zero above.
    """
    if temperature <= 0:
        raise ValueError(f"Temperature must be positive, got {temperature}")
    x = np.sinh(2.0 * coupling / temperature) ** -4
    if x >= 1.0:
        return 0.0
    return float((1.0 - x) ** 0.125)


def specific_heat(energies: np.ndarray, temperature: float, n_sites: int) -> float:
    """
    Specific heat per site from energy fluctuations.

    C = (⟨E²⟩ - ⟨E⟩²) / (N T²), with E the total energy.
    """
    energies = np.asarray(energies, dtype=float)
    return float(np.var(energies) / (n_sites * temperature ** 2))


def susceptibility(magnetizations: np.ndarray, temperature: float, n_sites: int) -> float:
    """
    Susceptibility per site from magnetization fluctuations.

    χ = N (⟨m²⟩ - ⟨|m|⟩²) / T, with m the magnetization per spin. Using |m|
    keeps the estimate finite below T_c on a finite lattice, where the sign
    of m flips between the two ordered states.
    """
    m = np.abs(np.asarray(magnetizations, dtype=float))
    return float(n_sites * np.var(m) / temperature)


def autocorrelation(series: np.ndarray, max_lag: Optional[int] = None) -> np.ndarray:
    """
    Normalized autocorrelation function ρ(t) for lags 0..max_lag.

    ρ(t) = ⟨(x_s - x̄)(x_{s+t} - x̄)⟩ / var(x), so ρ(0) = 1.
    A constant series has no fluctuations; ρ is returned as 1 at lag 0 and
    0 elsewhere.
    """
    x = np.asarray(series, dtype=float)
    n = len(x)
    if n < 2:
        raise ValueError("Need at least two samples")
    if max_lag is None:
        max_lag = n // 2
    max_lag = min(max_lag, n - 1)

    x = x - x.mean()
    var = np.dot(x, x) / n
    rho = np.zeros(max_lag + 1)
    rho[0] = 1.0
    if var == 0.0:
        return rho

    for t in range(1, max_lag + 1):
        rho[t] = np.dot(x[:n - t], x[t:]) / ((n - t) * var)
    return rho


def integrated_autocorrelation_time(series: np.ndarray, window_factor: float = 5.0) -> float:
    """
    τ_int = ½ + Σ_{t≥1} ρ(t), summed up to a self-consistent window.

    The sum stops at the first lag W with W ≥ window_factor × τ_int(W),
    which cuts off the noisy tail of ρ(t).
    """
    rho = autocorrelation(series)
    tau = 0.5
    for t in range(1, len(rho)):
        tau += rho[t]
        if t >= window_factor * tau:
            break
    return float(max(tau, 0.5))


def default_bin_count(n_samples: int, max_bins: int = 20) -> int:
    """Block count for binning_error: about two samples per block, between 2 and max_bins."""
    if n_samples < 2:
        raise ValueError(f"Need at least two samples to bin, got {n_samples}")
    return max(2, min(max_bins, n_samples // 2))


def binning_error(series: np.ndarray, n_bins: Optional[int] = None) -> float:
    """
    Standard error of the mean from block averages.

    Blocks much longer than the autocorrelation time are nearly
    independent, so the spread of their means gives an honest error bar
    for correlated Markov chain data. With n_bins left as None the count
    comes from default_bin_count, so any series of two or more samples
    can be binned.
    """
    x = np.asarray(series, dtype=float)
    if n_bins is None:
        n_bins = default_bin_count(len(x))
    if n_bins < 2:
        raise ValueError(f"Need at least 2 bins, got {n_bins}")
    block = len(x) // n_bins
    if block < 1:
        raise ValueError(f"Series of length {len(x)} is too short for {n_bins} bins")
    means = x[:block * n_bins].reshape(n_bins, block).mean(axis=1)
    return float(means.std(ddof=1) / np.sqrt(n_bins))


def identify_phase(
    temperature: float,
    abs_magnetization: float,
    critical_window: float = 0.05
) -> PhaseInfo:
    """
    Classify a measurement as ordered, critical or disordered.

    Temperatures within critical_window (relative) of T_c are reported as
    critical; otherwise the side of T_c decides.
    """
    reduced = (temperature - CRITICAL_TEMPERATURE) / CRITICAL_TEMPERATURE

    if abs(reduced) <= critical_window:
        phase = Phase.CRITICAL
        description = f"Critical region: T={temperature:.3f} ≈ T_c, |m|={abs_magnetization:.2f}"
    elif reduced < 0:
        phase = Phase.ORDERED
        description = f"Ordered phase: T={temperature:.3f} < T_c, |m|={abs_magnetization:.2f}"
    else:
        phase = Phase.DISORDERED
        description = f"Disordered phase: T={temperature:.3f} > T_c, |m|={abs_magnetization:.2f}"

    return PhaseInfo(
        phase=phase,
        temperature=temperature,
        abs_magnetization=abs_magnetization,
        description=description
    )


@dataclass
class SweepResult:
    """Thermodynamic averages at one temperature."""
    temperature: float
    abs_magnetization: float
    abs_magnetization_error: float
    energy_per_site: float
    specific_heat: float
    susceptibility: float
    tau_int: float


def temperature_sweep(
    temperatures: Iterable[float],
    size: int = 16,
    algorithm: str = "metropolis",
    n_sweeps: int = 2000,
    n_equilibration: int = 500,
    seed: Optional[int] = None,
    coupling: float = 1.0
) -> List[SweepResult]:
    """
    Measure averages across a range of temperatures.

    Each temperature starts from an ordered lattice so the low-temperature
    runs do not get stuck in domain configurations.

    Returns:
        One SweepResult per temperature, in the given order
    """
    if n_sweeps < 2:
        raise ValueError(f"A sweep needs at least 2 measured steps per temperature, got {n_sweeps}")

    results = []
    for k, temperature in enumerate(temperatures):
        config = IsingConfig(
            size=size,
            temperature=float(temperature),
            coupling=coupling,
            algorithm=algorithm,
            initial_state="up",
            seed=None if seed is None else seed + k
        )
        sim = IsingSimulation(config)
        sim.initialize()
        sample = sim.run(n_sweeps, n_equilibration=n_equilibration)
        results.append(SweepResult(
            temperature=float(temperature),
            abs_magnetization=float(np.mean(sample.abs_magnetization)),
            abs_magnetization_error=binning_error(sample.abs_magnetization),
            energy_per_site=float(np.mean(sample.energy) / config.n_sites),
            specific_heat=specific_heat(sample.energy, config.temperature, config.n_sites),
            susceptibility=susceptibility(sample.magnetization, config.temperature, config.n_sites),
            tau_int=integrated_autocorrelation_time(sample.abs_magnetization)
        ))
        logger.debug(
            "T=%.3f: <|m|>=%.4f, C=%.3f", temperature,
            results[-1].abs_magnetization, results[-1].specific_heat
        )

    return results
