#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Two-Dimensional Ising Model
================================================================================

Project:        Part II Computational Physics
Module:         ising.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Markov chain Monte Carlo for the Ising model on an L × L square lattice with
periodic boundaries:

    E = -J Σ_<ij> s_i s_j - h Σ_i s_i,    s_i = ±1

Update rules, all of which satisfy detailed balance with respect to
exp(-E/T) (k_B = 1):

    - Metropolis:     flip with probability min(1, exp(-βΔE))
    - Heat bath:      set s_i = +1 with probability 1 / (1 + exp(-2βh_i))
                      where h_i = J Σ_nn s_j + h is the local field (Glauber)
    - Checkerboard:   heat bath applied to a whole sublattice at once; sites
                      of one colour only neighbour the other colour
    - Wolff:          grow a cluster of aligned spins with bond probability
                      p = 1 - exp(-2βJ) and flip it as a whole

The site-by-site loops are compiled with Numba.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from numba import jit

logger = logging.getLogger(__name__)

ALGORITHMS = ("metropolis", "heat_bath", "checkerboard", "wolff")
INITIAL_STATES = ("random", "up", "down")


# ---------------------------------------------------------------------------
# Lattice
# ---------------------------------------------------------------------------

def initialize_lattice(
    size: int,
    state: str = "random",
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Create an L × L lattice of ±1 spins.

    Args:
        size: Linear dimension L
        state: 'random', 'up' (all +1) or 'down' (all -1)
        rng: Optional random generator for the random start

    Returns:
        int64 array of shape (size, size)
    """
    if size < 2:
        raise ValueError(f"Lattice size must be at least 2, got {size}")

    if state == "random":
        rng = rng if rng is not None else np.random.default_rng()
        return rng.choice(np.array([-1, 1], dtype=np.int64), size=(size, size))
    if state == "up":
        return np.ones((size, size), dtype=np.int64)
    if state == "down":
        return -np.ones((size, size), dtype=np.int64)

    raise ValueError(f"Invalid state '{state}'. Choose from {INITIAL_STATES}")


def validate_lattice(lattice: np.ndarray) -> None:
    """Raise ValueError unless lattice is square, 2D and holds only ±1."""
    if lattice.ndim != 2 or lattice.shape[0] != lattice.shape[1]:
        raise ValueError(f"Lattice must be square and 2D, got shape {lattice.shape}")
    if not np.all(np.abs(lattice) == 1):
        raise ValueError("Every lattice site must hold +1 or -1")


def neighbor_sum(lattice: np.ndarray) -> np.ndarray:
    """Sum of the four nearest-neighbour spins at every site (periodic)."""
    return (
        np.roll(lattice, 1, axis=0) + np.roll(lattice, -1, axis=0)
        + np.roll(lattice, 1, axis=1) + np.roll(lattice, -1, axis=1)
    )


def total_energy(lattice: np.ndarray, coupling: float = 1.0, field: float = 0.0) -> float:
    """
    Total energy E = -J Σ_<ij> s_i s_j - h Σ s_i.

    Each bond is counted once by pairing every site with its right and
    lower neighbour.
    """
    bonds = lattice * (np.roll(lattice, 1, axis=0) + np.roll(lattice, 1, axis=1))
    return float(-coupling * np.sum(bonds) - field * np.sum(lattice))


def magnetization(lattice: np.ndarray) -> float:
    """Magnetization per spin, m = (1/N) Σ s_i."""
    return float(np.mean(lattice))


def delta_energy(
    lattice: np.ndarray,
    i: int,
    j: int,
    coupling: float = 1.0,
    field: float = 0.0
) -> float:
    """Energy change ΔE = 2 s_ij h_ij if the spin at (i, j) were flipped."""
    return float(2.0 * lattice[i, j] * _local_field(lattice, i, j, coupling, field))


# ---------------------------------------------------------------------------
# Compiled kernels
# ---------------------------------------------------------------------------

@jit(nopython=True, cache=True)
def seed_numba(seed: int) -> None:
    """Seed the random generator used inside compiled kernels."""
    np.random.seed(seed)


@jit(nopython=True, cache=True)
def _local_field(lattice: np.ndarray, i: int, j: int, coupling: float, field: float) -> float:
    L = lattice.shape[0]
    s = (
        lattice[(i - 1 + L) % L, j] + lattice[(i + 1) % L, j]
        + lattice[i, (j - 1 + L) % L] + lattice[i, (j + 1) % L]
    )
    return coupling * s + field


@jit(nopython=True, cache=True)
def metropolis_sweep(
    lattice: np.ndarray,
    beta: float,
    coupling: float = 1.0,
    field: float = 0.0
) -> int:
    """
    One Metropolis sweep: L² single-spin flip proposals at random sites.

    Modifies lattice in place.

    Returns:
        Number of accepted flips
    """
    L = lattice.shape[0]
    accepted = 0

    for _ in range(L * L):
        i = np.random.randint(0, L)
        j = np.random.randint(0, L)

        dE = 2.0 * lattice[i, j] * _local_field(lattice, i, j, coupling, field)

        if dE <= 0.0 or np.random.random() < np.exp(-beta * dE):
            lattice[i, j] = -lattice[i, j]
            accepted += 1

    return accepted


@jit(nopython=True, cache=True)
def heat_bath_sweep(
    lattice: np.ndarray,
    beta: float,
    coupling: float = 1.0,
    field: float = 0.0
) -> int:
    """
    One heat-bath (Glauber) sweep over L² randomly chosen sites.

    The new spin is drawn from its conditional distribution given the
    neighbours, independent of its old value.

    Returns:
        Number of sites whose spin changed
    """
    L = lattice.shape[0]
    changed = 0

    for _ in range(L * L):
        i = np.random.randint(0, L)
        j = np.random.randint(0, L)

        h = _local_field(lattice, i, j, coupling, field)
        # 1 / (1 + exp(-2βh)) written with tanh to stay finite at large β
        p_up = 0.5 * (1.0 + np.tanh(beta * h))

        new_spin = 1 if np.random.random() < p_up else -1
        if new_spin != lattice[i, j]:
            lattice[i, j] = new_spin
            changed += 1

    return changed


@jit(nopython=True, cache=True)
def wolff_update(lattice: np.ndarray, beta: float, coupling: float = 1.0) -> int:
    """
    Grow and flip one Wolff cluster (zero external field).

    The cluster is grown breadth-first from a random seed site. Spins are
    flipped as they join, so a neighbour still holding the seed's original
    value has not been visited yet.

    Returns:
        Cluster size
    """
    L = lattice.shape[0]
    p_add = 1.0 - np.exp(-2.0 * beta * coupling)

    queue_i = np.empty(L * L, dtype=np.int64)
    queue_j = np.empty(L * L, dtype=np.int64)

    i0 = np.random.randint(0, L)
    j0 = np.random.randint(0, L)
    s0 = lattice[i0, j0]

    lattice[i0, j0] = -s0
    queue_i[0] = i0
    queue_j[0] = j0
    head = 0
    tail = 1

    while head < tail:
        i = queue_i[head]
        j = queue_j[head]
        head += 1

        for k in range(4):
            if k == 0:
                ni, nj = (i - 1 + L) % L, j
            elif k == 1:
                ni, nj = (i + 1) % L, j
            elif k == 2:
                ni, nj = i, (j - 1 + L) % L
            else:
                ni, nj = i, (j + 1) % L

            if lattice[ni, nj] == s0 and np.random.random() < p_add:
                lattice[ni, nj] = -s0
                queue_i[tail] = ni
                queue_j[tail] = nj
                tail += 1

    return tail


def checkerboard_gibbs_update(
    lattice: np.ndarray,
    beta: float,
    coupling: float = 1.0,
    field: float = 0.0,
    rng: Optional[np.random.Generator] = None
) -> int:
    """
    Lattice-wide heat-bath update, one sublattice at a time.

    Sites with (i + j) even only neighbour sites with (i + j) odd, so each
    colour can be resampled simultaneously from its conditional
    distribution. Updating every site at once would break detailed balance,
    and an odd L would put same-coloured sites next to each other across
    the periodic boundary.

    Returns:
        Number of sites whose spin changed
    """
    L = lattice.shape[0]
    if L % 2:
        raise ValueError(f"Checkerboard update needs an even lattice size, got {L}")
    rng = rng if rng is not None else np.random.default_rng()

    ii, jj = np.indices(lattice.shape)
    changed = 0

    for parity in (0, 1):
        mask = (ii + jj) % 2 == parity
        h = coupling * neighbor_sum(lattice) + field
        p_up = 0.5 * (1.0 + np.tanh(beta * h))
        proposal = np.where(rng.random(lattice.shape) < p_up, 1, -1)
        changed += int(np.sum(proposal[mask] != lattice[mask]))
        lattice[mask] = proposal[mask]

    return changed


# ---------------------------------------------------------------------------
# Simulation driver
# ---------------------------------------------------------------------------

@dataclass
class IsingConfig:
    """Configuration for an Ising simulation."""
    size: int = 32
    temperature: float = 2.269          # Close to T_c = 2 / ln(1 + √2)
    coupling: float = 1.0               # J > 0 is ferromagnetic
    field: float = 0.0                  # External field h
    algorithm: str = "metropolis"       # One of ALGORITHMS
    initial_state: str = "random"       # One of INITIAL_STATES
    seed: Optional[int] = None

    @property
    def beta(self) -> float:
        return 1.0 / self.temperature

    @property
    def n_sites(self) -> int:
        return self.size * self.size


@dataclass
class IsingState:
    """Current state of the lattice and its observables."""
    lattice: np.ndarray
    sweep: int = 0
    energy: float = 0.0
    magnetization: float = 0.0
    last_changed: int = 0      # Accepted flips, or cluster size for Wolff

    @property
    def energy_per_site(self) -> float:
        return self.energy / self.lattice.size


@dataclass
class IsingSample:
    """Time series recorded by IsingSimulation.run."""
    sweeps: np.ndarray
    energy: np.ndarray           # Total energy
    magnetization: np.ndarray    # Per spin
    acceptance_rate: float       # Mean fraction changed per step (cluster fraction for Wolff)
    elapsed: float = 0.0

    @property
    def abs_magnetization(self) -> np.ndarray:
        return np.abs(self.magnetization)


class IsingSimulation:
    """
    Monte Carlo simulation of the 2D Ising model.

    One step is one sweep (L² proposals) for the local algorithms, one
    checkerboard pass for 'checkerboard', and one cluster flip for 'wolff'.
    """

    def __init__(self, config: Optional[IsingConfig] = None):
        self.config = config or IsingConfig()
        self._validate_config()
        self.state: Optional[IsingState] = None
        self.rng = np.random.default_rng(self.config.seed)

        # Performance tracking
        self.sweeps_per_second = 0.0
        self._last_time = time.time()
        self._step_count = 0

    def _validate_config(self) -> None:
        cfg = self.config
        if cfg.temperature <= 0:
            raise ValueError(f"Temperature must be positive, got {cfg.temperature}")
        if cfg.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm '{cfg.algorithm}'. Choose from {ALGORITHMS}")
        if cfg.initial_state not in INITIAL_STATES:
            raise ValueError(
                f"Invalid state '{cfg.initial_state}'. Choose from {INITIAL_STATES}"
            )
        if cfg.algorithm == "wolff" and cfg.field != 0.0:
            raise ValueError("Wolff cluster updates require zero external field")
        if cfg.algorithm == "checkerboard" and cfg.size % 2:
            raise ValueError(f"Checkerboard update needs an even lattice size, got {cfg.size}")

    def initialize(self, lattice: Optional[np.ndarray] = None) -> IsingState:
        """
        Set up the initial lattice.

        Args:
            lattice: Optional starting configuration (copied); otherwise one
                     is generated from config.initial_state

        Returns:
            Initial state
        """
        cfg = self.config
        # Both generators restart so a seeded run is reproducible after re-initializing
        self.rng = np.random.default_rng(cfg.seed)
        if cfg.seed is not None:
            seed_numba(cfg.seed)

        if lattice is None:
            lattice = initialize_lattice(cfg.size, cfg.initial_state, self.rng)
        else:
            validate_lattice(lattice)
            if lattice.shape[0] != cfg.size:
                raise ValueError(
                    f"Lattice size {lattice.shape[0]} does not match config size {cfg.size}"
                )
            lattice = lattice.astype(np.int64, copy=True)

        self.state = IsingState(
            lattice=lattice,
            energy=total_energy(lattice, cfg.coupling, cfg.field),
            magnetization=magnetization(lattice)
        )
        logger.debug(
            "Initialized %dx%d lattice (%s start) at T=%.4f with %s updates",
            cfg.size, cfg.size, cfg.initial_state, cfg.temperature, cfg.algorithm
        )
        return self.state

    def step(self) -> IsingState:
        """Apply one update of the configured algorithm."""
        if self.state is None:
            raise RuntimeError("Simulation not initialized")

        cfg = self.config
        lattice = self.state.lattice

        if cfg.algorithm == "metropolis":
            changed = metropolis_sweep(lattice, cfg.beta, cfg.coupling, cfg.field)
        elif cfg.algorithm == "heat_bath":
            changed = heat_bath_sweep(lattice, cfg.beta, cfg.coupling, cfg.field)
        elif cfg.algorithm == "checkerboard":
            changed = checkerboard_gibbs_update(
                lattice, cfg.beta, cfg.coupling, cfg.field, self.rng
            )
        else:
            changed = wolff_update(lattice, cfg.beta, cfg.coupling)

        self.state.sweep += 1
        self.state.last_changed = int(changed)
        self.state.energy = total_energy(lattice, cfg.coupling, cfg.field)
        self.state.magnetization = magnetization(lattice)

        # Track performance
        self._step_count += 1
        if self._step_count % 100 == 0:
            current_time = time.time()
            elapsed = current_time - self._last_time
            if elapsed > 0:
                self.sweeps_per_second = 100.0 / elapsed
            self._last_time = current_time

        return self.state

    def run(
        self,
        n_sweeps: int,
        measure_every: int = 1,
        n_equilibration: int = 0
    ) -> IsingSample:
        """
        Equilibrate, then run n_sweeps steps recording observables.

        Args:
            n_sweeps: Number of measured steps
            measure_every: Record every this many steps
            n_equilibration: Steps discarded before measuring

        Returns:
            IsingSample with the recorded time series
        """
        if self.state is None:
            raise RuntimeError("Simulation not initialized")
        if n_sweeps < 1 or measure_every < 1 or n_equilibration < 0:
            raise ValueError("n_sweeps and measure_every must be positive, n_equilibration >= 0")

        t_start = time.time()
        for _ in range(n_equilibration):
            self.step()

        sweeps: List[int] = []
        energies: List[float] = []
        mags: List[float] = []
        changed_total = 0

        for k in range(n_sweeps):
            state = self.step()
            changed_total += state.last_changed
            if (k + 1) % measure_every == 0:
                sweeps.append(state.sweep)
                energies.append(state.energy)
                mags.append(state.magnetization)

        elapsed = time.time() - t_start
        acceptance = changed_total / (n_sweeps * self.config.n_sites)
        logger.info(
            "%s: %d sweeps on %dx%d at T=%.4f in %.2fs (changed fraction %.3f)",
            self.config.algorithm, n_equilibration + n_sweeps,
            self.config.size, self.config.size, self.config.temperature,
            elapsed, acceptance
        )

        return IsingSample(
            sweeps=np.array(sweeps, dtype=np.int64),
            energy=np.array(energies),
            magnetization=np.array(mags),
            acceptance_rate=acceptance,
            elapsed=elapsed
        )


def create_ising_simulation(
    size: int = 32,
    temperature: float = 2.269,
    algorithm: str = "metropolis",
    initial_state: str = "random",
    seed: Optional[int] = None,
    coupling: float = 1.0,
    field: float = 0.0
) -> IsingSimulation:
    """
    Create and initialize an Ising simulation.

    Returns:
        Initialized IsingSimulation
    """
    config = IsingConfig(
        size=size,
        temperature=temperature,
        coupling=coupling,
        field=field,
        algorithm=algorithm,
        initial_state=initial_state,
        seed=seed
    )
    sim = IsingSimulation(config)
    sim.initialize()
    return sim
