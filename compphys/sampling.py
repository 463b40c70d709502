#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Random Sampling and Monte Carlo Estimation
================================================================================

Project:        Part II Computational Physics
Module:         sampling.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Turning uniform random numbers into samples from other distributions, and
using samples to estimate integrals:

    - Box-Muller: two uniforms -> two independent standard normals
          r = √(-2 ln u₁),  θ = 2π u₂,  (z₁, z₂) = (r cos θ, r sin θ)
    - Inverse transform: x = F⁻¹(u), e.g. x = -ln(1 - u) / λ
    - Rejection: accept x with probability p(x) / M
    - Monte Carlo integration with a 1/√N error bar

Every function accepts an optional numpy.random.Generator so results can be
reproduced.
"""

import logging
from typing import Callable, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def box_muller(n: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Draw n standard normal deviates with the Box-Muller transform.

    Args:
        n: Number of samples
        rng: Optional random generator

    Returns:
        Array of n samples from N(0, 1)
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    rng = _rng(rng)
    n_pairs = (n + 1) // 2

    # 1 - u lies in (0, 1] so the logarithm is finite
    u1 = 1.0 - rng.random(n_pairs)
    u2 = rng.random(n_pairs)

    r = np.sqrt(-2.0 * np.log(u1))
    theta = 2.0 * np.pi * u2
    z = np.concatenate([r * np.cos(theta), r * np.sin(theta)])
    return z[:n]


def inverse_transform_exponential(
    n: int,
    rate: float = 1.0,
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """Exponential samples with density λ exp(-λx) by inverting the CDF."""
    if rate <= 0:
        raise ValueError(f"Rate must be positive, got {rate}")
    u = _rng(rng).random(n)
    return -np.log1p(-u) / rate


def rejection_sample(
    pdf: Callable[[np.ndarray], np.ndarray],
    bound: float,
    lo: float,
    hi: float,
    n: int,
    rng: Optional[np.random.Generator] = None,
    batch_size: int = 1024
) -> np.ndarray:
    """
    Sample from an (unnormalized) density on [lo, hi] by rejection.

    Candidates x ~ U(lo, hi) are accepted when u * bound < pdf(x). The
    bound must dominate pdf on the interval.

    Returns:
        Array of n accepted samples
    """
    if hi <= lo:
        raise ValueError(f"Empty interval [{lo}, {hi}]")
    if bound <= 0:
        raise ValueError(f"Bound must be positive, got {bound}")
    rng = _rng(rng)

    accepted = []
    n_accepted = 0
    n_proposed = 0
    while n_accepted < n:
        x = rng.uniform(lo, hi, batch_size)
        u = rng.random(batch_size)
        keep = x[u * bound < pdf(x)]
        accepted.append(keep)
        n_accepted += len(keep)
        n_proposed += batch_size

    logger.debug("Rejection sampling accepted %d of %d proposals", n_accepted, n_proposed)
    if not accepted:
        return np.zeros(0)
    return np.concatenate(accepted)[:n]


def monte_carlo_integrate(
    f: Callable[[np.ndarray], np.ndarray],
    lo: float,
    hi: float,
    n: int,
    rng: Optional[np.random.Generator] = None
) -> Tuple[float, float]:
    """
    Estimate ∫ f(x) dx over [lo, hi] as (hi - lo) × mean of f(U).

    Returns:
        (estimate, standard_error)
    """
    if n < 2:
        raise ValueError(f"Need at least 2 samples, got {n}")
    x = _rng(rng).uniform(lo, hi, n)
    values = (hi - lo) * np.asarray(f(x), dtype=float)
    return float(values.mean()), float(values.std(ddof=1) / np.sqrt(n))


def monte_carlo_pi(n: int, rng: Optional[np.random.Generator] = None) -> Tuple[float, float]:
    """Estimate π from the fraction of random points in the unit quarter disc."""
    if n < 2:
        raise ValueError(f"Need at least 2 samples, got {n}")
    points = _rng(rng).random((n, 2))
    inside = (np.sum(points ** 2, axis=1) <= 1.0).astype(float)
    hits = 4.0 * inside
    return float(hits.mean()), float(hits.std(ddof=1) / np.sqrt(n))


def independent_trials(
    estimator: Callable[[np.random.Generator], float],
    n_trials: int,
    seed: Optional[int] = None
) -> Tuple[float, float, np.ndarray]:
    """
    Run an estimator on independent random streams and average the results.

    Independent Markov chains or MC runs can be combined like this; each
    trial here runs in turn with its own child generator spawned from one
    SeedSequence.

    Returns:
        (mean, standard_error, per-trial estimates)
    """
    if n_trials < 2:
        raise ValueError(f"Need at least 2 trials, got {n_trials}")
    children = np.random.SeedSequence(seed).spawn(n_trials)
    estimates = np.array([estimator(np.random.default_rng(child)) for child in children])
    mean = float(estimates.mean())
    error = float(estimates.std(ddof=1) / np.sqrt(n_trials))
    logger.info("%d independent trials: %.6g ± %.2g", n_trials, mean, error)
    return mean, error, estimates
