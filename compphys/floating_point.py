#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Floating Point Numbers
================================================================================

Project:        Part II Computational Physics
Module:         floating_point.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Examples from the "Numbers" chapter. A double precision float is stored as

    (-1)^s × 1.m × 2^(e - 1023)

with 1 sign bit, 11 exponent bits and 52 mantissa bits. The consequences
shown here are the finite machine epsilon, loss of significance when nearly
equal numbers are subtracted, and the dependence of sums on their order.
"""

import struct
from typing import Iterable, Tuple

import numpy as np


def float_bits(x: float) -> str:
    """
    IEEE-754 double precision bit pattern of x as 'sign exponent mantissa'.

    >>> float_bits(1.0)
    '0 01111111111 0000000000000000000000000000000000000000000000000000'
    """
    (as_int,) = struct.unpack(">Q", struct.pack(">d", x))
    bits = f"{as_int:064b}"
    return f"{bits[0]} {bits[1:12]} {bits[12:]}"


def machine_epsilon(dtype=np.float64) -> float:
    """
    Smallest power of two eps for which 1 + eps != 1 in the given dtype.

    Found by halving, so it should agree with np.finfo(dtype).eps.
    """
    one = dtype(1)
    eps = dtype(1)
    while dtype(one + eps / dtype(2)) != one:
        eps = dtype(eps / dtype(2))
    return float(eps)


def quadratic_roots_naive(a: float, b: float, c: float) -> Tuple[float, float]:
    """
    Roots of ax² + bx + c = 0 straight from the textbook formula.

    When b² >> 4ac one root is computed as the difference of two nearly
    equal numbers and loses most of its significant digits.
    """
    if a == 0:
        raise ValueError("Leading coefficient must be non-zero")
    disc = b * b - 4 * a * c
    if disc < 0:
        raise ValueError("Complex roots are not handled")
    sq = np.sqrt(disc)
    return (-b + sq) / (2 * a), (-b - sq) / (2 * a)


def quadratic_roots_stable(a: float, b: float, c: float) -> Tuple[float, float]:
    """
    Roots of ax² + bx + c = 0 avoiding cancellation.

    q = -(b + sign(b)√(b² - 4ac)) / 2,  x₁ = q / a,  x₂ = c / q
    """
    if a == 0:
        raise ValueError("Leading coefficient must be non-zero")
    disc = b * b - 4 * a * c
    if disc < 0:
        raise ValueError("Complex roots are not handled")
    sign = 1.0 if b >= 0 else -1.0
    q = -0.5 * (b + sign * np.sqrt(disc))
    if q == 0:
        return 0.0, 0.0
    return q / a, c / q


def harmonic_sum(n: int, reverse: bool = False, dtype=np.float32) -> float:
    """
    Sum 1/k for k = 1..n in the given precision.

    Adding the small terms first (reverse=True) loses less to round-off.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    ks = range(n, 0, -1) if reverse else range(1, n + 1)
    total = dtype(0)
    for k in ks:
        total = dtype(total + dtype(1) / dtype(k))
    return float(total)


def kahan_sum(values: Iterable[float]) -> float:
    """Compensated (Kahan) summation, carrying the lost low-order bits."""
    total = 0.0
    compensation = 0.0
    for value in values:
        y = value - compensation
        t = total + y
        compensation = (t - total) - y
        total = t
    return total
