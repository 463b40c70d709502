#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Part II Computational Physics - Companion Code
================================================================================

Project:        Part II Computational Physics
Description:    Runnable, tested versions of the example algorithms embedded
                in the course notes (search, recursion, floating point, ODE
                integration, Monte Carlo sampling and the Ising model)

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Each module mirrors one chapter of the notes. The examples are independent:
nothing flows from one module into another except the shared plotting helpers.

Modules:
    - algorithms: Linear/binary search, fast exponentiation, Fibonacci
    - arrays: Strides, views vs copies, broadcasting, loop vs vectorized
    - floating_point: Floating point representation and round-off
    - ode: Euler, backward Euler, velocity Verlet and RK4 integrators
    - sampling: Box-Muller, inverse transform, rejection and MC integration
    - ising: 2D Ising model with Metropolis, heat-bath and Wolff updates
    - observables: Thermodynamic estimators and autocorrelation analysis
    - visualization: Matplotlib rendering of lattices and trajectories
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
