#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ordinary Differential Equation Integrators
================================================================================

Project:        Part II Computational Physics
Module:         ode.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Fixed-step integrators for dy/dt = f(t, y) from the "ODEs" chapter:

    Euler:           y_{n+1} = y_n + h f(t_n, y_n)                 O(h)
    Backward Euler:  y_{n+1} = y_n + h f(t_{n+1}, y_{n+1})         O(h), stable
    Velocity Verlet: symplectic, for x'' = a(x)                    O(h²)
    RK4:             classical fourth-order Runge-Kutta            O(h⁴)

The right-hand side f always takes (t, y) and returns an array shaped like y.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

RHS = Callable[[float, np.ndarray], np.ndarray]


@dataclass
class ODESolution:
    """Trajectory produced by one of the integrators."""
    t: np.ndarray          # Shape (n_steps + 1,)
    y: np.ndarray          # Shape (n_steps + 1, dim)
    method: str

    @property
    def n_steps(self) -> int:
        return len(self.t) - 1

    @property
    def final(self) -> np.ndarray:
        return self.y[-1]


def _time_grid(t_span: Tuple[float, float], dt: float) -> np.ndarray:
    t0, t1 = t_span
    if dt <= 0:
        raise ValueError(f"Time step must be positive, got {dt}")
    if t1 <= t0:
        raise ValueError(f"Empty time span ({t0}, {t1})")
    ratio = (t1 - t0) / dt
    n_steps = int(round(ratio))
    if n_steps < 1:
        raise ValueError(f"Time step {dt} is larger than the span ({t0}, {t1})")
    # A fixed-step grid has to land on t1
    if abs(ratio - n_steps) > 1e-9 * max(1.0, ratio):
        raise ValueError(
            f"Time step {dt} does not divide the span ({t0}, {t1}) into whole steps"
        )
    return np.linspace(t0, t1, n_steps + 1)


def euler(f: RHS, y0, t_span: Tuple[float, float], dt: float) -> ODESolution:
    """
    Explicit (forward) Euler method.

    Args:
        f: Right-hand side f(t, y)
        y0: Initial condition (scalar or array)
        t_span: (t0, t1) integration interval
        dt: Step size

    Returns:
        ODESolution with one row per time point
    """
    t = _time_grid(t_span, dt)
    y = np.zeros((len(t), np.size(y0)))
    y[0] = np.atleast_1d(np.asarray(y0, dtype=float))

    for n in range(len(t) - 1):
        y[n + 1] = y[n] + dt * np.asarray(f(t[n], y[n]))

    return ODESolution(t=t, y=y, method="euler")


def _numerical_jacobian(f: RHS, t: float, y: np.ndarray, eps: float = 1e-7) -> np.ndarray:
    """Forward-difference Jacobian of f with respect to y."""
    f0 = np.asarray(f(t, y), dtype=float)
    jac = np.zeros((len(y), len(y)))
    for k in range(len(y)):
        step = eps * max(1.0, abs(y[k]))
        y_shift = y.copy()
        y_shift[k] += step
        jac[:, k] = (np.asarray(f(t, y_shift), dtype=float) - f0) / step
    return jac


def backward_euler(
    f: RHS,
    y0,
    t_span: Tuple[float, float],
    dt: float,
    jacobian: Optional[Callable[[float, np.ndarray], np.ndarray]] = None,
    tol: float = 1e-10,
    max_iter: int = 50
) -> ODESolution:
    """
    Implicit (backward) Euler method.

    Each step solves g(z) = z - y_n - h f(t_{n+1}, z) = 0 by Newton's
    method, starting from the explicit Euler guess. For stiff problems such
    as fast exponential decay this stays stable at step sizes where explicit
    Euler blows up.

    Args:
        f: Right-hand side f(t, y)
        y0: Initial condition
        t_span: (t0, t1) integration interval
        dt: Step size
        jacobian: Optional df/dy(t, y); finite differences are used if None
        tol: Newton convergence tolerance on the update norm
        max_iter: Maximum Newton iterations per step

    Returns:
        ODESolution

    Raises:
        RuntimeError: If Newton's method fails to converge within max_iter
    """
    t = _time_grid(t_span, dt)
    y = np.zeros((len(t), np.size(y0)))
    y[0] = np.atleast_1d(np.asarray(y0, dtype=float))
    identity = np.eye(y.shape[1])

    for n in range(len(t) - 1):
        t_next = t[n + 1]
        z = y[n] + dt * np.asarray(f(t[n], y[n]))

        for iteration in range(max_iter):
            g = z - y[n] - dt * np.asarray(f(t_next, z))
            if jacobian is None:
                jac_f = _numerical_jacobian(f, t_next, z)
            else:
                jac_f = np.atleast_2d(jacobian(t_next, z))
            delta = np.linalg.solve(identity - dt * jac_f, g)
            z = z - delta
            if np.linalg.norm(delta) < tol * (1.0 + np.linalg.norm(z)):
                break
        else:
            logger.error("Newton iteration did not converge at t=%.6g", t_next)
            raise RuntimeError(
                f"Backward Euler: Newton failed to converge at t={t_next:.6g} "
                f"after {max_iter} iterations"
            )

        y[n + 1] = z

    return ODESolution(t=t, y=y, method="backward_euler")


def velocity_verlet(
    accel: Callable[[np.ndarray], np.ndarray],
    x0,
    v0,
    t_span: Tuple[float, float],
    dt: float
) -> ODESolution:
    """
    Velocity Verlet integration of x'' = a(x).

    1. v(t + dt/2) = v(t) + (dt/2) * a(t)
    2. x(t + dt) = x(t) + dt * v(t + dt/2)
    3. Compute a(t + dt) from x(t + dt)
    4. v(t + dt) = v(t + dt/2) + (dt/2) * a(t + dt)

    Returns:
        ODESolution whose rows are [x..., v...]
    """
    t = _time_grid(t_span, dt)
    x = np.atleast_1d(np.asarray(x0, dtype=float)).copy()
    v = np.atleast_1d(np.asarray(v0, dtype=float)).copy()
    if x.shape != v.shape:
        raise ValueError("x0 and v0 must have the same shape")

    dim = len(x)
    y = np.zeros((len(t), 2 * dim))
    y[0, :dim] = x
    y[0, dim:] = v

    a = np.asarray(accel(x), dtype=float)
    for n in range(len(t) - 1):
        v_half = v + 0.5 * dt * a
        x = x + dt * v_half
        a = np.asarray(accel(x), dtype=float)
        v = v_half + 0.5 * dt * a
        y[n + 1, :dim] = x
        y[n + 1, dim:] = v

    return ODESolution(t=t, y=y, method="velocity_verlet")


def rk4(f: RHS, y0, t_span: Tuple[float, float], dt: float) -> ODESolution:
    """Classical fourth-order Runge-Kutta."""
    t = _time_grid(t_span, dt)
    y = np.zeros((len(t), np.size(y0)))
    y[0] = np.atleast_1d(np.asarray(y0, dtype=float))

    for n in range(len(t) - 1):
        tn, yn = t[n], y[n]
        k1 = np.asarray(f(tn, yn))
        k2 = np.asarray(f(tn + 0.5 * dt, yn + 0.5 * dt * k1))
        k3 = np.asarray(f(tn + 0.5 * dt, yn + 0.5 * dt * k2))
        k4 = np.asarray(f(tn + dt, yn + dt * k3))
        y[n + 1] = yn + dt / 6.0 * (k1 + 2 * k2 + 2 * k3 + k4)

    return ODESolution(t=t, y=y, method="rk4")


# Right-hand sides used in the notes

def exponential_decay(rate: float = 1.0) -> RHS:
    """dy/dt = -rate * y, with solution y0 exp(-rate t)."""
    def f(t, y):
        return -rate * y
    return f


def harmonic_oscillator(omega: float = 1.0) -> RHS:
    """State y = [x, v]; x'' = -omega² x."""
    def f(t, y):
        return np.array([y[1], -omega ** 2 * y[0]])
    return f


def pendulum(omega: float = 1.0) -> RHS:
    """State y = [θ, θ']; θ'' = -omega² sin θ."""
    def f(t, y):
        return np.array([y[1], -omega ** 2 * np.sin(y[0])])
    return f


def oscillator_energy(y: np.ndarray, omega: float = 1.0) -> np.ndarray:
    """Energy ½v² + ½ω²x² along a trajectory of rows [x, v]."""
    y = np.atleast_2d(y)
    return 0.5 * y[:, 1] ** 2 + 0.5 * omega ** 2 * y[:, 0] ** 2


INTEGRATORS = {
    "euler": euler,
    "backward_euler": backward_euler,
    "rk4": rk4,
}


def global_error(
    method: str,
    f: RHS,
    y0,
    t_span: Tuple[float, float],
    dt: float,
    exact: Callable[[float], np.ndarray]
) -> float:
    """
    Error at the end of the interval against an exact solution.

    Halving dt should divide this by 2 for Euler and by 16 for RK4.
    """
    if method not in INTEGRATORS:
        raise ValueError(f"Unknown method '{method}'. Choose from {sorted(INTEGRATORS)}")
    solution = INTEGRATORS[method](f, y0, t_span, dt)
    return float(np.max(np.abs(solution.final - np.atleast_1d(exact(solution.t[-1])))))
