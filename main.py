#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Computational Physics Examples - Command Line Interface
================================================================================

Project:        Part II Computational Physics
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Command line runner for the examples in the course notes. Each option runs
one chapter's demonstration, prints a short report and saves a figure.
"""

import argparse
import logging
import time
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from compphys.arrays import (
    broadcast_result_shape, compare_loop_vectorized, describe_array,
    index_returns_view, reshape_returns_view
)
from compphys.algorithms import (
    binary_search, count_multiplications, fast_power, fibonacci_iterative,
    fibonacci_matrix, fibonacci_memo, linear_search, time_function
)
from compphys.floating_point import (
    float_bits, machine_epsilon, quadratic_roots_naive, quadratic_roots_stable
)
from compphys.ising import ALGORITHMS, create_ising_simulation
from compphys.logging_config import setup_logging
from compphys.observables import (
    CRITICAL_TEMPERATURE, identify_phase, integrated_autocorrelation_time,
    binning_error, onsager_magnetization, temperature_sweep
)
from compphys.ode import (
    backward_euler, euler, exponential_decay, harmonic_oscillator,
    oscillator_energy, rk4, velocity_verlet
)
from compphys.sampling import box_muller, independent_trials, monte_carlo_pi
from compphys.visualization import (
    render_histogram_with_pdf, render_lattice, render_ode_solution,
    render_phase_portrait, render_sweep, render_time_series
)

logger = logging.getLogger("compphys.main")


def run_search_demo(n: int = 1_000_000):
    """
    Compare linear and binary search, and the Fibonacci variants.

    Args:
        n: Length of the sorted list searched
    """
    print("=" * 60)
    print("Getting Going - Search, Powers and Fibonacci")
    print("=" * 60)

    data = list(range(n))
    target = n - 1

    index, t_linear = time_function(linear_search, data, target, repeats=3)
    print(f"\nLinear search for {target} in {n} items: index {index}, {t_linear * 1e3:.2f} ms")
    index, t_binary = time_function(binary_search, data, target, repeats=3)
    print(f"Binary search for {target} in {n} items: index {index}, {t_binary * 1e6:.2f} µs")

    print("\nFast exponentiation:")
    for exponent in (10, 100, 1000):
        result = fast_power(3, exponent)
        print(f"  3^{exponent}: {count_multiplications(exponent):3d} multiplications, "
              f"{len(str(result))} digits")

    print("\nFibonacci:")
    for k in (10, 50, 90):
        print(f"  F({k}) = {fibonacci_iterative(k)}")
    _, t_memo = time_function(fibonacci_memo, 500, repeats=3)
    _, t_matrix = time_function(fibonacci_matrix, 500, repeats=3)
    print(f"  F(500): memoized {t_memo * 1e6:.1f} µs, matrix power {t_matrix * 1e6:.1f} µs")


def run_numpy_demo(n_points: int = 300):
    """
    Views, strides, broadcasting and a loop vs vectorized timing.

    Args:
        n_points: Number of points in the distance-matrix timing
    """
    print("=" * 60)
    print("NumPy - Array Mechanics")
    print("=" * 60)

    a = np.arange(12, dtype=np.float64).reshape(3, 4)
    for label, array in (("a", a), ("a.T", a.T), ("a[:, ::2]", a[:, ::2])):
        info = describe_array(array)
        print(f"  {label:10s} shape={info.shape} strides={info.strides} "
              f"C={info.c_contiguous} F={info.f_contiguous} owns={info.owns_data}")

    print("\nViews vs copies:")
    print(f"  a[1:]          view: {index_returns_view(a, (slice(1, None),))}")
    print(f"  a[[0, 2]]      view: {index_returns_view(a, [0, 2])}")
    print(f"  a[a > 5]       view: {index_returns_view(a, a > 5)}")
    print(f"  a.reshape(12)  view: {reshape_returns_view(a, (12,))}")
    print(f"  a.T.reshape(12) view: {reshape_returns_view(a.T, (12,))}")

    print(f"\nBroadcasting (3, 1) with (1, 4) gives {broadcast_result_shape((3, 1), (1, 4))}")

    timing = compare_loop_vectorized(n=n_points)
    print(f"\nDistance matrix for {timing.n} points:")
    print(f"  Python loops: {timing.loop_seconds * 1e3:.2f} ms")
    print(f"  Broadcasting: {timing.vectorized_seconds * 1e3:.2f} ms")
    print(f"  Speedup:      {timing.speedup:.0f}x (max difference {timing.max_difference:.1e})")


def run_numbers_demo():
    """Print floating point facts from the 'Numbers' chapter."""
    print("=" * 60)
    print("Numbers - Floating Point")
    print("=" * 60)

    for x in (1.0, 0.1, -2.5):
        print(f"  {x:>5}: {float_bits(x)}")

    print(f"\nMachine epsilon (float64): {machine_epsilon(np.float64):.3e}")
    print(f"Machine epsilon (float32): {machine_epsilon(np.float32):.3e}")

    a, b, c = 1.0, 1e8, 1.0
    naive = quadratic_roots_naive(a, b, c)
    stable = quadratic_roots_stable(a, b, c)
    print("\nRoots of x² + 1e8 x + 1:")
    print(f"  naive:  {naive[0]:.10e}, {naive[1]:.10e}")
    print(f"  stable: {stable[1]:.10e}, {stable[0]:.10e}")


def run_ode_demo(dt: float = 0.1, t_end: float = 20.0):
    """
    Integrate the harmonic oscillator with each method and compare energy.

    Args:
        dt: Step size
        t_end: Final time
    """
    print("=" * 60)
    print("ODEs - Euler, Backward Euler, Verlet, RK4")
    print("=" * 60)

    f = harmonic_oscillator(omega=1.0)
    y0 = [1.0, 0.0]
    span = (0.0, t_end)

    solutions = [
        euler(f, y0, span, dt),
        backward_euler(f, y0, span, dt),
        velocity_verlet(lambda x: -x, [1.0], [0.0], span, dt),
        rk4(f, y0, span, dt),
    ]

    print(f"\nHarmonic oscillator, dt = {dt}, t = {t_end}")
    for solution in solutions:
        energy = oscillator_energy(solution.y)
        print(f"  {solution.method:16s} E(0) = {energy[0]:.4f}  E(end) = {energy[-1]:.4f}")

    stiff = exponential_decay(rate=50.0)
    explicit = euler(stiff, 1.0, (0.0, 1.0), 0.05)
    implicit = backward_euler(stiff, 1.0, (0.0, 1.0), 0.05)
    print("\nStiff decay y' = -50 y with dt = 0.05:")
    print(f"  euler          y(1) = {explicit.final[0]:.3e}")
    print(f"  backward_euler y(1) = {implicit.final[0]:.3e}   (exact {np.exp(-50.0):.3e})")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    render_ode_solution(solutions, exact=lambda t: np.array([np.cos(t), -np.sin(t)]), ax=axes[0])
    axes[0].set_title("Position vs Time")
    render_phase_portrait(solutions, ax=axes[1])
    axes[1].set_title("Phase Portrait")
    plt.tight_layout()
    plt.savefig("ode_demo.png", dpi=150)
    print("\nPlot saved to ode_demo.png")
    plt.show()


def run_sampling_demo(n_samples: int = 100_000, seed: int = 0):
    """
    Box-Muller histogram and a Monte Carlo estimate of π.

    Args:
        n_samples: Number of samples
        seed: Random seed
    """
    print("=" * 60)
    print("Monte Carlo - Sampling")
    print("=" * 60)

    rng = np.random.default_rng(seed)
    z = box_muller(n_samples, rng)
    print(f"\nBox-Muller: mean = {z.mean():.4f}, variance = {z.var():.4f}")

    estimate, error = monte_carlo_pi(n_samples, rng)
    print(f"π ≈ {estimate:.5f} ± {error:.5f}")

    mean, err, _ = independent_trials(lambda g: monte_carlo_pi(n_samples // 10, g)[0], 10, seed)
    print(f"10 independent trials: π ≈ {mean:.5f} ± {err:.5f}")

    render_histogram_with_pdf(
        z, lambda x: np.exp(-x ** 2 / 2) / np.sqrt(2 * np.pi), title="Box-Muller Samples"
    )
    plt.savefig("sampling_demo.png", dpi=150)
    print("\nPlot saved to sampling_demo.png")
    plt.show()


def run_ising_demo(
    size: int = 32,
    temperature: float = 2.0,
    n_sweeps: int = 2000,
    algorithm: str = "metropolis",
    seed: Optional[int] = None
):
    """
    Equilibrate an Ising lattice and report averages.

    Args:
        size: Linear lattice size
        temperature: Temperature in units of J / k_B
        n_sweeps: Number of measured steps
        algorithm: Update rule
        seed: Random seed
    """
    if n_sweeps < 2:
        raise ValueError(f"Need at least 2 measured steps for error bars, got {n_sweeps}")

    print("=" * 60)
    print("Monte Carlo - 2D Ising Model")
    print("=" * 60)

    print(f"\nInitializing {size}x{size} lattice at T = {temperature} ({algorithm})...")
    sim = create_ising_simulation(
        size=size, temperature=temperature, algorithm=algorithm, seed=seed
    )

    t_start = time.time()
    sample = sim.run(n_sweeps, n_equilibration=n_sweeps // 5)
    t_end = time.time()
    print(f"Completed in {t_end - t_start:.2f} seconds")

    abs_m = sample.abs_magnetization
    phase_info = identify_phase(temperature, float(abs_m.mean()))
    tau = integrated_autocorrelation_time(abs_m)

    print("\nResults:")
    print(f"  <|m|>:           {abs_m.mean():.4f} ± {binning_error(abs_m):.4f}")
    print(f"  Onsager |m|:     {onsager_magnetization(temperature):.4f}")
    print(f"  <E>/N:           {sample.energy.mean() / sim.config.n_sites:.4f}")
    print(f"  tau_int(|m|):    {tau:.2f} steps")
    print(f"  Changed fraction:{sample.acceptance_rate:.3f}")
    print(f"  Phase:           {phase_info.phase.value}")

    fig = plt.figure(figsize=(14, 6))
    ax_lattice = fig.add_subplot(1, 2, 1)
    render_lattice(sim.state.lattice, ax=ax_lattice, title=f"T = {temperature}")
    render_time_series(
        sample.sweeps, sample.energy / sim.config.n_sites, sample.magnetization,
        axes=[fig.add_subplot(2, 2, 2), fig.add_subplot(2, 2, 4)]
    )
    plt.tight_layout()
    plt.savefig("ising_demo.png", dpi=150)
    print("\nPlot saved to ising_demo.png")
    plt.show()


def run_sweep_demo(size: int = 16, n_sweeps: int = 2000, algorithm: str = "metropolis",
                   seed: Optional[int] = None):
    """Sweep temperature through T_c and compare with Onsager."""
    print("=" * 60)
    print("Monte Carlo - Ising Temperature Sweep")
    print("=" * 60)

    temperatures = np.linspace(1.5, 3.5, 21)
    print(f"\nT_c = {CRITICAL_TEMPERATURE:.4f}")
    results = temperature_sweep(
        temperatures, size=size, algorithm=algorithm, n_sweeps=n_sweeps,
        n_equilibration=n_sweeps // 4, seed=seed
    )
    for r in results[::4]:
        print(f"  T = {r.temperature:.2f}: <|m|> = {r.abs_magnetization:.3f}, "
              f"C = {r.specific_heat:.3f}, chi = {r.susceptibility:.3f}")

    render_sweep(results)
    plt.savefig("ising_sweep.png", dpi=150)
    print("\nPlot saved to ising_sweep.png")
    plt.show()


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Part II Computational Physics - Example Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --search            Search and recursion timings
  python main.py --numpy             Views, strides and broadcasting
  python main.py --numbers           Floating point demonstrations
  python main.py --ode               Compare ODE integrators
  python main.py --sampling          Box-Muller and Monte Carlo π
  python main.py --ising -T 2.0      Run an Ising simulation
  python main.py --sweep             Ising temperature sweep
  python main.py --app               Launch Streamlit app
        """
    )

    parser.add_argument('--search', action='store_true',
                        help='Run search / Fibonacci demo')
    parser.add_argument('--numpy', action='store_true',
                        help='Run NumPy array mechanics demo')
    parser.add_argument('--numbers', action='store_true',
                        help='Run floating point demo')
    parser.add_argument('--ode', action='store_true',
                        help='Run ODE integrator comparison')
    parser.add_argument('--sampling', action='store_true',
                        help='Run sampling demo')
    parser.add_argument('--ising', action='store_true',
                        help='Run an Ising model simulation')
    parser.add_argument('--sweep', action='store_true',
                        help='Run an Ising temperature sweep')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--size', '-L', type=int, default=32,
                        help='Lattice size (default: 32)')
    parser.add_argument('--temperature', '-T', type=float, default=2.0,
                        help='Temperature (default: 2.0)')
    parser.add_argument('--sweeps', '-s', type=int, default=2000,
                        help='Number of Monte Carlo steps (default: 2000)')
    parser.add_argument('--algorithm', '-a', choices=ALGORITHMS, default='metropolis',
                        help='Ising update rule (default: metropolis)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if (args.ising or args.sweep) and args.sweeps < 2:
        parser.error(f"--sweeps must be at least 2, got {args.sweeps}")

    if args.search:
        run_search_demo()
    elif args.numpy:
        run_numpy_demo()
    elif args.numbers:
        run_numbers_demo()
    elif args.ode:
        run_ode_demo()
    elif args.sampling:
        run_sampling_demo(seed=args.seed or 0)
    elif args.ising:
        run_ising_demo(size=args.size, temperature=args.temperature,
                       n_sweeps=args.sweeps, algorithm=args.algorithm, seed=args.seed)
    elif args.sweep:
        run_sweep_demo(size=min(args.size, 16), n_sweeps=args.sweeps,
                       algorithm=args.algorithm, seed=args.seed)
    elif args.app:
        import subprocess
        logger.info("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --search, --numpy, --numbers, --ode, "
              "--sampling, --ising, --sweep or --app")


if __name__ == "__main__":
    main()
