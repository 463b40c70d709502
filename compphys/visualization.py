#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Plotting Helpers
================================================================================

Project:        Part II Computational Physics
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Matplotlib figures used by the command line runner and the Streamlit app:
- Spin lattice snapshots
- Energy / magnetization time series
- ODE trajectories and phase portraits
- Sample histograms against their target density
- Temperature sweeps against Onsager's exact result
"""

import io
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from .observables import CRITICAL_TEMPERATURE, SweepResult, onsager_magnetization
from .ode import ODESolution


SPIN_CMAP = ListedColormap(["#1e3a8a", "#fbbf24"])   # Down: navy, up: amber


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    figsize: Tuple[int, int] = (6, 6)
    background_color: str = "#1a1a2e"
    show_grid: bool = False
    dpi: int = 100


def render_lattice(
    lattice: np.ndarray,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None,
    title: Optional[str] = None
) -> plt.Figure:
    """
    Draw a spin lattice, up spins light and down spins dark.

    Args:
        lattice: L x L array of ±1
        config: Visualization configuration
        ax: Optional existing axes to draw on
        title: Optional axes title

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    if ax is None:
        fig = plt.figure(figsize=config.figsize)
        ax = fig.add_axes([0, 0, 1, 1])
    else:
        fig = ax.figure

    ax.clear()
    fig.patch.set_facecolor(config.background_color)
    ax.imshow(lattice, cmap=SPIN_CMAP, vmin=-1, vmax=1, interpolation="nearest")

    if config.show_grid:
        L = lattice.shape[0]
        ax.set_xticks(np.arange(-0.5, L, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, L, 1), minor=True)
        ax.grid(which="minor", color="white", linewidth=0.3, alpha=0.4)

    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title, color="white")

    return fig


def render_lattice_png(
    lattice: np.ndarray,
    config: Optional[VisualizationConfig] = None
) -> bytes:
    """
    Render a lattice and return PNG bytes for Streamlit.
    """
    if config is None:
        config = VisualizationConfig()
    fig = render_lattice(lattice, config)

    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=config.dpi,
                facecolor=fig.get_facecolor(), edgecolor="none",
                pad_inches=0, bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


def render_time_series(
    sweeps: np.ndarray,
    energy_per_site: np.ndarray,
    magnetization: np.ndarray,
    axes: Optional[Sequence[plt.Axes]] = None
) -> plt.Figure:
    """
    Energy per site and magnetization against Monte Carlo time.
    """
    if axes is None:
        fig, axes = plt.subplots(2, 1, figsize=(10, 6), sharex=True)
    else:
        fig = axes[0].figure

    ax_e, ax_m = axes
    ax_e.clear()
    ax_e.plot(sweeps, energy_per_site, "r-", linewidth=1.0)
    ax_e.set_ylabel("E / N")
    ax_e.set_title("Energy and Magnetization vs Sweeps")
    ax_e.grid(True, alpha=0.3)

    ax_m.clear()
    ax_m.plot(sweeps, magnetization, "b-", linewidth=1.0)
    ax_m.axhline(0.0, color="k", linewidth=0.5)
    ax_m.set_ylim(-1.05, 1.05)
    ax_m.set_xlabel("Sweep")
    ax_m.set_ylabel("m")
    ax_m.grid(True, alpha=0.3)

    return fig


def render_ode_solution(
    solutions: List[ODESolution],
    exact: Optional[Callable[[np.ndarray], np.ndarray]] = None,
    component: int = 0,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Overlay one component of several integrator trajectories.

    Args:
        solutions: Trajectories to compare
        exact: Optional exact solution evaluated on the first time grid
        component: Index of the state component to plot
        ax: Optional existing axes
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    else:
        fig = ax.figure

    ax.clear()
    for solution in solutions:
        ax.plot(solution.t, solution.y[:, component], label=solution.method, linewidth=1.5)

    if exact is not None and solutions:
        t = solutions[0].t
        ax.plot(t, np.atleast_2d(exact(t))[component], "k--", label="exact", linewidth=1.0)

    ax.set_xlabel("t")
    ax.set_ylabel(f"y[{component}]")
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)

    return fig


def render_phase_portrait(
    solutions: List[ODESolution],
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """Plot (x, v) trajectories; closed orbits mean energy is conserved."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(6, 6))
    else:
        fig = ax.figure

    ax.clear()
    for solution in solutions:
        ax.plot(solution.y[:, 0], solution.y[:, 1], label=solution.method, linewidth=1.0)
    ax.set_xlabel("x")
    ax.set_ylabel("v")
    ax.set_aspect("equal", adjustable="datalim")
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)

    return fig


def render_histogram_with_pdf(
    samples: np.ndarray,
    pdf: Callable[[np.ndarray], np.ndarray],
    bins: int = 50,
    ax: Optional[plt.Axes] = None,
    title: str = "Samples"
) -> plt.Figure:
    """Normalized histogram of samples with the target density drawn on top."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 5))
    else:
        fig = ax.figure

    ax.clear()
    ax.hist(samples, bins=bins, density=True, alpha=0.7, color="blue", label="samples")
    x = np.linspace(np.min(samples), np.max(samples), 400)
    ax.plot(x, pdf(x), "r-", linewidth=2, label="target")
    ax.set_xlabel("x")
    ax.set_ylabel("Probability Density")
    ax.set_title(title)
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)

    return fig


def render_sweep(
    results: List[SweepResult],
    axes: Optional[Sequence[plt.Axes]] = None
) -> plt.Figure:
    """
    |m|, specific heat and susceptibility against temperature.

    The exact infinite-lattice magnetization and T_c are drawn for
    reference.
    """
    if axes is None:
        fig, axes = plt.subplots(1, 3, figsize=(15, 4.5))
    else:
        fig = axes[0].figure

    T = np.array([r.temperature for r in results])

    ax = axes[0]
    ax.clear()
    ax.errorbar(T, [r.abs_magnetization for r in results],
                yerr=[r.abs_magnetization_error for r in results],
                fmt="b.", capsize=2, label="Monte Carlo")
    if len(T) > 0:
        T_fine = np.linspace(T.min(), T.max(), 300)
        ax.plot(T_fine, [onsager_magnetization(t) for t in T_fine], "k-", label="Onsager")
    ax.set_ylabel("⟨|m|⟩")
    ax.legend(loc="best")

    axes[1].clear()
    axes[1].plot(T, [r.specific_heat for r in results], "r.-")
    axes[1].set_ylabel("C / N")

    axes[2].clear()
    axes[2].plot(T, [r.susceptibility for r in results], "g.-")
    axes[2].set_ylabel("χ / N")

    for ax in axes:
        ax.axvline(CRITICAL_TEMPERATURE, color="gray", linestyle="--", alpha=0.6)
        ax.set_xlabel("Temperature")
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig
