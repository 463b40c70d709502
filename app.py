#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ising Model Explorer - Interactive Streamlit Application
================================================================================

Project:        Part II Computational Physics
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Browser companion to the Monte Carlo chapter. Users can:
- Pick an update rule (Metropolis, heat bath, checkerboard, Wolff)
- Change the temperature while the lattice evolves
- Watch energy and magnetization histories
- Compare with Onsager's exact magnetization
"""

import time

import matplotlib.pyplot as plt
import numpy as np
import streamlit as st

from compphys.ising import ALGORITHMS, IsingSimulation, IsingConfig
from compphys.logging_config import setup_logging
from compphys.observables import (
    CRITICAL_TEMPERATURE, Phase, identify_phase, onsager_magnetization
)
from compphys.visualization import VisualizationConfig, render_lattice_png


# Page configuration
st.set_page_config(
    page_title="Ising Model Explorer",
    page_icon="🧲",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
.stApp {
    background-color: #0e1117;
}
.phase-indicator {
    font-size: 24px;
    font-weight: bold;
    padding: 10px;
    border-radius: 8px;
    text-align: center;
    margin: 5px 0;
}
.ordered-phase { background-color: #1e3a8a; color: white; }
.critical-phase { background-color: #7c3aed; color: white; }
.disordered-phase { background-color: #b45309; color: white; }
</style>
""", unsafe_allow_html=True)

MAX_HISTORY = 500


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'simulation' not in st.session_state:
        st.session_state.simulation = None
    if 'running' not in st.session_state:
        st.session_state.running = False
    if 'history' not in st.session_state:
        st.session_state.history = {'sweep': [], 'energy': [], 'magnetization': []}
    if 'vis_config' not in st.session_state:
        st.session_state.vis_config = VisualizationConfig(figsize=(5, 5))


def create_simulation(
    size: int,
    temperature: float,
    algorithm: str,
    initial_state: str,
    seed: int
) -> IsingSimulation:
    """Create a new simulation with specified parameters."""
    config = IsingConfig(
        size=size,
        temperature=temperature,
        algorithm=algorithm,
        initial_state=initial_state,
        seed=seed if seed >= 0 else None
    )
    sim = IsingSimulation(config)
    sim.initialize()
    return sim


def render_sidebar():
    """Render the sidebar with controls."""
    st.sidebar.title("🧲 Ising Model Explorer")

    st.sidebar.markdown("""
    ---
    The 2D Ising model on a periodic square lattice:

    $$E = -J \\sum_{\\langle ij \\rangle} s_i s_j, \\qquad s_i = \\pm 1$$

    Below $T_c = 2/\\ln(1+\\sqrt{2}) \\approx 2.269$ the spins order.

    ---
    """)

    st.sidebar.subheader("⚙️ Simulation Setup")

    size = st.sidebar.slider(
        "Lattice Size L",
        min_value=8, max_value=128, value=64, step=8,
        help="Even sizes only, so the checkerboard update is always available"
    )

    algorithm = st.sidebar.selectbox(
        "Update Rule",
        list(ALGORITHMS),
        help="Metropolis and heat bath update single sites; Wolff flips clusters"
    )

    initial_state = st.sidebar.selectbox(
        "Initial State",
        ["random", "up", "down"]
    )

    seed = st.sidebar.number_input("Seed (-1 for random)", value=-1, step=1)

    temperature = st.sidebar.slider(
        "Temperature",
        min_value=0.5, max_value=5.0, value=2.0, step=0.05,
        help="In units of J / k_B"
    )

    if st.sidebar.button("🚀 Initialize Simulation", use_container_width=True):
        st.session_state.simulation = create_simulation(
            size, temperature, algorithm, initial_state, int(seed)
        )
        st.session_state.history = {'sweep': [], 'energy': [], 'magnetization': []}
        st.session_state.running = False
        st.rerun()

    # Temperature can change mid-run; the chain simply re-equilibrates
    sim = st.session_state.simulation
    if sim is not None:
        sim.config.temperature = temperature

    st.sidebar.markdown("---")
    st.sidebar.subheader("🎨 Visualization")
    st.session_state.vis_config.show_grid = st.sidebar.checkbox(
        "Show Grid", value=False, help="Outline individual sites (small lattices)"
    )


def run_simulation_steps(n_steps: int = 5):
    """Run n steps and append to the history."""
    sim = st.session_state.simulation
    if sim is None:
        return

    history = st.session_state.history
    for _ in range(n_steps):
        state = sim.step()
        history['sweep'].append(state.sweep)
        history['energy'].append(state.energy_per_site)
        history['magnetization'].append(state.magnetization)

    if len(history['sweep']) > MAX_HISTORY:
        for key in history:
            history[key] = history[key][-MAX_HISTORY:]


def render_phase_indicator(phase: Phase):
    """Render a colored phase indicator."""
    phase_names = {
        Phase.ORDERED: "🔵 ORDERED",
        Phase.CRITICAL: "🟣 CRITICAL",
        Phase.DISORDERED: "🟠 DISORDERED",
    }
    st.markdown(f"""
    <div class="phase-indicator {phase.value}-phase">
        {phase_names[phase]}
    </div>
    """, unsafe_allow_html=True)


def _dark_axes(ax):
    ax.set_facecolor('#1a1a2e')
    ax.figure.patch.set_facecolor('#1a1a2e')
    ax.tick_params(colors='white')
    ax.xaxis.label.set_color('white')
    ax.yaxis.label.set_color('white')
    for spine in ax.spines.values():
        spine.set_color('white')


def render_main_content():
    """Render the main simulation content."""
    sim = st.session_state.simulation

    if sim is None:
        st.title("🧲 Ising Model Explorer")
        st.markdown("""
        ## Markov chain Monte Carlo for the 2D Ising model

        ### 🎯 Update rules:
        - **Metropolis**: propose a flip, accept with probability min(1, e^(-βΔE))
        - **Heat bath**: redraw a spin from its conditional distribution
        - **Checkerboard**: heat bath on a whole sublattice at once
        - **Wolff**: grow a cluster of aligned spins and flip it

        Near $T_c$ the single-site rules slow down dramatically while the
        cluster update keeps decorrelating quickly.

        ---
        *👈 Use the sidebar to begin!*
        """)
        return

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Spin Lattice")

        btn_col1, btn_col2, btn_col3, btn_col4 = st.columns(4)
        with btn_col1:
            run_label = "▶️ Run" if not st.session_state.running else "⏸️ Pause"
            if st.button(run_label, use_container_width=True, key="run_pause_btn"):
                st.session_state.running = not st.session_state.running
                st.rerun()
        with btn_col2:
            if st.button("⏭️ Step (x10)", use_container_width=True):
                run_simulation_steps(10)
        with btn_col3:
            if st.button("🔄 Reset", use_container_width=True):
                st.session_state.simulation = None
                st.session_state.running = False
                st.rerun()
        with btn_col4:
            st.metric("Steps", sim.state.sweep)

        if st.session_state.running:
            run_simulation_steps(5)

        st.image(render_lattice_png(sim.state.lattice, st.session_state.vis_config),
                 use_container_width=True)

    with col2:
        st.subheader("Analysis")
        state = sim.state
        temperature = sim.config.temperature
        abs_m = abs(state.magnetization)

        st.markdown("### Current Phase")
        render_phase_indicator(identify_phase(temperature, abs_m).phase)

        met1, met2 = st.columns(2)
        with met1:
            st.metric("|m|", f"{abs_m:.3f}")
        with met2:
            st.metric("Onsager |m|", f"{onsager_magnetization(temperature):.3f}")
        met3, met4 = st.columns(2)
        with met3:
            st.metric("E / N", f"{state.energy_per_site:.3f}")
        with met4:
            st.metric("T / T_c", f"{temperature / CRITICAL_TEMPERATURE:.3f}")

        if sim.config.algorithm == "wolff":
            st.metric("Last cluster", f"{state.last_changed}")
        else:
            st.metric("Changed fraction", f"{state.last_changed / sim.config.n_sites:.3f}")

        history = st.session_state.history
        if len(history['sweep']) > 1:
            st.markdown("### Magnetization History")
            fig, ax = plt.subplots(figsize=(6, 3))
            ax.plot(history['sweep'], history['magnetization'], 'c-', linewidth=1)
            ax.axhline(y=onsager_magnetization(temperature), color='white',
                       linestyle='--', alpha=0.5, label='Onsager')
            ax.axhline(y=-onsager_magnetization(temperature), color='white',
                       linestyle='--', alpha=0.5)
            ax.set_ylim(-1.05, 1.05)
            ax.set_xlabel('Step')
            ax.set_ylabel('m')
            ax.legend(fontsize=8)
            _dark_axes(ax)
            plt.tight_layout()
            st.pyplot(fig)
            plt.close(fig)

            st.markdown("### Energy History")
            fig, ax = plt.subplots(figsize=(6, 3))
            ax.plot(history['sweep'], history['energy'], 'r-', linewidth=1)
            ax.set_xlabel('Step')
            ax.set_ylabel('E / N')
            _dark_axes(ax)
            plt.tight_layout()
            st.pyplot(fig)
            plt.close(fig)

            st.caption(f"Mean |m| over window: {np.mean(np.abs(history['magnetization'])):.3f}")

    # Auto-refresh when running
    if st.session_state.running:
        time.sleep(0.05)
        st.rerun()


def main():
    """Main application entry point."""
    setup_logging()
    initialize_session_state()
    render_sidebar()
    render_main_content()


if __name__ == "__main__":
    main()
