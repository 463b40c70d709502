#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Command Line Interface Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import sys

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

import main


@pytest.fixture(autouse=True)
def no_windows(monkeypatch, tmp_path):
    """Keep saved figures out of the source tree and skip plt.show."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(plt, "show", lambda: None)
    yield
    plt.close("all")


class TestIsingDemo:
    """Tests for the Ising command."""

    def test_short_run(self, capsys):
        """Ten steps are enough for the report and the figure."""
        main.run_ising_demo(size=8, temperature=2.0, n_sweeps=10, seed=0)
        out = capsys.readouterr().out
        assert "<|m|>" in out
        assert "Plot saved to ising_demo.png" in out

    def test_single_step_rejected(self):
        """One measured step is refused before simulating."""
        with pytest.raises(ValueError):
            main.run_ising_demo(size=8, n_sweeps=1, seed=0)

    def test_cli_rejects_single_sweep(self, monkeypatch):
        """--sweeps below 2 is an argument error."""
        monkeypatch.setattr(sys, "argv", ["main.py", "--ising", "--sweeps", "1"])
        with pytest.raises(SystemExit):
            main.main()


class TestNumpyDemo:
    """Tests for the NumPy command."""

    def test_numpy_flag(self, monkeypatch):
        """--numpy dispatches to the NumPy demo."""
        calls = []
        monkeypatch.setattr(main, "run_numpy_demo", lambda: calls.append("numpy"))
        monkeypatch.setattr(sys, "argv", ["main.py", "--numpy"])
        main.main()
        assert calls == ["numpy"]

    def test_report(self, capsys):
        """The report covers strides, views and the speedup."""
        main.run_numpy_demo(n_points=20)
        out = capsys.readouterr().out
        assert "strides=(32, 8)" in out
        assert "view: True" in out
        assert "view: False" in out
        assert "Speedup" in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
