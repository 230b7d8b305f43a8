"""
CLI entry points for lighthouse-sim.

Contains the main executable scripts:
- simulate: Print or play the compiled timeline of a light code
"""

from .simulate import main as simulate_main

__all__ = [
    "simulate_main",
]
