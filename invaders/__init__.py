"""
Invaders – fixed-screen shoot-'em-up simulation.

The simulation core (``invaders.game`` and ``invaders.models``) is
presentation-agnostic; ``main.py`` hosts it in a pygame window.
"""

__version__ = "0.1.0"
