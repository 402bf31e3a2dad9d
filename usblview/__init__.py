"""Decode USBL positioning recordings, plot tracks and stream trajectories over UDP."""

__version__ = "0.1.0"

__all__ = ["__version__"]