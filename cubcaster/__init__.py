"""Checking of .cub scene files and a grid ray-casting viewer."""

__version__ = "0.1.0"