"""Entropy scoring, colour gradients, a minimap model, function lists and feature management for binary analysis."""

__version__ = "1.0.0"
__all__ = ["color", "entropy", "minimap", "registry", "plugin", "features", "functions"]