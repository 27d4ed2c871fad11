"""Numerical tools: line fitting, polynomial roots, float inspection, CPU timers and small demos."""

__version__ = "0.1.0"