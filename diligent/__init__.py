"""Reproducible data generation, SQL statement building and metrics for database benchmarking."""

__version__ = "0.1.0"