"""Parameters, field layout, grid, initial winds and state diagnostics for a compressible LES model."""

__version__ = "0.1.0"

__all__ = [
    "fields",
    "grid",
    "params",
    "report",
    "statelog",
    "winds",
]