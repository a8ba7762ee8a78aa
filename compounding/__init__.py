"""Future value projections for a compounding investment with recurring contributions."""

__version__ = "0.1.0"
