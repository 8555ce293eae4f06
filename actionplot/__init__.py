"""Plot points from simulation action timeline CSV logs."""

__version__ = "0.1.0"