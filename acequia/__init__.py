"""Hour-by-hour water management simulation of regions joined by canals."""

__version__ = "0.1.0"