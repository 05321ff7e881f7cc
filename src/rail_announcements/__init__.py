"""Rail station announcement script builder."""

__version__ = "0.1.0"
