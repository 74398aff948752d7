"""QR code version tables and selection of the smallest version for a payload."""

__version__ = "0.1.0"
__all__ = ["version", "capacity"]