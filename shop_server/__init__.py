"""Shop API server: static product catalog and payment echo endpoints."""

__version__ = "0.1.0"
