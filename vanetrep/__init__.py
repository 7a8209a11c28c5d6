"""Reputation-based trust, message validation and decision metrics for vehicular networks."""

__version__ = "0.1.0"
__all__ = ["app", "fields", "message", "metrics", "reputation"]