"""AI automation ROI calculator service."""

__version__ = "1.0.0"
