"""Stats calculator module."""

from .calculator import compute_stats, extract_resource_type, is_empty, mean

__all__ = ["compute_stats", "extract_resource_type", "is_empty", "mean"]
