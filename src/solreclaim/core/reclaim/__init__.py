"""Reclaim estimation module."""

from solreclaim.core.reclaim.estimator import estimate

__all__ = ["estimate"]
