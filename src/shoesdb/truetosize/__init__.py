"""
True-to-size

This module provides data access for true-to-size ratings.
"""

from shoesdb.truetosize.repository import TrueToSizeRepository

__all__ = ["TrueToSizeRepository"]
