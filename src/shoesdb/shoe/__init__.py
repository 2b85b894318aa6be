"""
Shoe

This module provides data access for the shoes table.
"""

from shoesdb.shoe.repository import ShoeRepository

__all__ = ["ShoeRepository"]
