"""
Compute utilities shared by backends.
"""

from pylinreg.core.compute.timing import Timer

__all__ = ["Timer"]
