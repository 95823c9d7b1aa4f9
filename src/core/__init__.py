"""
Core domain models and mathematical primitives.

This module contains the quarter-rounded series generator and the two
special-value selectors, independent of any runner or output format.
"""
