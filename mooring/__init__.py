"""
mooring - Mooring-line catenary engine.

Validates line inputs, derives catenary geometry and safety factors,
and samples the line profile for plotting.
"""

__version__ = "1.0.0"
