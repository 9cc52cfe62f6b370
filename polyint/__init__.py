"""
Quartic polynomial definite integrals: fixed-width ring backend plus float oracles.
"""

__version__ = "0.1.0"
