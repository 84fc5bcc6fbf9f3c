"""
Cardiovascular risk estimation.
"""
__version__ = "0.1.0"
