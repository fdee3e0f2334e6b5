"""
Back end for a real-estate brokerage website.
"""

__version__ = "1.0.0"
