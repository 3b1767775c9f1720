"""
Starfield command-line interface.
"""

from starfield import __version__


__all__ = ["__version__"]
