"""
Starfield API - Computation Layer

This package contains the sky computations, separated from CLI presentation
concerns.

The API is organized into logical subpackages:
- math: Angles, intervals and polynomials
- astronomy: Epochs, sidereal time and celestial objects
- coordinates: Coordinate systems, conversions and the stereographic projection
- ephemeris: Sun, Moon and planet models
- catalogs: Star, asterism and satellite catalogues and their loaders
- core: Constants, enums, exceptions and shared helpers

The observed_sky and config modules combine them.
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__: list[str] = [
    # Package is organized into subpackages - import directly from them:
    # from starfield.api.coordinates import ...
    # from starfield.api.ephemeris import ...
    # etc.
]
