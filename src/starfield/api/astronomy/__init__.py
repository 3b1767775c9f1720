"""Time scales and the celestial objects observed in the sky."""
