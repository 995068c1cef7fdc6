"""Solar geometry, irradiance and the position calculator."""
