"""Physical constants and reference values (SI units)."""

G = 6.67430e-11  # Gravitational constant (m^3 kg^-1 s^-2)

SUN_MASS = 1.989e30
EARTH_MASS = 5.972e24
JUPITER_MASS = 1.898e27

EARTH_ORBIT_RADIUS = 1.496e11  # 1 AU
JUPITER_ORBIT_RADIUS = 7.785e11
