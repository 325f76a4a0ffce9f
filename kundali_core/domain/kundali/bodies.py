SUN = "Sun"
MOON = "Moon"
MERCURY = "Mercury"
VENUS = "Venus"
MARS = "Mars"
JUPITER = "Jupiter"
SATURN = "Saturn"
RAHU = "Rahu"
KETU = "Ketu"

# Bodies resolved by the position strategies
CLASSICAL_BODIES = (SUN, MOON, MERCURY, VENUS, MARS, JUPITER, SATURN)

# Computed lunar nodes
NODES = (RAHU, KETU)

ALL_BODIES = CLASSICAL_BODIES + NODES

# Never flagged retrograde
LUMINARIES = frozenset({SUN, MOON})
