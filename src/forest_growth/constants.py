"""Rule constants for the forest growth simulation.

Maximum ages are counted in ticks. A freshly created cell starts at its
kind's maximum and loses one tick of age per simulation step.
"""

# ============================================================================
# MAXIMUM AGES
# ============================================================================

SLOW_MAX: int = 11                                  # Slow-growing tree lifespan
FAST_MAX: int = 3                                   # Fast-growing tree lifespan
BURNING_MAX: int = 7                                # Fresh fire burn time
BURNED_MAX: int = 1                                 # Ash lasts a single tick

# ============================================================================
# REPRODUCTION
# ============================================================================

SLOW_RADIUS: int = 6
SLOW_ATTEMPTS: int = 1

FAST_RADIUS: int = 10
FAST_ATTEMPTS: int = 3

FIRE_RADIUS: int = 2
FIRE_ATTEMPTS: int = 6

# ============================================================================
# TREE FALL AND PIONEER SEEDLINGS
# ============================================================================

TREE_FALL_LENGTH: int = 6                           # Cells covered by a fallen trunk
TREE_FALL_ROLL: int = 10                            # Draws are in [0, TREE_FALL_ROLL)
TREE_FALL_SLOW_BELOW: int = 5                       # roll < 5 -> slow-growing seedling
TREE_FALL_FAST_ABOVE: int = 8                       # roll > 8 -> fast-growing seedling

PIONEER_ODDS: int = 10                              # 1 in 10 ash cells reseed
