# Board geometry
BOARD_SIZE = 9
# Shortest run of same-colored balls that gets cleared and scored.
MIN_RUN_LENGTH = 5

# Spawn cycle
PREVIEW_SIZE = 3  # balls placed per forced spawn and shown as "next" colors

# Scoring
POINTS_PER_BALL = 2

# Leader board
LEADER_BOARD_SIZE = 10
