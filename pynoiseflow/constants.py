"""
Default parameters for PyNoiseFlow renderers and CLI commands.

Lengths are in pixels. Noise scales divide pixel coordinates before sampling.
"""

# Canvas
WIDTH = 800
HEIGHT = 600

# Flow field
FLOW_NOISE = "simplex"
FLOW_SCALE = 100.0
FLOW_BIAS_X = 0.4
FLOW_BIAS_Y = 0.3
FLOW_NORMALIZE = True

# Flow tails
TAIL_STRIDE = 32.0
TAIL_LENGTH = 16.0
TAIL_WIDTH = 1.0

# Flow walks
WALK_COUNT = 2000
WALK_STEPS = 1000
WALK_STEP_SIZE = 4.0
WALK_WIDTH = 2.0
WALK_SAMPLES_PER_SEGMENT = 4

# Walk coloring: color noise scale is FLOW_SCALE * COLOR_SCALE,
# palette index is floor(noise * COLOR_RANGE)
COLOR_SCALE = 10.0
COLOR_RANGE = 48.0
WALK_PALETTE_SIZE = 10
WALK_GRADIENT = (
    (0.00, 0.05, 0.20),
    (0.70, 0.10, 0.20),
    (0.95, 0.90, 0.30),
)

# Triangles
TRIANGLE_SIDE = 32.0
TRIS_NOISE = "perlin"
TRIS_SCALE = 200.0

# Noise preview
PREVIEW_NOISE = "simplex"
PREVIEW_SCALE = 100.0

# Featherweight
FEATHER_SIZE = 1024
FEATHER_SCALE = 10.0
FEATHER_TAIL_FREQ = 20
FEATHER_TAIL_LENGTH = 50
FEATHER_WALK_COUNT = 1000
FEATHER_WALK_LENGTH = 1000
