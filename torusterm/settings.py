# torusterm global settings

# Torus geometry
MAJOR_RADIUS = 1.2   # ring radius R
TUBE_RADIUS = 0.3    # tube radius r, also the march step

# Camera sits on -X and looks down +X
CAMERA_ORIGIN = (-2.5, 0.0, 0.0)
PIXEL_ASPECT = 11.0 / 24.0  # terminal cells are taller than wide

# Single directional light, normalized at use
LIGHT_DIRECTION = (-1.0, -1.0, -1.0)

# Spin of the torus axis, degrees per frame
ROTATION_STEP_DEG = 0.6
BASE_AXIS = (1.0, 1.0, 1.0)

# Finite-difference step for surface normals
NORMAL_EPS = 0.005

# Shading -> glyph / color
GLYPH_SCALE = 20.0
COLOR_SCALE = 10.0
COLOR_FLOOR = 0.0

# Animation
FRAME_COUNT = 20_000
FRAME_DELAY = 0.016  # seconds

# Terminal size fallback when the reported size is too small
MIN_WIDTH = 20
MIN_HEIGHT = 10
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

# Renderer switches
RENDER_MODE = "color"    # "glyph" or "color"
REDRAW = "full"          # "full" or "inplace"
RAMP = "long"            # "long" or "short"
PALETTE = "heat"         # "heat" or "ocean"
