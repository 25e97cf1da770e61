"""
Configuration file for the line & quadrilateral analyzer.

Contains the geometry tolerance, the canvas/raster parameters and the
data-file location used by the menu program.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

LINES_DATA_PATH = "linesData.txt"

# numbers per line set: 4 lines x (a, b, c)
LINES_PER_SET = 4
COEFFICIENTS_PER_LINE = 3


# ---------------------------------------------------------------
# GEOMETRY TOLERANCE
# ---------------------------------------------------------------

EPSILON = 1e-9


# ===============================================================
# CANVAS PARAMETERS
# ===============================================================

CANVAS_WIDTH = 70
CANVAS_HEIGHT = 30

# (x_min, x_max, y_min, y_max)
DEFAULT_VIEWPORT = (-10.0, 10.0, -10.0, 10.0)

LINE_STEP = 0.3                 # step along the independent axis for infinite lines
SEGMENT_MIN_STEPS = 50
SEGMENT_STEP_FACTOR = 3         # steps per world unit of the longer delta

# upper bound on samples per grid cell, so huge viewports stay cheap
LINE_SAMPLES_PER_CELL = 4
SEGMENT_SAMPLES_PER_CELL = 4

AUTOSCALE_PADDING = 0.15        # fraction of the span added on each side
DEFAULT_SPAN = 20.0             # used when all points share one coordinate


# ---------------------------------------------------------------
# GLYPHS
# ---------------------------------------------------------------

GLYPHS = {
    "BLANK": " ",
    "AXIS_X": "-",
    "AXIS_Y": "|",
    "ORIGIN": "+",
    "INTERSECTION": "X",
    "OUTLINE": "#",
    "BORDER_CORNER": "+",
    "BORDER_H": "-",
    "BORDER_V": "|",
}

# one glyph per input line, in input order
LINE_GLYPHS = ("1", "2", "3", "4")


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params(**overrides):
    """
    Returns the active set of parameters as one dictionary.

    Keyword overrides replace single entries, e.g. a smaller canvas for tests:
        get_active_params(CANVAS_WIDTH=20, CANVAS_HEIGHT=10)
    """

    base = {
        "EPSILON": EPSILON,
        "CANVAS_WIDTH": CANVAS_WIDTH,
        "CANVAS_HEIGHT": CANVAS_HEIGHT,
        "DEFAULT_VIEWPORT": DEFAULT_VIEWPORT,
        "LINE_STEP": LINE_STEP,
        "SEGMENT_MIN_STEPS": SEGMENT_MIN_STEPS,
        "SEGMENT_STEP_FACTOR": SEGMENT_STEP_FACTOR,
        "LINE_SAMPLES_PER_CELL": LINE_SAMPLES_PER_CELL,
        "SEGMENT_SAMPLES_PER_CELL": SEGMENT_SAMPLES_PER_CELL,
        "AUTOSCALE_PADDING": AUTOSCALE_PADDING,
        "DEFAULT_SPAN": DEFAULT_SPAN,
        "GLYPHS": dict(GLYPHS),
        "LINE_GLYPHS": LINE_GLYPHS,
    }

    unknown = set(overrides) - set(base)
    if unknown:
        raise KeyError(f"Unknown parameter(s): {sorted(unknown)}")

    base.update(overrides)
    return base
