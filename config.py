"""
Configuration file for the stipple edge-extraction system.

Contains both FULL and PREVIEW parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True for a quick low-density run (fewer points, fewer relax steps)
PREVIEW_MODE = False


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_IMAGE_PATTERN = "input/*.jpg"
OUTPUT_FOLDER = "output"


# ===============================================================
# FULL-MODE PARAMETERS
# ===============================================================

FULL = {
    "POINT_COUNT": 6000,
    "STIPPLE_ITERATIONS": 30,
}


# ===============================================================
# PREVIEW-MODE PARAMETERS
# ===============================================================

PREVIEW = {
    "POINT_COUNT": 1500,
    "STIPPLE_ITERATIONS": 8,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

HIGH_PERCENTILE = 90               # strong-edge contrast cutoff
LOW_RATIO = 0.5                    # low = LOW_RATIO * high
CONNECT_PERCENTILE = 50            # median edge length
CONNECT_SCALE = 0.75               # connect = CONNECT_SCALE * median length

SMOOTH_ITERATIONS = 2              # corner-cutting passes per chain

RELAX_RATE = 0.1                   # lerp toward weighted centroid
RANDOM_SEED = 0


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

COLOR_POINT = (0, 0, 0)            # stipple dots - black
COLOR_KEPT = (0, 0, 255)           # kept edges - red
COLOR_CHAIN = (0, 0, 0)            # smoothed chains - black
COLOR_VORONOI = (200, 200, 200)    # cell outlines - light grey
COLOR_BACKGROUND = (255, 255, 255)


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by detectors and samplers so they only import one dictionary.
    """

    base = {
        "HIGH_PERCENTILE": HIGH_PERCENTILE,
        "LOW_RATIO": LOW_RATIO,
        "CONNECT_PERCENTILE": CONNECT_PERCENTILE,
        "CONNECT_SCALE": CONNECT_SCALE,
        "SMOOTH_ITERATIONS": SMOOTH_ITERATIONS,
        "RELAX_RATE": RELAX_RATE,
        "RANDOM_SEED": RANDOM_SEED,
    }

    # Merge in full or preview mode values
    if PREVIEW_MODE:
        base.update(PREVIEW)
    else:
        base.update(FULL)

    return base
