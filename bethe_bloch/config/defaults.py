"""
Default Configuration Constants for the Bethe-Bloch chart viewer

This module contains ALL default values used throughout the viewer.
This is the Single Source of Truth (SSOT) for default configuration;
defaults.yaml mirrors these values for users who want to override them.

IMPORTANT Import Policies:
    1. DO NOT use: from bethe_bloch.config.defaults import *
       This causes namespace pollution and makes tracking difficult.

    2. DO use explicit imports:
       from bethe_bloch.config.defaults import DEFAULT_A, DEFAULT_Z

    3. DO NOT define defaults elsewhere. All defaults must be in this file.
"""

import math

# =============================================================================
# Material Defaults
# =============================================================================

# Mass number A [u]
DEFAULT_A = 1.0

# Atomic number Z (integer)
DEFAULT_Z = 1

# Effective projectile charge z
DEFAULT_CHARGE = 1.0

# Maximum transferable energy [MeV] (PDG formula only)
DEFAULT_T_MAX = 10.0

# Density-effect correction (PDG formula only)
DEFAULT_DELTA = 10.0

# Stopping-power formula variant (see enums.BetheFormula)
DEFAULT_BETHE_FORMULA = "simplified"

# =============================================================================
# Stopping-Power Chart Defaults
# =============================================================================

# βγ axis range. The axis is logarithmic, so min must stay > 0.
DEFAULT_STOPPING_POWER_X_MIN = 0.1
DEFAULT_STOPPING_POWER_X_MAX = 1000.0

# dE/dx axis range [MeV·cm²/g]
DEFAULT_STOPPING_POWER_Y_MIN = 0.0
DEFAULT_STOPPING_POWER_Y_MAX = 20.0

DEFAULT_STOPPING_POWER_X_SCALE = "logarithmic"

# Samples are spaced linearly in βγ and plotted on the log axis
DEFAULT_STOPPING_POWER_SAMPLING = "linear"
DEFAULT_STOPPING_POWER_SAMPLES_PER_UNIT = 200.0
DEFAULT_STOPPING_POWER_MAX_SAMPLES = 200_000

# =============================================================================
# Energy Chart Defaults
# =============================================================================

DEFAULT_ENERGY_X_MIN = 0.0
DEFAULT_ENERGY_X_MAX = 5.0

# E_k axis range [MeV]
DEFAULT_ENERGY_Y_MIN = 0.0
DEFAULT_ENERGY_Y_MAX = 800.0

DEFAULT_ENERGY_X_SCALE = "linear"

DEFAULT_ENERGY_SAMPLING = "linear"
DEFAULT_ENERGY_SAMPLES_PER_UNIT = 400.0
DEFAULT_ENERGY_MAX_SAMPLES = 20_000

# =============================================================================
# Input Clamp Limits
# =============================================================================

DEFAULT_A_MIN = 1.0
DEFAULT_A_MAX = 300.0
DEFAULT_Z_MIN = 1
DEFAULT_Z_MAX = 300

# Smallest allowed max - min on each chart
DEFAULT_STOPPING_POWER_MIN_GAP = 0.1
DEFAULT_ENERGY_MIN_GAP = 0.01

# Lowest βγ the logarithmic axis accepts
DEFAULT_STOPPING_POWER_X_FLOOR = 1e-3

# Lowest value for the remaining axes
DEFAULT_AXIS_FLOOR = 0.0

# Axes are unbounded above
DEFAULT_AXIS_CEILING = math.inf

# =============================================================================
# Secondary Axis Defaults
# =============================================================================

# Fixed display band of the muon kinetic-energy strip; it carries no data
SECONDARY_AXIS_Y_MIN = 0.0
SECONDARY_AXIS_Y_MAX = 10.0

# =============================================================================
# Raster / Style Defaults
# =============================================================================

DEFAULT_CHART_WIDTH = 550
DEFAULT_CHART_HEIGHT = 500

DEFAULT_WINDOW_WIDTH = 1330
DEFAULT_WINDOW_HEIGHT = 520

DEFAULT_BACKGROUND = (40, 40, 40)
DEFAULT_FOREGROUND = (255, 255, 255)
DEFAULT_LEGEND_BACKGROUND = (0, 0, 0)
DEFAULT_STOPPING_POWER_COLOR = (255, 0, 0)

DEFAULT_FONT_FAMILY = "sans-serif"
DEFAULT_CAPTION_FONT_PX = 40
DEFAULT_LABEL_FONT_PX = 15

DEFAULT_STROKE_WIDTH_PX = 2
DEFAULT_GRID_ALPHA = 0.3

DEFAULT_MARGIN_PX = 20
DEFAULT_MARGIN_BOTTOM_PX = 10
DEFAULT_CAPTION_HEIGHT_PX = 50

DEFAULT_STOPPING_POWER_LABEL_LEFT_PX = 60
DEFAULT_STOPPING_POWER_LABEL_BOTTOM_PX = 40
DEFAULT_SECONDARY_LABEL_BOTTOM_PX = 45
DEFAULT_ENERGY_LABEL_LEFT_PX = 80
DEFAULT_ENERGY_LABEL_BOTTOM_PX = 40

# Share of the stopping-power chart height given to the primary plot
DEFAULT_PRIMARY_SPLIT = 0.87

# Rendering resolution; chart sizes are exact pixel counts at this dpi
DEFAULT_DPI = 100

# =============================================================================
# Recompute Defaults
# =============================================================================

DEFAULT_RECOMPUTE_POLICY = "always_both"
