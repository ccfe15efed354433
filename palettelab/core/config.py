#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for simulation cache
LRU_CACHE_SIZE = 512

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
LIGHT_COLOR_LUMINANCE = 0.179      # Luminance above which black text wins over white

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSV
PERCENT = 100.0                    # Percent scale used by HSL/HSV saturation and lightness
ROUND_DISPLAY = 2                  # Decimal places for display formatting

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65), on the 0-100 scale
D65_WHITE = (95.047, 100.0, 108.883)
XYZ_SCALING = 100.0                # Linear RGB (0-1) to XYZ (0-100)

# sRGB <-> XYZ matrices (Source: sRGB D65)
M_SRGB_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
M_XYZ_SRGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold between the cube-root and linear segments
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Offset of the linear segment
LAB_INV_THR = 6.0 / 29.0           # Cube root of LAB_E, used by the inverse
LAB_L_MULT = 116.0
LAB_L_SUB = 16.0
LAB_A_MULT = 500.0
LAB_B_MULT = 200.0

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity
OKLCH_ACHROMATIC_CHROMA = 1e-6     # Chroma below which OKLCH hue is reported as 0

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),     # Long-wavelength (L) response
    (0.2119034982, 0.6806995451, 0.1073969566),     # Medium-wavelength (M) response
    (0.0883024619, 0.2817188376, 0.6299787005),     # Short-wavelength (S) response
)

# LMS' to OKLab matrix (Perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),    # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),    # 'a' (green-red)
    (0.0259040371, 0.7827717662, -0.8086757660),    # 'b' (blue-yellow)
)

# OKLab to LMS' matrix (Inverse stage part 1, L coefficient is always 1)
M2_OKLAB_INV = (
    (1.0, 0.3963377774, 0.2158037573),              # L' channel
    (1.0, -0.1055613458, -0.0638541728),            # M' channel
    (1.0, -0.0894841775, -1.2914855480),            # S' channel
)

# LMS to linear sRGB matrix (Inverse stage part 2)
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),    # Linear Red
    (-1.2684380046, 2.6097574011, -0.3413193965),   # Linear Green
    (-0.0041960863, -0.7034186147, 1.7076147010),   # Linear Blue
)

# Gamut mapping
RGB_CLAMP_TOLERANCE_LOWER = -0.5         # Lower bound tolerance for gamut mapping and rounding
RGB_CLAMP_TOLERANCE_UPPER = 255.5        # Upper bound tolerance for gamut mapping and rounding
GAMUT_MAP_BINARY_SEARCH_ITERATIONS = 24  # Binary search steps for chroma-based gamut mapping
CONTRAST_BINARY_SEARCH_ITERATIONS = 20   # Binary search steps for target contrast matching

# Color Blindness Simulation Matrices, applied to linear RGB (Source: Machado et al., 2009)
CB_MATRICES = {
    "protanopia": (
        (0.56667, 0.43333, 0.0),     # Red-blindness (L-cone absent)
        (0.55833, 0.44167, 0.0),
        (0.0, 0.24167, 0.75833),
    ),
    "deuteranopia": (
        (0.625, 0.375, 0.0),         # Green-blindness (M-cone absent)
        (0.70, 0.30, 0.0),
        (0.0, 0.30, 0.70),
    ),
    "tritanopia": (
        (0.95, 0.05, 0.0),           # Blue-blindness (S-cone absent)
        (0.0, 0.43333, 0.56667),
        (0.0, 0.475, 0.525),
    ),
    "protanomaly": (
        (0.81667, 0.18333, 0.0),     # Red-weak (anomalous L-cone)
        (0.33333, 0.66667, 0.0),
        (0.0, 0.125, 0.875),
    ),
    "deuteranomaly": (
        (0.80, 0.20, 0.0),           # Green-weak (anomalous M-cone)
        (0.25833, 0.74167, 0.0),
        (0.0, 0.14167, 0.85833),
    ),
    "tritanomaly": (
        (0.96667, 0.03333, 0.0),     # Blue-weak (anomalous S-cone)
        (0.0, 0.73333, 0.26667),
        (0.0, 0.18333, 0.81667),
    ),
    "achromatopsia": (
        (LUMA_R, LUMA_G, LUMA_B),    # Monochromacy, every channel becomes luminance
        (LUMA_R, LUMA_G, LUMA_B),
        (LUMA_R, LUMA_G, LUMA_B),
    ),
}

CVD_DISTINCT_THRESHOLD = 20.0      # Euclidean RGB distance below which two simulated colors merge
CVD_FIX_STEP = 5.0                 # Lightness step (percent) when searching for a CVD-safe color
CVD_FIX_MAX_ATTEMPTS = 20          # Lightness steps tried in each direction
CVD_SEPARATE_THRESHOLD = 25.0      # Distance a suggested fix must reach from the other color
CVD_SEPARATE_MAX_ATTEMPTS = 18
CVD_SEPARATE_L_RANGE = (5.0, 95.0) # HSL lightness bounds for a suggested fix

# ==========================================
# Generators
# ==========================================

# Hue rotation offsets per harmony kind, ascending
HARMONY_OFFSETS = {
    "complementary": (0.0, 180.0),
    "analogous": (-30.0, 0.0, 30.0),
    "triadic": (-120.0, 0.0, 120.0),
    "tetradic": (0.0, 90.0, 180.0, 270.0),
    "split-complementary": (-150.0, 0.0, 150.0),
    "rectangular": (0.0, 60.0, 180.0, 240.0),
}

MONO_COUNT = 5                     # Default member count for monochromatic harmony
MONO_L_MAX = 90.0                  # Lightest monochromatic member (HSL percent)
MONO_L_MIN = 10.0                  # Darkest monochromatic member (HSL percent)

# Tonal scale
SCALE_STEPS = 11                   # Default stop count
SCALE_MIN_STEPS = 2
SCALE_MAX_STEPS = 30
SCALE_L_TOP = 0.97                 # OKLCH lightness of the lightest stop
SCALE_L_BOTTOM = 0.14              # OKLCH lightness of the darkest stop
SCALE_LABELS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

SCALE_HSL_L_TOP = 97.0             # Lightest stop of an evenly spaced HSL scale (percent)
SCALE_HSL_L_BOTTOM = 12.0          # Darkest stop of an evenly spaced HSL scale (percent)

# Tailwind-like HSL ladder (lightness %, saturation offset %)
SCALE_HSL_LADDER = (
    (97.0, -15.0),
    (94.0, -10.0),
    (86.0, -5.0),
    (77.0, 0.0),
    (66.0, 0.0),
    (55.0, 0.0),
    (45.0, 0.0),
    (37.0, 0.0),
    (29.0, 5.0),
    (22.0, 5.0),
    (14.0, 10.0),
)

TINT_L_MAX = 95.0                  # Lightest tint (HSL percent)
SHADE_L_MIN = 10.0                 # Darkest shade (HSL percent)
TINT_DESATURATE_STEP = 5.0         # Saturation removed per tint step

GRADIENT_COLORSPACES = ("srgb", "hsl", "oklab", "oklch")

# Random generation (HSL ranges, inclusive start, exclusive stop)
RANDOM_SAT_RANGE = (50, 90)
RANDOM_LIGHT_RANGE = (30, 70)
RANDOM_JITTER = 10.0
RANDOM_PALETTE_SAT_RANGE = (20.0, 100.0)
RANDOM_PALETTE_LIGHT_RANGE = (20.0, 80.0)

# Palette composer
PALETTE_SEED_LIGHTNESS = 55.0      # HSL lightness of each category seed
PALETTE_CATEGORIES = (
    "primary",
    "secondary",
    "accent",
    "neutral",
    "success",
    "warning",
    "error",
    "info",
)

# Canonical hue bands (start, end) in degrees, end may wrap past 360
SEMANTIC_HUE_BANDS = {
    "success": (100.0, 140.0),
    "warning": (35.0, 55.0),
    "error": (345.0, 375.0),
    "info": (200.0, 230.0),
}

SEMANTIC_SATURATION = {
    "success": 70.0,
    "warning": 85.0,
    "error": 75.0,
    "info": 75.0,
}

NEUTRAL_SATURATION = 8.0
SECONDARY_OFFSET, SECONDARY_JITTER = 180.0, 20
ACCENT_OFFSET, ACCENT_JITTER = 120.0, 15
PRIMARY_SAT_RANGE = (70, 90)
SECONDARY_SAT_RANGE = (50, 70)
ACCENT_SAT_RANGE = (80, 95)

# ==========================================
# CLI UI & Data Structures
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)

CONVERT_FORMATS = ["hex", "rgb", "hsl", "hsv", "cmyk", "lab", "oklch", "oklab"]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
