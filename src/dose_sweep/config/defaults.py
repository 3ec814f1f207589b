"""
Default configuration values.
"""

# Sweep bounds (molar ligand concentration)
DEFAULT_MIN_CONC = 0.000001
DEFAULT_MAX_CONC = 0.01
DEFAULT_STEPS_PER_DECADE = 100

# Absolute tolerance for every floating point equality test
DEFAULT_PRECISION = 0.000000001

# Input limits
DEFAULT_MAX_SAMPLES = 32
DEFAULT_MAX_LINE_BYTES = 4096
DEFAULT_MAX_FIELD_BYTES = 127
DEFAULT_STRICT_NUMBERS = False

# Output
DEFAULT_OUT_NAME = "out"
OUT_SUFFIX = ".txt"
DEFAULT_FLOAT_FORMAT = "%f"

EXPECTED_HEADER = ("name", "ymin", "ymax", "EC50")
CONC_COLUMN = "conc"
