"""Physical and format constants for CORSIKA to GrIsu conversion."""

import math

# Angle conversion
DEGRAD = 45.0 / math.atan(1.0)  # Degrees per radian
TWO_PI = 2.0 * math.pi

# Unit conversions
GEV_PER_TEV = 1.0e3  # Primary energy range GeV -> TeV
CM_TO_M = 0.01  # Observation height cm -> m
M_TO_CM = 100.0  # First interaction height m -> cm

# Numerical constants
DIRECTION_COSINE_EPSILON = 1.0e-8  # Below this |dcos|, |dsin| are written as 0

# Output formatting
HEADER_PRECISION = 4  # Decimals for header fields
RECORD_PRECISION = 7  # Decimals for S, C and P line fields

# Placeholder fields of the GrIsu line grammar
SHOWER_PLACEHOLDER = -1  # Three trailing fields of the S line
PHOTON_EMITTER_TYPE = 3  # Emitting particle type on P lines

# Defaults
DEFAULT_OBSERVATION_HEIGHT_M = 100.0
DEFAULT_QUANTUM_EFFICIENCY = 1.0

# Run header block positions (CORSIKA event header layout)
RUNH_PRIMARY_ID = 2
RUNH_ZENITH = 10
RUNH_AZIMUTH = 11
RUNH_RUN_NUMBER = 43
RUNH_DATE = 44
RUNH_VERSION = 45
RUNH_OBSERVATION_HEIGHT = 47
RUNH_SPECTRAL_SLOPE = 57
RUNH_ENERGY_MIN = 58
RUNH_ENERGY_MAX = 59
RUNH_ENERGY_CUTS = slice(60, 64)
RUNH_BX = 70
RUNH_BZ = 71
RUNH_MIN_LENGTH = 72
