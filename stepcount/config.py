"""
Runtime configuration for stepcount.

Values can be overridden through environment variables so that the CLI
and library share the same defaults.
"""

import os

# =============================================================================
# Signal
# =============================================================================

# The bandpass coefficients in filters.py are designed for exactly these.
SAMPLE_RATE_HZ = 20.0
PASSBAND_HZ = (1.0, 3.0)

# =============================================================================
# Step detection
# =============================================================================

THRESHOLD_RATIO = float(os.getenv("STEPCOUNT_THRESHOLD_RATIO", "0.5"))

# =============================================================================
# Ingestion
# =============================================================================

# 0 = no limit
MAX_SAMPLES = max(0, int(os.getenv("STEPCOUNT_MAX_SAMPLES", "0")))

VERBOSE = os.getenv("STEPCOUNT_VERBOSE", "0").lower() in ("1", "true", "yes")
