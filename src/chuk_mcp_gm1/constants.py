"""
Constants for GM1 sound quality and timbre compliance.

Every number here is part of the RP-003 compliance contract - no magic
numbers in the validators, reference these instead.
"""

# Channels
CHANNEL_COUNT = 16
PERCUSSION_CHANNEL = 9  # 0-indexed, so 9 = channel 10

# Programs (1-based, as printed in the GM1 sound set)
MIN_PROGRAM = 1
MAX_PROGRAM = 128
PROGRAMS_PER_CATEGORY = 8
DEFAULT_PROGRAM = 1

# Controller values
MAX_CONTROLLER_VALUE = 127

# Program quality
MIN_RECOGNITION_SCORE = 0.8
MAX_TUNING_DEVIATION_CENTS = 10.0

# Velocity response
MIN_VELOCITY_LAYERS = 2
MAX_VELOCITY_CURVE = 2.0

# Audio quality: (minimum, recommended)
MIN_SAMPLE_RATE_HZ = 22050
RECOMMENDED_SAMPLE_RATE_HZ = 44100
MIN_BIT_DEPTH = 8
RECOMMENDED_BIT_DEPTH = 16
MIN_DYNAMIC_RANGE_DB = 48.0
RECOMMENDED_DYNAMIC_RANGE_DB = 72.0
MIN_POLYPHONY = 24
MIN_MAX_FREQUENCY_HZ = 11000.0
RECOMMENDED_MAX_FREQUENCY_HZ = 20000.0
RECOMMENDED_MIN_FREQUENCY_HZ = 20.0

# Volume (CC#7)
VOLUME_FLOOR_DB = -60.0  # CC#7 = 0, near silence rather than -inf

# Program switching
MAX_PROGRAM_SWITCH_MS = 100
SWITCH_BASE_LATENCY_MS = 10
SWITCH_CATEGORY_CHANGE_MS = 20
SWITCH_LARGE_SAMPLE_SET_MS = 15
INVALID_LATENCY_MS = 0xFFFFFFFF

# Cross-device consistency
MIN_CONSISTENCY_SCORE = MIN_RECOGNITION_SCORE
CONSISTENCY_TUNING_SPAN_CENTS = 20.0
MAX_DYNAMIC_RANGE_DIFF_DB = 12.0

# Compliance issue buffer
MAX_ISSUE_CHARS = 255


class IssueMessages:
    """Standardized compliance issue messages."""

    NULL_SPECIFICATION = "NULL quality specification"
    SAMPLE_RATE_BELOW_MIN = "Sample rate {value} Hz below minimum {minimum} Hz."
    BIT_DEPTH_BELOW_MIN = "Bit depth {value} below minimum {minimum}."
    DYNAMIC_RANGE_BELOW_MIN = "Dynamic range {value:.1f} dB below minimum {minimum:.1f} dB."
    POLYPHONY_BELOW_MIN = "Polyphony {value} voices below minimum {minimum}."
    MAX_FREQUENCY_BELOW_MIN = "Max frequency {value:.0f} Hz below minimum {minimum:.0f} Hz."
