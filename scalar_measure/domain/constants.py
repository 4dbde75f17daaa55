"""Constants used across the measure implementations."""

# Unit length of discrete domains (integers, characters)
UNIT = 1

# Integer widths the pair table is derived over
INTEGER_WIDTHS = (8, 16, 32, 64)
LENGTH_WIDTHS = (8, 16, 32, 64, 128)

# Pointer widths a platform-native integer can take
SUPPORTED_POINTER_WIDTHS = (8, 16, 32, 64)

# Unicode scalar values
MAX_CODEPOINT = 0x10FFFF
SURROGATE_START = 0xD800
SURROGATE_END = 0xDFFF
# Last scalar value below the surrogate block, first one above it
BELOW_GAP = 0xD7FF
ABOVE_GAP = 0xE000
# Anchor of the gap-crossing formula. Kept at 0xD000 (not SURROGATE_START),
# distances across the gap are pinned to this value.
GAP_ANCHOR = 0xD000

# Environment variable prefix for runtime settings
ENV_PREFIX = "SCALAR_MEASURE_"
