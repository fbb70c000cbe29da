# Shared codec constants

# --- Line layout ---
# These values can be monkeypatched in tests, but encoder and decoder must agree.
RAW_BYTES_PER_GROUP = 5  # 40 bits, least common multiple of 5 and 8 bits
SYMBOLS_PER_GROUP = 8
CHUNK_SIZE = 50  # payload bytes per data line
CHECKSUM_SYMBOLS = 4  # 20 bits at 5 bits per symbol
LINE_WIDTH = CHUNK_SIZE * SYMBOLS_PER_GROUP // RAW_BYTES_PER_GROUP + CHECKSUM_SYMBOLS

# --- Trailer ---
TRAILER_MARKER = "#"

# --- Logging ---
LOG_LEVEL_ENV = "ZPAPER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
