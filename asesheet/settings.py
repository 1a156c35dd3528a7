# settings.py
# Colors
COLOR_PREFIX = "#"
COLOR_TEXT_LENGTH = 9  # "#" + 4 hex byte pairs
COLOR_CHANNELS = ("r", "g", "b", "a")

# Integers in the export are unsigned 32 bit
U32_MAX = 2**32 - 1

# Encoding
JSON_INDENT = 1

# Builder defaults
TILE = 16
PADDING = 1           # gap between frames
COLS = 8              # frames per row before wrapping
DEFAULT_DURATION = 100  # ms per frame
DEFAULT_APP = "http://www.aseprite.org/"
DEFAULT_VERSION = "1.1.6-dev"
DEFAULT_FORMAT = "RGBA8888"
DEFAULT_SCALE = "1"

# Logging
LOGLEVEL_ENV = "LOGLEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "[%(levelname)s] %(message)s"
