"""
Configuration settings for the Artist Tag Mixer application
"""
from tag_options import PrefixMode, WeightDistribution

# Combination defaults (applied on first page load)
DEFAULT_MIN_WEIGHT = 0.05
DEFAULT_MAX_WEIGHT = 1.5
DEFAULT_MIN_TAGS = 3
DEFAULT_MAX_TAGS = 7
DEFAULT_PREFIX_MODE = PrefixMode.RANDOM
DEFAULT_DISTRIBUTION = WeightDistribution.UNIFORM

# Slider settings
WEIGHT_SLIDER_MIN = 0.0
WEIGHT_SLIDER_MAX = 3.0
WEIGHT_SLIDER_STEP = 0.05
TAG_SLIDER_FLOOR = 20  # Tag-count sliders go up to max(20, selected count)

# Output formatting
ARTIST_PREFIX = "artist:"
TOKEN_SEPARATOR = ", "

# History settings
HISTORY_LIMIT = 20

# Import / export settings
IMPORT_FILE_TYPES = ["txt", "csv"]
EXPORT_FILENAME = "artist_tags.txt"
EXPORT_MIME = "text/plain"

# UI settings
PAGE_TITLE = "Artist Tag Mixer"
PAGE_ICON = "🎨"
COPY_ACK_MS = 2000  # How long the "Copied!" acknowledgement stays visible
ARTIST_LIST_HEIGHT = 400
HISTORY_PREVIEW_CHARS = 90
