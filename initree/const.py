"""
Application constants and metadata.
"""

# Application info
APP_NAME = "initree"
APP_VERSION = "0.1.0"
APP_URL = "https://github.com/initree/initree"

# Default values
DEFAULT_ROOT_NAME = "root"
DEFAULT_ENCODING = "utf-8"
DEFAULT_COMMENT_MARKERS = "#;"
DEFAULT_ASSIGNMENT_MARKER = "="
DEFAULT_QUOTE = '"'
DEFAULT_CONTINUATION_MARKER = "\\"

# Encoding detection below this confidence falls back to latin-1
ENCODING_CONFIDENCE = 0.8
