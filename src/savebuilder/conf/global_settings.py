"""Default settings for savebuilder.

Users can override these in their project's settings module.

Example:
    # In your project's savebuilder_settings.py:
    from savebuilder.conf import global_settings

    # Override defaults
    DEFAULT_COMPRESSION_LEVEL = "smallest_size"
    JSON_INDENT = 2
    HTTP_TIMEOUT = 10.0
"""

# Compression settings
DEFAULT_COMPRESSION_LEVEL = "optimal"
"""Compression level used by SaveFile.save() when none is given."""

ZSTD_LEVELS = {
    "optimal": 3,
    "fastest": 1,
    "no_compression": 1,
    "smallest_size": 19,
}
"""Native zstd levels for each CompressionLevel value."""

# Serialization settings
JSON_INDENT = None
"""Indentation for JSON output (None for compact output)."""

JSON_BY_ALIAS = False
"""Whether JSON output uses field aliases instead of attribute names."""

JSON_EXCLUDE_NONE = False
"""Whether fields whose value is None are omitted from JSON output."""

# HTTP settings
HTTP_TIMEOUT = 30.0
"""Timeout in seconds for each HTTP request (None to wait forever)."""

HTTP_USER_AGENT = "savebuilder"
"""User-Agent header sent by HttpStreamIO."""

# Logging settings
LOG_LEVEL = "INFO"
"""Default level used by setup_logging()."""
