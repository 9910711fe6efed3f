"""
Configuration for Chronicle.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "Chronicle"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Song Catalog Tool - Classify works into eras and browse the archive tree"

# Era Configuration
# The cutoff is inclusive: anything written on or before it belongs to the Early Era.
# The first standard milestone claims every work from FIRST_ERA_START onwards.
ERA_CONFIG = {
    "EARLY_ERA_CUTOFF": os.getenv("CHRONICLE_EARLY_ERA_CUTOFF", "2025-11-20T23:59:59"),
    "FIRST_ERA_START": os.getenv("CHRONICLE_FIRST_ERA_START", "2025-11-21"),
    "EARLY_ERA_LABEL": "Early Era",
    "POST_EARLY_ERA_LABEL": "Post Early Era",
    "UNKNOWN_ERA_LABEL": "Unknown Era",
}

# Archive Configuration
ARCHIVE_CONFIG = {
    "STATUS_BUCKETS": ["Released", "Unreleased", "Sessions"],
    "SESSION_PLACEHOLDER": "Untitled Session",
    "SESSION_SUFFIX_MARKER": " (",
    "FILTER_ALL": "All",
    "SUB_CATEGORIES": {
        "Full": ["Released", "Unreleased", "Demos"],
        "Written": [],
    },
    "SORT_FIELDS": ["title", "date_written"],
    "DEFAULT_SORT_FIELD": "date_written",
    "DEFAULT_SORT_ORDER": "desc",
}

# Display Configuration
DISPLAY_CONFIG = {
    "DATE_FORMAT": "%m/%d/%Y",
    "UNKNOWN_DATE": "Unknown Date",
    "DEFAULT_LAYOUT": "list",
    "LAYOUTS": ["list", "grid"],
}

# Report Configuration
REPORT_CONFIG = {
    "NO_LYRICS": "[No Lyrics]",
    "SESSION_MARKER": " [+ Session]",
    "BLOCK_SEPARATOR": "----------------------------------------",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.getenv("CHRONICLE_LOG_LEVEL", "INFO"),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}
