"""Shared constants for the cluwaste home directory and report layout."""

CLUWASTE_HOME_EXT = ".cluwaste"  # user-level state/config directory suffix

CLUWASTE_HOME_DISPLAY = f"~/{CLUWASTE_HOME_EXT}"  # user-readable path hint

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "cluwaste.log"

# Width of the right-aligned number column in the text report
REPORT_NUMBER_WIDTH = 21

# Width of the label column in the text report
REPORT_LABEL_WIDTH = 34

# Files measured per traversal task
SCAN_FILE_BATCH = 256

# Most traversal tasks a single directory's sub-directories are split into
SCAN_DIRECTORY_FANOUT = 256
