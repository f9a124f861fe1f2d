"""
Configuration constants for mtime sync.
"""

# --- External Utility ---
# macOS developer tool; `-m` sets the modification date from a local-time string
SETFILE_UTILITY = "SetFile"
SETFILE_MTIME_FLAG = "-m"

# MM/DD/YYYY HH:MM:SS, zero padded, local wall clock
TIMESTAMP_PATTERN = "{month:02d}/{day:02d}/{year:04d} {hour:02d}:{minute:02d}:{second:02d}"

# None = wait for the utility indefinitely
DEFAULT_TIMEOUT = None

# --- Batch ---
# Upper bound on concurrently running SetFile processes
DEFAULT_MAX_WORKERS = 4

# --- Host Registration ---
COMMAND_ID = "sync-mtime-to-created"
MENU_ICON = "clock"

# --- Display ---
DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("ja", "en")

# "generic" shows a fixed success message, "detailed" includes the applied timestamp
NOTICE_VERBOSITY = ("generic", "detailed")
DEFAULT_NOTICE_VERBOSITY = "generic"
