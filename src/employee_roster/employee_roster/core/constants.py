"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_NAME_LENGTH = 100
MAX_POSITION_LENGTH = 100

STORAGE_ERROR_MESSAGE = "Could not save the employee. Please try again."
