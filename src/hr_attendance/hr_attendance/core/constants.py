"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMAIL_PATTERN = r"^\S+@\S+\.\S+$"
PERCENTAGE_PLACES = 2
DATE_FORMAT = "%Y-%m-%d"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Column widths in database/schema.sql.
EMPLOYEE_ID_MAX_LENGTH = 64
TEXT_MAX_LENGTH = 255
