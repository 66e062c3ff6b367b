"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALL_CLASSES = "All"
ALL_HISTORY = "ALL"

STUDENT_ID_DIGITS = 3

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
