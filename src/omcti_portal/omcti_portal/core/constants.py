"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_BASE_URL = "https://omcti.in/apprise/api.php"
DEFAULT_QR_BASE_URL = "https://omcti.in/apprise/qr_scan.php"
DEFAULT_API_TIMEOUT = 15

MONTH_KEYS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
MAX_DAYS_IN_MONTH = 31

CALENDAR_SHORT_CELLS = 35
CALENDAR_FULL_CELLS = 42

MIN_SEARCH_CHARS = 3
WALLET_PAGE_SIZE = 25
