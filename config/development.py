import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "base_url": os.getenv("OMCTI_API_URL", "https://omcti.in/apprise/api.php"),
    "timeout": float(os.getenv("OMCTI_API_TIMEOUT", "15")),
    "qr_base_url": os.getenv("OMCTI_QR_URL", "https://omcti.in/apprise/qr_scan.php"),
}

# Centre used for the holiday calendar when the session has none (student logins)
DEFAULT_CENTER_ID = os.getenv("DEFAULT_CENTER_ID", "273")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
