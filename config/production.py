import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("OMCTI_API_URL", "https://omcti.in/apprise/api.php"),
    "timeout": float(os.getenv("OMCTI_API_TIMEOUT", "15")),
    "qr_base_url": os.getenv("OMCTI_QR_URL", "https://omcti.in/apprise/qr_scan.php"),
}

DEFAULT_CENTER_ID = os.getenv("DEFAULT_CENTER_ID", "273")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
