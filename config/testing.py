import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("OMCTI_API_URL", "http://omcti.test/apprise/api.php"),
    "timeout": 5,
    "qr_base_url": "http://omcti.test/apprise/qr_scan.php",
}

DEFAULT_CENTER_ID = "273"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
