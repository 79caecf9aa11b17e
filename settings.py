"""
Environment driven settings for the credit advisor.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

# Presentation
APP_TITLE = os.getenv("APP_TITLE", "Credit Advisor")
CURRENCY_CODE = os.getenv("CURRENCY_CODE", "COP")
