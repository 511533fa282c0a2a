"""
Constants for the OKX client.
"""

# API Configuration
DEFAULT_BASE_URL = "https://www.okx.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_MAX_RETRIES = 0

# Endpoint prefixes
API_ACCOUNT_PATH = "/api/v5/account"

# Response envelope
SUCCESS_CODE = "0"

# HTTP Status Codes
SUCCESS_STATUS_CODE = 200
ERROR_STATUS_CODE = 500
