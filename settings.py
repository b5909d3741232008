from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Logging configuration
LOG_LEVEL = config.get("LOG_LEVEL", "warning")

# Oura API configuration (hardcoded - not user configurable)
API_BASE = "https://api.ouraring.com"
DAILY_SLEEP_PATH = "/v2/usercollection/daily_sleep"
SLEEP_PATH = "/v2/usercollection/sleep"

# OAuth configuration (hardcoded - not user configurable)
# cloud.ouraring.com for authorization, api.ouraring.com for token exchange
AUTHORIZE_ENDPOINT = "https://cloud.ouraring.com/oauth/authorize"
TOKEN_ENDPOINT = f"{API_BASE}/oauth/token"
SCOPES = "daily personal"

# Local callback listener the authorize endpoint redirects back to
OAUTH_CALLBACK_HOST = "localhost"
OAUTH_CALLBACK_PORT = 3001
REDIRECT_URI = f"http://{OAUTH_CALLBACK_HOST}:{OAUTH_CALLBACK_PORT}"

# Timeout configuration
# Total timeout for token endpoint and API requests
REQUEST_TIMEOUT = config.get("REQUEST_TIMEOUT", 30.0)
# How long to wait for the browser redirect; 0 waits forever
OAUTH_CALLBACK_TIMEOUT = config.get("OAUTH_CALLBACK_TIMEOUT", 300.0)
