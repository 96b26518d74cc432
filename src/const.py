"""Constants for the API tester."""

# Default run configuration values
DEFAULT_TOTAL_CALLS = 10000
DEFAULT_NUM_THREADS = 12
DEFAULT_SLEEP_TIME_MS = 0
DEFAULT_REQUEST_TIMEOUT_MS = 10000
DEFAULT_CONNECT_TIMEOUT_MS = 30000
# What the help text advertises for -connectTimeOut
ADVERTISED_CONNECT_TIMEOUT_MS = 20000

# Idle pool slots per worker when connections are reused
POOL_IDLE_PER_WORKER = 10

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

# URL handling
URL_PREFIX = "http"
HTTPS_PREFIX = "https"

# HTTP headers
CONNECTION_HEADER = "Connection"
CONNECTION_KEEP_ALIVE = "keep-alive"
CONNECTION_CLOSE = "close"

# Redirects followed per call
MAX_REDIRECTS = 10

# Environment variable that sets logging verbosity
LOG_LEVEL_ENV_VAR = "API_TESTER_LOG_LEVEL"

# Command line flags
HELP_FLAGS = ("-?", "--help")
FLAG_TOTAL_CALLS = "-totalCalls"
FLAG_NUM_THREADS = "-numThreads"
FLAG_SLEEP_TIME = "-sleepTime"
FLAG_REQUEST_TIMEOUT = "-requestTimeOut"
FLAG_CONNECT_TIMEOUT = "-connectTimeOut"
FLAG_REUSE_CONNECTS = "-reuseConnects"
FLAG_KEEP_CONNECTS_OPEN = "-keepConnectsOpen"

# Exit codes
EXIT_OK = 0
EXIT_CLIENT_ERROR = 1

# Error messages
NO_ARGUMENTS_MESSAGE = "Error: No command line argument provided."
INVALID_URL_MESSAGE = 'Error: "{url}" is not a valid URL'
INVALID_INTEGER_MESSAGE = "Invalid integer for {name}"
REQUEST_TIMED_OUT_MESSAGE = "Request timed out after {timeout_ms} ms"

APP_NAME = "api-tester"
