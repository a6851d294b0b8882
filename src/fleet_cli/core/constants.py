"""Constants and default values for the fleet CLI.

Centralizes field lists, environment variable names and display
defaults used across the commands.
"""

# ==================== DISPLAY CONSTANTS ====================

# Width of banner separator lines
BANNER_WIDTH: int = 60

# Indentation used for every JSON document printed to stdout
JSON_INDENT: int = 4

# Separator used when a list is shown inside a single table cell
LIST_CELL_SEPARATOR: str = ", "

# Gap between table columns
TABLE_COLUMN_GAP: int = 2

# ==================== LOGGING DEFAULTS ====================

DEFAULT_LOG_LEVEL: str = "WARNING"
VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS: tuple[str, ...] = ("text", "json")

# ==================== ENVIRONMENT VARIABLE MAPPING ====================

# Maps client settings to the environment variables they are read from,
# in priority order.
ENV_VAR_MAPPING: dict[str, tuple[str, ...]] = {
    "api_key": ("BALENA_API_KEY", "BALENA_TOKEN"),
    "balena_host": ("BALENARC_BALENA_URL",),
    "data_directory": ("BALENARC_DATA_DIRECTORY",),
}

# ==================== EXIT CODES ====================

EXIT_SUCCESS: int = 0
EXIT_ERROR: int = 1
EXIT_INTERRUPTED: int = 130

# ==================== USER-FACING MESSAGES ====================

MISSING_TARGET_MESSAGE: str = "You must specify an application or device"
NO_VARIABLES_MESSAGE: str = "No environment variables found"
LOGIN_HINT: str = (
    "Run the following command to go through the login wizard:\n"
    "  $ balena login\n"
    "or set BALENA_API_KEY to an API key."
)
