"""boundseries configuration loaded from environment variables."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# ============================================================================
# Series Configuration
# ============================================================================

SERIES_FILE = os.getenv('SERIES_FILE', 'series.json')
SERIES_RESOLUTION = int(os.getenv('SERIES_RESOLUTION', '60'))
SERIES_WINDOW = int(os.getenv('SERIES_WINDOW', '86400'))

# Write failures are logged at WARNING only when this is set
SERIES_VERBOSE = bool(int(os.getenv('SERIES_VERBOSE', '0')))

# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FILE = os.getenv('LOG_FILE', '')
LOG_FORMAT = os.getenv('LOG_FORMAT', 'detailed')

# ============================================================================
# Validation
# ============================================================================

def validate_config() -> None:
    """Validate configuration values."""
    errors = []

    if not SERIES_FILE:
        errors.append("SERIES_FILE must not be empty")

    if SERIES_RESOLUTION <= 0:
        errors.append("SERIES_RESOLUTION must be positive")

    if SERIES_WINDOW <= 0:
        errors.append("SERIES_WINDOW must be positive")

    if SERIES_RESOLUTION >= SERIES_WINDOW:
        errors.append("SERIES_RESOLUTION must be smaller than SERIES_WINDOW")

    if LOG_FORMAT not in ('detailed', 'simple', 'json'):
        errors.append("LOG_FORMAT must be one of: detailed, simple, json")

    if errors:
        raise ValueError("Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors))


# ============================================================================
# Logging Setup
# ============================================================================

def setup_logging() -> None:
    """Configure logging based on config settings."""
    import logging
    import sys

    level = getattr(logging, LOG_LEVEL, logging.INFO)

    if LOG_FORMAT == 'json':
        format_string = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    elif LOG_FORMAT == 'detailed':
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    else:  # simple
        format_string = '%(levelname)s: %(message)s'

    handlers = []

    # Always log to stdout
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(format_string))
    handlers.append(stdout_handler)

    # Optionally log to file
    if LOG_FILE:
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setFormatter(logging.Formatter(format_string))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True
    )

    logging.getLogger('boundseries').setLevel(level)


# ============================================================================
# Initialization
# ============================================================================

# Validate config on import
validate_config()
