"""
Configuration Management Module

Site constants plus the few tunable settings of the adapter.
Environment variables (optionally from a .env file) take priority over config.json.

This module handles:
- The fixed site origin and path markers
- HTTP timeout and User-Agent loading with environment variable priority
- Configuration file lookup (config.json)
"""

import os
import json
from dotenv import load_dotenv

from .logging import logger

# Load environment variables from .env file at the start
load_dotenv()

# --- Site structure ---
BASE_URL = "https://mangafire.to"
SITE_DOMAIN = "mangafire.to"
TITLE_PATH_PREFIX = "/manga/"
CHAPTER_PATH_PREFIX = "/chapter/"

CONFIG_FILE = "config.json"

DEFAULT_TIMEOUT = 20
DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
)


def get_config_value(key, default=None, config_path=CONFIG_FILE):
    """Get a configuration value from config.json with fallback to default."""
    if os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
                return config.get(key, default)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"[CONFIG] Could not read {config_path}: {e}")
    return default


def load_request_timeout():
    """Load the HTTP timeout in seconds.

    Returns:
        float: MANGAFIRE_TIMEOUT, then config.json 'request_timeout', then the default.
    """
    raw = os.getenv('MANGAFIRE_TIMEOUT')
    if raw is None:
        raw = get_config_value('request_timeout', DEFAULT_TIMEOUT)
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        logger.warning(f"[CONFIG] Invalid request timeout {raw!r}, using {DEFAULT_TIMEOUT}s")
        return float(DEFAULT_TIMEOUT)
    if timeout <= 0:
        logger.warning(f"[CONFIG] Non-positive request timeout {raw!r}, using {DEFAULT_TIMEOUT}s")
        return float(DEFAULT_TIMEOUT)
    return timeout


def load_user_agent():
    """Load the User-Agent header sent with every request."""
    return os.getenv('MANGAFIRE_USER_AGENT') or get_config_value('user_agent', DEFAULT_USER_AGENT)


def get_request_headers():
    return {'User-Agent': load_user_agent()}
