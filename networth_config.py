"""
Configuration for the net worth calculator.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    """Application configuration settings."""

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Dashboard opens in this mode: 'single' or 'quadrant'
    DEFAULT_MODE: str = os.getenv("NETWORTH_MODE", "single")

    # Table format for the text report: 'simple', 'github', 'grid', ...
    TABLE_FMT: str = os.getenv("TABLE_FMT", "simple")
