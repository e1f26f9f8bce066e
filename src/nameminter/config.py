"""
Runtime configuration for nameminter.

Values come from the process environment, optionally seeded from
~/.nameminter/.env. Every getter reads the environment at call time, so
tests and callers can override with os.environ or load_env().
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Default config directory
NAMEMINTER_DIR = Path.home() / ".nameminter"
NAMEMINTER_ENV = NAMEMINTER_DIR / ".env"

# Default LCD endpoint (Stargaze mainnet)
DEFAULT_LCD_URL = "https://rest.stargaze-apis.com"
DEFAULT_TIMEOUT = 30.0

NAME_MINTER_ADDRESS_ENV = "NAME_MINTER_ADDRESS"


def load_env(env_path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file into the environment.

    Args:
        env_path: Path to .env file (default: ~/.nameminter/.env)

    Returns:
        True if the file exists and set at least one variable
    """
    env_path = env_path or NAMEMINTER_ENV
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=True)


def get_lcd_url() -> str:
    """Get the LCD (REST) endpoint from environment or default."""
    return os.environ.get("STARGAZE_LCD_URL", DEFAULT_LCD_URL).rstrip("/")


def get_timeout() -> float:
    """Get the HTTP timeout in seconds from environment or default."""
    return float(os.environ.get("STARGAZE_LCD_TIMEOUT", str(DEFAULT_TIMEOUT)))


def get_contract_address(env_var: str = NAME_MINTER_ADDRESS_ENV) -> str:
    """
    Get a contract address from the environment.

    Args:
        env_var: Variable holding the bech32 contract address

    Raises:
        ValueError: If the variable is unset or blank
    """
    address = os.environ.get(env_var, "").strip()
    if not address:
        raise ValueError(
            f"{env_var} is not set. Export it or add it to {NAMEMINTER_ENV}"
        )
    return address
