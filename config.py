"""
Configuration module for the greeter.

This module loads environment variables from a .env file and provides access to them.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

# Names of the keys we read
SETTING_KEYS = ["AGE_PARSE_POLICY", "AGE_MAX_ATTEMPTS", "AGE_DEFAULT", "GREETER_VERBOSE"]

# Path to the .env in the project root (this file's parent)
env_path = Path(__file__).parent / ".env"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Run settings for the interactive greeter"""

    age_parse_policy: Literal["reprompt", "default", "error"] = Field(
        default="reprompt",
        description="What to do when the age token is not a whole number"
    )
    age_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Malformed age tokens tolerated before giving up (reprompt policy)"
    )
    age_default: int = Field(
        default=0,
        description="Age used by the default policy"
    )
    verbose: bool = Field(
        default=False,
        description="Write status lines to stderr"
    )


def load_env_file(path: Path = env_path) -> bool:
    """
    Load the .env file if it exists. Variables already set in the
    environment are left untouched.

    Returns:
        bool: True if a .env file was loaded
    """
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)
        return True
    return False


def _getenv(key: str, default: str) -> str:
    # Blank values (e.g. "AGE_PARSE_POLICY=" in .env) count as unset
    return (os.getenv(key) or "").strip() or default


def load_settings() -> Settings:
    """
    Build Settings from the environment

    Raises:
        ValueError: if a variable holds a value that cannot be used
    """
    raw = {
        "age_parse_policy": _getenv("AGE_PARSE_POLICY", "reprompt").lower(),
        "age_max_attempts": _getenv("AGE_MAX_ATTEMPTS", "3"),
        "age_default": _getenv("AGE_DEFAULT", "0"),
        "verbose": _getenv("GREETER_VERBOSE", "").lower() in _TRUTHY,
    }
    try:
        return Settings(**raw)
    except ValidationError as exc:
        field = exc.errors()[0]["loc"][0]
        env_name = "GREETER_VERBOSE" if field == "verbose" else str(field).upper()
        raise ValueError(
            f"Invalid value for {env_name}: {os.getenv(env_name)!r}"
        ) from exc
