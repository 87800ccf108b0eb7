"""Environment variable helpers."""

import os
from typing import Optional


def get_env(name: str) -> Optional[str]:
    """Read an environment variable, treating an empty value as unset.

    Args:
        name: Environment variable name

    Returns:
        The value, or None if the variable is unset or empty
    """
    value = os.environ.get(name)
    if not value:
        return None
    return value
