"""Utility modules for the ucdeploy workflow."""

from .env_vars import EnvVars
from .exceptions import (
    UcdAbortException,
    UcdResponseException,
    UcdTransportException,
    UcdValidationException,
)
from .utils import env_key, map_properties, split_files

__all__ = [
    "EnvVars",
    "UcdAbortException",
    "UcdResponseException",
    "UcdTransportException",
    "UcdValidationException",
    "env_key",
    "map_properties",
    "split_files",
]
