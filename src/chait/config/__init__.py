"""Application configuration helpers."""

from __future__ import annotations

from .env import load_env_file, require_env_var, require_env_vars
from .errors import ConfigurationError, InvalidOrganizationError, MissingConfigurationError
from .logging import configure_logging
from .organizations import VALID_ORGANIZATIONS, validate_organization
from .resilience import RetryPolicy
from .storage import DEFAULT_TABLE_NAME, StoreConfig, get_store_config

__all__ = [
    "DEFAULT_TABLE_NAME",
    "VALID_ORGANIZATIONS",
    "ConfigurationError",
    "InvalidOrganizationError",
    "MissingConfigurationError",
    "RetryPolicy",
    "StoreConfig",
    "configure_logging",
    "get_store_config",
    "load_env_file",
    "require_env_var",
    "require_env_vars",
    "validate_organization",
]
