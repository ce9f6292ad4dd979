"""Configuration utilities."""
from .env_expansion import expand_env_vars

__all__ = ["expand_env_vars"]
