"""watson_clients.config

Environment-driven configuration. Endpoints and credentials can come from
the process environment (or a `.env` file loaded through python-dotenv):

    NATURAL_LANGUAGE_UNDERSTANDING_URL=https://...
    PERSONALITY_INSIGHTS_USERNAME=...
    PERSONALITY_INSIGHTS_PASSWORD=...
    PERSONALITY_INSIGHTS_IAM_ACCESS_TOKEN=...
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

__all__ = ["load_environment", "env_key", "resolve_endpoint", "credentials_from_env"]

logger = logging.getLogger(__name__)

_env_loaded = False


def load_environment(force: bool = False) -> None:
    """Load `.env` once per process; existing variables are not overridden."""
    global _env_loaded
    if _env_loaded and not force:
        return
    load_dotenv(find_dotenv(usecwd=True))
    _env_loaded = True


def env_key(service_name: str, suffix: str) -> str:
    return f"{service_name.upper()}_{suffix}"


def resolve_endpoint(service_name: str, default_url: str, url: Optional[str] = None) -> str:
    """Explicit *url*, else ``<SERVICE>_URL`` from the environment, else *default_url*."""
    if url:
        return url
    load_environment()
    from_env = os.getenv(env_key(service_name, "URL"))
    if from_env:
        logger.debug("Using %s endpoint from environment: %s", service_name, from_env)
        return from_env
    return default_url


def credentials_from_env(service_name: str) -> Dict[str, Any]:
    """Constructor keyword arguments for the credentials found in the environment.

    A bearer token takes precedence over username/password when both exist.
    """
    load_environment()
    token = os.getenv(env_key(service_name, "IAM_ACCESS_TOKEN"))
    if token:
        # local import: service imports this module
        from .service import IamOptions

        return {"iam_options": IamOptions(access_token=token)}
    username = os.getenv(env_key(service_name, "USERNAME"))
    password = os.getenv(env_key(service_name, "PASSWORD"))
    if username and password:
        return {"username": username, "password": password}
    return {}
