"""Personality Insights v3 client."""
from __future__ import annotations

from .client import PersonalityInsights
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all

__all__ = ["PersonalityInsights", *_models_all]
