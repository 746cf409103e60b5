"""Natural Language Understanding v1 client."""
from __future__ import annotations

from .client import NaturalLanguageUnderstanding
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all

__all__ = ["NaturalLanguageUnderstanding", *_models_all]
