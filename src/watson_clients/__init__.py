# noqa: D104
"""Top-level package for watson_clients."""
from __future__ import annotations

__version__ = "0.1.0"
__all__ = ["NaturalLanguageUnderstanding", "PersonalityInsights", "IamOptions"]


def __getattr__(name):  # type: ignore[override]
    if name == "NaturalLanguageUnderstanding":
        from .natural_language_understanding import NaturalLanguageUnderstanding

        return NaturalLanguageUnderstanding
    if name == "PersonalityInsights":
        from .personality_insights import PersonalityInsights

        return PersonalityInsights
    if name == "IamOptions":
        from .service import IamOptions

        return IamOptions
    raise AttributeError(name)
