"""Domain models for natural sort normalization."""

from .datatypes import NormalizationResult, NormalizationWarning

__all__ = ["NormalizationResult", "NormalizationWarning"]
