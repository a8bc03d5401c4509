"""Top-level package for natural sort normalization.

Embedded numbers in a string are zero-padded to a fixed width so that plain
lexicographic comparison follows natural ordering ("item2" before "item10").
The main entry points are `normalize` and `NaturalSortNormalizer`.
"""

from .config import DEFAULT_WIDTH, MAX_WIDTH, OUTPUT_CAPACITY, NormalizerConfig
from .errors import CapacityExceededError, NaturalSortError
from .models import NormalizationResult, NormalizationWarning
from .normalizer import NaturalSortNormalizer, normalize, pad_run
from .sorting import natural_sort_key, natural_sorted

__all__ = [
    "DEFAULT_WIDTH",
    "MAX_WIDTH",
    "OUTPUT_CAPACITY",
    "CapacityExceededError",
    "NaturalSortError",
    "NaturalSortNormalizer",
    "NormalizationResult",
    "NormalizationWarning",
    "NormalizerConfig",
    "natural_sort_key",
    "natural_sorted",
    "normalize",
    "pad_run",
    "__version__",
]

__version__ = "0.1.0"
