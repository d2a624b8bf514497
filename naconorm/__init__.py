"""Top-level package for naconorm.

This package normalizes bibliographic heading strings according to the NACO
(Name Authority Cooperative) rules so they can be compared for equality. The
main entry points are `naco_normalize` and `NacoNormalizer`.
"""

from .text.normalizer import NacoNormalizer, naco_normalize

__all__ = ["NacoNormalizer", "naco_normalize", "__version__"]

__version__ = "0.1.0"
