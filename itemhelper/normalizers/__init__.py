from .pipeline import get_default_normalizer, NormalizerPipeline, process
from .rules import RuleFieldNormalizer, decode_json, is_json
from .loaders import FieldLoader, InMemoryFieldLoader, NullFieldLoader, get_default_loader
from .base import FieldNormalizer

__all__ = [
    "get_default_normalizer",
    "NormalizerPipeline",
    "process",
    "RuleFieldNormalizer",
    "decode_json",
    "is_json",
    "FieldLoader",
    "InMemoryFieldLoader",
    "NullFieldLoader",
    "get_default_loader",
    "FieldNormalizer",
]
