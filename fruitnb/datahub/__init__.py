from .config import DEFAULT_CLASS_COUNT, DEFAULT_CLASSES_PATH, DEFAULT_TRAINING_PATH
from .loader import load_candidates, load_training_records

__all__ = [
    "DEFAULT_CLASS_COUNT",
    "DEFAULT_CLASSES_PATH",
    "DEFAULT_TRAINING_PATH",
    "load_candidates",
    "load_training_records",
]
