from .ulp import ulp_distance, about
from .score import Score, score, is_interesting, quietly_interesting

__all__ = ["ulp_distance", "about", "Score", "score", "is_interesting", "quietly_interesting"]
