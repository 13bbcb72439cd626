from .city import distinct_cities, extract_city, extract_cities, norm_city, same_city
from .corridor import CorridorMatcher, follows_in_corridor

__all__ = [
    "CorridorMatcher",
    "distinct_cities",
    "extract_cities",
    "extract_city",
    "follows_in_corridor",
    "norm_city",
    "same_city",
]
