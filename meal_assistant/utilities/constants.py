from typing import Final

# ISO date used for slot and proposed meal dates
DATE_FORMAT: Final[str] = "%Y-%m-%d"


# Ingredient matching
EXACT_MATCH_SCORE: Final[float] = 1.0
PARTIAL_MATCH_SCORE: Final[float] = 0.8
FUZZY_MATCH_THRESHOLD: Final[float] = 0.6
FUZZY_SCORE_FACTOR: Final[float] = 0.6

# Match types
MATCH_EXACT: Final[str] = "exact"
MATCH_PARTIAL: Final[str] = "partial"
MATCH_FUZZY: Final[str] = "fuzzy"

MEAL_MATCH_INGREDIENT: Final[str] = "ingredient"
MEAL_MATCH_TAG: Final[str] = "tag"
MEAL_MATCH_FALLBACK: Final[str] = "fallback"

PRIORITY_REQUIRED: Final[str] = "required"
PRIORITY_PREFERRED: Final[str] = "preferred"

# Reuse spacing
REUSE_DISTANCE_WEIGHT: Final[int] = 10
REUSE_RULE_BONUS: Final[int] = 5
REUSE_FAVORITE_MAX_BONUS: Final[int] = 10
REUSE_TOP_CANDIDATES: Final[int] = 3

# Slots missing from the slot definitions sort after every known slot
UNKNOWN_SLOT_ORDER: Final[int] = 999
