"""
Command suggestions for mistyped menu input.

Compares the typed command against every menu command with the Levenshtein
distance and offers the closest one when it is near enough, so "ad" or
"chose" gets a hint instead of a bare "Unknown choice".
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein

import constants as cv


def suggest_command(
    text: str,
    commands: list[str],
    max_distance: int = cv.MAX_SUGGESTION_DISTANCE,
) -> Optional[str]:
    """Return the command closest to *text*, or None if nothing is close.

    Ties go to the command listed first. Empty input never gets a suggestion,
    and neither does an exact match (that is not a typo).
    """
    query = text.strip().lower()
    if not query or query in commands:
        return None

    best = None
    best_distance = max_distance + 1
    for command in commands:
        distance = Levenshtein.distance(query, command, score_cutoff=max_distance)
        if distance < best_distance:
            best, best_distance = command, distance
    return best
