"""
Keyword-overlap matcher recommending NVIDIA AI Blueprints for a generated SAD
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..data.blueprints import BLUEPRINTS, Blueprint

OVERVIEW_BULLETS_CONSIDERED = 4
MIN_KEYWORD_HITS = 2
MAX_RECOMMENDATIONS = 3


@dataclass(frozen=True)
class BlueprintMatch:
    blueprint: Blueprint
    score: int
    matched_keywords: List[str]


def match_blueprints(
    use_case_title: str,
    overview: Sequence[str],
    catalog: Optional[Sequence[Blueprint]] = None,
) -> List[BlueprintMatch]:
    """
    Recommend up to three blueprints for a SAD.

    The title and the first four overview bullets are lowercased and each
    catalog entry scores one point per keyword found as a substring. A single
    hit is treated as coincidence. Ties keep catalog order.
    """
    if catalog is None:
        catalog = BLUEPRINTS

    text = " ".join([use_case_title or "", *list(overview or [])[:OVERVIEW_BULLETS_CONSIDERED]]).lower()

    matches = []
    for blueprint in catalog:
        hits = [kw for kw in blueprint.keywords if kw.lower() in text]
        if len(hits) >= MIN_KEYWORD_HITS:
            matches.append(BlueprintMatch(blueprint=blueprint, score=len(hits), matched_keywords=hits))

    # sorted() is stable, so equal scores stay in catalog order
    matches = sorted(matches, key=lambda m: m.score, reverse=True)
    return matches[:MAX_RECOMMENDATIONS]
