"""
Interest questionnaire -> category affinity mapping.

The questionnaire is a fixed five-item form. Each question owns an ordered
list of rules; the first rule whose predicate matches the response applies
its deltas and the rest are skipped. Question ids outside the table are
ignored.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping

from .records import InterestRecord

logger = logging.getLogger(__name__)

CATEGORIES = ("frontend", "backend", "data", "cloud", "mobile", "security")

QUESTIONNAIRE_VERSION = 1


# ----------------------------
# Predicates
# ----------------------------

def likert_high(response: str) -> bool:
    # "agree" / "strongly agree" on the 1-5 scale
    return response in ("5", "4")


def contains(fragment: str) -> Callable[[str], bool]:
    # case-sensitive, matches the stored option text
    def _match(response: str) -> bool:
        return fragment in response

    _match.__name__ = f"contains_{fragment.replace(' ', '_')}"
    return _match


@dataclass(frozen=True)
class InterestRule:
    label: str
    matches: Callable[[str], bool]
    deltas: Mapping[str, int]


# ----------------------------
# Rule table (version 1)
# ----------------------------

INTEREST_RULES: Dict[int, List[InterestRule]] = {
    # How much do you enjoy working with visual design and user interfaces?
    1: [
        InterestRule("visual_ui", likert_high, {"frontend": 2, "mobile": 1}),
    ],
    # Do you prefer working on backend systems or frontend interfaces?
    2: [
        InterestRule("prefers_backend", contains("Backend"), {"backend": 3, "cloud": 1}),
        InterestRule("prefers_frontend", contains("Frontend"), {"frontend": 3, "mobile": 1}),
        InterestRule("prefers_both", contains("Both"), {"frontend": 1, "backend": 1}),
    ],
    # How comfortable are you with mathematics and statistical analysis?
    3: [
        InterestRule("math_stats", likert_high, {"data": 3, "backend": 1}),
    ],
    # Which area interests you most?
    4: [
        InterestRule("area_web", contains("web applications"), {"frontend": 2, "backend": 2}),
        InterestRule("area_data", contains("data"), {"data": 3}),
        InterestRule("area_cloud", contains("cloud"), {"cloud": 3}),
        InterestRule("area_mobile", contains("mobile"), {"mobile": 3}),
        InterestRule("area_security", contains("security"), {"security": 3}),
    ],
    # How much do you enjoy problem-solving and debugging?
    5: [
        InterestRule("problem_solving", likert_high, {"backend": 1, "data": 1}),
    ],
}


def empty_affinities() -> Dict[str, float]:
    return {c: 0.0 for c in CATEGORIES}


def match_rule(question_id: int, response: str,
               rules: Mapping[int, List[InterestRule]] = INTEREST_RULES) -> InterestRule | None:
    for rule in rules.get(question_id, ()):
        if rule.matches(response):
            return rule
    return None


def analyze_interest_responses(
    responses: Iterable[InterestRecord],
    rules: Mapping[int, List[InterestRule]] = INTEREST_RULES,
) -> Dict[str, float]:
    """
    Fold questionnaire answers into a running affinity total per category.
    Repeated answers to the same question accumulate.
    """
    affinities = empty_affinities()

    for r in responses:
        if r.question_id not in rules:
            logger.debug("Ignoring response to unknown question id %s", r.question_id)
            continue

        rule = match_rule(r.question_id, str(r.response), rules)
        if rule is None:
            continue

        for category, delta in rule.deltas.items():
            affinities[category] = affinities.get(category, 0.0) + delta

    return affinities
