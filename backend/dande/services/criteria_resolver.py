"""
Criteria resolution service
Expands raw filters into guaranteed inclusions and weighted candidates
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple
import logging

from dande.models.dande import DanDeRequest
from dande.services.number_universe import number_key, numbers_touching, numbers_with_sum
from dande.services.special_sets import get_combined_special_set_numbers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedCandidate:
    """A number and how many criteria families produced it"""
    number: str
    weight: int


@dataclass(frozen=True)
class ResolvedCriteria:
    """Priority inputs for the level cascade"""
    guaranteed_inclusion: Tuple[str, ...] = ()
    weighted_candidates: Tuple[WeightedCandidate, ...] = ()

    @property
    def candidate_numbers(self) -> List[str]:
        return [c.number for c in self.weighted_candidates]


class CriteriaResolver:
    """Turns validated criteria into priority lists"""

    def resolve(self, criteria: DanDeRequest) -> ResolvedCriteria:
        """
        Resolve criteria into (guaranteed inclusion, weighted candidates)

        Guaranteed inclusion keeps the input order, deduplicated.
        Each family (special sets, touches, sums) adds 1 to the weight of every
        number it produces; candidates are sorted by weight desc, then number asc.
        """
        inclusion = tuple(dict.fromkeys(criteria.combination_numbers))

        families: List[Sequence[str]] = []
        if criteria.special_sets:
            families.append(get_combined_special_set_numbers(criteria.special_sets))
        if criteria.touches:
            families.append(self._expand_digits(criteria.touches, numbers_touching))
        if criteria.sums:
            families.append(self._expand_digits(criteria.sums, numbers_with_sum))

        weights: Dict[str, int] = {}
        for numbers in families:
            for number in numbers:
                weights[number] = weights.get(number, 0) + 1

        candidates = tuple(
            WeightedCandidate(number=n, weight=w)
            for n, w in sorted(weights.items(), key=lambda item: (-item[1], number_key(item[0])))
        )

        logger.debug(
            f"Resolved criteria: {len(inclusion)} guaranteed, {len(candidates)} weighted candidates "
            f"({sum(1 for c in candidates if c.weight > 1)} with weight > 1)"
        )
        return ResolvedCriteria(guaranteed_inclusion=inclusion, weighted_candidates=candidates)

    def restrict_to_pool(self, resolved: ResolvedCriteria, base_pool: Sequence[str]) -> ResolvedCriteria:
        """
        Drop everything outside the base pool

        Inclusions are validated to be distinct and disjoint from the exclusions,
        so they never outnumber the pool; levels smaller than the inclusion list
        pick a random subset of it.
        """
        pool = set(base_pool)
        inclusion = tuple(n for n in resolved.guaranteed_inclusion if n in pool)
        candidates = tuple(c for c in resolved.weighted_candidates if c.number in pool)
        return ResolvedCriteria(guaranteed_inclusion=inclusion, weighted_candidates=candidates)

    @staticmethod
    def _expand_digits(digits: Sequence[str], expand) -> List[str]:
        numbers: Dict[str, None] = {}
        for digit in dict.fromkeys(digits):
            for number in expand(int(digit)):
                numbers[number] = None
        return list(numbers)
