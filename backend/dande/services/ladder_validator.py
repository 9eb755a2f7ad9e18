"""
Ladder validation service
Checks a generated draw against the invariants every draw must satisfy
"""
from typing import Iterable, Sequence, Tuple
import logging

from dande.services.level_cascade import Level

logger = logging.getLogger(__name__)


class LadderIntegrityError(RuntimeError):
    """A generated draw broke a ladder invariant; the whole batch is aborted"""


class LadderValidator:
    """Validates generated draws"""

    def check_draw(self, levels: Sequence[Level], base_pool: Iterable[str]) -> Tuple[bool, str]:
        """
        Validate one draw

        Args:
            levels: Levels in generation order
            base_pool: Numbers the draw was allowed to use

        Returns:
            Tuple of (is_valid, reason) where reason is empty if valid
        """
        pool = set(base_pool)
        targets = [level.target for level in levels]

        if not levels:
            return (False, "empty_ladder")

        if any(b <= a for a, b in zip(targets, targets[1:])):
            return (False, f"targets_not_ascending_{targets}")

        for level in levels:
            if len(set(level.numbers)) != level.size:
                return (False, f"duplicates_in_level_{level.target}")
            if list(level.numbers) != sorted(level.numbers, key=int):
                return (False, f"unsorted_level_{level.target}")
            if level.size != min(level.target, len(pool)):
                return (False, f"wrong_size_level_{level.target}")
            outside = set(level.numbers) - pool
            if outside:
                return (False, f"excluded_numbers_in_level_{level.target}")

        for smaller, larger in zip(levels, levels[1:]):
            if not set(smaller.numbers).issubset(larger.numbers):
                return (False, f"level_{smaller.target}_not_in_level_{larger.target}")

        return (True, "")

    def validate_draw(self, levels: Sequence[Level], base_pool: Iterable[str]) -> None:
        """Raise LadderIntegrityError if the draw is invalid"""
        is_valid, reason = self.check_draw(levels, base_pool)
        if not is_valid:
            logger.error(f"Ladder integrity check failed: {reason}")
            raise LadderIntegrityError(f"Generated draw is invalid: {reason}")
