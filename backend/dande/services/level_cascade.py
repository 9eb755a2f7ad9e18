"""
Level cascade generator
Builds one draw: a ladder of nested selections, smallest level first

Priority inside every level:
1. Guaranteed numbers (random subset when they outnumber the level)
2. Weighted candidates - weight > 1 in order, then random among weight 1
3. Uniform random fill from what is left of the level's pool

Each level's selection seeds the next one, so smaller levels are always
contained in larger ones.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

from dande.core.config import settings
from dande.services.criteria_resolver import ResolvedCriteria
from dande.services.number_universe import sort_numbers
from dande.services.random_sampler import RandomSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Level:
    """One ladder step: target size and the sorted numbers selected for it"""
    target: int
    numbers: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.numbers)


def build_ladder(
    pool_size: int,
    start: Optional[int] = None,
    step: Optional[int] = None,
    max_levels: Optional[int] = None
) -> List[int]:
    """
    Target sizes for a pool: start, start + step, ... strictly below the pool
    size (at most max_levels - 1 of them), then the pool size itself

    Examples with the defaults (8, 10, 10):
        100 -> [8, 18, 28, 38, 48, 58, 68, 78, 88, 100]
        90  -> [8, 18, 28, 38, 48, 58, 68, 78, 88, 90]
        12  -> [8, 12]
        5   -> [5]
    """
    start = settings.LADDER_START if start is None else start
    step = settings.LADDER_STEP if step is None else step
    max_levels = settings.MAX_LEVELS if max_levels is None else max_levels

    if pool_size <= start:
        return [max(pool_size, 0)]

    ladder = []
    size = start
    while size < pool_size and len(ladder) < max_levels - 1:
        ladder.append(size)
        size += step
    ladder.append(pool_size)
    return ladder


class LevelCascadeGenerator:
    """Generates one draw from a base pool and resolved criteria"""

    def __init__(self, sampler: Optional[RandomSampler] = None):
        self._sampler = sampler or RandomSampler()

    def generate_draw(self, base_pool: Sequence[str], resolved: ResolvedCriteria) -> List[Level]:
        """
        Generate the ladder of levels for one draw

        Args:
            base_pool: Numbers allowed in any level
            resolved: Priority lists, already restricted to base_pool

        Returns:
            Levels in ascending target order; a level only comes out smaller than
            its target when the pool itself is smaller
        """
        ladder = build_ladder(len(base_pool))
        levels: List[Level] = []
        previous: Tuple[str, ...] = ()

        for target in ladder:
            if levels:
                available = self._extend_pool(previous, target, base_pool, resolved)
            else:
                available = tuple(base_pool)

            selected = self.select_level(available, target, resolved)
            level = Level(target=target, numbers=tuple(sort_numbers(selected)))
            logger.debug(f"Level {target}: {level.size} numbers from a pool of {len(available)}")

            levels.append(level)
            previous = level.numbers

        return levels

    def select_level(self, available: Sequence[str], target: int, resolved: ResolvedCriteria) -> List[str]:
        """
        Select up to target numbers from available, in priority order

        Guaranteed numbers that outnumber the target are sampled at random.
        Weight > 1 candidates are taken in resolver order (weight descending,
        then number ascending); when they outnumber the remaining capacity only
        that leading prefix is kept. Weight 1 candidates are sampled at random.

        Returns:
            Selected numbers (unsorted)
        """
        available_set = set(available)

        # Step 1: guaranteed numbers
        included = [n for n in resolved.guaranteed_inclusion if n in available_set]
        if len(included) > target:
            chosen = self._sampler.choose(included, target)
        else:
            chosen = included
        chosen_set = set(chosen)

        # Step 2: weighted candidates
        remaining = target - len(chosen)
        if remaining > 0:
            candidates = [
                c for c in resolved.weighted_candidates
                if c.number in available_set and c.number not in chosen_set
            ]
            high = [c.number for c in candidates if c.weight > 1][:remaining]
            low = [c.number for c in candidates if c.weight == 1]
            picked = high + self._sampler.choose(low, remaining - len(high))
            chosen = chosen + picked
            chosen_set.update(picked)

        # Step 3: uniform random fill
        remaining = target - len(chosen)
        if remaining > 0:
            others = [n for n in available if n not in chosen_set]
            chosen = chosen + self._sampler.choose(others, remaining)

        return chosen

    def _extend_pool(
        self,
        previous: Tuple[str, ...],
        target: int,
        base_pool: Sequence[str],
        resolved: ResolvedCriteria
    ) -> Tuple[str, ...]:
        """
        Pool for the next level: the previous selection plus enough unused base
        pool numbers to reach target, picked with the same priority as a level
        """
        shortfall = target - len(previous)
        if shortfall <= 0:
            return previous

        taken = set(previous)
        unused = [n for n in base_pool if n not in taken]
        additional = self.select_level(unused, shortfall, resolved)
        return previous + tuple(additional)
