"""
Pool management service
Builds the base working pool every level draws from
"""
from typing import Iterable, Tuple
import logging

from dande.services.number_universe import ALL_NUMBERS, is_double

logger = logging.getLogger(__name__)


class PoolManager:
    """Computes the hard ceiling of selectable numbers"""

    def build_base_pool(self, exclude_doubles: bool, exclusion: Iterable[str]) -> Tuple[str, ...]:
        """
        All 100 numbers minus doubles (if excluded) minus the exclusion list

        Args:
            exclude_doubles: Remove 00, 11, ..., 99
            exclusion: Numbers that must never be selected

        Returns:
            Pool in ascending numeric order (may be empty)
        """
        removed = set(exclusion)
        if exclude_doubles:
            removed.update(n for n in ALL_NUMBERS if is_double(n))

        pool = tuple(n for n in ALL_NUMBERS if n not in removed)
        if not pool:
            logger.warning("Base pool is empty - every level will be empty")
        else:
            logger.debug(f"Base pool: {len(pool)} numbers ({len(removed)} removed)")
        return pool
