"""
Dan de generation engine
Orchestrates batch generation using specialized services:
criteria -> base pool -> one level cascade per draw -> batch
"""
from datetime import datetime, timezone
from typing import Dict, List
import logging

from dande.core.config import settings
from dande.models.dande import BatchMetadata, DanDeBatch, DanDeRequest
from dande.services.criteria_resolver import CriteriaResolver
from dande.services.ladder_validator import LadderValidator
from dande.services.level_cascade import LevelCascadeGenerator, build_ladder
from dande.services.pool_manager import PoolManager
from dande.services.random_sampler import RandomSampler

logger = logging.getLogger(__name__)


class DanDeBatchOrchestrator:
    """Dan de generation engine - orchestrates specialized services"""

    def __init__(self):
        # Specialized services (stateless, safe to share between requests)
        self._resolver = CriteriaResolver()
        self._pool_manager = PoolManager()
        self._validator = LadderValidator()

    def generate(self, request: DanDeRequest) -> DanDeBatch:
        """
        Generate request.quantity independent draws

        The request is validated on construction, so every failure here is an
        internal one (LadderIntegrityError) and aborts the whole batch.
        """
        base_pool = self._pool_manager.build_base_pool(request.exclude_doubles, request.exclude_numbers)
        resolved = self._resolver.restrict_to_pool(self._resolver.resolve(request), base_pool)
        level_counts = build_ladder(len(base_pool))

        logger.info(
            f"Generating {request.quantity} draw(s): pool={len(base_pool)}, "
            f"guaranteed={len(resolved.guaranteed_inclusion)}, "
            f"weighted={len(resolved.weighted_candidates)}, levels={level_counts}"
        )

        # One generator per batch: draws share criteria and pool, never randomness
        cascade = LevelCascadeGenerator(RandomSampler(seed=request.seed))

        levels_list: List[Dict[int, List[str]]] = []
        total_selected = 0
        for _ in range(request.quantity):
            levels = cascade.generate_draw(base_pool, resolved)
            self._validator.validate_draw(levels, base_pool)

            levels_list.append({level.target: list(level.numbers) for level in levels})
            total_selected += sum(level.size for level in levels)

        logger.info(f"Generated {len(levels_list)} draw(s), {total_selected} numbers selected in total")

        return DanDeBatch(
            levels_list=levels_list,
            total_selected=total_selected,
            quantity=request.quantity,
            combination_numbers=list(request.combination_numbers),
            exclude_numbers=list(request.exclude_numbers),
            exclude_doubles=request.exclude_doubles,
            special_sets=list(request.special_sets),
            touches=list(request.touches),
            sums=list(request.sums),
            seed=request.seed,
            timestamp=datetime.now(timezone.utc),
            metadata=BatchMetadata(
                level_counts=level_counts,
                algorithm=settings.ALGORITHM_NAME,
                version=settings.ALGORITHM_VERSION,
                base_pool_size=len(base_pool)
            )
        )


dande_generator = DanDeBatchOrchestrator()
