"""
Random sampling service
Uniform choose-k-of-n without replacement on top of a Fisher-Yates shuffle
"""
import numpy as np
from typing import List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class RandomSampler:
    """Draws uniform random subsets; never mutates the caller's sequences"""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.RandomState] = None):
        if rng is not None:
            self._rng = rng
        else:
            self._rng = np.random.RandomState(seed) if seed is not None else np.random.RandomState()

    def shuffle(self, items: Sequence[str]) -> List[str]:
        """
        Full Fisher-Yates shuffle of a copy of items

        Args:
            items: Sequence to shuffle (left untouched)

        Returns:
            New list with the same elements in uniformly random order
        """
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = int(self._rng.randint(0, i + 1))
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def choose(self, candidates: Sequence[str], k: int) -> List[str]:
        """
        Choose min(k, len(candidates)) distinct candidates uniformly at random

        Args:
            candidates: Pool to draw from
            k: Number of items wanted

        Returns:
            Chosen items in shuffle order (callers sort if order matters)
        """
        if k <= 0 or not candidates:
            return []
        return self.shuffle(candidates)[:min(k, len(candidates))]
