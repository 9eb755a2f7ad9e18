"""
Tests for criteria resolution and the base pool
"""
import dataclasses
import pytest
from dande.models.dande import DanDeRequest
from dande.services.criteria_resolver import CriteriaResolver, ResolvedCriteria, WeightedCandidate
from dande.services.number_universe import DOUBLE_NUMBERS
from dande.services.pool_manager import PoolManager


class TestCriteriaResolver:
    """Test guaranteed inclusion and weighted candidate resolution"""

    def setup_method(self):
        self.resolver = CriteriaResolver()

    def test_no_filters(self):
        resolved = self.resolver.resolve(DanDeRequest(quantity=1))
        assert resolved.guaranteed_inclusion == ()
        assert resolved.weighted_candidates == ()

    def test_inclusion_keeps_input_order(self):
        resolved = self.resolver.resolve(DanDeRequest(quantity=1, combination_numbers=["50", "05", "33"]))
        assert resolved.guaranteed_inclusion == ("50", "05", "33")

    def test_single_family_has_weight_one(self):
        resolved = self.resolver.resolve(DanDeRequest(quantity=1, touches=["0"]))
        assert len(resolved.weighted_candidates) == 19
        assert all(c.weight == 1 for c in resolved.weighted_candidates)
        numbers = resolved.candidate_numbers
        assert numbers == sorted(numbers, key=int), "Equal weights should be ordered by number"

    def test_overlapping_touches_count_once(self):
        """Two touches in the same family never push a number above weight 1"""
        resolved = self.resolver.resolve(DanDeRequest(quantity=1, touches=["1", "2"]))
        weights = {c.number: c.weight for c in resolved.weighted_candidates}
        assert weights["12"] == 1
        assert len(weights) == 19 + 19 - 2  # 12 and 21 contain both digits

    def test_weight_counts_families(self):
        """Touch 1 and sum 1 both produce 01 and 10"""
        resolved = self.resolver.resolve(DanDeRequest(quantity=1, touches=["1"], sums=["1"]))
        candidates = resolved.weighted_candidates
        assert candidates[0] == WeightedCandidate("01", 2)
        assert candidates[1] == WeightedCandidate("10", 2)
        assert all(c.weight == 1 for c in candidates[2:])
        assert len(candidates) == 19 + 10 - 2

    def test_three_families(self):
        resolved = self.resolver.resolve(
            DanDeRequest(quantity=1, special_sets=["01"], touches=["1"], sums=["1"])
        )
        weights = {c.number: c.weight for c in resolved.weighted_candidates}
        # Special set 01 = 01 06 10 15 51 56 60 65
        assert weights["01"] == 3
        assert weights["10"] == 3
        assert weights["15"] == 2  # special set + touch
        assert weights["56"] == 2  # special set + sum
        assert weights["06"] == 1
        ordered = [c.weight for c in resolved.weighted_candidates]
        assert ordered == sorted(ordered, reverse=True)

    def test_restrict_to_pool(self):
        request = DanDeRequest(
            quantity=1,
            combination_numbers=["05", "50"],
            exclude_numbers=["07"],
            exclude_doubles=True,
            touches=["0"]
        )
        pool = PoolManager().build_base_pool(request.exclude_doubles, request.exclude_numbers)
        resolved = self.resolver.restrict_to_pool(self.resolver.resolve(request), pool)
        assert resolved.guaranteed_inclusion == ("05", "50")
        numbers = resolved.candidate_numbers
        assert "00" not in numbers
        assert "07" not in numbers
        assert len(numbers) == 17

    def test_resolved_criteria_is_immutable(self):
        resolved = ResolvedCriteria(guaranteed_inclusion=("01",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            resolved.guaranteed_inclusion = ("02",)


class TestPoolManager:
    """Test base pool construction"""

    def setup_method(self):
        self.manager = PoolManager()

    def test_full_pool(self):
        pool = self.manager.build_base_pool(False, [])
        assert len(pool) == 100
        assert pool == tuple(sorted(pool, key=int))

    def test_without_doubles(self):
        pool = self.manager.build_base_pool(True, [])
        assert len(pool) == 90
        assert not set(pool) & set(DOUBLE_NUMBERS)

    @pytest.mark.parametrize("exclude_doubles,exclusion", [
        (False, ["07"]),
        (False, ["01", "02", "03", "04", "05"]),
        (True, ["07", "08", "19"]),
        (True, [f"{i:02d}" for i in range(1, 11)]),
    ])
    def test_pool_size_formula(self, exclude_doubles, exclusion):
        """|pool| = 100 - 10 (doubles) - |exclusion| for exclusions outside the doubles"""
        pool = self.manager.build_base_pool(exclude_doubles, exclusion)
        expected = 100 - (10 if exclude_doubles else 0) - len(exclusion)
        assert len(pool) == expected, f"Expected pool of {expected}, got {len(pool)}"
        assert not set(pool) & set(exclusion)

    def test_excluded_double_counted_once(self):
        pool = self.manager.build_base_pool(True, ["00", "07"])
        assert len(pool) == 89

    def test_empty_pool(self):
        pool = self.manager.build_base_pool(False, [f"{i:02d}" for i in range(100)])
        assert pool == ()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
