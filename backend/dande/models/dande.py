"""
Dan de request/response models
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional
from datetime import datetime
import re

from dande.core.config import settings
from dande.services.number_universe import is_double

NUMBER_PATTERN = re.compile(r"[0-9]{2}")
DIGIT_PATTERN = re.compile(r"[0-9]")


class CamelModel(BaseModel):
    """Wire names are camelCase, attributes snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_tokens(values: List[str], pattern, label: str, max_items: int, unique: bool = False) -> List[str]:
    invalid = [v for v in values if not pattern.fullmatch(v)]
    if invalid:
        expected = "two-digit numbers 00-99" if pattern is NUMBER_PATTERN else "single digits 0-9"
        raise ValueError(f"{label} must be {expected}. Invalid: {invalid}")
    if len(values) > max_items:
        raise ValueError(f"{label} cannot have more than {max_items} items")
    if unique and len(set(values)) != len(values):
        raise ValueError(f"{label} must be unique")
    return values


class DanDeRequest(CamelModel):
    """Generation criteria, strictly validated before any generation work"""
    quantity: int = Field(..., strict=True, description="Number of independent draws")
    combination_numbers: List[str] = Field(default_factory=list, description="Numbers wanted in every level when capacity allows")
    exclude_numbers: List[str] = Field(default_factory=list, description="Numbers never selected")
    exclude_doubles: bool = Field(False, strict=True, description="Remove 00, 11, ..., 99 from the pool")
    special_sets: List[str] = Field(default_factory=list, description="Special group ids (00-99)")
    touches: List[str] = Field(default_factory=list, description="Digits 0-9, numbers containing the digit")
    sums: List[str] = Field(default_factory=list, description="Digits 0-9, numbers with this digit sum mod 10")
    seed: Optional[int] = Field(None, ge=0, le=2**32 - 1, description="Random seed for reproducibility (32-bit)")

    @field_validator('combination_numbers', 'exclude_numbers', 'special_sets', 'touches', 'sums', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        if v < settings.QUANTITY_MIN or v > settings.QUANTITY_MAX:
            raise ValueError(f"Quantity must be between {settings.QUANTITY_MIN} and {settings.QUANTITY_MAX}")
        return v

    @field_validator('combination_numbers')
    @classmethod
    def validate_combination_numbers(cls, v):
        return _check_tokens(v, NUMBER_PATTERN, "combinationNumbers", settings.MAX_COMBINATION_NUMBERS, unique=True)

    @field_validator('exclude_numbers')
    @classmethod
    def validate_exclude_numbers(cls, v):
        return _check_tokens(v, NUMBER_PATTERN, "excludeNumbers", settings.MAX_EXCLUDE_NUMBERS, unique=True)

    @field_validator('special_sets')
    @classmethod
    def validate_special_sets(cls, v):
        return _check_tokens(v, NUMBER_PATTERN, "specialSets", settings.MAX_SPECIAL_SETS)

    @field_validator('touches')
    @classmethod
    def validate_touches(cls, v):
        return _check_tokens(v, DIGIT_PATTERN, "touches", settings.MAX_TOUCHES)

    @field_validator('sums')
    @classmethod
    def validate_sums(cls, v):
        return _check_tokens(v, DIGIT_PATTERN, "sums", settings.MAX_SUMS)

    @model_validator(mode='after')
    def validate_conflicts(self):
        """
        Inclusion may not overlap the exclusion list or excluded doubles,
        and excludeNumbers may not repeat doubles already removed by excludeDoubles
        """
        excluded = set(self.exclude_numbers)
        conflicts = [n for n in self.combination_numbers if n in excluded]
        if conflicts:
            raise ValueError(
                f"Numbers {', '.join(conflicts)} cannot be both in combinationNumbers and excludeNumbers"
            )
        if self.exclude_doubles:
            conflicts = [n for n in self.combination_numbers if is_double(n)]
            if conflicts:
                raise ValueError(
                    f"Numbers {', '.join(conflicts)} cannot be in combinationNumbers while doubles are excluded"
                )
            redundant = [n for n in self.exclude_numbers if is_double(n)]
            if redundant:
                raise ValueError(
                    f"Numbers {', '.join(redundant)} cannot be in excludeNumbers while doubles are excluded"
                )
        return self


class BatchMetadata(CamelModel):
    level_counts: List[int]
    algorithm: str
    version: str
    base_pool_size: int


class DanDeBatch(CamelModel):
    """Generation result: one level mapping per draw plus echoed criteria"""
    levels_list: List[Dict[int, List[str]]] = Field(..., description="Per draw: level size -> sorted numbers")
    total_selected: int = Field(..., description="Numbers selected across all draws and levels")
    quantity: int
    combination_numbers: List[str]
    exclude_numbers: List[str]
    exclude_doubles: bool
    special_sets: List[str]
    touches: List[str]
    sums: List[str]
    seed: Optional[int] = None
    timestamp: datetime
    metadata: BatchMetadata


class SpecialSetResponse(CamelModel):
    set_id: str
    numbers: List[str]
    total: int


class QuickGroupResponse(CamelModel):
    key: str
    label: str
    numbers: List[str]
    total: int
