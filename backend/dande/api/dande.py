"""
Dan de API endpoints
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from typing import List
import logging

from dande.models.dande import DanDeBatch, DanDeRequest, QuickGroupResponse, SpecialSetResponse
from dande.services.dande_generator import dande_generator
from dande.services.ladder_validator import LadderIntegrityError
from dande.services.special_sets import QUICK_GROUPS, canonical_special_sets, get_quick_group, get_special_set

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dande/generate", response_model=DanDeBatch)
async def generate_dande(request: DanDeRequest):
    """
    Generate a batch of dan de ladders
    Request validation failures are answered with 400 before this runs
    """
    try:
        return dande_generator.generate(request)
    except LadderIntegrityError as e:
        logger.error(f"Generation aborted: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "code": "INTERNAL_ERROR",
                "message": "Failed to generate dan de",
                "field": None
            }
        )


@router.get("/dande/special-sets", response_model=List[SpecialSetResponse])
async def list_special_sets():
    """
    List the distinct special groups, each keyed by its smallest member
    """
    return [
        SpecialSetResponse(set_id=set_id, numbers=numbers, total=len(numbers))
        for set_id, numbers in canonical_special_sets().items()
    ]


@router.get("/dande/special-sets/{set_id}", response_model=SpecialSetResponse)
async def get_special_set_numbers(set_id: str):
    """
    Get the members of a special group by id (00-99)
    """
    try:
        numbers = get_special_set(set_id)
    except KeyError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "code": "SPECIAL_SET_NOT_FOUND",
                "message": f"Special set {set_id} not found",
                "field": "set_id"
            }
        )

    return SpecialSetResponse(set_id=set_id, numbers=numbers, total=len(numbers))


@router.get("/dande/groups", response_model=List[QuickGroupResponse])
async def list_quick_groups():
    """
    List all named quick groups
    """
    return [
        QuickGroupResponse(key=g.key, label=g.label, numbers=list(g.numbers), total=len(g.numbers))
        for g in QUICK_GROUPS.values()
    ]


@router.get("/dande/groups/{key}", response_model=QuickGroupResponse)
async def get_group(key: str):
    """
    Get one quick group by key
    """
    try:
        group = get_quick_group(key)
    except KeyError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "code": "GROUP_NOT_FOUND",
                "message": f"Group {key} not found",
                "field": "key"
            }
        )

    return QuickGroupResponse(key=group.key, label=group.label, numbers=list(group.numbers), total=len(group.numbers))
