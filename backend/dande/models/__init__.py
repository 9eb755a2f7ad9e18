from .dande import (
    DanDeRequest,
    DanDeBatch,
    BatchMetadata,
    SpecialSetResponse,
    QuickGroupResponse
)

__all__ = [
    "DanDeRequest",
    "DanDeBatch",
    "BatchMetadata",
    "SpecialSetResponse",
    "QuickGroupResponse"
]
