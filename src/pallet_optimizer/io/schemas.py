"""Data schemas for input/output operations."""

from typing import List, Optional
from pydantic import BaseModel, Field

from pallet_optimizer.metrics import PackingMetrics
from pallet_optimizer.models import BoxSpec, PlacedBox
from pallet_optimizer.guide import LoadingStep


class BoxEntrySchema(BaseModel):
    """Schema for one line of a box list; `quantity` expands into identical boxes."""
    id: Optional[str] = Field(None, min_length=1, description="Box identifier, generated when missing")
    length: float = Field(gt=0, allow_inf_nan=False, description="Length of the box (cm)")
    width: float = Field(gt=0, allow_inf_nan=False, description="Width of the box (cm)")
    height: float = Field(gt=0, allow_inf_nan=False, description="Height of the box (cm)")
    weight: float = Field(gt=0, allow_inf_nan=False, description="Weight of the box (kg)")
    name: str = Field("", description="Display name")
    color: Optional[str] = Field(None, description="Display color, derived from the id when missing")
    quantity: int = Field(1, ge=1, description="Number of identical boxes")


class PalletSchema(BaseModel):
    """Schema for explicit pallet dimensions."""
    length: float = Field(gt=0, allow_inf_nan=False, description="Length of the pallet (cm)")
    width: float = Field(gt=0, allow_inf_nan=False, description="Width of the pallet (cm)")
    max_height: float = Field(gt=0, allow_inf_nan=False, description="Maximum load height (cm)")


class PackingRequestSchema(BaseModel):
    """Schema for a packing request."""
    pallet: Optional[PalletSchema] = Field(None, description="Explicit pallet, wins over pallet_preset")
    pallet_preset: Optional[str] = Field(None, description="Name of a standard pallet, e.g. EUR")
    boxes: List[BoxEntrySchema] = Field(default_factory=list, description="Boxes to load")


class PackingResponseSchema(BaseModel):
    """Schema for a packing response."""
    placed: List[PlacedBox] = Field(description="Placed boxes in loading order")
    unplaced: List[BoxSpec] = Field(description="Boxes that did not fit, unchanged")
    metrics: PackingMetrics
    summary: str
    guide: Optional[List[LoadingStep]] = None
