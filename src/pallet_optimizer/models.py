from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from typing import Tuple


class BoxSpec(BaseModel):
    """Box to be loaded, with dimensions in cm and weight in kg."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique identifier for the box")
    length: float = Field(gt=0, allow_inf_nan=False, description="Length of the box")
    width: float = Field(gt=0, allow_inf_nan=False, description="Width of the box")
    height: float = Field(gt=0, allow_inf_nan=False, description="Height of the box")
    weight: float = Field(gt=0, allow_inf_nan=False, description="Weight in kg")
    name: str = Field(default="", description="Display name, carried through unchanged")
    color: str = Field(default="#888888", description="Display color, carried through unchanged")

    @property
    def dims(self) -> Tuple[float, float, float]:
        return (self.length, self.width, self.height)

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    @property
    def largest_face_area(self) -> float:
        return max(
            self.length * self.width,
            self.length * self.height,
            self.width * self.height,
        )

    @property
    def largest_dimension(self) -> float:
        return max(self.length, self.width, self.height)


class PlacedBox(BoxSpec):
    """
    A box committed to the pallet.

    (x, y, z) is the minimum corner in pallet coordinates. The oriented
    dimensions map onto the axes as: rotated_length along x, rotated_height
    along y (vertical), rotated_width along z.
    """

    x: float = Field(ge=0, description="X coordinate (pallet length axis)")
    y: float = Field(ge=0, description="Y coordinate (height)")
    z: float = Field(ge=0, description="Z coordinate (pallet width axis)")

    rotated_length: float = Field(gt=0, description="Extent along x after rotation")
    rotated_width: float = Field(gt=0, description="Extent along z after rotation")
    rotated_height: float = Field(gt=0, description="Extent along y after rotation")

    @model_validator(mode="after")
    def _check_rotation(self) -> "PlacedBox":
        rotated = sorted((self.rotated_length, self.rotated_width, self.rotated_height))
        if rotated != sorted(self.dims):
            raise ValueError(
                f"rotated dims {self.rotated_length}x{self.rotated_width}x{self.rotated_height} "
                f"are not a permutation of {self.length}x{self.width}x{self.height}"
            )
        return self

    @property
    def bounds(self) -> Tuple[float, float, float, float, float, float]:
        """(x1, y1, z1, x2, y2, z2)"""
        return (
            self.x,
            self.y,
            self.z,
            self.x + self.rotated_length,
            self.y + self.rotated_height,
            self.z + self.rotated_width,
        )

    @property
    def top(self) -> float:
        return self.y + self.rotated_height

    @property
    def spec(self) -> BoxSpec:
        """The original input box, without placement data."""
        return BoxSpec(**self.model_dump(include=set(BoxSpec.model_fields)))


class Pallet(BaseModel):
    """Pallet loading area. Defaults to a EUR pallet (cm)."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(default=120.0, gt=0, allow_inf_nan=False, description="Length of the pallet (x axis)")
    width: float = Field(default=80.0, gt=0, allow_inf_nan=False, description="Width of the pallet (z axis)")
    max_height: float = Field(
        default=200.0,
        gt=0,
        allow_inf_nan=False,
        description="Maximum load height above the loading surface (y axis)",
    )

    @property
    def volume(self) -> float:
        return self.length * self.width * self.max_height


class PlacementResult(BaseModel):
    """Placed boxes in commit order, and the boxes that could not be placed."""

    model_config = ConfigDict(frozen=True)

    placed: Tuple[PlacedBox, ...] = Field(default_factory=tuple)
    unplaced: Tuple[BoxSpec, ...] = Field(default_factory=tuple)
