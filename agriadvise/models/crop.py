from typing import List

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from .fields import NonEmptyStr, SoilPh


class CropRecord(BaseModel):
    """Static agronomic reference entry for one crop, keyed by lowercase id."""

    id: NonEmptyStr = Field(
        description="Lowercase crop identifier, e.g. 'rice'.",
        validation_alias=AliasChoices("id", "_id"),
    )
    category: str = Field(description="e.g. 'Cereal', 'Pulse', 'Cash Crop'")
    scientific_name: str
    soil_type: str
    ph_min: SoilPh
    ph_max: SoilPh
    temp_min: float = Field(description="Minimum temperature in °C")
    temp_max: float = Field(description="Maximum temperature in °C")
    rainfall_min: float = Field(ge=0, description="Minimum rainfall in mm")
    rainfall_max: float = Field(ge=0, description="Maximum rainfall in mm")
    season: str = Field(description="e.g. 'Kharif', 'Rabi', 'Perennial'")
    fertilizers: str
    irrigation: str
    pests: List[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        return value.lower()

    @model_validator(mode="after")
    def _check_ranges(self) -> "CropRecord":
        for name in ("ph", "temp", "rainfall"):
            low = getattr(self, f"{name}_min")
            high = getattr(self, f"{name}_max")
            if low > high:
                raise ValueError(f"{name}_min ({low}) must be <= {name}_max ({high})")
        return self

