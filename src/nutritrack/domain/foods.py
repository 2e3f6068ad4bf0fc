"""Models for food reference data."""

from pydantic import BaseModel, ConfigDict, Field


class FoodPhoto(BaseModel):
    """Thumbnail reference for a food."""

    model_config = ConfigDict(frozen=True)

    thumb: str | None = None


class FoodItem(BaseModel):
    """Nutrition facts for one serving of a food."""

    model_config = ConfigDict(frozen=True)

    food_name: str
    serving_qty: float = Field(default=1.0, ge=0.0)
    serving_unit: str = ""
    serving_weight_grams: float = Field(default=0.0, ge=0.0)
    nf_calories: float = Field(default=0.0, ge=0.0)
    nf_total_fat: float = Field(default=0.0, ge=0.0)
    nf_total_carbohydrate: float = Field(default=0.0, ge=0.0)
    nf_protein: float = Field(default=0.0, ge=0.0)
    photo: FoodPhoto | None = None
