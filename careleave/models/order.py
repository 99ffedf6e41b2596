"""
Pydantic models for subsidy orders and evaluation policy
"""
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .scenario import ScenarioId


class SubsidyOrder(BaseModel):
    """Annual administrative order fixing the monthly amount of each scenario"""
    order_id: str = Field(..., description="Official reference of the order")
    year: int = Field(..., ge=2000, le=2100)
    title: str = Field("", description="Full title of the order")
    amounts: Dict[ScenarioId, float] = Field(..., description="Monthly amount in euros per scenario")

    @field_validator("amounts")
    @classmethod
    def validate_amounts(cls, v):
        missing = [scenario.value for scenario in ScenarioId if scenario not in v]
        if missing:
            raise ValueError(f"Missing monthly amount for: {', '.join(missing)}")
        negative = [scenario.value for scenario, amount in v.items() if amount < 0]
        if negative:
            raise ValueError(f"Monthly amount cannot be negative for: {', '.join(negative)}")
        return v

    def amount_for(self, scenario: ScenarioId) -> float:
        return self.amounts[scenario]

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "order_id": "OF 14/2025",
                "year": 2025,
                "title": "Ayudas a personas trabajadoras en excedencia para el cuidado de familiares",
                "amounts": {
                    "cuidado_familiar_primer_grado": 725,
                    "cuidado_tercer_hijo_sucesivos": 500
                }
            }
        }
    )


class EvaluationPolicy(BaseModel):
    """Thresholds and interpretation toggles applied by the evaluators"""
    hospitalization_blocking: bool = True
    base_age_limit: int = Field(6, ge=1)
    extended_age_limit: int = Field(9, ge=1)
    disability_threshold: float = Field(33, ge=0, le=100)
    minimum_foster_months: int = Field(12, ge=0)

    @model_validator(mode="after")
    def validate_age_limits(self):
        if self.extended_age_limit < self.base_age_limit:
            raise ValueError("extended_age_limit must not be lower than base_age_limit")
        return self

    @classmethod
    def from_settings(cls, settings) -> "EvaluationPolicy":
        return cls(
            hospitalization_blocking=settings.hospitalization_blocking,
            base_age_limit=settings.base_age_limit,
            extended_age_limit=settings.extended_age_limit,
            disability_threshold=settings.disability_threshold,
            minimum_foster_months=settings.minimum_foster_months
        )

    model_config = ConfigDict(frozen=True)
