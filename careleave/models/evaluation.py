"""
Pydantic models for evaluation requests and results
"""
from typing import Annotated, Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .kinship import KinshipVerdict
from .scenario import (
    ScenarioId,
    FirstDegreeCareInput,
    ThirdChildInput,
    SecondChildDisabilityInput,
    AdoptionFosteringInput,
    MultipleBirthInput,
    SingleParentInput
)

_result_config = ConfigDict(frozen=True, validate_by_name=True, serialize_by_alias=True)


class EvaluationResult(BaseModel):
    """Verdict of a single scenario evaluator"""
    scenario: ScenarioId = Field(..., alias="supuesto")
    eligible: bool = Field(..., alias="es_elegible")
    validations: Dict[str, bool] = Field(..., alias="validaciones", description="Named checks in fixed order")
    errors: List[str] = Field(default_factory=list, alias="errores")
    warnings: List[str] = Field(default_factory=list, alias="advertencias")
    kinship: Optional[KinshipVerdict] = Field(None, alias="parentesco_info")
    description: str = Field(..., alias="descripcion")
    monthly_amount: float = Field(..., ge=0, alias="importe_mensual")
    age_analysis: Optional[Dict[str, Any]] = Field(None, alias="analisis_edades")
    disability_analysis: Optional[Dict[str, Any]] = Field(None, alias="analisis_discapacidad")

    @model_validator(mode="after")
    def check_eligibility_matches_validations(self):
        if self.eligible != all(self.validations.values()):
            raise ValueError("es_elegible must be the conjunction of all validaciones")
        return self

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        serialize_by_alias=True,
        json_schema_extra={
            "example": {
                "supuesto": "cuidado_tercer_hijo_sucesivos",
                "es_elegible": True,
                "validaciones": {
                    "tiene_tres_o_mas_hijos": True,
                    "al_menos_dos_menores_6_años": True,
                    "incluye_recien_nacido": True
                },
                "errores": [],
                "advertencias": [],
                "descripcion": "Supuesto B: Cuidado del tercer hijo o sucesivos (2 menores de 6 años)",
                "importe_mensual": 500.0,
                "analisis_edades": {"total_hijos": 3, "menores_6_años": 3, "edades": [0, 2, 5]}
            }
        }
    )


class CompatibilitySituation(BaseModel):
    """Other public aid the applicant currently receives"""
    has_other_public_aid: bool = Field(False, alias="tieneOtrasAyudasPublicas")
    has_social_security_benefit: bool = Field(False, alias="tienePrestacionesSeguridadSocial")
    has_dependency_aid: bool = Field(False, alias="tieneAyudaDependencia")
    has_caregiver_agreement: bool = Field(False, alias="tieneConvenioEspecialCuidadores")
    other_aid_amount: float = Field(0, alias="importeOtrasAyudas")
    dependency_aid_amount: float = Field(0, alias="importeAyudaDependencia")

    model_config = ConfigDict(frozen=True, validate_by_name=True, extra="ignore")


class CompatibilityResult(BaseModel):
    """Outcome of the compatibility check"""
    is_compatible: bool = Field(..., alias="es_compatible")
    incompatibilities: List[str] = Field(default_factory=list, alias="incompatibilidades")
    compatibilities: List[str] = Field(default_factory=list, alias="compatibilidades")
    limitations: List[str] = Field(default_factory=list, alias="limitaciones")
    can_apply: bool = Field(..., alias="puede_solicitar")

    model_config = _result_config


ScenarioRequest = Annotated[
    Union[
        FirstDegreeCareInput,
        ThirdChildInput,
        SecondChildDisabilityInput,
        AdoptionFosteringInput,
        MultipleBirthInput,
        SingleParentInput
    ],
    Field(discriminator="scenario")
]


class CompositeRequest(BaseModel):
    """Tagged scenario sub-requests plus the optional current aid situation"""
    scenarios: List[ScenarioRequest] = Field(default_factory=list, alias="supuestos")
    situation: Optional[CompatibilitySituation] = Field(None, alias="situacionActual")

    @field_validator("scenarios")
    @classmethod
    def validate_unique_scenarios(cls, v):
        seen = set()
        for request in v:
            if request.scenario in seen:
                raise ValueError(f"Scenario requested more than once: {request.scenario}")
            seen.add(request.scenario)
        return v

    def get(self, scenario: ScenarioId):
        """Return the sub-request for a scenario, if supplied"""
        for request in self.scenarios:
            if request.scenario == scenario:
                return request
        return None

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        json_schema_extra={
            "example": {
                "supuestos": [
                    {
                        "supuesto": "cuidado_tercer_hijo_sucesivos",
                        "numeroHijos": 3,
                        "edadesHijos": [0, 2, 5],
                        "incluyeRecienNacido": True
                    }
                ],
                "situacionActual": {
                    "tieneAyudaDependencia": True,
                    "importeAyudaDependencia": 300
                }
            }
        }
    )


class EvaluationSummary(BaseModel):
    eligible_count: int = Field(..., ge=0, alias="total_supuestos_elegibles")
    can_apply: bool = Field(..., alias="puede_solicitar")

    model_config = _result_config


class AggregateResult(BaseModel):
    """Complete evaluation across every supplied scenario"""
    evaluated_scenarios: List[EvaluationResult] = Field(default_factory=list, alias="supuestos_evaluados")
    eligible_scenarios: List[EvaluationResult] = Field(default_factory=list, alias="supuestos_elegibles")
    best_option: Optional[EvaluationResult] = Field(None, alias="mejor_opcion")
    compatibility: Optional[CompatibilityResult] = Field(None, alias="compatibilidades")
    summary: EvaluationSummary = Field(..., alias="resumen")

    model_config = _result_config


class DisabilityCaseData(BaseModel):
    ages: List[float] = Field(..., alias="edades")
    disabilities: List[float] = Field(..., alias="discapacidades")
    single_parent: bool = Field(..., alias="es_monoparental")

    model_config = _result_config


class DisabilityCaseResult(BaseModel):
    """Quick evaluation of one or two children with disability percentages"""
    analyzed_data: DisabilityCaseData = Field(..., alias="datos_analizados")
    evaluations: List[EvaluationResult] = Field(default_factory=list, alias="evaluaciones")

    model_config = _result_config
