"""
Pydantic models for scenario (supuesto) inputs
"""
from enum import Enum
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field


class ScenarioId(str, Enum):
    """Named qualifying scenarios of the subsidy.

    Scenario C has two competing legal definitions; both are modelled as
    separate scenarios so callers pick one explicitly.
    """
    FIRST_DEGREE_CARE = "cuidado_familiar_primer_grado"
    THIRD_CHILD = "cuidado_tercer_hijo_sucesivos"
    SECOND_CHILD_DISABILITY = "cuidado_segundo_hijo_discapacidad"
    ADOPTION_FOSTERING = "cuidado_adopcion_acogimiento"
    MULTIPLE_BIRTH = "cuidado_partos_multiples"
    SINGLE_PARENT = "cuidado_familia_monoparental"

    @property
    def letter(self) -> str:
        return SCENARIO_LETTERS[self]


SCENARIO_LETTERS = {
    ScenarioId.FIRST_DEGREE_CARE: "A",
    ScenarioId.THIRD_CHILD: "B",
    ScenarioId.SECOND_CHILD_DISABILITY: "C",
    ScenarioId.ADOPTION_FOSTERING: "C",
    ScenarioId.MULTIPLE_BIRTH: "D",
    ScenarioId.SINGLE_PARENT: "E",
}

# Fixed evaluation order
SCENARIO_ORDER = (
    ScenarioId.FIRST_DEGREE_CARE,
    ScenarioId.THIRD_CHILD,
    ScenarioId.SECOND_CHILD_DISABILITY,
    ScenarioId.ADOPTION_FOSTERING,
    ScenarioId.MULTIPLE_BIRTH,
    ScenarioId.SINGLE_PARENT,
)

_input_config = ConfigDict(frozen=True, validate_by_name=True, extra="ignore")


class FirstDegreeCareInput(BaseModel):
    """Scenario A: care of a first-degree relative with grave illness or accident"""
    scenario: Literal["cuidado_familiar_primer_grado"] = Field("cuidado_familiar_primer_grado", alias="supuesto")
    relation: str = Field(..., alias="relacionFamiliar", description="Relation of the cared-for person")
    has_grave_illness: bool = Field(False, alias="tieneEnfermedadGrave")
    has_grave_accident: bool = Field(False, alias="tieneAccidenteGrave")
    required_hospitalization: bool = Field(False, alias="requiereHospitalizacion")
    continuous_care: bool = Field(False, alias="requiereCuidadoContinuo")
    permanent_care: bool = Field(False, alias="requiereCuidadoPermanente")
    direct_care: bool = Field(False, alias="requiereCuidadoDirecto")

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "supuesto": "cuidado_familiar_primer_grado",
                "relacionFamiliar": "madre",
                "tieneEnfermedadGrave": True,
                "requiereHospitalizacion": True,
                "requiereCuidadoContinuo": True,
                "requiereCuidadoPermanente": True,
                "requiereCuidadoDirecto": True
            }
        }
    )


class ThirdChildInput(BaseModel):
    """Scenario B: third or later child"""
    scenario: Literal["cuidado_tercer_hijo_sucesivos"] = Field("cuidado_tercer_hijo_sucesivos", alias="supuesto")
    num_children: float = Field(0, alias="numeroHijos")
    children_ages: List[float] = Field(default_factory=list, alias="edadesHijos")
    includes_newborn: bool = Field(False, alias="incluyeRecienNacido")

    model_config = _input_config


class ChildrenInput(BaseModel):
    """Children with optional disability percentages and dependency flags"""
    num_children: float = Field(0, alias="numeroHijos")
    children_ages: List[float] = Field(default_factory=list, alias="edadesHijos")
    disabilities: List[float] = Field(default_factory=list, alias="tieneDiscapacidad")
    dependencies: List[bool] = Field(default_factory=list, alias="tieneDependencia")

    model_config = _input_config


class SecondChildDisabilityInput(ChildrenInput):
    """Scenario C (age-based definition): second child, one with disability or dependency"""
    scenario: Literal["cuidado_segundo_hijo_discapacidad"] = Field(
        "cuidado_segundo_hijo_discapacidad", alias="supuesto"
    )


class AdoptionFosteringInput(BaseModel):
    """Scenario C (duration-based definition): adoption or fostering of minors"""
    scenario: Literal["cuidado_adopcion_acogimiento"] = Field("cuidado_adopcion_acogimiento", alias="supuesto")
    is_adoption: bool = Field(False, alias="esAdopcion")
    is_fostering: bool = Field(False, alias="esAcogimiento")
    num_minors: float = Field(0, alias="numeroMenores")
    duration_months: float = Field(0, alias="duracionMeses")
    duration_documented: bool = Field(False, alias="duracionAcreditada")

    model_config = _input_config


class MultipleBirthInput(ChildrenInput):
    """Scenario D: multiple simultaneous birth, adoption or fostering"""
    scenario: Literal["cuidado_partos_multiples"] = Field("cuidado_partos_multiples", alias="supuesto")
    is_multiple_birth: bool = Field(False, alias="esPartoMultiple")
    is_multiple_adoption: bool = Field(False, alias="esAdopcionMultiple")
    is_multiple_fostering: bool = Field(False, alias="esAcogimientoMultiple")


class SingleParentInput(ChildrenInput):
    """Scenario E: single-parent household, any child ordinal"""
    scenario: Literal["cuidado_familia_monoparental"] = Field("cuidado_familia_monoparental", alias="supuesto")
    is_single_parent: bool = Field(False, alias="esMonoparental")
    is_single_parent_situation: bool = Field(False, alias="esSituacionMonoparentalidad")


SCENARIO_INPUTS = {
    ScenarioId.FIRST_DEGREE_CARE: FirstDegreeCareInput,
    ScenarioId.THIRD_CHILD: ThirdChildInput,
    ScenarioId.SECOND_CHILD_DISABILITY: SecondChildDisabilityInput,
    ScenarioId.ADOPTION_FOSTERING: AdoptionFosteringInput,
    ScenarioId.MULTIPLE_BIRTH: MultipleBirthInput,
    ScenarioId.SINGLE_PARENT: SingleParentInput,
}
