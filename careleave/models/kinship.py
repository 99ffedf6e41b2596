"""
Pydantic models and static tables for kinship classification
"""
from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field


class KinshipType(str, Enum):
    """Line of the family relation"""
    ASCENDANT = "ascendiente"
    DESCENDANT = "descendiente"
    COLLATERAL = "colateral"
    AFFINE = "afin"


class RelationKind(str, Enum):
    """Closed set of family relations the validator knows about.

    Values are the normalized relation names.
    """
    # First degree
    PADRE = "padre"
    MADRE = "madre"
    HIJO = "hijo"
    HIJA = "hija"
    CONYUGE = "conyuge"
    ESPOSO = "esposo"
    ESPOSA = "esposa"
    PAREJA = "pareja"
    PAREJA_DE_HECHO = "pareja_de_hecho"

    # Known but not admitted
    ABUELO = "abuelo"
    ABUELA = "abuela"
    HERMANO = "hermano"
    HERMANA = "hermana"
    NIETO = "nieto"
    NIETA = "nieta"
    TIO = "tio"
    TIA = "tia"
    PRIMO = "primo"
    PRIMA = "prima"


class KinshipRecord(BaseModel):
    """Degree and line of a known relation"""
    grade: Literal[0, 1, 2, 3, 4]
    type: KinshipType
    is_first_degree: bool

    model_config = ConfigDict(frozen=True)


def _record(grade, kinship_type, is_first_degree):
    return KinshipRecord(grade=grade, type=kinship_type, is_first_degree=is_first_degree)


# Spouse and partner variants sit at grade 0
FIRST_DEGREE_RELATIONS: Mapping[RelationKind, KinshipRecord] = MappingProxyType({
    RelationKind.PADRE: _record(1, KinshipType.ASCENDANT, True),
    RelationKind.MADRE: _record(1, KinshipType.ASCENDANT, True),
    RelationKind.HIJO: _record(1, KinshipType.DESCENDANT, True),
    RelationKind.HIJA: _record(1, KinshipType.DESCENDANT, True),
    RelationKind.CONYUGE: _record(0, KinshipType.AFFINE, True),
    RelationKind.ESPOSO: _record(0, KinshipType.AFFINE, True),
    RelationKind.ESPOSA: _record(0, KinshipType.AFFINE, True),
    RelationKind.PAREJA: _record(0, KinshipType.AFFINE, True),
    RelationKind.PAREJA_DE_HECHO: _record(0, KinshipType.AFFINE, True),
})

NON_ELIGIBLE_RELATIONS: Mapping[RelationKind, KinshipRecord] = MappingProxyType({
    RelationKind.ABUELO: _record(2, KinshipType.ASCENDANT, False),
    RelationKind.ABUELA: _record(2, KinshipType.ASCENDANT, False),
    RelationKind.HERMANO: _record(2, KinshipType.COLLATERAL, False),
    RelationKind.HERMANA: _record(2, KinshipType.COLLATERAL, False),
    RelationKind.NIETO: _record(2, KinshipType.DESCENDANT, False),
    RelationKind.NIETA: _record(2, KinshipType.DESCENDANT, False),
    RelationKind.TIO: _record(3, KinshipType.COLLATERAL, False),
    RelationKind.TIA: _record(3, KinshipType.COLLATERAL, False),
    RelationKind.PRIMO: _record(4, KinshipType.COLLATERAL, False),
    RelationKind.PRIMA: _record(4, KinshipType.COLLATERAL, False),
})


class KinshipVerdict(BaseModel):
    """Outcome of validating a family relation"""
    is_valid: bool = Field(..., alias="es_valido", description="Whether the relation qualifies")
    is_first_degree: bool = Field(..., alias="es_primer_grado", description="Whether it is first degree")
    grade: Optional[int] = Field(None, alias="grado", description="Kinship grade, null if unrecognized")
    type: Optional[KinshipType] = Field(None, alias="tipo", description="Kinship line, null if unrecognized")
    normalized_relation: str = Field(..., alias="relacion", description="Relation after normalization")
    message: str = Field(..., alias="mensaje", description="Explanation of the verdict")

    @property
    def is_recognized(self) -> bool:
        return self.grade is not None

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        serialize_by_alias=True,
        json_schema_extra={
            "example": {
                "es_valido": True,
                "es_primer_grado": True,
                "grado": 1,
                "tipo": "ascendiente",
                "relacion": "madre",
                "mensaje": "Parentesco VÁLIDO: ascendiente de 1º grado"
            }
        }
    )


class KinshipRequest(BaseModel):
    """Request to validate a family relation"""
    relation: str = Field(..., alias="relacion", description="Relation (e.g. madre, padre, hijo, conyuge)")

    model_config = ConfigDict(
        validate_by_name=True,
        json_schema_extra={"example": {"relacion": "pareja de hecho"}}
    )
