"""
Tests for kinship validation and the child age ceiling
"""
import pytest

from careleave.models.kinship import (
    KinshipType,
    RelationKind,
    FIRST_DEGREE_RELATIONS,
    NON_ELIGIBLE_RELATIONS
)
from careleave.models.order import EvaluationPolicy
from careleave.services.kinship_service import KinshipValidator
from careleave.services.age_policy import AgeThresholdPolicy


@pytest.fixture
def validator():
    return KinshipValidator()


class TestKinshipValidator:
    """Test cases for KinshipValidator."""

    @pytest.mark.parametrize("relation", [
        "Pareja De Hecho",
        "pareja_de_hecho",
        "pareja-de-hecho",
        "  PAREJA   de-_hecho  ",
    ])
    def test_spelling_variants_give_identical_verdicts(self, validator, relation):
        assert validator.validate(relation) == validator.validate("pareja de hecho")
        assert validator.validate(relation).normalized_relation == "pareja_de_hecho"

    def test_mother_is_first_degree(self, validator):
        verdict = validator.validate("madre")

        assert verdict.is_valid is True
        assert verdict.is_first_degree is True
        assert verdict.grade == 1
        assert verdict.type == KinshipType.ASCENDANT

    def test_spouse_is_grade_zero(self, validator):
        verdict = validator.validate("Cónyuge")

        assert verdict.is_valid is True
        assert verdict.grade == 0
        assert verdict.type == KinshipType.AFFINE
        assert verdict.normalized_relation == "conyuge"
        assert "(cónyuge/pareja)" in verdict.message

    def test_sibling_is_known_invalid(self, validator):
        verdict = validator.validate("hermano")

        assert verdict.is_valid is False
        assert verdict.is_first_degree is False
        assert verdict.grade == 2
        assert verdict.type == KinshipType.COLLATERAL
        assert verdict.is_recognized is True
        assert "Solo se admiten familiares de primer grado" in verdict.message

    def test_cousin_is_fourth_degree(self, validator):
        assert validator.validate("Prima").grade == 4

    def test_unmapped_relation_is_unrecognized(self, validator):
        verdict = validator.validate("tio_abuelo")

        assert verdict.is_valid is False
        assert verdict.is_first_degree is False
        assert verdict.grade is None
        assert verdict.type is None
        assert verdict.is_recognized is False
        assert "no reconocida" in verdict.message

    def test_empty_relation_does_not_raise(self, validator):
        verdict = validator.validate("   ")

        assert verdict.is_valid is False
        assert verdict.grade is None

    def test_serializes_with_wire_names(self, validator):
        data = validator.validate("hijo").model_dump(mode="json")

        assert data == {
            "es_valido": True,
            "es_primer_grado": True,
            "grado": 1,
            "tipo": "descendiente",
            "relacion": "hijo",
            "mensaje": "Parentesco VÁLIDO: descendiente de 1º grado"
        }


class TestRelationTables:
    """Test cases for the static kinship tables."""

    def test_tables_cover_every_relation_once(self):
        first = set(FIRST_DEGREE_RELATIONS)
        invalid = set(NON_ELIGIBLE_RELATIONS)

        assert first.isdisjoint(invalid)
        assert first | invalid == set(RelationKind)

    def test_first_degree_flags(self):
        assert all(record.is_first_degree for record in FIRST_DEGREE_RELATIONS.values())
        assert not any(record.is_first_degree for record in NON_ELIGIBLE_RELATIONS.values())

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            FIRST_DEGREE_RELATIONS[RelationKind.TIO] = NON_ELIGIBLE_RELATIONS[RelationKind.TIO]


class TestAgeThresholdPolicy:
    """Test cases for AgeThresholdPolicy."""

    @pytest.fixture
    def age_policy(self):
        return AgeThresholdPolicy()

    def test_base_limit_without_conditions(self, age_policy):
        assert age_policy.limit([], []) == 6
        assert age_policy.limit([0, 32.9], [False]) == 6

    def test_disability_at_threshold_extends_limit(self, age_policy):
        assert age_policy.limit([33], []) == 9

    def test_dependency_extends_limit(self, age_policy):
        assert age_policy.limit([], [False, True]) == 9

    def test_custom_policy_thresholds(self):
        age_policy = AgeThresholdPolicy(EvaluationPolicy(disability_threshold=50, extended_age_limit=12))

        assert age_policy.limit([40], []) == 6
        assert age_policy.limit([50], []) == 12
