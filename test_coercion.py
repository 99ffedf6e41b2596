"""
Tests for loose parameter coercion
"""
import pytest
from pydantic import ValidationError

from careleave.models.scenario import ScenarioId, ThirdChildInput, SingleParentInput
from careleave.utils.coercion import (
    parse_boolean,
    parse_number,
    parse_array,
    build_scenario_input,
    build_situation,
    build_composite_request
)


class TestParsers:
    """Test cases for the scalar and array parsers."""

    @pytest.mark.parametrize("value,expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("TRUE", True),
        (" False ", False),
        ("yes", None),
        (1, None),
        (None, None),
    ])
    def test_parse_boolean(self, value, expected):
        assert parse_boolean(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("3.5", 3.5),
        (4, 4.0),
        (" 12 ", 12.0),
        ("abc", None),
        (True, None),
        (float("nan"), None),
        ("inf", None),
        (None, None),
    ])
    def test_parse_number(self, value, expected):
        assert parse_number(value) == expected

    def test_parse_array_from_json_string(self):
        assert parse_array("[1, 2]", parse_number) == [1.0, 2.0]

    def test_parse_array_drops_unparseable_items(self):
        assert parse_array('[1, "x", 3]', parse_number) == [1.0, 3.0]

    def test_parse_array_of_booleans(self):
        assert parse_array([True, "false", "maybe"], parse_boolean) == [True, False]

    @pytest.mark.parametrize("value", ["not json", '{"a": 1}', 5, None])
    def test_parse_array_rejects_non_arrays(self, value):
        assert parse_array(value, parse_number) is None


class TestBuildScenarioInput:
    """Test cases for building typed scenario inputs."""

    def test_string_parameters(self):
        data = build_scenario_input(ScenarioId.THIRD_CHILD, {
            "numeroHijos": "3",
            "edadesHijos": "[0, 2, 5]",
            "incluyeRecienNacido": "true"
        })

        assert isinstance(data, ThirdChildInput)
        assert data.num_children == 3
        assert data.children_ages == [0, 2, 5]
        assert data.includes_newborn is True

    def test_unparseable_value_falls_back_to_default(self):
        data = build_scenario_input(ScenarioId.THIRD_CHILD, {
            "numeroHijos": 3,
            "incluyeRecienNacido": "maybe"
        })

        assert data.includes_newborn is False

    def test_attribute_names_are_accepted(self):
        data = build_scenario_input(ScenarioId.SINGLE_PARENT, {
            "is_single_parent": "true",
            "children_ages": [8],
            "disabilities": ["40"]
        })

        assert isinstance(data, SingleParentInput)
        assert data.is_single_parent is True
        assert data.disabilities == [40]

    def test_missing_relation_is_rejected(self):
        with pytest.raises(ValidationError):
            build_scenario_input(ScenarioId.FIRST_DEGREE_CARE, {"tieneEnfermedadGrave": "true"})

    def test_situation(self):
        situation = build_situation({
            "tieneAyudaDependencia": "true",
            "importeAyudaDependencia": "300"
        })

        assert situation.has_dependency_aid is True
        assert situation.dependency_aid_amount == 300
        assert situation.has_other_public_aid is False


class TestBuildCompositeRequest:
    """Test cases for the flat prefixed parameter set."""

    def test_builds_supplied_scenarios_and_situation(self):
        request = build_composite_request({
            "supuestoA_relacionFamiliar": "madre",
            "supuestoA_tieneEnfermedadGrave": "true",
            "supuestoE_esMonoparental": "true",
            "supuestoE_edadesHijos": "[8]",
            "supuestoE_tieneDiscapacidad": "[40]",
            "tieneOtrasAyudasPublicas": "false"
        })

        assert [r.scenario for r in request.scenarios] == [
            ScenarioId.FIRST_DEGREE_CARE.value,
            ScenarioId.SINGLE_PARENT.value,
        ]
        assert request.get(ScenarioId.FIRST_DEGREE_CARE).has_grave_illness is True
        assert request.get(ScenarioId.SINGLE_PARENT).disabilities == [40]
        assert request.situation is not None
        assert request.situation.has_other_public_aid is False

    def test_empty_relation_does_not_trigger_first_degree_care(self):
        request = build_composite_request({"supuestoA_relacionFamiliar": ""})

        assert request.scenarios == []
        assert request.situation is None

    def test_prefixes_keep_scenarios_apart(self):
        request = build_composite_request({
            "supuestoB_numeroHijos": "3",
            "supuestoD_numeroHijos": "2",
            "supuestoD_esPartoMultiple": "true"
        })

        assert request.get(ScenarioId.THIRD_CHILD).num_children == 3
        assert request.get(ScenarioId.MULTIPLE_BIRTH).num_children == 2
        assert request.get(ScenarioId.SECOND_CHILD_DISABILITY) is None

    def test_adoption_prefix(self):
        request = build_composite_request({
            "supuestoCAdopcion_esAcogimiento": "true",
            "supuestoCAdopcion_duracionMeses": "18"
        })

        data = request.get(ScenarioId.ADOPTION_FOSTERING)
        assert data.is_fostering is True
        assert data.duration_months == 18
