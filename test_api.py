"""
Tests for the HTTP API
"""
import pytest
from fastapi.testclient import TestClient

from careleave.config import settings
from careleave.main import app

API = settings.api_prefix


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestServiceEndpoints:
    """Test cases for the service-level endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "version" in response.json()

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "careleave-backend"}

    def test_current_order(self, client):
        response = client.get(f"{API}/orders/current")

        assert response.status_code == 200
        assert response.json()["year"] == settings.subsidy_order_year

    def test_policy(self, client):
        response = client.get(f"{API}/orders/policy")

        assert response.status_code == 200
        assert response.json()["hospitalization_blocking"] == settings.hospitalization_blocking


class TestKinshipEndpoint:
    """Test cases for kinship validation over HTTP."""

    def test_valid_relation(self, client):
        response = client.post(f"{API}/kinship/validate", json={"relacion": "Madre"})

        assert response.status_code == 200
        data = response.json()
        assert data["es_valido"] is True
        assert data["grado"] == 1
        assert data["tipo"] == "ascendiente"

    def test_unrecognized_relation(self, client):
        response = client.post(f"{API}/kinship/validate", json={"relacion": "vecino"})

        assert response.status_code == 200
        assert response.json()["grado"] is None

    def test_missing_relation(self, client):
        response = client.post(f"{API}/kinship/validate", json={})

        assert response.status_code == 422


class TestScenarioEndpoints:
    """Test cases for single-scenario evaluation over HTTP."""

    def test_list_scenarios(self, client):
        response = client.get(f"{API}/scenarios")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 6
        assert data[0]["supuesto"] == "cuidado_familiar_primer_grado"
        assert data[0]["letra"] == "A"

    def test_evaluate_with_string_parameters(self, client):
        response = client.post(f"{API}/scenarios/cuidado_tercer_hijo_sucesivos", json={
            "numeroHijos": "3",
            "edadesHijos": "[0, 2, 5]",
            "incluyeRecienNacido": "true"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["es_elegible"] is True
        assert data["supuesto"] == "cuidado_tercer_hijo_sucesivos"

    def test_fractional_child_count(self, client):
        response = client.post(f"{API}/scenarios/cuidado_tercer_hijo_sucesivos", json={
            "numeroHijos": "2.5",
            "edadesHijos": "[0, 2]",
            "incluyeRecienNacido": "true"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["es_elegible"] is False
        assert "Se requieren al menos 3 hijos. Actual: 2.5" in data["errores"]

    def test_unknown_scenario(self, client):
        response = client.post(f"{API}/scenarios/cuidado_desconocido", json={})

        assert response.status_code == 404

    def test_invalid_scenario_data(self, client):
        response = client.post(f"{API}/scenarios/cuidado_familiar_primer_grado", json={})

        assert response.status_code == 400

    def test_compatibility(self, client):
        response = client.post(f"{API}/compatibility", json={"tieneOtrasAyudasPublicas": "true"})

        assert response.status_code == 200
        data = response.json()
        assert data["es_compatible"] is False
        assert data["puede_solicitar"] is False


class TestEvaluationEndpoints:
    """Test cases for the complete evaluation endpoints."""

    def test_typed_evaluation(self, client):
        response = client.post(f"{API}/evaluation", json={
            "supuestos": [
                {
                    "supuesto": "cuidado_familia_monoparental",
                    "esMonoparental": True,
                    "numeroHijos": 1,
                    "edadesHijos": [8],
                    "tieneDiscapacidad": [40]
                }
            ],
            "situacionActual": {"tieneAyudaDependencia": True, "importeAyudaDependencia": 300}
        })

        assert response.status_code == 200
        data = response.json()
        assert data["mejor_opcion"]["supuesto"] == "cuidado_familia_monoparental"
        assert data["resumen"]["total_supuestos_elegibles"] == 1
        assert data["compatibilidades"]["limitaciones"] == [
            "La suma de ambas ayudas no puede superar el importe de la mayor (300€)"
        ]

    def test_duplicate_scenarios(self, client):
        sub_request = {"supuesto": "cuidado_tercer_hijo_sucesivos", "numeroHijos": 3}

        response = client.post(f"{API}/evaluation", json={"supuestos": [sub_request, sub_request]})

        assert response.status_code == 422

    def test_flat_evaluation(self, client):
        response = client.post(f"{API}/evaluation/flat", json={
            "supuestoB_numeroHijos": "3",
            "supuestoB_edadesHijos": "[0, 2, 5]",
            "supuestoB_incluyeRecienNacido": "true",
            "tieneOtrasAyudasPublicas": "true"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["resumen"] == {"total_supuestos_elegibles": 1, "puede_solicitar": False}

    def test_flat_evaluation_with_percentage_over_one_hundred(self, client):
        response = client.post(f"{API}/evaluation/flat", json={
            "supuestoB_numeroHijos": "3",
            "supuestoB_edadesHijos": "[0, 2, 5]",
            "supuestoB_incluyeRecienNacido": "true",
            "supuestoE_esMonoparental": "true",
            "supuestoE_edadesHijos": "[8]",
            "supuestoE_tieneDiscapacidad": "[150]"
        })

        assert response.status_code == 200
        data = response.json()
        assert [r["supuesto"] for r in data["supuestos_elegibles"]] == [
            "cuidado_tercer_hijo_sucesivos",
            "cuidado_familia_monoparental",
        ]
        assert data["mejor_opcion"]["supuesto"] == "cuidado_tercer_hijo_sucesivos"

    def test_disability_case(self, client):
        response = client.post(f"{API}/evaluation/disability-case", json={
            "hijo1_edad": "8",
            "hijo1_discapacidad": "40",
            "es_monoparental": "true"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["datos_analizados"]["es_monoparental"] is True
        assert data["evaluaciones"][0]["es_elegible"] is True

    def test_disability_case_requires_first_age(self, client):
        response = client.post(f"{API}/evaluation/disability-case", json={"hijo1_discapacidad": "40"})

        assert response.status_code == 400
