"""
Evaluators for each qualifying scenario (supuesto) of the subsidy
"""
import logging
from typing import Dict, List, Optional, Sequence

from ..models.scenario import (
    ScenarioId,
    FirstDegreeCareInput,
    ThirdChildInput,
    SecondChildDisabilityInput,
    AdoptionFosteringInput,
    MultipleBirthInput,
    SingleParentInput
)
from ..models.evaluation import EvaluationResult
from ..models.order import EvaluationPolicy, SubsidyOrder
from .age_policy import AgeThresholdPolicy
from .kinship_service import KinshipValidator, kinship_validator as default_kinship_validator

logger = logging.getLogger(__name__)

DESCRIPTIONS = {
    ScenarioId.FIRST_DEGREE_CARE: "Supuesto A: Cuidado de familiares de primer grado con enfermedad/accidente grave",
    ScenarioId.THIRD_CHILD: "Supuesto B: Cuidado del tercer hijo o sucesivos (2 menores de 6 años)",
    ScenarioId.SECOND_CHILD_DISABILITY: (
        "Supuesto C: Segundo hijo con ambos menores de 9 años y uno con discapacidad/dependencia"
    ),
    ScenarioId.ADOPTION_FOSTERING: "Supuesto C: Adopción o acogimiento de menores de duración superior a un año",
    ScenarioId.MULTIPLE_BIRTH: "Supuesto D: Parto, adopción o acogimiento múltiple",
    ScenarioId.SINGLE_PARENT: "Supuesto E: Familia monoparental para cualquier hijo",
}


def _format_number(value: float):
    return int(value) if float(value).is_integer() else value


def _ages_warnings(num_children: float, ages: Sequence[float]) -> List[str]:
    """Advisory notes about the supplied ages; never affect eligibility"""
    if not ages:
        return ["No se han indicado las edades de los hijos"]
    if num_children and len(ages) != num_children:
        return [
            f"El número de edades indicadas ({len(ages)}) no coincide "
            f"con el número de hijos ({_format_number(num_children)})"
        ]
    return []


class ScenarioEvaluator:
    """Runs the eligibility rules of every scenario against its typed input"""

    def __init__(
        self,
        order: SubsidyOrder,
        policy: Optional[EvaluationPolicy] = None,
        kinship_validator: Optional[KinshipValidator] = None
    ):
        self.order = order
        self.policy = policy or EvaluationPolicy()
        self.kinship_validator = kinship_validator or default_kinship_validator
        self.age_policy = AgeThresholdPolicy(self.policy)
        self.evaluators = {
            ScenarioId.FIRST_DEGREE_CARE: self.evaluate_first_degree_care,
            ScenarioId.THIRD_CHILD: self.evaluate_third_child,
            ScenarioId.SECOND_CHILD_DISABILITY: self.evaluate_second_child_disability,
            ScenarioId.ADOPTION_FOSTERING: self.evaluate_adoption_fostering,
            ScenarioId.MULTIPLE_BIRTH: self.evaluate_multiple_birth,
            ScenarioId.SINGLE_PARENT: self.evaluate_single_parent,
        }

    def evaluate(self, request) -> EvaluationResult:
        """Dispatch a tagged scenario input to its evaluator"""
        return self.evaluators[ScenarioId(request.scenario)](request)

    def _result(
        self,
        scenario: ScenarioId,
        validations: Dict[str, bool],
        errors: List[str],
        warnings: Optional[List[str]] = None,
        **extra
    ) -> EvaluationResult:
        eligible = all(validations.values())
        logger.debug(f"Scenario {scenario.value}: eligible={eligible} validations={validations}")
        return EvaluationResult(
            scenario=scenario,
            eligible=eligible,
            validations=validations,
            errors=errors,
            warnings=warnings or [],
            description=DESCRIPTIONS[scenario],
            monthly_amount=self.order.amount_for(scenario),
            **extra
        )

    def evaluate_first_degree_care(self, data: FirstDegreeCareInput) -> EvaluationResult:
        """
        Scenario A: care of a first-degree relative

        Requires a first-degree relation, grave illness or accident, hospitalization
        (blocking or advisory depending on policy) and care that is direct,
        continuous and permanent at the same time.
        """
        validations = {}
        errors = []
        warnings = []

        kinship = self.kinship_validator.validate(data.relation)
        validations["parentesco_valido"] = kinship.is_first_degree
        if not kinship.is_first_degree:
            errors.append(kinship.message)

        validations["enfermedad_o_accidente_grave"] = data.has_grave_illness or data.has_grave_accident
        if not validations["enfermedad_o_accidente_grave"]:
            errors.append("Se requiere enfermedad o accidente grave del familiar")

        if self.policy.hospitalization_blocking:
            validations["requiere_hospitalizacion"] = data.required_hospitalization
            if not data.required_hospitalization:
                errors.append("Se requiere que el familiar haya precisado hospitalización")
        elif not data.required_hospitalization:
            warnings.append("No consta hospitalización del familiar")

        validations["cuidado_cualificado"] = data.direct_care and data.continuous_care and data.permanent_care
        if not validations["cuidado_cualificado"]:
            missing = []
            if not data.direct_care:
                missing.append("directo")
            if not data.continuous_care:
                missing.append("continuo")
            if not data.permanent_care:
                missing.append("permanente")
            errors.append(f"El cuidado debe ser {', '.join(missing)}")

        return self._result(
            ScenarioId.FIRST_DEGREE_CARE, validations, errors, warnings, kinship=kinship
        )

    def evaluate_third_child(self, data: ThirdChildInput) -> EvaluationResult:
        """Scenario B: three or more children, two of them under the base ceiling, newborn included"""
        limit = self.policy.base_age_limit
        errors = []

        validations = {"tiene_tres_o_mas_hijos": data.num_children >= 3}
        if not validations["tiene_tres_o_mas_hijos"]:
            errors.append(f"Se requieren al menos 3 hijos. Actual: {_format_number(data.num_children)}")

        under_limit = sum(1 for age in data.children_ages if age < limit)
        validations["al_menos_dos_menores_6_años"] = under_limit >= 2
        if not validations["al_menos_dos_menores_6_años"]:
            errors.append(
                f"Se requieren al menos 2 menores de {limit} años (incluido recién nacido). Actual: {under_limit}"
            )

        validations["incluye_recien_nacido"] = data.includes_newborn
        if not data.includes_newborn:
            errors.append("Debe incluir el recién nacido en el cálculo")

        return self._result(
            ScenarioId.THIRD_CHILD,
            validations,
            errors,
            _ages_warnings(data.num_children, data.children_ages),
            age_analysis={
                "total_hijos": _format_number(data.num_children),
                "menores_6_años": under_limit,
                "edades": list(data.children_ages)
            }
        )

    def evaluate_second_child_disability(self, data: SecondChildDisabilityInput) -> EvaluationResult:
        """
        Scenario C (age-based): exactly two children under the extended ceiling,
        one with disability or dependency

        The ceiling is always the extended one, with or without disability.
        """
        has_disability = self.age_policy.has_qualifying_disability(data.disabilities)
        has_dependency = self.age_policy.has_recognized_dependency(data.dependencies)
        limit = self.policy.extended_age_limit
        errors = []

        validations = {"tiene_dos_hijos": data.num_children == 2}
        if not validations["tiene_dos_hijos"]:
            errors.append(
                f"Este supuesto requiere exactamente 2 hijos. Actual: {_format_number(data.num_children)}"
            )

        validations["ambos_menores_9_años"] = (
            len(data.children_ages) == 2 and all(age < limit for age in data.children_ages)
        )
        if not validations["ambos_menores_9_años"]:
            errors.append(f"Ambos hijos deben ser menores de {limit} años")

        validations["uno_con_discapacidad_33_o_dependencia"] = has_disability or has_dependency
        if not validations["uno_con_discapacidad_33_o_dependencia"]:
            errors.append(
                f"Uno de los hijos debe tener discapacidad igual o superior al "
                f"{_format_number(self.policy.disability_threshold)}% y/o dependencia reconocida"
            )

        return self._result(
            ScenarioId.SECOND_CHILD_DISABILITY,
            validations,
            errors,
            _ages_warnings(data.num_children, data.children_ages),
            age_analysis={
                "limite_edad_aplicable": limit,
                "edades_hijos": list(data.children_ages)
            },
            disability_analysis={
                "discapacidades": list(data.disabilities),
                "dependencias": list(data.dependencies),
                "cumple_criterio_discapacidad": has_disability,
                "cumple_criterio_dependencia": has_dependency
            }
        )

    def evaluate_adoption_fostering(self, data: AdoptionFosteringInput) -> EvaluationResult:
        """Scenario C (duration-based): adoption or fostering lasting more than the minimum period"""
        minimum = self.policy.minimum_foster_months
        errors = []

        validations = {"es_adopcion_o_acogimiento": data.is_adoption or data.is_fostering}
        if not validations["es_adopcion_o_acogimiento"]:
            errors.append("Se requiere adopción o acogimiento de menores")

        validations["al_menos_un_menor"] = data.num_minors >= 1
        if not validations["al_menos_un_menor"]:
            errors.append(f"Se requiere al menos un menor. Actual: {_format_number(data.num_minors)}")

        validations["duracion_superior_un_año"] = data.duration_months > minimum
        if not validations["duracion_superior_un_año"]:
            errors.append(
                f"La duración debe ser superior a {minimum} meses. "
                f"Actual: {_format_number(data.duration_months)}"
            )

        validations["duracion_acreditada"] = data.duration_documented
        if not data.duration_documented:
            errors.append("La duración debe estar acreditada documentalmente")

        return self._result(ScenarioId.ADOPTION_FOSTERING, validations, errors)

    def _age_ceiling_analysis(self, disabilities, dependencies, ages):
        limit = self.age_policy.limit(disabilities, dependencies)
        return limit, {
            "limite_edad_aplicable": limit,
            "tiene_discapacidad_dependencia": self.age_policy.has_qualifying_condition(disabilities, dependencies),
            "edades_hijos": list(ages)
        }

    def evaluate_multiple_birth(self, data: MultipleBirthInput) -> EvaluationResult:
        """Scenario D: multiple birth, adoption or fostering with every child under the ceiling"""
        limit, analysis = self._age_ceiling_analysis(data.disabilities, data.dependencies, data.children_ages)
        errors = []

        validations = {
            "es_parto_adopcion_acogimiento_multiple": (
                data.is_multiple_birth or data.is_multiple_adoption or data.is_multiple_fostering
            )
        }
        if not validations["es_parto_adopcion_acogimiento_multiple"]:
            errors.append("Se requiere parto, adopción o acogimiento múltiple")

        validations["cumple_limite_edad"] = all(age < limit for age in data.children_ages)
        if not validations["cumple_limite_edad"]:
            errors.append(f"Todos los hijos deben ser menores de {limit} años")

        return self._result(
            ScenarioId.MULTIPLE_BIRTH,
            validations,
            errors,
            _ages_warnings(data.num_children, data.children_ages),
            age_analysis=analysis
        )

    def evaluate_single_parent(self, data: SingleParentInput) -> EvaluationResult:
        """Scenario E: accredited or situational single parent, every child under the ceiling"""
        limit, analysis = self._age_ceiling_analysis(data.disabilities, data.dependencies, data.children_ages)
        errors = []

        validations = {
            "es_familia_monoparental": data.is_single_parent or data.is_single_parent_situation
        }
        if not validations["es_familia_monoparental"]:
            errors.append("Se requiere acreditación como familia monoparental según Ley Foral 5/2019")

        validations["cumple_limite_edad"] = all(age < limit for age in data.children_ages)
        if not validations["cumple_limite_edad"]:
            errors.append(f"Todos los hijos deben ser menores de {limit} años")

        return self._result(
            ScenarioId.SINGLE_PARENT,
            validations,
            errors,
            _ages_warnings(data.num_children, data.children_ages),
            age_analysis=analysis
        )
