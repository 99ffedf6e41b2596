"""
Compatibility of the subsidy with other public aid
"""
import logging

from ..models.evaluation import CompatibilitySituation, CompatibilityResult

logger = logging.getLogger(__name__)


def _format_amount(value: float) -> str:
    return f"{int(value)}" if float(value).is_integer() else f"{value:.2f}"


class CompatibilityChecker:
    """Checks the applicant's current aid against the subsidy's incompatibility rules"""

    def check(self, situation: CompatibilitySituation) -> CompatibilityResult:
        """
        Check compatibility with other public aid

        Args:
            situation: Aid the applicant currently receives

        Returns:
            CompatibilityResult; compatible only when no incompatibility was recorded
        """
        incompatibilities = []
        compatibilities = []
        limitations = []

        if situation.has_other_public_aid:
            incompatibilities.append("Otras ayudas públicas para la misma finalidad")

        if situation.has_social_security_benefit:
            incompatibilities.append(
                "Prestaciones de Seguridad Social por cuidado de menores con cáncer/enfermedad grave"
            )

        if situation.has_dependency_aid:
            compatibilities.append("Ayudas a la dependencia")
            if situation.dependency_aid_amount > 0:
                cap = max(situation.other_aid_amount, situation.dependency_aid_amount)
                limitations.append(
                    f"La suma de ambas ayudas no puede superar el importe de la mayor ({_format_amount(cap)}€)"
                )

        if situation.has_caregiver_agreement:
            compatibilities.append("Convenio Especial para Cuidadores no profesionales de la Seguridad Social")

        is_compatible = len(incompatibilities) == 0
        if not is_compatible:
            logger.debug(f"Incompatible aid found: {incompatibilities}")

        return CompatibilityResult(
            is_compatible=is_compatible,
            incompatibilities=incompatibilities,
            compatibilities=compatibilities,
            limitations=limitations,
            can_apply=is_compatible
        )


# Global compatibility checker instance
compatibility_checker = CompatibilityChecker()
