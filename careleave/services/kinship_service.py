"""
Kinship validation for the first-degree relative scenario
"""
import logging
import re
import unicodedata

from ..models.kinship import (
    RelationKind,
    KinshipVerdict,
    FIRST_DEGREE_RELATIONS,
    NON_ELIGIBLE_RELATIONS
)

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r'[\s\-_]+')


class KinshipValidator:
    """Classifies a free-text family relation as valid, known-invalid or unrecognized"""

    @staticmethod
    def normalize(relation: str) -> str:
        """
        Normalize a relation name

        Lowercases, trims, folds accents and collapses runs of whitespace,
        hyphens and underscores into a single underscore.
        """
        text = unicodedata.normalize('NFKD', relation.lower().strip())
        text = ''.join(ch for ch in text if not unicodedata.combining(ch))
        return _SEPARATORS.sub('_', text).strip('_')

    def validate(self, relation: str) -> KinshipVerdict:
        """
        Validate that a relation is first degree

        Args:
            relation: Relation as typed by the applicant (e.g. "Madre", "pareja de hecho")

        Returns:
            KinshipVerdict with one of three outcomes: valid, known-invalid or unrecognized
        """
        normalized = self.normalize(relation)

        try:
            kind = RelationKind(normalized)
        except ValueError:
            kind = None

        if kind in FIRST_DEGREE_RELATIONS:
            record = FIRST_DEGREE_RELATIONS[kind]
            degree = "(cónyuge/pareja)" if record.grade == 0 else f"de {record.grade}º grado"
            return KinshipVerdict(
                is_valid=True,
                is_first_degree=True,
                grade=record.grade,
                type=record.type,
                normalized_relation=normalized,
                message=f"Parentesco VÁLIDO: {record.type.value} {degree}"
            )

        if kind in NON_ELIGIBLE_RELATIONS:
            record = NON_ELIGIBLE_RELATIONS[kind]
            return KinshipVerdict(
                is_valid=False,
                is_first_degree=False,
                grade=record.grade,
                type=record.type,
                normalized_relation=normalized,
                message=(
                    f"Parentesco NO VÁLIDO: {record.type.value} de {record.grade}º grado. "
                    "Solo se admiten familiares de primer grado."
                )
            )

        logger.debug(f"Unrecognized relation: {relation!r}")
        return KinshipVerdict(
            is_valid=False,
            is_first_degree=False,
            grade=None,
            type=None,
            normalized_relation=normalized,
            message=f"Relación '{relation}' no reconocida en el sistema."
        )


# Global kinship validator instance
kinship_validator = KinshipValidator()
