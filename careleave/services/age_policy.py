"""
Child age ceiling shared by the children scenarios
"""
from typing import Optional, Sequence

from ..models.order import EvaluationPolicy


class AgeThresholdPolicy:
    """Derives the age ceiling, widened when a child has a disability or dependency"""

    def __init__(self, policy: Optional[EvaluationPolicy] = None):
        self.policy = policy or EvaluationPolicy()

    def has_qualifying_disability(self, disabilities: Sequence[float]) -> bool:
        return any(percentage >= self.policy.disability_threshold for percentage in disabilities)

    @staticmethod
    def has_recognized_dependency(dependencies: Sequence[bool]) -> bool:
        return any(flag is True for flag in dependencies)

    def has_qualifying_condition(self, disabilities: Sequence[float], dependencies: Sequence[bool]) -> bool:
        return self.has_qualifying_disability(disabilities) or self.has_recognized_dependency(dependencies)

    def limit(self, disabilities: Sequence[float], dependencies: Sequence[bool]) -> int:
        """Return the extended ceiling if any child qualifies, the base ceiling otherwise"""
        if self.has_qualifying_condition(disabilities, dependencies):
            return self.policy.extended_age_limit
        return self.policy.base_age_limit
