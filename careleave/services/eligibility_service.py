"""
Eligibility service combining every scenario evaluator and the compatibility check
"""
import logging
import time
from functools import lru_cache
from typing import List, Optional

from ..config import settings
from ..models.scenario import ScenarioId, SCENARIO_ORDER, SingleParentInput, ThirdChildInput
from ..models.evaluation import (
    CompositeRequest,
    EvaluationResult,
    EvaluationSummary,
    AggregateResult,
    DisabilityCaseData,
    DisabilityCaseResult
)
from ..models.order import EvaluationPolicy, SubsidyOrder
from .compatibility_service import CompatibilityChecker, compatibility_checker as default_checker
from .order_service import get_subsidy_order
from .scenario_service import ScenarioEvaluator

logger = logging.getLogger(__name__)


class EligibilityService:
    """Service for evaluating a complete subsidy request"""

    def __init__(
        self,
        order: SubsidyOrder,
        policy: Optional[EvaluationPolicy] = None,
        checker: Optional[CompatibilityChecker] = None
    ):
        self.order = order
        self.policy = policy or EvaluationPolicy()
        self.evaluator = ScenarioEvaluator(order, self.policy)
        self.checker = checker or default_checker

    def evaluate(self, request: CompositeRequest) -> AggregateResult:
        """
        Evaluate every supplied scenario and the compatibility situation

        Args:
            request: Tagged scenario sub-requests and optional current aid situation

        Returns:
            AggregateResult with evaluated and eligible scenarios, best option and summary
        """
        start_time = time.time()

        evaluated: List[EvaluationResult] = []
        eligible: List[EvaluationResult] = []

        # Fixed order regardless of how the sub-requests were listed
        for scenario in SCENARIO_ORDER:
            sub_request = request.get(scenario)
            if sub_request is None:
                continue

            result = self.evaluator.evaluate(sub_request)
            evaluated.append(result)
            if result.eligible:
                eligible.append(result)

        compatibility = None
        if request.situation is not None:
            compatibility = self.checker.check(request.situation)

        best_option = self._select_best_option(eligible)

        can_apply = len(eligible) > 0 and (compatibility is None or compatibility.is_compatible)

        processing_time = (time.time() - start_time) * 1000
        logger.info(
            f"Evaluation completed: {len(eligible)}/{len(evaluated)} scenarios eligible, "
            f"can_apply={can_apply} ({processing_time:.2f} ms)"
        )

        return AggregateResult(
            evaluated_scenarios=evaluated,
            eligible_scenarios=eligible,
            best_option=best_option,
            compatibility=compatibility,
            summary=EvaluationSummary(eligible_count=len(eligible), can_apply=can_apply)
        )

    def evaluate_disability_case(
        self,
        ages: List[float],
        disabilities: List[float],
        single_parent: bool = False
    ) -> DisabilityCaseResult:
        """
        Quick evaluation for one or two children with disability percentages

        Evaluates scenario E when the household is single-parent and scenario B
        when there are two or more children. Dependency is assumed for every
        child at or above the disability threshold, and the newborn flag is set
        when any child is aged 0.
        """
        dependencies = [d >= self.policy.disability_threshold for d in disabilities]
        evaluations = []

        if single_parent:
            evaluations.append(self.evaluator.evaluate_single_parent(SingleParentInput(
                is_single_parent=True,
                num_children=len(ages),
                children_ages=ages,
                disabilities=disabilities,
                dependencies=dependencies
            )))

        if len(ages) >= 2:
            evaluations.append(self.evaluator.evaluate_third_child(ThirdChildInput(
                num_children=len(ages),
                children_ages=ages,
                includes_newborn=any(age == 0 for age in ages)
            )))

        return DisabilityCaseResult(
            analyzed_data=DisabilityCaseData(
                ages=ages,
                disabilities=disabilities,
                single_parent=single_parent
            ),
            evaluations=evaluations
        )

    @staticmethod
    def _select_best_option(eligible: List[EvaluationResult]) -> Optional[EvaluationResult]:
        """Prefer scenario A (higher amount), otherwise the first eligible in evaluation order"""
        for result in eligible:
            if result.scenario == ScenarioId.FIRST_DEGREE_CARE:
                return result
        return eligible[0] if eligible else None


@lru_cache(maxsize=1)
def get_eligibility_service() -> EligibilityService:
    """Build the service from the current settings"""
    order = get_subsidy_order(settings.subsidy_order_year, settings.subsidy_orders_file)
    return EligibilityService(order=order, policy=EvaluationPolicy.from_settings(settings))
