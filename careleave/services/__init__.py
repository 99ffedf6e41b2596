"""
Services package for the Family-Care Leave Subsidy Eligibility Service
"""

from .kinship_service import KinshipValidator, kinship_validator
from .age_policy import AgeThresholdPolicy
from .order_service import SubsidyOrderError, load_subsidy_orders, get_subsidy_order
from .scenario_service import ScenarioEvaluator
from .compatibility_service import CompatibilityChecker, compatibility_checker
from .eligibility_service import EligibilityService, get_eligibility_service

__all__ = [
    "KinshipValidator",
    "kinship_validator",
    "AgeThresholdPolicy",
    "SubsidyOrderError",
    "load_subsidy_orders",
    "get_subsidy_order",
    "ScenarioEvaluator",
    "CompatibilityChecker",
    "compatibility_checker",
    "EligibilityService",
    "get_eligibility_service"
]
