"""
Models package for the Family-Care Leave Subsidy Eligibility Service
"""

from .kinship import (
    KinshipType,
    RelationKind,
    KinshipRecord,
    KinshipVerdict,
    KinshipRequest,
    FIRST_DEGREE_RELATIONS,
    NON_ELIGIBLE_RELATIONS
)

from .scenario import (
    ScenarioId,
    SCENARIO_ORDER,
    SCENARIO_INPUTS,
    FirstDegreeCareInput,
    ThirdChildInput,
    SecondChildDisabilityInput,
    AdoptionFosteringInput,
    MultipleBirthInput,
    SingleParentInput
)

from .evaluation import (
    EvaluationResult,
    CompatibilitySituation,
    CompatibilityResult,
    CompositeRequest,
    EvaluationSummary,
    AggregateResult,
    DisabilityCaseData,
    DisabilityCaseResult
)

from .order import (
    SubsidyOrder,
    EvaluationPolicy
)

__all__ = [
    # Kinship models
    "KinshipType",
    "RelationKind",
    "KinshipRecord",
    "KinshipVerdict",
    "KinshipRequest",
    "FIRST_DEGREE_RELATIONS",
    "NON_ELIGIBLE_RELATIONS",

    # Scenario inputs
    "ScenarioId",
    "SCENARIO_ORDER",
    "SCENARIO_INPUTS",
    "FirstDegreeCareInput",
    "ThirdChildInput",
    "SecondChildDisabilityInput",
    "AdoptionFosteringInput",
    "MultipleBirthInput",
    "SingleParentInput",

    # Evaluation models
    "EvaluationResult",
    "CompatibilitySituation",
    "CompatibilityResult",
    "CompositeRequest",
    "EvaluationSummary",
    "AggregateResult",
    "DisabilityCaseData",
    "DisabilityCaseResult",

    # Orders and policy
    "SubsidyOrder",
    "EvaluationPolicy"
]
