"""
API routes for eligibility checking
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from ..models.kinship import KinshipRequest, KinshipVerdict
from ..models.scenario import ScenarioId, SCENARIO_ORDER
from ..models.evaluation import (
    EvaluationResult,
    CompatibilityResult,
    CompositeRequest,
    AggregateResult,
    DisabilityCaseResult
)
from ..services.kinship_service import kinship_validator
from ..services.compatibility_service import compatibility_checker
from ..services.eligibility_service import get_eligibility_service
from ..services.scenario_service import DESCRIPTIONS
from ..utils.coercion import (
    parse_boolean,
    parse_number,
    build_scenario_input,
    build_situation,
    build_composite_request
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["eligibility"])


@router.post("/kinship/validate", response_model=KinshipVerdict)
async def validate_kinship(request: KinshipRequest):
    """
    Validate whether a family relation is first degree
    """
    return kinship_validator.validate(request.relation)


@router.get("/scenarios")
async def list_scenarios() -> List[Dict[str, Any]]:
    """
    List the qualifying scenarios with their monthly amount
    """
    service = get_eligibility_service()
    return [
        {
            "supuesto": scenario.value,
            "letra": scenario.letter,
            "descripcion": DESCRIPTIONS[scenario],
            "importe_mensual": service.order.amount_for(scenario)
        }
        for scenario in SCENARIO_ORDER
    ]


@router.post("/scenarios/{scenario_id}", response_model=EvaluationResult)
async def evaluate_scenario(scenario_id: str, params: Dict[str, Any]):
    """
    Evaluate a single scenario from loosely-typed parameters
    """
    try:
        try:
            scenario = ScenarioId(scenario_id)
        except ValueError:
            raise HTTPException(status_code=404, detail=f"Scenario not found: {scenario_id}")

        data = build_scenario_input(scenario, params)
        return get_eligibility_service().evaluator.evaluate(data)

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid scenario data: {str(e)}")
    except Exception as e:
        logger.error(f"Error evaluating scenario {scenario_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to evaluate scenario: {str(e)}")


@router.post("/compatibility", response_model=CompatibilityResult)
async def check_compatibility(params: Dict[str, Any]):
    """
    Check compatibility with other public aid
    """
    try:
        return compatibility_checker.check(build_situation(params))

    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid situation data: {str(e)}")
    except Exception as e:
        logger.error(f"Error checking compatibility: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to check compatibility: {str(e)}")


@router.post("/evaluation", response_model=AggregateResult)
async def evaluate(request: CompositeRequest):
    """
    Evaluate every supplied scenario and select the best option
    """
    try:
        return get_eligibility_service().evaluate(request)

    except Exception as e:
        logger.error(f"Error in complete evaluation: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to evaluate request: {str(e)}")


@router.post("/evaluation/flat", response_model=AggregateResult)
async def evaluate_flat(params: Dict[str, Any]):
    """
    Complete evaluation from flat prefixed parameters (supuestoA_relacionFamiliar, ...)
    """
    try:
        request = build_composite_request(params)
        return get_eligibility_service().evaluate(request)

    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid evaluation data: {str(e)}")
    except Exception as e:
        logger.error(f"Error in flat evaluation: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to evaluate request: {str(e)}")


@router.post("/evaluation/disability-case", response_model=DisabilityCaseResult)
async def evaluate_disability_case(params: Dict[str, Any]):
    """
    Simplified evaluation for one or two children with disability
    """
    try:
        first_age = parse_number(params.get("hijo1_edad"))
        if first_age is None:
            raise HTTPException(status_code=400, detail="Missing or invalid hijo1_edad")

        ages = [first_age]
        disabilities = [parse_number(params.get("hijo1_discapacidad")) or 0]

        second_age = parse_number(params.get("hijo2_edad"))
        if second_age is not None:
            ages.append(second_age)
            disabilities.append(parse_number(params.get("hijo2_discapacidad")) or 0)

        single_parent = parse_boolean(params.get("es_monoparental")) or False

        return get_eligibility_service().evaluate_disability_case(ages, disabilities, single_parent)

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid case data: {str(e)}")
    except Exception as e:
        logger.error(f"Error in disability case evaluation: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to evaluate case: {str(e)}")
