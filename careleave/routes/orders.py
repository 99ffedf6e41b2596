"""
API routes for subsidy orders
"""
from fastapi import APIRouter

from ..models.order import SubsidyOrder, EvaluationPolicy
from ..services.eligibility_service import get_eligibility_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/current", response_model=SubsidyOrder)
async def get_current_order():
    """
    Get the subsidy order currently applied
    """
    return get_eligibility_service().order


@router.get("/policy", response_model=EvaluationPolicy)
async def get_policy():
    """
    Get the evaluation thresholds and interpretation toggles in force
    """
    return get_eligibility_service().policy
