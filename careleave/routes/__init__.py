"""
API routes for the Family-Care Leave Subsidy Eligibility Service
"""

from .eligibility import router as eligibility_router
from .orders import router as orders_router

__all__ = [
    "eligibility_router",
    "orders_router"
]
