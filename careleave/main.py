import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from careleave.config import settings
from careleave.routes import eligibility_router, orders_router
from careleave.services.eligibility_service import get_eligibility_service

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: fail fast on an unusable subsidy order
    service = get_eligibility_service()
    logger.info(
        f"Using {service.order.order_id} (year {service.order.year}), "
        f"hospitalization_blocking={service.policy.hospitalization_blocking}"
    )
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    description="Eligibility engine for the family-care leave subsidy",
    version=settings.app_version,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(eligibility_router, prefix=settings.api_prefix)
app.include_router(orders_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} is running", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "careleave-backend"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("careleave.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
