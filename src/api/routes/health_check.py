from fastapi import APIRouter, status
from pydantic import BaseModel

from config import ApplicationConfig

router = APIRouter(tags=["Health"])


class SystemInfo(BaseModel):
    environment: str
    version: str


class HealthCheckResponse(BaseModel):
    status: str
    system_info: SystemInfo


@router.get("/healthcheck", status_code=status.HTTP_200_OK, response_model=HealthCheckResponse)
async def healthcheck():
    """Report that the service is up, with its environment and version"""
    return HealthCheckResponse(
        status="available",
        system_info=SystemInfo(
            environment=ApplicationConfig.ENV,
            version=ApplicationConfig.VERSION,
        ),
    )
