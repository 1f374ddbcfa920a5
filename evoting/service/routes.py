import base64
import binascii

from fastapi import Depends, HTTPException, APIRouter, Query

from evoting.dependencies import get_service
from evoting.service import schemas
from evoting.service.cryptographic_service import CryptographicService

from typing import Optional

api_router = APIRouter()


@api_router.get("/health", response_model=schemas.HealthOut, status_code=200)
async def health(service: CryptographicService = Depends(get_service)):
    return schemas.HealthOut(status="active", name=service.name, version=service.version)


@api_router.get("/capabilities", response_model=schemas.ListCapabilitiesOut, status_code=200)
async def list_capabilities(
    request_id: Optional[str] = None,
    filter_name: Optional[str] = None,
    filter_id: Optional[str] = None,
    filter_args: Optional[int] = Query(default=None, ge=0),
    page_size: Optional[int] = Query(default=None, ge=1),
    page_num: Optional[int] = Query(default=None, ge=0),
    service: CryptographicService = Depends(get_service),
):
    """
    Lists the capabilities of the service, sorted by id
    """
    capabilities = service.list_capabilities(
        filter_name=filter_name,
        filter_id=filter_id,
        filter_args=filter_args,
        page_size=page_size,
        page_num=page_num,
    )
    return schemas.ListCapabilitiesOut(
        request_id=request_id,
        ok=True,
        capabilities=[schemas.CapabilityOut(**cap) for cap in capabilities],
    )


@api_router.post("/compute", response_model=schemas.ComputeOut, status_code=200)
async def compute(compute_in: schemas.ComputeIn, service: CryptographicService = Depends(get_service)):
    """
    Runs a capability on base64-encoded arguments
    """
    try:
        arguments = [base64.b64decode(arg, validate=True) for arg in compute_in.arguments]
    except (binascii.Error, ValueError):
        raise HTTPException(status_code=400, detail="arguments must be base64 encoded")

    result = service.compute(compute_in.request_id, compute_in.capability_id, arguments)
    return schemas.ComputeOut(
        request_id=result["request_id"],
        ok=result["ok"],
        result=[base64.b64encode(value).decode("ascii") for value in result["result"]],
        error=result["error"],
    )
