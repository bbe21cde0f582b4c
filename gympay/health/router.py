from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from gympay.config import get_gateway_settings
from gympay.health.service import health_gateway_info
from gympay.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

@router.get("/gateway")
def health_gateway(dns: bool = True):
    return JSONResponse(health_gateway_info(get_gateway_settings(), check_dns=dns))

@router.get("/rate-limit")
def health_rate_limit(request: Request):
    return JSONResponse(rate_limit_health_info(request))
