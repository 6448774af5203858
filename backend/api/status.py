from fastapi import APIRouter
from core.provider_registry import ProviderRegistry
from config import get_settings

router = APIRouter(prefix="/status", tags=["status"])


@router.get("/providers")
def providers():
    return {
        "success": True,
        "data": {
            "providers": ProviderRegistry.list_providers(),
            "default": get_settings().ROUTE_PROVIDER,
        },
    }
