from fastapi import APIRouter, Depends

from gqlrelay.core.config import Settings, get_settings
from gqlrelay.schemas.response import ApiResponse

router = APIRouter()


@router.get("/info", response_model=ApiResponse)
async def get_system_info(settings: Settings = Depends(get_settings)):
    return ApiResponse(
        code=200,
        data={
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "openaiConfigured": bool(settings.OPENAI_API_KEY),
            "openaiBaseUrl": settings.OPENAI_BASE_URL,
            "defaultModel": settings.DEFAULT_MODEL,
            "requireKeyPrefix": settings.REQUIRE_KEY_PREFIX,
        },
    )
