from fastapi import FastAPI
from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from gqlrelay.core.config import settings
from gqlrelay.core.errors import RelayError
from gqlrelay.core.logging import setup_logging
from gqlrelay.api.v1 import relay, system

logger = setup_logging(settings.LOG_LEVEL)

# 通用 CORS 头部，所有响应都会带上
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",  # 24小时缓存预检请求
}

app = FastAPI(
    title=settings.APP_NAME,
    description="OpenAI API 的 GraphQL 风格中继服务",
    version=settings.APP_VERSION,
)


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    # 预检请求直接返回空响应
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        error = RelayError("Method not allowed")
    else:
        error = RelayError(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=error.to_envelope(), headers=exc.headers)


# 注册路由
app.include_router(relay.router, tags=["中继"])
app.include_router(system.router, prefix="/api/v1/system", tags=["系统"])

@app.get("/health")
async def health():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting relay on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=True)
