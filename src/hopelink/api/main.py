from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum
from starlette.middleware.base import BaseHTTPMiddleware

from hopelink.api import routers
from hopelink.api.error_handlers import register_error_handlers
from hopelink.core.config import settings
from hopelink.core.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)

ALLOW_METHODS = "GET, POST, PUT, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization, X-Amz-Date, X-Api-Key, X-Amz-Security-Token"


app = FastAPI(
    title=settings.APP_NAME,
    root_path=settings.ROOT_PATH
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def allowed_origin(origin: str | None) -> str | None:
    """Value for Access-Control-Allow-Origin, or None when the origin is not allowed."""
    if "*" in settings.CORS_ALLOW_ORIGINS:
        return "*"
    if origin in settings.CORS_ALLOW_ORIGINS:
        return origin
    return None

# Custom middleware to add CORS headers to ALL responses (for API Gateway)
class CORSHeaderMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        origin = allowed_origin(request.headers.get("origin"))
        if origin is None:
            return response
        if "access-control-allow-origin" not in response.headers:
            response.headers["Access-Control-Allow-Origin"] = origin
            if origin != "*":
                response.headers.add_vary_header("Origin")
        response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response

app.add_middleware(CORSHeaderMiddleware)

@app.get("/")
def read_root():
    return {"message": "Welcome to the HopeLink API"}

@app.get("/health")
def health():
    return {"status": "ok"}


register_error_handlers(app)
app.include_router(routers.router)

handler = Mangum(app)
