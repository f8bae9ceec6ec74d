import logging
import time

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from core.logging_config import configure_logging
from core.settings import APP_TITLE, CORS_ALLOW_ORIGINS
from schemas.response_schema import APIResponse

configure_logging()
logger = logging.getLogger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        response.headers['X-Process-Time'] = str(process_time)

        logger.info("%s %s took %.6f seconds", request.method, request.url.path, process_time)

        return response


app = FastAPI(
    title=APP_TITLE,
)
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def custom_http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=APIResponse(
            status_code=exc.status_code,
            data=None,
            detail=exc.detail,
        ).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Offending inputs are left out: a NaN or infinity would not encode as JSON.
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content=APIResponse(
            status_code=422,
            data=None,
            detail=problems or "Invalid request",
        ).model_dump()
    )


@app.get("/", tags=["Health"], include_in_schema=False, name="read_root")
def read_root():
    data = {"message": f"Hello from {APP_TITLE}!"}
    return APIResponse(status_code=200, detail="Successfully fetched data", data=data)


@app.get("/health", tags=["Health"])
async def health_check():
    data = {
        "status": "healthy",
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "services": {
            "alignment": {"status": "healthy"},
            "performance": {"status": "healthy"},
        },
    }
    return APIResponse(
        status_code=200,
        detail="Health check completed with status: healthy",
        data=data,
    )


from api.v1.alignment import router as v1_alignment_router
from api.v1.performance import router as v1_performance_router
from api.v1.scripts import router as v1_scripts_router

app.include_router(v1_alignment_router, prefix='/v1')
app.include_router(v1_performance_router, prefix='/v1')
app.include_router(v1_scripts_router, prefix='/v1')
