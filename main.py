from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.logging import configure_logging
from app.endpoints import auth, lesson, video, file, review, message, dashboard
from app.middleware.exceptions import (
    global_exception_handler,
    http_exception_handler,
    persistence_exception_handler,
    validation_exception_handler,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.schemas.response import HealthResponse

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json"
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(SQLAlchemyError, persistence_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(lesson.router, prefix=f"{settings.API_PREFIX}/lessons", tags=["Lessons"])
app.include_router(video.router, prefix=f"{settings.API_PREFIX}/videos", tags=["Videos"])
app.include_router(file.router, prefix=f"{settings.API_PREFIX}/files", tags=["Files"])
app.include_router(review.router, prefix=f"{settings.API_PREFIX}/reviews", tags=["Reviews"])
app.include_router(message.router, prefix=f"{settings.API_PREFIX}/messages", tags=["Messages"])
app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/auth", tags=["Auth"])
app.include_router(dashboard.router, prefix=f"{settings.API_PREFIX}/dashboard", tags=["Dashboard"])


@app.get(f"{settings.API_PREFIX}/health", response_model=HealthResponse, tags=["Health"])
def health_check():
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service=settings.SERVICE_NAME
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
