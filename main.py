import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import settings
from core.nutrition_calc import InvalidProfileError
from core.rate_limit import InMemoryRateLimitStore, RateLimiter
from api.v1.router import api_router

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title="Meal-Macro API", version="1.0.0")

# one limiter per process; counters reset on restart
app.state.limiter = RateLimiter(
    InMemoryRateLimitStore(),
    sweep_interval=settings.rate_limit_sweep_seconds,
)

# CORS (public demo only – lock down in prod)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(InvalidProfileError)
async def invalid_profile(_: Request, exc: InvalidProfileError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)},
    )


@app.get("/health", tags=["meta"])
def health() -> dict[str, str]:
    return {"status": "ok", "env": settings.env_name}
