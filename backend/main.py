import logging
import random
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from adapters.offline.synthetic_provider import SyntheticTrafficProvider
from api._resp import error_response
from api.carbon_routes import router as carbon_router
from api.ev_routes import router as ev_router
from api.routing_routes import router as routing_router
from api.status import router as status_router
from api.vehicle_routes import router as vehicle_router
from config import get_settings
from core.load_plugins import load_plugins
from services.catalog import get_catalog
from services.progress import ProfileStore, ProgressTracker
from services.scoring import ScoringEngine
from services.subsidy import SubsidyCalculator

settings = get_settings()
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    rng = random.Random(settings.RANDOM_SEED)
    load_plugins(settings, rng=rng)

    catalog = get_catalog()
    app.state.profile_store = ProfileStore()
    app.state.tracker = ProgressTracker(app.state.profile_store)
    app.state.scoring = ScoringEngine(catalog, rng=rng)
    app.state.subsidy = SubsidyCalculator(catalog)
    app.state.traffic = SyntheticTrafficProvider(rng=rng)
    logger.info("eco-drive advisor ready (route provider: %s)", settings.ROUTE_PROVIDER)
    yield


app = FastAPI(title="Eco-Drive Advisor Backend", lifespan=lifespan)

# CORS (adjust for your frontend)
origins = settings.CORS_ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_envelope(request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, "Endpoint not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_envelope(request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return error_response(422, f"Invalid request: {where} {first.get('msg', '')}".strip())


@app.exception_handler(Exception)
async def unhandled_error_envelope(request, exc: Exception):
    logger.exception("Server error")
    return error_response(500, "Internal server error")


@app.get("/health")
def health():
    return {"status": "ok"}


# Register API routes
app.include_router(routing_router)
app.include_router(vehicle_router)
app.include_router(carbon_router)
app.include_router(ev_router)
app.include_router(status_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
