from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
import uvicorn
import logging

from player_registry.config import LOG_LEVEL, HOST, PORT, FORWARDED_ALLOW_IPS
from player_registry.database import Base, engine
from player_registry.models import Player  # noqa: F401  registers the players table
from player_registry.routers.players import router as players_router

# ✅ Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ✅ Initialize FastAPI app with redirect_slashes=False to avoid automatic redirects
app = FastAPI(title="Player Registry", redirect_slashes=False)

app.add_middleware(TrustedHostMiddleware, allowed_hosts=["*"])

# ✅ CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ✅ Malformed ids, query parameters and bodies are all bad requests
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Bad request on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# ✅ Health check
@app.get("/")
async def home():
    return {"message": "Player Registry API is running!"}


# ✅ Create DB tables on startup
@app.on_event("startup")
async def startup():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


# ✅ Register routers
app.include_router(players_router, prefix="/rest/players", tags=["Players"])


if __name__ == "__main__":
    uvicorn.run(
        "player_registry.main:app",
        host=HOST,
        port=PORT,
        proxy_headers=True,
        forwarded_allow_ips=FORWARDED_ALLOW_IPS,
    )
