import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.schemas.health import PingResponse
from .routers import games

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)

app = FastAPI(
    title="WebGame API",
    description="CRUD API for games backed by MySQL stored procedures.",
    version="0.1.0"
)

# CORS Configuration
origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

app.include_router(games.router)

@app.get("/", tags=["Root"])
async def get_root():
    """Welcome message for the API root."""
    return {"message": "Welcome to the WebGame API!"}

@app.get("/api/ping", response_model=PingResponse, tags=["Health"])
async def ping_api():
    """Simple ping to check API health."""
    return {"status": "ok", "message": "pong"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
