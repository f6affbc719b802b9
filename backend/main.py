"""
Emoji Remover & Code Diff Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routers import config, diff, emoji
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Emoji Remover & Code Diff Backend...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")
    print(f"[Backend] Upload limit: {config_manager.get_max_file_size()} bytes")

    yield
    print("[Backend] Shutting down Emoji Remover & Code Diff Backend...")


app = FastAPI(
    title="Emoji Remover & Code Diff Backend",
    description="Strip emoji from text files and compare code line by line",
    version="1.0.0",
    lifespan=lifespan,
)

# The browser tools are served from a separate origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as {"error": message}"""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    print(f"[Backend] Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request."})


# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(emoji.router, prefix="/api/remove-emoji", tags=["emoji"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "emoji-diff-backend"}


if __name__ == "__main__":
    import uvicorn

    host, port = ConfigManager.get_instance().get_server_address()
    uvicorn.run(app, host=host, port=port)
