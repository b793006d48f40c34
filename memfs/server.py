"""
Web server for memfs.

Provides a REST API over the in-memory filesystem operations.
"""

from datetime import datetime
from typing import Optional
import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .services import FileSystemService
from .vfs import FileSystemError, MemoryVFS

logger = logging.getLogger(__name__)


# Pydantic models for API
class PathRequest(BaseModel):
    path: Optional[str] = None


class NameRequest(BaseModel):
    name: Optional[str] = None


# Create FastAPI app
app = FastAPI(
    title="memfs",
    description="In-memory filesystem with shell-like operations",
    version="1.0.0"
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global filesystem service
_service: Optional[FileSystemService] = None


def get_service() -> FileSystemService:
    """Get the current filesystem service."""
    if _service is None:
        raise HTTPException(status_code=500, detail="Filesystem not initialized")
    return _service


def init_filesystem(vfs: Optional[MemoryVFS] = None) -> FileSystemService:
    """Initialize the filesystem (seeded sample tree unless one is given)."""
    global _service
    _service = FileSystemService(vfs if vfs is not None else MemoryVFS())
    logger.info("Filesystem initialized")
    return _service


def set_filesystem(vfs: MemoryVFS):
    """Set the filesystem state directly (for testing)."""
    global _service
    _service = FileSystemService(vfs)


def create_app(vfs: Optional[MemoryVFS] = None) -> FastAPI:
    """Create FastAPI application with an initialized filesystem."""
    init_filesystem(vfs)

    # Return the pre-configured app with all routes
    return app


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": datetime.now().isoformat(),
            "status": status_code,
            "error": error,
            "message": message,
        },
    )


@app.post("/api/filesystem/cd")
def change_directory(request: PathRequest):
    """Change the shared current directory."""
    directory = get_service().change_directory(request.path)
    return {
        "success": True,
        "message": "Directory changed successfully",
        "currentPath": directory.get_path(),
        "directoryName": directory.name,
    }


@app.get("/api/filesystem/ls")
def list_directory():
    """List the current directory's children."""
    result = get_service().list_directory().to_dict()
    result["success"] = True
    return result


@app.get("/api/filesystem/size")
def get_directory_size():
    """Recursive size of the current directory."""
    result = get_service().get_directory_size().to_dict()
    result["success"] = True
    return result


@app.post("/api/filesystem/mkdir", status_code=201)
def create_directory(request: NameRequest):
    """Create a directory under the current directory."""
    directory = get_service().create_directory(request.name)
    return {
        "success": True,
        "message": "Directory created successfully",
        "directoryName": directory.name,
        "path": directory.get_path(),
    }


@app.delete("/api/filesystem/rmdir")
def remove_directory(name: Optional[str] = Query(None)):
    """Remove a child directory of the current directory."""
    get_service().remove_directory(name)
    return {
        "success": True,
        "message": "Directory removed successfully",
        "removedDirectory": name,
    }


@app.get("/api/filesystem/pwd")
def get_current_path():
    """Path and name of the current directory."""
    result = get_service().get_current_path().to_dict()
    result["success"] = True
    return result


@app.get("/api/filesystem/tree")
def get_directory_tree(path: Optional[str] = None):
    """Nested tree of a directory (the root by default)."""
    tree = get_service().get_directory_tree(path)
    return {"success": True, "tree": tree.to_dict()}


@app.exception_handler(FileSystemError)
async def filesystem_error_handler(request: Request, exc: FileSystemError):
    return _error_response(exc.status_code, exc.label, exc.message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error handling {request.method} {request.url.path}")
    return _error_response(500, "Internal Server Error", str(exc))
