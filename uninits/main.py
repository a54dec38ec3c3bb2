# uninits/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from uninits.core.config import CONFIG, uploads_root
from uninits.core.database import ensure_indexes, get_store
from uninits.core.errors import PortalError
from uninits.core.logger import get_logger
from uninits.routes.attendance_routes import router as attendance_router
from uninits.routes.auth_routes import router as auth_router
from uninits.routes.course_routes import router as course_router
from uninits.routes.maintenance_routes import router as maintenance_router
from uninits.routes.profile_routes import router as profile_router
from uninits.services.uploads import ensure_dir

log = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_indexes(get_store())
    log.info("Backend ready")
    yield


app = FastAPI(
    title="uniNITS Backend API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        log.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


# Uploaded profile pictures and bundled images
ensure_dir(CONFIG.UPLOAD_DIR)
app.mount("/uploads", StaticFiles(directory=str(uploads_root()), check_dir=False), name="uploads")
app.mount(
    "/assets/images",
    StaticFiles(directory=CONFIG.ASSETS_DIR, check_dir=False),
    name="assets",
)


@app.get("/")
def root_index():
    return {"status": "Backend running", "message": "uniNITS Backend API"}


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(course_router)
app.include_router(attendance_router)
app.include_router(maintenance_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=CONFIG.PORT)
