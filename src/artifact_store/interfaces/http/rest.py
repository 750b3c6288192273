"""
REST API Interface

FastAPI application exposing the artifact store over HTTP. Routes translate
requests into Store calls; store failures are mapped to status codes by the
exception handlers registered in create_app().
"""

import shutil
from contextlib import asynccontextmanager
from pathlib import Path
from typing import BinaryIO, List, Optional
from urllib.parse import quote

from fastapi import Depends, FastAPI, Header, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, RedirectResponse
from pydantic import BaseModel
from starlette.datastructures import UploadFile

from artifact_store.application.services.store_service import Store
from artifact_store.domain.value_objects import validate_version_name
from artifact_store.infrastructure.config import Settings, get_settings
from artifact_store.infrastructure.logging import configure_logging, get_logger
from artifact_store.infrastructure.persistence.upload_placement import StagedUpload
from artifact_store.interfaces.http.middleware import RequestContextMiddleware
from artifact_store.shared.errors.domain import ErrorKind, InvalidFileError, StoreError
from artifact_store.shared.errors.infrastructure import StorageError

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.INVALID_PROJECT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_VERSION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_FILE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CORRUPTED_VERSION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UNPROVIDED_AUTHORIZATION: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.VERSION_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.IO: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.OTHER: status.HTTP_400_BAD_REQUEST,
}


class ErrorResponse(BaseModel):
    """Error response model."""

    error_code: str
    description: str
    error_detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str
    state_dir: str


def get_store(request: Request) -> Store:
    return request.app.state.store


def _error_response(status_code: int, kind: ErrorKind, description: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(
        error_code=f"ArtifactStore.{kind.value}",
        description=description,
        error_detail=detail,
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def _publish_upload(staged: StagedUpload, source: BinaryIO) -> Path:
    """Copy the uploaded bytes into staging and publish them as the version."""
    with staged:
        with open(staged.path, "xb") as out:
            shutil.copyfileobj(source, out)
        return staged.publish()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    state_dir = Path(settings.state_dir)
    logger.info(
        "Artifact store starting",
        version=settings.app_version,
        state_dir=str(state_dir),
    )
    if not state_dir.is_dir():
        logger.warning("State directory does not exist", state_dir=str(state_dir))
    yield
    logger.info("Artifact store shutting down")


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings, defaults to get_settings()
        store: Store instance, defaults to one rooted at settings.state_dir
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Project/version artifact storage gated by bearer-token allow-lists",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or Store(settings.state_dir)
    app.add_middleware(RequestContextMiddleware)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.info(
            "Request rejected",
            kind=exc.kind.value,
            reason=exc.message,
            status_code=status_code,
        )
        return _error_response(status_code, exc.kind, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage failure", error=exc.message)
        status_code = (
            status.HTTP_404_NOT_FOUND if exc.is_not_found else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        return _error_response(status_code, ErrorKind.IO, exc.message)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    def health_check():
        """Report whether the state directory is reachable."""
        state_dir = Path(settings.state_dir)
        if not state_dir.is_dir():
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "reason": f"State directory {state_dir} is not accessible"},
            )
        return HealthResponse(version=settings.app_version, state_dir=str(state_dir))

    @app.get("/projects", response_model=List[str], tags=["projects"])
    def list_projects(store: Store = Depends(get_store)):
        return store.list_projects()

    @app.get("/project/{project}/versions", response_model=List[str], tags=["versions"])
    def list_versions(
        project: str,
        authorization: Optional[str] = Header(default=None),
        store: Store = Depends(get_store),
    ):
        reader = store.project_reader(project, authorization)
        return store.list_versions(reader)

    @app.get("/project/{project}/version/{version}/download", tags=["versions"])
    def download_version(
        project: str,
        version: str,
        authorization: Optional[str] = Header(default=None),
        store: Store = Depends(get_store),
    ):
        """Redirect to the file route of the version's single artifact."""
        reader = store.project_reader(project, authorization)
        file_name = store.file_for_version(reader, version)
        return RedirectResponse(
            url=f"/project/{reader.name}/version/{version}/file/{quote(file_name)}",
            status_code=status.HTTP_303_SEE_OTHER,
        )

    @app.get("/project/{project}/version/{version}/file/{file}", tags=["versions"])
    def get_version_content(
        project: str,
        version: str,
        file: str,
        authorization: Optional[str] = Header(default=None),
        store: Store = Depends(get_store),
    ):
        reader = store.project_reader(project, authorization)
        if store.file_for_version(reader, version) != file:
            raise InvalidFileError()
        path = store.path_for_version(reader, version)
        return FileResponse(path, filename=path.name)

    @app.post("/project/{project}/upload", response_class=PlainTextResponse, tags=["versions"])
    async def upload_version(
        project: str,
        request: Request,
        version: Optional[str] = Query(default=None),
        authorization: Optional[str] = Header(default=None),
        store: Store = Depends(get_store),
    ):
        """
        Publish a new version from a multipart body.

        Exactly one part must carry a filename. The body is rejected before
        anything is staged when it holds none or several.
        """
        writer = await run_in_threadpool(store.project_writer, project, authorization)
        if version is None:
            raise StoreError("did not provide version")
        version = validate_version_name(version).value

        form = await request.form()
        try:
            uploads = [
                value
                for _, value in form.multi_items()
                if isinstance(value, UploadFile) and value.filename
            ]
            if not uploads:
                raise StoreError("failed to upload")
            if len(uploads) > 1:
                raise InvalidFileError("a version holds exactly one file")

            upload = uploads[0]
            staged = await run_in_threadpool(store.stage_upload, writer, version, upload.filename)
            await run_in_threadpool(_publish_upload, staged, upload.file)
        finally:
            await form.close()

        logger.info("Version uploaded", project=writer.name, version=version)
        return f"successful upload of version {version} for project {writer.name}"

    return app
