"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Request, UploadFile, status
from fastapi.responses import JSONResponse

from paired_photos.api.accounts import router as accounts_router
from paired_photos.api.error_handlers import register_error_handlers, server_error
from paired_photos.api.schemas import PhotoResponse, UploadResponse
from paired_photos.app_logging import configure_logging
from paired_photos.containers import AppContainer
from paired_photos.domain.errors import IngestError, UnpairedInputError
from paired_photos.domain.photos import UploadedBlob


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    max_files = container.settings.max_upload_files

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Storing uploads in %s", app.state.container.settings.upload_dir)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    register_error_handlers(app)
    app.include_router(accounts_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/upload",
        response_model=UploadResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def upload(
        request: Request, photos: list[UploadFile] = File(...)
    ) -> object:
        """Store uploaded photos as consecutive pairs."""
        state_container: AppContainer = request.app.state.container
        if len(photos) > max_files:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": f"At most {max_files} photos per upload"},
            )
        blobs = [
            UploadedBlob(filename=photo.filename or "", content=await photo.read())
            for photo in photos
        ]
        try:
            locations = state_container.ingestion_service.ingest(blobs)
        except UnpairedInputError:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "Photos must be uploaded in pairs"},
            )
        except IngestError as exc:
            logger.exception(
                "Upload failed after committing %d locations",
                len(exc.committed),
                extra={"committed": exc.committed},
            )
            return server_error()
        except Exception:
            logger.exception("Upload failed")
            return server_error()
        return UploadResponse(
            message="Photos uploaded successfully!", locations=locations
        )

    @app.get("/photos", response_model=list[PhotoResponse])
    async def list_photos(request: Request) -> object:
        """Return every stored photo pair."""
        state_container: AppContainer = request.app.state.container
        try:
            records = state_container.ingestion_service.list_all()
        except Exception:
            logger.exception("Failed to list photos")
            return server_error()
        return [
            PhotoResponse(
                location=record.primary_location,
                location2=record.secondary_location,
                date=record.created_at,
            )
            for record in records
        ]

    return app
