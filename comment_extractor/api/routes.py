from collections.abc import Callable

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from comment_extractor.api.schemas import BatchResponse, ErrorResponse, Health
from comment_extractor.config.settings import Settings
from comment_extractor.export.csv_exporter import DEFAULT_FILENAME, export_csv
from comment_extractor.logging.logger import Log
from comment_extractor.processor.exceptions import BatchValidationError
from comment_extractor.processor.processor import (
    BatchProcessor,
    build_processor,
    validate_submission,
)
from comment_extractor.raster.models import SourceFile

ProcessorBuilder = Callable[[Settings, str], BatchProcessor]

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_processor_builder() -> ProcessorBuilder:
    return build_processor


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        content=ErrorResponse(error=message).model_dump(),
        status_code=status_code,
    )


async def _admit(upload: UploadFile) -> SourceFile:
    return SourceFile(
        name=upload.filename or "uploaded",
        data=await upload.read(),
        content_type=upload.content_type or "",
    )


@router.get("/healthz", response_model=Health)
async def healthz() -> Health:
    return Health()


@router.post(
    "/api/process-images",
    response_model=BatchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def process_images(
    api_key: str | None = Form(default=None, alias="apiKey"),
    files: list[UploadFile] | None = File(default=None),
    settings: Settings = Depends(get_settings),
    processor_builder: ProcessorBuilder = Depends(get_processor_builder),
) -> Response:
    """Extract comments from every uploaded image and PDF page."""
    try:
        sources = [await _admit(upload) for upload in files or []]
        validate_submission(api_key, sources)
        processor = processor_builder(settings, api_key or "")
        batch = await processor.process(sources)
    except BatchValidationError as exc:
        Log.warning(f"Rejected batch: {exc}")
        return _error(str(exc), 400)
    except Exception as exc:
        Log.exception(f"Error processing images: {exc}")
        return _error(str(exc) or "Failed to process images", 500)

    return JSONResponse(content=BatchResponse.from_batch(batch).to_payload())


@router.post("/api/export-csv", response_class=Response)
async def export_comments_csv(body: BatchResponse) -> Response:
    """Render previously returned results as a downloadable CSV file."""
    content = export_csv(body.to_batch())
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{DEFAULT_FILENAME}"'},
    )
