import asyncio
from collections.abc import Sequence

from comment_extractor.config.settings import Settings
from comment_extractor.extraction.exceptions import InvocationError
from comment_extractor.extraction.factory import InvokerFactory
from comment_extractor.extraction.invoker import ModelInvoker
from comment_extractor.logging.logger import Log
from comment_extractor.normalization.normalizer import ResponseNormalizer
from comment_extractor.processor.exceptions import BatchValidationError
from comment_extractor.processor.models import (
    BatchResult,
    ExtractionAttempt,
    PageFailure,
    PageOutcome,
    PageSuccess,
)
from comment_extractor.raster.exceptions import RasterizationError
from comment_extractor.raster.factory import RasterEngineFactory
from comment_extractor.raster.models import MediaKind, PageImage, SourceFile
from comment_extractor.raster.rasterizer import Rasterizer


def validate_submission(api_key: str | None, files: Sequence[SourceFile]) -> None:
    """Reject a batch that cannot start.

    Raises:
        BatchValidationError: if the API key is missing or no files were sent.
    """
    if not api_key or not api_key.strip():
        raise BatchValidationError("API key is required")
    if not files:
        raise BatchValidationError("No files provided")


class BatchProcessor:
    """Orchestrates extraction over a batch of uploaded files.

    Pipeline per file: rasterize -> (per page) invoke model -> normalize.
    Files and pages run one at a time, so results keep input order. A failure
    in one file or page becomes a degraded PageResult; nothing is raised.
    """

    def __init__(
        self,
        rasterizer: Rasterizer,
        invoker: ModelInvoker,
        normalizer: ResponseNormalizer,
    ) -> None:
        self._rasterizer = rasterizer
        self._invoker = invoker
        self._normalizer = normalizer

    async def process(self, files: Sequence[SourceFile]) -> BatchResult:
        """Run the pipeline over every file, in order."""
        Log.info(f"Processing batch of {len(files)} files")
        batch = BatchResult()
        for source in files:
            outcomes = await self._process_file(source)
            batch.results.extend(outcome.to_page_result() for outcome in outcomes)
        Log.info(
            f"Batch complete: {len(batch)} results, {batch.comment_count} comments"
        )
        return batch

    async def _process_file(self, source: SourceFile) -> list[PageOutcome]:
        Log.info(f"Processing file ({len(source.data)} bytes)", file=source.name)
        try:
            pages = await asyncio.to_thread(self._rasterizer.rasterize, source)
        except RasterizationError as exc:
            Log.error(f"Rasterization failed: {exc}", file=source.name)
            return [PageFailure(source.name, self._file_error_message(source, exc))]
        except Exception as exc:
            Log.exception(f"Unexpected error preparing file: {exc}", file=source.name)
            return [PageFailure(source.name, self._file_error_message(source, exc))]

        outcomes: list[PageOutcome] = []
        for page in pages:
            outcomes.append(await self._process_page(page))
        return outcomes

    async def _process_page(self, page: PageImage) -> PageOutcome:
        try:
            raw_response = await self._invoker.invoke(page)
            comments = self._normalizer.normalize(raw_response)
        except InvocationError as exc:
            Log.error(f"Model invocation failed: {exc}", page=page.display_name)
            return PageFailure(page.display_name, f"Error processing file: {exc}")
        except Exception as exc:
            Log.exception(f"Unexpected error processing page: {exc}", page=page.display_name)
            return PageFailure(page.display_name, f"Error processing file: {exc}")

        Log.info(f"Extracted {len(comments)} comments", page=page.display_name)
        return PageSuccess(
            attempt=ExtractionAttempt(page.display_name, raw_response),
            comments=comments,
        )

    @staticmethod
    def _file_error_message(source: SourceFile, exc: Exception) -> str:
        if source.kind is MediaKind.PDF:
            return f"Error processing PDF: {exc}"
        return f"Error processing file: {exc}"


def build_processor(settings: Settings, api_key: str) -> BatchProcessor:
    """Build a BatchProcessor for one request's credentials."""
    return BatchProcessor(
        rasterizer=RasterEngineFactory.create_rasterizer(settings),
        invoker=InvokerFactory.create(settings, api_key=api_key),
        normalizer=ResponseNormalizer(settings.fallback_text_max_length),
    )
