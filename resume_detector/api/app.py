from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from resume_detector.analysis.analyzer import Analyzer, build_analyzer
from resume_detector.analysis.exceptions import AnalysisError, MissingFileError
from resume_detector.analysis.models import RawDocument
from resume_detector.api.schemas import AnalyzeResponse, ErrorResponse
from resume_detector.config.settings import Settings
from resume_detector.logging.logger import Log

INTERNAL_ERROR_MESSAGE = "Failed to analyze resume"


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        ErrorResponse(error=message).model_dump(),
        status_code=status_code,
    )


def create_app(settings: Settings, analyzer: Analyzer | None = None) -> FastAPI:
    """Build the HTTP application around a configured Analyzer."""
    analyzer = analyzer or build_analyzer(settings)
    app = FastAPI(title="Resume AI Detector")

    @app.post(
        "/api/analyze",
        response_model=AnalyzeResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def analyze(request: Request) -> JSONResponse:
        try:
            async with request.form() as form:
                upload = form.get("file")
                # plain string fields count as missing
                if not isinstance(upload, UploadFile):
                    raise MissingFileError()

                document = RawDocument(
                    filename=upload.filename or "",
                    content_type=upload.content_type or "",
                    content=await upload.read(),
                )
            Log.info(f"Analyzing '{document.filename}' ({document.size_bytes} bytes)")

            # extraction and scoring are CPU-bound
            result = await run_in_threadpool(analyzer.analyze, document)
            body = AnalyzeResponse.from_result(result).model_dump(by_alias=True)
            return JSONResponse(body, status_code=200)
        except AnalysisError as exc:
            Log.warning(f"Rejected upload: {exc}")
            return _error(str(exc), 400)
        except Exception as exc:
            Log.exception(f"Analysis error: {exc}")
            return _error(INTERNAL_ERROR_MESSAGE, 500)

    return app
