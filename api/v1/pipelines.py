"""
Pipeline API Routes

Endpoints for triggering pipelines. Uses bearer token authentication so
cron jobs and operators can start a run over HTTP.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Security

from core.logging import get_logger
from core.pipeline_auth import verify_pipeline_token
from core.settings import Settings, get_settings
from pipelines import list_pipelines, run_pipeline
from schemas.pipeline import PipelineListResponse, PipelineResponse

router = APIRouter(prefix="/pipelines", tags=["pipelines"])
log = get_logger("pipeline_api")


@router.get("/", response_model=PipelineListResponse)
async def get_available_pipelines(
    _: str = Security(verify_pipeline_token),
) -> PipelineListResponse:
    """
    List all available pipelines.

    Returns pipeline names, descriptions, and targets.
    """
    return PipelineListResponse(pipelines=list_pipelines())


@router.post("/name-score", response_model=PipelineResponse)
async def trigger_name_score(
    _: str = Security(verify_pipeline_token),
    settings: Settings = Depends(get_settings),
    test: Optional[bool] = Query(None, description="Submit as a test run (prueba=1). Omit to use TEST_MODE."),
    subject: Optional[str] = Query(None, description="Subject name reported to the sink. Omit to use SUBJECT_NAME."),
) -> PipelineResponse:
    """
    Trigger the name score pipeline.

    Fetches the name list, computes the total score, and submits it
    to the score sink. Failures are reported in the response body.
    """
    log.info("name_score_triggered", test=test, subject=subject)
    result = await run_pipeline(
        "name_score",
        settings=settings,
        test_mode=test,
        subject_name=subject,
    )
    return PipelineResponse(
        status=result.status,
        message=result.message,
        data=result,
    )
