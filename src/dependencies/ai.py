"""AI pipeline dependency.

The pipeline (and the HTTP client it owns) is built once in the application
lifespan and stored on ``app.state``; tests replace this dependency with a
pipeline over a mock transport.
"""

from typing import Annotated

from fastapi import Depends, Request

from services.ai.pipeline import AIPipeline


def get_ai_pipeline(request: Request) -> AIPipeline:
    pipeline: AIPipeline = request.app.state.ai_pipeline
    return pipeline


AIPipelineDep = Annotated[AIPipeline, Depends(get_ai_pipeline)]
