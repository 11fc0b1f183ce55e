from fastapi import APIRouter

from uicritic.models.analysis import AnalysisResult, AnalyzeRequest
from uicritic.services import analysis as analysis_service

router = APIRouter(prefix="/api", tags=["analyze"])


@router.post("/analyze")
def analyze(req: AnalyzeRequest) -> AnalysisResult:
    return analysis_service.analyze(req)
