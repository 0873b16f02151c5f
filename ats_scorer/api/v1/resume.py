from fastapi import APIRouter, HTTPException, Request

from ats_scorer.core.rate_limit import rate_limit
from ats_scorer.features import extract_jd_keywords
from ats_scorer.schemas import AnalyzeRequest, JdKeywordsRequest, JdKeywordsResponse, ResumeAnalysis
from ats_scorer.services import EmptyDocumentError, get_default_analyzer

router = APIRouter()


@router.post("/resume/analyze", response_model=ResumeAnalysis)
@rate_limit()
async def analyze_resume(request: Request, payload: AnalyzeRequest):
    _ = request
    analyzer = get_default_analyzer()
    try:
        return analyzer.analyze(
            payload.resume_text,
            profile_key=payload.profile,
            use_profile=payload.use_profile,
            job_description_text=payload.job_description_text,
            use_jd=payload.use_jd,
        )
    except EmptyDocumentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/resume/jd-keywords", response_model=JdKeywordsResponse)
@rate_limit()
async def jd_keywords(request: Request, payload: JdKeywordsRequest):
    _ = request
    analyzer = get_default_analyzer()
    return JdKeywordsResponse(
        keywords=extract_jd_keywords(payload.job_description_text, taxonomy=analyzer.taxonomy)
    )
