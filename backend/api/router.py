import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_job_catalog
from config import settings
from models.requests import (
    InterviewQuestionsRequest,
    JobMatchRequest,
    QuickAnalyzeRequest,
    SkillExtractRequest,
)
from models.responses import (
    AnalysisResponse,
    CatalogResponse,
    InterviewQuestionsResponse,
    JobMatchResponse,
    SkillsResponse,
)
from models.schemas.job_template import JobTemplate
from services import interview_prep, pdf_parser, resume_analyzer
from services.job_matcher import score_jobs
from services.skill_extractor import extract_skill_list, order_skills
from services.summary import summarize

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _run_analysis(resume_text: str, catalog: tuple[JobTemplate, ...]) -> AnalysisResponse:
    try:
        return resume_analyzer.analyze(resume_text, catalog)
    except resume_analyzer.ResumeAnalysisError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/health")
async def health(catalog: tuple[JobTemplate, ...] = Depends(get_job_catalog)):
    return {
        "status": "ok",
        "catalog_size": len(catalog),
    }


@router.get("/jobs", response_model=CatalogResponse)
async def list_jobs(catalog: tuple[JobTemplate, ...] = Depends(get_job_catalog)):
    return CatalogResponse(jobs=list(catalog))


@router.post("/skills/extract", response_model=SkillsResponse)
@limiter.limit(settings.rate_limit)
async def extract_skills(request: Request, body: SkillExtractRequest):
    return SkillsResponse(skills=extract_skill_list(body.text))


@router.post("/jobs/match", response_model=JobMatchResponse)
@limiter.limit(settings.rate_limit)
async def match_jobs(
    request: Request,
    body: JobMatchRequest,
    catalog: tuple[JobTemplate, ...] = Depends(get_job_catalog),
):
    skills = order_skills(body.skills)
    matches = score_jobs(skills, catalog, canonical=catalog)
    return JobMatchResponse(matches=matches, summary=summarize(skills, matches))


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    catalog: tuple[JobTemplate, ...] = Depends(get_job_catalog),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Please upload a PDF file")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File size should be less than {settings.max_upload_size_mb}MB",
        )

    if not pdf_parser.looks_like_pdf(content):
        raise HTTPException(status_code=400, detail="Please upload a PDF file")

    # Extract text from PDF
    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception as e:
        logger.warning("PDF text extraction failed for %s: %s", resume_file.filename, e)
        raise HTTPException(
            status_code=400,
            detail=(
                "Failed to extract text from your resume. Please ensure your PDF "
                "is not password-protected and contains readable text."
            ),
        )

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from PDF")

    return _run_analysis(resume_text, catalog)


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    catalog: tuple[JobTemplate, ...] = Depends(get_job_catalog),
):
    return _run_analysis(body.resume_text, catalog)


@router.post("/interview/questions", response_model=InterviewQuestionsResponse)
@limiter.limit(settings.rate_limit)
async def interview_questions(request: Request, body: InterviewQuestionsRequest):
    return InterviewQuestionsResponse(
        questions=interview_prep.suggest_questions(body.text, limit=body.limit),
        feedback=interview_prep.interview_feedback(),
    )
