from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class SkillExtractRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Free-form text to scan for skills")


class JobMatchRequest(BaseModel):
    skills: list[str] = Field(default_factory=list, max_length=200, description="Candidate skill labels")


class InterviewQuestionsRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Resume or job description text")
    limit: int = Field(5, ge=1, le=10)
