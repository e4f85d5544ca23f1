"""Interview question suggestions derived from résumé or job text."""

DEFAULT_QUESTIONS = (
    "Describe your experience with blockchain technology.",
    "How have you integrated AI into previous projects?",
    "What challenges did you face in your last role?",
)

# keyword found in the text -> follow-up question
TOPIC_QUESTIONS: dict[str, str] = {
    "blockchain": "How do you stay updated with the latest blockchain developments?",
    "leadership": "Describe a situation where you had to lead a team through a difficult project.",
    "react": "What React design patterns do you commonly use in your projects?",
}

FEEDBACK = (
    "Focus on concrete examples and quantifiable results. "
    "Highlight your specific contributions to projects."
)


def suggest_questions(text: str, limit: int = 5) -> list[str]:
    """Default questions followed by topic questions for keywords in the text."""
    lowered = text.lower()
    topical = [q for keyword, q in TOPIC_QUESTIONS.items() if keyword in lowered]
    return (list(DEFAULT_QUESTIONS) + topical)[:limit]


def interview_feedback() -> str:
    return FEEDBACK
