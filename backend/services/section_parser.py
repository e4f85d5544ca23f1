"""Résumé structure: sections, experience lines and education signals."""

import re
from datetime import datetime

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|expertise)",
    ],
    "summary": [
        r"(?:professional|career)?\s*(?:summary|objective)",
        r"profile",
    ],
    "projects": [
        r"(?:key|notable|personal)?\s*projects",
        r"hackathons?",
    ],
}

_SECTION_RES: dict[str, re.Pattern] = {
    name: re.compile(rf"^\s*(?:{'|'.join(patterns)})\s*:?\s*$", re.IGNORECASE)
    for name, patterns in SECTION_PATTERNS.items()
}

# "2019 - Present", "2018-2021", "(2021-Present)"
_YEAR = r"\b(?:19|20)\d{2}\b"
_ROLE_SPAN_RES = (
    re.compile(rf"{_YEAR}.*\b(?:present|current|now)\b", re.IGNORECASE),
    re.compile(rf"{_YEAR}.*{_YEAR}"),
)

EDUCATION_KEYWORDS = ("bachelor", "master", "phd", "degree", "university", "college", "school")

# "5+ years of experience"
EXP_YEARS_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience|exp\b)",
    re.IGNORECASE,
)

_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_RANGE_RE = re.compile(
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}})"
    r"\s*(?:-|–|—|to)\s*"
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}}|[Pp]resent|[Cc]urrent)",
    re.IGNORECASE,
)

_MONTH_NUMBERS = {
    name: number
    for number, names in enumerate(
        (
            ("jan", "january"), ("feb", "february"), ("mar", "march"),
            ("apr", "april"), ("may",), ("jun", "june"), ("jul", "july"),
            ("aug", "august"), ("sep", "sept", "september"),
            ("oct", "october"), ("nov", "november"), ("dec", "december"),
        ),
        start=1,
    )
    for name in names
}

DEGREE_PATTERNS: dict[str, str] = {
    "phd": r"ph\.?d|doctorate|doctoral",
    "masters": r"m\.?sc|mba|master(?:'?s)?",
    "bachelors": r"b\.?sc|b\.?tech|bachelor(?:'?s)?",
    "associate": r"associate(?:'?s)?\s+degree",
}
# Checked highest first
_DEGREE_RES = [
    (level, re.compile(rf"\b(?:{pattern})\b", re.IGNORECASE))
    for level, pattern in DEGREE_PATTERNS.items()
]


def parse_sections(text: str) -> dict[str, str]:
    """Split résumé text into named sections.

    Text before the first recognised header goes into 'header'.
    """
    sections: dict[str, str] = {}
    current = "header"
    lines: list[str] = []

    for line in text.split("\n"):
        stripped = line.strip()
        header = None
        if stripped:
            header = next(
                (name for name, pattern in _SECTION_RES.items() if pattern.match(stripped)),
                None,
            )
        if header:
            if lines:
                sections[current] = "\n".join(lines).strip()
            current, lines = header, []
        else:
            lines.append(line)

    if lines:
        sections[current] = "\n".join(lines).strip()
    return {name: body for name, body in sections.items() if body}


def extract_experience_lines(text: str) -> list[str]:
    """Lines that look like a role: a year followed by present/current/now or another year."""
    return [
        line.strip()
        for line in text.split("\n")
        if any(pattern.search(line) for pattern in _ROLE_SPAN_RES)
    ]


def extract_education_lines(text: str) -> list[str]:
    """Lines mentioning a degree or an institution."""
    return [
        line.strip()
        for line in text.split("\n")
        if any(keyword in line.lower() for keyword in EDUCATION_KEYWORDS)
    ]


def _parse_date(date_str: str) -> tuple[int, int]:
    """Parse 'Mar 2019', '2019' or 'Present' into (year, month); (0, 0) if unknown."""
    date_str = date_str.strip().rstrip(".")
    if date_str.lower() in ("present", "current"):
        now = datetime.now()
        return now.year, now.month

    parts = date_str.split()
    if len(parts) == 2 and parts[0].lower().rstrip(".") in _MONTH_NUMBERS:
        try:
            return int(parts[1]), _MONTH_NUMBERS[parts[0].lower().rstrip(".")]
        except ValueError:
            return 0, 0

    if date_str.isdigit() and 1970 <= int(date_str) <= 2100:
        return int(date_str), 1
    return 0, 0


def extract_experience_years(text: str) -> float:
    """Estimate years of experience.

    Takes the larger of the highest explicit claim ("5+ years of experience")
    and the sum of all role date ranges.
    """
    explicit = max((float(m.group(1)) for m in EXP_YEARS_RE.finditer(text)), default=0.0)

    total_months = 0
    for match in DATE_RANGE_RE.finditer(text):
        start_year, start_month = _parse_date(match.group(1))
        end_year, end_month = _parse_date(match.group(2))
        if start_year and end_year:
            months = (end_year - start_year) * 12 + (end_month - start_month)
            if 0 < months < 600:
                total_months += months

    from_dates = round(total_months / 12, 1) if total_months else 0.0
    return max(explicit, from_dates)


def extract_education_level(text: str) -> str:
    """Highest education level mentioned: 'phd', 'masters', 'bachelors', 'associate' or ''."""
    for level, pattern in _DEGREE_RES:
        if pattern.search(text):
            return level
    return ""
