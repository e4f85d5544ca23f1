"""Curated skill vocabulary used by the résumé skill extractor.

Each entry carries its canonical label (the form returned to callers), the
aliases searched for in résumé text, and an optional context rule for short,
ambiguous labels such as "AI" or "Move".
"""

from dataclasses import dataclass

# Context rule modes
ANY_CONTEXT = "any"  # label OR any phrase anywhere in the text
NEARBY_CONTEXT = "nearby"  # label AND a phrase on the same line, either order


@dataclass(frozen=True)
class ContextRule:
    """Extra evidence a label needs before it counts as a match."""

    phrases: tuple[str, ...]
    mode: str = ANY_CONTEXT


@dataclass(frozen=True)
class SkillEntry:
    """A single vocabulary entry."""

    label: str
    aliases: tuple[str, ...] = ()
    context: ContextRule | None = None

    @property
    def search_terms(self) -> tuple[str, ...]:
        """Aliases when given, otherwise the label itself."""
        return self.aliases or (self.label,)


AI_CONTEXT = ContextRule(
    phrases=(
        "artificial intelligence",
        "machine learning",
        "neural network",
        "deep learning",
    ),
    mode=ANY_CONTEXT,
)

BLOCKCHAIN_CONTEXT = ContextRule(
    phrases=(
        "blockchain",
        "crypto",
        "web3",
        "smart contract",
        "programming language",
    ),
    mode=NEARBY_CONTEXT,
)


def _entries(*labels: str) -> tuple[SkillEntry, ...]:
    return tuple(SkillEntry(label) for label in labels)


DEFAULT_VOCABULARY: tuple[SkillEntry, ...] = (
    # Programming languages
    *_entries(
        "JavaScript", "JS", "TypeScript", "TS", "Python", "Java",
    ),
    # "#" is stripped during normalisation, so C# is only found via spelled-out forms
    SkillEntry("C#", aliases=("c sharp", "csharp")),
    *_entries(
        "C++", "Ruby", "PHP", "Swift", "Kotlin", "Go", "Golang", "Rust",
    ),
    # Frontend
    *_entries(
        "React", "React.js", "Angular", "Vue", "Vue.js", "Next.js", "Svelte",
        "HTML", "CSS", "SCSS", "Sass", "TailwindCSS", "Bootstrap",
    ),
    # Backend
    *_entries(
        "Node.js", "Express", "Django", "Flask", "Spring", "ASP.NET",
        "Laravel", "Ruby on Rails", "FastAPI",
    ),
    # Cloud & DevOps
    *_entries(
        "AWS", "Amazon Web Services", "Azure", "GCP", "Google Cloud",
        "Docker", "Kubernetes", "K8s", "CI/CD", "Jenkins", "GitHub Actions",
    ),
    # Databases
    *_entries(
        "SQL", "NoSQL", "MongoDB", "PostgreSQL", "MySQL", "Redis",
        "DynamoDB", "Cassandra", "Elasticsearch",
    ),
    # AI & data science
    SkillEntry("Machine Learning"),
    SkillEntry("ML"),
    SkillEntry("AI", context=AI_CONTEXT),
    *_entries(
        "Artificial Intelligence", "Data Science", "TensorFlow", "PyTorch",
        "NLP", "Computer Vision",
    ),
    # Blockchain
    *_entries("Blockchain", "Smart Contracts", "Solidity", "Web3", "Ethereum"),
    SkillEntry("Aptos", context=BLOCKCHAIN_CONTEXT),
    SkillEntry("Move", context=BLOCKCHAIN_CONTEXT),
    *_entries("DeFi", "NFT", "Cryptocurrency"),
    # Soft skills & management
    *_entries(
        "Product Management", "Agile", "Scrum", "Leadership",
        "Project Management", "Team Management",
    ),
    # Other technical skills
    *_entries(
        "API Integration", "REST API", "GraphQL", "Microservices", "Testing",
        "Unit Testing", "QA", "UI/UX", "Mobile Development",
    ),
)


def vocabulary_labels(vocabulary: tuple[SkillEntry, ...] = DEFAULT_VOCABULARY) -> list[str]:
    """Canonical labels in vocabulary order."""
    return [entry.label for entry in vocabulary]
