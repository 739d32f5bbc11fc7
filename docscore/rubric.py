from .types import DocumentType, Section


# Grille unique utilisée pour évaluer les documents "Project Overview".
PROJECT_OVERVIEW = DocumentType(
    name="Project Overview",
    sections=(
        Section(
            name="Introduction",
            required_keywords=("purpose", "scope", "objectives"),
            min_word_count=100,
        ),
        Section(
            name="Key Features",
            required_keywords=("functionality", "benefits", "unique"),
            min_word_count=150,
        ),
        Section(
            name="Target User",
            required_keywords=("audience", "user", "demographic"),
            min_word_count=75,
        ),
        Section(
            name="User Access Levels",
            required_keywords=("roles", "permissions", "admin"),
            min_word_count=100,
        ),
        Section(
            name="Purpose",
            required_keywords=("goal", "aim", "objective"),
            min_word_count=75,
        ),
        Section(
            name="Technology Stack",
            required_keywords=("frontend", "backend", "database"),
            min_word_count=100,
        ),
        Section(
            name="Conclusion",
            required_keywords=("summary", "future", "next steps"),
            min_word_count=75,
        ),
    ),
    overall_min_word_count=500,
)
