import logging
import re
from typing import Iterable, List, Optional

from .types import DocumentType, EvaluationResult, Section, SectionEvaluation

logger = logging.getLogger(__name__)

# Titre de section quelconque: "## 3.  Nom"
ANY_SECTION_HEADER = re.compile(r"## \d+\.\s+")
_WORD_RE = re.compile(r"[^\W\d_]+")

WORD_COUNT_WEIGHT = 0.5
KEYWORD_WEIGHT = 0.5
OVERALL_WORD_COUNT_BONUS = 0.1


def count_words(text: str) -> int:
    return len(text.split())


def _tokenize(text: str) -> List[str]:
    """Mots alphabétiques en minuscules (ponctuation et chiffres retirés)."""
    return _WORD_RE.findall(text.lower())


def extract_keywords(text: str) -> List[str]:
    """
    Renvoie les mots-clés normalisés d'un texte: minuscules, sans chiffres ni
    ponctuation, sans doublons (l'ordre de première apparition est conservé).
    """
    seen = set()
    keywords: List[str] = []
    for token in _tokenize(text):
        if token not in seen:
            seen.add(token)
            keywords.append(token)
    return keywords


def _section_header_pattern(section: Section) -> "re.Pattern[str]":
    return re.compile(rf"## \d+\.\s+{re.escape(section.name)}", re.IGNORECASE)


def locate_section(content: str, section: Section) -> Optional[str]:
    """
    Découpe le texte de la section, de son titre jusqu'au titre suivant
    (ou la fin du document). Renvoie None si le titre est introuvable.
    """
    match = _section_header_pattern(section).search(content)
    if not match:
        return None
    next_header = ANY_SECTION_HEADER.search(content, match.end())
    end = next_header.start() if next_header else len(content)
    return content[match.start():end]


def _keyword_present(keyword: str, tokens: List[str], token_set: set) -> bool:
    parts = _tokenize(keyword)
    if not parts:
        return False
    if len(parts) == 1:
        return parts[0] in token_set
    # mot-clé composé ("next steps"): les mots doivent se suivre
    width = len(parts)
    return any(tokens[i:i + width] == parts for i in range(len(tokens) - width + 1))


def find_missing_keywords(text: str, required_keywords: Iterable[str]) -> List[str]:
    tokens = _tokenize(text)
    token_set = set(extract_keywords(text))
    return [kw for kw in required_keywords if not _keyword_present(kw, tokens, token_set)]


def evaluate_section(content: str, section: Section) -> SectionEvaluation:
    section_text = locate_section(content, section)
    if section_text is None:
        logger.debug("Section absente: %s", section.name)
        return SectionEvaluation(
            score=0.0,
            feedback=f'Section "{section.name}" is missing.',
            missing_keywords=list(section.required_keywords),
            word_count=0,
            found=False,
        )

    words = count_words(section_text)
    missing = find_missing_keywords(section_text, section.required_keywords)

    score = 0.0
    feedback = ""

    if words >= section.min_word_count:
        score += WORD_COUNT_WEIGHT
        feedback += f"Word count requirement met ({words} words). "
    else:
        feedback += f"Word count below minimum ({words}/{section.min_word_count}). "

    required = len(section.required_keywords)
    keyword_ratio = 1.0 if required == 0 else (required - len(missing)) / required
    score += KEYWORD_WEIGHT * keyword_ratio

    if not missing:
        feedback += "All required keywords found. "
    else:
        feedback += f"Missing keywords: {', '.join(missing)}. "

    return SectionEvaluation(
        score=min(score, 1.0),
        feedback=feedback,
        missing_keywords=missing,
        word_count=words,
    )


def evaluate_document(content: str, document_type: DocumentType) -> EvaluationResult:
    """
    Évalue un document complet selon la grille:
    moyenne des scores de section, bonus de 0.1 si le nombre de mots global
    atteint le minimum, plafonné à 1.0 puis exprimé en pourcentage.
    """
    word_count = count_words(content)
    section_scores = {}
    feedback: List[str] = []
    missing_keywords = {}

    total = 0.0
    for section in document_type.sections:
        evaluation = evaluate_section(content, section)
        section_scores[section.name] = evaluation.score
        feedback.append(f"{section.name}: {evaluation.feedback}")
        if evaluation.missing_keywords:
            missing_keywords[section.name] = evaluation.missing_keywords
        total += evaluation.score

    overall = total / len(document_type.sections) if document_type.sections else 0.0

    if word_count >= document_type.overall_min_word_count:
        overall += OVERALL_WORD_COUNT_BONUS
        feedback.append(f"Overall word count requirement met ({word_count} words).")
    else:
        feedback.append(
            f"Overall word count below minimum ({word_count}/{document_type.overall_min_word_count})."
        )

    overall_score = min(overall, 1.0) * 100
    logger.info("Document '%s' évalué: %.2f%% (%d mots)", document_type.name, overall_score, word_count)

    return EvaluationResult(
        document_type=document_type.name,
        overall_score=overall_score,
        section_scores=section_scores,
        feedback=feedback,
        missing_keywords=missing_keywords,
        word_count=word_count,
    )
