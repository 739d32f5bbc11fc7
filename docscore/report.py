from .types import EvaluationResult


def generate_report(result: EvaluationResult) -> str:
    """Met en forme le résultat d'évaluation en rapport texte lisible."""
    section_lines = "\n".join(
        f"- {name}: {score * 100:.2f}%" for name, score in result.section_scores.items()
    )
    feedback_lines = "\n".join(f"- {item}" for item in result.feedback)
    missing_lines = "\n".join(
        f"- {name}: {', '.join(keywords)}" for name, keywords in result.missing_keywords.items()
    )

    return (
        "\n"
        "Document Evaluation Report\n"
        "==========================\n"
        f"Document Type: {result.document_type}\n"
        f"Overall Score: {result.overall_score:.2f}%\n"
        f"Total Word Count: {result.word_count}\n"
        "\n"
        "Section Scores:\n"
        f"{section_lines}\n"
        "\n"
        "Feedback:\n"
        f"{feedback_lines}\n"
        "\n"
        "Missing Keywords:\n"
        f"{missing_lines}\n"
    )
