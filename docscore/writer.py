from pathlib import Path

from .storage import REPORT_FILENAME, RESULT_FILENAME, write_json
from .types import EvaluationResult


def write_report_txt(out_dir: Path, report: str) -> Path:
    """Écrit le rapport texte dans `evaluation_report.txt`."""
    path = out_dir / REPORT_FILENAME
    path.write_text(report, encoding="utf-8")
    return path


def write_result_json(out_dir: Path, result: EvaluationResult) -> Path:
    """
    Écrit le résultat brut (scores, mots-clés manquants, feedback) dans
    `evaluation_result.json`, pour un usage programmatique du rapport.
    """
    path = out_dir / RESULT_FILENAME
    write_json(path, result.to_dict())
    return path
