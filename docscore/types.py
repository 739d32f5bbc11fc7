from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Section:
    """Section attendue dans le document, repérée par son titre `## <n>. <nom>`."""
    name: str
    required_keywords: Tuple[str, ...] = ()
    min_word_count: int = 0


@dataclass(frozen=True)
class DocumentType:
    """Grille d'évaluation: sections ordonnées + nombre de mots minimum global."""
    name: str
    sections: Tuple[Section, ...]
    overall_min_word_count: int = 0


@dataclass
class SectionEvaluation:
    score: float
    feedback: str
    missing_keywords: List[str] = field(default_factory=list)
    word_count: int = 0
    found: bool = True


@dataclass
class EvaluationResult:
    document_type: str
    overall_score: float                 # 0 → 100
    section_scores: Dict[str, float]     # 0 → 1, dans l'ordre de la grille
    feedback: List[str]
    missing_keywords: Dict[str, List[str]]
    word_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_type": self.document_type,
            "overall_score": self.overall_score,
            "section_scores": dict(self.section_scores),
            "feedback": list(self.feedback),
            "missing_keywords": {k: list(v) for k, v in self.missing_keywords.items()},
            "word_count": self.word_count,
        }


@dataclass
class SourceConfig:
    """Coordonnées du fichier distant à évaluer et identifiants associés."""
    source: str                           # "github" | "bitbucket"
    owner: str
    repo: str
    file_path: str
    token: Optional[str] = None
    username: Optional[str] = None        # Bitbucket uniquement
    branch: Optional[str] = None
    timeout: int = 30


@dataclass
class ProcessConfig:
    """Configuration de haut niveau pour exécuter le pipeline."""
    source: SourceConfig
    out_root: Path
    log_level: str = "INFO"


@dataclass
class StepResult:
    name: str
    ok: bool
    duration_sec: float
    output_paths: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProcessReport:
    document: str
    out_dir: str
    steps: List[StepResult]
    result: EvaluationResult
    report_text: str
    report_path: Optional[str] = None
