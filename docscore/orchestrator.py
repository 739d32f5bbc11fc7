import asyncio
import logging
import time
from typing import Optional

from .config import load_config
from .report import generate_report
from .rubric import PROJECT_OVERVIEW
from .scoring import evaluate_document
from .source_service import fetch_document
from .storage import ensure_out_dir, write_status
from .types import DocumentType, ProcessConfig, ProcessReport, StepResult
from .writer import write_report_txt, write_result_json

logger = logging.getLogger(__name__)


async def run_document_pipeline(
    cfg: Optional[ProcessConfig] = None,
    document_type: DocumentType = PROJECT_OVERVIEW,
) -> ProcessReport:
    """
    Orchestrateur principal: récupération → évaluation → rapport.

    Étapes:
    1. Lecture du fichier distant (GitHub ou Bitbucket).
    2. Évaluation du texte selon la grille et rendu du rapport.
    3. Écriture du rapport texte, du résultat JSON et du status.

    Une erreur de récupération interrompt le run avant toute écriture.
    """
    cfg = cfg or load_config()
    src = cfg.source
    document = f"{src.source}:{src.owner}/{src.repo}/{src.file_path}"
    steps: list[StepResult] = []

    # 1) Récupération du fichier (appel HTTP bloquant déporté dans un thread)
    t0 = time.time()
    content = await asyncio.to_thread(fetch_document, src)
    steps.append(StepResult(name="fetch_document", ok=True, duration_sec=time.time() - t0))
    logger.info("Fichier récupéré: %s (%d caractères)", document, len(content))

    # 2) Évaluation + rendu
    t0 = time.time()
    result = evaluate_document(content, document_type)
    report = generate_report(result)
    steps.append(StepResult(name="evaluate_document", ok=True, duration_sec=time.time() - t0))

    # 3) Sorties
    t0 = time.time()
    out_dir = ensure_out_dir(cfg.out_root)
    report_path = write_report_txt(out_dir, report)
    result_path = write_result_json(out_dir, result)
    steps.append(
        StepResult(
            name="write_outputs",
            ok=True,
            duration_sec=time.time() - t0,
            output_paths={
                "report_txt": str(report_path),
                "result_json": str(result_path),
            },
        )
    )

    write_status(
        out_dir,
        {
            "document": document,
            "overall_score": result.overall_score,
            "steps": [s.__dict__ for s in steps],
        },
    )

    return ProcessReport(
        document=document,
        out_dir=str(out_dir),
        steps=steps,
        result=result,
        report_text=report,
        report_path=str(report_path),
    )
