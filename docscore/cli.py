import argparse
import asyncio
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from .config import load_config
from .orchestrator import run_document_pipeline
from .source_service import DocumentEvaluationError

logger = logging.getLogger("docscore")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Évalue un document hébergé sur GitHub/Bitbucket selon la grille 'Project Overview'."
    )
    parser.add_argument("--source", required=False, help="Hébergeur: github|bitbucket (défaut: env SOURCE)")
    parser.add_argument("--owner", required=False, help="Propriétaire du dépôt (défaut: env REPO_OWNER)")
    parser.add_argument("--repo", required=False, help="Nom du dépôt (défaut: env REPO_NAME)")
    parser.add_argument("--file-path", required=False, help="Chemin du fichier dans le dépôt (défaut: env FILE_PATH)")
    parser.add_argument("--branch", required=False, help="Branche/ref à lire (défaut: env SOURCE_BRANCH)")
    parser.add_argument("--out-root", required=False, help="Dossier de sortie (défaut: reports)")
    parser.add_argument("--log-level", required=False, help="Niveau de log (défaut: env LOG_LEVEL ou INFO)")
    return parser


def main(argv=None) -> None:
    # Charger .env avant toute lecture d'os.getenv
    load_dotenv(find_dotenv(usecwd=True), override=False)

    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(
            source=args.source,
            owner=args.owner,
            repo=args.repo,
            file_path=args.file_path,
            branch=args.branch,
            out_root=args.out_root,
            log_level=args.log_level,
        )
    except DocumentEvaluationError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Error evaluating document: %s", e)
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO), format=LOG_FORMAT)

    try:
        report = asyncio.run(run_document_pipeline(cfg))
    except KeyboardInterrupt:
        logger.warning("Interrompu par l'utilisateur.")
        sys.exit(130)
    except DocumentEvaluationError as e:
        logger.error("Error evaluating document: %s", e)
        sys.exit(1)
    except OSError as e:
        # écriture des sorties impossible (dossier invalide, droits...)
        logger.error("Error writing evaluation report: %s", e)
        sys.exit(1)

    logger.info("Evaluation report generated: %s", report.report_path)
    print(report.report_text)


if __name__ == "__main__":
    main()
