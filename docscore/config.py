import os
from pathlib import Path
from typing import Optional

from .source_service import DocumentEvaluationError
from .types import ProcessConfig, SourceConfig


class ConfigError(DocumentEvaluationError):
    """Configuration obligatoire absente."""


def _required(value: Optional[str], env_name: str) -> str:
    if not value:
        raise ConfigError(f"Missing required configuration: {env_name}")
    return value


def _timeout(value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"Invalid FETCH_TIMEOUT: {value!r}") from e


def load_config(
    source: Optional[str] = None,
    owner: Optional[str] = None,
    repo: Optional[str] = None,
    file_path: Optional[str] = None,
    branch: Optional[str] = None,
    out_root: Optional[str] = None,
    log_level: Optional[str] = None,
) -> ProcessConfig:
    """
    Construit la configuration du run: les arguments explicites priment,
    sinon on lit l'environnement (éventuellement alimenté par un .env).
    """
    source = _required(source or os.getenv("SOURCE"), "SOURCE").lower()

    # Le token dépend de l'hébergeur choisi
    token_env = "GITHUB_TOKEN" if source == "github" else "BITBUCKET_TOKEN"

    src = SourceConfig(
        source=source,
        owner=_required(owner or os.getenv("REPO_OWNER"), "REPO_OWNER"),
        repo=_required(repo or os.getenv("REPO_NAME"), "REPO_NAME"),
        file_path=_required(file_path or os.getenv("FILE_PATH"), "FILE_PATH"),
        token=os.getenv(token_env),
        username=os.getenv("BITBUCKET_USERNAME") or None,
        branch=branch or os.getenv("SOURCE_BRANCH") or None,
        timeout=_timeout(os.getenv("FETCH_TIMEOUT", "30")),
    )

    root = Path(out_root or os.getenv("REPORT_OUT_ROOT", "reports")).expanduser().resolve()

    return ProcessConfig(
        source=src,
        out_root=root,
        log_level=(log_level or os.getenv("LOG_LEVEL", "INFO")).upper(),
    )
