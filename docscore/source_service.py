import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .types import SourceConfig

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
BITBUCKET_API_URL = "https://api.bitbucket.org/2.0"
BITBUCKET_DEFAULT_BRANCH = "master"

SUPPORTED_SOURCES = ("github", "bitbucket")


class DocumentEvaluationError(RuntimeError):
    """Erreur de base pour toute exécution d'évaluation interrompue."""


class SourceFetchError(DocumentEvaluationError):
    """Échec de récupération du fichier distant (réseau, authentification, fichier absent)."""


class UnsupportedSourceError(DocumentEvaluationError):
    """Hébergeur de code non pris en charge."""


def _http_get(url: str, timeout: int, **kwargs: Any) -> str:
    resp = requests.get(url, timeout=timeout, **kwargs)
    resp.raise_for_status()
    return resp.text


def fetch_from_github(
    owner: str,
    repo: str,
    path: str,
    token: Optional[str],
    ref: Optional[str] = None,
    timeout: int = 30,
) -> str:
    """
    Lit le contenu brut d'un fichier via l'API "contents" de GitHub.

    Le header `Accept: application/vnd.github.v3.raw` renvoie directement le
    texte du fichier au lieu du JSON encodé en base64.
    """
    url = f"{GITHUB_API_URL}/repos/{owner}/{repo}/contents/{path}"
    headers = {"Accept": "application/vnd.github.v3.raw"}
    if token:
        headers["Authorization"] = f"token {token}"
    else:
        logger.warning("Aucun token GitHub fourni, requête non authentifiée vers %s/%s", owner, repo)
    params: Optional[Dict[str, str]] = {"ref": ref} if ref else None

    logger.debug("GET %s (ref=%s)", url, ref)
    try:
        return _http_get(url, timeout, headers=headers, params=params)
    except requests.RequestException as e:
        raise SourceFetchError(f"Error fetching file from GitHub: {e}") from e


def fetch_from_bitbucket(
    owner: str,
    repo: str,
    path: str,
    username: str,
    token: Optional[str],
    branch: str = BITBUCKET_DEFAULT_BRANCH,
    timeout: int = 30,
) -> str:
    """Lit le contenu brut d'un fichier via l'endpoint `src` de Bitbucket Cloud."""
    url = f"{BITBUCKET_API_URL}/repositories/{owner}/{repo}/src/{branch}/{quote(path, safe='')}"

    logger.debug("GET %s", url)
    try:
        return _http_get(url, timeout, auth=(username, token or ""))
    except requests.RequestException as e:
        raise SourceFetchError(f"Error fetching file from Bitbucket: {e}") from e


def fetch_document(cfg: SourceConfig) -> str:
    source = (cfg.source or "").lower()

    if source == "github":
        return fetch_from_github(
            cfg.owner,
            cfg.repo,
            cfg.file_path,
            cfg.token,
            ref=cfg.branch,
            timeout=cfg.timeout,
        )
    if source == "bitbucket":
        if not cfg.username:
            raise SourceFetchError("Username is required for Bitbucket")
        return fetch_from_bitbucket(
            cfg.owner,
            cfg.repo,
            cfg.file_path,
            cfg.username,
            cfg.token,
            branch=cfg.branch or BITBUCKET_DEFAULT_BRANCH,
            timeout=cfg.timeout,
        )
    raise UnsupportedSourceError(f"Unsupported source: {cfg.source!r} (expected one of: {', '.join(SUPPORTED_SOURCES)})")
