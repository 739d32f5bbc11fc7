import json
from pathlib import Path
from typing import Dict

REPORT_FILENAME = "evaluation_report.txt"
RESULT_FILENAME = "evaluation_result.json"
STATUS_FILENAME = "status.json"


def ensure_out_dir(out_root: Path) -> Path:
    out_root.mkdir(parents=True, exist_ok=True)
    return out_root


def write_json(path: Path, data: Dict) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def write_status(out_dir: Path, status: Dict) -> Path:
    p = out_dir / STATUS_FILENAME
    write_json(p, status)
    return p
