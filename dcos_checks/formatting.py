from __future__ import annotations

import json
from typing import Any, Dict

from dcos_checks.checks.results import CheckResult


def result_to_dict(check_id: str, result: CheckResult) -> Dict[str, Any]:
    return {
        "id": check_id,
        "status": result.status.name,
        "status_code": int(result.status),
        "message": result.message,
        "error": str(result.error) if result.error is not None else None,
    }


def format_result(check_id: str, result: CheckResult, as_json: bool = False) -> str:
    payload = result_to_dict(check_id, result)
    if as_json:
        return json.dumps(payload, sort_keys=True)

    lines = [f"[{payload['status']}] {check_id}"]
    if payload["message"]:
        lines.append(payload["message"])
    if payload["error"]:
        lines.append(f"Error: {payload['error']}")
    return "\n".join(lines)
