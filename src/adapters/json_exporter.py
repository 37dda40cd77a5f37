"""JSON export of a wake result."""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import WakeResult


def result_to_json(result: WakeResult) -> str:
    """Serialize `result` with a stable key order.

    The MAC is written in its display form instead of raw bytes.
    """

    payload = result.model_dump(mode="json", exclude={"mac"})
    payload["mac"] = result.mac_display
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def export_result_json(*, result: WakeResult, output_path: Path) -> Path:
    """Write `result` as UTF-8 JSON to `output_path`."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result_to_json(result) + "\n", encoding="utf-8")
    return output_path
