"""JSON serializers for analysis results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


def to_json(result: BaseModel) -> str:
    """Serialize a result model to formatted JSON."""
    return result.model_dump_json(indent=2)


def write_json(result: BaseModel, output_path: str | Path) -> None:
    """Write result JSON to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(result) + "\n", encoding="utf-8")
