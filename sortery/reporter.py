"""Serialize plans for display and for saving next to a run."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from .models import SortConfig, SortPlan


def plan_to_dict(plan: SortPlan, config: SortConfig) -> dict[str, object]:
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "source_root": str(config.source_root),
        "target_root": str(config.target_root),
        "date_format": config.date_format,
        "date_type": config.date_kind.value,
        "total_eligible": plan.total_eligible,
        "planned": len(plan),
        "entries": [
            {"source": str(entry.source), "destination": str(entry.destination)}
            for entry in plan
        ],
    }


def save_plan(plan: SortPlan, config: SortConfig, path: str | Path) -> Path:
    """Persist *plan* as JSON at *path* and return the written path."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = plan_to_dict(plan, config)
    target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return target


def render_plan_text(plan: SortPlan, *, dry_run: bool) -> str:
    verb = "Would move" if dry_run else "Moved"
    lines = [f"{entry.source} -> {entry.destination}" for entry in plan]
    lines.append(f"{verb} {len(plan)} of {plan.total_eligible} eligible file(s).")
    return "\n".join(lines)


__all__ = ["plan_to_dict", "render_plan_text", "save_plan"]
