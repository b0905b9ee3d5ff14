from __future__ import annotations

from bowling_app.schemas import FrameRow, ScoreTable

PENDING_LABELS = {
    "pending_bonus": "- (Waiting Bonus)",
    "not_available": "-",
}


def _running_total_label(row: FrameRow) -> str:
    if row.running_total is not None:
        return str(row.running_total)
    return PENDING_LABELS[row.pending or "not_available"]


def render_frame(row: FrameRow) -> list[str]:
    lines = [
        f"Frame {row.frame_number}:",
        f"  First Roll: {row.first_roll}",
        f"  Second Roll: {row.second_roll}",
    ]
    if row.third_roll is not None:
        lines.append(f"  Third Roll: {row.third_roll}")
    lines.append(f"  Running Total: {_running_total_label(row)}")
    return lines


def render_score_table(table: ScoreTable) -> str:
    lines = ["", "=== Current Score ===", ""]
    for row in table.frames:
        lines.extend(render_frame(row))
        lines.append("")
    lines.append("======================")
    return "\n".join(lines) + "\n"
