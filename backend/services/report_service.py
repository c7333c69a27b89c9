from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING

from reportlab.lib.pagesizes import letter
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

if TYPE_CHECKING:
    from schemas.export import ExportSnapshot


def _summary_lines(snapshot: ExportSnapshot) -> list[str]:
    stats = snapshot.daily_stats
    total_steps = sum(s.total_steps for s in stats)
    exercise_minutes = sum(s.exercise_minutes for s in stats)
    goal_days = sum(1 for s in stats if s.goal_achieved)
    stability = [s.average_stability for s in stats if s.average_stability is not None]
    completed = sum(1 for s in snapshot.exercise_sessions if s.status == "completed")
    unread = sum(1 for a in snapshot.alerts if not a.is_read)

    return [
        f"Patient: {snapshot.user_id}",
        f"Exported: {snapshot.exported_at.isoformat()}",
        f"Days covered: {len(stats)}",
        f"Total steps: {total_steps:,}",
        f"Average steps per day: {round(total_steps / len(stats)) if stats else 0:,}",
        f"Exercise minutes: {exercise_minutes}",
        f"Goal achieved: {goal_days} / {len(stats)} days",
        f"Average stability: {sum(stability) / len(stability):.1f}" if stability else "Average stability: -",
        f"Exercise sessions completed: {completed} / {len(snapshot.exercise_sessions)}",
        f"Fall detections: {len(snapshot.fall_detections)}",
        f"Unread alerts: {unread}",
    ]


def build_report_pdf_bytes(snapshot: ExportSnapshot) -> bytes:
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    _, h = letter
    left = 0.75 * inch

    def next_line(y: float, step: float) -> float:
        y -= step
        if y < 1.0 * inch:
            c.showPage()
            c.setFont("Helvetica", 9)
            y = h - 0.75 * inch
        return y

    y = h - 0.75 * inch
    c.setFont("Helvetica-Bold", 16)
    c.drawString(left, y, "Knee Brace Rehabilitation Report")

    y -= 0.45 * inch
    c.setFont("Helvetica-Bold", 11)
    c.drawString(left, y, "Summary")
    y -= 0.25 * inch
    c.setFont("Helvetica", 10)
    for line in _summary_lines(snapshot):
        c.drawString(left, y, line)
        y = next_line(y, 0.2 * inch)

    y -= 0.15 * inch
    c.setFont("Helvetica-Bold", 11)
    c.drawString(left, y, "Daily Stats")
    y -= 0.25 * inch
    c.setFont("Helvetica", 9)
    columns = (0, 1.2, 2.2, 3.4, 4.4, 5.6)
    header = ("Date", "Steps", "Exercise Min", "Falls", "Stability", "Goal")
    for offset, text in zip(columns, header):
        c.drawString(left + offset * inch, y, text)
    y = next_line(y, 0.2 * inch)
    for s in snapshot.daily_stats:
        row = (
            s.date.isoformat(),
            f"{s.total_steps:,}",
            str(s.exercise_minutes),
            str(s.fall_count),
            f"{s.average_stability:.1f}" if s.average_stability is not None else "-",
            "yes" if s.goal_achieved else "no",
        )
        for offset, text in zip(columns, row):
            c.drawString(left + offset * inch, y, text)
        y = next_line(y, 0.18 * inch)

    if snapshot.fall_detections:
        y -= 0.15 * inch
        c.setFont("Helvetica-Bold", 11)
        c.drawString(left, y, "Fall Detections (latest 20)")
        y -= 0.25 * inch
        c.setFont("Helvetica", 9)
        for f in snapshot.fall_detections[:20]:
            confirmed = "confirmed" if f.is_confirmed else "unconfirmed"
            msg = f"{f.timestamp.isoformat()} • {f.severity} • {confirmed} • {f.location or '-'}"
            c.drawString(left, y, msg[:120])
            y = next_line(y, 0.18 * inch)

    c.showPage()
    c.save()
    return buf.getvalue()
