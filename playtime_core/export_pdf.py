from __future__ import annotations
from typing import List
import io
from reportlab.lib.pagesizes import letter, landscape
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .csv_io import player_stats_to_dataframe, schedule_to_dataframe
from .models import Schedule
from .ui_helpers import format_time

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
    ("TEXTCOLOR", (0,0), (-1,0), colors.black),
    ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
    ("FONTSIZE", (0,0), (-1,-1), 9),
    ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ("ALIGN", (0,0), (-1,-1), "LEFT"),
    ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
])

def _table(df) -> Table:
    data: List[list] = [list(df.columns)] + [[str(v) for v in row] for row in df.values.tolist()]
    t = Table(data, repeatRows=1)
    t.setStyle(_TABLE_STYLE)
    return t

def render_schedule_pdf(schedule: Schedule, title: str = "Rotation Schedule") -> bytes:
    """Printable bench card: rotation table, then minutes per player."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(letter), leftMargin=40, rightMargin=40, topMargin=40, bottomMargin=40)
    styles = getSampleStyleSheet()
    st = schedule.stats

    summary = (
        f"{len(schedule.rotations)} periods, {format_time(st.total_game_time)} total • "
        f"{format_time(st.rotation_duration)} per rotation"
        f"{'' if st.is_using_optimal_duration else ' (override)'} • "
        f"target {st.target_minutes_per_player:.1f} min per player"
    )
    story = [
        Paragraph(title, styles["Title"]),
        Paragraph(summary, styles["Normal"]),
        Spacer(1, 12),
        _table(schedule_to_dataframe(schedule)),
        Spacer(1, 18),
        Paragraph("Playing Time", styles["Heading2"]),
        _table(player_stats_to_dataframe(schedule)),
    ]
    doc.build(story)
    return buf.getvalue()
