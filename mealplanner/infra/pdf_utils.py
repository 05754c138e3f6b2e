import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealplanner.domain.Meal import MealCategory, category_label
from mealplanner.domain.Plan import DayOfWeek, WeeklyPlan, day_label


def generate_pdf_for_plan(plan: WeeklyPlan) -> bytes:
    """Render the weekly plan as a Day / Breakfast / Lunch / Dinner table; empty slots show '-'."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Weekly Meal Plan", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day"] + [category_label(c) for c in MealCategory]]
    for day in DayOfWeek:
        row = [day_label(day)]
        for category in MealCategory:
            slot = plan.get(day, category)
            row.append(slot.meal_name if slot else "-")
        data.append(row)

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
