import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from homechef.utilities.constants import SHOPPING_CATEGORIES


def _format_quantity(quantity: float) -> str:
    return f"{round(quantity, 2):g}"


def generate_pdf_for_shopping_list(items, title: str = "Shopping List", category_order=None):
    """Generate a printable PDF table: [ ] / Item / Quantity / Category, grouped by store category order."""
    order = list(category_order or SHOPPING_CATEGORIES)
    rank = {cat: idx for idx, cat in enumerate(order)}
    rows = sorted(items, key=lambda i: (rank.get(i.category, len(order)), i.item_name.lower()))

    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(title, styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["", "Item", "Quantity", "Category"]]
    for item in rows:
        data.append([
            "x" if item.checked else "",
            item.item_name,
            f"{_format_quantity(item.quantity)} {item.unit}".strip(),
            item.category,
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#2F6F68")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (0,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
