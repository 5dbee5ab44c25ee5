from xml.sax.saxutils import escape

from openpyxl import Workbook
from openpyxl.styles import Font
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from feedback_app.utils.dates import format_display_date

EXPORT_HEADER = ("Location", "Rating", "Reasons", "Date")
SHEET_NAME = "Feedback"
PDF_TITLE = "Feedback Report"

PDF_FILENAME = "feedback_report.pdf"
XLSX_FILENAME = "feedback_report.xlsx"


def _cell(value):
    return "" if value is None else str(value)


def build_rows(records):
    """
    Baris data (tanpa header) dengan urutan kolom Location, Rating, Reasons, Date.
    Urutan baris = urutan records.
    """
    rows = []
    for item in records:
        rows.append([
            _cell(item.location),
            _cell(item.rating),
            _cell(item.reasons),
            format_display_date(item.created_at) if item.created_at else "",
        ])
    return rows


def build_pdf_story(records):
    styles = getSampleStyleSheet()
    body = styles["BodyText"]

    data = [list(EXPORT_HEADER)]
    for location, rating, reasons, created in build_rows(records):
        # kolom alasan bisa panjang -> dibungkus Paragraph supaya wrap
        data.append([location, rating, Paragraph(escape(reasons), body), created])

    table = Table(data, colWidths=[80, 70, 230, 120], repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2980BA")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ]))

    return [Paragraph(PDF_TITLE, styles["Title"]), Spacer(1, 12), table]


def export_pdf(records, target=PDF_FILENAME):
    """Tulis PDF ke path atau file object biner."""
    doc = SimpleDocTemplate(target, pagesize=A4, title=PDF_TITLE)
    doc.build(build_pdf_story(records))
    return target


def build_workbook(records):
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    ws.append(list(EXPORT_HEADER))
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in build_rows(records):
        ws.append(row)
    return wb


def export_xlsx(records, target=XLSX_FILENAME):
    """Tulis workbook (1 sheet "Feedback") ke path atau file object biner."""
    build_workbook(records).save(target)
    return target
