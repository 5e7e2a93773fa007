from __future__ import annotations

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from billing.ledger_session import Totals
from billing.statement_documents import kind_label
from core.app_logging import trace
from core.config import CURRENCY_SUFFIX, EMPTY_PLACEHOLDER
from data.models import Contract, LedgerEntry
from utils.formatting import format_date, to_number

MONEY_FORMAT = f'#,##0.00 "{CURRENCY_SUFFIX}"'


@trace
def export_ledger_xlsx(
    file_path: str,
    customer_name: str | None,
    customer_id: str | None,
    contracts: list[Contract],
    entries: list[LedgerEntry],
    totals: Totals,
) -> str:
    """Write the customer's contracts, ledger entries and totals to ``file_path``."""
    wb = Workbook()
    ws = wb.active
    ws.title = "كشف حساب"
    ws.sheet_view.rightToLeft = True

    bold = Font(bold=True)
    header_fill = PatternFill("solid", fgColor="D9E1F2")
    total_fill = PatternFill("solid", fgColor="DDFFDD")
    center = Alignment(horizontal="center")

    ws.append(["كشف حساب العميل"])
    ws.merge_cells("A1:G1")
    ws["A1"].font = Font(bold=True, size=14)
    ws.append(["العميل", customer_name or EMPTY_PLACEHOLDER, "رقم العميل", customer_id or EMPTY_PLACEHOLDER])
    for cell in ws[2]:
        cell.font = bold
    ws.append([])

    def _header(values: list[str]) -> None:
        ws.append(values)
        for cell in ws[ws.max_row]:
            cell.font = bold
            cell.alignment = center
            cell.fill = header_fill

    _header(["رقم العقد", "نوع الإعلان", "تاريخ البداية", "تاريخ النهاية", "القيمة الإجمالية"])
    for contract in contracts:
        ws.append(
            [
                contract.contract_number,
                contract.ad_type or "",
                format_date(contract.start_date),
                format_date(contract.end_date),
                to_number(contract.total_rent),
            ]
        )
        ws.cell(ws.max_row, 5).number_format = MONEY_FORMAT
    ws.append([])

    _header(["رقم العقد", "النوع", "المبلغ", "طريقة الدفع", "المرجع", "التاريخ", "ملاحظات"])
    for entry in entries:
        ws.append(
            [
                entry.contract_number or EMPTY_PLACEHOLDER,
                kind_label(entry.entry_type),
                to_number(entry.amount),
                entry.method or "",
                entry.reference or "",
                format_date(entry.paid_at),
                entry.notes or "",
            ]
        )
        ws.cell(ws.max_row, 3).number_format = MONEY_FORMAT
    ws.append([])

    for label, value in (
        ("إجمالي العقود", totals.total_rent),
        ("إجمالي المدفوع", totals.total_paid),
        ("المتبقي", totals.balance),
    ):
        ws.append([label, value])
        ws.cell(ws.max_row, 1).font = bold
        ws.cell(ws.max_row, 1).fill = total_fill
        ws.cell(ws.max_row, 2).number_format = MONEY_FORMAT

    for col in ("A", "B", "C", "D", "E", "F", "G"):
        max_len = 0
        for row_i in range(1, ws.max_row + 1):
            max_len = max(max_len, len(str(ws[f"{col}{row_i}"].value or "")))
        ws.column_dimensions[col].width = min(max(max_len + 2, 12), 48)

    wb.save(file_path)
    return file_path
