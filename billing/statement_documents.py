"""
Printable documents: customer statement, single receipt and contract sheet.

Each document is built in two steps: a ``build_*_view`` function turns
ledger data into a small view model, and a ``render_*_html`` function turns
the view model into a standalone right-to-left HTML page that prints itself
when opened. Rendering never touches the data client or Tk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timezone
from html import escape
from string import Template

from billing.ledger_session import Totals
from core.config import EMPTY_PLACEHOLDER, ENTRY_KIND_LABELS
from data.models import Contract, LedgerEntry
from utils.formatting import format_date, format_datetime, format_money, parse_timestamp


@dataclass(frozen=True)
class StatementRow:
    date: str
    kind: str
    amount: str
    reference: str
    notes: str


@dataclass(frozen=True)
class StatementView:
    customer_name: str
    total_rent: str
    total_paid: str
    balance: str
    rows: list[StatementRow] = field(default_factory=list)


@dataclass(frozen=True)
class KeyValueView:
    title: str
    rows: list[tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class ContractSheetView:
    details: KeyValueView
    billboards: list[tuple[str, str, str]] = field(default_factory=list)


_PRINT_ON_LOAD = "<script>window.onload=function(){window.print();}</script>"

_STATEMENT_TEMPLATE = Template(
    """<!DOCTYPE html>
<html dir="rtl" lang="ar">
<head>
<meta charset="utf-8" />
<title>كشف حساب - $customer_name</title>
<style>
body{font-family:Arial,sans-serif;padding:20px;max-width:900px;margin:auto}
h1{font-size:22px;margin:0 0 10px}
table{width:100%;border-collapse:collapse;margin-top:10px}
th,td{border:1px solid #ddd;padding:8px;text-align:center}
.right{text-align:right}
</style>
</head>
<body>
<h1>كشف حساب</h1>
<div class="right">العميل: $customer_name</div>
<div class="right">إجمالي العقود: $total_rent</div>
<div class="right">إجمالي المدفوع: $total_paid</div>
<div class="right">المتبقي: $balance</div>
<table>
<thead><tr><th>التاريخ</th><th>النوع</th><th>المبلغ</th><th>المرجع</th><th>ملاحظات</th></tr></thead>
<tbody>
$rows
</tbody>
</table>
$print_script
</body>
</html>
"""
)

_KEY_VALUE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html dir="rtl" lang="ar">
<head>
<meta charset="utf-8" />
<title>$title</title>
<style>
body{font-family:Arial,sans-serif;padding:20px;max-width:600px;margin:auto}
.title{font-size:22px;font-weight:bold}
table{width:100%;border-collapse:collapse;margin-top:10px}
td,th{padding:6px;border-bottom:1px solid #eee;text-align:right}
</style>
</head>
<body>
<div class="title">$title</div>
<table>
$rows
</table>
$extra
$print_script
</body>
</html>
"""
)


def kind_label(kind: str | None) -> str:
    if not kind:
        return ""
    return ENTRY_KIND_LABELS.get(kind, kind)


def _sort_key(entry: LedgerEntry) -> tuple[int, float]:
    parsed = parse_timestamp(entry.paid_at)
    if parsed is None:
        return (0, 0.0)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (1, parsed.timestamp())


def build_statement_view(customer_name: str | None, entries: list[LedgerEntry], totals: Totals) -> StatementView:
    """Statement rows oldest first; entries without a date come before dated ones."""
    rows = [
        StatementRow(
            date=format_date(e.paid_at),
            kind=kind_label(e.entry_type),
            amount=format_money(e.amount),
            reference=e.reference or "",
            notes=e.notes or "",
        )
        for e in sorted(entries, key=_sort_key)
    ]
    return StatementView(
        customer_name=customer_name or "",
        total_rent=format_money(totals.total_rent),
        total_paid=format_money(totals.total_paid),
        balance=format_money(totals.balance),
        rows=rows,
    )


def render_statement_html(view: StatementView) -> str:
    rows = "\n".join(
        "<tr>"
        + "".join(f"<td>{escape(cell)}</td>" for cell in (r.date, r.kind, r.amount, r.reference, r.notes))
        + "</tr>"
        for r in view.rows
    )
    return _STATEMENT_TEMPLATE.substitute(
        customer_name=escape(view.customer_name),
        total_rent=escape(view.total_rent),
        total_paid=escape(view.total_paid),
        balance=escape(view.balance),
        rows=rows,
        print_script=_PRINT_ON_LOAD,
    )


def build_receipt_view(customer_name: str | None, entry: LedgerEntry) -> KeyValueView:
    return KeyValueView(
        title="إيصال دفع",
        rows=[
            ("العميل", customer_name or ""),
            ("رقم العقد", entry.contract_number or EMPTY_PLACEHOLDER),
            ("النوع", kind_label(entry.entry_type)),
            ("المبلغ", format_money(entry.amount)),
            ("التاريخ", format_datetime(entry.paid_at)),
            ("المرجع", entry.reference or ""),
            ("ملاحظات", entry.notes or ""),
        ],
    )


def _key_value_rows(rows: list[tuple[str, str]]) -> str:
    return "\n".join(f"<tr><td>{escape(k)}</td><td>{escape(v)}</td></tr>" for k, v in rows)


def render_receipt_html(view: KeyValueView) -> str:
    return _KEY_VALUE_TEMPLATE.substitute(
        title=escape(view.title),
        rows=_key_value_rows(view.rows),
        extra="",
        print_script=_PRINT_ON_LOAD,
    )


def build_contract_view(contract: Contract) -> ContractSheetView:
    details = KeyValueView(
        title=f"عقد إيجار لوحات إعلانية {contract.contract_number}",
        rows=[
            ("رقم العقد", contract.contract_number),
            ("العميل", contract.customer_name or ""),
            ("الهاتف", contract.phone or EMPTY_PLACEHOLDER),
            ("نوع الإعلان", contract.ad_type or ""),
            ("تاريخ البداية", format_date(contract.start_date, EMPTY_PLACEHOLDER)),
            ("تاريخ النهاية", format_date(contract.end_date, EMPTY_PLACEHOLDER)),
            ("قيمة الإيجار", format_money(contract.total_rent)),
            ("الحالة", contract.status or ""),
        ],
    )
    billboards = [(b.name, b.location or "", b.size or "") for b in contract.billboards]
    return ContractSheetView(details=details, billboards=billboards)


def render_contract_html(view: ContractSheetView) -> str:
    extra = ""
    if view.billboards:
        body = "\n".join(
            "<tr>" + "".join(f"<td>{escape(cell)}</td>" for cell in row) + "</tr>" for row in view.billboards
        )
        extra = (
            "<h3>اللوحات</h3><table><thead><tr><th>اللوحة</th><th>الموقع</th><th>المقاس</th></tr></thead>"
            f"<tbody>{body}</tbody></table>"
        )
    return _KEY_VALUE_TEMPLATE.substitute(
        title=escape(view.details.title),
        rows=_key_value_rows(view.details.rows),
        extra=extra,
        print_script=_PRINT_ON_LOAD,
    )
