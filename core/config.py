"""
Configuration constants for the Billboard Console.
Centralized configuration for easier maintenance and customization.
"""

# ============================================================================
# FILE PATHS
# ============================================================================
DB_PATH = "billboards.db"
HISTORY_LOG_FILE = "history_blackbox.txt"
SETTINGS_FILE = "app_settings.json"
PRINT_DIR = "print"

# Seed the three sample contracts into an empty store on first start
SEED_SAMPLE_DATA = True

# Log directory and files (managed by app_logging.py)
LOG_DIR = "log"
LOG_EXCEPTIONS_FILE = "log/exceptions.log"
LOG_UX_ACTIONS_FILE = "log/ux_actions.log"
LOG_TRACE_FILE = "log/trace.log"


# ============================================================================
# WINDOW & UI GEOMETRY
# ============================================================================
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 820
TREE_ROW_HEIGHT = 34
GALLERY_COLUMNS = 3
CARD_WRAP_LENGTH = 320
TOAST_DURATION_MS = 3500


# ============================================================================
# FONTS
# ============================================================================
FONTS = {
    "base": ("Segoe UI", 12),
    "heading": ("Segoe UI", 16, "bold"),
    "title": ("Segoe UI", 22, "bold"),
    "card_title": ("Segoe UI", 14, "bold"),
    "card_label": ("Segoe UI", 10, "bold"),
    "card_value": ("Segoe UI", 10),
    "card_price": ("Segoe UI", 14, "bold"),
    "label_bold": ("Segoe UI", 11, "bold"),
    "hint_gray": ("", 10),
    "toast": ("Segoe UI", 11, "bold"),
}


# ============================================================================
# CONTRACT STATUS
# ============================================================================
# Status text as stored -> badge key
STATUS_KEYS = {
    "نشط": "active",
    "active": "active",
    "منتهي": "expired",
    "expired": "expired",
    "معلق": "pending",
    "pending": "pending",
}

STATUS_BADGE_COLORS = {
    "green": {"background": "#dcfce7", "foreground": "#166534"},
    "red": {"background": "#fee2e2", "foreground": "#991b1b"},
    "yellow": {"background": "#fef9c3", "foreground": "#854d0e"},
    "gray": {"background": "#f3f4f6", "foreground": "#1f2937"},
}

PRICE_COLOR = "#16a34a"


# ============================================================================
# MONEY & LEDGER
# ============================================================================
CURRENCY_SUFFIX = "د.ل"
EMPTY_PLACEHOLDER = "—"

PAYMENT_METHODS = ["نقدي", "تحويل بنكي", "شيك", "بطاقة ائتمان"]
DEBT_METHOD = "دين سابق"

ENTRY_KIND_INVOICE = "invoice"
ENTRY_KIND_RECEIPT = "receipt"
ENTRY_KIND_DEBT = "debt"

ENTRY_KIND_LABELS = {
    ENTRY_KIND_INVOICE: "فاتورة",
    ENTRY_KIND_RECEIPT: "إيصال",
    ENTRY_KIND_DEBT: "دين سابق",
}


# ============================================================================
# USER MESSAGES
# ============================================================================
MESSAGES = {
    "load_failed": "فشل تحميل البيانات",
    "save_failed": "فشل الحفظ",
    "delete_failed": "فشل الحذف",
    "saved": "تم الحفظ",
    "debt_added": "تمت الإضافة",
    "receipt_updated": "تم تحديث الإيصال",
    "deleted": "تم الحذف",
    "incomplete": "أكمل البيانات",
    "amount_positive": "المبلغ يجب أن يكون أكبر من صفر",
    "amount_required": "أدخل المبلغ",
    "confirm_delete": "تأكيد حذف الإيصال؟",
    "no_contracts_match": "لا توجد عقود تطابق البحث",
    "no_contracts": "لا توجد عقود",
    "no_payments": "لا توجد دفعات",
    "no_customer": "اختر عميلاً أولاً",
    "exported": "تم حفظ كشف الحساب في:",
}


# ============================================================================
# TAB NAMES & LABELS
# ============================================================================
TAB_LABELS = {
    "contracts": "📝 العقود",
    "billing": "💵 فواتير وإيصالات العميل",
}

BUTTON_LABELS = {
    "view": "عرض",
    "edit": "تعديل",
    "print": "طباعة",
    "open_ledger": "كشف العميل",
    "new_contract": "عقد جديد",
    "refresh": "تحديث",
    "open": "فتح",
    "print_statement": "طباعة كشف حساب",
    "export_xlsx": "تصدير Excel",
    "add_debt": "إضافة دين سابق",
    "add_invoice": "إضافة فاتورة (سجل)",
    "add_receipt": "إضافة إيصال",
    "print_receipt": "طباعة إيصال",
    "edit_receipt": "تعديل",
    "delete": "حذف",
    "save": "حفظ",
    "cancel": "إلغاء",
    "close": "إغلاق",
}


# ============================================================================
# COLUMN CONFIGURATIONS
# ============================================================================
COLUMN_CONFIGS = {
    "ledger_contracts": {
        "contract_number": {"width": 160, "anchor": "center"},
        "ad_type": {"width": 220, "anchor": "center"},
        "start": {"width": 140, "anchor": "center"},
        "end": {"width": 140, "anchor": "center"},
        "total_rent": {"width": 170, "anchor": "center"},
    },
    "ledger_entries": {
        "contract_number": {"width": 140, "anchor": "center"},
        "kind": {"width": 110, "anchor": "center"},
        "amount": {"width": 150, "anchor": "center"},
        "method": {"width": 130, "anchor": "center"},
        "reference": {"width": 140, "anchor": "center"},
        "paid_at": {"width": 120, "anchor": "center"},
        "notes": {"width": 260, "anchor": "e"},
    },
}

COLUMN_ORDER = {
    "ledger_contracts": ("contract_number", "ad_type", "start", "end", "total_rent"),
    "ledger_entries": ("contract_number", "kind", "amount", "method", "reference", "paid_at", "notes"),
}

COLUMN_HEADINGS = {
    "ledger_contracts": {
        "contract_number": "رقم العقد",
        "ad_type": "نوع الإعلان",
        "start": "تاريخ البداية",
        "end": "تاريخ النهاية",
        "total_rent": "القيمة الإجمالية",
    },
    "ledger_entries": {
        "contract_number": "رقم العقد",
        "kind": "النوع",
        "amount": "المبلغ",
        "method": "طريقة الدفع",
        "reference": "المرجع",
        "paid_at": "التاريخ",
        "notes": "ملاحظات",
    },
}


# ============================================================================
# HELPER FUNCTION
# ============================================================================
def get_column_config(section: str) -> dict:
    """
    Get complete column configuration for a specific section.

    Args:
        section: Section name (e.g., "ledger_contracts", "ledger_entries")

    Returns:
        Dictionary with column names and their configuration including headers
    """
    if section not in COLUMN_CONFIGS:
        raise ValueError(f"Unknown section: {section}")

    config = {}
    for col_name, col_config in COLUMN_CONFIGS[section].items():
        config[col_name] = {
            **col_config,
            "header": COLUMN_HEADINGS[section].get(col_name, col_name),
        }

    return config
