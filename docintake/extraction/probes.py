"""Regular-expression probes used by the field extractor.

Every probe returns ``None`` on a miss so the caller can substitute a
synthetic value for that single field.
"""

import re

INVOICE_NUMBER_RE = re.compile(r"(?:invoice|inv)[\s#:-]*([a-z0-9-]+)", re.IGNORECASE)
RECEIPT_NUMBER_RE = re.compile(r"(?:receipt|rcp)[\s#:-]*([a-z0-9-]+)", re.IGNORECASE)
CONTRACT_ID_RE = re.compile(r"(?:contract|cnt)[\s#:-]*([a-z0-9-]+)", re.IGNORECASE)
VENDOR_RE = re.compile(r"(?:from|vendor|company)[\s:]*([A-Za-z\s]+)", re.IGNORECASE)
# Case-sensitive on purpose: lower-case words must not look like ID numbers.
ID_NUMBER_RE = re.compile(r"[A-Z0-9]{6,12}")

DATE_RE = re.compile(r"\b(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})\b")

_AMOUNT = r"(\d{1,3}(?:,\d{3})*(?:\.\d{2})?)"
SYMBOL_AMOUNT_RE = re.compile(r"[$€£]\s?" + _AMOUNT)
BARE_AMOUNT_RE = re.compile(r"[$€£]?\s?" + _AMOUNT)


def extract_pattern(text: str, pattern: re.Pattern[str]) -> str | None:
    """Return the first capture group of the first match (whole match if none)."""
    match = pattern.search(text)
    if match is None:
        return None
    value = match.group(1) if pattern.groups else match.group(0)
    value = value.strip()
    return value or None


def extract_date(text: str, index: int = 0) -> str | None:
    """Return the ``index``-th date-shaped token in the text."""
    matches = DATE_RE.findall(text)
    if index < len(matches):
        return matches[index]
    return None


def extract_currency(text: str) -> str | None:
    """Return the first monetary amount as ``$<digits>``, separators stripped.

    Amounts carrying a currency symbol win over bare numbers.
    """
    match = SYMBOL_AMOUNT_RE.search(text) or BARE_AMOUNT_RE.search(text)
    if match is None:
        return None
    return "$" + match.group(1).replace(",", "")
