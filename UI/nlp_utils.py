import re
from typing import Optional

# Kept as two patterns: each kind normalizes differently
EMP_ID_RE = re.compile(r"\bE\d{3,}\b", re.IGNORECASE)
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


def extract_employee_id(text: str) -> Optional[str]:
    """
    Pick an employee identifier out of free text, if there is one.

    An E-prefixed id (E001, e1234) wins and is uppercased; otherwise the first
    email-like token is returned lowercased. Returns None when neither shows up.
    This is a best-effort sniff so the user is not asked for their id every
    message, not validation.
    """
    if not text:
        return None
    m = EMP_ID_RE.search(text)
    if m:
        return m.group(0).upper()
    m = EMAIL_RE.search(text)
    if m:
        return m.group(0).lower()
    return None
