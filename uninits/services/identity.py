# uninits/services/identity.py
"""
Identity metadata decoded from a scholar ID.

A scholar ID such as ``2415062`` carries the admission year in its first two
characters and the branch digit at index 3. Every function here is total:
malformed input yields ``None``, never an exception.
"""
from typing import Any, Dict, Optional

from uninits.models.constants import BRANCH_BY_CODE, SEMESTER_BY_YEAR_CODE


def normalize_scholar_id(raw: Any) -> Optional[str]:
    """Canonical string form used for every lookup and write."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float):
        if not raw.is_integer():
            return None
        raw = int(raw)
    text = str(raw).strip()
    return text or None


def current_semester(scholar_id: Any) -> Optional[int]:
    sid = normalize_scholar_id(scholar_id)
    if not sid:
        return None
    return SEMESTER_BY_YEAR_CODE.get(sid[:2])


def branch_code(scholar_id: Any) -> Optional[int]:
    sid = normalize_scholar_id(scholar_id)
    if not sid or len(sid) < 4:
        return None
    digit = sid[3]
    if digit not in "0123456789":
        return None
    return int(digit)


def branch_from_id(scholar_id: Any) -> Optional[str]:
    code = branch_code(scholar_id)
    if code is None:
        return None
    return BRANCH_BY_CODE.get(code)


def resolve_identity(scholar_id: Any) -> Dict[str, Any]:
    return {
        "scholarId": normalize_scholar_id(scholar_id),
        "semester": current_semester(scholar_id),
        "branchShort": branch_from_id(scholar_id),
        "branchCode": branch_code(scholar_id),
    }
