# uninits/services/reconciler.py
"""
Find-or-create-then-update policy for students, course catalogs and
attendance records.

Every operation re-reads the store and writes back; nothing is cached between
requests. Writes are plain read-modify-write sequences, so two concurrent
updates to the same record resolve as last-write-wins.

Scholar IDs are stored in their canonical string form. Documents created by
older clients may still carry a numeric key: reads match both forms and a
numeric key is rewritten to the string form as soon as it is seen.
"""
from collections import Counter
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from uninits.core.database import Store, persistence_guard
from uninits.core.errors import (
    InvalidEmail,
    MissingFields,
    NotFound,
    IncompleteRegistration,
    ValidationError,
)
from uninits.core.logger import get_logger
from uninits.models.constants import (
    DEFAULT_PROFILE_IMAGE,
    INSTITUTE_EMAIL_DOMAIN,
    POISONED_IMAGE,
)
from uninits.services.identity import (
    branch_code,
    branch_from_id,
    current_semester,
    normalize_scholar_id,
)

log = get_logger("reconciler")

GPA_FIELDS = ("cgpa", "sgpa_curr", "sgpa_prev")

# BSON stores integers as signed 64-bit at most
_MAX_NUMERIC_KEY = 2**63 - 1


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _key_candidates(sid: str) -> List[Any]:
    """String form first, then the numeric form legacy documents may carry."""
    candidates: List[Any] = [sid]
    # Anything longer cannot have been stored as a number
    if sid.isascii() and sid.isdigit() and len(sid) <= 19:
        number = int(sid)
        if number <= _MAX_NUMERIC_KEY:
            candidates.append(number)
    return candidates


def _require(**fields: Any) -> None:
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise MissingFields(*missing)


def _is_poisoned(filename: Optional[str]) -> bool:
    if not filename:
        return False
    return filename == POISONED_IMAGE or filename.startswith(POISONED_IMAGE + "-")


def public_student(doc: Dict[str, Any]) -> Dict[str, Any]:
    out = {
        "scholarId": str(doc["scholarId"]),
        "name": doc.get("name") or doc.get("userName"),
        "email": doc.get("email"),
        "userName": doc.get("userName"),
        "profileImage": doc.get("profileImage") or DEFAULT_PROFILE_IMAGE,
    }
    for field in GPA_FIELDS:
        # 0 is a real grade; only a missing field becomes None
        out[field] = doc.get(field)
    return out


def _find_student(store: Store, sid: Optional[str]) -> Optional[Dict[str, Any]]:
    if not sid:
        return None
    log.debug("Looking up student %s", sid)
    doc = store.students.find_one({"scholarId": {"$in": _key_candidates(sid)}})
    if doc is not None and doc["scholarId"] != sid:
        store.students.update_one({"_id": doc["_id"]}, {"$set": {"scholarId": sid}})
        log.info("Rewrote numeric scholarId %r to canonical form", doc["scholarId"])
        doc["scholarId"] = sid
    return doc


def _load_student(store: Store, raw_id: Any) -> Dict[str, Any]:
    sid = normalize_scholar_id(raw_id)
    _require(scholarId=sid)
    student = _find_student(store, sid)
    if student is None:
        raise NotFound("Student not found")
    resolve_profile_image(store, student)
    return student


# ---------------------------------------------------------------------------
# students
# ---------------------------------------------------------------------------

@persistence_guard
def find_student(store: Store, raw_id: Any) -> Optional[Dict[str, Any]]:
    return _find_student(store, normalize_scholar_id(raw_id))


@persistence_guard
def resolve_profile_image(store: Store, student: Dict[str, Any]) -> str:
    """
    Return the student's usable image filename.

    A filename of ``undefined`` or ``undefined-<ts>.<ext>`` is left behind by
    uploads that lost their scholar ID; it is reset to the default image and
    the correction is persisted.
    """
    image = student.get("profileImage")
    if _is_poisoned(image):
        store.students.update_one(
            {"_id": student["_id"]},
            {"$set": {"profileImage": DEFAULT_PROFILE_IMAGE}},
        )
        log.info(
            "Reset poisoned profile image %r for %s", image, student.get("scholarId")
        )
        student["profileImage"] = DEFAULT_PROFILE_IMAGE
    elif not image:
        student["profileImage"] = DEFAULT_PROFILE_IMAGE
    return student["profileImage"]


@persistence_guard
def register_or_update(
    store: Store, raw_id: Any, email: Optional[str], user_name: Optional[str]
) -> Dict[str, Any]:
    sid = normalize_scholar_id(raw_id)
    email = email.strip() if email else email
    user_name = user_name.strip() if user_name else user_name
    _require(scholarId=sid, email=email, userName=user_name)

    if "@" not in email or INSTITUTE_EMAIL_DOMAIN not in email:
        raise InvalidEmail()

    fields = {"email": email, "userName": user_name, "name": user_name}
    student = _find_student(store, sid)
    if student is not None:
        store.students.update_one({"_id": student["_id"]}, {"$set": fields})
        student.update(fields)
        log.info("Completed registration for existing student %s", sid)
    else:
        student = {
            "scholarId": sid,
            **fields,
            "profileImage": DEFAULT_PROFILE_IMAGE,
            "cgpa": 0,
            "sgpa_curr": 0,
            "sgpa_prev": 0,
        }
        store.students.insert_one(student)
        log.info("Registered new student %s", sid)

    resolve_profile_image(store, student)
    return public_student(student)


@persistence_guard
def check_registration(store: Store, raw_id: Any) -> Dict[str, Any]:
    student = _find_student(store, normalize_scholar_id(raw_id))
    if student is None:
        return {
            "isRegistered": False,
            "hasEmail": False,
            "message": "Student not found in database",
        }
    has_email = bool(student.get("email"))
    return {
        "isRegistered": has_email,
        "hasEmail": has_email,
        "message": "User is registered" if has_email else "User found but not fully registered",
    }


@persistence_guard
def login(store: Store, raw_id: Any) -> Dict[str, Any]:
    try:
        student = _load_student(store, raw_id)
    except NotFound:
        raise NotFound("Student not found. Please register first.") from None
    if not student.get("email"):
        raise IncompleteRegistration()
    return public_student(student)


@persistence_guard
def fetch_profile(store: Store, raw_id: Any) -> Dict[str, Any]:
    student = _load_student(store, raw_id)
    sid = student["scholarId"]
    return {
        "student": public_student(student),
        "semester": current_semester(sid),
        "branchShort": branch_from_id(sid),
    }


@persistence_guard
def replace_profile_image(store: Store, raw_id: Any, filename: str) -> Optional[str]:
    """
    Point the student at a newly stored image; returns the previous filename
    as stored, so a poisoned ``undefined-*`` file is still handed back for
    deletion.
    """
    sid = normalize_scholar_id(raw_id)
    _require(scholarId=sid)
    student = _find_student(store, sid)
    if student is None:
        raise NotFound("Student not found")
    previous = student.get("profileImage")
    store.students.update_one({"_id": student["_id"]}, {"$set": {"profileImage": filename}})
    log.info("Profile image for %s set to %s", student["scholarId"], filename)
    return previous


@persistence_guard
def repair_profile_images(store: Store) -> int:
    result = store.students.update_many(
        {
            "$or": [
                {"profileImage": POISONED_IMAGE},
                {"profileImage": {"$regex": "^" + POISONED_IMAGE + "-"}},
            ]
        },
        {"$set": {"profileImage": DEFAULT_PROFILE_IMAGE}},
    )
    log.info("Profile image sweep repaired %d student(s)", result.modified_count)
    return result.modified_count


@persistence_guard
def canonicalize_scholar_ids(store: Store) -> Dict[str, Any]:
    """
    One-time migration: rewrite numeric scholarId keys as strings.

    Scholar IDs that end up with more than one student document are reported,
    not merged. Attendance records that would collide with an existing
    string-keyed record are left untouched and reported too.
    """
    converted = {"students": 0, "attendances": 0}
    collisions: List[str] = []

    for name in ("students", "attendances"):
        collection = getattr(store, name)
        for doc in list(collection.find({}, {"scholarId": 1})):
            key = doc.get("scholarId")
            if isinstance(key, bool) or not isinstance(key, (int, float)):
                continue
            sid = normalize_scholar_id(key)
            if sid is None:
                continue
            try:
                collection.update_one({"_id": doc["_id"]}, {"$set": {"scholarId": sid}})
            except DuplicateKeyError:
                collisions.append(sid)
                continue
            converted[name] += 1

    counts = Counter(
        str(doc.get("scholarId")) for doc in store.students.find({}, {"scholarId": 1})
    )
    duplicates = sorted(set(collisions) | {sid for sid, n in counts.items() if n > 1})
    if duplicates:
        log.warning("Scholar IDs with duplicate documents: %s", ", ".join(duplicates))
    log.info(
        "Canonicalized %d student and %d attendance key(s)",
        converted["students"],
        converted["attendances"],
    )
    return {
        "studentsConverted": converted["students"],
        "attendancesConverted": converted["attendances"],
        "duplicates": duplicates,
    }


@persistence_guard
def raw_student(store: Store, raw_id: Any) -> Dict[str, Any]:
    """Stored document as-is, with the Python type of each key field."""
    sid = normalize_scholar_id(raw_id)
    _require(scholarId=sid)
    doc = store.students.find_one({"scholarId": {"$in": _key_candidates(sid)}})
    if doc is None:
        raise NotFound("Student not found")
    doc["_id"] = str(doc["_id"])
    report = {
        "scholarId": doc.get("scholarId"),
        "scholarId_type": type(doc.get("scholarId")).__name__,
    }
    for field in GPA_FIELDS:
        report[field] = doc.get(field)
        report[field + "_type"] = type(doc.get(field)).__name__
    report["full_document"] = doc
    return report


# ---------------------------------------------------------------------------
# courses
# ---------------------------------------------------------------------------

@persistence_guard
def list_courses(
    store: Store, branch: Optional[int], semester: Optional[int]
) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Courses for one semester, plus every catalog entry of the branch by semester."""
    if branch is None:
        return [], []
    current = None
    if semester is not None:
        current = store.courses.find_one(
            {"branchCode": branch, "semester": semester}, {"_id": 0}
        )
    entries = list(
        store.courses.find({"branchCode": branch}, {"_id": 0}).sort("semester", ASCENDING)
    )
    return (current or {}).get("courses", []), entries


def courses_for_student(store: Store, raw_id: Any) -> Dict[str, Any]:
    current, entries = list_courses(store, branch_code(raw_id), current_semester(raw_id))
    return {"currentSemesterCourses": current, "allCourses": entries}


# ---------------------------------------------------------------------------
# attendance
# ---------------------------------------------------------------------------

@persistence_guard
def get_attendance(store: Store, raw_id: Any) -> Dict[str, Any]:
    sid = normalize_scholar_id(raw_id)
    _require(scholarId=sid)
    doc = store.attendances.find_one(
        {"scholarId": {"$in": _key_candidates(sid)}}, {"_id": 0}
    )
    if doc is None:
        return {"scholarId": sid, "attendance": []}
    doc["scholarId"] = sid
    doc.setdefault("attendance", [])
    return doc


@persistence_guard
def record_attendance_update(
    store: Store,
    raw_id: Any,
    subject_code: Optional[str],
    total: Optional[int],
    attended: Optional[int],
) -> Dict[str, Any]:
    sid = normalize_scholar_id(raw_id)
    subject_code = subject_code.strip() if subject_code else subject_code
    _require(scholarId=sid, subjectCode=subject_code, total=total, attended=attended)
    if total < 0 or attended < 0:
        raise ValidationError("Attendance counters must be non-negative")
    if attended > total:
        raise ValidationError("Attended classes cannot exceed total classes")

    doc = store.attendances.find_one({"scholarId": {"$in": _key_candidates(sid)}})
    entries = list(doc.get("attendance", [])) if doc else []

    for entry in entries:
        if entry.get("subjectCode") == subject_code:
            entry["total"] = total
            entry["attended"] = attended
            break
    else:
        entries.append({"subjectCode": subject_code, "total": total, "attended": attended})

    if doc is None:
        store.attendances.insert_one({"scholarId": sid, "attendance": entries})
        log.info("Created attendance record for %s", sid)
    else:
        store.attendances.update_one(
            {"_id": doc["_id"]},
            {"$set": {"scholarId": sid, "attendance": entries}},
        )
    log.debug("Attendance %s/%s -> %d/%d", sid, subject_code, attended, total)
    return {"scholarId": sid, "attendance": entries}
