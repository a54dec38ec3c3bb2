# uninits/models/schemas.py
from typing import List, Optional, Union

from pydantic import BaseModel

# Scholar IDs arrive as JSON strings or numbers depending on the client
ScholarIdIn = Union[str, int]


class Course(BaseModel):
    code: str
    name: str
    credits: int


class CourseCatalogEntry(BaseModel):
    branchCode: int
    branchShort: str
    semester: int
    courses: List[Course]


class CoursesResponse(BaseModel):
    currentSemesterCourses: List[Course]
    allCourses: List[CourseCatalogEntry]


class StudentOut(BaseModel):
    """Public view of a Student. GPA fields stay null until computed."""

    scholarId: str
    name: Optional[str] = None
    email: Optional[str] = None
    userName: Optional[str] = None
    profileImage: str = "default.png"
    cgpa: Optional[float] = None
    sgpa_curr: Optional[float] = None
    sgpa_prev: Optional[float] = None


class LoginRequest(BaseModel):
    scholarId: Optional[ScholarIdIn] = None


class LoginResponse(BaseModel):
    success: bool = True
    student: StudentOut


class RegisterRequest(BaseModel):
    # All optional so a missing field is reported as MissingFields, not a 422
    scholarId: Optional[ScholarIdIn] = None
    email: Optional[str] = None
    userName: Optional[str] = None


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "Registration successful"
    student: StudentOut


class RegistrationStatus(BaseModel):
    isRegistered: bool
    hasEmail: bool
    message: str


class ProfileResponse(BaseModel):
    student: StudentOut
    semester: Optional[int] = None
    branchShort: Optional[str] = None


class IdentityResponse(BaseModel):
    scholarId: Optional[str] = None
    semester: Optional[int] = None
    branchShort: Optional[str] = None
    branchCode: Optional[int] = None


class AttendanceEntry(BaseModel):
    subjectCode: str
    total: int
    attended: int


class AttendanceRecord(BaseModel):
    scholarId: str
    attendance: List[AttendanceEntry] = []


class AttendanceUpdateRequest(BaseModel):
    scholarId: Optional[ScholarIdIn] = None
    subjectCode: Optional[str] = None
    total: Optional[int] = None
    attended: Optional[int] = None


class UploadResponse(BaseModel):
    success: bool = True
    filename: str
    url: str


class RepairResponse(BaseModel):
    success: bool = True
    repaired: int


class CanonicalizeResponse(BaseModel):
    success: bool = True
    studentsConverted: int
    attendancesConverted: int
    duplicates: List[str]
