# uninits/models/__init__.py

from .schemas import AttendanceRecord, Course, CourseCatalogEntry, StudentOut

__all__ = [
    "AttendanceRecord",
    "Course",
    "CourseCatalogEntry",
    "StudentOut",
]
