from fastapi import APIRouter, Depends

from uninits.core.database import Store, get_store
from uninits.models.schemas import AttendanceRecord, AttendanceUpdateRequest
from uninits.services import reconciler

router = APIRouter(prefix="/api/attendance", tags=["Attendance"])


@router.get("/{scholar_id}", response_model=AttendanceRecord)
def get_attendance(scholar_id: str, store: Store = Depends(get_store)):
    return reconciler.get_attendance(store, scholar_id)


@router.post("/update")
def update_attendance(req: AttendanceUpdateRequest, store: Store = Depends(get_store)):
    record = reconciler.record_attendance_update(
        store, req.scholarId, req.subjectCode, req.total, req.attended
    )
    return {"success": True, "attendance": record["attendance"]}
