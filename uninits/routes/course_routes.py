from fastapi import APIRouter, Depends

from uninits.core.database import Store, get_store
from uninits.models.schemas import CoursesResponse
from uninits.services import reconciler

router = APIRouter(prefix="/api/courses", tags=["Courses"])


@router.get("/{scholar_id}", response_model=CoursesResponse)
def get_courses(scholar_id: str, store: Store = Depends(get_store)):
    """
    Current-semester courses for the student's branch, plus the whole
    curriculum of that branch ordered by semester.
    """
    return reconciler.courses_for_student(store, scholar_id)
