from fastapi import APIRouter, Depends

from uninits.core.database import Store, get_store
from uninits.models.schemas import CanonicalizeResponse, RepairResponse
from uninits.services import reconciler

router = APIRouter(prefix="/api", tags=["Maintenance"])


@router.post("/maintenance/repair-profile-images", response_model=RepairResponse)
def repair_profile_images(store: Store = Depends(get_store)):
    """Reset every 'undefined' profile image filename to the default picture."""
    return RepairResponse(repaired=reconciler.repair_profile_images(store))


@router.post("/maintenance/canonicalize-scholar-ids", response_model=CanonicalizeResponse)
def canonicalize_scholar_ids(store: Store = Depends(get_store)):
    """
    Rewrite numeric scholar IDs as strings. Run once on legacy data; any
    scholar ID listed under duplicates needs a manual merge.
    """
    return CanonicalizeResponse(**reconciler.canonicalize_scholar_ids(store))


@router.get("/test/student/{scholar_id}")
def raw_student(scholar_id: str, store: Store = Depends(get_store)):
    """Raw student document with stored field types, for debugging imports."""
    report = reconciler.raw_student(store, scholar_id)
    return {"message": "Raw student data from database", **report}
