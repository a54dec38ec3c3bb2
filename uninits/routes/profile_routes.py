from fastapi import APIRouter, Depends, File, Form, UploadFile

from uninits.core.config import CONFIG
from uninits.core.database import Store, get_store
from uninits.core.errors import MissingFields, NotFound, PortalError
from uninits.models.constants import PROFILE_IMAGE_URL_PREFIX
from uninits.models.schemas import IdentityResponse, ProfileResponse, UploadResponse
from uninits.services import reconciler
from uninits.services.identity import normalize_scholar_id, resolve_identity
from uninits.services.uploads import delete_profile_image, store_profile_image


router = APIRouter(prefix="/api", tags=["Profile"])


@router.get("/identity/{scholar_id}", response_model=IdentityResponse)
def identity(scholar_id: str):
    return resolve_identity(scholar_id)


@router.get("/profile/{scholar_id}", response_model=ProfileResponse)
def get_profile(scholar_id: str, store: Store = Depends(get_store)):
    return reconciler.fetch_profile(store, scholar_id)


@router.post("/profile/upload-photo", response_model=UploadResponse)
def upload_photo(
    scholarId: str | None = Form(None),
    profileImage: UploadFile | None = File(None),
    store: Store = Depends(get_store),
):
    """
    Replace a student's profile picture.
    The new file is written first; if recording it on the student fails the
    file is removed again, otherwise the previous picture is deleted.
    """
    sid = normalize_scholar_id(scholarId)
    if not sid or profileImage is None:
        raise MissingFields(*[
            name for name, value in (("scholarId", sid), ("profileImage", profileImage))
            if not value
        ])

    # 404 before anything touches the disk
    if reconciler.find_student(store, sid) is None:
        raise NotFound("Student not found")

    data = profileImage.file.read()
    filename = store_profile_image(CONFIG.UPLOAD_DIR, sid, profileImage.content_type, data)

    try:
        previous = reconciler.replace_profile_image(store, sid, filename)
    except PortalError:
        delete_profile_image(CONFIG.UPLOAD_DIR, filename)
        raise

    if previous and previous != filename:
        delete_profile_image(CONFIG.UPLOAD_DIR, previous)

    return UploadResponse(filename=filename, url=f"{PROFILE_IMAGE_URL_PREFIX}/{filename}")
