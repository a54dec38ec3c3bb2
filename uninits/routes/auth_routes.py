from fastapi import APIRouter, Depends

from uninits.core.database import Store, get_store
from uninits.models.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    RegistrationStatus,
)
from uninits.services import reconciler

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.get("/check-registration/{scholar_id}", response_model=RegistrationStatus)
def check_registration(scholar_id: str, store: Store = Depends(get_store)):
    """Tells the client whether to show login or the registration form."""
    return reconciler.check_registration(store, scholar_id)


@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, store: Store = Depends(get_store)):
    """
    404 when the scholar ID is unknown, 403 with requiresRegistration=true when
    the student was pre-seeded but never registered an email.
    """
    student = reconciler.login(store, req.scholarId)
    return LoginResponse(student=student)


@router.post("/register", response_model=RegisterResponse)
def register(req: RegisterRequest, store: Store = Depends(get_store)):
    student = reconciler.register_or_update(store, req.scholarId, req.email, req.userName)
    return RegisterResponse(student=student)
