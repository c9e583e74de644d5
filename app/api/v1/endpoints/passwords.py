from app.api.v1.endpoints.crud import build_crud_router
from app.models.password import PasswordCreate, PasswordInDB
from app.repositories.password_repo import PasswordRepository

router = build_crud_router(PasswordRepository, PasswordCreate, PasswordInDB)
