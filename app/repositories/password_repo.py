from app.models.password import PasswordInDB
from app.repositories.base import OwnedRepository


class PasswordRepository(OwnedRepository[PasswordInDB]):
    """Password entry store operations."""
    table_name = "passwords"
    id_label = "password"
    kind = "Password"
    model = PasswordInDB
