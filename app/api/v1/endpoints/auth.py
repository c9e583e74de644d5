from fastapi import APIRouter, Depends, HTTPException, status
from app.core.auth import create_access_token, get_current_user
from app.core.security import verify_password
from app.db.session import get_store
from app.db.store import DataStore
from app.models.user import TokenResponse, UserCreate, UserInDB, UserLogin, UserResponse
from app.repositories.user_repo import UserRepository

router = APIRouter()


def _token_response(user: UserInDB) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user.id),
        token_type="bearer",
        user=UserResponse.model_validate(user)
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, store: DataStore = Depends(get_store)):
    """Register a new user"""
    user_repo = UserRepository(store)

    # Check if username already exists
    if await user_repo.get_user_by_username(user_data.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already registered"
        )

    user = await user_repo.create_user(user_data)
    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
async def login(credentials: UserLogin, store: DataStore = Depends(get_store)):
    """Login with username and password"""
    user = await UserRepository(store).get_user_by_username(credentials.username)
    if not user or not verify_password(credentials.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password"
        )

    return _token_response(user)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserInDB = Depends(get_current_user)):
    """Get current user information"""
    return UserResponse.model_validate(current_user)
