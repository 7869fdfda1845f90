import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.controllers.auth_controller import AuthController
from app.exceptions import UsernameTakenError
from app.storage.base import CatalogStore
from database.schemas import AuthResponse, RegisterRequest, UserLogin
from routes.dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])
auth_controller = AuthController()

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, store: CatalogStore = Depends(get_store)):
    try:
        user = auth_controller.register(store, user_data.username, user_data.password)
    except UsernameTakenError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")
    except Exception:
        logger.exception("Failed to register user")
        raise HTTPException(status_code=500, detail="Failed to register user")
    return AuthResponse(message="Registration successful", user=user)

@router.post("/login", response_model=AuthResponse)
def login(user_data: UserLogin, store: CatalogStore = Depends(get_store)):
    try:
        user = auth_controller.login(store, user_data.username, user_data.password)
    except Exception:
        logger.exception("Failed to log in")
        raise HTTPException(status_code=500, detail="Failed to log in")
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return AuthResponse(message="Login successful", user=user)

@router.get("/user")
def current_user():
    # No session layer yet, so nobody is ever logged in
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
