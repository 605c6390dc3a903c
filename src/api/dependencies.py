from fastapi import Depends, HTTPException, Request

from adapter.mongodb.user_repository import MongoUserRepository
from port.user_repository import UserRepository
from services.account_service import AccountService
from utils.config import Settings, get_settings


def _get_db(request: Request):
    """Get the MongoDB database opened at startup, raising 500 if unavailable."""
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise HTTPException(status_code=500, detail="Database unavailable")
    return db


def get_user_repo(request: Request) -> UserRepository:
    return MongoUserRepository(_get_db(request))


def get_account_service(
    repo: UserRepository = Depends(get_user_repo),
    settings: Settings = Depends(get_settings),
) -> AccountService:
    return AccountService(repo, bcrypt_rounds=settings.bcrypt_rounds)
