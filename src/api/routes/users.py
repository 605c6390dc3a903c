"""User count routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_account_service
from api.models import OnlineUsersResponse, TotalUsersResponse
from domain.model.errors import StorageError
from services.account_service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/total", response_model=TotalUsersResponse)
def total_users(service: AccountService = Depends(get_account_service)):
    """Number of registered users."""
    try:
        return TotalUsersResponse(total_users=service.count_total())
    except StorageError as e:
        logger.error("Error fetching total users", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/online", response_model=OnlineUsersResponse)
def online_users(service: AccountService = Depends(get_account_service)):
    """Number of users currently flagged online."""
    try:
        return OnlineUsersResponse(online_users=service.count_online())
    except StorageError as e:
        logger.error("Error fetching online users", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail="Internal server error")
