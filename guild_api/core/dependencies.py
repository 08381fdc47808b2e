"""
Core dependencies for route protection
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from guild_api.core.errors import AdminRequired, InvalidToken
from guild_api.core.security import parse_token
from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is reported as 401 by us, not 403 by FastAPI
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> Dict:
    """Decode the bearer token into ``{id, username, region, is_admin}``"""
    if credentials is None or not credentials.credentials:
        raise InvalidToken("Unauthorized")
    return parse_token(credentials.credentials)


def require_admin(user_data: Dict = Depends(get_current_user)) -> Dict:
    """Dependency that only lets admins through"""
    if not user_data.get("is_admin"):
        logger.info(f"Rejected non-admin user {user_data['id']} on admin route")
        raise AdminRequired()
    return user_data
