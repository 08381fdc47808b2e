from guild_api.core.errors import Forbidden, NotFoundOrCrossRegion, UserNotFound
from guild_api.core.validation import validate_profile
from guild_api.modules.teams.repository import TeamMembersRepository
from guild_api.modules.users.repository import UsersRepository
from guild_api.modules.users.schemas import UserPublic, UserUpdate
from typing import Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UsersRepository, members: TeamMembersRepository):
        self.users = users
        self.members = members

    def get_all_users(self, region: str) -> List[UserPublic]:
        """All users of a region, password excluded"""
        return [UserPublic(**row) for row in self.users.find_all(region)]

    def get_user_by_id(self, user_id: int) -> Optional[UserPublic]:
        row = self.users.find_public_by_id(user_id)
        return UserPublic(**row) if row else None

    def update_user(self, current_user: Dict, user_id: int, user_data: UserUpdate) -> UserPublic:
        """Update own profile, or another profile as an admin of the same region.

        Only fields present in the request change. ``secondaryClass`` and
        ``secondaryRole`` sent as null are cleared; the primary fields cannot be.
        """
        if current_user["id"] != user_id:
            if not current_user.get("is_admin"):
                raise Forbidden("Cannot update other users")
            target = self.users.find_by_id(user_id)
            if not target or target["region"] != current_user["region"]:
                raise NotFoundOrCrossRegion()

        validate_profile(
            primary_class=user_data.primary_class,
            secondary_class=user_data.secondary_class,
            primary_role=user_data.primary_role,
            secondary_role=user_data.secondary_role,
        )

        provided = user_data.model_fields_set
        update_data = {}
        if "primary_class" in provided and user_data.primary_class is not None:
            update_data["primary_class"] = user_data.primary_class
        if "secondary_class" in provided:
            update_data["secondary_class"] = user_data.secondary_class
        if "primary_role" in provided and user_data.primary_role:
            update_data["primary_role"] = user_data.primary_role
        if "secondary_role" in provided:
            update_data["secondary_role"] = user_data.secondary_role

        if update_data:
            self.users.update(user_id, update_data)
        row = self.users.find_public_by_id(user_id)
        if not row:
            raise UserNotFound()
        return UserPublic(**row)

    def delete_user(self, current_user: Dict, user_id: int) -> None:
        target = self.users.find_by_id(user_id)
        if not target or target["region"] != current_user["region"]:
            raise NotFoundOrCrossRegion()

        # Memberships first; event_signups rows follow the user via ON DELETE CASCADE
        self.members.remove_all_for_user(user_id)
        self.users.delete(user_id)
        logger.info(f"User {user_id} ({target['username']}) deleted by {current_user['username']}")
