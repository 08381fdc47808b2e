from guild_api.core.errors import (
    IdentityConflict, InvalidCredentials, MissingField, NoEventForRegion,
    RegionConflict, UserNotFound
)
from guild_api.core.security import generate_token, verify_password
from guild_api.core.validation import validate_profile, validate_region, validate_time_slots
from guild_api.modules.auth.schemas import (
    DiscordSignupRequest, LoginRequest, LoginResponse, SignupRequest, SignupResponse
)
from guild_api.modules.events.repository import EventsRepository
from guild_api.modules.events.signups_repository import SignupsRepository
from guild_api.modules.users.repository import UsersRepository
from guild_api.modules.users.schemas import UserPublic
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


def validate_signup(signup_data: SignupRequest) -> None:
    """Checks shared by every signup variant"""
    if not signup_data.username or not signup_data.region \
            or not signup_data.primary_class or not signup_data.primary_role:
        raise MissingField("In-game name, region, primary role and primary build are required")
    validate_time_slots(signup_data.time_slots)
    validate_profile(
        primary_class=signup_data.primary_class,
        secondary_class=signup_data.secondary_class,
        primary_role=signup_data.primary_role,
        secondary_role=signup_data.secondary_role or None,
    )
    validate_region(signup_data.region)


class UsernameIdentity:
    """Members are recognised by their in-game name"""

    def validate(self, signup_data: SignupRequest) -> None:
        pass

    def resolve(self, users: UsersRepository, signup_data: SignupRequest) -> Optional[Dict[str, Any]]:
        return users.find_by_username(signup_data.username)

    def fields(self, signup_data: SignupRequest) -> Dict[str, Any]:
        return {}


class DiscordIdentity(UsernameIdentity):
    """Members are recognised by Discord ID or in-game name, which must agree"""

    def validate(self, signup_data: DiscordSignupRequest) -> None:
        if not signup_data.discord_id:
            raise MissingField("Discord ID is required")

    def resolve(self, users: UsersRepository, signup_data: DiscordSignupRequest) -> Optional[Dict[str, Any]]:
        by_discord = users.find_by_discord_id(signup_data.discord_id)
        by_username = users.find_by_username(signup_data.username)
        if by_discord and by_username and by_discord["id"] != by_username["id"]:
            raise IdentityConflict()
        return by_discord or by_username

    def fields(self, signup_data: DiscordSignupRequest) -> Dict[str, Any]:
        return {"discord_id": signup_data.discord_id, "username": signup_data.username}


class AuthService:
    def __init__(
        self,
        users: UsersRepository,
        events: EventsRepository,
        signups: SignupsRepository,
    ):
        self.users = users
        self.events = events
        self.signups = signups

    def login(self, login_data: LoginRequest) -> LoginResponse:
        """Admin login; regular members have no password"""
        if not login_data.username or not login_data.password:
            raise MissingField("Username and password are required")

        user = self.users.find_by_username(login_data.username)
        if not user or not user.get("password") or not user.get("is_admin"):
            raise InvalidCredentials()
        if not verify_password(login_data.password, user["password"]):
            raise InvalidCredentials()

        logger.info(f"Admin {user['username']} logged in ({user['region']})")
        return LoginResponse(token=generate_token(user), user=user)

    def signup(self, signup_data: SignupRequest) -> SignupResponse:
        """Sign up (or update a signup) for the latest event of the region"""
        return self._register(signup_data, UsernameIdentity())

    def discord_signup(self, signup_data: DiscordSignupRequest) -> SignupResponse:
        """Same as signup, also linking the Discord account"""
        return self._register(signup_data, DiscordIdentity())

    def get_current_user(self, user_id: int) -> UserPublic:
        user = self.users.find_public_by_id(user_id)
        if not user:
            raise UserNotFound()
        return UserPublic(**user)

    def _register(self, signup_data: SignupRequest, identity: UsernameIdentity) -> SignupResponse:
        validate_signup(signup_data)
        identity.validate(signup_data)

        event = self.events.find_latest_by_region(signup_data.region)
        if not event:
            raise NoEventForRegion("No event found for this region")

        profile = {
            "primary_class": signup_data.primary_class,
            "secondary_class": signup_data.secondary_class,
            "primary_role": signup_data.primary_role,
            "secondary_role": signup_data.secondary_role or None,
            **identity.fields(signup_data),
        }

        user = identity.resolve(self.users, signup_data)
        if user:
            if user["region"] != signup_data.region:
                raise RegionConflict()
            user = self.users.update(user["id"], profile)
        else:
            user = self.users.create({
                "username": signup_data.username,
                "password": None,
                "region": signup_data.region,
                "is_admin": False,
                **profile,
            })

        notes = signup_data.notes or None
        existing = self.signups.find_by_event_and_user(event["id"], user["id"])
        if existing:
            self.signups.update(event["id"], user["id"], signup_data.time_slots, notes)
            message = "Already signed up for this event"
        else:
            self.signups.create(event["id"], user["id"], signup_data.time_slots, notes)
            message = "Signed up successfully"

        logger.info(
            f"Signup {'updated' if existing else 'created'}: user {user['id']} ({user['username']}) "
            f"for event {event['id']} ({signup_data.region})"
        )
        return SignupResponse(message=message, user=user, event=event, updated=bool(existing))
