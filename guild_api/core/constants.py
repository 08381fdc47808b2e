from typing import Literal, Tuple

Region = Literal["vn", "na"]
Role = Literal["dps", "healer", "tank"]
Day = Literal["saturday", "sunday"]

REGIONS: Tuple[str, ...] = ("vn", "na")
ROLES: Tuple[str, ...] = ("dps", "healer", "tank")
DAYS: Tuple[str, ...] = ("saturday", "sunday")

CLASS_TAGS: Tuple[str, ...] = (
    "strategicSword",
    "heavenquakerSpear",
    "namelessSword",
    "namelessSpear",
    "vernalUmbrella",
    "inkwellFan",
    "soulshadeUmbrella",
    "panaceaFan",
    "thundercryBlade",
    "stormreakerSpear",
    "infernalTwinblades",
    "mortalRopeDart",
)

TIME_SLOTS: Tuple[str, ...] = (
    "13:00-15:00",
    "15:00-17:00",
    "17:00-19:00",
    "19:00-21:00",
    "21:00-23:00",
)

# Seeded for every new event: three lanes for each weekend day
DEFAULT_TEAMS = [
    {"name": f"Team {lane}", "description": f"{lane} lane team", "day": day}
    for day in DAYS
    for lane in ("Top", "Mid", "Bot")
]
