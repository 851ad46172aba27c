from .player import Player, PlayerCreate, PlayerUpdate, PlayerBase
from .team import Team, TeamCreate, TeamUpdate, TeamBase
from .error import ErrorMessage, NotFoundMessage
from .health import PingResponse

__all__ = [
    "Player", "PlayerCreate", "PlayerUpdate", "PlayerBase",
    "Team", "TeamCreate", "TeamUpdate", "TeamBase",
    "ErrorMessage", "NotFoundMessage",
    "PingResponse",
]
