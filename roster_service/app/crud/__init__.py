# Import and expose all asynchronous CRUD functions

from .players import (
    create_player,
    delete_player,
    get_player,
    get_players,
    remove_players,
    update_player,
)

from .teams import (
    create_team,
    delete_team,
    get_ancestors,
    get_children,
    get_team,
    get_teams,
    remove_teams,
    save_team,
    update_team,
)


__all__ = [
    # Players
    "create_player",
    "delete_player",
    "get_player",
    "get_players",
    "remove_players",
    "update_player",

    # Teams
    "create_team",
    "delete_team",
    "get_ancestors",
    "get_children",
    "get_team",
    "get_teams",
    "remove_teams",
    "save_team",
    "update_team",
]
