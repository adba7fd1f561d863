import logging
import random
from dataclasses import dataclass
from typing import Protocol

from puppy_bowl.facades.puppy_bowl_api import PuppyBowlFacade
from puppy_bowl.models import NewPlayer, Player, Team

log: logging.Logger = logging.getLogger(__name__)

UNASSIGNED = "Unassigned"


class Reconciler(Protocol):
    async def snapshot(self) -> list[Player] | None: ...


class FullRefetchReconciler:
    """Re-fetches the whole player collection on every call. No local state."""

    def __init__(self, api: PuppyBowlFacade):
        self.api = api

    async def snapshot(self) -> list[Player] | None:
        return await self.api.fetch_all_players()


@dataclass
class PlayerDetail:
    player: Player
    team_name: str


def resolve_team_name(player: Player, teams: list[Team] | None) -> str:
    if not player.team_id or not teams:
        return UNASSIGNED
    for team in teams:
        if team.id == player.team_id:
            return team.name
    return UNASSIGNED


class RosterService:
    def __init__(
        self,
        api: PuppyBowlFacade,
        reconciler: Reconciler,
        team_id_pool: list[int],
        rng: random.Random | None = None,
    ):
        self.api = api
        self.reconciler = reconciler
        self.team_id_pool = list(team_id_pool)
        self.rng = rng or random.Random()

    async def init(self) -> list[Player] | None:
        players = await self.reconciler.snapshot()
        if players is None:
            log.warning("Player list unavailable, rendering an empty roster")
        else:
            log.info(f"Fetched {len(players)} players")
        return players

    async def get_player_detail(self, player_id: int) -> PlayerDetail | None:
        player = await self.api.fetch_single_player(player_id)
        if player is None:
            return None
        teams = await self.api.fetch_teams() if player.team_id else None
        return PlayerDetail(player=player, team_name=resolve_team_name(player, teams))

    def choose_team_id(self) -> int | None:
        if not self.team_id_pool:
            return None
        return self.rng.choice(self.team_id_pool)

    async def add_player(self, new_player: NewPlayer) -> Player | None:
        return await self.api.add_new_player(new_player, self.choose_team_id())

    async def remove_player(self, player_id: int) -> bool:
        return await self.api.remove_player(player_id)


def make_roster_service(
    api: PuppyBowlFacade, team_id_pool: list[int], rng: random.Random | None = None
) -> RosterService:
    return RosterService(
        api=api,
        reconciler=FullRefetchReconciler(api),
        team_id_pool=team_id_pool,
        rng=rng,
    )
