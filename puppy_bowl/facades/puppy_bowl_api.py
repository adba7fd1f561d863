import logging

import httpx
from pydantic import ValidationError

from puppy_bowl.models import NewPlayer, Player, Team

log: logging.Logger = logging.getLogger(__name__)


class PuppyBowlAPIError(Exception):
    pass


# Everything a single API call can fail with: transport, status, body flag,
# JSON decoding and unexpected envelope shape.
API_ERRORS = (
    httpx.HTTPError,
    PuppyBowlAPIError,
    ValidationError,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
)


class PuppyBowlFacade:
    """
    Async client for the remote Puppy Bowl API.

    Every public method catches its own failures, logs them and returns
    None (False for remove_player), so callers only have to handle a missing
    result.
    """

    def __init__(self, client: httpx.AsyncClient, api_url: str):
        self.client = client
        self.api_url = api_url.rstrip("/")

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        resp = await self.client.request(method, f"{self.api_url}{path}", **kwargs)
        if resp.is_error:
            raise PuppyBowlAPIError(
                f"{method} {path} failed with status {resp.status_code}"
            )
        return resp

    async def _get_data(self, method: str, path: str, **kwargs) -> dict:
        payload = (await self._send(method, path, **kwargs)).json()
        if payload.get("error"):
            raise PuppyBowlAPIError(payload.get("message") or str(payload["error"]))
        return payload["data"]

    async def fetch_all_players(self) -> list[Player] | None:
        try:
            data = await self._get_data("GET", "/players")
            records = list(data["players"])
        except API_ERRORS as e:
            log.error(f"Uh oh, trouble fetching players! {e}")
            return None

        players = []
        for record in records:
            try:
                players.append(Player.model_validate(record))
            except ValidationError as e:
                log.warning(f"Skipping malformed player record {record!r}: {e}")
        return players

    async def fetch_single_player(self, player_id: int) -> Player | None:
        try:
            data = await self._get_data("GET", f"/players/{player_id}")
            return Player.model_validate(data["player"])
        except API_ERRORS as e:
            log.error(f"Oh no, trouble fetching player #{player_id}! {e}")
            return None

    async def fetch_teams(self) -> list[Team] | None:
        try:
            data = await self._get_data("GET", "/teams")
            return [Team.model_validate(t) for t in data["teams"]]
        except API_ERRORS as e:
            log.error(f"Oh no, trouble fetching teams! {e}")
            return None

    async def add_new_player(
        self, new_player: NewPlayer, team_id: int | None = None
    ) -> Player | None:
        body = {
            "name": new_player.name,
            "breed": new_player.breed,
            "imageUrl": new_player.image_url,
            "teamId": team_id,
        }
        try:
            data = await self._get_data("POST", "/players", json=body)
            player = Player.model_validate(data["newPlayer"])
        except API_ERRORS as e:
            log.error(f"Oops, something went wrong with adding that player! {e}")
            return None
        log.info(f"Player #{player.id} {player.name} added to team {team_id}")
        return player

    async def remove_player(self, player_id: int) -> bool:
        try:
            await self._send("DELETE", f"/players/{player_id}")
        except (httpx.HTTPError, PuppyBowlAPIError) as e:
            log.error(
                f"Whoops, trouble removing player #{player_id} from the roster! {e}"
            )
            return False
        log.info(f"Player #{player_id} removed from the roster")
        return True


def make_puppy_bowl_facade(client: httpx.AsyncClient, api_url: str) -> PuppyBowlFacade:
    return PuppyBowlFacade(client=client, api_url=api_url)
