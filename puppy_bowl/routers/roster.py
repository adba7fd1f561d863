from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette import status

from puppy_bowl.models import NewPlayer
from puppy_bowl.services.roster import RosterService
from puppy_bowl.views.render import render_all_players, render_single_player


def get_roster_service(request: Request) -> RosterService:
    # bound by the app lifespan
    return request.app.state.roster_service


def _back_to_list() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


def make_roster_router() -> APIRouter:
    router = APIRouter(tags=["roster"], default_response_class=HTMLResponse)

    @router.get("/", summary="All players")
    async def list_players(
        roster_service: RosterService = Depends(get_roster_service),
    ):
        players = await roster_service.init()
        return HTMLResponse(render_all_players(players))

    @router.get("/players/{player_id}", summary="Player details")
    async def player_details(
        player_id: int,
        roster_service: RosterService = Depends(get_roster_service),
    ):
        detail = await roster_service.get_player_detail(player_id)
        if detail is None:
            return _back_to_list()
        return HTMLResponse(render_single_player(detail.player, detail.team_name))

    @router.post("/players", summary="Add a player to the roster")
    async def add_player(
        name: str = Form("", alias="nameInput"),
        breed: str = Form("", alias="breedInput"),
        image_url: str = Form("", alias="imageInput"),
        roster_service: RosterService = Depends(get_roster_service),
    ):
        new_player = NewPlayer(name=name, breed=breed, image_url=image_url)
        if await roster_service.add_player(new_player):
            return _back_to_list()

        # keep what the user typed
        players = await roster_service.init()
        return HTMLResponse(render_all_players(players, form_values=new_player))

    @router.post("/players/{player_id}/delete", summary="Remove a player")
    async def remove_player(
        player_id: int,
        roster_service: RosterService = Depends(get_roster_service),
    ):
        await roster_service.remove_player(player_id)
        return _back_to_list()

    return router
