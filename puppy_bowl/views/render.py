from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from puppy_bowl.models import NewPlayer, Player

TEMPLATES_DIR: Path = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_new_player_form(values: NewPlayer | None = None) -> str:
    """Add-player form; `values` pre-fills the inputs."""
    return env.get_template("new_player_form.html").render(
        values=values or NewPlayer()
    )


def render_all_players(
    players: list[Player] | None, form_values: NewPlayer | None = None
) -> str:
    """
    List view: one card per player, or a placeholder when there are none.

    A missing list (fetch failed) renders the same as an empty one.
    """
    return env.get_template("players.html").render(
        players=players or [],
        new_player_form=Markup(render_new_player_form(form_values)),
    )


def render_single_player(player: Player, team_name: str) -> str:
    return env.get_template("player_detail.html").render(
        player=player,
        team_name=team_name,
    )
