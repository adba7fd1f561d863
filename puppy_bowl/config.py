import os

from dotenv import load_dotenv

load_dotenv()

# Remote Puppy Bowl API
API_URL: str = os.getenv(
    "PUPPY_BOWL_API_URL",
    "https://fsa-puppy-bowl.herokuapp.com/api/2309-FSA-ET-WEB-FT-SF",
)
HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", 10.0))

# Team ids new players are randomly assigned to
TEAM_ID_POOL: list[int] = [
    int(team_id)
    for team_id in os.getenv("PUPPY_BOWL_TEAM_IDS", "357,358").split(",")
    if team_id.strip()
]

# App
APP_TITLE: str = os.getenv("APP_TITLE", "Puppy Bowl")
APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT: int = int(os.getenv("APP_PORT", 8000))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
