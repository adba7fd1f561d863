from pydantic import BaseModel, ConfigDict, Field, field_validator


class Player(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    breed: str = ""
    image_url: str = Field("", alias="imageUrl")
    team_id: int | None = Field(None, alias="teamId")

    @field_validator("breed", "image_url", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v


class Team(BaseModel):
    id: int
    name: str


class NewPlayer(BaseModel):
    name: str = ""
    breed: str = ""
    image_url: str = ""
