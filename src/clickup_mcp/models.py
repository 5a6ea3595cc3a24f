from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """A ClickUp container reduced to what the hierarchy renders."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: str = ""


class Space(Entity):
    pass


class Folder(Entity):
    pass


class ClickUpList(Entity):
    pass
