from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import Optional
import uuid

class TeamBase(BaseModel):
    name: str = Field(..., min_length=1)
    parent: Optional[uuid.UUID] = None # id of the parent team, if any

class TeamCreate(TeamBase):
    pass

class TeamUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    parent: Optional[uuid.UUID] = None

class Team(TeamBase):
    id: uuid.UUID
    model_config = ConfigDict(from_attributes=True)

    @computed_field(alias="_id")
    @property
    def object_id(self) -> uuid.UUID:
        return self.id
