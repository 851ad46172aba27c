from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import Optional
import uuid

class PlayerBase(BaseModel):
    # No stripping: the name is stored exactly as submitted
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)

class PlayerCreate(PlayerBase):
    pass

class PlayerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)

class Player(PlayerBase):
    id: uuid.UUID
    model_config = ConfigDict(from_attributes=True)

    @computed_field(alias="_id")
    @property
    def object_id(self) -> uuid.UUID:
        return self.id
