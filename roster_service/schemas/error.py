from pydantic import BaseModel

class ErrorMessage(BaseModel):
    """Body of 404/409 responses."""
    message: str

class NotFoundMessage(BaseModel):
    """Body returned with status 200 when a record looked up by id is absent."""
    errorMessage: str
