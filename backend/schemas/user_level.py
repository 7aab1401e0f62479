from pydantic import BaseModel

class UserLevel(BaseModel):
    """Row returned by spGetUserLevel: (title, id)."""
    title: str
    id: int
