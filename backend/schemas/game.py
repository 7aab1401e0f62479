from pydantic import BaseModel, ConfigDict

class GameBase(BaseModel):
    title: str = ""
    description: str = ""
    rating: int = 0
    price: float = 0.0

class GameCreate(GameBase):
    id: int = 0

class Game(GameBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
