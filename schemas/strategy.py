# schemas/strategy.py
from pydantic import BaseModel, Field, field_validator
from typing import List

class StrategyCreate(BaseModel):
    """Schema para crear una nueva estrategia en el backend."""
    name: str = Field(..., description="Nombre descriptivo de la estrategia", min_length=1, max_length=100)

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

class Strategy(BaseModel):
    """Schema para leer una estrategia. El nombre es la clave visible; el ID es la que usan los trades."""
    id: int
    name: str

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {"id": 1, "name": "Momentum Intradía"}
        }

class StrategyListResponse(BaseModel):
    strategies: List[Strategy]
