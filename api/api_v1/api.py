# api/api_v1/api.py
from fastapi import APIRouter
from api.api_v1.endpoints import status
from api.api_v1.endpoints import trades
from api.api_v1.endpoints import strategies
from api.api_v1.endpoints import positions
from api.api_v1.endpoints import selection
from api.api_v1.endpoints import compare

api_router = APIRouter()

# Incluir los routers
api_router.include_router(status.router, prefix="/status", tags=["Status"])
api_router.include_router(trades.router, prefix="/trades", tags=["Trades"])
api_router.include_router(strategies.router, prefix="/strategies", tags=["Strategies"])
api_router.include_router(positions.router, prefix="/positions", tags=["Positions"])
api_router.include_router(selection.router, prefix="/selection", tags=["Selection"])
api_router.include_router(compare.router, prefix="/compare", tags=["Comparison"])
