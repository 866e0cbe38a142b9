# api/api_v1/endpoints/strategies.py
from fastapi import APIRouter, Depends, HTTPException, status as http_status
import logging

from api.api_v1.errors import raise_for_result
from schemas.strategy import Strategy, StrategyCreate, StrategyListResponse
from services.trade_book_service import TradeBookService, get_trade_book_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get(
    "",
    response_model=StrategyListResponse,
    summary="Listar Estrategias",
    description="Devuelve el snapshot de estrategias cargado desde el backend. Con refresh=true lo vuelve a descargar."
)
async def list_strategies(
    refresh: bool = False,
    trade_book: TradeBookService = Depends(get_trade_book_service)
):
    logger.info(f"Endpoint GET /strategies llamado (refresh={refresh}).")
    try:
        if refresh:
            raise_for_result(await trade_book.refresh_strategies())
        return StrategyListResponse(strategies=trade_book.strategies)
    except HTTPException as http_exc:
        raise http_exc
    except Exception:
        logger.exception("Error inesperado al listar estrategias")
        raise HTTPException(status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error interno al listar estrategias.")


@router.post(
    "",
    response_model=Strategy,
    status_code=http_status.HTTP_201_CREATED,
    summary="Crear Nueva Estrategia",
    responses={422: {"description": "Nombre vacío (validación del cuerpo)"}, 502: {"description": "El backend rechazó la petición"}}
)
async def create_strategy(
    strategy_in: StrategyCreate,
    trade_book: TradeBookService = Depends(get_trade_book_service)
):
    logger.info(f"Endpoint POST /strategies llamado para crear: '{strategy_in.name}'")
    try:
        result = raise_for_result(await trade_book.create_strategy(strategy_in.name))
        return result.data
    except HTTPException as http_exc:
        raise http_exc
    except Exception:
        logger.exception(f"Error inesperado al crear estrategia '{strategy_in.name}'")
        raise HTTPException(status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error interno al crear estrategia.")
