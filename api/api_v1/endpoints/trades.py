# api/api_v1/endpoints/trades.py
from fastapi import APIRouter, Depends, HTTPException, Response, status as http_status
import logging
from typing import List

from api.api_v1.errors import raise_for_result
from schemas.results import OperationResult
from schemas.view import TradeRow
from services.trade_book_service import TradeBookService, get_trade_book_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get(
    "",
    response_model=List[TradeRow],
    summary="Listar Trades Filtrados",
    description="Trades del snapshot local que cumplen los filtros activos, con nombre de estrategia y marca de selección."
)
def list_trades(trade_book: TradeBookService = Depends(get_trade_book_service)):
    logger.info("Endpoint GET /trades llamado.")
    return trade_book.view().trades


@router.post(
    "/refresh",
    response_model=OperationResult,
    summary="Recargar Trades y Estrategias",
    responses={502: {"description": "Fallo del backend"}, 503: {"description": "BACKEND_URL no configurada"}}
)
async def refresh_trades(trade_book: TradeBookService = Depends(get_trade_book_service)):
    logger.info("Endpoint POST /trades/refresh llamado.")
    try:
        return raise_for_result(await trade_book.refresh())
    except HTTPException as http_exc:
        raise http_exc
    except Exception:
        logger.exception("Error inesperado al recargar trades")
        raise HTTPException(status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error interno al recargar trades.")


@router.delete(
    "/{trade_id}",
    status_code=http_status.HTTP_204_NO_CONTENT,
    summary="Eliminar Trade",
    responses={502: {"description": "El backend no pudo eliminar el trade"}}
)
async def delete_trade(
    trade_id: int,
    trade_book: TradeBookService = Depends(get_trade_book_service)
):
    logger.info(f"Endpoint DELETE /trades/{trade_id} llamado.")
    try:
        raise_for_result(await trade_book.delete_trade(trade_id))
        return Response(status_code=http_status.HTTP_204_NO_CONTENT)
    except HTTPException as http_exc:
        raise http_exc
    except Exception:
        logger.exception(f"Error inesperado al eliminar trade {trade_id}")
        raise HTTPException(status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error interno al eliminar trade.")
