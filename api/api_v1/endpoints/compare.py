# api/api_v1/endpoints/compare.py
from fastapi import APIRouter, Depends, HTTPException, status as http_status
import logging

from api.api_v1.errors import raise_for_result
from schemas.results import OperationResult
from services.trade_book_service import TradeBookService, get_trade_book_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post(
    "",
    response_model=OperationResult,
    summary="Comparar los 2 Trades Seleccionados",
    description="Envía la pareja seleccionada al backend y aplica los trades actualizados que devuelve. Si falla, la selección se mantiene para reintentar.",
    responses={
        400: {"description": "Selección distinta de 2 trades o comparación ya en curso"},
        502: {"description": "El backend falló; nada cambió localmente"},
        503: {"description": "BACKEND_URL no configurada"},
    }
)
async def compare_selected_trades(trade_book: TradeBookService = Depends(get_trade_book_service)):
    logger.info(f"Endpoint POST /compare llamado. Selección: {trade_book.selection.ids}")
    try:
        return raise_for_result(await trade_book.submit_comparison())
    except HTTPException as http_exc:
        raise http_exc
    except Exception:
        logger.exception("Error inesperado al comparar trades")
        raise HTTPException(status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error interno al comparar trades.")
