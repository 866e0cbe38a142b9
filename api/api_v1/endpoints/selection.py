# api/api_v1/endpoints/selection.py
from fastapi import APIRouter, Depends
import logging
from typing import List

from api.api_v1.errors import raise_for_result
from schemas.results import OperationResult
from services.trade_book_service import TradeBookService, get_trade_book_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[int], summary="Trades Seleccionados para Comparar")
def get_selection(trade_book: TradeBookService = Depends(get_trade_book_service)):
    return trade_book.selection.ids


@router.post(
    "/{trade_id}",
    response_model=OperationResult,
    summary="Seleccionar / Deseleccionar Trade",
    responses={409: {"description": "Ya hay 2 trades seleccionados"}, 400: {"description": "Trade inexistente o comparación en curso"}}
)
def toggle_selection(
    trade_id: int,
    trade_book: TradeBookService = Depends(get_trade_book_service)
):
    logger.info(f"Endpoint POST /selection/{trade_id} llamado.")
    return raise_for_result(trade_book.toggle(trade_id))


@router.delete("", response_model=OperationResult, summary="Vaciar Selección")
def clear_selection(trade_book: TradeBookService = Depends(get_trade_book_service)):
    return raise_for_result(trade_book.clear_selection())
