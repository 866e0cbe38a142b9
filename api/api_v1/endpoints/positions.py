# api/api_v1/endpoints/positions.py
from fastapi import APIRouter, Depends
import logging

from api.api_v1.errors import raise_for_result
from schemas.filters import TradeFilters
from schemas.view import TradeBookView
from services.trade_book_service import FILTER_FIELDS, TradeBookService, get_trade_book_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get(
    "",
    response_model=TradeBookView,
    summary="Vista Agrupada de Posiciones",
    description="Posiciones agrupadas por (fecha, estrategia, ticker, horizonte) sobre los trades filtrados, con totales de PnL."
)
def get_positions(trade_book: TradeBookService = Depends(get_trade_book_service)):
    logger.info("Endpoint GET /positions llamado.")
    return trade_book.view()


@router.get("/filters", response_model=TradeFilters, summary="Filtros Activos")
def get_filters(trade_book: TradeBookService = Depends(get_trade_book_service)):
    return trade_book.filters


@router.put(
    "/filters",
    response_model=TradeBookView,
    summary="Actualizar Filtros",
    description="Reemplaza los filtros activos (fecha exacta, nombre de estrategia, subcadena de ticker) y devuelve la vista recalculada."
)
def put_filters(
    filters_in: TradeFilters,
    trade_book: TradeBookService = Depends(get_trade_book_service)
):
    logger.info(f"Endpoint PUT /positions/filters llamado: {filters_in.model_dump()}")
    for field in FILTER_FIELDS:
        raise_for_result(trade_book.set_filter(field, getattr(filters_in, field)))
    return trade_book.view()


@router.delete("/filters", response_model=TradeBookView, summary="Limpiar Filtros")
def clear_filters(trade_book: TradeBookService = Depends(get_trade_book_service)):
    trade_book.clear_filters()
    return trade_book.view()
