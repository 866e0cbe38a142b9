from fastapi import APIRouter, Depends
from datetime import datetime, timezone
import logging

from core.config import settings
from schemas.status import StatusResponse
from services.trade_book_service import TradeBookService, get_trade_book_service

router = APIRouter()

@router.get("", response_model=StatusResponse)
def get_status(trade_book: TradeBookService = Depends(get_trade_book_service)):
    """
    Endpoint para verificar el estado básico del servicio y si el backend de trades está configurado.
    """
    backend_ok = bool(settings.BACKEND_URL and settings.BACKEND_URL.strip())

    logging.info(f"Status endpoint called. Backend configured: {backend_ok}")

    return StatusResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        backend_configured=backend_ok,
        trades_loaded=len(trade_book.ledger),
        comparison_state=trade_book.coordinator.state.value,
    )
