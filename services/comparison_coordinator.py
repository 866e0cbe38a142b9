# services/comparison_coordinator.py
import logging

from core.errors import InvalidSelection, SubmissionInProgress
from schemas.trade import TradeCompareResponse
from schemas.view import ComparisonState
from services.selection_controller import SelectionController
from services.trade_ledger import TradeLedger
from services.trade_repository import TradeRepository

logger = logging.getLogger(__name__)


class ComparisonCoordinator:
    """
    Envía la pareja seleccionada al backend y aplica su respuesta autoritativa
    sobre el ledger local. No recalcula PnL localmente.

    Estados:
        IDLE -> selección con 0 o 1 IDs
        READY -> selección con exactamente 2 IDs
        SUBMITTING -> petición en vuelo; un segundo envío se rechaza
    Éxito: merge + selección vacía (IDLE). Fallo: ledger y selección intactos (READY).
    """

    def __init__(self, repository: TradeRepository, selection: SelectionController, ledger: TradeLedger):
        self.repository = repository
        self.selection = selection
        self.ledger = ledger
        self._submitting = False

    @property
    def state(self) -> ComparisonState:
        if self._submitting:
            return ComparisonState.SUBMITTING
        if self.selection.is_ready:
            return ComparisonState.READY
        return ComparisonState.IDLE

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    async def submit_comparison(self) -> TradeCompareResponse:
        # Ambas guardas se evalúan antes del primer await
        if self._submitting:
            raise SubmissionInProgress("Ya hay una comparación en curso.")
        if not self.selection.is_ready:
            raise InvalidSelection(f"Selecciona exactamente 2 trades para comparar (seleccionados: {self.selection.size}).")

        trade_ids = self.selection.ids
        self._submitting = True
        logger.info(f"Enviando comparación de trades {trade_ids}...")
        try:
            response = await self.repository.compare_trades(trade_ids)
        finally:
            self._submitting = False

        self.merge_compare_result(response)
        return response

    def merge_compare_result(self, response: TradeCompareResponse):
        """Aplica la respuesta de una comparación exitosa y vacía la selección."""
        self.ledger.merge(response.updated_trades)
        self.selection.clear()
        logger.info(f"Comparación completada: {len(response.updated_trades)} trades recibidos.")
