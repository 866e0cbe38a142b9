# services/trade_book_service.py
import logging
from typing import List, Optional

from core.errors import (ConfigurationError, NetworkError, SubmissionInProgress,
                         TradeTrackerError, ValidationError)
from schemas.filters import TradeFilters
from schemas.results import OperationResult
from schemas.strategy import Strategy
from schemas.trade import Trade, TradeCompareResponse
from schemas.view import TradeBookView, TradeRow
from services.aggregation_engine import group_trades, to_position_rows
from services.comparison_coordinator import ComparisonCoordinator
from services.filter_engine import apply_filters
from services.selection_controller import SelectionController
from services.strategy_index import StrategyIndex
from services.trade_ledger import TradeLedger
from services.trade_repository import TradeRepository

logger = logging.getLogger(__name__)

FILTER_FIELDS = ("date", "strategy_name", "ticker")


class TradeBookService:
    """
    Dueño único del estado de la vista de trades: ledger local, snapshot de
    estrategias, filtros, selección y coordinador de comparación. El estado sólo
    cambia a través de las operaciones públicas, y cada una devuelve un
    OperationResult en lugar de propagar los errores del núcleo.
    """

    def __init__(self, repository: TradeRepository):
        self.repository = repository
        self.ledger = TradeLedger()
        self.selection = SelectionController()
        self.coordinator = ComparisonCoordinator(repository, self.selection, self.ledger)
        self.filters = TradeFilters()
        self._strategies: List[Strategy] = []
        self._strategy_index = StrategyIndex()

    # --- Helpers ---
    def _fail(self, operation: str, error: TradeTrackerError) -> OperationResult:
        if isinstance(error, ConfigurationError):
            logger.critical(f"[{operation}] Configuración inválida: {error.message}")
        elif isinstance(error, NetworkError):
            logger.error(f"[{operation}] Fallo del backend: {error.message}")
        else:
            logger.warning(f"[{operation}] Operación rechazada: {error.message}")
        return OperationResult.failure(operation, error)

    def _set_strategies(self, strategies: List[Strategy]):
        self._strategies = list(strategies)
        self._strategy_index = StrategyIndex(self._strategies)

    @property
    def strategies(self) -> List[Strategy]:
        return list(self._strategies)

    @property
    def trades(self) -> List[Trade]:
        return self.ledger.trades

    def strategy_name(self, strategy_id: int) -> str:
        return self._strategy_index.name_for(strategy_id)

    # --- Carga de snapshots ---
    async def refresh(self) -> OperationResult:
        """
        Descarga trades y estrategias; sólo se reemplazan si ambas llamadas tienen éxito.
        Si el ledger cambió mientras se esperaba al backend (merge de una comparación o
        borrado), la lista descargada puede ser anterior a ese cambio: se conservan los
        trades locales y sólo se actualizan las estrategias.
        """
        ledger_version = self.ledger.version
        try:
            trades = await self.repository.list_trades()
            strategies = await self.repository.list_strategies()
        except TradeTrackerError as e:
            return self._fail("refresh", e)

        if self.ledger.version != ledger_version:
            logger.warning("[refresh] El ledger cambió durante la descarga; se conservan los trades locales.")
            self._set_strategies(strategies)
            return OperationResult.success(
                "refresh",
                data={"trades": len(self.ledger), "strategies": len(strategies)},
                message="Trades locales conservados: el ledger cambió durante la recarga.",
            )

        self.load_snapshot(trades, strategies)
        return OperationResult.success("refresh", data={"trades": len(trades), "strategies": len(strategies)})

    def load_snapshot(self, trades: List[Trade], strategies: List[Strategy]):
        """Reemplaza ledger y estrategias por un snapshot completo del backend."""
        self.ledger.replace_all(trades)
        self._set_strategies(strategies)
        # IDs seleccionados que ya no existen en el snapshot nuevo
        if not self.coordinator.is_submitting:
            for trade_id in self.selection.ids:
                if self.ledger.get(trade_id) is None:
                    self.selection.discard(trade_id)

    async def refresh_strategies(self) -> OperationResult:
        try:
            strategies = await self.repository.list_strategies()
        except TradeTrackerError as e:
            return self._fail("refresh_strategies", e)
        self._set_strategies(strategies)
        return OperationResult.success("refresh_strategies", data=self.strategies)

    # --- Filtros ---
    def set_filter(self, field: str, value: Optional[str]) -> OperationResult:
        if field not in FILTER_FIELDS:
            return self._fail("set_filter", ValidationError(f"Filtro desconocido '{field}'. Válidos: {', '.join(FILTER_FIELDS)}"))
        self.filters = self.filters.model_copy(update={field: value or None})
        logger.debug(f"Filtros actualizados: {self.filters.model_dump()}")
        return OperationResult.success("set_filter", data=self.filters)

    def clear_filters(self) -> OperationResult:
        self.filters = TradeFilters()
        return OperationResult.success("clear_filters", data=self.filters)

    # --- Selección y comparación ---
    def toggle(self, trade_id: int) -> OperationResult:
        try:
            if self.coordinator.is_submitting:
                raise SubmissionInProgress("No se puede cambiar la selección mientras hay una comparación en curso.")
            if self.ledger.get(trade_id) is None:
                raise ValidationError(f"Trade {trade_id} no existe en la lista local.")
            selected = self.selection.toggle(trade_id)
        except TradeTrackerError as e:
            return self._fail("toggle", e)
        return OperationResult.success("toggle", data={"trade_id": trade_id, "selected": selected, "selection": self.selection.ids})

    def clear_selection(self) -> OperationResult:
        if self.coordinator.is_submitting:
            return self._fail("clear_selection", SubmissionInProgress("No se puede cambiar la selección mientras hay una comparación en curso."))
        self.selection.clear()
        return OperationResult.success("clear_selection", data=[])

    async def submit_comparison(self) -> OperationResult:
        try:
            response = await self.coordinator.submit_comparison()
        except TradeTrackerError as e:
            return self._fail("submit_comparison", e)
        return OperationResult.success("submit_comparison", data=response.updated_trades, message="Comparación completada.")

    def merge_compare_result(self, response: TradeCompareResponse) -> OperationResult:
        self.coordinator.merge_compare_result(response)
        return OperationResult.success("merge_compare_result", data=response.updated_trades)

    # --- Operaciones CRUD delegadas al backend ---
    async def delete_trade(self, trade_id: int) -> OperationResult:
        try:
            await self.repository.delete_trade(trade_id)
        except TradeTrackerError as e:
            return self._fail("delete_trade", e)
        self.ledger.remove(trade_id)
        if not self.coordinator.is_submitting:
            self.selection.discard(trade_id)
        return OperationResult.success("delete_trade", data={"trade_id": trade_id}, message="Trade eliminado.")

    async def create_strategy(self, name: str) -> OperationResult:
        try:
            strategy = await self.repository.create_strategy(name)
        except TradeTrackerError as e:
            return self._fail("create_strategy", e)
        self._set_strategies(self._strategies + [strategy])
        return OperationResult.success("create_strategy", data=strategy, message="Estrategia creada.")

    # --- Vista derivada ---
    def view(self) -> TradeBookView:
        """Recalcula filtrado y agrupación sobre el estado actual. Nunca espera a una comparación en vuelo."""
        filtered = apply_filters(self.ledger.trades, self.filters, self._strategy_index)
        selected_ids = self.selection.ids
        rows = [
            TradeRow(**trade.model_dump(),
                     strategy_name=self._strategy_index.name_for(trade.strategy_id),
                     selected=trade.id in selected_ids,
                     matched=trade.is_matched)
            for trade in filtered
        ]
        positions = to_position_rows(group_trades(filtered), self._strategy_index)
        return TradeBookView(
            filters=self.filters,
            trades=rows,
            positions=positions,
            selection=selected_ids,
            comparison_state=self.coordinator.state,
        )


# --- Instancia única (estado de la vista compartido por la API) ---
trade_book_service_instance = TradeBookService(repository=TradeRepository())

# --- Dependencia para FastAPI ---
def get_trade_book_service() -> TradeBookService:
    return trade_book_service_instance

# --- Funciones de Ciclo de Vida para FastAPI ---
async def startup_trade_book_service():
    """Función a llamar desde el lifespan startup de FastAPI: carga el primer snapshot."""
    logger.info("Cargando snapshot inicial de trades y estrategias...")
    result = await trade_book_service_instance.refresh()
    if result.ok:
        logger.info(f"Snapshot inicial cargado: {result.data}")
    else:
        # No se aborta el arranque: la API expone el error y permite reintentar con /trades/refresh
        logger.warning(f"No se pudo cargar el snapshot inicial ({result.error_kind}): {result.message}")

async def shutdown_trade_book_service():
    logger.info("Cerrando cliente del backend de trades...")
    await trade_book_service_instance.repository.close()
