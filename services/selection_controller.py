# services/selection_controller.py
import logging
from typing import List

from core.errors import SelectionLimitExceeded

logger = logging.getLogger(__name__)

MAX_SELECTION = 2


class SelectionController:
    """Conjunto ordenado por inserción de IDs de trade elegidos para comparar (máximo 2)."""

    def __init__(self):
        self._ids: List[int] = []

    @property
    def ids(self) -> List[int]:
        return list(self._ids)

    @property
    def size(self) -> int:
        return len(self._ids)

    @property
    def is_ready(self) -> bool:
        return len(self._ids) == MAX_SELECTION

    def __contains__(self, trade_id: int) -> bool:
        return trade_id in self._ids

    def toggle(self, trade_id: int) -> bool:
        """
        Quita el ID si ya estaba; si no, lo añade mientras haya hueco.
        Devuelve True si el ID queda seleccionado. Con la selección llena lanza
        SelectionLimitExceeded sin tocar el conjunto (nunca se desaloja otro ID).
        """
        if trade_id in self._ids:
            self._ids.remove(trade_id)
            logger.debug(f"Trade {trade_id} deseleccionado. Selección: {self._ids}")
            return False
        if len(self._ids) >= MAX_SELECTION:
            raise SelectionLimitExceeded(f"Sólo se pueden seleccionar {MAX_SELECTION} trades para comparar.")
        self._ids.append(trade_id)
        logger.debug(f"Trade {trade_id} seleccionado. Selección: {self._ids}")
        return True

    def discard(self, trade_id: int):
        if trade_id in self._ids:
            self._ids.remove(trade_id)

    def clear(self):
        self._ids.clear()
