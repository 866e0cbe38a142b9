# services/strategy_index.py
import logging
from typing import Dict, Iterable, Optional

from schemas.strategy import Strategy

logger = logging.getLogger(__name__)

UNKNOWN_STRATEGY_NAME = "N/A"


class StrategyIndex:
    """
    Mapas nombre->id e id->nombre precalculados a partir de un snapshot de estrategias.
    Se reconstruye sólo cuando cambia el snapshot, no en cada pasada de filtro.
    """

    def __init__(self, strategies: Iterable[Strategy] = ()):
        self._id_by_name: Dict[str, int] = {}
        self._name_by_id: Dict[int, str] = {}
        for strategy in strategies:
            # Nombre duplicado: gana el primero, igual que una búsqueda lineal
            if strategy.name in self._id_by_name:
                logger.warning(f"Nombre de estrategia duplicado '{strategy.name}' (ID {strategy.id}); se usa el ID {self._id_by_name[strategy.name]}.")
            else:
                self._id_by_name[strategy.name] = strategy.id
            self._name_by_id.setdefault(strategy.id, strategy.name)

    def __len__(self) -> int:
        return len(self._name_by_id)

    def resolve_id(self, name: str) -> Optional[int]:
        """ID de la estrategia con ese nombre exacto, o None si no existe."""
        return self._id_by_name.get(name)

    def name_for(self, strategy_id: int) -> str:
        return self._name_by_id.get(strategy_id, UNKNOWN_STRATEGY_NAME)

    def has_id(self, strategy_id: int) -> bool:
        return strategy_id in self._name_by_id
