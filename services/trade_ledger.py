# services/trade_ledger.py
import logging
from typing import Dict, Iterable, List, Optional

from schemas.trade import Trade

logger = logging.getLogger(__name__)


def merge_updated_trades(local: List[Trade], updated: Iterable[Trade]) -> List[Trade]:
    """
    Sustituye, por ID, cada trade local que aparezca en `updated`. Los trades
    ausentes de la respuesta se devuelven como el mismo objeto y el orden se conserva.
    IDs de la respuesta que no existen localmente se ignoran.
    """
    by_id: Dict[int, Trade] = {}
    for trade in updated:
        by_id.setdefault(trade.id, trade) # Con IDs repetidos gana el primero

    unknown = set(by_id) - {t.id for t in local}
    if unknown:
        logger.debug(f"La respuesta incluye trades no presentes localmente (ignorados): {sorted(unknown)}")

    return [by_id.get(trade.id, trade) for trade in local]


class TradeLedger:
    """Copia local de la lista de trades del backend. Cada mutación reemplaza la lista completa."""

    def __init__(self, trades: Iterable[Trade] = ()):
        self._trades: List[Trade] = list(trades)
        self._version = 0

    @property
    def trades(self) -> List[Trade]:
        return list(self._trades)

    @property
    def version(self) -> int:
        """Contador de mutaciones; permite detectar cambios ocurridos durante un await."""
        return self._version

    def __len__(self) -> int:
        return len(self._trades)

    def get(self, trade_id: int) -> Optional[Trade]:
        for trade in self._trades:
            if trade.id == trade_id:
                return trade
        return None

    def replace_all(self, trades: Iterable[Trade]):
        self._trades = list(trades)
        self._version += 1

    def merge(self, updated: Iterable[Trade]) -> int:
        """Aplica la respuesta de una comparación. Devuelve cuántos trades locales se sustituyeron."""
        updated = list(updated)
        merged = merge_updated_trades(self._trades, updated)
        replaced = sum(1 for old, new in zip(self._trades, merged) if old is not new)
        self._trades = merged
        self._version += 1
        logger.info(f"Merge de comparación aplicado: {replaced} trades actualizados.")
        return replaced

    def remove(self, trade_id: int) -> bool:
        remaining = [t for t in self._trades if t.id != trade_id]
        removed = len(remaining) != len(self._trades)
        self._trades = remaining
        if removed:
            self._version += 1
        return removed
