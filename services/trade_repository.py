# services/trade_repository.py
import logging
from typing import Any, List, Optional, Sequence

import httpx
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from core.config import settings
from core.errors import ConfigurationError, NetworkError, ValidationError
from schemas.strategy import Strategy, StrategyCreate
from schemas.trade import Trade, TradeCompareRequest, TradeCompareResponse

logger = logging.getLogger(__name__)

_TRADE_LIST = TypeAdapter(List[Trade])
_STRATEGY_LIST = TypeAdapter(List[Strategy])


class TradeRepository:
    """
    Cliente del backend de trades/estrategias (colaborador externo).
    Toda respuesta no exitosa, error de transporte o payload malformado se
    convierte en NetworkError. Sin timeout ni reintentos automáticos.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        # None -> se lee de settings en cada llamada (la ausencia se detecta antes de la petición)
        self._base_url = base_url
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=None)
            logger.debug("TradeRepository: cliente HTTP creado.")
        return self._client

    def _url(self, path: str) -> str:
        if self._base_url is None:
            return f"{settings.require_backend_url()}{path}"
        if not self._base_url.strip():
            raise ConfigurationError("La dirección del backend está vacía.")
        return f"{self._base_url.strip().rstrip('/')}{path}"

    async def _request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        url = self._url(path) # ConfigurationError antes de tocar la red
        logger.debug(f"{method} {url} payload={payload}")
        try:
            response = await self._get_client().request(method, url, json=payload)
            response.raise_for_status()
        except httpx.InvalidURL as e:
            # Una dirección mal formada es un problema de configuración, no de red
            raise ConfigurationError(f"La dirección del backend no es válida: {e}") from e
        except httpx.HTTPStatusError as e:
            detail = e.response.text[:200] if e.response is not None else ""
            logger.error(f"{method} {url} devolvió {e.response.status_code}: {detail}")
            raise NetworkError(f"El backend respondió {e.response.status_code} a {method} {path}", status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"Error de transporte en {method} {url}: {e}")
            raise NetworkError(f"No se pudo contactar el backend ({method} {path}): {e}") from e

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"Respuesta no JSON de {method} {path}") from e

    def _parse(self, adapter_or_model, data: Any, what: str):
        try:
            if isinstance(adapter_or_model, TypeAdapter):
                return adapter_or_model.validate_python(data)
            return adapter_or_model.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Payload inválido recibido para {what}: {e}")
            raise NetworkError(f"El backend devolvió un payload inválido para {what}") from e

    # --- Operaciones del colaborador ---
    async def list_trades(self) -> List[Trade]:
        data = await self._request("GET", "/trades/")
        trades = self._parse(_TRADE_LIST, data, "trades")
        logger.info(f"Recibidos {len(trades)} trades del backend.")
        return trades

    async def list_strategies(self) -> List[Strategy]:
        data = await self._request("GET", "/strategies/")
        strategies = self._parse(_STRATEGY_LIST, data, "strategies")
        logger.info(f"Recibidas {len(strategies)} estrategias del backend.")
        return strategies

    async def create_strategy(self, name: str) -> Strategy:
        try:
            strategy_in = StrategyCreate(name=name)
        except PydanticValidationError as e:
            raise ValidationError("El nombre de la estrategia no puede estar vacío") from e
        data = await self._request("POST", "/strategies/", strategy_in.model_dump())
        strategy = self._parse(Strategy, data, "strategy")
        logger.info(f"Estrategia creada en backend: {strategy.id} '{strategy.name}'")
        return strategy

    async def delete_trade(self, trade_id: int) -> None:
        await self._request("DELETE", f"/trades/{trade_id}")
        logger.info(f"Trade {trade_id} eliminado en backend.")

    async def compare_trades(self, trade_ids: Sequence[int]) -> TradeCompareResponse:
        try:
            request = TradeCompareRequest(trade_ids=list(trade_ids))
        except PydanticValidationError as e:
            raise ValidationError("Se requieren exactamente dos IDs de trade distintos para comparar") from e
        data = await self._request("POST", "/trades/compare", request.model_dump())
        return self._parse(TradeCompareResponse, data, "compare")

    async def close(self):
        if self._client is not None and self._owns_client:
            try:
                await self._client.aclose()
                logger.info("Cliente HTTP del backend cerrado.")
            except Exception as e:
                logger.error(f"Error cerrando cliente HTTP: {e}", exc_info=True)
        self._client = None
