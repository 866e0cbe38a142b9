# core/errors.py
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration_error"
    VALIDATION = "validation_error"
    SELECTION_LIMIT = "selection_limit_exceeded"
    NETWORK = "network_error"


class TradeTrackerError(Exception):
    """Base de todos los errores que una operación del núcleo puede reportar."""
    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(TradeTrackerError):
    """Dirección del backend ausente o mal formada: fatal para la operación, nunca se reintenta."""
    kind = ErrorKind.CONFIGURATION


class ValidationError(TradeTrackerError):
    """Precondición local violada antes de cualquier llamada de red."""
    kind = ErrorKind.VALIDATION


class InvalidSelection(ValidationError):
    pass


class SubmissionInProgress(ValidationError):
    pass


class SelectionLimitExceeded(TradeTrackerError):
    kind = ErrorKind.SELECTION_LIMIT


class NetworkError(TradeTrackerError):
    """Una llamada al colaborador falló o devolvió un estado no exitoso."""
    kind = ErrorKind.NETWORK

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
