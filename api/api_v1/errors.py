# api/api_v1/errors.py
from fastapi import HTTPException, status as http_status

from core.errors import ErrorKind
from schemas.results import OperationResult

# Traducción de ErrorKind a código HTTP
STATUS_BY_KIND = {
    ErrorKind.VALIDATION: http_status.HTTP_400_BAD_REQUEST,
    ErrorKind.SELECTION_LIMIT: http_status.HTTP_409_CONFLICT,
    ErrorKind.NETWORK: http_status.HTTP_502_BAD_GATEWAY,
    ErrorKind.CONFIGURATION: http_status.HTTP_503_SERVICE_UNAVAILABLE,
}

def raise_for_result(result: OperationResult) -> OperationResult:
    """Lanza HTTPException si la operación falló; si no, devuelve el resultado tal cual."""
    if result.ok:
        return result
    status_code = STATUS_BY_KIND.get(result.error_kind, http_status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise HTTPException(
        status_code=status_code,
        detail={"error_kind": result.error_kind.value if result.error_kind else None, "message": result.message},
    )
