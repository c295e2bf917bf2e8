"""
Errors raised while resolving transaction gas
"""
from typing import Any, Optional


class GasControllerError(Exception):
    """Base class for gas controller errors"""


class ConfigError(GasControllerError):
    """Raised when gas configuration values are invalid"""


class RPCError(GasControllerError):
    """JSON-RPC error response returned by a node"""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Any = None,
        error_key: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        self.error_key = error_key

    @classmethod
    def from_response(cls, error: Any) -> "RPCError":
        """Build from the `error` member of a JSON-RPC response"""
        if not isinstance(error, dict):
            return cls(str(error))

        data = error.get('data')
        error_key = error.get('errorKey')
        if error_key is None and isinstance(data, dict):
            error_key = data.get('errorKey')

        return cls(
            message=error.get('message') or 'Unknown RPC error',
            code=error.get('code'),
            data=data,
            error_key=error_key,
        )


class TransportError(GasControllerError):
    """Raised when a block or code lookup against the node fails"""

    def __init__(self, method: str, message: str):
        super().__init__(f"{method} failed: {message}")
        self.method = method
