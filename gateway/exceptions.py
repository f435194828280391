"""
Gateway error taxonomy.

Every failure the registry or the routes can report is a GatewayError
subclass carrying an HTTP status and a stable error code. Registration
failures share status 403 but keep distinct codes so clients can tell
them apart.
"""
from typing import Any, Dict, Optional


class GatewayError(Exception):
    status_code = 500
    error_code = 'internal_error'

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        data = {
            'error': self.message,
            'code': self.error_code,
        }
        if self.details:
            data['details'] = self.details
        return data


class MissingParameter(GatewayError):
    status_code = 400
    error_code = 'missing_parameter'

    def __init__(self, *names: str):
        super().__init__(
            f"Missing required parameter(s): {', '.join(names)}",
            {'parameters': list(names)}
        )


class InvalidParameter(GatewayError):
    status_code = 400
    error_code = 'invalid_parameter'

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid parameter {name}: {reason}", {'parameter': name})


class DuplicateIdentity(GatewayError):
    status_code = 403
    error_code = 'duplicate_identity'

    def __init__(self, email: str):
        super().__init__(f"Player {email} is already registered", {'email': email})


class InvalidTarget(GatewayError):
    status_code = 403
    error_code = 'invalid_target'

    def __init__(self, server_url: Optional[str], reason: str = None):
        super().__init__(
            reason or f"Invalid server URL: {server_url!r}",
            {'server_url': server_url}
        )


class CapacityExceeded(GatewayError):
    status_code = 403
    error_code = 'capacity_exceeded'

    def __init__(self, limit: int):
        super().__init__(
            f"Maximum number of players reached ({limit})",
            {'max_number_of_users': limit}
        )


class Unauthorized(GatewayError):
    status_code = 401
    error_code = 'unauthorized'

    def __init__(self, message: str = 'Authentication required'):
        super().__init__(message)


class NotFound(GatewayError):
    status_code = 404
    error_code = 'not_found'

    def __init__(self, email: str):
        super().__init__(f"No player registered with email {email}", {'email': email})


class LimitOutOfRange(GatewayError):
    status_code = 409
    error_code = 'limit_out_of_range'

    def __init__(self, current: int, requested: int):
        super().__init__(
            f"Cannot set max number of users to {requested}",
            {'current': current, 'requested': requested}
        )


class ImportFailed(GatewayError):
    status_code = 400
    error_code = 'import_failed'
