from typing import Optional, Any
from enum import Enum

# ------------------------------- Base Models ------------------------------- #

class ApiStatus(str, Enum):
    """Standard API response statuses"""
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION_ERROR = "validation_error"

# ------------------------------- Response Helpers ------------------------------- #

def error_response(
    message: str = "An error occurred",
    status: ApiStatus = ApiStatus.ERROR,
    error_code: Optional[str] = None,
    data: Any = None,
    timestamp: Optional[str] = None
) -> dict:
    """Helper function to create a standardized error response"""
    return {
        "status": status.value,
        "message": message,
        "data": data,
        "error_code": error_code,
        "timestamp": timestamp
    }
