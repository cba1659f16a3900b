"""
Pipeline authentication using Bearer token.

Used by cron jobs and operators to trigger pipeline runs over HTTP.
"""

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.settings import Settings, get_settings

security = HTTPBearer()


def verify_pipeline_token(
    credentials: HTTPAuthorizationCredentials = Security(security),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Verify the bearer token matches our pipeline secret.

    Raises:
        HTTPException: If the server has no token configured or the token is invalid
    """
    if settings.pipeline_api_token is None or not settings.pipeline_api_token.get_secret_value():
        raise HTTPException(
            status_code=500,
            detail="Server misconfigured: PIPELINE_API_TOKEN not set",
        )

    if credentials.credentials != settings.pipeline_api_token.get_secret_value():
        raise HTTPException(
            status_code=401,
            detail="Invalid pipeline authentication token",
        )

    return credentials.credentials
