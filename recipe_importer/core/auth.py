from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from recipe_importer.core import config

security = HTTPBearer(auto_error=False)


def verify_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> str:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    if config.ACCESS_TOKEN and credentials.credentials != config.ACCESS_TOKEN:
        raise HTTPException(status_code=401, detail="Invalid token")
    return credentials.credentials
