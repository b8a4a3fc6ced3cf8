"""
Bearer token verification.

Tokens are issued by the external identity provider (HS256, shared secret);
`sub` carries the user id. Roles are not trusted from the token, they are
looked up in user_roles.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = 7

    def create_jwt_token(self, user_id: str, **claims: Any) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': user_id,
            'iat': now,
            'exp': now + timedelta(days=self.token_expire_days),
            **claims,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError('Token expired')
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    def get_user_id_from_jwt(self, token: Optional[str]) -> str:
        if not token:
            raise AuthenticationError('Not authenticated')

        user_id = self.decode_jwt_token(token).get('sub')
        if not user_id:
            raise AuthenticationError('Invalid token')
        return str(user_id)


def extract_bearer_token(authorization: Optional[str], cookie_token: Optional[str]) -> Optional[str]:
    """Authorization header wins over the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(' ')
        if scheme.lower() == 'bearer' and credentials.strip():
            return credentials.strip()
    return cookie_token or None
