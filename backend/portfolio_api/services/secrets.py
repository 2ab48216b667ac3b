"""
Secrets provider backed by AWS Secrets Manager.

Values are cached in-process by secret name for the lifetime of the process.
There is no expiry and no invalidation: a rotated secret is only picked up
after a restart. Concurrent first reads may both hit AWS; the last write to
the cache wins, which is harmless because both writes carry the same value.
"""
import logging
from typing import Dict, Optional, Type, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ValidationError
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class SecretsError(Exception):
    pass


class SecretDeserializationError(SecretsError):
    def __init__(self, secret_name: str, target: type, cause: Exception):
        super().__init__(
            f"Failed to deserialize secret {secret_name} to type {target.__name__}"
        )
        self.secret_name = secret_name
        self.target = target
        self.cause = cause


class SecretsService:
    def __init__(self, client=None, region_name: Optional[str] = None):
        self._client = client
        self._region_name = region_name
        self._cache: Dict[str, str] = {}

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("secretsmanager", region_name=self._region_name)
        return self._client

    def get_secret(self, secret_name: str) -> str:
        cached = self._cache.get(secret_name)
        if cached is not None:
            return cached

        try:
            response = self.client.get_secret_value(SecretId=secret_name)
        except (BotoCoreError, ClientError):
            logger.error("Failed to retrieve secret: %s", secret_name, exc_info=True)
            raise

        secret_value = response.get("SecretString")
        if secret_value is None:
            raise SecretsError(f"Secret {secret_name} has no string value")

        self._cache[secret_name] = secret_value
        logger.debug("Successfully retrieved secret: %s", secret_name)
        return secret_value

    def get_secret_as(self, secret_name: str, model: Type[T]) -> T:
        """Fetch a JSON secret and validate it into ``model``."""
        secret_value = self.get_secret(secret_name)

        try:
            return model.model_validate_json(secret_value)
        except ValidationError as exc:
            logger.error(
                "Failed to deserialize secret %s to type %s",
                secret_name, model.__name__
            )
            raise SecretDeserializationError(secret_name, model, exc) from exc

class DatabaseSecret(BaseModel):
    """RDS-style credentials secret."""

    username: str
    password: str
    host: str
    port: int = 5432
    dbname: str
    engine: str = "postgres"

    def to_uri(self) -> str:
        return URL.create(
            "postgresql+psycopg2",
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.dbname,
        ).render_as_string(hide_password=False)


_secrets_service: Optional[SecretsService] = None


def get_secrets_service(region_name: Optional[str] = None) -> SecretsService:
    """Process-wide secrets service."""
    global _secrets_service
    if _secrets_service is None:
        _secrets_service = SecretsService(region_name=region_name)
    return _secrets_service


def reset_secrets_service(service: Optional[SecretsService] = None) -> None:
    global _secrets_service
    _secrets_service = service
