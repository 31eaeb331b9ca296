"""Azure Blob Storage adapter.

Stores résumé files in a single container and produces short-lived,
read-only SAS URLs for them.  SAS signing needs the account shared key; a
connection string without ``AccountKey`` (e.g. a SAS connection string) can
still upload but cannot sign.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from azure.core.exceptions import AzureError
from azure.storage.blob import (
    BlobSasPermissions,
    BlobServiceClient,
    ContentSettings,
    generate_blob_sas,
)

from resume_backend.core.errors import ConfigurationError, DependencyError

logger = logging.getLogger(__name__)


class BlobStore:
    """Thin wrapper over one blob container."""

    def __init__(self, service_client: BlobServiceClient, container_name: str) -> None:
        self._service = service_client
        self._container_name = container_name
        self._container = service_client.get_container_client(container_name)

    @classmethod
    def from_connection_string(
        cls,
        connection_string: str,
        container_name: str,
        timeout_seconds: int = 30,
    ) -> BlobStore:
        """Build the adapter with bounded connect/read timeouts and no retries."""
        service_client = BlobServiceClient.from_connection_string(
            connection_string,
            connection_timeout=timeout_seconds,
            read_timeout=timeout_seconds,
            retry_total=0,
        )
        return cls(service_client, container_name)

    @property
    def container_name(self) -> str:
        return self._container_name

    @property
    def _account_key(self) -> str | None:
        return getattr(self._service.credential, "account_key", None)

    @property
    def can_sign(self) -> bool:
        """True when the shared key needed for SAS signing is available."""
        return bool(self._account_key)

    def put(self, key: str, data: bytes, content_type: str) -> str:
        """Upload *data* under *key* and return the blob's direct URL."""
        blob_client = self._container.get_blob_client(key)
        try:
            blob_client.upload_blob(
                data,
                overwrite=False,
                content_settings=ContentSettings(content_type=content_type),
            )
        except AzureError as exc:
            raise DependencyError(
                f"Blob upload failed: {exc}",
                operation="blob.put",
                details={"blob_key": key, "container": self._container_name},
            ) from exc

        logger.debug("blob_uploaded", extra={"blob_key": key, "size": len(data)})
        return blob_client.url

    def sign_read(self, key: str, ttl: timedelta) -> str:
        """Return a read-only URL for *key* that expires ``now + ttl``."""
        account_key = self._account_key
        if not account_key:
            raise ConfigurationError(
                "No storage account key available for SAS signing",
                operation="blob.sign_read",
                details={"blob_key": key},
            )

        expiry = datetime.now(timezone.utc) + ttl
        sas_token = generate_blob_sas(
            account_name=self._service.account_name,
            container_name=self._container_name,
            blob_name=key,
            account_key=account_key,
            permission=BlobSasPermissions(read=True),
            expiry=expiry,
        )
        blob_client = self._container.get_blob_client(key)
        return f"{blob_client.url}?{sas_token}"
