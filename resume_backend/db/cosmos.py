"""Azure Cosmos DB adapter for candidate records.

Wraps one Cosmos container.  All reads are parameterized SQL queries with
cross-partition fan-out, so the adapter does not depend on the container's
partition key path.
"""

from __future__ import annotations

import logging
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos import ContainerProxy, CosmosClient
from pydantic import ValidationError

from resume_backend.core.errors import DependencyError
from resume_backend.models.candidate import CandidateRecord

logger = logging.getLogger(__name__)


class CandidateStore:
    """Create and query ``CandidateRecord`` documents."""

    def __init__(self, container: ContainerProxy) -> None:
        self._container = container

    @classmethod
    def from_settings(
        cls,
        uri: str,
        key: str,
        database_name: str,
        container_name: str,
        timeout_seconds: int = 30,
    ) -> CandidateStore:
        client = CosmosClient(
            uri,
            credential=key,
            connection_timeout=timeout_seconds,
            timeout=timeout_seconds,
            retry_total=0,
        )
        container = client.get_database_client(database_name).get_container_client(
            container_name
        )
        return cls(container)

    def create(self, record: CandidateRecord) -> None:
        try:
            self._container.create_item(body=record.to_document())
        except AzureError as exc:
            raise DependencyError(
                f"Candidate insert failed: {exc}",
                operation="cosmos.create",
                details={"candidate_id": record.id},
            ) from exc

    def query_all(self) -> list[CandidateRecord]:
        return self._query("SELECT * FROM c", None, operation="cosmos.query_all")

    def query_by_skill(self, skill: str) -> list[CandidateRecord]:
        """Records whose ``skills`` array contains *skill* (exact, case-sensitive)."""
        return self._query(
            "SELECT * FROM c WHERE ARRAY_CONTAINS(c.skills, @skill)",
            [{"name": "@skill", "value": skill}],
            operation="cosmos.query_by_skill",
        )

    def get_by_id(self, candidate_id: str) -> CandidateRecord | None:
        rows = self._query(
            "SELECT * FROM c WHERE c.id = @id",
            [{"name": "@id", "value": candidate_id}],
            operation="cosmos.get_by_id",
        )
        return rows[0] if rows else None

    def _query(
        self,
        query: str,
        parameters: list[dict[str, Any]] | None,
        operation: str,
    ) -> list[CandidateRecord]:
        try:
            items = list(
                self._container.query_items(
                    query=query,
                    parameters=parameters,
                    enable_cross_partition_query=True,
                )
            )
        except AzureError as exc:
            raise DependencyError(
                f"Candidate query failed: {exc}",
                operation=operation,
                details={"query": query},
            ) from exc

        records: list[CandidateRecord] = []
        for item in items:
            try:
                records.append(CandidateRecord.model_validate(item))
            except ValidationError as exc:
                # Documents written by older clients may lack required fields.
                logger.warning(
                    "candidate_row_skipped operation=%s id=%s errors=%s",
                    operation,
                    item.get("id"),
                    exc.error_count(),
                    extra={"operation": operation, "candidate_id": item.get("id")},
                )
        return records
