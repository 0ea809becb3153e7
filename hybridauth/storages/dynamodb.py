"""DynamoDB-based session storage for multi-process deployments."""

from __future__ import annotations

import json
import time
from typing import Any, List, Optional

import boto3
import structlog
from botocore.exceptions import ClientError

from hybridauth.core.storage import Storage
from hybridauth.exceptions import StorageError

log = structlog.get_logger()

BATCH_WRITE_MAX_ATTEMPTS = 5
BATCH_WRITE_BACKOFF = 0.05  # seconds, doubled on every retry


class DynamoDBStorage(Storage):
    """
    Stores session entries in a DynamoDB table.

    Expects table schema:
    - PK: SESSION#{session_id}
    - SK: the entry key (e.g. "google.access_token")
    - Attributes: value (JSON-encoded string)

    Requires AWS credentials with dynamodb:GetItem, PutItem, DeleteItem,
    Query and BatchWriteItem permissions. The table is not created here.

    Example:
        storage = DynamoDBStorage(
            table_name="hybridauth-sessions",
            region="us-east-1",
            session_id=request.session_id,
        )
        hybridauth = Hybridauth(config, storage=storage)
    """

    def __init__(
        self,
        table_name: str,
        region: str,
        session_id: str,
        endpoint_url: Optional[str] = None,  # For LocalStack testing
    ):
        """Initialize DynamoDB session storage.

        Args:
            table_name: Name of the DynamoDB table holding sessions
            region: AWS region where the table is located
            session_id: Identifier of the session all keys are scoped to
            endpoint_url: Optional endpoint URL for LocalStack/testing
        """
        self._table_name = table_name
        self._session_id = session_id
        self._pk = f"SESSION#{session_id}"
        self._dynamodb = boto3.client(
            'dynamodb',
            region_name=region,
            endpoint_url=endpoint_url
        )
        log.debug("Initialized DynamoDB storage", table_name=table_name, region=region)

    def _key(self, key: str) -> dict:
        return {'PK': {'S': self._pk}, 'SK': {'S': key}}

    def get(self, key: str, default: Any = None) -> Any:
        try:
            response = self._dynamodb.get_item(
                TableName=self._table_name,
                Key=self._key(key),
                ConsistentRead=True,
            )
        except ClientError as e:
            log.error("DynamoDB get failed", key=key, error=str(e))
            raise StorageError(f"Failed to read session key {key}: {e}", "get") from e

        item = response.get('Item')
        if item is None:
            return default
        return json.loads(item['value']['S'])

    def set(self, key: str, value: Any) -> None:
        try:
            self._dynamodb.put_item(
                TableName=self._table_name,
                Item={
                    **self._key(key),
                    'value': {'S': json.dumps(value)},
                },
            )
        except ClientError as e:
            log.error("DynamoDB put failed", key=key, error=str(e))
            raise StorageError(f"Failed to write session key {key}: {e}", "set") from e

    def delete(self, key: str) -> None:
        try:
            self._dynamodb.delete_item(TableName=self._table_name, Key=self._key(key))
        except ClientError as e:
            log.error("DynamoDB delete failed", key=key, error=str(e))
            raise StorageError(f"Failed to delete session key {key}: {e}", "delete") from e

    def delete_match(self, prefix: str) -> None:
        self._delete_keys(self._query_keys(prefix), "delete_match")

    def clear(self) -> None:
        self._delete_keys(self._query_keys(None), "clear")

    def _query_keys(self, prefix: Optional[str]) -> List[str]:
        if prefix:
            condition = "PK = :pk AND begins_with(SK, :prefix)"
            values = {':pk': {'S': self._pk}, ':prefix': {'S': prefix}}
        else:
            condition = "PK = :pk"
            values = {':pk': {'S': self._pk}}

        keys = []
        try:
            paginator = self._dynamodb.get_paginator('query')
            for page in paginator.paginate(
                TableName=self._table_name,
                KeyConditionExpression=condition,
                ExpressionAttributeValues=values,
                ProjectionExpression="SK",
            ):
                keys.extend(item['SK']['S'] for item in page.get('Items', []))
        except ClientError as e:
            log.error("DynamoDB query failed", session_prefix=prefix, error=str(e))
            raise StorageError(f"Failed to list session keys: {e}", "query") from e
        return keys

    def _delete_keys(self, keys: List[str], operation: str) -> None:
        # BatchWriteItem accepts at most 25 requests
        for start in range(0, len(keys), 25):
            chunk = keys[start:start + 25]
            self._batch_delete(
                {self._table_name: [{'DeleteRequest': {'Key': self._key(key)}} for key in chunk]},
                operation,
            )
        log.debug("Deleted session keys", session_id=self._session_id, count=len(keys))

    def _batch_delete(self, request_items: dict, operation: str) -> None:
        # Throttled writes come back as UnprocessedItems and must be resent
        for attempt in range(BATCH_WRITE_MAX_ATTEMPTS):
            if attempt:
                time.sleep(BATCH_WRITE_BACKOFF * 2 ** (attempt - 1))
            try:
                response = self._dynamodb.batch_write_item(RequestItems=request_items)
            except ClientError as e:
                log.error("DynamoDB batch delete failed", error=str(e))
                raise StorageError(f"Failed to delete session keys: {e}", operation) from e

            request_items = response.get('UnprocessedItems') or {}
            if not request_items:
                return
            log.warning(
                "DynamoDB batch delete left unprocessed items",
                attempt=attempt + 1,
                count=sum(len(requests) for requests in request_items.values()),
            )

        raise StorageError(
            f"Failed to delete session keys: items still unprocessed after "
            f"{BATCH_WRITE_MAX_ATTEMPTS} attempts",
            operation,
        )
