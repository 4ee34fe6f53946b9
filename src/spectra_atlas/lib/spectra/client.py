"""Client for the hosted data service's REST interface (PostgREST).

Only anonymous, key-authenticated reads are supported.
"""

from typing import Any

import httpx
from loguru import logger

DEFAULT_TIMEOUT = 30.0


class DataServiceError(Exception):
    """Raised when the data service experiences a transport or service error.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code from the service.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DataServiceClient:
    """Reads table rows from the data service."""

    def __init__(self, base_url: str, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    @property
    def headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    async def fetch_rows(self, table: str) -> list[dict[str, Any]]:
        """Fetch every row of a table.

        Args:
            table: Table name.

        Returns:
            List of row dicts as returned by the service.

        Raises:
            DataServiceError: On transport errors, HTTP errors, or a non-list body.
        """
        url = f"{self._base_url}/rest/v1/{table}"
        params = {"select": "*"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params, headers=self.headers)
                response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning(f"Data service timeout fetching {table}")
            raise DataServiceError("Data service request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Data service HTTP error {e.response.status_code} fetching {table}")
            raise DataServiceError(
                f"Data service returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Data service connection error fetching {table}")
            raise DataServiceError(f"Connection to data service failed: {e}") from e
        except ValueError as e:
            raise DataServiceError("Data service response is not valid JSON") from e

        if not isinstance(data, list):
            msg = f"Expected a list of rows, got {type(data).__name__}"
            raise DataServiceError(msg)

        logger.info(f"Fetched {len(data)} rows from {table}")
        return data
