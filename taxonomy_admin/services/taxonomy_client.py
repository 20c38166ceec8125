"""Taxonomy Client - HTTP gateway to the taxonomy admin API.

Used by the editor when it runs outside the service process. Sends the
caller's identity as ``X-User-Id`` / ``X-User-Role`` headers.
"""

from collections.abc import Sequence
from typing import Any

import httpx

from taxonomy_admin.config import settings
from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.core.errors import AuthorizationError, NotFoundError, TaxonomyError
from taxonomy_admin.core.principal import Principal
from taxonomy_admin.editor.gateway import Resource, TreeResource
from taxonomy_admin.infra.logging import get_logger
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult

logger = get_logger(__name__)

_TREE_PATHS: dict[TreeResource, str] = {
    TreeResource.CATEGORY: "/taxonomy/categories",
    TreeResource.SUBCATEGORY: "/taxonomy/subcategories",
    TreeResource.PRODUCT_TYPE: "/taxonomy/product-types",
    TreeResource.COLLECTION: "/taxonomy/collections",
}


def resource_path(resource: Resource) -> str:
    """Collection URL of a resource."""
    if isinstance(resource, DimensionKind):
        return f"/dimensions/{resource.value}"
    return _TREE_PATHS[resource]


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:500] or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or body)
    return str(body)


class TaxonomyClient:
    """HTTP client for the taxonomy admin API."""

    def __init__(
        self,
        caller: Principal,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize taxonomy client.

        Args:
            caller: Principal sent with every request
            base_url: API base URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            transport: Optional httpx transport (ASGI transport in tests)
        """
        self.caller = caller
        self.base_url = base_url or settings.taxonomy_api_url
        self.timeout = timeout if timeout is not None else settings.taxonomy_api_timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json", "X-User-Id": self.caller.user_id}
            if self.caller.role:
                headers["X-User-Role"] = self.caller.role
            if self.caller.permissions:
                headers["X-User-Permissions"] = ",".join(sorted(self.caller.permissions))
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        """Send a request and return the decoded body.

        Raises:
            AuthorizationError: On 401/403
            NotFoundError: On 404
            TaxonomyError: On any other error status or transport failure
        """
        client = await self._get_client()
        try:
            response = await client.request(method, path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.error(
                "Taxonomy API returned error",
                method=method,
                path=path,
                status_code=e.response.status_code,
                error=message,
            )
            if e.response.status_code in (401, 403):
                raise AuthorizationError(message) from e
            if e.response.status_code == 404:
                raise NotFoundError("resource", path) from e
            raise TaxonomyError(message) from e
        except httpx.HTTPError as e:
            logger.error("Taxonomy API unreachable", method=method, path=path, error=str(e))
            raise TaxonomyError(str(e)) from e

        return response.json()

    async def _action(self, method: str, path: str, json: Any = None) -> ActionResult:
        return ActionResult.model_validate(await self._request(method, path, json))

    # =========================================================================
    # Tree
    # =========================================================================

    async def get_hierarchy(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/taxonomy")

    async def reorder_categories(self, ordered_ids: Sequence[str]) -> ActionResult:
        return await self._action(
            "POST", "/taxonomy/categories/reorder", {"ordered_ids": list(ordered_ids)}
        )

    async def reorder_subcategories(
        self, category_id: str, ordered_ids: Sequence[str]
    ) -> ActionResult:
        return await self._action(
            "POST",
            f"/taxonomy/categories/{category_id}/subcategories/reorder",
            {"ordered_ids": list(ordered_ids)},
        )

    async def reorder_product_types(
        self, subcategory_id: str, ordered_ids: Sequence[str]
    ) -> ActionResult:
        return await self._action(
            "POST",
            f"/taxonomy/subcategories/{subcategory_id}/product-types/reorder",
            {"ordered_ids": list(ordered_ids)},
        )

    async def move_subcategory(
        self, subcategory_id: str, to_category_id: str, new_index: int
    ) -> ActionResult:
        return await self._action(
            "POST",
            f"/taxonomy/subcategories/{subcategory_id}/move",
            {"to_category_id": to_category_id, "new_index": new_index},
        )

    async def move_product_type(
        self, product_type_id: str, to_subcategory_id: str, new_index: int
    ) -> ActionResult:
        return await self._action(
            "POST",
            f"/taxonomy/product-types/{product_type_id}/move",
            {"to_subcategory_id": to_subcategory_id, "new_index": new_index},
        )

    # =========================================================================
    # Usage and delete
    # =========================================================================

    async def check_usage(self, resource: Resource, item_id: str) -> UsageResult:
        body = await self._request("GET", f"{resource_path(resource)}/{item_id}/usage")
        return UsageResult.model_validate(body)

    async def delete_item(self, resource: Resource, item_id: str) -> DeleteResult:
        body = await self._request("DELETE", f"{resource_path(resource)}/{item_id}")
        return DeleteResult.model_validate(body)
