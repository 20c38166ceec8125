"""Tests for the delete flow state machine."""

from unittest.mock import AsyncMock

import pytest

from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.editor.delete_flow import DeleteFlow, DeleteFlowError, DeleteState
from taxonomy_admin.editor.gateway import TreeResource
from taxonomy_admin.schemas.common import DeleteResult, UsageResult


@pytest.fixture
def gateway() -> AsyncMock:
    return AsyncMock()


class TestDeleteFlow:
    @pytest.mark.asyncio
    async def test_unused_item_goes_to_hard_delete(self, gateway: AsyncMock) -> None:
        gateway.check_usage.return_value = UsageResult(in_use=False)
        gateway.delete_item.return_value = DeleteResult(success=True, action="deleted")
        flow = DeleteFlow(gateway, TreeResource.PRODUCT_TYPE, "pt-1")

        assert await flow.check_usage() is DeleteState.CONFIRM_HARD_DELETE
        assert "permanently deleted" in flow.prompt

        assert await flow.confirm() is DeleteState.DELETED
        gateway.delete_item.assert_awaited_once_with(TreeResource.PRODUCT_TYPE, "pt-1")

    @pytest.mark.asyncio
    async def test_used_item_goes_to_soft_archive(self, gateway: AsyncMock) -> None:
        gateway.check_usage.return_value = UsageResult(
            in_use=True, usage_count=3, usage_description="3 SKU concept(s)"
        )
        gateway.delete_item.return_value = DeleteResult(success=True, action="archived")
        flow = DeleteFlow(gateway, DimensionKind.CONSTRUCTIONS, "v-1")

        assert await flow.check_usage() is DeleteState.CONFIRM_SOFT_ARCHIVE
        assert "3 SKU concept(s)" in flow.prompt

        assert await flow.confirm() is DeleteState.ARCHIVED

    @pytest.mark.asyncio
    async def test_usage_failure_is_error(self, gateway: AsyncMock) -> None:
        gateway.check_usage.side_effect = RuntimeError("boom")
        flow = DeleteFlow(gateway, TreeResource.CATEGORY, "c-1")

        assert await flow.check_usage() is DeleteState.ERROR
        assert flow.prompt == "Failed to check usage."

    @pytest.mark.asyncio
    async def test_failed_delete_is_error(self, gateway: AsyncMock) -> None:
        gateway.check_usage.return_value = UsageResult(in_use=False)
        gateway.delete_item.return_value = DeleteResult(success=False, error="locked")
        flow = DeleteFlow(gateway, TreeResource.COLLECTION, "col-1")

        await flow.check_usage()

        assert await flow.confirm() is DeleteState.ERROR
        assert flow.error == "locked"

    @pytest.mark.asyncio
    async def test_confirm_requires_usage_check(self, gateway: AsyncMock) -> None:
        flow = DeleteFlow(gateway, TreeResource.CATEGORY, "c-1")

        with pytest.raises(DeleteFlowError):
            await flow.confirm()
        gateway.delete_item.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retry_after_error(self, gateway: AsyncMock) -> None:
        gateway.check_usage.side_effect = [RuntimeError("boom"), UsageResult(in_use=False)]
        flow = DeleteFlow(gateway, TreeResource.SUBCATEGORY, "s-1")

        await flow.check_usage()
        assert await flow.check_usage() is DeleteState.CONFIRM_HARD_DELETE
        assert flow.error is None

    @pytest.mark.asyncio
    async def test_cancel_resets(self, gateway: AsyncMock) -> None:
        gateway.check_usage.return_value = UsageResult(in_use=False)
        flow = DeleteFlow(gateway, TreeResource.SUBCATEGORY, "s-1")
        await flow.check_usage()

        flow.cancel()

        assert flow.state is DeleteState.IDLE
        assert flow.usage is None
