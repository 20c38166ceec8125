"""Tests for the dimension endpoints."""

import pytest
from httpx import AsyncClient


class TestDimensionEndpoints:
    @pytest.mark.asyncio
    async def test_create_list_and_reorder(self, client: AsyncClient, admin_headers):
        ids = []
        for code in ("knit", "woven"):
            response = await client.post(
                "/dimensions/constructions",
                json={"code": code, "label": code.title()},
                headers=admin_headers,
            )
            ids.append(response.json()["data"]["id"])

        reorder = await client.post(
            "/dimensions/constructions/reorder",
            json={"ordered_ids": list(reversed(ids))},
            headers=admin_headers,
        )
        assert reorder.json()["success"] is True

        listed = await client.get("/dimensions/constructions", headers=admin_headers)
        assert [v["code"] for v in listed.json()] == ["woven", "knit"]

    @pytest.mark.asyncio
    async def test_unknown_kind_is_422(self, client: AsyncClient, admin_headers):
        response = await client.get("/dimensions/colors", headers=admin_headers)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_usage_delete(self, client: AsyncClient, admin_headers):
        created = await client.post(
            "/dimensions/use_cases", json={"code": "Travel", "label": "Travel"}, headers=admin_headers
        )
        value_id = created.json()["data"]["id"]

        updated = await client.patch(
            f"/dimensions/use_cases/{value_id}",
            json={"label": "Travel & Leisure"},
            headers=admin_headers,
        )
        assert updated.json()["success"] is True

        usage = await client.get(f"/dimensions/use_cases/{value_id}/usage", headers=admin_headers)
        assert usage.json()["in_use"] is False

        deleted = await client.delete(f"/dimensions/use_cases/{value_id}", headers=admin_headers)
        assert deleted.json()["action"] == "deleted"

    @pytest.mark.asyncio
    async def test_duplicate_message(self, client: AsyncClient, admin_headers):
        payload = {"code": "alpha", "label": "Alpha"}
        await client.post("/dimensions/size_scales", json=payload, headers=admin_headers)

        response = await client.post("/dimensions/size_scales", json=payload, headers=admin_headers)

        assert response.json()["error"] == "A size scale value with that code already exists."
