"""Tests for the taxonomy HTTP endpoints."""

import uuid

import pytest
from httpx import AsyncClient

from taxonomy_admin.models import ProductCategory, ProductSubcategory


class TestAuth:
    @pytest.mark.asyncio
    async def test_missing_identity_is_401(self, client: AsyncClient, tree):
        response = await client.get("/taxonomy")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_non_admin_role_is_403(self, client: AsyncClient, tree):
        response = await client.post(
            "/taxonomy/categories/reorder",
            json={"ordered_ids": [str(tree.outerwear), str(tree.bottoms), str(tree.tops)]},
            headers={"X-User-Id": "u2", "X-User-Role": "member"},
        )

        assert response.status_code == 403
        body = response.json()
        assert body["success"] is False
        assert body["error_type"] == "AuthorizationError"

    @pytest.mark.asyncio
    async def test_permission_header_grants_admin(self, client: AsyncClient, tree):
        response = await client.get(
            "/taxonomy",
            headers={
                "X-User-Id": "u3",
                "X-User-Role": "member",
                "X-User-Permissions": "seasons:view, taxonomy:manage",
            },
        )

        assert response.status_code == 200


class TestHierarchyEndpoint:
    @pytest.mark.asyncio
    async def test_returns_ordered_tree(self, client: AsyncClient, admin_headers, tree):
        response = await client.get("/taxonomy", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert [c["code"] for c in data] == ["tops", "bottoms", "outerwear"]
        assert [s["code"] for s in data[0]["subcategories"]] == ["tees", "knits", "sweats"]

    @pytest.mark.asyncio
    async def test_etag_changes_after_mutation(self, client: AsyncClient, admin_headers, tree):
        first = await client.get("/taxonomy", headers=admin_headers)
        etag = first.headers["ETag"]

        not_modified = await client.get(
            "/taxonomy", headers={**admin_headers, "If-None-Match": etag}
        )
        assert not_modified.status_code == 304

        await client.patch(
            f"/taxonomy/categories/{tree.tops}", json={"name": "Tops!"}, headers=admin_headers
        )
        second = await client.get(
            "/taxonomy", headers={**admin_headers, "If-None-Match": etag}
        )
        assert second.status_code == 200
        assert second.headers["ETag"] != etag

    @pytest.mark.asyncio
    async def test_etag_tracks_database_not_process(
        self, client: AsyncClient, admin_headers, tree, session_factory
    ):
        """A row written by another worker invalidates the cached tree."""
        first = await client.get("/taxonomy", headers=admin_headers)
        etag = first.headers["ETag"]

        async with session_factory() as session:
            session.add(ProductCategory(code="swim", name="Swim", sort_order=3))
            await session.commit()

        response = await client.get(
            "/taxonomy", headers={**admin_headers, "If-None-Match": etag}
        )
        assert response.status_code == 200
        assert response.headers["ETag"] != etag
        assert [c["code"] for c in response.json()][-1] == "swim"


class TestMutations:
    @pytest.mark.asyncio
    async def test_create_and_duplicate(self, client: AsyncClient, admin_headers, tree):
        payload = {"code": "Swim Wear", "name": "Swimwear"}

        created = await client.post("/taxonomy/categories", json=payload, headers=admin_headers)
        duplicate = await client.post("/taxonomy/categories", json=payload, headers=admin_headers)

        assert created.json()["success"] is True
        uuid.UUID(created.json()["data"]["id"])
        assert duplicate.status_code == 200
        assert duplicate.json() == {
            "success": False,
            "data": None,
            "error": "A category with that code already exists.",
        }

    @pytest.mark.asyncio
    async def test_blank_code_is_rejected(self, client: AsyncClient, admin_headers, tree):
        response = await client.post(
            "/taxonomy/categories", json={"code": "  ", "name": "X"}, headers=admin_headers
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_blank_or_null_rename_is_rejected(
        self, client: AsyncClient, admin_headers, tree
    ):
        for payload in ({"name": "   "}, {"name": None}, {"status": None}):
            response = await client.patch(
                f"/taxonomy/categories/{tree.tops}", json=payload, headers=admin_headers
            )
            assert response.status_code == 422, payload

    @pytest.mark.asyncio
    async def test_reorder_categories(
        self, client: AsyncClient, admin_headers, tree, sibling_order
    ):
        response = await client.post(
            "/taxonomy/categories/reorder",
            json={"ordered_ids": [str(tree.bottoms), str(tree.outerwear), str(tree.tops)]},
            headers=admin_headers,
        )

        assert response.json()["success"] is True
        assert dict(await sibling_order(ProductCategory)) == {
            tree.bottoms: 0,
            tree.outerwear: 1,
            tree.tops: 2,
        }

    @pytest.mark.asyncio
    async def test_move_subcategory(self, client: AsyncClient, admin_headers, tree, sibling_order):
        response = await client.post(
            f"/taxonomy/subcategories/{tree.tees}/move",
            json={"to_category_id": str(tree.bottoms), "new_index": 1},
            headers=admin_headers,
        )

        assert response.json()["success"] is True
        assert await sibling_order(
            ProductSubcategory, ProductSubcategory.category_id, tree.bottoms
        ) == [(tree.pants, 0), (tree.tees, 1)]
        assert await sibling_order(
            ProductSubcategory, ProductSubcategory.category_id, tree.tops
        ) == [(tree.knits, 0), (tree.sweats, 1)]

    @pytest.mark.asyncio
    async def test_move_to_missing_category_is_404(self, client: AsyncClient, admin_headers, tree):
        response = await client.post(
            f"/taxonomy/subcategories/{tree.tees}/move",
            json={"to_category_id": str(uuid.uuid4()), "new_index": 0},
            headers=admin_headers,
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_usage_then_delete(self, client: AsyncClient, admin_headers, tree):
        usage = await client.get(
            f"/taxonomy/product-types/{tree.hoodie}/usage", headers=admin_headers
        )
        assert usage.json() == {"in_use": False, "usage_count": 0, "usage_description": ""}

        deleted = await client.delete(
            f"/taxonomy/product-types/{tree.hoodie}", headers=admin_headers
        )
        assert deleted.json() == {"success": True, "action": "deleted", "error": None}

        again = await client.delete(f"/taxonomy/product-types/{tree.hoodie}", headers=admin_headers)
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_collections_roundtrip(self, client: AsyncClient, admin_headers):
        await client.post(
            "/taxonomy/collections",
            json={"code": "essentials", "name": "Essentials", "description": "Core"},
            headers=admin_headers,
        )

        response = await client.get("/taxonomy/collections", headers=admin_headers)

        (collection,) = response.json()
        assert collection["code"] == "essentials"
        assert collection["description"] == "Core"
        assert collection["sort_order"] == 0
