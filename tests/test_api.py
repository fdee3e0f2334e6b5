"""
HTTP tests for the public site and the admin back office.
Requests go through the full app with the test database session injected.
"""

import io
import uuid
import zipfile

import pytest
from PIL import Image

import brokerage.main
from brokerage.config import settings
from brokerage.models.inquiry import InquiryStatus
from brokerage.models.property import PropertyStatus, PropertyType
from tests.conftest import (
    ADMIN_PASSWORD,
    InquiryFactory,
    PropertyFactory,
    TeamFactory,
    make_image_bytes,
)


def assert_error(response, status_code: int, code: str) -> dict:
    """Check the error envelope and return its body."""
    assert response.status_code == status_code, response.text
    error = response.json()["error"]
    assert error["code"] == code
    assert error["message"]
    assert error["timestamp"].endswith("Z")
    return error


class TestHealth:
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["api_prefix"] == "/api"

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    async def test_health_reports_database_outage(self, client, monkeypatch):
        async def unreachable():
            return False

        monkeypatch.setattr(brokerage.main, "test_database_connection", unreachable)
        response = await client.get("/health")
        assert_error(response, 503, "SERVICE_UNAVAILABLE")

    async def test_request_id_is_echoed(self, client):
        response = await client.get("/", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"
        assert "X-Processing-Time" in response.headers

    async def test_unknown_route_uses_error_envelope(self, client):
        response = await client.get("/api/nowhere")
        assert_error(response, 404, "HTTP_404")


class TestPublicCatalog:
    """Anonymous property browsing."""

    @pytest.fixture
    async def catalog(self, property_repository):
        villa = await PropertyFactory.create_property(
            property_repository, title="F-7 Villa", property_type=PropertyType.VILLA,
            price=85_000_000, bedrooms=5, featured=True
        )
        flat = await PropertyFactory.create_property(
            property_repository, title="Gulberg Apartment", property_type=PropertyType.APARTMENT,
            status=PropertyStatus.FOR_RENT, price=250_000, city="Lahore", bedrooms=2
        )
        return villa, flat

    async def test_list_all(self, client, catalog):
        response = await client.get("/api/properties")
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["page"] == 1
        assert body["page_size"] == 24

    async def test_filter_by_type_alias(self, client, catalog):
        response = await client.get("/api/properties", params={"type": "Villa"})
        assert [p["title"] for p in response.json()["properties"]] == ["F-7 Villa"]

    async def test_filter_by_status_and_city(self, client, catalog):
        response = await client.get("/api/properties", params={"status": "For Rent", "city": "lahore"})
        assert [p["title"] for p in response.json()["properties"]] == ["Gulberg Apartment"]

    async def test_camel_case_price_aliases(self, client, catalog):
        response = await client.get("/api/properties", params={"minPrice": 1_000_000, "maxPrice": 0})
        assert [p["title"] for p in response.json()["properties"]] == ["F-7 Villa"]

    async def test_featured_filter(self, client, catalog):
        response = await client.get("/api/properties", params={"featured": "true"})
        assert response.json()["total"] == 1

    async def test_inverted_price_range_rejected(self, client, catalog):
        response = await client.get("/api/properties", params={"min_price": 500, "max_price": 100})
        assert_error(response, 422, "VALIDATION_ERROR")

    async def test_unknown_sort_field_rejected(self, client):
        response = await client.get("/api/properties", params={"sort_by": "password"})
        assert_error(response, 422, "VALIDATION_ERROR")

    async def test_page_size_follows_settings(self, client):
        response = await client.get("/api/properties")
        assert response.json()["page_size"] == settings.default_page_size

        too_large = await client.get("/api/properties", params={"page_size": settings.max_page_size + 1})
        assert_error(too_large, 422, "VALIDATION_ERROR")

    async def test_get_property(self, client, catalog):
        villa, _ = catalog
        response = await client.get(f"/api/properties/{villa.id}")
        assert response.status_code == 200
        assert response.json()["property_type"] == "Villa"

    async def test_missing_property_is_404(self, client):
        error = assert_error(await client.get(f"/api/properties/{uuid.uuid4()}"), 404, "NOT_FOUND")
        assert error["request_id"]

    async def test_malformed_id_is_422(self, client):
        assert_error(await client.get("/api/properties/not-a-uuid"), 422, "VALIDATION_ERROR")


class TestContactForm:
    async def test_submit_inquiry(self, client, test_property):
        response = await client.post("/api/inquiries", json={
            "name": "Ayesha Khan",
            "email": "Ayesha@Example.com",
            "phone": "+92 300 1234567",
            "service": "sales",
            "message": "Is the F-11 house still available?",
            "property_id": str(test_property.id),
            "status": "closed",
        })
        assert response.status_code == 201, response.text
        body = response.json()
        assert body["status"] == "new"
        assert body["email"] == "ayesha@example.com"

    async def test_validation_details(self, client):
        response = await client.post("/api/inquiries", json={
            "name": "A",
            "email": "not-an-email",
            "message": "short",
        })
        error = assert_error(response, 422, "VALIDATION_ERROR")
        fields = {detail["field"] for detail in error["details"]}
        assert {"body -> name", "body -> email", "body -> message"} <= fields

    async def test_unknown_property(self, client):
        response = await client.post("/api/inquiries", json={
            "name": "Ayesha Khan",
            "email": "ayesha@example.com",
            "message": "Is this listing still available?",
            "property_id": str(uuid.uuid4()),
        })
        assert_error(response, 404, "NOT_FOUND")


class TestPublicTeam:
    async def test_hidden_contact_fields_are_nulled(self, client, team_repository):
        await TeamFactory.create_member(team_repository, name="Private Agent", show_email=False, show_phone=False)
        await TeamFactory.create_member(team_repository, name="Former Agent", is_active=False)

        response = await client.get("/api/team")
        assert response.status_code == 200
        members = response.json()
        assert [m["name"] for m in members] == ["Private Agent"]
        assert members[0]["email"] is None
        assert members[0]["phone"] is None
        assert members[0]["whatsapp"] == "923001111111"


class TestAdminSession:
    """Login, logout and route protection."""

    @pytest.mark.parametrize("path", [
        "/api/admin/properties",
        "/api/admin/inquiries",
        "/api/admin/team",
        "/api/admin/metrics",
        "/api/admin/me",
    ])
    async def test_admin_routes_require_session(self, client, path):
        assert_error(await client.get(path), 401, "UNAUTHORIZED")

    async def test_login_rejects_bad_password(self, client, test_admin):
        response = await client.post(
            "/api/admin/login", json={"email": test_admin.email, "password": "wrong-password"}
        )
        assert_error(response, 401, "UNAUTHORIZED")

    async def test_login_me_logout(self, client, test_admin):
        response = await client.post(
            "/api/admin/login", json={"email": "ADMIN@example.com", "password": ADMIN_PASSWORD}
        )
        assert response.status_code == 200
        assert "hashed_password" not in response.json()

        me = await client.get("/api/admin/me")
        assert me.status_code == 200
        assert me.json()["email"] == "admin@example.com"

        assert (await client.post("/api/admin/logout")).json() == {"success": True}
        assert_error(await client.get("/api/admin/me"), 401, "UNAUTHORIZED")


class TestAdminProperties:
    async def test_crud_flow(self, admin_client):
        created = await admin_client.post("/api/admin/properties", json=PropertyFactory.create_payload())
        assert created.status_code == 201, created.text
        property_id = created.json()["id"]

        updated = await admin_client.put(f"/api/admin/properties/{property_id}", json={"price": 40_000_000})
        assert updated.status_code == 200
        assert updated.json()["price"] == 40_000_000
        assert updated.json()["title"] == "Modern Family House"

        deleted = await admin_client.delete(f"/api/admin/properties/{property_id}")
        assert deleted.status_code == 204
        assert_error(await admin_client.get(f"/api/properties/{property_id}"), 404, "NOT_FOUND")

    async def test_create_rejects_negative_price(self, admin_client):
        response = await admin_client.post(
            "/api/admin/properties", json=PropertyFactory.create_payload(price=-1)
        )
        assert_error(response, 422, "VALIDATION_ERROR")

    async def test_empty_update_rejected(self, admin_client, test_property):
        response = await admin_client.put(f"/api/admin/properties/{test_property.id}", json={})
        assert_error(response, 422, "VALIDATION_ERROR")


class TestAdminMedia:
    async def test_video_link_and_public_gallery(self, admin_client, test_property):
        response = await admin_client.post(
            f"/api/admin/properties/{test_property.id}/media",
            json={"media_type": "video", "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"}
        )
        assert response.status_code == 201, response.text
        assert response.json()["embed_url"] == "https://www.youtube.com/embed/dQw4w9WgXcQ"

        gallery = await admin_client.get(f"/api/properties/{test_property.id}/media")
        assert [m["platform"] for m in gallery.json()] == ["youtube"]

    async def test_upload_feature_reorder_delete(self, admin_client, test_property):
        uploaded = []
        for name in ("front.png", "lawn.png"):
            response = await admin_client.post(
                f"/api/admin/properties/{test_property.id}/media/upload",
                files={"file": (name, make_image_bytes(size=(400, 300)), "image/png")},
                data={"media_type": "image", "caption": name},
            )
            assert response.status_code == 201, response.text
            uploaded.append(response.json())

        first, second = uploaded
        assert first["thumbnail_url"].endswith(".jpg")

        featured = await admin_client.post(f"/api/admin/media/{second['id']}/feature")
        assert featured.json()["is_featured"] is True

        order = await admin_client.put(
            f"/api/admin/properties/{test_property.id}/media/order",
            json={"media_ids": [second["id"], first["id"]]}
        )
        assert [m["id"] for m in order.json()] == [second["id"], first["id"]]

        assert (await admin_client.delete(f"/api/admin/media/{second['id']}")).status_code == 204
        gallery = (await admin_client.get(f"/api/properties/{test_property.id}/media")).json()
        assert [(m["id"], m["sort_order"]) for m in gallery] == [(first["id"], 0)]

    async def test_upload_rejects_non_image(self, admin_client, test_property):
        response = await admin_client.post(
            f"/api/admin/properties/{test_property.id}/media/upload",
            files={"file": ("notes.png", b"definitely not a png", "image/png")},
        )
        assert_error(response, 400, "BAD_REQUEST")

    async def test_partial_reorder_rejected(self, admin_client, test_property):
        first = await admin_client.post(
            f"/api/admin/properties/{test_property.id}/media", json={"url": "https://img.example.com/1.jpg"}
        )
        await admin_client.post(
            f"/api/admin/properties/{test_property.id}/media", json={"url": "https://img.example.com/2.jpg"}
        )
        response = await admin_client.put(
            f"/api/admin/properties/{test_property.id}/media/order",
            json={"media_ids": [first.json()["id"]]}
        )
        assert_error(response, 400, "BAD_REQUEST")


class TestAdminInquiries:
    async def test_inbox_and_status_changes(self, admin_client, inquiry_repository):
        inquiry = await InquiryFactory.create_inquiry(inquiry_repository)
        await InquiryFactory.create_inquiry(inquiry_repository, status=InquiryStatus.CLOSED)

        inbox = await admin_client.get("/api/admin/inquiries", params={"status": "new"})
        assert inbox.json()["total"] == 1

        moved = await admin_client.patch(
            f"/api/admin/inquiries/{inquiry.id}", json={"status": "responded", "notes": "Sent brochure"}
        )
        assert moved.status_code == 200
        assert moved.json()["status"] == "responded"

        rejected = await admin_client.patch(f"/api/admin/inquiries/{inquiry.id}", json={"status": "new"})
        assert_error(rejected, 400, "BAD_REQUEST")

        assert (await admin_client.delete(f"/api/admin/inquiries/{inquiry.id}")).status_code == 204
        assert_error(await admin_client.get(f"/api/admin/inquiries/{inquiry.id}"), 404, "NOT_FOUND")

    async def test_inbox_returns_every_inquiry(self, admin_client, inquiry_repository):
        for index in range(105):
            await InquiryFactory.create_inquiry(inquiry_repository, email=f"lead{index}@example.com")

        response = await admin_client.get("/api/admin/inquiries")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 105
        assert len(body["inquiries"]) == 105


class TestAdminTeam:
    async def test_create_move_and_order(self, admin_client):
        ids = []
        for name in ("First Agent", "Second Agent", "Third Agent"):
            response = await admin_client.post(
                "/api/admin/team", json=TeamFactory.create_member_data(name=name)
            )
            assert response.status_code == 201, response.text
            ids.append(response.json()["id"])
        assert [m["sort_order"] for m in (await admin_client.get("/api/admin/team")).json()] == [0, 1, 2]

        moved = await admin_client.post(f"/api/admin/team/{ids[0]}/move", json={"direction": "down"})
        assert [m["id"] for m in moved.json()] == [ids[1], ids[0], ids[2]]

        ordered = await admin_client.put("/api/admin/team/order", json={"member_ids": list(reversed(ids))})
        assert [m["id"] for m in ordered.json()] == list(reversed(ids))

    async def test_invalid_direction(self, admin_client, team_repository):
        member = await TeamFactory.create_member(team_repository)
        response = await admin_client.post(f"/api/admin/team/{member.id}/move", json={"direction": "left"})
        assert_error(response, 422, "VALIDATION_ERROR")

    async def test_deactivate_hides_from_public_page(self, admin_client, team_repository):
        member = await TeamFactory.create_member(team_repository)
        response = await admin_client.patch(f"/api/admin/team/{member.id}", json={"is_active": False})
        assert response.status_code == 200
        assert (await admin_client.get("/api/team")).json() == []


class TestDashboard:
    async def test_metrics(self, admin_client, test_property, inquiry_repository):
        await InquiryFactory.create_inquiry(inquiry_repository)

        response = await admin_client.get("/api/admin/metrics")
        assert response.status_code == 200
        body = response.json()
        assert body["total_properties"] == 1
        assert body["new_inquiries"] == 1
        assert len(body["recent_inquiries"]) == 1


class TestUploads:
    async def test_upload_is_served(self, admin_client):
        response = await admin_client.post(
            "/api/admin/uploads",
            files={"file": ("agent.jpg", make_image_bytes("JPEG", (300, 300)), "image/jpeg")},
            data={"folder": "team"},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        assert body["url"].startswith("/uploads/team/")
        assert body["content_type"] == "image/jpeg"

        served = await admin_client.get(body["url"])
        assert served.status_code == 200
        assert served.content[:2] == b"\xff\xd8"

    async def test_folder_traversal_rejected(self, admin_client):
        response = await admin_client.post(
            "/api/admin/uploads",
            files={"file": ("agent.png", make_image_bytes(), "image/png")},
            data={"folder": "../etc"},
        )
        assert_error(response, 400, "BAD_REQUEST")

    async def test_small_image_rejected(self, admin_client):
        response = await admin_client.post(
            "/api/admin/uploads",
            files={"file": ("tiny.png", make_image_bytes(size=(20, 20)), "image/png")},
        )
        assert_error(response, 400, "BAD_REQUEST")


class TestMarketingEndpoint:
    async def test_requires_session(self, client):
        assert_error(await client.post("/api/admin/marketing/social"), 401, "UNAUTHORIZED")

    async def test_social_png_download(self, admin_client):
        response = await admin_client.post(
            "/api/admin/marketing/social",
            params={"format": "png", "scale": 1},
            json={"template": "announcement", "title": "NEW LAUNCH"},
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.headers["content-disposition"] == 'attachment; filename="qanzak-social-design.png"'
        assert Image.open(io.BytesIO(response.content)).size == (540, 540)

    async def test_flyer_zip_without_body(self, admin_client):
        response = await admin_client.post("/api/admin/marketing/flyer", params={"format": "zip", "scale": 1})
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/zip"
        with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
            assert "qanzak-flyer-design.pdf" in archive.namelist()

    async def test_business_card_for_unknown_member(self, admin_client):
        response = await admin_client.post(
            "/api/admin/marketing/card", params={"scale": 1}, json={"member_id": str(uuid.uuid4())}
        )
        assert_error(response, 404, "NOT_FOUND")

    async def test_property_brochure_needs_property_id(self, admin_client):
        response = await admin_client.post(
            "/api/admin/marketing/brochure", params={"scale": 1}, json={"type": "property"}
        )
        assert_error(response, 422, "VALIDATION_ERROR")

    @pytest.mark.parametrize("params", [{"scale": 9}, {"format": "gif"}])
    async def test_bad_query_parameters(self, admin_client, params):
        response = await admin_client.post("/api/admin/marketing/social", params=params)
        assert_error(response, 422, "VALIDATION_ERROR")

    async def test_unknown_material(self, admin_client):
        response = await admin_client.post("/api/admin/marketing/poster")
        assert_error(response, 422, "VALIDATION_ERROR")
