"""
Photo API: Photo Route Tests
============================

What:  Tests for the photo controller: status codes, pagination guard,
       empty-update shortcut and the field-based error mapping.
How:   Most tests mock PhotoService (mock_photo_service); TestPhotoLifecycle
       uses the real data layer on SQLite (live_client). Requests go through the
       real app via HTTPX ASGITransport.

What we test:
    ✅ Success status codes for every operation
    ✅ limit > 100 → 400 without touching the data layer
    ✅ Empty PATCH body → 204 without touching the data layer
    ✅ FieldError on "id" → 404, on any other field → 400
"""

from uuid import uuid4

import pytest

from photoapi.exceptions import FieldError, NotFoundError, ValidationError
from photoapi.models.photo import URL_MAX_LENGTH
from photoapi.routes.photos import error_switch


class TestErrorSwitch:
    """Tests for the FieldError → API error mapping."""

    def test_identifier_field_is_not_found(self):
        err = error_switch(FieldError("id", message="No photo with ID 'x'"))
        assert isinstance(err, NotFoundError)
        assert err.message == "Photo ID not found"
        assert err.context["reason"] == "No photo with ID 'x'"

    @pytest.mark.parametrize("field", ["price", "url", "date", "theme", "body", "colour"])
    def test_other_fields_are_bad_input(self, field):
        err = error_switch(FieldError(field, message="Invalid value"))
        assert isinstance(err, ValidationError)
        assert err.message == "Check your input"
        assert err.field == field
        assert err.context["field"] == field


class TestCreatePhoto:

    @pytest.mark.asyncio
    async def test_create_returns_201_with_result(
        self, test_client, mock_photo_service, sample_photo_data, sample_photo_response
    ):
        mock_photo_service.create.return_value = sample_photo_response

        response = await test_client.post("/api/photos", json=sample_photo_data)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == str(sample_photo_response.id)
        assert body["theme"] == "sunset"
        assert body["price"] == 49.9
        mock_photo_service.create.assert_awaited_once()
        assert mock_photo_service.create.await_args.args[1] == sample_photo_data

    @pytest.mark.asyncio
    async def test_create_invalid_field_returns_400(
        self, test_client, mock_photo_service, sample_photo_data
    ):
        mock_photo_service.create.side_effect = FieldError("price", message="Input should be greater than or equal to 0")

        response = await test_client.post("/api/photos", json={**sample_photo_data, "price": -1})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Check your input"
        assert body["details"]["field"] == "price"

    @pytest.mark.asyncio
    async def test_create_malformed_json_returns_400(self, test_client, mock_photo_service):
        response = await test_client.post(
            "/api/photos",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        mock_photo_service.create.assert_not_awaited()


class TestListPhotos:

    @pytest.mark.asyncio
    async def test_list_defaults_to_first_page_of_100(
        self, test_client, mock_photo_service, mock_db_session, sample_photo_response
    ):
        mock_photo_service.get_filtered.return_value = [sample_photo_response]
        mock_photo_service.count.return_value = 1

        response = await test_client.get("/api/photos")

        assert response.status_code == 200
        assert len(response.json()) == 1
        assert response.headers["X-Total-Count"] == "1"
        mock_photo_service.get_filtered.assert_awaited_once_with(mock_db_session, 1, 100)

    @pytest.mark.asyncio
    async def test_list_passes_page_and_limit(
        self, test_client, mock_photo_service, mock_db_session
    ):
        mock_photo_service.get_filtered.return_value = []
        mock_photo_service.count.return_value = 0

        response = await test_client.get("/api/photos", params={"page": 3, "limit": 50})

        assert response.status_code == 200
        assert response.json() == []
        mock_photo_service.get_filtered.assert_awaited_once_with(mock_db_session, 3, 50)

    @pytest.mark.asyncio
    async def test_limit_100_is_allowed(self, test_client, mock_photo_service):
        mock_photo_service.get_filtered.return_value = []
        mock_photo_service.count.return_value = 0

        response = await test_client.get("/api/photos", params={"limit": 100})

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_limit_over_100_returns_400_without_data_access(
        self, test_client, mock_photo_service
    ):
        response = await test_client.get("/api/photos", params={"limit": 101})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Maximum limit is 100"
        assert body["details"]["field"] == "limit"
        mock_photo_service.get_filtered.assert_not_awaited()
        mock_photo_service.count.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "two"}])
    async def test_bad_pagination_params_return_400(
        self, test_client, mock_photo_service, params
    ):
        response = await test_client.get("/api/photos", params=params)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        mock_photo_service.get_filtered.assert_not_awaited()


class TestGetPhoto:

    @pytest.mark.asyncio
    async def test_get_returns_200(self, test_client, mock_photo_service, sample_photo_response):
        mock_photo_service.get_one.return_value = sample_photo_response

        response = await test_client.get(f"/api/photos/{sample_photo_response.id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(sample_photo_response.id)

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client, mock_photo_service):
        mock_photo_service.get_one.side_effect = FieldError("id", message="'abc' is not a valid photo ID")

        response = await test_client.get("/api/photos/abc")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["message"] == "Photo ID not found"


class TestUpdatePhoto:

    @pytest.mark.asyncio
    async def test_empty_body_returns_204_without_data_access(self, test_client, mock_photo_service):
        response = await test_client.patch("/api/photos/some-id", json={})

        assert response.status_code == 204
        assert response.content == b""
        mock_photo_service.update_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_body_returns_204(self, test_client, mock_photo_service):
        response = await test_client.patch("/api/photos/some-id")

        assert response.status_code == 204
        mock_photo_service.update_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_returns_201_with_result(
        self, test_client, mock_photo_service, mock_db_session, sample_photo_response
    ):
        mock_photo_service.update_one.return_value = sample_photo_response
        photo_id = str(sample_photo_response.id)

        response = await test_client.patch(f"/api/photos/{photo_id}", json={"theme": "sunset"})

        assert response.status_code == 201
        assert response.json()["theme"] == "sunset"
        mock_photo_service.update_one.assert_awaited_once_with(
            mock_db_session, photo_id, {"theme": "sunset"}
        )

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_404(self, test_client, mock_photo_service):
        mock_photo_service.update_one.side_effect = FieldError("id")

        response = await test_client.patch("/api/photos/missing", json={"theme": "night"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_bad_field_returns_400(self, test_client, mock_photo_service):
        mock_photo_service.update_one.side_effect = FieldError("url", message="Input should be a valid URL")

        response = await test_client.patch("/api/photos/some-id", json={"url": "nope"})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "url"


class TestReplacePhoto:

    @pytest.mark.asyncio
    async def test_replace_returns_201(
        self, test_client, mock_photo_service, sample_photo_data, sample_photo_response
    ):
        mock_photo_service.replace_one.return_value = sample_photo_response

        response = await test_client.put(
            f"/api/photos/{sample_photo_response.id}", json=sample_photo_data
        )

        assert response.status_code == 201
        assert response.json()["url"] == sample_photo_data["url"]

    @pytest.mark.asyncio
    async def test_replace_missing_field_returns_400(self, test_client, mock_photo_service):
        mock_photo_service.replace_one.side_effect = FieldError("theme", message="Field required")

        response = await test_client.put("/api/photos/some-id", json={"price": 1})

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "theme", "reason": "Field required"}


class TestDeletePhoto:

    @pytest.mark.asyncio
    async def test_delete_returns_204(self, test_client, mock_photo_service, mock_db_session):
        response = await test_client.delete("/api/photos/some-id")

        assert response.status_code == 204
        assert response.content == b""
        mock_photo_service.delete_one.assert_awaited_once_with(mock_db_session, "some-id")

    @pytest.mark.asyncio
    async def test_delete_unknown_id_returns_404(self, test_client, mock_photo_service):
        mock_photo_service.delete_one.side_effect = FieldError("id")

        response = await test_client.delete("/api/photos/some-id")

        assert response.status_code == 404


class TestCreateFakePhoto:

    @pytest.mark.asyncio
    async def test_fake_creates_generated_photo(
        self, test_client, mock_photo_service, sample_photo_response
    ):
        mock_photo_service.create.return_value = sample_photo_response

        response = await test_client.post("/api/photos/fake")

        assert response.status_code == 201
        data = mock_photo_service.create.await_args.args[1]
        assert set(data) == {"price", "url", "date", "theme"}


class TestRequestID:

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client, mock_photo_service):
        mock_photo_service.get_one.side_effect = FieldError("id")

        response = await test_client.get("/api/photos/x", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.json()["request_id"] == "trace-123"


class TestPhotoLifecycle:
    """Requests through the real PhotoService and get_db_session on SQLite."""

    @pytest.mark.asyncio
    async def test_create_get_update_delete(self, live_client, sample_photo_data):
        created = await live_client.post("/api/photos", json=sample_photo_data)
        assert created.status_code == 201
        photo = created.json()
        photo_url = f"/api/photos/{photo['id']}"
        assert photo["price"] == 49.9
        assert photo["url"] == sample_photo_data["url"]

        fetched = await live_client.get(photo_url)
        assert fetched.status_code == 200
        assert fetched.json()["theme"] == "sunset"

        updated = await live_client.patch(photo_url, json={"theme": "dusk"})
        assert updated.status_code == 201
        assert updated.json()["theme"] == "dusk"

        rejected = await live_client.patch(photo_url, json={"price": -1})
        assert rejected.status_code == 400
        assert rejected.json()["details"]["field"] == "price"

        missing = await live_client.get(f"/api/photos/{uuid4()}")
        assert missing.status_code == 404

        listed = await live_client.get("/api/photos")
        assert listed.headers["X-Total-Count"] == "1"
        assert listed.json()[0]["theme"] == "dusk"
        assert listed.json()[0]["price"] == 49.9

        deleted = await live_client.delete(photo_url)
        assert deleted.status_code == 204
        assert (await live_client.delete(photo_url)).status_code == 404
        assert (await live_client.get(photo_url)).status_code == 404

    @pytest.mark.asyncio
    async def test_overlong_url_returns_400(self, live_client, sample_photo_data):
        url = "https://images.example.com/" + "a" * URL_MAX_LENGTH

        response = await live_client.post("/api/photos", json={**sample_photo_data, "url": url})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "url"
        assert (await live_client.get("/api/photos")).headers["X-Total-Count"] == "0"
