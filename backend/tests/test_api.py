"""
Clinic Booking API — Endpoint Tests
=====================================

What:  HTTP surface: envelope shape, status codes, camelCase payloads,
       bearer-token protection and pagination headers.
How:   HTTPX AsyncClient over ASGITransport, sharing the test's SQLite session.
"""

import pytest

BOOKING = {
    "customerId": 1,
    "employeeId": 1,
    "serviceId": 1,
    "appointmentDateTime": "2025-01-01T10:00:00",
    "status": "Scheduled",
    "notes": "First visit",
}


class TestAppointmentEndpoints:

    @pytest.mark.asyncio
    async def test_book_then_repeat_same_slot(self, test_client, clinic):
        response = await test_client.post("/api/appointment", json=BOOKING)

        assert response.status_code == 201
        body = response.json()
        assert body["isSuccess"] is True
        assert body["statusCode"] == 201
        assert body["errorMessages"] == []
        result = body["result"]
        assert result["appointmentDateTime"] == "2025-01-01T10:00:00"
        assert result["customer"]["email"] == "ana.silva@example.com"
        assert result["employee"]["firstName"] == "Marta"
        assert result["service"]["price"] == 45.0

        repeat = await test_client.post("/api/appointment", json={**BOOKING, "notes": "dup"})

        assert repeat.status_code == 400
        assert repeat.json() == {
            "isSuccess": False,
            "message": "An appointment already exists for that time and date",
            "result": None,
            "statusCode": 400,
            "errorMessages": ["An appointment already exists for that time and date"],
        }

    @pytest.mark.asyncio
    async def test_empty_body_lists_every_missing_field(self, test_client):
        response = await test_client.post("/api/appointment", json={})

        assert response.status_code == 400
        assert response.json()["errorMessages"] == [
            "Customer Id is required",
            "Employee Id is required",
            "Service Id is required",
            "Appointment Date Time is required",
            "Status is required",
        ]

    @pytest.mark.asyncio
    async def test_malformed_body_is_a_400_envelope(self, test_client):
        response = await test_client.post(
            "/api/appointment", json={**BOOKING, "customerId": "not-a-number"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["isSuccess"] is False
        assert body["message"] == "Validation failed"
        assert any("customerId" in message for message in body["errorMessages"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/api/appointment"),
            ("GET", "/api/appointment/1"),
            ("GET", "/api/appointment/first"),
            ("PUT", "/api/appointment?id=1"),
            ("GET", "/api/auth/refresh"),
        ],
    )
    async def test_protected_routes_require_token(self, test_client, method, path):
        response = await test_client.request(method, path, json=BOOKING)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["isSuccess"] is False

    @pytest.mark.asyncio
    async def test_invalid_token_rejected(self, test_client):
        response = await test_client.get(
            "/api/appointment", headers={"Authorization": "Bearer forged.token.value"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    @pytest.mark.asyncio
    async def test_paged_list_with_headers(self, test_client, clinic, auth_headers):
        for hour in range(9, 12):
            await test_client.post(
                "/api/appointment",
                json={**BOOKING, "appointmentDateTime": f"2025-01-01T{hour:02d}:00:00"},
            )

        response = await test_client.get(
            "/api/appointment",
            params={"pageNumber": 2, "pageSize": 2},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.headers["X-Total-Count"] == "3"
        assert response.headers["X-Total-Pages"] == "2"
        assert response.headers["X-Page-Number"] == "2"
        assert response.headers["X-Page-Size"] == "2"
        items = response.json()["result"]
        assert [item["appointmentDateTime"] for item in items] == ["2025-01-01T11:00:00"]

    @pytest.mark.asyncio
    async def test_page_out_of_range_is_404(self, test_client, auth_headers):
        response = await test_client.get(
            "/api/appointment", params={"pageNumber": 1}, headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Invalid page number"

    @pytest.mark.asyncio
    async def test_get_update_first_and_delete(self, test_client, clinic, auth_headers):
        created = (await test_client.post("/api/appointment", json=BOOKING)).json()["result"]

        fetched = await test_client.get(f"/api/appointment/{created['id']}", headers=auth_headers)
        assert fetched.json()["result"]["notes"] == "First visit"

        first = await test_client.get("/api/appointment/first", headers=auth_headers)
        assert first.json()["result"]["id"] == created["id"]

        updated = await test_client.put(
            "/api/appointment",
            params={"id": created["id"]},
            json={**BOOKING, "status": "Confirmed"},
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["result"]["status"] == "Confirmed"

        deleted = await test_client.delete(f"/api/appointment/{created['id']}")
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Appointment was deleted successfully"

        missing = await test_client.get(f"/api/appointment/{created['id']}", headers=auth_headers)
        assert missing.status_code == 404
        assert missing.json()["isSuccess"] is False


class TestUpdateCollisions:

    @pytest.mark.asyncio
    async def test_reschedule_onto_taken_slot_is_400(self, test_client, clinic, auth_headers):
        await test_client.post("/api/appointment", json=BOOKING)
        other = await test_client.post(
            "/api/appointment", json={**BOOKING, "appointmentDateTime": "2025-01-01T11:00:00"}
        )

        response = await test_client.put(
            "/api/appointment",
            params={"id": other.json()["result"]["id"]},
            json=BOOKING,
            headers=auth_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["isSuccess"] is False
        assert body["message"] == "An appointment already exists for that time and date"

        unchanged = await test_client.get(
            f"/api/appointment/{other.json()['result']['id']}", headers=auth_headers
        )
        assert unchanged.json()["result"]["appointmentDateTime"] == "2025-01-01T11:00:00"

    @pytest.mark.asyncio
    async def test_customer_update_onto_taken_email_is_400(self, test_client, sample_customer_data):
        await test_client.post("/api/customer", json=sample_customer_data)
        bea = await test_client.post(
            "/api/customer", json={**sample_customer_data, "email": "bea@example.com"}
        )

        response = await test_client.put(
            f"/api/customer/{bea.json()['result']['id']}", json=sample_customer_data
        )

        assert response.status_code == 400
        assert response.json()["isSuccess"] is False


class TestReferenceEndpoints:

    @pytest.mark.asyncio
    async def test_customer_crud(self, test_client, sample_customer_data):
        created = await test_client.post("/api/customer", json=sample_customer_data)
        assert created.status_code == 201
        customer = created.json()["result"]
        assert customer["dateOfBirth"] == "1990-05-17"

        duplicate = await test_client.post("/api/customer", json=sample_customer_data)
        assert duplicate.status_code == 400
        assert duplicate.json()["message"] == "Customer already exists"

        updated = await test_client.put(
            f"/api/customer/{customer['id']}",
            json={**sample_customer_data, "address": "Avenida da Liberdade 1"},
        )
        assert updated.json()["result"]["address"] == "Avenida da Liberdade 1"

        listed = await test_client.get("/api/customer")
        assert len(listed.json()["result"]) == 1

        deleted = await test_client.delete(f"/api/customer/{customer['id']}")
        assert deleted.json()["message"] == "Customer was deleted successfully"

    @pytest.mark.asyncio
    async def test_invalid_customer_email(self, test_client, sample_customer_data):
        response = await test_client.post(
            "/api/customer", json={**sample_customer_data, "email": "not-an-email"}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_employee_update_uses_query_id(self, test_client):
        created = await test_client.post(
            "/api/employee", json={"firstName": "Marta", "lastName": "Costa"}
        )
        employee_id = created.json()["result"]["id"]

        updated = await test_client.put(
            "/api/employee",
            params={"id": employee_id},
            json={"firstName": "Marta", "lastName": "Reis"},
        )

        assert updated.status_code == 200
        assert updated.json()["result"]["lastName"] == "Reis"

    @pytest.mark.asyncio
    async def test_service_not_found_envelope(self, test_client):
        response = await test_client.get("/api/service/99")

        assert response.status_code == 404
        assert response.json() == {
            "isSuccess": False,
            "message": "Service with ID '99' was not found",
            "result": None,
            "statusCode": 404,
            "errorMessages": ["Service with ID '99' was not found"],
        }


class TestAuthEndpoints:

    @pytest.mark.asyncio
    async def test_token_then_refresh(self, test_client, db_session):
        from app.services.auth_service import auth_service

        await auth_service.register_user(db_session, "admin", "correct-horse")

        issued = await test_client.post(
            "/api/auth/token", json={"username": "admin", "password": "correct-horse"}
        )
        assert issued.status_code == 200
        token = issued.json()["result"]
        assert token.count(".") == 2

        refreshed = await test_client.get(
            "/api/auth/refresh", headers={"Authorization": f"Bearer {token}"}
        )
        assert refreshed.status_code == 200
        assert refreshed.json()["result"] != token

    @pytest.mark.asyncio
    async def test_wrong_password(self, test_client, db_session):
        from app.services.auth_service import auth_service

        await auth_service.register_user(db_session, "admin", "correct-horse")

        response = await test_client.post(
            "/api/auth/token", json={"username": "admin", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"


class TestMisc:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_envelope(self, test_client):
        response = await test_client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["isSuccess"] is False

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"
