"""
Membership Backend — API Scenario Tests
=========================================

What:  End-to-end requests through routes, services and an in-memory SQLite
       database (foreign keys enforced).

What we test:
    ✅ Department lifecycle: create → read → delete → 404
    ✅ Update/delete of unknown ids answer 404 with the entity label
    ✅ Role delete answers 204 with an empty body
    ✅ Name filters are case-insensitive substring matches
    ✅ Event responses carry the event type name; day/name/type filters
    ✅ Invalid foreign keys surface as 500 with the storage message
"""

import datetime as dt

import pytest


async def _create(client, path, body):
    response = await client.post(path, json=body)
    assert response.status_code == 201, response.text
    return response.json()


def _parse_instant(value: str) -> dt.datetime:
    return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestDepartmentRoutes:

    @pytest.mark.asyncio
    async def test_lifecycle(self, api_client):
        """Create, read, delete, then 404 on the deleted department."""
        response = await api_client.post("/api/departments", json={"name": "Engineering"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Engineering"}

        response = await api_client.get("/api/departments/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Engineering"}

        response = await api_client.delete("/api/departments/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Engineering"}

        response = await api_client.get("/api/departments/1")
        assert response.status_code == 404
        assert response.json() == {"message": "Department not found"}

    @pytest.mark.asyncio
    async def test_update_replaces_name(self, api_client):
        """PUT replaces the department's name."""
        created = await _create(api_client, "/api/departments", {"name": "Engineering"})

        response = await api_client.put(
            f"/api/departments/{created['id']}", json={"name": "Platform"}
        )

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "name": "Platform"}

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, api_client):
        """PUT on an unknown id is a 404 naming the entity."""
        response = await api_client.put("/api/departments/999", json={"name": "Platform"})
        assert response.status_code == 404
        assert response.json() == {"message": "Department not found"}

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, api_client):
        """DELETE on an unknown id is a 404 naming the entity."""
        response = await api_client.delete("/api/departments/999")
        assert response.status_code == 404
        assert response.json() == {"message": "Department not found"}

    @pytest.mark.asyncio
    async def test_list_filters_by_name(self, api_client):
        """Name filter is a case-insensitive substring match; empty means no filter."""
        for name in ("Engineering", "Sales", "Reverse Engineering"):
            await _create(api_client, "/api/departments", {"name": name})

        response = await api_client.get("/api/departments")
        assert [d["name"] for d in response.json()] == [
            "Engineering", "Sales", "Reverse Engineering",
        ]

        response = await api_client.get("/api/departments", params={"name": "ENGINEER"})
        assert [d["name"] for d in response.json()] == ["Engineering", "Reverse Engineering"]

        response = await api_client.get("/api/departments", params={"name": ""})
        assert len(response.json()) == 3

    @pytest.mark.asyncio
    async def test_like_metacharacters_match_literally(self, api_client):
        """'%' in a name filter matches a literal percent sign."""
        await _create(api_client, "/api/departments", {"name": "R&D 100%"})
        await _create(api_client, "/api/departments", {"name": "R&D 1000"})

        response = await api_client.get("/api/departments", params={"name": "100%"})

        assert [d["name"] for d in response.json()] == ["R&D 100%"]


class TestRoleRoutes:

    @pytest.mark.asyncio
    async def test_delete_answers_no_content(self, api_client):
        """Role delete answers 204 with an empty body."""
        created = await _create(api_client, "/api/roles", {"name": "Treasurer"})

        response = await api_client.delete(f"/api/roles/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert (await api_client.get(f"/api/roles/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_role(self, api_client):
        """Deleting an unknown role is a 404."""
        response = await api_client.delete("/api/roles/5")
        assert response.status_code == 404
        assert response.json() == {"message": "Role not found"}


class TestEventTypeRoutes:

    @pytest.mark.asyncio
    async def test_not_found_label(self, api_client):
        """Event type 404s use the "Event type" label."""
        response = await api_client.get("/api/event-types/3")
        assert response.status_code == 404
        assert response.json() == {"message": "Event type not found"}

    @pytest.mark.asyncio
    async def test_delete_referenced_type_is_storage_error(self, api_client):
        """An event type still used by events cannot be deleted."""
        workshop = await _create(api_client, "/api/event-types", {"name": "Workshop"})
        await _create(
            api_client,
            "/api/events",
            {"eventTypeId": workshop["id"], "datetime": "2024-05-25T10:00:00Z"},
        )

        response = await api_client.delete(f"/api/event-types/{workshop['id']}")

        assert response.status_code == 500
        assert "FOREIGN KEY" in response.json()["error"]


class TestEventRoutes:

    async def _seed(self, client):
        workshop = await _create(client, "/api/event-types", {"name": "Workshop"})
        meetup = await _create(client, "/api/event-types", {"name": "Meetup"})
        await _create(
            client, "/api/events",
            {"eventTypeId": workshop["id"], "datetime": "2024-05-25T10:00:00Z"},
        )
        await _create(
            client, "/api/events",
            {"eventTypeId": meetup["id"], "datetime": "2024-05-26T09:00:00Z"},
        )
        await _create(
            client, "/api/events",
            {"eventTypeId": meetup["id"], "datetime": "2024-05-25T23:30:00Z"},
        )
        return workshop, meetup

    @pytest.mark.asyncio
    async def test_create_includes_event_type_name(self, api_client):
        """Created and fetched events carry the type name."""
        workshop = await _create(api_client, "/api/event-types", {"name": "Workshop"})

        created = await _create(
            api_client,
            "/api/events",
            {"eventTypeId": workshop["id"], "datetime": "2024-05-25T10:00:00Z"},
        )

        assert created["id"] == 1
        assert created["eventTypeId"] == workshop["id"]
        assert created["eventType"] == "Workshop"
        assert created["datetime"].startswith("2024-05-25T10:00:00")

        fetched = (await api_client.get("/api/events/1")).json()
        assert fetched["eventType"] == "Workshop"

    @pytest.mark.asyncio
    async def test_missing_event_type_is_storage_error(self, api_client):
        """An unknown eventTypeId fails on the foreign key and nothing is stored."""
        response = await api_client.post(
            "/api/events", json={"eventTypeId": 999, "datetime": "2024-05-25T10:00:00Z"}
        )

        assert response.status_code == 500
        assert "FOREIGN KEY" in response.json()["error"]
        assert (await api_client.get("/api/events")).json() == []

    @pytest.mark.asyncio
    async def test_update_switches_event_type(self, api_client):
        """PUT to another type returns the new type's name."""
        workshop, meetup = await self._seed(api_client)

        response = await api_client.put(
            "/api/events/1",
            json={"eventTypeId": meetup["id"], "datetime": "2024-06-01T08:00:00Z"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["eventTypeId"] == meetup["id"]
        assert body["eventType"] == "Meetup"
        assert body["datetime"].startswith("2024-06-01T08:00:00")

    @pytest.mark.asyncio
    async def test_filter_by_day(self, api_client):
        """date selects events on that UTC day."""
        await self._seed(api_client)

        response = await api_client.get("/api/events", params={"date": "2024-05-25"})

        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == [1, 3]

    @pytest.mark.asyncio
    async def test_filter_by_type_name(self, api_client):
        """name matches the event type's name."""
        await self._seed(api_client)

        response = await api_client.get("/api/events", params={"name": "work"})

        events = response.json()
        assert [e["id"] for e in events] == [1]
        assert events[0]["eventType"] == "Workshop"

    @pytest.mark.asyncio
    async def test_filters_combine_with_and(self, api_client):
        """name and date must both match."""
        await self._seed(api_client)

        response = await api_client.get(
            "/api/events", params={"name": "meet", "date": "2024-05-25"}
        )

        assert [e["id"] for e in response.json()] == [3]

    @pytest.mark.asyncio
    async def test_filter_by_event_type_id(self, api_client):
        """eventTypeId selects events of that type."""
        _, meetup = await self._seed(api_client)

        response = await api_client.get("/api/events", params={"eventTypeId": meetup["id"]})

        assert [e["id"] for e in response.json()] == [2, 3]

    @pytest.mark.asyncio
    async def test_invalid_date_filter(self, api_client):
        """A date that is not YYYY-MM-DD is a 400."""
        response = await api_client.get("/api/events", params={"date": "25/05/2024"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"

    @pytest.mark.asyncio
    async def test_delete_returns_last_state(self, api_client):
        """DELETE returns the event as it was, type name included."""
        await self._seed(api_client)
        before = (await api_client.get("/api/events/2")).json()

        response = await api_client.delete("/api/events/2")

        assert response.status_code == 200
        assert response.json() == before
        assert response.json()["eventType"] == "Meetup"
        assert (await api_client.get("/api/events/2")).status_code == 404


class TestEventTimeZones:

    @pytest.mark.asyncio
    async def test_offset_is_converted_to_utc(self, api_client):
        """A -03:00 input comes back as the same instant in UTC."""
        workshop = await _create(api_client, "/api/event-types", {"name": "Workshop"})

        created = await _create(
            api_client,
            "/api/events",
            {"eventTypeId": workshop["id"], "datetime": "2024-05-25T23:30:00-03:00"},
        )

        assert _parse_instant(created["datetime"]) == dt.datetime(
            2024, 5, 26, 2, 30, tzinfo=dt.timezone.utc
        )
        assert _parse_instant(created["datetime"]).utcoffset() == dt.timedelta(0)

    @pytest.mark.asyncio
    async def test_day_filter_uses_utc_instant(self, api_client):
        """Day filters see the UTC instant, not the local wall time."""
        workshop = await _create(api_client, "/api/event-types", {"name": "Workshop"})
        await _create(
            api_client,
            "/api/events",
            {"eventTypeId": workshop["id"], "datetime": "2024-05-25T23:30:00-03:00"},
        )

        on_26th = await api_client.get("/api/events", params={"date": "2024-05-26"})
        on_25th = await api_client.get("/api/events", params={"date": "2024-05-25"})

        assert [e["id"] for e in on_26th.json()] == [1]
        assert on_25th.json() == []

    @pytest.mark.asyncio
    async def test_naive_datetime_rejected(self, api_client):
        """A datetime without an offset is a 400 and nothing is stored."""
        workshop = await _create(api_client, "/api/event-types", {"name": "Workshop"})

        response = await api_client.post(
            "/api/events",
            json={"eventTypeId": workshop["id"], "datetime": "2024-05-25T10:00:00"},
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["loc"] == ["body", "datetime"]
        assert (await api_client.get("/api/events")).json() == []


ROUND_TRIP_CASES = [
    ("/api/departments", {"name": "Engineering"}),
    ("/api/roles", {"name": "Treasurer"}),
    ("/api/event-types", {"name": "Workshop"}),
    ("/api/events", {"eventTypeId": 1, "datetime": "2024-05-25T10:00:00Z"}),
    (
        "/api/members",
        {
            "email": "ana@example.com",
            "password": "s3cret",
            "name": "Ana Souza",
            "cpf": "123.456.789-00",
            "street": None,
            "neighborhood": "Centro",
            "city": "Recife",
            "state": "PE",
            "zipCode": "50000-000",
            "departmentId": 1,
            "roleId": 1,
        },
    ),
]


class TestRoundTrip:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, body",
        ROUND_TRIP_CASES,
        ids=["department", "role", "event-type", "event", "member"],
    )
    async def test_create_then_get_by_id(self, api_client, path, body):
        """Every resource reads back exactly what its create returned."""
        await _create(api_client, "/api/departments", {"name": "Operations"})
        await _create(api_client, "/api/roles", {"name": "Volunteer"})
        await _create(api_client, "/api/event-types", {"name": "Meetup"})

        created = await _create(api_client, path, body)
        fetched = await api_client.get(f"{path}/{created['id']}")

        assert fetched.status_code == 200
        assert fetched.json() == created
        submitted = {k: v for k, v in body.items() if k not in ("password", "datetime")}
        assert submitted.items() <= created.items()


class TestIdBounds:

    @pytest.mark.asyncio
    async def test_largest_storable_id_is_a_lookup(self, api_client):
        """2**31 - 1 is a valid id that simply does not exist."""
        response = await api_client.get(f"/api/roles/{2**31 - 1}")
        assert response.status_code == 404
        assert response.json() == {"message": "Role not found"}
