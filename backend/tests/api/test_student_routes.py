"""Student Routes — CRUD and validation messages for /api/students."""

import pytest

ADA = {"name": "Ada", "email": "ada@example.com", "age": 36}


async def test_student_lifecycle(client):
    res = await client.post("/api/students", json=ADA)
    assert res.status_code == 201
    student_id = res.json()["id"]

    res = await client.put(f"/api/students/{student_id}", json={"age": 37})
    assert res.json() == {"id": student_id, **ADA, "age": 37}

    res = await client.delete(f"/api/students/{student_id}")
    assert res.status_code == 204

    res = await client.get(f"/api/students/{student_id}")
    assert res.status_code == 404
    assert res.json()["message"] == f"Student not found with id: {student_id}"


async def test_invalid_email_and_age(client):
    res = await client.post("/api/students", json={"name": "Ada", "email": "ada", "age": 0})
    assert res.status_code == 400
    assert res.json()["validationErrors"] == [
        "email: Email must be a valid email address",
        "age: Age must be at least 1",
    ]


async def test_missing_fields(client):
    res = await client.post("/api/students", json={})
    assert res.json()["validationErrors"] == [
        "name: Name is required and cannot be blank",
        "email: Email is required and cannot be blank",
        "age: Age is required",
    ]


@pytest.mark.parametrize("email", ["ada@example.com\n", ".ada@example.com", "a..b@example.com"])
async def test_malformed_email_rejected(client, email):
    res = await client.post("/api/students", json={**ADA, "email": email})
    assert res.status_code == 400
    assert res.json()["validationErrors"] == ["email: Email must be a valid email address"]


async def test_email_longer_than_column_is_400(client):
    res = await client.post("/api/students", json={**ADA, "email": "a" * 310 + "@example.com"})
    assert res.status_code == 400
    assert res.json()["validationErrors"] == ["email: Email must be at most 320 characters"]
