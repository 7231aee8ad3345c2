from __future__ import annotations

import pytest

ADMIN_PASSWORD = "admin-test-password"


def _admin(client):
    res = client.post("/api/auth/admin/login", json={"password": ADMIN_PASSWORD})
    assert res.status_code == 200
    return client


def _student(client, make_student, student_id="stu-1", **kw):
    make_student(student_id, **kw)
    res = client.post("/api/auth/student/login", json={"studentId": student_id, "password": "secret123"})
    assert res.status_code == 200
    return client


def test_health_and_unknown_route(client):
    assert client.get("/health").get_json() == {"status": "ok"}
    res = client.get("/api/nowhere")
    assert res.status_code == 404
    assert res.get_json() == {"error": "Not found"}


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/admin/students"),
        ("get", "/api/admin/stats"),
        ("post", "/api/admin/branches"),
        ("get", "/api/student/profile"),
        ("post", "/api/student/food"),
    ],
)
def test_protected_routes_need_a_session(client, method, path):
    res = getattr(client, method)(path, json={})
    assert res.status_code == 401
    assert res.get_json() == {"error": "Unauthorized"}


def test_admin_login_rejects_wrong_password(client):
    res = client.post("/api/auth/admin/login", json={"password": "nope"})
    assert res.status_code == 401
    assert res.get_json() == {"error": "Invalid admin password"}


def test_student_session_cannot_use_admin_routes(client, make_student):
    _student(client, make_student)
    assert client.get("/api/admin/students").status_code == 401


def test_admin_cannot_use_student_routes(client):
    _admin(client)
    assert client.get("/api/student/profile").status_code == 401


def test_logout_clears_session(client):
    _admin(client)
    client.post("/api/auth/admin/logout")
    assert client.get("/api/admin/students").status_code == 401


def test_otp_signup_flow(client, email_sender):
    payload = {
        "studentId": "stu_777",
        "password": "secret123",
        "name": "Meera Nair",
        "email": "meera@example.com",
        "phone": "9876543210",
    }
    res = client.post("/api/auth/student/send-otp", json=payload)
    assert res.status_code == 200
    assert res.get_json()["email"] == "meera@example.com"

    otp = email_sender.sent[-1]["otp"]
    bad = "000000" if otp != "000000" else "111111"
    res = client.post("/api/auth/student/verify-otp", json={"email": "meera@example.com", "otp": bad})
    assert res.status_code == 400
    assert res.get_json()["attemptsRemaining"] == 4

    res = client.post("/api/auth/student/verify-otp", json={"email": "meera@example.com", "otp": otp})
    assert res.status_code == 201
    assert res.get_json()["student"]["studentId"] == "stu_777"

    # verification logs the student in
    profile = client.get("/api/student/profile").get_json()["student"]
    assert profile["email"] == "meera@example.com"
    assert "password" not in profile


def test_send_otp_validation_error(client):
    res = client.post("/api/auth/student/send-otp", json={"studentId": "x"})
    assert res.status_code == 400
    assert res.get_json()["error"].startswith("Validation failed: ")


def test_admin_branch_room_and_assignment(client, make_student):
    make_student("stu-1")
    _admin(client)

    res = client.post("/api/admin/branches", json={"name": "North Block", "capacity": 20})
    assert res.get_json()["branch"]["branchId"] == "north-block"
    res = client.post("/api/admin/rooms", json={"roomNumber": "101", "branch": "north-block", "capacity": 1})
    assert res.status_code == 200

    res = client.post(
        "/api/admin/students/assign-room", json={"studentId": "stu-1", "branch": "north-block", "roomNumber": "101"}
    )
    assert res.status_code == 200
    assert res.get_json()["student"]["roomNumber"] == "101"

    res = client.delete("/api/admin/branches?branchId=north-block")
    assert res.status_code == 400
    assert res.get_json()["studentsCount"] == 1

    rooms = client.get("/api/admin/rooms?branch=north-block").get_json()["rooms"]
    assert rooms[0]["students"] == ["stu-1"]


def test_student_order_and_admin_delivery(client, app, make_student):
    container = app.extensions["hostel_container"]
    tea = container.food_service.add_menu_item({"name": "Tea", "price": 10, "category": "Snacks"})
    _student(client, make_student)

    res = client.post("/api/student/food", json={"items": [{"menuId": tea.menu_id, "quantity": 2}]})
    assert res.status_code == 200
    order = res.get_json()["order"]
    assert order["totalAmount"] == 20

    client.post("/api/auth/student/logout")
    _admin(client)
    res = client.patch("/api/admin/food/orders", json={"orderId": order["orderId"], "status": "delivered"})
    assert res.status_code == 200
    assert "deliveredAt" in res.get_json()["order"]


def test_student_payment_and_fees(client, app, make_student):
    _student(client, make_student)

    res = client.get("/api/student/fees")
    assert res.get_json()["feeConfiguration"] is None

    res = client.post("/api/student/payment", json={"amount": 1500})
    assert res.status_code == 200
    assert res.get_json()["payment"]["status"] == "completed"
    assert client.get("/api/student/profile").get_json()["student"]["feesPaid"] is True
    assert len(client.get("/api/student/payment").get_json()["payments"]) == 1


def test_delete_student_route_returns_log(client, make_student):
    make_student("stu-1")
    _admin(client)

    res = client.post("/api/admin/delete-student", json={"studentId": "stu-1"})
    body = res.get_json()
    assert res.status_code == 200
    assert body["studentId"] == "stu-1"
    assert body["log"][-1] == "Successfully deleted all data for student: stu-1"


def test_unexpected_errors_become_500(client, app, monkeypatch):
    container = app.extensions["hostel_container"]

    def boom():
        raise RuntimeError("store down")

    monkeypatch.setattr(container.branch_service, "list_branches", boom)
    _admin(client)
    res = client.get("/api/admin/branches")
    assert res.status_code == 500
    assert res.get_json() == {"error": "Failed to fetch branches"}


def test_non_finite_numbers_are_rejected(client):
    _admin(client)

    res = client.post("/api/admin/rooms", json={"roomNumber": "101", "branch": "north-block", "capacity": "Infinity"})
    assert res.status_code == 400
    assert res.get_json()["error"] == "Capacity must be a number"
    assert client.get("/api/admin/rooms").get_json()["rooms"] == []
