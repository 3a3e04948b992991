from conftest import ADMIN, STUDENT, login


def test_login_returns_token_and_user(client):
    response = client.post("/auth/login", json=STUDENT)
    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == STUDENT["email"]
    assert body["user"]["role"] == "student"
    assert "password" not in body["user"]
    assert "hashedPassword" not in body["user"]


def test_login_with_wrong_password_is_rejected(client):
    response = client.post("/auth/login", json={"email": STUDENT["email"], "password": "nope-nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


def test_login_is_case_insensitive_on_email(client):
    response = client.post("/auth/login", json={"email": ADMIN["email"].upper(), "password": ADMIN["password"]})
    assert response.status_code == 200


def test_me_requires_authentication(client):
    response = client.get("/auth/me")
    assert response.status_code == 401


def test_me_with_bearer_token(client, student_headers):
    response = client.get("/auth/me", headers=student_headers)
    assert response.status_code == 200
    assert response.json()["user"]["email"] == STUDENT["email"]


def test_cookie_is_used_when_no_bearer_header(client):
    client.post("/auth/login", json=STUDENT)
    response = client.get("/auth/me")
    assert response.status_code == 200
    assert response.json()["user"]["email"] == STUDENT["email"]


def test_logout_clears_cookie(client):
    client.post("/auth/login", json=STUDENT)
    assert client.post("/auth/logout").status_code == 200
    assert client.get("/auth/me").status_code == 401


def test_bad_token_is_anonymous_on_public_routes(client):
    headers = {"Authorization": "Bearer not-a-real-token"}
    assert client.get("/classes", headers=headers).status_code == 200
    assert client.get("/auth/me", headers=headers).status_code == 401


def test_non_admin_gets_403_and_anonymous_gets_401(client, student_headers):
    payload = {"name": "A Level"}
    assert client.post("/classes", json=payload).status_code == 401
    assert client.post("/classes", json=payload, headers=student_headers).status_code == 403


def test_suspended_user_cannot_log_in(client, admin_headers, student_headers):
    me = client.get("/auth/me", headers=student_headers).json()["user"]
    response = client.put(f"/users/{me['id']}", json={"status": "suspended"}, headers=admin_headers)
    assert response.status_code == 200

    response = client.post("/auth/login", json=STUDENT)
    assert response.status_code == 403


def test_suspension_revokes_issued_tokens(client, admin_headers, student_headers):
    me = client.get("/auth/me", headers=student_headers).json()["user"]
    client.put(f"/users/{me['id']}", json={"status": "suspended"}, headers=admin_headers)

    assert client.get("/auth/me", headers=student_headers).status_code == 401
    # public reads still work, as an anonymous caller
    assert client.get("/classes", headers=student_headers).status_code == 200


def test_reactivated_user_can_log_in_again(client, admin_headers, student_headers):
    me = client.get("/auth/me", headers=student_headers).json()["user"]
    client.put(f"/users/{me['id']}", json={"status": "suspended"}, headers=admin_headers)
    client.put(f"/users/{me['id']}", json={"status": "active"}, headers=admin_headers)
    assert login(client, STUDENT)
