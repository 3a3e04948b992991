from services.site_settings.schemas.settings import PUBLIC_KEYS, SETTING_KINDS, validate_settings


def test_every_public_key_has_a_kind():
    assert PUBLIC_KEYS <= set(SETTING_KINDS)


def test_validate_settings_reports_unknown_and_mistyped_keys():
    _, problems = validate_settings({"academyName": 3, "announcementEnabled": "yes", "favouriteColour": "teal"})
    assert "Setting academyName must be a string" in problems
    assert "Setting announcementEnabled must be a boolean" in problems
    assert "Unknown setting: favouriteColour" in problems


def test_validate_settings_reads_boolean_text():
    values, problems = validate_settings({"announcementEnabled": "true", "maintenanceMode": "False"})
    assert problems == []
    assert values == {"announcementEnabled": True, "maintenanceMode": False}


def test_form_style_string_booleans_are_saved(client, admin_headers):
    response = client.put(
        "/settings",
        json={"academyName": "SH", "announcementEnabled": "true"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert client.get("/settings").json()["settings"] == {"academyName": "SH", "announcementEnabled": True}


def test_non_admin_only_sees_public_keys(client, admin_headers, student_headers):
    response = client.put(
        "/settings",
        json={"academyName": "SH Academy", "maintenanceMode": True, "studentsTaught": "15K+"},
        headers=admin_headers,
    )
    assert response.status_code == 200

    anonymous = client.get("/settings").json()["settings"]
    assert anonymous == {"academyName": "SH Academy"}

    student = client.get("/settings", headers=student_headers).json()["settings"]
    assert student == {"academyName": "SH Academy"}

    admin = client.get("/settings", headers=admin_headers).json()["settings"]
    assert admin == {"academyName": "SH Academy", "maintenanceMode": True, "studentsTaught": "15K+"}


def test_put_is_an_upsert(client, admin_headers):
    client.put("/settings", json={"tagline": "First"}, headers=admin_headers)
    client.put("/settings", json={"tagline": "Second", "phone": "+94 77 000 0000"}, headers=admin_headers)
    settings = client.get("/settings").json()["settings"]
    assert settings == {"tagline": "Second", "phone": "+94 77 000 0000"}


def test_invalid_put_writes_nothing(client, admin_headers):
    response = client.put(
        "/settings",
        json={"tagline": "Should not land", "announcementEnabled": "yes"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert client.get("/settings").json()["settings"] == {}


def test_settings_writes_are_admin_only(client, student_headers):
    assert client.put("/settings", json={"tagline": "x"}).status_code == 401
    assert client.put("/settings", json={"tagline": "x"}, headers=student_headers).status_code == 403
