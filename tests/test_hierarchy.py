import pytest


@pytest.fixture
def catalog(client, admin_headers):
    """One class, one course, one material type with two materials, one premium item."""
    h = admin_headers
    cls = client.post("/classes", json={"name": "A Level", "order": 1}, headers=h).json()
    course = client.post("/courses", json={"classId": cls["id"], "name": "Chemistry"}, headers=h).json()
    mt = client.post("/material-types", json={"courseId": course["id"], "name": "Past Papers"}, headers=h).json()
    materials = [
        client.post(
            "/materials",
            json={"materialTypeId": mt["id"], "courseId": course["id"], "title": title, "order": i},
            headers=h,
        ).json()
        for i, title in enumerate(["2023 Paper 1", "2023 Paper 2"])
    ]
    premium = client.post(
        "/premium-content",
        json={"courseId": course["id"], "title": "Full Pack", "price": 4500, "features": {"videoCount": 12}},
        headers=h,
    ).json()
    return {"class": cls, "course": course, "material_type": mt, "materials": materials, "premium": premium}


# --- classes ---

def test_create_class_derives_slug(client, admin_headers):
    response = client.post("/classes", json={"name": "Chemistry A2!!"}, headers=admin_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["slug"] == "chemistry-a2"
    assert body["icon"] == "📚"
    assert body["isActive"] is True


def test_class_name_is_required(client, admin_headers):
    assert client.post("/classes", json={"name": "   "}, headers=admin_headers).status_code == 400


def test_duplicate_class_slug_conflicts(client, admin_headers):
    assert client.post("/classes", json={"name": "IGCSE"}, headers=admin_headers).status_code == 201
    response = client.post("/classes", json={"name": "igcse"}, headers=admin_headers)
    assert response.status_code == 409


def test_class_rename_rechecks_slug(client, admin_headers):
    client.post("/classes", json={"name": "O Level"}, headers=admin_headers)
    other = client.post("/classes", json={"name": "A Level"}, headers=admin_headers).json()
    response = client.put(f"/classes/{other['id']}", json={"name": "O Level"}, headers=admin_headers)
    assert response.status_code == 409

    response = client.put(f"/classes/{other['id']}", json={"name": "AS Level"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["slug"] == "as-level"

    # renaming back restores the original slug
    response = client.put(f"/classes/{other['id']}", json={"name": "A Level"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["slug"] == "a-level"


def test_inactive_classes_hidden_unless_admin_asks_for_all(client, admin_headers, student_headers):
    client.post("/classes", json={"name": "Visible", "order": 2}, headers=admin_headers)
    client.post("/classes", json={"name": "Hidden", "isActive": False, "order": 1}, headers=admin_headers)

    public = [c["name"] for c in client.get("/classes").json()]
    assert public == ["Visible"]

    # students cannot use the "all" flag
    student = [c["name"] for c in client.get("/classes", params={"all": "true"}, headers=student_headers).json()]
    assert student == ["Visible"]

    admin = [c["name"] for c in client.get("/classes", params={"all": "true"}, headers=admin_headers).json()]
    assert admin == ["Hidden", "Visible"]


def test_classes_sorted_by_order(client, admin_headers):
    for name, order in (("Third", 3), ("First", 1), ("Second", 2)):
        client.post("/classes", json={"name": name, "order": order}, headers=admin_headers)
    assert [c["name"] for c in client.get("/classes").json()] == ["First", "Second", "Third"]


def test_get_missing_class_is_404(client):
    assert client.get("/classes/nope").status_code == 404


def test_deleting_class_does_not_cascade(client, admin_headers, catalog):
    course_id = catalog["course"]["id"]
    response = client.delete(f"/classes/{catalog['class']['id']}", headers=admin_headers)
    assert response.status_code == 200

    # the course row survives but drops out of the public catalog
    assert client.get(f"/courses/{course_id}").status_code == 200
    assert client.get("/courses").json() == []
    admin_view = client.get("/courses", params={"all": "true"}, headers=admin_headers).json()
    assert [c["id"] for c in admin_view] == [course_id]
    assert admin_view[0]["academyClass"] is None


# --- courses ---

def test_course_requires_existing_class(client, admin_headers):
    response = client.post("/courses", json={"classId": "missing", "name": "Physics"}, headers=admin_headers)
    assert response.status_code == 404


def test_course_slug_is_scoped_to_class(client, admin_headers):
    h = admin_headers
    a = client.post("/classes", json={"name": "A Level"}, headers=h).json()
    o = client.post("/classes", json={"name": "O Level"}, headers=h).json()

    assert client.post("/courses", json={"classId": a["id"], "name": "Physics"}, headers=h).status_code == 201
    assert client.post("/courses", json={"classId": o["id"], "name": "Physics"}, headers=h).status_code == 201
    assert client.post("/courses", json={"classId": a["id"], "name": "physics"}, headers=h).status_code == 409


def test_moving_course_into_class_with_same_slug_conflicts(client, admin_headers):
    h = admin_headers
    a = client.post("/classes", json={"name": "A Level"}, headers=h).json()
    o = client.post("/classes", json={"name": "O Level"}, headers=h).json()
    client.post("/courses", json={"classId": a["id"], "name": "Physics"}, headers=h)
    moving = client.post("/courses", json={"classId": o["id"], "name": "Physics"}, headers=h).json()

    response = client.put(f"/courses/{moving['id']}", json={"classId": a["id"]}, headers=h)
    assert response.status_code == 409


def test_course_list_filters_by_class_and_activity(client, admin_headers):
    h = admin_headers
    a = client.post("/classes", json={"name": "A Level"}, headers=h).json()
    o = client.post("/classes", json={"name": "O Level"}, headers=h).json()
    client.post("/courses", json={"classId": a["id"], "name": "Physics"}, headers=h)
    client.post("/courses", json={"classId": a["id"], "name": "Biology", "isActive": False}, headers=h)
    client.post("/courses", json={"classId": o["id"], "name": "Maths"}, headers=h)

    names = [c["name"] for c in client.get("/courses", params={"classId": a["id"]}).json()]
    assert names == ["Physics"]

    admin_names = [
        c["name"]
        for c in client.get("/courses", params={"classId": a["id"], "all": "true"}, headers=h).json()
    ]
    assert sorted(admin_names) == ["Biology", "Physics"]


def test_courses_of_inactive_class_are_hidden(client, admin_headers):
    h = admin_headers
    cls = client.post("/classes", json={"name": "A Level"}, headers=h).json()
    client.post("/courses", json={"classId": cls["id"], "name": "Physics"}, headers=h)
    client.put(f"/classes/{cls['id']}", json={"isActive": False}, headers=h)

    assert client.get("/courses").json() == []


def test_unique_constraint_backs_up_slug_check(client, admin_headers, monkeypatch):
    from services.content_management.controllers import course_service

    async def skip_check(db, class_id, slug, exclude_id=None):
        return None

    h = admin_headers
    cls = client.post("/classes", json={"name": "A Level"}, headers=h).json()
    assert client.post("/courses", json={"classId": cls["id"], "name": "Physics"}, headers=h).status_code == 201

    monkeypatch.setattr(course_service, "_ensure_slug_free", skip_check)
    response = client.post("/courses", json={"classId": cls["id"], "name": "Physics"}, headers=h)
    assert response.status_code == 409
    assert len(client.get("/courses", params={"classId": cls["id"]}).json()) == 1


def test_course_reads_carry_class_summary(client, catalog):
    expected = {
        "id": catalog["class"]["id"],
        "name": "A Level",
        "slug": "a-level",
        "icon": "📚",
    }
    course_id = catalog["course"]["id"]

    listed = client.get("/courses").json()
    assert listed[0]["academyClass"] == expected
    assert listed[0]["classId"] == catalog["class"]["id"]

    assert client.get(f"/courses/{course_id}").json()["academyClass"] == expected
    detailed = client.get(f"/courses/{course_id}", params={"withMaterials": "1"}).json()
    assert detailed["course"]["academyClass"] == expected
    assert catalog["course"]["academyClass"] == expected


def test_course_with_materials(client, catalog, admin_headers):
    h = admin_headers
    client.put(f"/materials/{catalog['materials'][1]['id']}", json={"isActive": False}, headers=h)

    response = client.get(f"/courses/{catalog['course']['id']}", params={"withMaterials": "1"})
    assert response.status_code == 200
    body = response.json()
    assert body["course"]["id"] == catalog["course"]["id"]
    assert [m["name"] for m in body["materialTypes"]] == ["Past Papers"]
    assert [m["title"] for m in body["materials"]] == ["2023 Paper 1"]
    assert body["premiumContent"][0]["features"]["videoCount"] == 12


def test_course_delete_cascades(client, catalog, admin_headers):
    h = admin_headers
    course_id = catalog["course"]["id"]
    response = client.delete(f"/courses/{course_id}", headers=h)
    assert response.status_code == 200

    assert client.get(f"/courses/{course_id}").status_code == 404
    assert client.get(f"/material-types/{catalog['material_type']['id']}").status_code == 404
    for material in catalog["materials"]:
        assert client.get(f"/materials/{material['id']}").status_code == 404
    assert client.get(f"/premium-content/{catalog['premium']['id']}").status_code == 404
    # the class is untouched
    assert client.get(f"/classes/{catalog['class']['id']}").status_code == 200


def test_course_delete_leaves_other_courses_alone(client, catalog, admin_headers):
    h = admin_headers
    other = client.post("/courses", json={"classId": catalog["class"]["id"], "name": "Physics"}, headers=h).json()
    other_mt = client.post("/material-types", json={"courseId": other["id"], "name": "Notes"}, headers=h).json()

    client.delete(f"/courses/{catalog['course']['id']}", headers=h)
    assert client.get(f"/material-types/{other_mt['id']}").status_code == 200


def test_delete_missing_course_is_404(client, admin_headers):
    assert client.delete("/courses/missing", headers=admin_headers).status_code == 404


# --- material types ---

def test_material_type_slug_is_scoped_to_course(client, catalog, admin_headers):
    h = admin_headers
    response = client.post(
        "/material-types", json={"courseId": catalog["course"]["id"], "name": "past papers"}, headers=h
    )
    assert response.status_code == 409

    other = client.post("/courses", json={"classId": catalog["class"]["id"], "name": "Physics"}, headers=h).json()
    response = client.post("/material-types", json={"courseId": other["id"], "name": "Past Papers"}, headers=h)
    assert response.status_code == 201


def test_material_type_requires_existing_course(client, admin_headers):
    response = client.post("/material-types", json={"courseId": "missing", "name": "Notes"}, headers=admin_headers)
    assert response.status_code == 404


def test_material_type_list_requires_course_id(client):
    assert client.get("/material-types").status_code == 400


def test_material_type_delete_cascades_to_materials(client, catalog, admin_headers):
    mt_id = catalog["material_type"]["id"]
    assert client.delete(f"/material-types/{mt_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/material-types/{mt_id}").status_code == 404
    assert client.get("/materials", params={"courseId": catalog["course"]["id"]}).json() == []
    # the course and its premium content remain
    assert client.get(f"/courses/{catalog['course']['id']}").status_code == 200
    assert client.get(f"/premium-content/{catalog['premium']['id']}").status_code == 200


def test_delete_missing_material_type_is_404(client, admin_headers):
    assert client.delete("/material-types/missing", headers=admin_headers).status_code == 404


# --- materials ---

def test_materials_listed_in_order(client, catalog):
    response = client.get("/materials", params={"materialTypeId": catalog["material_type"]["id"]})
    assert [m["title"] for m in response.json()] == ["2023 Paper 1", "2023 Paper 2"]


def test_material_list_requires_a_parent(client):
    assert client.get("/materials").status_code == 400


def test_material_course_must_match_material_type(client, catalog, admin_headers):
    h = admin_headers
    other = client.post("/courses", json={"classId": catalog["class"]["id"], "name": "Physics"}, headers=h).json()
    response = client.post(
        "/materials",
        json={"materialTypeId": catalog["material_type"]["id"], "courseId": other["id"], "title": "Stray"},
        headers=h,
    )
    assert response.status_code == 400


def test_material_title_required(client, catalog, admin_headers):
    response = client.post(
        "/materials",
        json={"materialTypeId": catalog["material_type"]["id"], "courseId": catalog["course"]["id"], "title": ""},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_moving_material_follows_new_type_course(client, catalog, admin_headers):
    h = admin_headers
    other = client.post("/courses", json={"classId": catalog["class"]["id"], "name": "Physics"}, headers=h).json()
    other_mt = client.post("/material-types", json={"courseId": other["id"], "name": "Notes"}, headers=h).json()

    material_id = catalog["materials"][0]["id"]
    response = client.put(f"/materials/{material_id}", json={"materialTypeId": other_mt["id"]}, headers=h)
    assert response.status_code == 200
    assert response.json()["courseId"] == other["id"]


# --- premium content ---

def test_premium_price_cannot_be_negative(client, catalog, admin_headers):
    response = client.post(
        "/premium-content",
        json={"courseId": catalog["course"]["id"], "title": "Bad", "price": -1},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_premium_defaults_features(client, catalog, admin_headers):
    response = client.post(
        "/premium-content",
        json={"courseId": catalog["course"]["id"], "title": "Lite", "price": 0},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert response.json()["features"] == {
        "videoCount": 0,
        "pastPaperCount": 0,
        "quizCount": 0,
        "notesCount": 0,
        "otherFeatures": [],
    }


def test_premium_update_and_delete(client, catalog, admin_headers):
    h = admin_headers
    premium_id = catalog["premium"]["id"]
    response = client.put(f"/premium-content/{premium_id}", json={"price": 5000, "isActive": False}, headers=h)
    assert response.status_code == 200
    assert response.json()["price"] == 5000

    assert client.get("/premium-content", params={"courseId": catalog["course"]["id"]}).json() == []
    assert client.delete(f"/premium-content/{premium_id}", headers=h).status_code == 200
    assert client.delete(f"/premium-content/{premium_id}", headers=h).status_code == 404


def test_writes_are_admin_only(client, catalog, student_headers):
    assert client.delete(f"/courses/{catalog['course']['id']}", headers=student_headers).status_code == 403
    assert client.delete(f"/courses/{catalog['course']['id']}").status_code == 401
