def test_program_lifecycle(client, admin_headers):
    created = client.post(
        "/api/programs",
        json={"name": "Electrical Engineering", "code": "EE", "description": "Three-year diploma"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    program = created.json()
    assert program["id"] > 0
    assert program["createdAt"]

    fetched = client.get(f"/api/programs/{program['id']}", headers=admin_headers)
    assert fetched.json() == program

    updated = client.put(
        f"/api/programs/{program['id']}", json={"name": "Electrical Technology"}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "Electrical Technology"
    assert updated.json()["code"] == "EE"
    assert updated.json()["description"] == "Three-year diploma"

    assert client.delete(f"/api/programs/{program['id']}", headers=admin_headers).status_code == 204

    missing = client.get(f"/api/programs/{program['id']}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json() == {"message": "Program not found"}

    again = client.delete(f"/api/programs/{program['id']}", headers=admin_headers)
    assert again.status_code == 404


def test_update_of_unknown_program_is_not_found(client, admin_headers):
    response = client.put("/api/programs/999", json={"name": "Ghost"}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Program not found"}


def test_program_code_is_unique(client, admin_headers, school):
    response = client.post("/api/programs", json={"name": "Computing", "code": "CS"}, headers=admin_headers)

    assert response.status_code == 409
    assert "Program" in response.json()["message"]


def test_renaming_a_program_onto_an_existing_code_is_rejected(client, admin_headers, school):
    other = client.post("/api/programs", json={"name": "Civil", "code": "CE"}, headers=admin_headers).json()

    response = client.patch(f"/api/programs/{other['id']}", json={"code": "CS"}, headers=admin_headers)

    assert response.status_code == 409
    assert client.get(f"/api/programs/{other['id']}", headers=admin_headers).json()["code"] == "CE"


def test_class_requires_an_existing_program(client, admin_headers):
    response = client.post("/api/classes", json={"programId": 4242, "year": 1}, headers=admin_headers)

    assert response.status_code == 409


def test_form_strings_are_accepted_for_ids_and_year(client, admin_headers, school):
    response = client.post(
        "/api/classes", json={"programId": str(school["program"]["id"]), "year": "2"}, headers=admin_headers
    )

    assert response.status_code == 201
    assert response.json()["programId"] == school["program"]["id"]
    assert response.json()["year"] == 2


def test_program_with_classes_cannot_be_deleted(client, admin_headers, school):
    program_id = school["program"]["id"]

    response = client.delete(f"/api/programs/{program_id}", headers=admin_headers)

    assert response.status_code == 409
    assert client.get(f"/api/programs/{program_id}", headers=admin_headers).status_code == 200


def test_classes_and_sections_filter_by_parent(client, admin_headers, school):
    other_program = client.post(
        "/api/programs", json={"name": "Business", "code": "BBA"}, headers=admin_headers
    ).json()
    other_class = client.post(
        "/api/classes", json={"programId": other_program["id"], "year": 1}, headers=admin_headers
    ).json()
    client.post("/api/sections", json={"classId": other_class["id"], "name": "B"}, headers=admin_headers)

    classes = client.get(
        "/api/classes", params={"programId": school["program"]["id"]}, headers=admin_headers
    ).json()
    assert [c["id"] for c in classes] == [school["class"]["id"]]

    sections = client.get(
        "/api/sections", params={"classId": other_class["id"]}, headers=admin_headers
    ).json()
    assert [s["name"] for s in sections] == ["B"]

    assert len(client.get("/api/sections", headers=admin_headers).json()) == 2


def test_non_numeric_filter_is_rejected(client, admin_headers):
    response = client.get("/api/classes", params={"programId": "abc"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "programId"


def test_subject_code_is_unique(client, admin_headers, school):
    response = client.post(
        "/api/subjects", json={"name": "Maths again", "code": "MATH-101"}, headers=admin_headers
    )

    assert response.status_code == 409


def test_faculty_linked_to_a_user(client, admin_headers, make_user):
    bilal = client.get("/api/user", headers=make_user("bilal", "faculty")).json()
    bilal_id = bilal["id"]
    payload = {
        "userId": bilal_id,
        "cnic": "35202-7654321-1",
        "contactNumber": "0311-7654321",
        "qualifications": "PhD Physics",
        "designation": "Professor",
    }
    created = client.post("/api/faculty", json=payload, headers=admin_headers)
    assert created.status_code == 201

    listed = client.get("/api/faculty", params={"userId": bilal_id}, headers=admin_headers).json()
    assert [f["id"] for f in listed] == [created.json()["id"]]

    # One faculty profile per user.
    duplicate = client.post("/api/faculty", json=payload, headers=admin_headers)
    assert duplicate.status_code == 409


def test_faculty_subject_assignments(client, admin_headers, school):
    second_subject = client.post(
        "/api/subjects", json={"name": "Physics", "code": "PHY-101"}, headers=admin_headers
    ).json()
    base = {"facultyId": school["faculty"]["id"], "sectionId": school["section"]["id"]}

    first = client.post(
        "/api/faculty-subjects", json={**base, "subjectId": school["subject"]["id"]}, headers=admin_headers
    )
    second = client.post(
        "/api/faculty-subjects", json={**base, "subjectId": second_subject["id"]}, headers=admin_headers
    )
    assert first.status_code == second.status_code == 201

    filtered = client.get(
        "/api/faculty-subjects",
        params={"facultyId": school["faculty"]["id"], "subjectId": second_subject["id"]},
        headers=admin_headers,
    ).json()
    assert [a["id"] for a in filtered] == [second.json()["id"]]

    assert client.delete(f"/api/faculty-subjects/{first.json()['id']}", headers=admin_headers).status_code == 204
    missing = client.delete(f"/api/faculty-subjects/{first.json()['id']}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json() == {"message": "Assignment not found"}


def test_assignment_needs_existing_section(client, admin_headers, school):
    response = client.post(
        "/api/faculty-subjects",
        json={"facultyId": school["faculty"]["id"], "subjectId": school["subject"]["id"], "sectionId": 999},
        headers=admin_headers,
    )

    assert response.status_code == 409


def test_subject_referenced_by_assignment_cannot_be_deleted(client, admin_headers, school):
    client.post(
        "/api/faculty-subjects",
        json={
            "facultyId": school["faculty"]["id"],
            "subjectId": school["subject"]["id"],
            "sectionId": school["section"]["id"],
        },
        headers=admin_headers,
    )

    response = client.delete(f"/api/subjects/{school['subject']['id']}", headers=admin_headers)

    assert response.status_code == 409
