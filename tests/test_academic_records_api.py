from __future__ import annotations


def _setup(client, admin_with_institution, name="Lincoln High"):
    user, headers, institution_id = admin_with_institution(name)
    base = f"/api/institutions/{institution_id}"
    student = client.post(
        f"{base}/students", json={"userId": user["id"], "studentId": f"{name[:1]}100"}, headers=headers
    ).get_json()
    course = client.post(f"{base}/courses", json={"courseCode": "MTH1", "name": "Algebra"}, headers=headers).get_json()
    return headers, base, student, course


def test_enrollment_crud(client, admin_with_institution):
    headers, base, student, course = _setup(client, admin_with_institution)

    created = client.post(
        f"{base}/enrollments",
        json={"studentId": student["id"], "courseId": course["id"], "semester": "Fall", "academicYear": "2024-2025"},
        headers=headers,
    )
    assert created.status_code == 201
    enrollment = created.get_json()
    assert enrollment["enrollmentDate"]

    updated = client.put(f"/api/enrollments/{enrollment['id']}", json={"semester": "Spring"}, headers=headers)
    listed = client.get(f"{base}/enrollments", headers=headers)
    deleted = client.delete(f"/api/enrollments/{enrollment['id']}", headers=headers)

    assert updated.get_json()["semester"] == "Spring"
    assert [e["id"] for e in listed.get_json()] == [enrollment["id"]]
    assert deleted.status_code == 200
    assert client.get(f"/api/enrollments/{enrollment['id']}", headers=headers).status_code == 404


def test_enrollment_requires_term_fields(client, admin_with_institution):
    headers, base, student, course = _setup(client, admin_with_institution)

    res = client.post(
        f"{base}/enrollments", json={"studentId": student["id"], "courseId": course["id"]}, headers=headers
    )

    assert res.status_code == 400
    assert {e["field"] for e in res.get_json()["errors"]} == {"semester", "academicYear"}


def test_grade_record_keeps_grades_and_defaults_attendance(client, admin_with_institution):
    headers, base, student, course = _setup(client, admin_with_institution)

    res = client.post(
        f"{base}/grades",
        json={
            "studentId": student["id"],
            "courseId": course["id"],
            "semester": "Fall",
            "academicYear": "2024-2025",
            "grades": {"midterm": 88, "final": "A-"},
        },
        headers=headers,
    )

    assert res.status_code == 201
    grade = client.get(f"/api/grades/{res.get_json()['id']}", headers=headers).get_json()
    assert grade["grades"] == {"midterm": 88, "final": "A-"}
    assert grade["attendance"] == "100%"


def test_enrollments_and_grades_are_not_logged(client, container, admin_with_institution):
    headers, base, student, course = _setup(client, admin_with_institution)
    before = len(container.activities_repo.rows)
    term = {"studentId": student["id"], "courseId": course["id"], "semester": "Fall", "academicYear": "2024"}

    client.post(f"{base}/enrollments", json=term, headers=headers)
    client.post(f"{base}/grades", json=term, headers=headers)

    assert len(container.activities_repo.rows) == before


def test_nested_enrollment_and_grade_lists(client, admin_with_institution):
    headers, base, student, course = _setup(client, admin_with_institution)
    other = client.post(f"{base}/courses", json={"courseCode": "ART1", "name": "Drawing"}, headers=headers).get_json()
    term = {"studentId": student["id"], "semester": "Fall", "academicYear": "2024"}
    client.post(f"{base}/enrollments", json={**term, "courseId": course["id"]}, headers=headers)
    client.post(f"{base}/enrollments", json={**term, "courseId": other["id"]}, headers=headers)
    client.post(f"{base}/grades", json={**term, "courseId": course["id"], "grades": {"final": 91}}, headers=headers)

    by_student = client.get(f"/api/students/{student['id']}/enrollments", headers=headers).get_json()
    by_course = client.get(f"/api/courses/{other['id']}/enrollments", headers=headers).get_json()
    grades = client.get(f"/api/students/{student['id']}/grades", headers=headers).get_json()

    assert sorted(e["courseId"] for e in by_student) == sorted([course["id"], other["id"]])
    assert [e["courseId"] for e in by_course] == [other["id"]]
    assert [g["grades"] for g in grades] == [{"final": 91}]
    assert client.get("/api/students/999/enrollments", headers=headers).status_code == 404
    assert client.get("/api/courses/999/enrollments", headers=headers).status_code == 404


def test_enrollments_are_isolated_per_institution(client, admin_with_institution):
    headers_a, base_a, student, course = _setup(client, admin_with_institution, "North High")
    headers_b, base_b, _, _ = _setup(client, admin_with_institution, "South High")
    enrollment = client.post(
        f"{base_a}/enrollments",
        json={"studentId": student["id"], "courseId": course["id"], "semester": "Fall", "academicYear": "2024"},
        headers=headers_a,
    ).get_json()

    assert client.get(f"{base_b}/enrollments", headers=headers_b).get_json() == []
    assert client.get(f"/api/enrollments/{enrollment['id']}", headers=headers_b).status_code == 404
    assert client.get(f"/api/students/{student['id']}/grades", headers=headers_b).status_code == 404
