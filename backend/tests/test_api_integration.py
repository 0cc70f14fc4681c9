def weekday_windows():
    return [{"day_of_week": day, "start_time": "08:00", "end_time": "17:00"} for day in range(1, 6)]


def catalog_payload():
    return {
        "subjects": [
            {"id": "sub-1", "name": "Mathematics", "duration": 120, "room_requirements": ["whiteboard"]},
            {"id": "sub-2", "name": "Chemistry", "duration": 60, "room_requirements": ["fume_hood"]},
        ],
        "teachers": [
            {"id": "t1", "name": "Ada", "subjects": ["Mathematics", "Chemistry"], "availability": weekday_windows()},
        ],
        "rooms": [{"id": "r1", "name": "Room 101", "capacity": 40, "equipment": ["whiteboard"]}],
        "students": [
            {"id": "st1", "name": "Sam", "class_name": "Grade 10A", "subjects": ["Mathematics", "Chemistry"]},
        ],
    }


def test_generate_timetable_endpoint(client):
    response = client.post(
        "/api/timetable/generate",
        json={"class_names": ["Grade 10A"], "catalog": catalog_payload()},
    )
    assert response.status_code == 200
    body = response.json()

    assert [(s["day_of_week"], s["start_time"]) for s in body["sessions"]] == [(1, "08:00"), (1, "09:00")]
    assert [(c["kind"], c["severity"]) for c in body["conflicts"]] == [("room_conflict", "high")]
    assert body["summary"]["total_sessions"] == 2
    assert body["summary"]["required_sessions"] == 3


def test_generate_timetable_with_custom_grid(client):
    response = client.post(
        "/api/timetable/generate",
        json={
            "class_names": ["Grade 10A"],
            "catalog": catalog_payload(),
            "grid": {"start_hour": 14, "end_hour": 17},
        },
    )
    assert response.status_code == 200
    assert [s["start_time"] for s in response.json()["sessions"]] == ["14:00", "15:00"]


def test_invalid_grid_is_rejected(client):
    response = client.post(
        "/api/timetable/generate",
        json={"class_names": ["Grade 10A"], "catalog": catalog_payload(), "grid": {"start_hour": 17, "end_hour": 8}},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Start hour must be before end hour"
    assert body["details"]["start_hour"] == 17


def test_malformed_catalog_is_a_validation_error(client):
    payload = catalog_payload()
    payload["teachers"][0]["availability"] = [{"day_of_week": 9, "start_time": "08:00", "end_time": "17:00"}]
    response = client.post("/api/timetable/generate", json={"class_names": ["Grade 10A"], "catalog": payload})
    assert response.status_code == 422


def test_curriculum_endpoint(client):
    response = client.post(
        "/api/curriculum/generate",
        json={
            "title": "Semester 5",
            "courses": [
                {"name": "Database Systems", "credits": 3},
                {"name": "", "credits": 2},
            ],
            "seed": 42,
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["seed"] == 42
    assert len(body["sessions"]) == 3
    assert len({s["day_of_week"] for s in body["sessions"]}) == 3
    assert body["skipped_courses"] == [""]


def test_curriculum_endpoint_skips_malformed_courses(client):
    response = client.post(
        "/api/curriculum/generate",
        json={
            "title": "Semester 5",
            "courses": [
                {"name": None, "credits": 2},
                {"name": "Compilers", "credits": 2.5},
                {"name": "Networks", "credits": "three"},
                {"name": "Database Systems", "credits": 3},
            ],
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert len(body["sessions"]) == 3
    assert {s["subject_name"] for s in body["sessions"]} == {"Database Systems"}
    assert body["skipped_courses"] == ["", "Compilers", "Networks"]


def test_detect_conflicts_endpoint(client):
    sessions = [
        {
            "id": "s1",
            "day_of_week": 2,
            "start_time": "09:00",
            "end_time": "10:00",
            "subject_name": "Mathematics",
            "teacher_id": "t1",
            "room_id": "r1",
            "class_name": "Grade 10A",
        },
        {
            "id": "s2",
            "day_of_week": 2,
            "start_time": "09:00",
            "end_time": "10:00",
            "subject_name": "Physics",
            "teacher_id": "t1",
            "room_id": "r2",
            "class_name": "Grade 10B",
        },
    ]
    response = client.post("/api/conflicts/detect", json={"sessions": sessions})
    assert response.status_code == 200
    body = response.json()
    assert [c["kind"] for c in body["conflicts"]] == ["teacher_conflict"]
    assert body["conflicts"][0]["affected_sessions"] == ["s1", "s2"]
    assert len(body["suggested_resolutions"]["teacher_conflict"]) == 3


def test_list_resolutions(client):
    response = client.get("/api/conflicts/resolutions")
    assert response.status_code == 200
    assert set(response.json()) == {"teacher_conflict", "room_conflict", "student_conflict", "time_conflict"}
