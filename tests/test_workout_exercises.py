import pytest

from models.workout import Workout


@pytest.fixture
def owner(register):
    return register(fullName="Owner")


@pytest.fixture
def workout(client, owner):
    r = client.post("/api/workouts", headers=owner[0], json={"planName": "Upper/Lower"})
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
def add(client, owner, workout, exercise):
    def _add(day=1, **extra):
        payload = {"workoutId": workout["id"], "exerciseId": exercise["id"], "dayNumber": day, **extra}
        r = client.post("/api/workout-exercises", headers=owner[0], json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _add


def test_create_returns_defaults_and_catalog_fields(add, workout, exercise):
    we = add(day=2, workoutName="Upper A")
    assert we["workout"] == workout["id"]
    assert we["dayNumber"] == 2
    assert we["workoutName"] == "Upper A"
    assert (we["sets"], we["reps"], we["restSeconds"]) == (3, 10, 60)
    assert we["exercise"]["id"] == exercise["id"]
    assert we["exercise"]["name"] == "Bench Press"
    assert we["exercise"]["category"] == "chest"
    assert we["exercise"]["video_url"] == "https://videos.fitmail.com/bench"


def test_create_accepts_string_ids(client, owner, workout, exercise):
    r = client.post(
        "/api/workout-exercises",
        headers=owner[0],
        json={"workoutId": str(workout["id"]), "exerciseId": str(exercise["id"]), "dayNumber": 1, "sets": 5},
    )
    assert r.status_code == 201
    assert r.json()["sets"] == 5


def test_create_checks_parent_and_exercise(client, owner, workout, exercise):
    headers = owner[0]
    r = client.post(
        "/api/workout-exercises",
        headers=headers,
        json={"workoutId": 999, "exerciseId": exercise["id"], "dayNumber": 1},
    )
    assert r.status_code == 404
    assert r.json() == {"message": "Workout not found"}

    r = client.post(
        "/api/workout-exercises",
        headers=headers,
        json={"workoutId": workout["id"], "exerciseId": "bogus", "dayNumber": 1},
    )
    assert r.status_code == 404
    assert r.json() == {"message": "Exercise not found"}


@pytest.mark.parametrize("payload", [{"dayNumber": 0}, {"sets": 0}, {"restSeconds": -1}])
def test_create_validation(client, owner, workout, exercise, payload):
    body = {"workoutId": workout["id"], "exerciseId": exercise["id"], "dayNumber": 1, **payload}
    assert client.post("/api/workout-exercises", headers=owner[0], json=body).status_code == 400


def test_other_users_workout_is_forbidden(client, register, workout, exercise, add):
    we = add()
    other, _ = register()

    r = client.post(
        "/api/workout-exercises",
        headers=other,
        json={"workoutId": workout["id"], "exerciseId": exercise["id"], "dayNumber": 1},
    )
    assert r.status_code == 403
    assert client.get(f"/api/workout-exercises/workout/{workout['id']}", headers=other).status_code == 403
    assert client.put(f"/api/workout-exercises/{we['id']}", headers=other, json={"sets": 1}).status_code == 403
    assert client.delete(f"/api/workout-exercises/{we['id']}", headers=other).status_code == 403
    assert client.delete(f"/api/workout-exercises/workout/{workout['id']}", headers=other).status_code == 403


def test_list_by_workout_and_day(client, owner, workout, add):
    first = add(day=2)
    second = add(day=1)
    third = add(day=2)

    r = client.get(f"/api/workout-exercises/workout/{workout['id']}", headers=owner[0])
    assert r.status_code == 200
    assert [we["id"] for we in r.json()] == [second["id"], first["id"], third["id"]]

    r = client.get(f"/api/workout-exercises/workout/{workout['id']}/day/2", headers=owner[0])
    assert [we["id"] for we in r.json()] == [first["id"], third["id"]]

    r = client.get(f"/api/workout-exercises/workout/{workout['id']}/day/5", headers=owner[0])
    assert r.json() == []


def test_list_rejects_bad_day(client, owner, workout):
    assert client.get(f"/api/workout-exercises/workout/{workout['id']}/day/0", headers=owner[0]).status_code == 400


def test_list_unknown_workout_is_404(client, owner):
    assert client.get("/api/workout-exercises/workout/abc", headers=owner[0]).status_code == 404
    assert client.get("/api/workout-exercises/workout/999", headers=owner[0]).status_code == 404


def test_update_partial_and_exercise_switch(client, owner, admin_headers, add):
    we = add(workoutName="Push")
    squat = client.post("/api/exercises", headers=admin_headers, json={"name": "Squat", "category": "legs"}).json()

    r = client.put(
        f"/api/workout-exercises/{we['id']}",
        headers=owner[0],
        json={"reps": 5, "exerciseId": squat["id"]},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["reps"] == 5
    assert body["sets"] == 3
    assert body["workoutName"] == "Push"
    assert body["exercise"]["name"] == "Squat"
    assert body["exercise"]["category"] == "legs"


def test_update_validation(client, owner, add):
    we = add()
    url = f"/api/workout-exercises/{we['id']}"
    assert client.put(url, headers=owner[0], json={"sets": None}).status_code == 400
    assert client.put(url, headers=owner[0], json={"dayNumber": 0}).status_code == 400
    assert client.put(url, headers=owner[0], json={"exerciseId": 999}).status_code == 404


@pytest.mark.parametrize("raw_id", ["999", "abc", "-3"])
@pytest.mark.parametrize("method, payload", [("put", {"sets": 4}), ("delete", None)])
def test_update_or_delete_missing_row_is_404(client, owner, raw_id, method, payload):
    kwargs = {"headers": owner[0]}
    if payload is not None:
        kwargs["json"] = payload
    r = client.request(method.upper(), f"/api/workout-exercises/{raw_id}", **kwargs)
    assert r.status_code == 404
    assert r.json() == {"message": "Workout exercise not found"}


@pytest.mark.parametrize("method", ["get", "delete"])
def test_workout_routes_with_missing_workout_are_404(client, owner, method):
    r = client.request(method.upper(), "/api/workout-exercises/workout/999", headers=owner[0])
    assert r.status_code == 404
    assert r.json() == {"message": "Workout not found"}
    r = client.get("/api/workout-exercises/workout/999/day/1", headers=owner[0])
    assert r.status_code == 404


def test_row_whose_workout_is_gone_is_404(client, db, owner, workout, add):
    we = add()
    # leave the row behind without its parent
    db.query(Workout).filter(Workout.id == workout["id"]).delete()
    db.commit()

    for r in (
        client.put(f"/api/workout-exercises/{we['id']}", headers=owner[0], json={"sets": 4}),
        client.delete(f"/api/workout-exercises/{we['id']}", headers=owner[0]),
    ):
        assert r.status_code == 404
        assert r.json() == {"message": "Associated workout not found"}


def test_delete_single(client, owner, workout, add):
    keep = add(day=1)
    gone = add(day=2)

    r = client.delete(f"/api/workout-exercises/{gone['id']}", headers=owner[0])
    assert r.status_code == 200
    assert r.json() == {"message": "Workout exercise removed"}

    remaining = client.get(f"/api/workout-exercises/workout/{workout['id']}", headers=owner[0]).json()
    assert [we["id"] for we in remaining] == [keep["id"]]
    assert client.delete(f"/api/workout-exercises/{gone['id']}", headers=owner[0]).status_code == 404


def test_delete_all_for_workout(client, owner, workout, add):
    add(day=1)
    add(day=3)

    r = client.delete(f"/api/workout-exercises/workout/{workout['id']}", headers=owner[0])
    assert r.status_code == 200
    assert r.json() == {"message": "All workout exercises removed"}
    assert client.get(f"/api/workout-exercises/workout/{workout['id']}", headers=owner[0]).json() == []
    # the workout itself survives
    assert client.get(f"/api/workouts/{workout['id']}", headers=owner[0]).status_code == 200
