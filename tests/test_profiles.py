PROFILE = {
    "event_day": "mon",
    "event_time": "18:00",
    "gender": "male",
    "participant_number": 1,
    "phone_number": "010-1234-5678",
}


def test_options_list_valid_choices(client):
    body = client.get("/profiles/options").json()

    assert body["event_days"] == ["mon", "tue", "wed"]
    assert body["event_times"][0] == "18:00"
    assert body["event_times"][-1] == "22:00"
    assert len(body["event_times"]) == 9
    assert body["genders"] == ["male", "female"]
    assert body["participant_numbers"] == [1, 2, 3, 4, 5, 6]


def test_create_and_read_profile(client, login):
    headers = login("s1")

    created = client.post("/profiles", headers=headers, json=PROFILE)
    assert created.status_code == 201
    assert created.json()["student_id"] == "s1"

    mine = client.get("/profiles/me", headers=headers)
    assert mine.status_code == 200
    assert mine.json()["id"] == created.json()["id"]
    assert mine.json()["phone_number"] == "010-1234-5678"


def test_profile_cannot_be_saved_twice(client, login):
    headers = login("s1")
    client.post("/profiles", headers=headers, json=PROFILE)

    again = client.post("/profiles", headers=headers, json={**PROFILE, "participant_number": 2})
    assert again.status_code == 409
    assert again.json()["code"] == "PROFILE_ALREADY_EXISTS"


def test_seat_is_unique_per_slot_and_gender(client, login):
    client.post("/profiles", headers=login("s1"), json=PROFILE)

    taken = client.post("/profiles", headers=login("s2"), json=PROFILE)
    assert taken.status_code == 409
    assert taken.json()["code"] == "SEAT_TAKEN"

    other_gender = client.post("/profiles", headers=login("s3"), json={**PROFILE, "gender": "female"})
    assert other_gender.status_code == 201


def test_missing_profile(client, login):
    response = client.get("/profiles/me", headers=login("s1"))

    assert response.status_code == 404
    assert response.json()["code"] == "PROFILE_MISSING"


def test_invalid_choices_are_rejected(client, login):
    headers = login("s1")

    assert client.post("/profiles", headers=headers, json={**PROFILE, "event_day": "fri"}).status_code == 422
    assert client.post("/profiles", headers=headers, json={**PROFILE, "event_time": "17:30"}).status_code == 422
    assert client.post("/profiles", headers=headers, json={**PROFILE, "participant_number": 7}).status_code == 422
    assert client.post("/profiles", headers=headers, json={**PROFILE, "phone_number": " "}).status_code == 422


def test_profile_requires_login(client):
    assert client.post("/profiles", json=PROFILE).status_code == 401
