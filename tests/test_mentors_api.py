import pytest

from mentor_match.models import UserRole


@pytest.fixture
def mentors(make_user):
    return [
        make_user(UserRole.MENTOR, name="Charlie", skills=["Python", "Django"]),
        make_user(UserRole.MENTOR, name="alice", bio="Frontend lead", skills=["React", "TypeScript"]),
        make_user(UserRole.MENTOR, name="Bob", skills=["AWS", "Python"]),
    ]


def _names(response):
    assert response.status_code == 200
    return [mentor["name"] for mentor in response.json()]


def test_lists_mentors_sorted_by_name(client, make_user, auth_headers, mentors):
    mentee = make_user(UserRole.MENTEE)

    response = client.get("/api/mentors", headers=auth_headers(mentee))

    assert _names(response) == ["alice", "Bob", "Charlie"]
    alice = response.json()[0]
    assert alice == {
        "id": mentors[1].id,
        "name": "alice",
        "bio": "Frontend lead",
        "imageUrl": "/public/images/default-mentor.png",
        "skills": ["React", "TypeScript"],
    }


def test_mentees_are_not_listed(client, make_user, auth_headers, mentors):
    mentee = make_user(UserRole.MENTEE, name="Aaron")
    assert "Aaron" not in _names(client.get("/api/mentors", headers=auth_headers(mentee)))


def test_sort_descending(client, make_user, auth_headers, mentors):
    mentee = make_user(UserRole.MENTEE)
    response = client.get("/api/mentors", params={"sortOrder": "desc"}, headers=auth_headers(mentee))
    assert _names(response) == ["Charlie", "Bob", "alice"]


def test_sort_by_skills(client, make_user, auth_headers, mentors):
    mentee = make_user(UserRole.MENTEE)
    response = client.get("/api/mentors", params={"sortBy": "skills"}, headers=auth_headers(mentee))
    assert _names(response) == ["Bob", "Charlie", "alice"]


def test_filter_by_skill_is_case_insensitive_substring(client, make_user, auth_headers, mentors):
    mentee = make_user(UserRole.MENTEE)
    response = client.get("/api/mentors", params={"skill": "pyth"}, headers=auth_headers(mentee))
    assert _names(response) == ["Bob", "Charlie"]


def test_filter_without_matches(client, make_user, auth_headers, mentors):
    mentee = make_user(UserRole.MENTEE)
    response = client.get("/api/mentors", params={"skill": "cobol"}, headers=auth_headers(mentee))
    assert response.json() == []


def test_invalid_sort_options(client, make_user, auth_headers):
    mentee = make_user(UserRole.MENTEE)
    headers = auth_headers(mentee)
    assert client.get("/api/mentors", params={"sortBy": "age"}, headers=headers).status_code == 400
    assert client.get("/api/mentors", params={"sortOrder": "up"}, headers=headers).status_code == 400


def test_mentor_cannot_list_mentors(client, make_user, auth_headers):
    mentor = make_user(UserRole.MENTOR)
    assert client.get("/api/mentors", headers=auth_headers(mentor)).status_code == 403


def test_listing_requires_authentication(client):
    assert client.get("/api/mentors").status_code == 401


def test_malformed_stored_skills_list_as_empty(client, db, make_user, auth_headers):
    mentor = make_user(UserRole.MENTOR, name="Broken")
    mentor.skills = "{oops"
    db.commit()
    mentee = make_user(UserRole.MENTEE)

    [item] = client.get("/api/mentors", headers=auth_headers(mentee)).json()
    assert item["skills"] == []
