from starlette.datastructures import UploadFile

from mentor_match.config import get_settings
from mentor_match.models import User, UserRole

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 32


def test_me_for_mentor_includes_skills(client, make_user, auth_headers):
    mentor = make_user(UserRole.MENTOR, name="Lee", bio="Senior dev", skills=["React", "AWS"])

    response = client.get("/api/me", headers=auth_headers(mentor))

    assert response.status_code == 200
    assert response.json() == {
        "id": mentor.id,
        "email": mentor.email,
        "role": "mentor",
        "profile": {
            "name": "Lee",
            "bio": "Senior dev",
            "imageUrl": "/public/images/default-mentor.png",
            "skills": ["React", "AWS"],
        },
    }


def test_me_for_mentee_has_empty_bio_and_skills(client, make_user, auth_headers):
    mentee = make_user(UserRole.MENTEE)

    profile = client.get("/api/me", headers=auth_headers(mentee)).json()["profile"]

    assert profile["bio"] == ""
    assert profile["skills"] == []
    assert profile["imageUrl"] == "/public/images/default-mentee.png"


def test_update_profile(client, db, make_user, auth_headers):
    mentor = make_user(UserRole.MENTOR)

    response = client.put(
        "/api/me",
        json={"name": "  New Name ", "bio": "Ten years of Python", "skills": ["Python", "Django"]},
        headers=auth_headers(mentor),
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Profile updated successfully"}
    profile = client.get("/api/me", headers=auth_headers(mentor)).json()["profile"]
    assert profile["name"] == "New Name"
    assert profile["bio"] == "Ten years of Python"
    assert profile["skills"] == ["Python", "Django"]


def test_partial_update_keeps_other_fields(client, make_user, auth_headers):
    mentor = make_user(UserRole.MENTOR, name="Keep", bio="Old bio", skills=["Go"])

    client.put("/api/me", json={"bio": "New bio"}, headers=auth_headers(mentor))

    profile = client.get("/api/me", headers=auth_headers(mentor)).json()["profile"]
    assert profile["name"] == "Keep"
    assert profile["bio"] == "New bio"
    assert profile["skills"] == ["Go"]


def test_mentee_skills_are_ignored(client, db, make_user, auth_headers):
    mentee = make_user(UserRole.MENTEE)

    response = client.put("/api/me", json={"skills": ["Python"]}, headers=auth_headers(mentee))

    assert response.status_code == 200
    db.expire_all()
    assert db.get(User, mentee.id).skills is None


def test_role_cannot_be_changed_through_update(client, db, make_user, auth_headers):
    mentee = make_user(UserRole.MENTEE)

    client.put("/api/me", json={"role": "mentor", "name": "Still Mentee"}, headers=auth_headers(mentee))

    db.expire_all()
    assert db.get(User, mentee.id).role == "mentee"


def test_update_rejects_blank_name_and_bad_skills(client, make_user, auth_headers):
    mentor = make_user(UserRole.MENTOR)
    headers = auth_headers(mentor)

    assert client.put("/api/me", json={"name": "   "}, headers=headers).status_code == 400
    assert client.put("/api/me", json={"skills": "Python"}, headers=headers).status_code == 400


def test_upload_png_and_fetch_it(client, make_user, auth_headers):
    mentee = make_user(UserRole.MENTEE)

    response = client.post(
        "/api/me/image",
        files={"image": ("avatar.png", PNG_BYTES, "image/png")},
        headers=auth_headers(mentee),
    )

    assert response.status_code == 200
    image_url = f"/api/images/mentee/{mentee.id}"
    assert response.json() == {"message": "Image uploaded successfully", "imageUrl": image_url}

    image = client.get(image_url)
    assert image.status_code == 200
    assert image.headers["content-type"] == "image/png"
    assert image.content == PNG_BYTES

    profile = client.get("/api/me", headers=auth_headers(mentee)).json()["profile"]
    assert profile["imageUrl"] == image_url


def test_upload_jpeg(client, make_user, auth_headers):
    mentor = make_user(UserRole.MENTOR)
    response = client.post(
        "/api/me/image",
        files={"image": ("avatar.jpg", JPEG_BYTES, "image/jpeg")},
        headers=auth_headers(mentor),
    )
    assert response.status_code == 200


def test_upload_rejections(client, make_user, auth_headers):
    mentee = make_user(UserRole.MENTEE)
    headers = auth_headers(mentee)

    missing = client.post("/api/me/image", data={"other": "x"}, headers=headers)
    assert missing.status_code == 400

    wrong_type = client.post(
        "/api/me/image", files={"image": ("a.gif", b"GIF89a", "image/gif")}, headers=headers
    )
    assert wrong_type.status_code == 400
    assert wrong_type.json()["detail"] == "Only JPG and PNG files are allowed"

    spoofed = client.post(
        "/api/me/image", files={"image": ("a.png", b"not really a png", "image/png")}, headers=headers
    )
    assert spoofed.status_code == 400
    assert spoofed.json()["detail"] == "Invalid image format"

    too_big = client.post(
        "/api/me/image",
        files={"image": ("big.png", PNG_BYTES + b"\x00" * (1024 * 1024), "image/png")},
        headers=headers,
    )
    assert too_big.status_code == 400



def test_upload_reads_at_most_one_byte_past_limit(client, make_user, auth_headers, monkeypatch):
    mentee = make_user(UserRole.MENTEE)
    limit = get_settings().MAX_IMAGE_SIZE_BYTES
    requested_sizes = []
    original_read = UploadFile.read

    async def recording_read(self, size=-1):
        requested_sizes.append(size)
        return await original_read(self, size)

    monkeypatch.setattr(UploadFile, "read", recording_read)

    response = client.post(
        "/api/me/image",
        files={"image": ("big.png", PNG_BYTES + b"\x00" * (2 * limit), "image/png")},
        headers=auth_headers(mentee),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Image must be 1MB or smaller"
    assert requested_sizes == [limit + 1]


def test_upload_requires_authentication(client):
    response = client.post("/api/me/image", files={"image": ("a.png", PNG_BYTES, "image/png")})
    assert response.status_code == 401


def test_image_without_upload_redirects_to_default(client, make_user):
    mentor = make_user(UserRole.MENTOR)

    response = client.get(f"/api/images/mentor/{mentor.id}", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/public/images/default-mentor.png"

    default = client.get(f"/api/images/mentor/{mentor.id}")
    assert default.status_code == 200
    assert default.content.startswith(b"\x89PNG")


def test_image_lookup_errors(client, make_user):
    mentor = make_user(UserRole.MENTOR)

    assert client.get(f"/api/images/admin/{mentor.id}").status_code == 400
    assert client.get(f"/api/images/mentee/{mentor.id}").status_code == 404
    assert client.get("/api/images/mentor/9999").status_code == 404
