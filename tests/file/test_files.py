import json
from datetime import datetime

from portfolio.models import File

API = "/api"


def test_create_file_requires_name_url_and_key(client, admin_headers):
    response = client.post(f"{API}/admin/files", json={"name": "x", "url": "https://cdn.test/x"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Name, URL, and key are required"


def test_create_file_records_uploader_and_text_size(client, admin_headers, admin_user, make_file):
    file = make_file()
    assert file["uploadedBy"] == str(admin_user.id)
    assert file["size"] == "2048"
    assert file["mimeType"] == "image/jpeg"
    assert file["metadata"] is None


def test_create_file_with_unknown_category_is_rejected(client, admin_headers):
    response = client.post(
        f"{API}/admin/files",
        json={"name": "x", "url": "u", "key": "k", "categoryId": "00000000-0000-0000-0000-000000000000"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_list_files_filters_by_category_and_embeds_it(client, admin_headers, make_category, make_file):
    category = make_category("Macro")
    inside = make_file(category_id=category["id"])
    make_file()

    response = client.get(f"{API}/admin/files", params={"categoryId": category["id"]}, headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert [f["id"] for f in body] == [inside["id"]]
    assert body[0]["category"]["slug"] == "macro"


def test_get_file(client, admin_headers, make_file):
    file = make_file()
    response = client.get(f"{API}/admin/files/{file['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["key"] == file["key"]


def test_get_missing_file(client, admin_headers):
    response = client.get(f"{API}/admin/files/00000000-0000-0000-0000-000000000000", headers=admin_headers)
    assert response.status_code == 404


def test_patch_is_partial(client, admin_headers, make_category, make_file):
    category = make_category("Travel")
    file = make_file(category_id=category["id"])

    response = client.patch(
        f"{API}/admin/files/{file['id']}",
        json={"location": "Reykjavik", "capturedAt": "2024-06-01T21:30:00"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["location"] == "Reykjavik"
    assert body["capturedAt"] == "2024-06-01T21:30:00Z"
    assert body["name"] == file["name"]
    assert body["categoryId"] == category["id"]


def test_patch_can_clear_category(client, admin_headers, make_category, make_file):
    category = make_category("Temp")
    file = make_file(category_id=category["id"])
    response = client.patch(f"{API}/admin/files/{file['id']}", json={"categoryId": ""}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["categoryId"] is None
    assert response.json()["category"] is None


def test_metadata_round_trip(client, admin_headers, make_file):
    file = make_file()
    response = client.patch(
        f"{API}/admin/files/{file['id']}",
        json={"metadata": json.dumps({"tags": ["a", "b"]})},
        headers=admin_headers,
    )
    assert response.status_code == 200

    fetched = client.get(f"{API}/admin/files/{file['id']}", headers=admin_headers).json()
    assert json.loads(fetched["metadata"]) == {"tags": ["a", "b"]}


def test_invalid_metadata_is_rejected(client, admin_headers, make_file):
    file = make_file()
    response = client.patch(
        f"{API}/admin/files/{file['id']}",
        json={"metadata": '{"tags": "not-a-list"}'},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_patch_missing_file(client, admin_headers):
    response = client.patch(
        f"{API}/admin/files/00000000-0000-0000-0000-000000000000",
        json={"name": "x"},
        headers=admin_headers,
    )
    assert response.status_code == 404


def test_delete_removes_object_before_row(client, admin_headers, storage, session_factory, make_file):
    file = make_file(key="sunset.jpg")
    row_present_during_delete = []

    def check_row(key):
        session = session_factory()
        try:
            row_present_during_delete.append(session.query(File).filter(File.key == key).count() == 1)
        finally:
            session.close()

    storage.on_delete = check_row
    response = client.delete(f"{API}/admin/files/{file['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert storage.deleted_keys == ["sunset.jpg"]
    assert row_present_during_delete == [True]
    assert client.get(f"{API}/admin/files", headers=admin_headers).json() == []


def test_delete_by_query_parameter(client, admin_headers, storage, make_file):
    file = make_file(key="q.jpg")
    response = client.delete(f"{API}/admin/files", params={"id": file["id"]}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert storage.deleted_keys == ["q.jpg"]


def test_delete_missing_file_skips_storage(client, admin_headers, storage):
    response = client.delete(f"{API}/admin/files/00000000-0000-0000-0000-000000000000", headers=admin_headers)
    assert response.status_code == 404
    assert storage.deleted_keys == []


def test_storage_failure_keeps_the_row(client, admin_headers, storage, make_file):
    file = make_file()
    storage.fail_deletes = True
    response = client.delete(f"{API}/admin/files/{file['id']}", headers=admin_headers)
    assert response.status_code == 500
    assert client.get(f"{API}/admin/files/{file['id']}", headers=admin_headers).status_code == 200


def test_deleting_featured_image_nulls_page_reference(client, admin_headers, make_file):
    file = make_file()
    page = client.post(
        f"{API}/admin/pages",
        json={"title": "About", "featuredImageId": file["id"]},
        headers=admin_headers,
    ).json()
    assert page["featuredImage"]["id"] == file["id"]

    assert client.delete(f"{API}/admin/files/{file['id']}", headers=admin_headers).status_code == 200

    pages = client.get(f"{API}/admin/pages", headers=admin_headers).json()
    assert [p["id"] for p in pages] == [page["id"]]
    assert pages[0]["featuredImage"] is None
    assert pages[0]["featuredImageId"] is None


def test_deleting_featured_image_nulls_blog_reference(client, admin_headers, make_file):
    file = make_file()
    post = client.post(
        f"{API}/admin/blog",
        json={"title": "Iceland", "featuredImageId": file["id"]},
        headers=admin_headers,
    ).json()

    client.delete(f"{API}/admin/files/{file['id']}", headers=admin_headers)

    posts = client.get(f"{API}/admin/blog", headers=admin_headers).json()
    assert [p["id"] for p in posts] == [post["id"]]
    assert posts[0]["featuredImage"] is None


def test_list_files_newest_first(client, admin_headers, make_file, set_created_at):
    first = make_file(name="First")
    second = make_file(name="Second")
    third = make_file(name="Third")
    set_created_at(File, first["id"], datetime(2024, 3, 1))
    set_created_at(File, second["id"], datetime(2024, 1, 1))
    set_created_at(File, third["id"], datetime(2024, 2, 1))

    names = [f["name"] for f in client.get(f"{API}/admin/files", headers=admin_headers).json()]
    assert names == ["First", "Third", "Second"]


def test_captured_at_offset_is_stored_as_utc(client, admin_headers, make_file):
    file = make_file()
    response = client.patch(
        f"{API}/admin/files/{file['id']}",
        json={"capturedAt": "2024-06-01T23:30:00+02:00"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["capturedAt"] == "2024-06-01T21:30:00Z"
    assert response.json()["createdAt"].endswith("Z")
