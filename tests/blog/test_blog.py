from datetime import datetime

import pytest

from portfolio.models import BlogPost
from portfolio.services import blog_service

API = "/api"


@pytest.fixture
def clock(monkeypatch):
    """Makes utcnow() inside the blog service return controlled times."""
    times = []

    def fake_utcnow():
        return times.pop(0)

    monkeypatch.setattr(blog_service, "utcnow", fake_utcnow)
    return times


def create_post(client, headers, **fields):
    response = client.post(f"{API}/admin/blog", json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_published_post_gets_published_at(client, admin_headers):
    post = create_post(client, admin_headers, title="Live", published=True)
    assert post["publishedAt"] is not None


def test_draft_has_no_published_at(client, admin_headers):
    post = create_post(client, admin_headers, title="Draft")
    assert post["published"] is False
    assert post["publishedAt"] is None


def test_publishing_later_stamps_toggle_time(client, admin_headers, clock):
    toggle_time = datetime(2030, 5, 1, 12, 0, 0)
    post = create_post(client, admin_headers, title="Later")

    clock.extend([toggle_time, toggle_time])
    response = client.put(
        f"{API}/admin/blog",
        json={"id": post["id"], "title": "Later", "published": True},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["publishedAt"] == "2030-05-01T12:00:00Z"


def test_republishing_restamps_and_editing_keeps_stamp(client, admin_headers, clock):
    first = datetime(2030, 1, 1, 9, 0, 0)
    edit = datetime(2030, 1, 2, 9, 0, 0)
    unpublish = datetime(2030, 1, 3, 9, 0, 0)
    second = datetime(2030, 1, 4, 9, 0, 0)

    clock.append(first)
    post = create_post(client, admin_headers, title="Cycle", published=True)
    assert post["publishedAt"] == "2030-01-01T09:00:00Z"

    clock.append(edit)  # only updatedAt is stamped
    edited = client.put(
        f"{API}/admin/blog",
        json={"id": post["id"], "title": "Cycle", "content": "Edited", "published": True},
        headers=admin_headers,
    ).json()
    assert edited["publishedAt"] == "2030-01-01T09:00:00Z"

    clock.append(unpublish)
    hidden = client.put(
        f"{API}/admin/blog",
        json={"id": post["id"], "title": "Cycle", "published": False},
        headers=admin_headers,
    ).json()
    assert hidden["publishedAt"] is None

    clock.extend([second, second])
    again = client.put(
        f"{API}/admin/blog",
        json={"id": post["id"], "title": "Cycle", "published": True},
        headers=admin_headers,
    ).json()
    assert again["publishedAt"] == "2030-01-04T09:00:00Z"


def test_admin_list_includes_author_email(client, admin_headers, admin_user):
    create_post(client, admin_headers, title="Mine")
    posts = client.get(f"{API}/admin/blog", headers=admin_headers).json()
    assert posts[0]["author"] == {
        "id": str(admin_user.id),
        "displayName": "Admin User",
        "email": "admin@example.com",
    }


def test_public_blog_only_lists_published(client, admin_headers):
    create_post(client, admin_headers, title="Public One", published=True)
    create_post(client, admin_headers, title="Secret")

    posts = client.get(f"{API}/public/blog").json()
    assert [p["slug"] for p in posts] == ["public-one"]
    assert "email" not in posts[0]["author"]


def test_public_blog_orders_by_published_at(client, admin_headers, clock):
    clock.append(datetime(2030, 1, 1))
    create_post(client, admin_headers, title="Older", published=True)
    clock.append(datetime(2030, 2, 1))
    create_post(client, admin_headers, title="Newer", published=True)

    assert [p["slug"] for p in client.get(f"{API}/public/blog").json()] == ["newer", "older"]


def test_unpublished_slug_is_not_found(client, admin_headers):
    create_post(client, admin_headers, title="Secret")
    response = client.get(f"{API}/public/blog", params={"slug": "secret"})
    assert response.status_code == 404
    assert response.json()["error"] == "Post not found"


def test_published_slug_lookup(client, admin_headers):
    create_post(client, admin_headers, title="Hello World", published=True, excerpt="Hi")
    post = client.get(f"{API}/public/blog", params={"slug": "hello-world"}).json()
    assert post["excerpt"] == "Hi"


def test_delete_post(client, admin_headers):
    post = create_post(client, admin_headers, title="Bye")
    assert client.delete(f"{API}/admin/blog", params={"id": post["id"]}, headers=admin_headers).status_code == 200
    assert client.get(f"{API}/admin/blog", headers=admin_headers).json() == []


def test_admin_list_newest_first(client, admin_headers, set_created_at):
    first = create_post(client, admin_headers, title="First")
    second = create_post(client, admin_headers, title="Second")
    third = create_post(client, admin_headers, title="Third")
    set_created_at(BlogPost, first["id"], datetime(2024, 3, 1))
    set_created_at(BlogPost, second["id"], datetime(2024, 1, 1))
    set_created_at(BlogPost, third["id"], datetime(2024, 2, 1))

    titles = [p["title"] for p in client.get(f"{API}/admin/blog", headers=admin_headers).json()]
    assert titles == ["First", "Third", "Second"]
