"""Resource APIs shape the right path, verb and body."""

import json

import pytest

from lovenest.models import Bucketlist, EventList, JournalPage, MemoryPage, WishlistItems


@pytest.mark.asyncio
async def test_memories(client, server, tmp_path):
    server.on("GET", "/memories", body={
        "memories": [{"_id": "m1", "type": "video", "url": "https://cdn/m1.mp4", "caption": "Us",
                      "dateTaken": "2024-02-14", "uploadedBy": {"displayName": "Alice"}}],
        "pagination": {"page": 1, "total": 21, "pages": 2},
    })
    server.on("GET", "/memories/m1", body={"memory": {"_id": "m1"}})
    server.on("POST", "/memories", status=201, body={"memory": {"_id": "m2"}})
    server.on("PUT", "/memories/m1", body={"memory": {"_id": "m1"}})
    server.on("DELETE", "/memories/m1", body={"message": "Memory deleted"})

    await client.memories.list()
    assert server.last.url.query == b""

    page = await client.memories.list(page=1, limit=20, type="video")
    assert dict(server.last.url.params) == {"page": "1", "limit": "20", "type": "video"}
    parsed = MemoryPage.model_validate(page)
    assert parsed.memories[0].uploaded_by.display_name == "Alice"
    assert parsed.pagination.has_more

    await client.memories.get("m1")
    assert server.last.url.path == "/api/memories/m1"

    clip = tmp_path / "clip.mp4"
    clip.write_bytes(b"0000")
    await client.memories.upload(clip, caption="Dance", date_taken="2024-03-01")
    assert server.last.method == "POST"
    assert b'name="dateTaken"' in server.last.content
    assert b'name="file"; filename="clip.mp4"' in server.last.content

    await client.memories.update("m1", caption="New", tags=["trip"])
    assert server.last_json() == {"caption": "New", "tags": ["trip"]}

    await client.memories.delete("m1")
    assert server.last.method == "DELETE"
    await client.close()


@pytest.mark.asyncio
async def test_events(client, server):
    server.on("GET", "/events", body={"events": [
        {"_id": "e1", "title": "Dinner", "date": "2024-02-14T00:00:00.000Z", "time": "19:00", "eventType": "date"},
    ]})
    server.on("GET", "/events/upcoming", body={"events": []})
    server.on("POST", "/events", status=201, body={"event": {}})
    server.on("PUT", "/events/e1", body={"event": {}})

    result = await client.events.list(month=2, year=2024)
    assert dict(server.last.url.params) == {"month": "2", "year": "2024"}
    assert EventList.model_validate(result).events[0].event_type == "date"

    await client.events.upcoming()
    assert dict(server.last.url.params) == {"limit": "5"}

    await client.events.create("Dinner", "2024-02-14", time="19:00", is_all_day=False, event_type="date")
    assert server.last_json() == {"title": "Dinner", "date": "2024-02-14", "time": "19:00",
                                  "isAllDay": False, "eventType": "date"}

    await client.events.update("e1", location="Paris", is_recurring=True)
    assert server.last_json() == {"location": "Paris", "isRecurring": True}
    await client.close()


@pytest.mark.asyncio
async def test_wishlist(client, server, tmp_path):
    items = {"items": [{"_id": "w1", "title": "Lamp", "priority": "high", "isFulfilled": False,
                        "userId": {"_id": "u2", "displayName": "Bob"}}]}
    server.on("GET", "/wishlist", body=items)
    server.on("GET", "/wishlist/mine", body={"items": []})
    server.on("GET", "/wishlist/partner", body=items)
    server.on("POST", "/wishlist", status=201, body={"item": {}})
    server.on("PUT", "/wishlist/w1", body={"item": {}})
    server.on("POST", "/wishlist/w1/fulfill", body={"item": {}})
    server.on("POST", "/wishlist/w1/unfulfill", body={"item": {}})

    await client.wishlist.list_all()
    await client.wishlist.mine()
    partner = WishlistItems.model_validate(await client.wishlist.partner())
    assert partner.items[0].user_id.display_name == "Bob"

    await client.wishlist.add("Lamp", image_url="https://img/lamp.png", priority="high")
    assert server.last.headers["Content-Type"] == "application/json"
    assert server.last_json() == {"title": "Lamp", "imageUrl": "https://img/lamp.png", "priority": "high"}

    picture = tmp_path / "lamp.png"
    picture.write_bytes(b"png")
    await client.wishlist.add_with_image("Lamp", picture, priority="low")
    assert server.last.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="image"; filename="lamp.png"' in server.last.content

    await client.wishlist.update_with_image("w1", picture, title="Blue lamp")
    assert server.last.method == "PUT"
    assert server.last.headers["Content-Type"].startswith("multipart/form-data")

    await client.wishlist.update("w1", title="Red lamp")
    assert server.last_json() == {"title": "Red lamp"}

    await client.wishlist.fulfill("w1")
    assert server.last.url.path == "/api/wishlist/w1/fulfill"
    await client.wishlist.unfulfill("w1")
    assert server.last.url.path == "/api/wishlist/w1/unfulfill"
    await client.close()


@pytest.mark.asyncio
async def test_bucketlist(client, server):
    server.on("GET", "/bucketlist", body={
        "items": [{"_id": "b1", "title": "Paris", "type": "shared", "isCompleted": True}],
        "stats": {"total": 4, "completed": 1, "progress": 25},
    })
    server.on("GET", "/bucketlist/personal", body={"items": []})
    server.on("GET", "/bucketlist/shared", body={"items": []})
    server.on("POST", "/bucketlist", status=201, body={"item": {}})
    server.on("POST", "/bucketlist/b1/complete", body={"item": {}})
    server.on("POST", "/bucketlist/b1/uncomplete", body={"item": {}})
    server.on("DELETE", "/bucketlist/b1", body={})

    data = Bucketlist.model_validate(await client.bucketlist.list())
    assert data.stats.progress == 25
    assert data.items[0].is_completed

    await client.bucketlist.personal()
    await client.bucketlist.shared()
    await client.bucketlist.add("Paris", type="shared", target_date="2025-06-01")
    assert server.last_json() == {"title": "Paris", "type": "shared", "targetDate": "2025-06-01"}

    await client.bucketlist.complete("b1")
    await client.bucketlist.uncomplete("b1")
    await client.bucketlist.delete("b1")
    assert [(r.method, r.url.path) for r in server.requests[-3:]] == [
        ("POST", "/api/bucketlist/b1/complete"),
        ("POST", "/api/bucketlist/b1/uncomplete"),
        ("DELETE", "/api/bucketlist/b1"),
    ]
    await client.close()


@pytest.mark.asyncio
async def test_journal(client, server):
    server.on("GET", "/journal", body={"entries": [
        {"_id": "j1", "title": "Today", "content": "...", "mood": "love", "moodScale": 9,
         "authorId": {"_id": "u1", "displayName": "Alice"}},
    ]})
    server.on("POST", "/journal", status=201, body={"entry": {}})
    server.on("PUT", "/journal/j1", body={"entry": {}})

    page = JournalPage.model_validate(await client.journal.list(limit=50))
    assert dict(server.last.url.params) == {"limit": "50"}
    assert page.entries[0].author_id.display_name == "Alice"

    await client.journal.create("Today", "We cooked", mood="happy", mood_emoji="🍝")
    assert server.last_json() == {"title": "Today", "content": "We cooked", "mood": "happy", "moodEmoji": "🍝"}

    await client.journal.update("j1", mood_scale=7)
    assert json.loads(server.last.content) == {"moodScale": 7}
    await client.close()
