"""
Noteful Backend — Folder Endpoint Tests
=========================================

What:  HTTP contract of /folders through the full app (middleware, handlers).
"""

import pytest


class TestListFolders:

    @pytest.mark.asyncio
    async def test_empty(self, test_client):
        response = await test_client.get("/folders")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_all_folders(self, test_client, seed, folders_array):
        await seed(folders=folders_array)
        response = await test_client.get("/folders")
        assert response.status_code == 200
        assert response.json() == folders_array

    @pytest.mark.asyncio
    async def test_removes_xss_from_stored_rows(self, test_client, seed):
        await seed(folders=[{"id": 1, "name": '<script>alert("xss");</script>Safe'}])
        response = await test_client.get("/folders")
        name = response.json()[0]["name"]
        assert "<script" not in name
        assert name.endswith("Safe")


class TestGetFolder:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("folder_id", ["123456", "abc", "0", "-2"])
    async def test_missing_or_malformed(self, test_client, folder_id):
        response = await test_client.get(f"/folders/{folder_id}")
        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Folder doesn't exist"}}

    @pytest.mark.asyncio
    async def test_existing(self, test_client, seed, folders_array):
        await seed(folders=folders_array)
        response = await test_client.get("/folders/2")
        assert response.status_code == 200
        assert response.json() == folders_array[1]


class TestCreateFolder:

    @pytest.mark.asyncio
    async def test_creates_folder(self, test_client):
        response = await test_client.post("/folders", json={"name": "Work"})

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Work"
        assert isinstance(body["id"], int)
        assert response.headers["location"] == f"/folders/{body['id']}"

        follow = await test_client.get(f"/folders/{body['id']}")
        assert follow.json() == body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": None}, {"title": "x"}])
    async def test_missing_name(self, test_client, payload):
        response = await test_client.post("/folders", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Missing 'name' in request body"}}

    @pytest.mark.asyncio
    async def test_no_body(self, test_client):
        response = await test_client.post("/folders")
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Missing 'name' in request body"}}

    @pytest.mark.asyncio
    async def test_malformed_json(self, test_client):
        response = await test_client.post(
            "/folders",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Request body must be a JSON object"}}

    @pytest.mark.asyncio
    async def test_name_too_long(self, test_client):
        response = await test_client.post("/folders", json={"name": "x" * 51})
        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "'name' must be at most 50 characters"}
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [123, True, ["x"], {"a": 1}])
    async def test_non_string_name_creates_nothing(self, test_client, name):
        response = await test_client.post("/folders", json={"name": name})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "'name' must be a string"}}
        assert (await test_client.get("/folders")).json() == []

    @pytest.mark.asyncio
    async def test_plain_text_name_stored_verbatim(self, test_client):
        name = "Tom & Jerry & " + "x" * 32
        assert len(name) == 46

        response = await test_client.post("/folders", json={"name": name})

        assert response.status_code == 201
        assert response.json()["name"] == name

    @pytest.mark.asyncio
    async def test_removes_xss_from_response(self, test_client):
        response = await test_client.post(
            "/folders", json={"name": "<script>x</script>Hi"}
        )
        assert response.status_code == 201
        assert "<script" not in response.json()["name"]

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, test_client):
        ids = set()
        for name in ("A", "B", "C"):
            response = await test_client.post("/folders", json={"name": name})
            ids.add(response.json()["id"])
        assert len(ids) == 3


class TestUpdateFolder:

    @pytest.mark.asyncio
    async def test_missing_folder_with_empty_body_is_404(self, test_client):
        response = await test_client.patch("/folders/123456", json={})
        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Folder doesn't exist"}}

    @pytest.mark.asyncio
    async def test_updates_folder(self, test_client, seed, folders_array):
        await seed(folders=folders_array)

        response = await test_client.patch(
            "/folders/2",
            json={"name": "Renamed", "fieldToIgnore": "should not be in GET response"},
        )

        assert response.status_code == 204
        assert response.content == b""
        follow = await test_client.get("/folders/2")
        assert follow.json() == {"id": 2, "name": "Renamed"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"irrelevantField": "foo"}])
    async def test_no_recognized_field(self, test_client, seed, folders_array, payload):
        await seed(folders=folders_array)
        response = await test_client.patch("/folders/2", json=payload)
        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "Request body must content either 'name'"}
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [42, ["x"]])
    async def test_non_string_name_leaves_folder_unchanged(
        self, test_client, seed, folders_array, name
    ):
        await seed(folders=folders_array)
        before = (await test_client.get("/folders/2")).json()

        response = await test_client.patch("/folders/2", json={"name": name})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "'name' must be a string"}}
        assert (await test_client.get("/folders/2")).json() == before


class TestDeleteFolder:

    @pytest.mark.asyncio
    async def test_missing(self, test_client):
        response = await test_client.delete("/folders/123456")
        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Folder doesn't exist"}}

    @pytest.mark.asyncio
    async def test_removes_folder(self, test_client, seed, folders_array):
        await seed(folders=folders_array)

        response = await test_client.delete("/folders/2")

        assert response.status_code == 204
        follow = await test_client.get("/folders")
        assert follow.json() == [f for f in folders_array if f["id"] != 2]

    @pytest.mark.asyncio
    async def test_removes_folder_notes(self, test_client, seed, folders_array):
        await seed(
            folders=folders_array,
            notes=[
                {"id": n, "folder_id": 1 if n < 4 else 3, "name": f"n{n}",
                 "content": "c", "time_modified": 1}
                for n in range(1, 6)
            ],
        )

        response = await test_client.delete("/folders/1")

        assert response.status_code == 204
        notes = (await test_client.get("/notes")).json()
        assert [n["id"] for n in notes] == [4, 5]
        assert (await test_client.get("/notes/1")).status_code == 404


class TestCrossCutting:

    @pytest.mark.asyncio
    async def test_request_id_header(self, test_client):
        response = await test_client.get("/folders")
        assert response.headers.get("x-request-id")

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/folders", headers={"X-Request-ID": "abc123"})
        assert response.headers["x-request-id"] == "abc123"

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
