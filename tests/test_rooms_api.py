"""
API tests for the room directory, claim and dashboard mutations.
"""

from sqlalchemy import func, select

from apartment.models import Interior, Room
from tests.conftest import ALIAS, LOGIN, TAKEN_ALIAS


class TestListRooms:
    async def test_lists_every_room(self, client, seed):
        resp = await client.get("/api/rooms")
        assert resp.status_code == 200
        rooms = resp.json()["rooms"]
        assert [r["roomNumber"] for r in rooms] == ["0000", "0007", "0008"]
        assert rooms[1] == {"roomNumber": "0007", "roomName": None, "isOccupied": False}

    async def test_empty_database(self, client):
        resp = await client.get("/api/rooms")
        assert resp.json() == {"rooms": []}


class TestClaimRoom:
    async def test_claim_unoccupied_room(self, client, seed):
        resp = await client.get(f"/api/rooms/{ALIAS}/claim")
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "roomNumber": "0007", "loginId": LOGIN}

    async def test_second_claim_is_rejected(self, client, seed):
        first = await client.get(f"/api/rooms/{ALIAS}/claim")
        second = await client.get(f"/api/rooms/{ALIAS}/claim")
        assert first.status_code == 200
        assert second.status_code == 400
        assert "error" in second.json()

    async def test_claim_seeds_one_interior_per_default_slot(self, client, seed, session):
        await client.get(f"/api/rooms/{ALIAS}/claim")
        room = (await session.execute(select(Room).where(Room.room_alias_id == ALIAS))).scalar_one()
        assert room.is_occupied is True

        rows = (await session.execute(select(Interior).where(Interior.room_id == room.id))).scalars().all()
        assert sorted(r.pattern_id for r in rows) == sorted(seed.patterns.values())

    async def test_rejected_claim_does_not_reseed(self, client, seed, session):
        await client.get(f"/api/rooms/{ALIAS}/claim")
        await client.get(f"/api/rooms/{ALIAS}/claim")
        count = (await session.execute(select(func.count(Interior.id)))).scalar_one()
        assert count == len(seed.patterns)

    async def test_claim_already_occupied_room(self, client, seed, session):
        resp = await client.get(f"/api/rooms/{TAKEN_ALIAS}/claim")
        assert resp.status_code == 400
        count = (await session.execute(select(func.count(Interior.id)))).scalar_one()
        assert count == 0

    async def test_claim_unknown_alias(self, client, seed):
        resp = await client.get("/api/rooms/nope/claim")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Room not found"}


class TestRoomDetail:
    async def test_detail_after_claim(self, client, claimed):
        resp = await client.get(f"/api/rooms/{ALIAS}")
        assert resp.status_code == 200
        body = resp.json()
        assert body["roomNumber"] == "0007"
        assert body["isOccupied"] is True
        assert body["playlists"] == []
        assert len(body["interiors"]) == 6
        assert body["interiors"][0] == {
            "type": "sofa",
            "typeName": "Sofa",
            "pattern": 1,
            "patternName": "Default",
        }

    async def test_by_login_has_same_shape(self, client, claimed):
        by_alias = (await client.get(f"/api/rooms/{ALIAS}")).json()
        by_login = (await client.get(f"/api/rooms/by-login/{LOGIN}")).json()
        assert by_alias == by_login

    async def test_unknown_alias(self, client, seed):
        resp = await client.get("/api/rooms/unknown")
        assert resp.status_code == 404

    async def test_unknown_login(self, client, seed):
        resp = await client.get("/api/rooms/by-login/unknown")
        assert resp.status_code == 404


class TestRenameRoom:
    async def test_rename(self, client, claimed):
        resp = await client.post("/api/rooms/name", json={"loginId": LOGIN, "roomName": "Lounge"})
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "roomName": "Lounge"}
        detail = (await client.get(f"/api/rooms/{ALIAS}")).json()
        assert detail["roomName"] == "Lounge"

    async def test_empty_name_is_allowed(self, client, claimed):
        await client.post("/api/rooms/name", json={"loginId": LOGIN, "roomName": "Lounge"})
        resp = await client.post("/api/rooms/name", json={"loginId": LOGIN, "roomName": ""})
        assert resp.status_code == 200
        detail = (await client.get(f"/api/rooms/{ALIAS}")).json()
        assert detail["roomName"] == ""

    async def test_missing_name_is_malformed(self, client, claimed):
        resp = await client.post("/api/rooms/name", json={"loginId": LOGIN})
        assert resp.status_code == 400
        assert "error" in resp.json()

    async def test_null_name_is_malformed(self, client, claimed):
        resp = await client.post("/api/rooms/name", json={"loginId": LOGIN, "roomName": None})
        assert resp.status_code == 400

    async def test_unknown_login(self, client, seed):
        resp = await client.post("/api/rooms/name", json={"loginId": "nope", "roomName": "x"})
        assert resp.status_code == 404


class TestSetInteriors:
    async def _interiors(self, client):
        return (await client.get(f"/api/rooms/{ALIAS}")).json()["interiors"]

    async def test_change_pattern_updates_in_place(self, client, claimed):
        resp = await client.post(
            "/api/rooms/interiors",
            json={"loginId": LOGIN, "interiors": [{"type": "sofa", "pattern": claimed.sofa_leather}]},
        )
        assert resp.status_code == 200
        assert resp.json() == {"success": True}

        interiors = await self._interiors(client)
        sofas = [i for i in interiors if i["type"] == "sofa"]
        assert sofas == [{"type": "sofa", "typeName": "Sofa", "pattern": 2, "patternName": "Leather"}]
        assert len(interiors) == 6

    async def test_same_entry_twice_leaves_one_row(self, client, claimed):
        body = {"loginId": LOGIN, "interiors": [{"type": "sofa", "pattern": claimed.sofa_leather}]}
        await client.post("/api/rooms/interiors", json=body)
        await client.post("/api/rooms/interiors", json=body)
        interiors = await self._interiors(client)
        assert len([i for i in interiors if i["type"] == "sofa"]) == 1

    async def test_invalid_entries_are_skipped(self, client, claimed):
        resp = await client.post(
            "/api/rooms/interiors",
            json={
                "loginId": LOGIN,
                "interiors": [
                    {"type": "fridge", "pattern": claimed.sofa_leather},
                    {"type": "bed", "pattern": claimed.sofa_leather},
                    {"type": "sofa", "pattern": 9999},
                    {"type": "sofa"},
                    "garbage",
                    {"type": "sofa", "pattern": claimed.sofa_leather},
                ],
            },
        )
        assert resp.status_code == 200
        interiors = await self._interiors(client)
        by_type = {i["type"]: i["pattern"] for i in interiors}
        assert by_type["sofa"] == 2
        assert by_type["bed"] == 1

    async def test_inserts_when_room_has_no_row_for_type(self, client, seed):
        resp = await client.post(
            "/api/rooms/interiors",
            json={"loginId": LOGIN, "interiors": [{"type": "lamp", "pattern": seed.patterns["lamp"]}]},
        )
        assert resp.status_code == 200
        interiors = await self._interiors(client)
        assert interiors == [{"type": "lamp", "typeName": "Lamp", "pattern": 1, "patternName": "Default"}]

    async def test_interiors_must_be_a_list(self, client, claimed):
        resp = await client.post("/api/rooms/interiors", json={"loginId": LOGIN, "interiors": "sofa"})
        assert resp.status_code == 400

    async def test_missing_login(self, client, claimed):
        resp = await client.post("/api/rooms/interiors", json={"interiors": []})
        assert resp.status_code == 400

    async def test_unknown_login(self, client, seed):
        resp = await client.post("/api/rooms/interiors", json={"loginId": "nope", "interiors": []})
        assert resp.status_code == 404


class TestPlaylists:
    async def _playlists(self, client):
        return (await client.get(f"/api/rooms/{ALIAS}")).json()["playlists"]

    async def test_replace_filters_and_keeps_order(self, client, claimed):
        urls = ["https://a.example/1", "", 42, None, "https://b.example/2", "https://a.example/1"]
        resp = await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": urls})
        assert resp.status_code == 200
        assert await self._playlists(client) == [
            "https://a.example/1",
            "https://b.example/2",
            "https://a.example/1",
        ]

    async def test_replace_overwrites_previous(self, client, claimed):
        await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": ["https://old"]})
        await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": ["https://new"]})
        assert await self._playlists(client) == ["https://new"]

    async def test_empty_list_clears(self, client, claimed):
        await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": ["https://old"]})
        await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": []})
        assert await self._playlists(client) == []

    async def test_malformed(self, client, claimed):
        resp = await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": {"a": 1}})
        assert resp.status_code == 400

    async def test_unknown_login(self, client, seed):
        resp = await client.post("/api/rooms/playlists", json={"loginId": "nope", "playlists": []})
        assert resp.status_code == 404


class TestPlaylistRedirect:
    async def test_redirects_to_url(self, client, claimed):
        urls = ["https://a.example/1", "https://b.example/2"]
        await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": urls})

        resp = await client.get(f"/api/{ALIAS}/playlist", params={"index": 1})
        assert resp.status_code == 302
        assert resp.headers["location"] == "https://b.example/2"

    async def test_index_out_of_range(self, client, claimed):
        await client.post("/api/rooms/playlists", json={"loginId": LOGIN, "playlists": ["https://a"]})
        assert (await client.get(f"/api/{ALIAS}/playlist", params={"index": 1})).status_code == 404
        assert (await client.get(f"/api/{ALIAS}/playlist", params={"index": -1})).status_code == 404

    async def test_empty_playlist(self, client, claimed):
        resp = await client.get(f"/api/{ALIAS}/playlist", params={"index": 0})
        assert resp.status_code == 404

    async def test_unknown_alias(self, client, seed):
        resp = await client.get("/api/nope/playlist", params={"index": 0})
        assert resp.status_code == 404

    async def test_non_integer_index(self, client, claimed):
        resp = await client.get(f"/api/{ALIAS}/playlist", params={"index": "first"})
        assert resp.status_code == 400
