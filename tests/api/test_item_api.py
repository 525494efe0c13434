"""Item catalog and game session API tests (TestClient)"""

from fastapi.testclient import TestClient

from src.core.tile_map import ITEM_SYMBOLS

OPEN_ROWS = ["." * 10 for _ in range(10)]


def _first_item_position(rows: list[str]) -> tuple[int, int]:
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile in ITEM_SYMBOLS:
                return x, y
    raise AssertionError("no item symbol on the map")


# ── Catalog ──────────────────────────────────────────────────


class TestCatalogAPI:
    def test_list_all(self, client: TestClient) -> None:
        resp = client.get("/items")
        assert resp.status_code == 200
        assert len(resp.json()) == 34

    def test_filter_by_type_any_case(self, client: TestClient) -> None:
        resp = client.get("/items", params={"type": "WEAPON"})
        data = resp.json()
        assert resp.status_code == 200
        assert len(data) == 9
        assert {i["kind"] for i in data} == {"weapon"}

    def test_unknown_type_is_empty(self, client: TestClient) -> None:
        resp = client.get("/items", params={"type": "potion"})
        assert resp.status_code == 200
        assert resp.json() == []

    def test_get_item(self, client: TestClient) -> None:
        resp = client.get("/items/sword_great")
        data = resp.json()
        assert resp.status_code == 200
        assert data["name"]
        assert data["kind"] == "weapon"
        assert data["details"]["two_handed"] is True

    def test_get_item_not_found(self, client: TestClient) -> None:
        resp = client.get("/items/nope")
        assert resp.status_code == 404


# ── Game session ─────────────────────────────────────────────


class TestGameAPI:
    def test_requires_level(self, client: TestClient) -> None:
        assert client.post("/game/pickup", json={"x": 0, "y": 0}).status_code == 400
        assert client.post("/game/equip", json={"inventory_index": 0}).status_code == 400
        assert client.get("/game/inventory").status_code == 400

    def test_start_level(self, client: TestClient) -> None:
        resp = client.post("/game/level", json={"rows": OPEN_ROWS})
        data = resp.json()

        assert resp.status_code == 200
        assert data["success"] is True
        assert 10 <= data["placed"] <= 40
        assert data["skipped"] == 0
        assert sum(data["symbol_counts"].values()) == data["placed"]
        assert len(data["rows"]) == 10

    def test_walls_keep_their_glyphs(self, client: TestClient) -> None:
        rows = ["#####", "#...#", "#####"]
        data = client.post("/game/level", json={"rows": rows, "player_x": 1, "player_y": 1}).json()
        for y, row in enumerate(data["rows"]):
            for x, tile in enumerate(row):
                if rows[y][x] == "#":
                    assert tile == "#"

    def test_blank_level_uses_configured_size(self, client: TestClient) -> None:
        data = client.post("/game/level", json={}).json()
        assert len(data["rows"]) == 40
        assert {len(r) for r in data["rows"]} == {80}
        assert data["placed"] >= 35

    def test_start_outside_map(self, client: TestClient) -> None:
        resp = client.post("/game/level", json={"rows": ["..."], "player_x": 5})
        assert resp.status_code == 400

    def test_empty_rows_rejected(self, client: TestClient) -> None:
        assert client.post("/game/level", json={"rows": []}).status_code == 422
        assert client.post("/game/level", json={"rows": [""]}).status_code == 400

    def test_pickup_equip_inventory_flow(self, client: TestClient) -> None:
        level = client.post("/game/level", json={"rows": OPEN_ROWS}).json()
        x, y = _first_item_position(level["rows"])

        picked = client.post("/game/pickup", json={"x": x, "y": y}).json()
        assert picked["success"] is True
        assert picked["outcome"] == "picked_up"
        assert picked["rows"][y][x] == "."
        assert picked["inventory"] == f"| INVENTORY: {picked['item']['name']}"

        equipped = client.post("/game/equip", json={"inventory_index": 0}).json()
        assert equipped["success"] is True
        assert equipped["outcome"] == "equipped"
        assert equipped["slot"]

        inventory = client.get("/game/inventory").json()
        assert inventory["text"] == picked["inventory"]
        assert [i["item_id"] for i in inventory["items"]] == [picked["item"]["item_id"]]
        assert inventory["total_weight"] == picked["item"]["weight"]

    def test_pickup_nothing(self, client: TestClient) -> None:
        client.post("/game/level", json={"rows": ["#.#"], "player_x": 1})
        # a single floor tile may hold an item; pick it up first
        client.post("/game/pickup", json={"x": 1, "y": 0})

        data = client.post("/game/pickup", json={"x": 1, "y": 0}).json()

        assert data["success"] is False
        assert data["outcome"] == "nothing_here"

    def test_pickup_outside_map(self, client: TestClient) -> None:
        client.post("/game/level", json={"rows": ["..."], "player_x": 2})

        resp = client.post("/game/pickup", json={"x": 9, "y": 9})

        assert resp.status_code == 400
        player = client.app.state.player
        assert (player.x, player.y) == (2, 0)

    def test_equip_bad_index(self, client: TestClient) -> None:
        client.post("/game/level", json={"rows": ["..."]})
        assert client.post("/game/equip", json={"inventory_index": 3}).status_code == 400
        assert client.post("/game/equip", json={"inventory_index": -1}).status_code == 422
