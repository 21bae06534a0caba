import pytest
from httpx import AsyncClient

from tests.utils.auth_client import API
from tests.utils.todo_compare import without_generated


async def create_todos(client: AsyncClient, headers: dict, todos: list) -> list:
    created = []
    for todo in todos:
        response = await client.post(f"{API}/todos", json=todo, headers=headers)
        assert response.status_code == 201
        created.append(response.json())
    return created


@pytest.mark.asyncio
async def test_create_todo(client: AsyncClient, alice, test_data):
    """
    Given an empty list
    When I create a todo
    Then it starts at the initial position and is not completed
    """
    response = await client.post(f"{API}/todos", json={"description": "Buy milk"}, headers=alice)

    assert response.status_code == 201
    data = response.json()
    assert without_generated(data) == test_data.expected_todo()
    assert "user_id" not in data


@pytest.mark.asyncio
async def test_created_todos_are_appended(client: AsyncClient, alice, test_data):
    created = await create_todos(client, alice, test_data.todos())

    positions = [t["position"] for t in created]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)

    response = await client.get(f"{API}/todos", headers=alice)
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [t["id"] for t in created]


@pytest.mark.asyncio
async def test_create_todo_empty_description(client: AsyncClient, alice):
    response = await client.post(f"{API}/todos", json={"description": ""}, headers=alice)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_todos_are_private(client: AsyncClient, alice, bob):
    await client.post(f"{API}/todos", json={"description": "alice only"}, headers=alice)

    response = await client.get(f"{API}/todos", headers=bob)

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_search_todos(client: AsyncClient, alice, test_data):
    await create_todos(client, alice, test_data.todos())

    response = await client.get(f"{API}/todos/search", params={"keyword": "BUY"}, headers=alice)

    assert response.status_code == 200
    assert [t["description"] for t in response.json()] == ["Buy milk", "Buy birthday present"]


@pytest.mark.asyncio
async def test_search_requires_keyword(client: AsyncClient, alice):
    response = await client.get(f"{API}/todos/search", params={"keyword": " "}, headers=alice)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_update_todo(client: AsyncClient, alice):
    created = (await create_todos(client, alice, [{"description": "Buy milk"}]))[0]

    response = await client.put(
        f"{API}/todos/{created['id']}",
        json={"description": "Buy oat milk", "completed": True},
        headers=alice,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "Buy oat milk"
    assert data["completed"] is True
    assert data["position"] == created["position"]


@pytest.mark.asyncio
async def test_update_other_users_todo(client: AsyncClient, alice, bob):
    """
    Given a todo owned by another user
    When I update it
    Then the request fails with 404 TODO_NOT_FOUND
    And the todo is unchanged
    """
    created = (await create_todos(client, bob, [{"description": "bob todo"}]))[0]

    response = await client.put(
        f"{API}/todos/{created['id']}", json={"description": "hijacked"}, headers=alice
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TODO_NOT_FOUND"

    bob_todos = (await client.get(f"{API}/todos", headers=bob)).json()
    assert bob_todos[0]["description"] == "bob todo"


@pytest.mark.asyncio
async def test_update_missing_todo(client: AsyncClient, alice):
    response = await client.put(f"{API}/todos/1000", json={"description": "x"}, headers=alice)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TODO_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_todo(client: AsyncClient, alice):
    created = (await create_todos(client, alice, [{"description": "a"}, {"description": "b"}]))

    response = await client.delete(f"{API}/todos/{created[0]['id']}", headers=alice)

    assert response.status_code == 200
    assert response.json() == {"message": "Todo deleted"}
    remaining = (await client.get(f"{API}/todos", headers=alice)).json()
    assert [t["id"] for t in remaining] == [created[1]["id"]]


@pytest.mark.asyncio
async def test_delete_other_users_todo(client: AsyncClient, alice, bob):
    created = (await create_todos(client, bob, [{"description": "bob todo"}]))[0]

    response = await client.delete(f"{API}/todos/{created['id']}", headers=alice)

    assert response.status_code == 404
    assert len((await client.get(f"{API}/todos", headers=bob)).json()) == 1


@pytest.mark.asyncio
async def test_todos_require_auth(client: AsyncClient):
    response = await client.get(f"{API}/todos")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_search_wildcards_match_literally(client: AsyncClient, alice, test_data):
    """
    Given todos without % or _ in their descriptions
    When I search for % or _
    Then nothing matches
    And a todo that really contains them is found
    """
    await create_todos(client, alice, test_data.todos())

    for keyword in ["%", "_", "\\"]:
        response = await client.get(
            f"{API}/todos/search", params={"keyword": keyword}, headers=alice
        )
        assert response.status_code == 200, keyword
        assert response.json() == [], keyword

    await create_todos(client, alice, [{"description": "Raise budget 10%_now"}])
    response = await client.get(f"{API}/todos/search", params={"keyword": "0%_n"}, headers=alice)
    assert [t["description"] for t in response.json()] == ["Raise budget 10%_now"]
