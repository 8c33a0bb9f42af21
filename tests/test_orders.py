"""
Orders API tests
"""
import pytest


async def create_order(client, payload):
    r = await client.post("/orders", json={"data": payload})
    assert r.status_code == 201, r.text
    return r.json()["data"]


async def put_order(client, order, **changes):
    body = {k: order[k] for k in ("deliverTo", "mobileNumber", "status", "dishes")}
    body.update(changes)
    return await client.put(f"/orders/{order['id']}", json={"data": body})


@pytest.mark.asyncio
async def test_create_order_starts_pending(client, order_payload):
    order = await create_order(client, {**order_payload, "status": "delivered"})

    assert order["id"]
    assert order["status"] == "pending"
    assert order["dishes"] == order_payload["dishes"]


@pytest.mark.asyncio
async def test_order_lines_keep_dish_snapshot_fields(client, order_payload):
    order_payload["dishes"] = [{"dishId": "d1", "name": "Soup", "price": 5, "quantity": 1}]
    order = await create_order(client, order_payload)
    assert order["dishes"][0] == {"dishId": "d1", "name": "Soup", "price": 5, "quantity": 1}


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["deliverTo", "mobileNumber"])
async def test_create_missing_text_field_returns_400(client, order_payload, field):
    del order_payload[field]
    r = await client.post("/orders", json={"data": order_payload})
    assert r.status_code == 400
    assert r.json() == {"error": f"Order must include a {field}"}


@pytest.mark.asyncio
@pytest.mark.parametrize("dishes", [[], "soup", None])
async def test_create_without_dishes_returns_400(client, order_payload, dishes):
    order_payload["dishes"] = dishes
    r = await client.post("/orders", json={"data": order_payload})
    assert r.status_code == 400
    assert r.json() == {"error": "Order must include at least on dish"}


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, -2, "2", None])
async def test_create_bad_quantity_names_index(client, order_payload, quantity):
    order_payload["dishes"].append({"dishId": "x", "quantity": quantity})
    r = await client.post("/orders", json={"data": order_payload})
    assert r.status_code == 400
    assert r.json() == {"error": "Dish 1 must have a quantity that is an integer greater than 0"}


@pytest.mark.asyncio
async def test_read_unknown_order_returns_404(client):
    r = await client.get("/orders/missing-7")
    assert r.status_code == 404
    assert r.json() == {"error": "Order id not found: missing-7"}


@pytest.mark.asyncio
async def test_update_changes_fields_and_status(client, order_payload):
    order = await create_order(client, order_payload)
    r = await put_order(client, order, deliverTo="221B Baker Street", status="preparing")

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["deliverTo"] == "221B Baker Street"
    assert data["status"] == "preparing"
    assert data["id"] == order["id"]


@pytest.mark.asyncio
async def test_update_requires_status(client, order_payload):
    order = await create_order(client, order_payload)
    r = await client.put(f"/orders/{order['id']}", json={"data": order_payload})
    assert r.status_code == 400
    assert r.json() == {"error": "Order must include a status"}


@pytest.mark.asyncio
async def test_update_rejects_unknown_status(client, order_payload):
    order = await create_order(client, order_payload)
    r = await put_order(client, order, status="invalid")
    assert r.status_code == 400
    assert "pending, preparing, out-for-delivery, delivered" in r.json()["error"]


@pytest.mark.asyncio
async def test_update_id_mismatch_returns_400_and_leaves_record(client, order_payload):
    order = await create_order(client, order_payload)
    r = await put_order(client, order, id="someone-else", mobileNumber="000")

    assert r.status_code == 400
    assert r.json()["error"] == (
        f"Order id does not match route id. Order: someone-else, Route: {order['id']}"
    )
    r = await client.get(f"/orders/{order['id']}")
    assert r.json()["data"] == order


@pytest.mark.asyncio
async def test_delivered_order_cannot_be_changed(client, order_payload):
    order = await create_order(client, order_payload)
    r = await put_order(client, order, status="delivered")
    assert r.status_code == 200
    delivered = r.json()["data"]

    r = await put_order(client, delivered, deliverTo="Elsewhere")
    assert r.status_code == 400
    assert r.json() == {"error": "A delivered order cannot be changed"}

    r = await client.get(f"/orders/{order['id']}")
    assert r.json()["data"] == delivered


@pytest.mark.asyncio
async def test_status_cannot_move_backward(client, order_payload):
    order = await create_order(client, order_payload)
    r = await put_order(client, order, status="out-for-delivery")
    assert r.status_code == 200

    r = await put_order(client, r.json()["data"], status="preparing")
    assert r.status_code == 400
    assert r.json() == {
        "error": "Order status cannot move from out-for-delivery back to preparing"
    }


@pytest.mark.asyncio
async def test_status_walks_forward_through_lifecycle(client, order_payload):
    order = await create_order(client, order_payload)
    for status in ("pending", "preparing", "out-for-delivery", "delivered"):
        r = await put_order(client, order, status=status)
        assert r.status_code == 200, r.text
        order = r.json()["data"]
    assert order["status"] == "delivered"


@pytest.mark.asyncio
async def test_delete_pending_order(client, order_payload):
    keep = await create_order(client, order_payload)
    doomed = await create_order(client, order_payload)

    r = await client.delete(f"/orders/{doomed['id']}")
    assert r.status_code == 204
    assert r.content == b""

    r = await client.get("/orders")
    assert r.json()["data"] == [keep]
    r = await client.get(f"/orders/{doomed['id']}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_delete_non_pending_order_returns_400(client, order_payload):
    order = await create_order(client, order_payload)
    await put_order(client, order, status="preparing")

    r = await client.delete(f"/orders/{order['id']}")
    assert r.status_code == 400
    assert r.json() == {"error": "An order cannot be deleted unless it is pending."}

    r = await client.get("/orders")
    assert len(r.json()["data"]) == 1


@pytest.mark.asyncio
async def test_delete_unknown_order_returns_404(client):
    r = await client.delete("/orders/nothing")
    assert r.status_code == 404
    assert r.json() == {"error": "Order id not found: nothing"}


@pytest.mark.asyncio
async def test_list_returns_creations_in_order(client, order_payload):
    created = [
        await create_order(client, {**order_payload, "mobileNumber": str(n)}) for n in range(3)
    ]
    r = await client.get("/orders")
    assert r.status_code == 200
    assert r.json()["data"] == created
