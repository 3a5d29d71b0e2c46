from sqlalchemy import func, select

from croptracker.models import Expense

from .conftest import add_crop, add_expense, auth_headers, run_db


async def _count_expenses(session):
    return await session.scalar(select(func.count()).select_from(Expense))


def test_create_expense(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    resp = add_expense(client, headers, crop_id, 500, notes="Purchased organic fertilizer")

    assert resp.status_code == 201
    assert resp.json() == {"message": "expense saved"}


def test_expense_for_unknown_crop(client, headers):
    resp = add_expense(client, headers, "no-such-crop", 10)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Crop not found"}
    assert run_db(client, _count_expenses) == 0


def test_expense_for_someone_elses_crop(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    other = auth_headers(client, "other@example.com")

    resp = add_expense(client, other, crop_id, 10)
    assert resp.status_code == 404


def test_expense_type_must_be_known(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    resp = add_expense(client, headers, crop_id, 10, type_="bribes")
    assert resp.status_code == 422


def test_expense_requires_amount(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    resp = client.post(
        "/api/expenses",
        json={"cropId": crop_id, "type": "labor", "date": "2025-01-01"},
        headers=headers,
    )
    assert resp.status_code == 422


def test_list_expenses_newest_first(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 100, date="2025-01-05", type_="ploughing")
    add_expense(client, headers, crop_id, 200, date="2025-02-05", type_="irrigation", notes="canal fee")

    resp = client.get(f"/api/expenses/{crop_id}", headers=headers)
    assert resp.status_code == 200

    rows = resp.json()
    assert [r["amount"] for r in rows] == [200, 100]
    assert set(rows[0]) == {"id", "type", "date", "amount", "notes"}
    assert rows[0]["type"] == "irrigation"
    assert rows[0]["date"] == "2025-02-05"
    assert rows[0]["notes"] == "canal fee"
    assert rows[1]["notes"] is None


def test_list_expenses_in_date_range(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 1, date="2024-12-31")
    add_expense(client, headers, crop_id, 2, date="2025-01-01")
    add_expense(client, headers, crop_id, 3, date="2025-01-31")
    add_expense(client, headers, crop_id, 4, date="2025-02-01")

    rows = client.get(
        f"/api/expenses/{crop_id}",
        params={"fromDate": "2025-01-01", "toDate": "2025-01-31"},
        headers=headers,
    ).json()
    assert sorted(r["amount"] for r in rows) == [2, 3]


def test_list_expenses_of_someone_elses_crop_is_empty(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 10)
    other = auth_headers(client, "other@example.com")

    resp = client.get(f"/api/expenses/{crop_id}", headers=other)
    assert resp.status_code == 200
    assert resp.json() == []


def test_delete_expense(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 10)
    expense_id = client.get(f"/api/expenses/{crop_id}", headers=headers).json()[0]["id"]

    resp = client.delete(f"/api/expenses/{expense_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "expense deleted"}

    again = client.delete(f"/api/expenses/{expense_id}", headers=headers)
    assert again.status_code == 404
    assert again.json() == {"message": "Expense not found"}


def test_delete_unknown_expense_leaves_store_alone(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 10)

    resp = client.delete("/api/expenses/no-such-expense", headers=headers)
    assert resp.status_code == 404
    assert run_db(client, _count_expenses) == 1


def test_cannot_delete_someone_elses_expense(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 10)
    expense_id = client.get(f"/api/expenses/{crop_id}", headers=headers).json()[0]["id"]
    other = auth_headers(client, "other@example.com")

    resp = client.delete(f"/api/expenses/{expense_id}", headers=other)
    assert resp.status_code == 404
    assert run_db(client, _count_expenses) == 1


def test_deleted_expense_leaves_crop_totals(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 10)
    add_expense(client, headers, crop_id, 25)
    rows = client.get(f"/api/expenses/{crop_id}", headers=headers).json()
    ten = next(r["id"] for r in rows if r["amount"] == 10)

    client.delete(f"/api/expenses/{ten}", headers=headers)

    summary = client.get("/api/crops", headers=headers).json()["data"][0]
    assert summary["expenseAmount"] == 25
