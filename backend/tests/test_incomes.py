from sqlalchemy import func, select

from croptracker.models import Income

from .conftest import add_crop, add_expense, add_income, auth_headers, run_db


async def _count_incomes(session):
    return await session.scalar(select(func.count()).select_from(Income))


def test_create_income(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    resp = add_income(client, headers, crop_id, quantity=12, amount=30, notes="mandi sale")

    assert resp.status_code == 200
    assert resp.json() == {"message": "income saved"}


def test_income_for_unknown_crop(client, headers):
    resp = add_income(client, headers, "no-such-crop", quantity=1, amount=1)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Crop not found"}
    assert run_db(client, _count_incomes) == 0


def test_income_requires_quantity(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    resp = client.post(
        "/api/incomes",
        json={"cropId": crop_id, "amount": 5, "date": "2025-03-01"},
        headers=headers,
    )
    assert resp.status_code == 422


def test_list_incomes_newest_first(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_income(client, headers, crop_id, quantity=1, amount=10, date="2025-03-01")
    add_income(client, headers, crop_id, quantity=2, amount=20, date="2025-04-01", notes="second lot")

    rows = client.get(f"/api/incomes/{crop_id}", headers=headers).json()
    assert [r["date"] for r in rows] == ["2025-04-01", "2025-03-01"]
    assert set(rows[0]) == {"id", "date", "quantity", "amount", "notes"}
    assert rows[0]["quantity"] == 2
    assert rows[0]["notes"] == "second lot"


def test_list_incomes_in_date_range(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_income(client, headers, crop_id, quantity=1, amount=1, date="2025-03-01")
    add_income(client, headers, crop_id, quantity=1, amount=2, date="2025-05-01")

    rows = client.get(
        f"/api/incomes/{crop_id}", params={"fromDate": "2025-04-01"}, headers=headers
    ).json()
    assert [r["amount"] for r in rows] == [2]


def test_delete_income(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_income(client, headers, crop_id, quantity=1, amount=1)
    income_id = client.get(f"/api/incomes/{crop_id}", headers=headers).json()[0]["id"]

    resp = client.delete(f"/api/incomes/{income_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "income deleted"}
    assert run_db(client, _count_incomes) == 0

    again = client.delete(f"/api/incomes/{income_id}", headers=headers)
    assert again.status_code == 404
    assert again.json() == {"message": "Income not found"}


def test_deleting_income_does_not_touch_expenses(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_expense(client, headers, crop_id, 10)
    add_income(client, headers, crop_id, quantity=1, amount=5)
    income_id = client.get(f"/api/incomes/{crop_id}", headers=headers).json()[0]["id"]

    client.delete(f"/api/incomes/{income_id}", headers=headers)

    assert len(client.get(f"/api/expenses/{crop_id}", headers=headers).json()) == 1


def test_cannot_delete_someone_elses_income(client, headers):
    crop_id = add_crop(client, headers, "Wheat")
    add_income(client, headers, crop_id, quantity=1, amount=1)
    income_id = client.get(f"/api/incomes/{crop_id}", headers=headers).json()[0]["id"]
    other = auth_headers(client, "other@example.com")

    resp = client.delete(f"/api/incomes/{income_id}", headers=other)
    assert resp.status_code == 404
    assert run_db(client, _count_incomes) == 1
