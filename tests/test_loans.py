import pytest


def approve(client, member_id="m_01", principal=1000, **extra):
    body = {"memberId": member_id, "principal": principal}
    body.update(extra)
    return client.post("/api/loans", json=body)


def test_loan_adds_simple_interest_and_books_disbursement(client):
    res = approve(client, "m_01", 1000, interestRate=5)
    assert res.status_code == 201
    loan = res.json()
    assert loan["outstanding"] == 1050
    assert loan["status"] == "active"
    assert loan["interestRate"] == 5

    member = client.get("/api/members/m_01").json()
    assert member["outstanding"] == 500 + 1050
    assert member["totalSaved"] == 12300

    txs = client.get("/api/transactions", params={"memberId": "m_01"}).json()
    assert [(t["type"], t["amount"], t["note"]) for t in txs] == [("loan_disbursement", 1000, "Loan disbursement")]

    feed = client.get("/api/activities", params={"limit": 2}).json()
    assert [a["type"] for a in feed] == ["loan_approved", "withdraw"]
    assert feed[0]["description"] == "Loan approved for Jane Doe - KES 1,000"


@pytest.mark.parametrize("principal, rate, expected", [(2000, 0, 2000), (1500, 10, 1650), (999.5, 2, 1019.49)])
def test_outstanding_formula(client, principal, rate, expected):
    loan = approve(client, "m_02", principal, interestRate=rate).json()
    assert loan["outstanding"] == pytest.approx(expected)


def test_interest_rate_defaults_to_group_setting(client):
    client.patch("/api/settings/settings_01", json={"globalInterestRate": 12})
    loan = approve(client, "m_02", 1000).json()
    assert loan["interestRate"] == 12
    assert loan["outstanding"] == 1120


def test_loan_for_unknown_member_is_rejected(client):
    res = approve(client, "m_404", 1000, interestRate=5)
    assert res.status_code == 400
    assert client.get("/api/loans").json() == []
    assert client.get("/api/transactions").json() == []


def test_loan_requires_positive_principal(client):
    assert approve(client, "m_01", 0, interestRate=5).status_code == 400
    assert approve(client, "m_01", 100, interestRate=-1).status_code == 400


def test_patch_outstanding_to_zero_marks_paid(client):
    loan = approve(client, "m_01", 1000, interestRate=5).json()

    res = client.patch(f"/api/loans/{loan['id']}", json={"outstanding": 0})
    assert res.status_code == 200
    assert res.json()["status"] == "paid"
    assert res.json()["outstanding"] == 0

    assert client.get("/api/members/m_01").json()["outstanding"] == 500

    activity = client.get("/api/activities", params={"limit": 1}).json()[0]
    assert activity["type"] == "loan_repayment"
    assert activity["description"] == "Jane Doe repaid KES 1,050 towards loan"


def test_partial_patch_keeps_loan_active(client):
    loan = approve(client, "m_03", 2000, interestRate=5).json()
    res = client.patch(f"/api/loans/{loan['id']}", json={"outstanding": 1600})
    assert res.json()["status"] == "active"
    assert client.get("/api/members/m_03").json()["outstanding"] == 1000 + 2100 - 500


def test_raising_outstanding_logs_no_repayment(client):
    loan = approve(client, "m_02", 1000, interestRate=0).json()
    client.patch(f"/api/loans/{loan['id']}", json={"outstanding": 1200})
    assert client.get("/api/members/m_02").json()["outstanding"] == 1200
    assert client.get("/api/activities", params={"limit": 1}).json()[0]["type"] == "loan_approved"


def test_status_can_be_set_to_overdue(client):
    loan = approve(client, "m_02", 1000, interestRate=0).json()
    res = client.patch(f"/api/loans/{loan['id']}", json={"status": "overdue"})
    assert res.json()["status"] == "overdue"
    assert res.json()["outstanding"] == 1000


def test_patch_missing_loan(client):
    res = client.patch("/api/loans/nope", json={"outstanding": 0})
    assert res.status_code == 404
    assert res.json() == {"error": "Loan not found"}


def test_repay_records_transaction_and_reduces_balance(client):
    loan = approve(client, "m_01", 1000, interestRate=5).json()

    res = client.post(f"/api/loans/{loan['id']}/repay", json={"amount": 300})
    assert res.status_code == 200
    assert res.json()["outstanding"] == 750
    assert client.get("/api/members/m_01").json()["outstanding"] == 500 + 750

    txs = client.get("/api/transactions", params={"memberId": "m_01"}).json()
    assert txs[-1]["type"] == "loan_repayment"
    assert txs[-1]["amount"] == 300
    assert client.get("/api/members/m_01").json()["totalSaved"] == 12300

    res = client.post(f"/api/loans/{loan['id']}/repay", json={"amount": 750})
    assert res.json()["status"] == "paid"


def test_repay_more_than_outstanding(client):
    loan = approve(client, "m_01", 1000, interestRate=5).json()
    res = client.post(f"/api/loans/{loan['id']}/repay", json={"amount": 2000})
    assert res.status_code == 400
    assert client.get(f"/api/loans/{loan['id']}").json()["outstanding"] == 1050


def test_repay_paid_loan(client):
    loan = approve(client, "m_01", 100, interestRate=0).json()
    client.post(f"/api/loans/{loan['id']}/repay", json={"amount": 100})
    res = client.post(f"/api/loans/{loan['id']}/repay", json={"amount": 1})
    assert res.status_code == 400
    assert res.json() == {"error": "Loan is already paid"}


def test_list_loans_by_member(client):
    approve(client, "m_01", 100, interestRate=0)
    approve(client, "m_02", 200, interestRate=0)
    loans = client.get("/api/loans", params={"memberId": "m_02"}).json()
    assert [l["principal"] for l in loans] == [200]
    assert len(client.get("/api/loans").json()) == 2
    assert client.get("/api/loans/unknown").status_code == 404
