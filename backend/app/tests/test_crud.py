"""
Tests for the record management endpoints.
"""
from decimal import Decimal

import pytest


def make_customer(client, name="Mona Adel", phone="01000000000"):
    response = client.post("/api/customers", json={"name": name, "phone": phone})
    assert response.status_code == 201, response.text
    return response.json()


def make_unit(client, **extra):
    payload = {"type": "residential", "area": "120", "totalPrice": "900000", "downPayment": "90000"}
    payload.update(extra)
    response = client.post("/api/units", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def make_installment(client, unit_id, due_date, status="unpaid", amount="10000"):
    response = client.post("/api/installments", json={
        "unitId": unit_id,
        "type": "monthly",
        "amount": amount,
        "dueDate": due_date,
        "status": status
    })
    assert response.status_code == 201, response.text
    return response.json()


# --- Projects ---------------------------------------------------------------

def test_project_lifecycle(client, make_project):
    project = make_project(description="Twelve floors")
    assert project["status"] == "In Progress"
    assert Decimal(project["totalSharePercentage"]) == Decimal("100")

    response = client.put(f"/api/projects/{project['id']}", json={"status": "Completed", "endDate": "2025-06-30"})
    assert response.status_code == 200
    assert response.json()["status"] == "Completed"
    assert response.json()["endDate"] == "2025-06-30"

    assert client.delete(f"/api/projects/{project['id']}").status_code == 204
    assert client.get(f"/api/projects/{project['id']}").status_code == 404


def test_project_status_filter(client, make_project):
    make_project(name="Active")
    make_project(name="Paused", status="Suspended")

    suspended = client.get("/api/projects", params={"status": "Suspended"}).json()
    assert [p["name"] for p in suspended] == ["Paused"]
    assert len(client.get("/api/projects").json()) == 2


def test_project_validation(client):
    assert client.post("/api/projects", json={"name": "", "startDate": "2024-01-01"}).status_code == 422
    assert client.post("/api/projects", json={"name": "No date"}).status_code == 422


def test_deleting_project_removes_partners(client, make_project, make_partner):
    project = make_project()
    partner = make_partner(project["id"])

    client.delete(f"/api/projects/{project['id']}")
    assert client.get(f"/api/partners/{partner['id']}").status_code == 404


# --- Partners ---------------------------------------------------------------

def test_partner_filter_and_update(client, make_project, make_partner):
    first = make_project(name="First")
    second = make_project(name="Second")
    partner = make_partner(first["id"], name="Hany", partnershipType="50/50")
    make_partner(second["id"], name="Omar")

    listed = client.get("/api/partners", params={"projectId": first["id"]}).json()
    assert [p["name"] for p in listed] == ["Hany"]
    assert Decimal(listed[0]["currentBalance"]) == Decimal("0")

    response = client.put(f"/api/partners/{partner['id']}", json={"sharePercentage": "40"})
    assert response.status_code == 200
    assert Decimal(response.json()["sharePercentage"]) == Decimal("40")
    assert response.json()["partnershipType"] == "50/50"


def test_partner_requires_existing_project(client):
    response = client.post("/api/partners", json={"name": "Ghost", "projectId": 77})
    assert response.status_code == 404
    assert response.json() == {"message": "Project 77 not found"}


def test_partner_share_is_bounded(client, make_project):
    project = make_project()
    response = client.post("/api/partners", json={"name": "Greedy", "projectId": project["id"], "sharePercentage": "150"})
    assert response.status_code == 422


# --- Cashboxes --------------------------------------------------------------

def test_cashbox_starts_at_initial_balance(client):
    response = client.post("/api/cashboxes", json={"name": "Main", "initialBalance": "2500.50"})
    assert response.status_code == 201
    body = response.json()
    assert Decimal(body["initialBalance"]) == Decimal("2500.50")
    assert Decimal(body["currentBalance"]) == Decimal("2500.50")


def test_cashbox_names_are_unique(client):
    client.post("/api/cashboxes", json={"name": "Main"})
    other = client.post("/api/cashboxes", json={"name": "Petty"}).json()

    assert client.post("/api/cashboxes", json={"name": "Main"}).status_code == 409
    assert client.put(f"/api/cashboxes/{other['id']}", json={"name": "Main"}).status_code == 409
    assert client.put(f"/api/cashboxes/{other['id']}", json={"name": "Petty"}).status_code == 200


def test_cashbox_in_use_cannot_be_deleted(client, make_transaction):
    cashbox = client.post("/api/cashboxes", json={"name": "Main"}).json()
    make_transaction("10", cashboxId=cashbox["id"])

    response = client.delete(f"/api/cashboxes/{cashbox['id']}")
    assert response.status_code == 409

    empty = client.post("/api/cashboxes", json={"name": "Spare"}).json()
    assert client.delete(f"/api/cashboxes/{empty['id']}").status_code == 204


# --- Customers and units ----------------------------------------------------

def test_customer_crud(client):
    customer = make_customer(client)
    response = client.put(f"/api/customers/{customer['id']}", json={"email": "mona@example.com"})
    assert response.status_code == 200
    assert response.json()["email"] == "mona@example.com"
    assert response.json()["phone"] == "01000000000"

    assert client.post("/api/customers", json={"name": "No phone"}).status_code == 422


def test_deleting_customer_unassigns_units(client):
    customer = make_customer(client)
    unit = make_unit(client, customerId=customer["id"], status="sold")

    assert client.delete(f"/api/customers/{customer['id']}").status_code == 204
    assert client.get(f"/api/units/{unit['id']}").json()["customerId"] is None


def test_unit_status_filter(client):
    make_unit(client)
    sold = make_unit(client, status="sold")
    make_unit(client, status="returned")

    listed = client.get("/api/units", params={"status": "sold"}).json()
    assert [u["id"] for u in listed] == [sold["id"]]


def test_unit_validation(client):
    assert client.post("/api/units", json={
        "type": "residential", "area": "0", "totalPrice": "1", "downPayment": "0"
    }).status_code == 422
    assert client.post("/api/units", json={
        "type": "residential", "area": "80", "totalPrice": "1", "downPayment": "0", "customerId": 9
    }).status_code == 404


# --- Installments -----------------------------------------------------------

def test_installment_filters(client):
    unit = make_unit(client)
    other_unit = make_unit(client)

    late = make_installment(client, unit["id"], "2020-01-01")
    flagged = make_installment(client, other_unit["id"], "2099-01-01", status="overdue")
    make_installment(client, unit["id"], "2020-02-01", status="paid")
    make_installment(client, unit["id"], "2099-03-01")

    by_unit = client.get("/api/installments", params={"unitId": unit["id"]}).json()
    assert len(by_unit) == 3

    overdue = client.get("/api/installments", params={"overdue": "true"}).json()
    assert {i["id"] for i in overdue} == {late["id"], flagged["id"]}


def test_installment_payment_and_unknown_unit(client):
    unit = make_unit(client)
    installment = make_installment(client, unit["id"], "2024-05-01")

    response = client.put(f"/api/installments/{installment['id']}", json={
        "status": "paid", "paymentDate": "2024-04-28"
    })
    assert response.status_code == 200
    assert response.json()["status"] == "paid"
    assert response.json()["paymentDate"] == "2024-04-28"

    response = client.post("/api/installments", json={
        "unitId": 999, "type": "yearly", "amount": "1", "dueDate": "2024-01-01"
    })
    assert response.status_code == 404


# --- Invoices ---------------------------------------------------------------

def test_invoice_numbers_are_unique(client, make_project):
    project = make_project()
    payload = {"invoiceNumber": "INV-001", "amount": "5000", "dueDate": "2024-04-01", "linkedProjectId": project["id"]}

    first = client.post("/api/invoices", json=payload)
    assert first.status_code == 201
    assert first.json()["status"] == "unpaid"
    assert client.post("/api/invoices", json=payload).status_code == 409

    response = client.put(f"/api/invoices/{first.json()['id']}", json={"status": "paid"})
    assert response.status_code == 200
    assert client.get("/api/invoices", params={"status": "paid"}).json()[0]["invoiceNumber"] == "INV-001"


def test_invoice_links_must_exist(client):
    response = client.post("/api/invoices", json={
        "invoiceNumber": "INV-404", "amount": "1", "dueDate": "2024-04-01", "linkedCustomerId": 5
    })
    assert response.status_code == 404


# --- Revenue and expenses ---------------------------------------------------

def test_revenue_crud(client, make_project):
    project = make_project()
    response = client.post("/api/revenue", json={"amount": "120000", "date": "2024-02-10", "projectId": project["id"]})
    assert response.status_code == 201
    revenue = response.json()

    listed = client.get("/api/revenue", params={"projectId": project["id"]}).json()
    assert [r["id"] for r in listed] == [revenue["id"]]

    response = client.put(f"/api/revenue/{revenue['id']}", json={"description": "Unit 4 down payment"})
    assert response.json()["description"] == "Unit 4 down payment"

    response = client.put(f"/api/revenue/{revenue['id']}", json={"date": "2024-03-15"})
    assert response.status_code == 200
    assert response.json()["date"] == "2024-03-15"

    assert client.delete(f"/api/revenue/{revenue['id']}").status_code == 204


def test_expense_category_filter(client, make_project):
    project = make_project()
    client.post("/api/expenses", json={"amount": "300", "date": "2024-02-10", "category": "electricity"})
    client.post("/api/expenses", json={
        "amount": "8000", "date": "2024-02-11", "category": "building materials", "projectId": project["id"]
    })

    materials = client.get("/api/expenses", params={"category": "building materials"}).json()
    assert len(materials) == 1
    assert materials[0]["projectId"] == project["id"]

    assert client.get("/api/expenses").json()[0]["category"] == "building materials"
    assert client.post("/api/expenses", json={"amount": "1", "date": "2024-01-01", "category": "bribes"}).status_code == 422


@pytest.mark.parametrize("path", [
    "/api/projects/1", "/api/partners/1", "/api/cashboxes/1", "/api/transactions/1",
    "/api/invoices/1", "/api/revenue/1", "/api/expenses/1", "/api/customers/1",
    "/api/units/1", "/api/installments/1", "/api/settlements/1",
    "/api/partner-units/1", "/api/returned-units/1", "/api/payments/1",
])
def test_missing_records_are_404(client, path):
    response = client.get(path)
    assert response.status_code == 404
    assert response.json()["message"].endswith("1 not found")
    assert client.delete(path).status_code == 404


def test_expense_date_can_be_changed(client):
    expense = client.post("/api/expenses", json={"amount": "120", "date": "2024-02-10"}).json()
    response = client.put(f"/api/expenses/{expense['id']}", json={"date": "2024-04-30", "category": "transport"})
    assert response.status_code == 200
    assert response.json()["date"] == "2024-04-30"
    assert response.json()["category"] == "transport"


# --- Partner unit shares ----------------------------------------------------

def test_partner_unit_shares(client, make_project, make_partner):
    project = make_project()
    hany = make_partner(project["id"], name="Hany")
    omar = make_partner(project["id"], name="Omar")
    unit = make_unit(client)
    other_unit = make_unit(client)

    response = client.post("/api/partner-units", json={
        "partnerId": hany["id"], "unitId": unit["id"], "partnershipPercentage": "60"
    })
    assert response.status_code == 201
    share = response.json()
    client.post("/api/partner-units", json={
        "partnerId": omar["id"], "unitId": unit["id"], "partnershipPercentage": "40"
    })
    client.post("/api/partner-units", json={
        "partnerId": hany["id"], "unitId": other_unit["id"], "partnershipPercentage": "100"
    })

    by_partner = client.get("/api/partner-units", params={"partnerId": hany["id"]}).json()
    assert {s["unitId"] for s in by_partner} == {unit["id"], other_unit["id"]}
    by_unit = client.get("/api/partner-units", params={"unitId": unit["id"]}).json()
    assert {s["partnerId"] for s in by_unit} == {hany["id"], omar["id"]}

    response = client.put(f"/api/partner-units/{share['id']}", json={"partnershipPercentage": "50"})
    assert response.status_code == 200
    assert Decimal(response.json()["partnershipPercentage"]) == Decimal("50")


def test_partner_unit_shares_are_validated(client, make_project, make_partner):
    project = make_project()
    hany = make_partner(project["id"], name="Hany")
    omar = make_partner(project["id"], name="Omar")
    unit = make_unit(client)

    payload = {"partnerId": hany["id"], "unitId": unit["id"], "partnershipPercentage": "70"}
    assert client.post("/api/partner-units", json=payload).status_code == 201
    assert client.post("/api/partner-units", json=payload).status_code == 409

    over = {"partnerId": omar["id"], "unitId": unit["id"], "partnershipPercentage": "31"}
    response = client.post("/api/partner-units", json=over)
    assert response.status_code == 400
    assert "exceeds 100%" in response.json()["message"]

    assert client.post("/api/partner-units", json={**over, "unitId": 999}).status_code == 404
    assert client.post("/api/partner-units", json={**over, "partnershipPercentage": "0"}).status_code == 422


def test_deleting_unit_removes_its_shares(client, make_project, make_partner):
    project = make_project()
    partner = make_partner(project["id"])
    unit = make_unit(client)
    share = client.post("/api/partner-units", json={
        "partnerId": partner["id"], "unitId": unit["id"], "partnershipPercentage": "25"
    }).json()

    assert client.delete(f"/api/units/{unit['id']}").status_code == 204
    assert client.get(f"/api/partner-units/{share['id']}").status_code == 404


# --- Returned units ---------------------------------------------------------

def test_returned_unit_lifecycle(client, make_project, make_partner):
    project = make_project()
    partner = make_partner(project["id"])
    unit = make_unit(client, status="sold")

    response = client.post("/api/returned-units", json={"unitId": unit["id"], "returnReason": "Buyer relocated"})
    assert response.status_code == 201
    returned = response.json()
    assert returned["resaleStatus"] == "available for resale"
    assert returned["completingPartnerId"] is None
    assert client.get(f"/api/units/{unit['id']}").json()["status"] == "returned"

    response = client.put(f"/api/returned-units/{returned['id']}", json={
        "completingPartnerId": partner["id"],
        "completionDate": "2024-06-01",
        "completionAmount": "150000",
        "resaleStatus": "resold"
    })
    assert response.status_code == 200
    body = response.json()
    assert body["completingPartnerId"] == partner["id"]
    assert Decimal(body["completionAmount"]) == Decimal("150000")
    assert client.get(f"/api/units/{unit['id']}").json()["status"] == "sold"

    resold = client.get("/api/returned-units", params={"resaleStatus": "resold"}).json()
    assert [r["id"] for r in resold] == [returned["id"]]
    assert client.get("/api/returned-units", params={"resaleStatus": "available for resale"}).json() == []


def test_returned_unit_references_must_exist(client):
    assert client.post("/api/returned-units", json={"unitId": 404, "returnReason": "x"}).status_code == 404
    unit = make_unit(client)
    response = client.post("/api/returned-units", json={
        "unitId": unit["id"], "returnReason": "x", "completingPartnerId": 404
    })
    assert response.status_code == 404
    assert client.post("/api/returned-units", json={"unitId": unit["id"], "returnReason": ""}).status_code == 422


# --- Customer payments ------------------------------------------------------

def test_customer_payments(client):
    mona = make_customer(client)
    sami = make_customer(client, name="Sami", phone="0122")
    unit = make_unit(client, customerId=mona["id"], status="sold")
    other_unit = make_unit(client, customerId=sami["id"], status="sold")

    response = client.post("/api/payments", json={
        "unitId": unit["id"], "customerId": mona["id"], "amount": "90000",
        "paymentType": "down payment", "paymentMethod": "transfer", "paymentDate": "2024-01-10"
    })
    assert response.status_code == 201
    down_payment = response.json()
    assert down_payment["paymentDate"] == "2024-01-10"

    response = client.post("/api/payments", json={
        "unitId": unit["id"], "customerId": mona["id"], "amount": "10000", "paymentType": "installment"
    })
    assert response.status_code == 201
    assert response.json()["paymentDate"] is not None
    assert response.json()["paymentMethod"] is None

    client.post("/api/payments", json={
        "unitId": other_unit["id"], "customerId": sami["id"], "amount": "500", "paymentType": "additional fees"
    })

    assert len(client.get("/api/payments").json()) == 3
    assert len(client.get("/api/payments", params={"unitId": unit["id"]}).json()) == 2
    by_customer = client.get("/api/payments", params={"customerId": sami["id"]}).json()
    assert [p["paymentType"] for p in by_customer] == ["additional fees"]

    response = client.put(f"/api/payments/{down_payment['id']}", json={"paymentMethod": "cheque", "paymentDate": "2024-01-12"})
    assert response.status_code == 200
    assert response.json()["paymentMethod"] == "cheque"
    assert response.json()["paymentDate"] == "2024-01-12"
    assert client.delete(f"/api/payments/{down_payment['id']}").status_code == 204


def test_customer_payment_validation(client):
    customer = make_customer(client)
    unit = make_unit(client)
    payload = {"unitId": unit["id"], "customerId": customer["id"], "amount": "10", "paymentType": "installment"}

    assert client.post("/api/payments", json={**payload, "customerId": 404}).status_code == 404
    assert client.post("/api/payments", json={**payload, "unitId": 404}).status_code == 404
    assert client.post("/api/payments", json={**payload, "amount": "0"}).status_code == 422
    assert client.post("/api/payments", json={**payload, "paymentType": "gift"}).status_code == 422


def test_paid_units_and_customers_cannot_be_deleted(client):
    customer = make_customer(client)
    unit = make_unit(client, customerId=customer["id"], status="sold")
    client.post("/api/payments", json={
        "unitId": unit["id"], "customerId": customer["id"], "amount": "10", "paymentType": "installment"
    })

    assert client.delete(f"/api/units/{unit['id']}").status_code == 409
    response = client.delete(f"/api/customers/{customer['id']}")
    assert response.status_code == 409
    assert response.json() == {"message": f"Customer {customer['id']} still has payments"}


# --- Referential integrity --------------------------------------------------

def test_partner_with_transactions_cannot_be_deleted(client, make_project, make_partner, make_transaction):
    project = make_project()
    partner = make_partner(project["id"])
    transaction = make_transaction("500", linkedProjectId=project["id"], linkedPartnerId=partner["id"])

    response = client.delete(f"/api/partners/{partner['id']}")
    assert response.status_code == 409
    assert response.json() == {"message": f"Partner {partner['id']} still has transactions"}

    assert client.get(f"/api/partners/{partner['id']}").status_code == 200
    response = client.put(f"/api/transactions/{transaction['id']}", json={"description": "still editable"})
    assert response.status_code == 200


def test_settled_partner_keeps_audit_trail(client, make_project, make_partner):
    project = make_project()
    partner = make_partner(project["id"])
    client.post("/api/settlements", json={
        "partnerId": partner["id"], "linkedProjectId": project["id"], "paymentAmount": "10",
        "previousBalance": "0", "outstandingAmount": "10", "finalBalance": "10"
    })

    assert client.delete(f"/api/partners/{partner['id']}").status_code == 409
    assert len(client.get("/api/settlements", params={"partnerId": partner["id"]}).json()) == 1


def test_partner_with_invoices_or_completed_returns_cannot_be_deleted(client, make_project, make_partner):
    project = make_project()
    invoiced = make_partner(project["id"], name="Invoiced")
    completing = make_partner(project["id"], name="Completing")
    client.post("/api/invoices", json={
        "invoiceNumber": "INV-1", "amount": "1", "dueDate": "2024-01-01", "linkedPartnerId": invoiced["id"]
    })
    unit = make_unit(client)
    client.post("/api/returned-units", json={
        "unitId": unit["id"], "returnReason": "x", "completingPartnerId": completing["id"]
    })

    assert client.delete(f"/api/partners/{invoiced['id']}").status_code == 409
    assert client.delete(f"/api/partners/{completing['id']}").status_code == 409


def test_partner_with_transactions_cannot_move_project(client, make_project, make_partner, make_transaction):
    first = make_project(name="First")
    second = make_project(name="Second")
    active = make_partner(first["id"], name="Active")
    idle = make_partner(first["id"], name="Idle")
    make_transaction("500", linkedProjectId=first["id"], linkedPartnerId=active["id"])

    response = client.put(f"/api/partners/{active['id']}", json={"projectId": second["id"]})
    assert response.status_code == 409
    assert client.get(f"/api/partners/{active['id']}").json()["projectId"] == first["id"]

    # Same project is not a move
    assert client.put(f"/api/partners/{active['id']}", json={"projectId": first["id"]}).status_code == 200

    response = client.put(f"/api/partners/{idle['id']}", json={"projectId": second["id"]})
    assert response.status_code == 200
    assert response.json()["projectId"] == second["id"]


@pytest.mark.parametrize("record", ["transaction", "invoice", "revenue", "expense", "partner_transaction"])
def test_project_with_ledger_records_cannot_be_deleted(client, make_project, make_partner, make_transaction, record):
    project = make_project()
    if record == "transaction":
        make_transaction("10", linkedProjectId=project["id"])
    elif record == "invoice":
        client.post("/api/invoices", json={
            "invoiceNumber": "INV-7", "amount": "1", "dueDate": "2024-01-01", "linkedProjectId": project["id"]
        })
    elif record == "revenue":
        client.post("/api/revenue", json={"amount": "1", "date": "2024-01-01", "projectId": project["id"]})
    elif record == "expense":
        client.post("/api/expenses", json={"amount": "1", "date": "2024-01-01", "projectId": project["id"]})
    else:
        # Partner transaction recorded without the project link
        partner = make_partner(project["id"])
        make_transaction("10", linkedPartnerId=partner["id"])

    assert client.delete(f"/api/projects/{project['id']}").status_code == 409
    assert client.get(f"/api/projects/{project['id']}").status_code == 200


def test_invoice_linked_from_transaction_cannot_be_deleted(client, make_transaction):
    invoice = client.post("/api/invoices", json={
        "invoiceNumber": "INV-55", "amount": "90", "dueDate": "2024-01-01"
    }).json()
    make_transaction("90", linkedInvoiceId=invoice["id"])
    assert client.delete(f"/api/invoices/{invoice['id']}").status_code == 409


def test_customer_with_transactions_cannot_be_deleted(client, make_transaction):
    customer = make_customer(client)
    make_transaction("100", linkedCustomerId=customer["id"])
    assert client.delete(f"/api/customers/{customer['id']}").status_code == 409
    assert client.get(f"/api/customers/{customer['id']}").status_code == 200
