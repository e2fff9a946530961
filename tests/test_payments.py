"""Tests for the payment echo endpoint."""

import json

import pytest

EXPECTED_ECHO = (
    '{"id":"1","amount":100,"cardNumber":"1234567812345678",'
    '"cardExpiry":"01/23","cardCvv":"123"}'
)


def test_post_payment_echoes_normalized_amount(client):
    body = ('{"id":"1","amount":100.00,"cardNumber":"1234567812345678",'
            '"cardExpiry":"01/23","cardCvv":"123"}')
    resp = client.post("/api/payments", data=body)
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == EXPECTED_ECHO + "\n"


def test_post_payment_with_json_helper(client, valid_payment):
    resp = client.post("/api/payments", json=valid_payment)
    assert resp.status_code == 200
    assert resp.get_json() == valid_payment


def test_post_payment_empty_id(client):
    body = ('{"id":"","amount":100,"cardNumber":"1234567812345678",'
            '"cardExpiry":"01/23","cardCvv":"123"}')
    resp = client.post("/api/payments", data=body)
    assert resp.status_code == 200
    expected = ('{"id":"","amount":100,"cardNumber":"1234567812345678",'
                '"cardExpiry":"01/23","cardCvv":"123"}\n')
    assert resp.get_data(as_text=True) == expected


def test_post_payment_fractional_amount(client, valid_payment):
    valid_payment["amount"] = 12.50
    resp = client.post("/api/payments", data=json.dumps(valid_payment))
    assert resp.status_code == 200
    assert '"amount":12.5,' in resp.get_data(as_text=True)


def test_post_payment_field_order_follows_model(client):
    body = ('{"cardCvv":"123","cardExpiry":"01/23","cardNumber":"4111",'
            '"amount":5,"id":"x","extra":true}')
    resp = client.post("/api/payments", data=body)
    assert resp.status_code == 200
    assert list(json.loads(resp.get_data(as_text=True))) == [
        "id", "amount", "cardNumber", "cardExpiry", "cardCvv"]


def test_post_payment_accepts_negative_amount(client, valid_payment):
    valid_payment["amount"] = -3
    resp = client.post("/api/payments", json=valid_payment)
    assert resp.status_code == 200
    assert resp.get_json()["amount"] == -3


def test_post_payment_empty_body(client):
    resp = client.post("/api/payments", data="")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Bad Request"


def test_post_payment_invalid_body(client):
    resp = client.post("/api/payments", data="invalid")
    assert resp.status_code == 400


def test_post_payment_string_amount(client, valid_payment):
    valid_payment["amount"] = "invalid"
    resp = client.post("/api/payments", json=valid_payment)
    assert resp.status_code == 400
    assert "amount" in resp.get_json()["message"]


@pytest.mark.parametrize("method", ["get", "put", "delete", "head", "options"])
def test_payments_rejects_other_methods(client, method):
    resp = getattr(client, method)("/api/payments")
    assert resp.status_code == 405
    assert resp.headers["Allow"] == "POST"


@pytest.mark.parametrize("literal, rendered", [
    ("0.00005", "0.00005"),
    ("1e-7", "1e-7"),
    ("-0", "-0"),
    ("1E21", "1e+21"),
])
def test_post_payment_amount_rendering(client, literal, rendered):
    resp = client.post("/api/payments", data='{"amount":%s}' % literal)
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == (
        '{"id":"","amount":%s,"cardNumber":"","cardExpiry":"","cardCvv":""}\n' % rendered)


def test_post_payment_trailing_data(client):
    resp = client.post("/api/payments", data='{"id":"1"} x')
    assert resp.status_code == 400
