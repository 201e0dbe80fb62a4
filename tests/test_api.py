import base64

from fastapi.testclient import TestClient

from receipt_printer.escpos import build
from receipt_printer.server import app

client = TestClient(app)


def test_root():
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.json()["message"]


def test_encode_sale(sale_doc):
    resp = client.post("/api/receipts/encode", json=sale_doc)
    assert resp.status_code == 200
    body = resp.json()
    assert body["kind"] == "sale"
    assert base64.b64decode(body["base64"]) == build(sale_doc)
    assert body["size"] == len(build(sale_doc))
    assert body["rawbt_url"] == "rawbt:base64," + body["base64"]
    assert body["intent_url"].endswith("#Intent;scheme=rawbt;package=ru.a402d.rawbtprinter;end;")


def test_encode_service_with_width(service_doc):
    resp = client.post("/api/receipts/encode", params={"width": 48}, json=service_doc)
    assert resp.status_code == 200
    body = resp.json()
    assert body["kind"] == "service"
    assert base64.b64decode(body["base64"]) == build(service_doc, 48)


def test_encode_malformed_is_422():
    resp = client.post("/api/receipts/encode", json={"store": {"name": "x", "addr": "y"}})
    assert resp.status_code == 422
    assert "service" in resp.json()["detail"]


def test_encode_missing_field_names_path(sale_doc):
    del sale_doc["items"][0]["price"]
    resp = client.post("/api/receipts/encode", json=sale_doc)
    assert resp.status_code == 422
    assert "items[0].price" in resp.json()["detail"]


def test_encode_unprintable_text_is_422(sale_doc):
    sale_doc["customer"]["name"] = "Nguyễn"
    resp = client.post("/api/receipts/encode", json=sale_doc)
    assert resp.status_code == 422
    assert "Nguyễn" in resp.json()["detail"]


def test_encode_invalid_width(sale_doc):
    resp = client.post("/api/receipts/encode", params={"width": 0}, json=sale_doc)
    assert resp.status_code == 422


def test_raw(sale_doc):
    resp = client.post("/api/receipts/raw", json=sale_doc)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/octet-stream"
    assert resp.content == build(sale_doc)
    assert "receipt-ef5226cd.bin" in resp.headers["content-disposition"]


def test_demo_and_preview():
    resp = client.get("/api/receipts/demo/service")
    assert resp.status_code == 200
    demo = resp.json()
    assert demo["kind"] == "service"
    assert demo["fragment"].startswith("#data=")

    resp = client.post("/api/receipts/preview", json={"fragment": demo["fragment"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["receipt"] == demo["receipt"]
    assert body["job"]["kind"] == "service"
    assert base64.b64decode(body["job"]["base64"]) == build(demo["receipt"])


def test_demo_sale():
    resp = client.get("/api/receipts/demo/sale")
    assert resp.status_code == 200
    assert resp.json()["receipt"]["items"][0]["name"] == "Kaca tanpa kaca"


def test_demo_unknown_kind():
    assert client.get("/api/receipts/demo/expense").status_code == 422


def test_preview_bad_fragment():
    resp = client.post("/api/receipts/preview", json={"fragment": "#data=@@@"})
    assert resp.status_code == 422


def test_encode_non_finite_amount_is_422(sale_doc):
    sale_doc["totals"]["total"] = "inf"
    resp = client.post("/api/receipts/encode", json=sale_doc)
    assert resp.status_code == 422
    assert "totals.total" in resp.json()["detail"]


def test_encode_oversized_qr_payload_is_422(service_doc):
    service_doc["tracking"]["url"] = "http://localhost:3000/" + "a" * 70000
    resp = client.post("/api/receipts/encode", json=service_doc)
    assert resp.status_code == 422
    assert "QR payload too large" in resp.json()["detail"]
