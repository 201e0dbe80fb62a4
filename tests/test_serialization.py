import json

import pytest

from receipt_printer.models import (
    ReceiptDataError,
    ReceiptKind,
    SaleReceipt,
    ServiceReceipt,
    from_dict,
    from_json,
    to_dict,
    to_json,
)


def test_sale_shape(sale_doc):
    receipt = from_dict(sale_doc)
    assert isinstance(receipt, SaleReceipt)
    assert receipt.kind is ReceiptKind.SALE
    assert receipt.items[0].name == "Kaca tanpa kaca"
    assert receipt.items[0].amount == 25000
    assert receipt.payment is None
    assert receipt.store.phone is None


def test_service_shape(service_doc):
    receipt = from_dict(service_doc)
    assert isinstance(receipt, ServiceReceipt)
    assert receipt.kind is ReceiptKind.SERVICE
    assert receipt.tracking.url.endswith("dd1f681a")
    assert receipt.qr.size == 6
    assert receipt.footer is None


def test_service_takes_precedence_over_items(service_doc):
    service_doc["items"] = [{"name": "x", "qty": 1, "price": 1}]
    assert isinstance(from_dict(service_doc), ServiceReceipt)


def test_items_may_be_empty(sale_doc):
    sale_doc["items"] = []
    assert from_dict(sale_doc).items == ()


def test_null_optionals_are_absent(service_doc):
    service_doc["tracking"] = None
    service_doc["qr"] = None
    service_doc["service"]["description"] = None
    receipt = from_dict(service_doc)
    assert receipt.tracking is None
    assert receipt.qr is None
    assert receipt.service.description is None


def test_receipt_is_immutable(sale_doc):
    receipt = from_dict(sale_doc)
    with pytest.raises(AttributeError):
        receipt.footer = "changed"


@pytest.mark.parametrize("doc", [{}, {"store": {}}, [], "receipt", None])
def test_neither_shape(doc):
    with pytest.raises(ReceiptDataError):
        from_dict(doc)


@pytest.mark.parametrize(
    "mutate, field",
    [
        (lambda d: d.pop("store"), "store"),
        (lambda d: d["store"].pop("name"), "store.name"),
        (lambda d: d["invoice"].pop("datetime"), "invoice.datetime"),
        (lambda d: d["customer"].pop("name"), "customer.name"),
        (lambda d: d["totals"].pop("total"), "totals.total"),
        (lambda d: d.update(items="nope"), "items"),
        (lambda d: d["items"][0].pop("price"), "items[0].price"),
        (lambda d: d["items"][0].update(qty=0), "items[0].qty"),
        (lambda d: d["items"][0].update(qty=1.5), "items[0].qty"),
        (lambda d: d["items"][0].update(qty=True), "items[0].qty"),
        (lambda d: d["items"][0].update(price=-1), "items[0].price"),
        (lambda d: d["items"][0].update(price="abc"), "items[0].price"),
        (lambda d: d.update(payment="cash"), "payment"),
        (lambda d: d["invoice"].update(id=123), "invoice.id"),
    ],
)
def test_sale_validation_reports_field(sale_doc, mutate, field):
    mutate(sale_doc)
    with pytest.raises(ReceiptDataError) as info:
        from_dict(sale_doc)
    assert info.value.field == field
    assert field in str(info.value)


def test_service_requires_cost(service_doc):
    del service_doc["service"]["cost"]
    with pytest.raises(ReceiptDataError) as info:
        from_dict(service_doc)
    assert info.value.field == "service.cost"


@pytest.mark.parametrize("tracking", [{}, {"url": None}])
def test_tracking_without_url_is_absent(service_doc, tracking):
    service_doc["tracking"] = tracking
    assert from_dict(service_doc).tracking is None


def test_numeric_strings_accepted(sale_doc):
    sale_doc["items"][0]["qty"] = "2"
    sale_doc["items"][0]["price"] = "25000"
    receipt = from_dict(sale_doc)
    assert receipt.items[0].qty == 2
    assert receipt.items[0].amount == 50000


def test_whole_float_quantity_accepted(sale_doc):
    sale_doc["items"][0]["qty"] = 2.0
    assert from_dict(sale_doc).items[0].qty == 2


def test_to_dict_omits_unset_optionals(sale_doc):
    wire = to_dict(from_dict(sale_doc))
    assert wire == sale_doc


def test_to_dict_service(service_doc):
    wire = to_dict(from_dict(service_doc))
    assert wire == service_doc


def test_to_dict_rejects_other_objects():
    with pytest.raises(TypeError):
        to_dict({"items": []})


def test_json_helpers(service_doc):
    text = to_json(from_dict(service_doc))
    assert json.loads(text) == service_doc
    assert from_json(text) == from_dict(service_doc)


def test_from_json_invalid():
    with pytest.raises(ReceiptDataError):
        from_json("{not json")


@pytest.mark.parametrize(
    "price, expected",
    [
        ("Rp 25.000", 25000),
        ("Rp25.000", 25000),
        ("25.000", 25000),
        ("Rp 1.000.000", 1000000),
        ("Rp 1.250,50", 1250.5),
        ("12,5", 12.5),
        ("Rp 25000", 25000),
        ("12.5", 12.5),
    ],
)
def test_rupiah_strings_use_indonesian_grouping(sale_doc, price, expected):
    sale_doc["items"][0]["price"] = price
    assert from_dict(sale_doc).items[0].price == expected


def test_ambiguous_rupiah_string_rejected(sale_doc):
    sale_doc["items"][0]["price"] = "Rp 12.5"
    with pytest.raises(ReceiptDataError) as info:
        from_dict(sale_doc)
    assert info.value.field == "items[0].price"


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", "1e400", float("nan"), float("inf")])
def test_non_finite_amounts_rejected(sale_doc, value):
    sale_doc["totals"]["total"] = value
    with pytest.raises(ReceiptDataError) as info:
        from_dict(sale_doc)
    assert info.value.field == "totals.total"
    assert "finite" in info.value.message


def test_non_finite_qr_size_rejected(service_doc):
    service_doc["qr"]["size"] = float("inf")
    with pytest.raises(ReceiptDataError) as info:
        from_dict(service_doc)
    assert info.value.field == "qr.size"
