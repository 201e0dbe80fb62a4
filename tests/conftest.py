import pytest

from receipt_printer.config import get_settings

_ENV_VARS = (
    "RECEIPT_WIDTH",
    "RECEIPT_CODEPAGE",
    "RECEIPT_TEXT_ENCODING",
    "RECEIPT_ENCODING_ERRORS",
    "RAWBT_PACKAGE",
    "PRINT_DISPATCH_DELAY",
    "RECEIPT_TRACKING_BASE_URL",
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sale_doc():
    return {
        "store": {"name": "Toko Anda", "addr": "Alamat Toko Anda"},
        "invoice": {"id": "ef5226cd", "datetime": "19 Oktober 2026 pukul 14.05"},
        "customer": {"name": "Yanto"},
        "items": [{"name": "Kaca tanpa kaca", "qty": 1, "price": 25000}],
        "totals": {"subtotal": 25000, "total": 25000},
        "footer": "Terima kasih atas kepercayaan Anda!",
    }


@pytest.fixture
def service_doc():
    return {
        "store": {"name": "Toko Anda", "addr": "Alamat Toko Anda", "phone": "0812-3456-7890"},
        "invoice": {"id": "dd1f681a", "datetime": "19 Oktober 2026 pukul 14.05"},
        "customer": {"name": "Yanto"},
        "service": {
            "name": "Ganti layar (Iphone Mahal)",
            "description": "Layarnya pengen nambah",
            "cost": 200000,
        },
        "tracking": {"url": "http://localhost:3000/service-status/dd1f681a"},
        "qr": {"size": 6, "ec": "M"},
    }
