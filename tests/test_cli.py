import base64
import json

from receipt_printer.cli import main
from receipt_printer.escpos import build


def _write(tmp_path, doc):
    path = tmp_path / "receipt.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


def test_base64_output(tmp_path, sale_doc):
    out = tmp_path / "out.txt"
    assert main([str(_write(tmp_path, sale_doc)), "-o", str(out)]) == 0
    assert base64.b64decode(out.read_text().strip()) == build(sale_doc)


def test_raw_output_with_width(tmp_path, service_doc):
    out = tmp_path / "out.bin"
    assert main([str(_write(tmp_path, service_doc)), "--format", "raw", "--width", "48", "-o", str(out)]) == 0
    assert out.read_bytes() == build(service_doc, 48)


def test_intent_output(tmp_path, sale_doc):
    out = tmp_path / "out.txt"
    assert main([str(_write(tmp_path, sale_doc)), "--format", "intent", "-o", str(out)]) == 0
    assert out.read_text().startswith("intent:data:application/octet-stream;base64,")


def test_malformed_input_exit_code(tmp_path, capsys):
    path = _write(tmp_path, {"store": {}})
    assert main([str(path)]) == 2
    assert "error:" in capsys.readouterr().err
