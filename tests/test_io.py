import pandas as pd

from salesbatch.utils.io import load_toml_config, read_lines, write_output


def test_read_lines_drops_byte_order_mark(tmp_path):
    path = tmp_path / "vendedores.txt"
    path.write_bytes(b"\xef\xbb\xbfCC;1;Ana;Lopez\nCE;2;Luis;Perez\n")

    assert read_lines(path) == ["CC;1;Ana;Lopez", "CE;2;Luis;Perez"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    assert read_lines(path) == []


def test_write_output_leaves_fields_unquoted(tmp_path):
    frame = pd.DataFrame({"name": ['Ana "La"', "O'Brien"], "total": [1.5, 0.0]})

    path = write_output(frame, tmp_path / "out" / "report.csv")

    assert path.read_text(encoding="utf-8").splitlines() == [
        "name;total",
        'Ana "La";1.50',
        "O'Brien;0.00",
    ]


def test_load_toml_config(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.salesbatch]\nvalidate_reports = false\n', encoding="utf-8")

    assert load_toml_config(path) == {"tool": {"salesbatch": {"validate_reports": False}}}
