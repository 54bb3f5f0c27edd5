"""Tests for the command-line entry point."""

import json
import os
import sys

import pytest
import yaml
from openpyxl import load_workbook

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.create_template_workbook import INVOICE_MODEL, create_template_workbook
from excel_template.main import main


@pytest.fixture
def files(tmp_path):
    template = create_template_workbook(str(tmp_path / "invoice.xlsx"))
    data = tmp_path / "data.json"
    data.write_text(json.dumps(INVOICE_MODEL))
    return template, str(data)


class TestRender:
    def test_render_to_output(self, files, tmp_path):
        template, data = files
        out = str(tmp_path / "rendered.xlsx")
        assert main(["render", template, data, "--output", out]) == 0
        wb = load_workbook(out)
        ws = wb["Invoice"]
        assert ws["A1"].value == "Invoice"
        assert ws["A2"].value == "Pen"
        assert ws["B3"].value == 3
        assert ws["B4"].value == 4.5
        wb.close()

    def test_sheets_flag(self, files, tmp_path):
        template, data = files
        out = str(tmp_path / "rendered.xlsx")
        assert main(["render", template, data, "--output", out,
                     "--sheets", "Notes"]) == 0
        wb = load_workbook(out)
        assert wb["Notes"]["A1"].value == "Invoice"
        assert wb["Invoice"]["A1"].value == "$F{title}"
        wb.close()

    def test_config_output_dir(self, files, tmp_path):
        template, data = files
        out_dir = tmp_path / "rendered"
        config = tmp_path / "config.yaml"
        config.write_text(yaml.safe_dump({"output_dir": str(out_dir)}))
        assert main(["render", template, data, "--config", str(config)]) == 0
        assert (out_dir / "invoice_rendered.xlsx").exists()

    def test_missing_template(self, files, tmp_path):
        _, data = files
        assert main(["render", str(tmp_path / "none.xlsx"), data]) == 1

    def test_bad_model(self, files, tmp_path):
        template, _ = files
        bad = tmp_path / "data.json"
        bad.write_text("[]")
        assert main(["render", template, str(bad)]) == 1

    def test_model_not_utf8(self, files, tmp_path):
        template, _ = files
        bad = tmp_path / "data.yaml"
        bad.write_bytes(b"title: \xff\xfe\n")
        assert main(["render", template, str(bad)]) == 1

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
