import json
import os
import stat

import pytest

from gstinvoice.errors import GstRatesError, TableNotFoundError
from gstinvoice.parsers.rate_table import clean_text, extract_goods_rates, main, run, write_goods_rates
from gstinvoice.schemas import RawGoodsRateRecord


def test_clean_text_collapses_whitespace_and_nbsp():
    assert clean_text("\ufeff8517\u00a0 ") == "8517"
    assert clean_text("  0101,  01012100 \n") == "0101, 01012100"
    assert clean_text("Live\t\thorses") == "Live horses"
    assert clean_text(None) == ""
    assert clean_text("") == ""


def test_extract_reads_goods_table_only(sample_html):
    records = extract_goods_rates(sample_html)

    assert [r.chapter_heading for r in records] == ["0101, 01012100", "0713", "0405"]
    horses = records[0]
    assert horses.description == "Live horses"
    assert (horses.cgst_rate, horses.sgst_rate, horses.igst_rate) == ("2.5%", "2.5%", "5%")


def test_extract_drops_empty_rows(sample_html):
    records = extract_goods_rates(sample_html)
    assert all(r.has_content() for r in records)
    assert len(records) == 3


def test_extract_fills_missing_columns_with_empty_string(sample_html):
    butter = extract_goods_rates(sample_html)[-1]
    assert butter.description == "Butter and other fats"
    assert butter.cgst_rate == butter.sgst_rate == butter.igst_rate == ""


def test_extract_raises_when_table_missing():
    with pytest.raises(TableNotFoundError) as exc:
        extract_goods_rates("<html><body><table id='other'></table></body></html>")
    assert "table not found" in str(exc.value)
    assert isinstance(exc.value, GstRatesError)


def test_write_goods_rates_format(tmp_path):
    out = tmp_path / "nested" / "dir" / "rates.json"
    write_goods_rates([RawGoodsRateRecord(chapter_heading="0101", description="Live horses")], out)

    text = out.read_text(encoding="utf-8")
    assert text.endswith("]\n")
    assert text.startswith('[\n  {\n    "chapterHeading": "0101"')
    assert json.loads(text) == [
        {"chapterHeading": "0101", "description": "Live horses", "cgstRate": "", "sgstRate": "", "igstRate": ""}
    ]
    assert list(out.parent.iterdir()) == [out]


def test_write_goods_rates_overwrites(tmp_path):
    out = tmp_path / "rates.json"
    out.write_text("stale", encoding="utf-8")
    write_goods_rates([], out)
    assert out.read_text(encoding="utf-8") == "[]\n"


def test_run_reports_count(tmp_path, sample_html, capsys):
    html = tmp_path / "page.html"
    html.write_text(sample_html, encoding="utf-8")
    out = tmp_path / "out" / "rates.json"

    assert run(html, out) == 3
    assert "Extracted 3 GST goods rate entries to" in capsys.readouterr().out
    assert len(json.loads(out.read_text(encoding="utf-8"))) == 3


def test_main_exits_nonzero_when_table_missing(tmp_path, capsys):
    html = tmp_path / "page.html"
    html.write_text("<html><body><p>maintenance</p></body></html>", encoding="utf-8")
    out = tmp_path / "rates.json"

    assert main(["--html", str(html), "--output", str(out)]) == 1
    assert "table not found" in capsys.readouterr().err
    assert not out.exists()


def test_main_exits_nonzero_when_html_missing(tmp_path, capsys):
    assert main(["--html", str(tmp_path / "missing.html"), "--output", str(tmp_path / "o.json")]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_success(tmp_path, sample_html):
    html = tmp_path / "page.html"
    html.write_text(sample_html, encoding="utf-8")
    out = tmp_path / "rates.json"

    assert main(["--html", str(html), "--output", str(out)]) == 0
    assert out.exists()


def test_write_goods_rates_honours_umask(tmp_path):
    out = tmp_path / "rates.json"
    old = os.umask(0o022)
    try:
        write_goods_rates([RawGoodsRateRecord(chapter_heading="0101", description="Live horses")], out)
    finally:
        os.umask(old)
    assert stat.S_IMODE(out.stat().st_mode) == 0o644


def test_write_goods_rates_keeps_existing_mode(tmp_path):
    out = tmp_path / "rates.json"
    out.write_text("[]\n", encoding="utf-8")
    out.chmod(0o664)
    write_goods_rates([], out)
    assert stat.S_IMODE(out.stat().st_mode) == 0o664
