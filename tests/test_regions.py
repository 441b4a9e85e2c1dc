"""
Tests for region lookup
"""
import json

from kingdom_of_science import _regions
from kingdom_of_science._regions import find_region, load_regions


def test_find_region_case_insensitive_substring(regions):
    assert find_region("JAKARTA", regions).kode == "31.71.03.1001"
    assert find_region("bandung", regions).kelurahan == "Citarum"
    assert find_region("  kemayoran ", regions).provinsi == "DKI Jakarta"


def test_find_region_first_match_wins(regions):
    assert find_region("a", regions) == regions[0]


def test_find_region_no_match(regions):
    assert find_region("Surabaya", regions) is None
    assert find_region("   ", regions) is None
    assert find_region("jakarta", []) is None


def test_load_bundled_regions():
    regions = load_regions()
    assert len(regions) > 0
    assert find_region("jakarta", regions) is not None
    for region in regions:
        assert region.kode.count(".") == 3


def test_load_regions_from_file(tmp_path):
    path = tmp_path / "kode_wilayah.json"
    path.write_text(
        json.dumps([{"nama": "Ubud, Gianyar", "kode": "51.04.05.2001", "provinsi": "Bali"}]),
        encoding="utf-8",
    )

    regions = load_regions(str(path))

    assert len(regions) == 1
    assert regions[0].kelurahan == "Ubud, Gianyar"
    assert regions[0].kecamatan == ""
    assert find_region("ubud", regions).provinsi == "Bali"


def test_load_regions_missing_file(tmp_path):
    assert load_regions(str(tmp_path / "missing.json")) == []


def test_data_dir_table_overrides_bundled(tmp_path, monkeypatch):
    (tmp_path / "kode_wilayah.json").write_text(
        json.dumps([{"nama": "Ubud, Gianyar", "kode": "51.04.05.2001", "provinsi": "Bali"}]),
        encoding="utf-8",
    )
    monkeypatch.setattr(_regions, "DATA_DIR", str(tmp_path))

    regions = load_regions()

    assert [r.kode for r in regions] == ["51.04.05.2001"]
    assert find_region("jakarta", regions) is None


def test_bundled_table_used_when_data_dir_has_none(tmp_path, monkeypatch):
    monkeypatch.setattr(_regions, "DATA_DIR", str(tmp_path))
    assert find_region("jakarta", load_regions()) is not None
