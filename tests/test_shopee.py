import pytest

from lifemanager.shopee import OcrResult, ShopeePackage


def _package(**overrides):
    values = dict(
        id="pkg-1",
        title="Phone case",
        store="7-11",
        code="A12",
        due_date="2024-05-01",
        date_is_estimate=False,
        picked_up=False,
        created_at=1700000000000.0,
        completed_by=None,
    )
    values.update(overrides)
    return ShopeePackage(**values)


def test_package_round_trip():
    pkg = _package(completed_by="Alex", picked_up=True)
    assert ShopeePackage.from_dict(pkg.to_dict()) == pkg


def test_package_to_dict_keys():
    data = _package().to_dict()
    assert set(data) == {
        "id", "title", "store", "code", "due_date",
        "date_is_estimate", "picked_up", "created_at", "completed_by",
    }
    assert data["store"] == "7-11"


def test_package_optional_fields_missing_become_none():
    pkg = ShopeePackage.from_dict(
        {
            "id": "x",
            "title": "Book",
            "date_is_estimate": True,
            "picked_up": False,
            "created_at": 5,
        }
    )
    assert pkg.store is None
    assert pkg.code is None
    assert pkg.due_date is None
    assert pkg.date_is_estimate is True
    assert pkg.created_at == 5.0


def test_package_missing_required_field():
    data = _package().to_dict()
    del data["picked_up"]
    with pytest.raises(ValueError):
        ShopeePackage.from_dict(data)


def test_ocr_result_from_dict():
    result = OcrResult.from_dict(
        {"title": "Socks", "store": "FamilyMart", "code": None,
         "due_date": "2024-06-02", "date_is_estimate": True}
    )
    assert result == OcrResult(
        title="Socks", store="FamilyMart", code=None,
        due_date="2024-06-02", date_is_estimate=True,
    )


def test_ocr_result_requires_estimate_flag():
    with pytest.raises(ValueError):
        OcrResult.from_dict({"title": "Socks"})


def test_ocr_result_only_flag_given():
    result = OcrResult.from_dict({"date_is_estimate": False})
    assert result.title is None
    assert result.date_is_estimate is False