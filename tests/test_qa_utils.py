from property_formatter.modules.field_extractor import FIELD_NAMES, PropertyRecord
from property_formatter.modules.qa_utils import completeness, incomplete_count, missing_fields


def test_empty_record_is_all_missing():
    record = PropertyRecord()
    assert missing_fields(record) == list(FIELD_NAMES)
    assert completeness(record) == 0.0


def test_partial_record():
    record = PropertyRecord(property_type="Res_rental", area="Baner", rent_or_sell_price="25000")
    missing = missing_fields(record)
    assert "area" not in missing
    assert "deposit" in missing
    assert completeness(record) == round(3 / 15, 3)


def test_incomplete_count():
    full = PropertyRecord(**{name: "x" for name in FIELD_NAMES})
    assert completeness(full) == 1.0
    assert incomplete_count([full, PropertyRecord()]) == 1
