import json

import pytest
import yaml

from property_formatter.modules.vocabulary import (
    REQUIRED_KEYS,
    VocabularyError,
    default_vocabulary,
    load_vocabulary,
)


def _minimal():
    return {
        "areas": ["Baner", "Wakad", "Baner"],
        "sub_property_types": ["1 BHK", "1 Rk"],
        "furnishing_statuses": ["Furnished", "Unfurnished", "Semi-Furnished"],
        "tenant_preferences": ["All", "Family Only"],
        "availability_options": ["Immediate", "Available"],
        "price_not_listed": ["Price on call"],
    }


def test_default_vocabulary_is_cached_and_complete():
    vocab = default_vocabulary()
    assert vocab is default_vocabulary()
    assert "Kharadi" in vocab.areas
    assert len(vocab.areas) == len(set(vocab.areas))
    assert len(vocab.price_not_listed) == 21


def test_duplicates_dropped_order_kept():
    vocab = load_vocabulary(_minimal())
    assert vocab.areas == ("Baner", "Wakad")


def test_missing_key_raises():
    data = _minimal()
    del data["areas"]
    with pytest.raises(VocabularyError):
        load_vocabulary(data)


def test_load_from_yaml_and_json(tmp_path):
    y = tmp_path / "vocab.yml"
    y.write_text(yaml.safe_dump(_minimal()), encoding="utf-8")
    j = tmp_path / "vocab.json"
    j.write_text(json.dumps(_minimal()), encoding="utf-8")
    assert load_vocabulary(y) == load_vocabulary(str(j))


def test_bad_paths(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_vocabulary(tmp_path / "missing.yml")
    other = tmp_path / "vocab.txt"
    other.write_text("areas: []", encoding="utf-8")
    with pytest.raises(ValueError):
        load_vocabulary(other)


def test_canonical_lookups():
    vocab = load_vocabulary(_minimal())
    assert vocab.canonical_area("WAKAD") == "Wakad"
    assert vocab.canonical_sub_property_type("1 RK") == "1 Rk"
    assert vocab.canonical_furnishing("semi furnished") == "Semi-Furnished"
    assert vocab.canonical_furnishing("SemiFurnished") == "Semi-Furnished"
    assert vocab.canonical_availability("available") == "Available"
    assert vocab.canonical_tenant_preference("family only") == "Family Only"
    assert vocab.canonical_area("Mumbai") is None


def test_required_keys_match_packaged_file():
    vocab = default_vocabulary()
    for key in REQUIRED_KEYS:
        assert getattr(vocab, key)


def test_malformed_yaml_raises_vocabulary_error(tmp_path):
    bad = tmp_path / "vocab.yml"
    bad.write_text("areas: [unclosed\n", encoding="utf-8")
    with pytest.raises(VocabularyError) as exc:
        load_vocabulary(bad)
    assert isinstance(exc.value.__cause__, yaml.YAMLError)
    assert str(exc.value).startswith("Malformed vocabulary file")


def test_missing_key_message_is_not_quoted():
    data = _minimal()
    del data["price_not_listed"]
    with pytest.raises(ValueError) as exc:
        load_vocabulary(data)
    assert str(exc.value) == "Vocabulary is missing: price_not_listed"
