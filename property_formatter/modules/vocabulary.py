# modules/vocabulary.py - closed enumerations (gazetteer, sub-types, furnishing, tenants, ...)
# Public API: load_vocabulary(cfg), default_vocabulary()
from __future__ import annotations

import json
import logging
import re
import tomllib
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_PATH = Path(__file__).resolve().parent.parent / "config" / "vocabularies.yml"

REQUIRED_KEYS = (
    "areas",
    "sub_property_types",
    "furnishing_statuses",
    "tenant_preferences",
    "availability_options",
    "price_not_listed",
)

# furnishing spellings compare with hyphens, pipes, plus signs and whitespace removed
_FURNISHING_STRIP = re.compile(r"[-|\s+]")


class VocabularyError(ValueError):
    """A vocabulary file is malformed or is missing one of the required lists."""


def _dedupe(items: Iterable[Any]) -> Tuple[str, ...]:
    seen = set()
    out = []
    for item in items or []:
        s = str(item).strip()
        if not s or s in seen:
            continue
        seen.add(s)
        out.append(s)
    return tuple(out)


def _lower_index(items: Iterable[str]) -> Mapping[str, str]:
    # first spelling wins when two entries differ only by case
    idx: Dict[str, str] = {}
    for item in items:
        idx.setdefault(item.lower(), item)
    return MappingProxyType(idx)


def furnishing_key(s: str) -> str:
    return _FURNISHING_STRIP.sub("", (s or "").strip().lower())


def _alternation(items: Iterable[str]) -> str:
    return "|".join(re.escape(i) for i in items)


@dataclass(frozen=True)
class Vocabulary:
    areas: Tuple[str, ...]
    sub_property_types: Tuple[str, ...]
    furnishing_statuses: Tuple[str, ...]
    tenant_preferences: Tuple[str, ...]
    availability_options: Tuple[str, ...]
    price_not_listed: Tuple[str, ...]

    # derived once per vocabulary, never per call
    _area_index: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _sub_type_index: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _tenant_index: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _availability_index: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _furnishing_index: Mapping[str, str] = field(init=False, repr=False, compare=False)
    area_exact_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    area_split_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    availability_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    price_not_listed_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        derived = {
            "_area_index": _lower_index(self.areas),
            "_sub_type_index": _lower_index(self.sub_property_types),
            "_tenant_index": _lower_index(self.tenant_preferences),
            "_availability_index": _lower_index(self.availability_options),
            "_furnishing_index": MappingProxyType(
                {furnishing_key(s): s for s in reversed(self.furnishing_statuses)}
            ),
            "area_exact_pattern": re.compile(rf"^(?:{_alternation(self.areas)})$", re.IGNORECASE),
            # locality at line start glued to more text on the same line
            "area_split_pattern": re.compile(
                rf"^[ \t]*({_alternation(self.areas)})[ \t]+(\S[^\n]*)$", re.IGNORECASE | re.MULTILINE
            ),
            "availability_pattern": re.compile(
                rf"({_alternation(self.availability_options)})", re.IGNORECASE
            ),
            "price_not_listed_pattern": re.compile(
                rf"({_alternation(self.price_not_listed)})", re.IGNORECASE
            ),
        }
        for name, value in derived.items():
            object.__setattr__(self, name, value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Vocabulary":
        missing = [k for k in REQUIRED_KEYS if k not in (data or {})]
        if missing:
            raise VocabularyError(f"Vocabulary is missing: {', '.join(missing)}")
        return cls(**{k: _dedupe(data[k]) for k in REQUIRED_KEYS})

    def canonical_area(self, text: str) -> Optional[str]:
        return self._area_index.get((text or "").strip().lower())

    def canonical_sub_property_type(self, text: str) -> Optional[str]:
        return self._sub_type_index.get((text or "").strip().lower())

    def canonical_tenant_preference(self, text: str) -> Optional[str]:
        return self._tenant_index.get((text or "").strip().lower())

    def canonical_availability(self, text: str) -> Optional[str]:
        return self._availability_index.get((text or "").strip().lower())

    def canonical_furnishing(self, text: str) -> Optional[str]:
        return self._furnishing_index.get(furnishing_key(text))


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    if suffix in (".yaml", ".yml"):
        try:
            return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise VocabularyError(f"Malformed vocabulary file {path}: {exc}") from exc
    if suffix == ".toml":
        return tomllib.loads(path.read_text(encoding="utf-8"))
    raise ValueError(f"Unsupported vocabulary file type: {path.suffix}")


def load_vocabulary(cfg: Union[None, Mapping[str, Any], str, Path, Vocabulary] = None) -> Vocabulary:
    """
    Build a Vocabulary from a mapping, a .yml/.yaml/.json/.toml path, or the packaged default.
    """
    if cfg is None:
        return default_vocabulary()
    if isinstance(cfg, Vocabulary):
        return cfg
    if isinstance(cfg, Mapping):
        return Vocabulary.from_mapping(cfg)
    path = Path(cfg)
    logger.debug("loading vocabulary from %s", path)
    return Vocabulary.from_mapping(_read_config_file(path))


@lru_cache(maxsize=1)
def default_vocabulary() -> Vocabulary:
    vocab = Vocabulary.from_mapping(_read_config_file(DEFAULT_VOCABULARY_PATH))
    logger.debug("default vocabulary: %d areas", len(vocab.areas))
    return vocab
