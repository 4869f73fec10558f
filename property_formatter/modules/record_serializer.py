# modules/record_serializer.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence, Union

import pandas as pd

from property_formatter.modules.field_extractor import FIELD_NAMES, PropertyRecord

RECORD_SEPARATOR = "\n\n---\n\n"

# reserved for downstream systems, always exported empty
RESERVED_FIELDS = ("property_id", "special_note", "date_stamp", "rent_sold_out")

OUTPUT_FIELDS = [
    "property_id",
    "property_type",
    "special_note",
    "owner_name",
    "owner_contact",
    "area",
    "address",
    "sub_property_type",
    "size",
    "furnishing_status",
    "availability",
    "floor",
    "tenant_preference",
    "additional_details",
    "age",
    "rent_or_sell_price",
    "deposit",
    "date_stamp",
    "rent_sold_out",
]


def render_record(record: PropertyRecord, timestamp: str) -> str:
    data = record.as_dict()
    body = "\n".join(f"{n}) {name} - {data[name]}" for n, name in enumerate(FIELD_NAMES, start=1))
    return f"{timestamp}\n\n{body}"


def join_blocks(blocks: Iterable[str]) -> str:
    return RECORD_SEPARATOR.join(blocks)


def format_listing_row(record: PropertyRecord) -> dict:
    data = record.as_dict()
    return {col: ("" if col in RESERVED_FIELDS else data.get(col, "")) for col in OUTPUT_FIELDS}


def records_to_frame(records: Sequence[PropertyRecord]) -> pd.DataFrame:
    rows = [format_listing_row(r) for r in records]
    return pd.DataFrame(rows, columns=OUTPUT_FIELDS, dtype=object)


def records_to_csv(records: Sequence[PropertyRecord]) -> str:
    """Header + one row per record; fields holding a comma, quote or newline are quoted."""
    frame = records_to_frame(records)
    text = frame.to_csv(index=False, lineterminator="\n", na_rep="")
    return text[:-1] if text.endswith("\n") else text


def write_csv(records: Sequence[PropertyRecord], path: Union[str, Path]) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(records_to_csv(records), encoding="utf-8")
    return out


def csv_export_filename(now: datetime) -> str:
    return f"Property_Details_{now:%d}/{now:%m}/{now:%y},{now:%H}:{now:%M}.csv"


def safe_csv_filename(now: datetime) -> str:
    return csv_export_filename(now).replace("/", "-").replace(":", "-")
