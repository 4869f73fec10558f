from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from property_formatter.modules.field_extractor import PropertyRecord, extract_record
from property_formatter.modules.message_splitter import prepare_messages
from property_formatter.modules.record_serializer import join_blocks, render_record
from property_formatter.modules.vocabulary import Vocabulary, load_vocabulary

logger = logging.getLogger(__name__)


class FormatterError(Exception):
    pass


class EmptyInputError(FormatterError, ValueError):
    """Blank input; nothing was extracted."""


class FormattingFailed(FormatterError):
    """Any unexpected fault during a run; no partial results are returned."""


@dataclass(frozen=True)
class FormattedOutput:
    text: str
    data: PropertyRecord
    timestamp: str

    def as_dict(self) -> Dict[str, object]:
        return {"text": self.text, "data": self.data.as_dict()}


@dataclass
class FormatRun:
    outputs: List[FormattedOutput] = field(default_factory=list)
    messages_found: int = 0
    messages_discarded: int = 0

    @property
    def records(self) -> List[PropertyRecord]:
        return [o.data for o in self.outputs]

    @property
    def text(self) -> str:
        return join_blocks(o.text for o in self.outputs)


def run_formatter(text: str, vocab: Optional[Vocabulary] = None) -> FormatRun:
    if not (text or "").strip():
        raise EmptyInputError("Please enter your property message before formatting.")
    vocab = load_vocabulary(vocab)
    try:
        messages, discarded = prepare_messages(text, vocab)
        run = FormatRun(messages_found=len(messages) + discarded, messages_discarded=discarded)
        for msg in messages:
            extracted = extract_record(msg, vocab)
            run.outputs.append(
                FormattedOutput(
                    text=render_record(extracted.record, extracted.timestamp),
                    data=extracted.record,
                    timestamp=extracted.timestamp,
                )
            )
    except Exception as exc:
        logger.exception("formatting run failed")
        raise FormattingFailed("An error occurred while processing the message.") from exc

    logger.info(
        "processed %d property entries (%d messages, %d discarded)",
        len(run.outputs), run.messages_found, run.messages_discarded,
    )
    return run


def format_messages(text: str, vocab: Optional[Vocabulary] = None) -> List[FormattedOutput]:
    return run_formatter(text, vocab).outputs


def format_text(text: str, vocab: Optional[Vocabulary] = None) -> str:
    return run_formatter(text, vocab).text


def copy_output(text: str, writer: Callable[[str], object]) -> bool:
    """Hand `text` to a clipboard-like writer; pass/fail only."""
    if not (text or "").strip():
        return False
    try:
        writer(text)
    except Exception:
        logger.warning("copy failed", exc_info=True)
        return False
    return True
