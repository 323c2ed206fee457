"""Helpers shared by the sentence-type decoders.

Each decoder declares the sentence ID it accepts and how many fields its
grammar requires, then converts fields one at a time through ``convert``,
which turns a converter's ``FieldFormatError`` into an
``InvalidFieldValueError`` naming the offending field.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from gpsnmea.errors import (
    FieldFormatError,
    InvalidFieldValueError,
    MissingFieldError,
    UnknownOrMismatchedSentenceTypeError,
)
from gpsnmea.sentence import GenericSentence

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check_sentence(
    sentence: GenericSentence,
    sentence_id: str,
    required_field_count: int,
) -> None:
    """Validate the sentence type and that all required fields are present.

    Extra trailing fields are ignored to tolerate receiver-specific additions.

    Raises:
        UnknownOrMismatchedSentenceTypeError: ``sentence.sentence_id`` is not
            ``sentence_id``.
        MissingFieldError: Fewer than ``required_field_count`` fields; the
            error names the first absent index.
    """
    if sentence.sentence_id != sentence_id:
        raise UnknownOrMismatchedSentenceTypeError(sentence.sentence_id, sentence_id)

    if len(sentence.fields) < required_field_count:
        logger.debug(
            "%s%s has %d fields, %d required",
            sentence.talker,
            sentence.sentence_id,
            len(sentence.fields),
            required_field_count,
        )
        raise MissingFieldError(len(sentence.fields), sentence.sentence_id)


def optional_field(sentence: GenericSentence, index: int) -> str:
    """Return a trailing optional field, or "" if the receiver omitted it."""
    if index < len(sentence.fields):
        return sentence.fields[index]
    return ""


def convert(
    sentence: GenericSentence,
    index: int,
    converter: Callable[..., T],
    width: int = 1,
) -> T:
    """Run ``converter`` over ``width`` consecutive fields starting at ``index``.

    Fields past the end of the sentence are passed as "" so trailing
    optional fields can share this path.

    Raises:
        InvalidFieldValueError: The converter rejected the field. ``index``
            points at the exact field that failed, the converter's error is
            chained as the cause.
    """
    values = [optional_field(sentence, index + offset) for offset in range(width)]
    try:
        return converter(*values)
    except FieldFormatError as err:
        failed = index + err.position
        raise InvalidFieldValueError(
            failed,
            optional_field(sentence, failed),
            err.reason,
            sentence.sentence_id,
        ) from err
