"""Request resolution.

Both entry modes (interactive answers and a raw argument vector) converge here
into one `GenerationRequest`, so the dispatcher never knows where the input
came from.

Numeric input is parsed permissively: a prefix integer is accepted
(`"10abc"` -> 10) and anything unusable falls back to the default instead of
failing.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

from core.domain.errors import InvalidGeneratorTypeError
from core.domain.models import GenerationRequest, GeneratorType, InteractiveAnswers

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 1
DEFAULT_LENGTH = 21

FLAG_PREFIX = "--"
COUNT_FLAG = "--count="
SAVE_FLAG = "--save="

_INT_PREFIX = re.compile(r"^\s*\+?(\d+)")
_MENU_ORDINAL = re.compile(r"^\s*\d+\.\s*")


def parse_int(value: str | None) -> int | None:
    """Leading non-negative integer of `value`, or None."""

    if value is None:
        return None
    match = _INT_PREFIX.match(value)
    if not match:
        return None
    return int(match.group(1))


def strip_menu_ordinal(label: str) -> str:
    """`'4. nanoid'` -> `'nanoid'`."""

    return _MENU_ORDINAL.sub("", label).strip()


def resolve_answers(
    answers: InteractiveAnswers,
    *,
    default_count: int = DEFAULT_COUNT,
    default_length: int = DEFAULT_LENGTH,
) -> GenerationRequest:
    """Build a request from the interactive answer set.

    A prompted length of 0 is kept as is; a count of 0 means the default.
    """

    gen_type = GeneratorType.parse(strip_menu_ordinal(answers.type_label))

    count = parse_int(answers.count) or default_count

    length = parse_int(answers.length)
    if length is None:
        length = default_length

    destination = (answers.save_file or "").strip()

    request = GenerationRequest(
        type=gen_type,
        count=count,
        length=length,
        destination=Path(destination) if destination else None,
    )
    logger.debug("Resolved interactive answers: %s", request)
    return request


def resolve_argv(
    tokens: Sequence[str],
    *,
    default_count: int = DEFAULT_COUNT,
    default_length: int = DEFAULT_LENGTH,
) -> GenerationRequest:
    """Build a request from `<type> [<length>] [--count=N] [--save=PATH]`.

    The positional length is only read for types that use it, and only when
    token 1 is not itself a flag.
    """

    if not tokens:
        raise InvalidGeneratorTypeError("", GeneratorType.names())

    gen_type = GeneratorType.parse(tokens[0])

    count = default_count
    count_arg = _find_flag(tokens, COUNT_FLAG)
    if count_arg is not None:
        count = parse_int(count_arg) or default_count

    length = default_length
    if gen_type.uses_length and len(tokens) > 1 and not tokens[1].startswith(FLAG_PREFIX):
        length = parse_int(tokens[1]) or default_length

    destination = None
    save_arg = _find_flag(tokens, SAVE_FLAG)
    if save_arg:
        destination = Path(save_arg)

    request = GenerationRequest(
        type=gen_type,
        count=count,
        length=length,
        destination=destination,
    )
    logger.debug("Resolved argv %s: %s", list(tokens), request)
    return request


def _find_flag(tokens: Sequence[str], prefix: str) -> str | None:
    """Value of the first `prefix<value>` token.

    The value is everything after the first `=`, so `--save=a=b.txt` names
    `a=b.txt`. Earlier releases of cli-fabric kept only the text up to the next
    `=` (`a`); the full value is kept on purpose.
    """

    for token in tokens:
        if token.startswith(prefix):
            return token[len(prefix):]
    return None
