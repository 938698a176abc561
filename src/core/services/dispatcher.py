"""Generation dispatch.

One handler per `GeneratorType`, looked up in a table that must cover the
whole enumeration (checked at import). Handlers receive the fake-data
provider and the requested length; most ignore both.
"""

from __future__ import annotations

import json
import logging
from typing import Callable

from adapters import identifiers
from adapters.fake_data import FakeDataProvider
from core.domain.models import GeneratedItem, GenerationRequest, GenerationResult, GeneratorType

logger = logging.getLogger(__name__)

Handler = Callable[[FakeDataProvider, int], GeneratedItem]

_HANDLERS: dict[GeneratorType, Handler] = {
    GeneratorType.UUIDV4: lambda fake, length: identifiers.uuid_v4(),
    GeneratorType.UUIDV5: lambda fake, length: identifiers.uuid_v5(),
    GeneratorType.CRYPTO: lambda fake, length: identifiers.crypto_uuid(),
    GeneratorType.NANOID: lambda fake, length: identifiers.nano_id(length),
    GeneratorType.SHORTID: lambda fake, length: identifiers.short_id(),
    GeneratorType.ULID: lambda fake, length: identifiers.ulid(),
    GeneratorType.LOREM: lambda fake, length: fake.lorem(length),
    GeneratorType.USER: lambda fake, length: fake.user(),
    GeneratorType.LOCATION: lambda fake, length: fake.location(),
    GeneratorType.DATE: lambda fake, length: fake.date(),
}

_missing = [t.value for t in GeneratorType if t not in _HANDLERS]
if _missing:
    raise RuntimeError(f"No generator registered for: {', '.join(_missing)}")


def generate_one(
    gen_type: GeneratorType | str,
    length: int,
    *,
    provider: FakeDataProvider | None = None,
) -> GeneratedItem:
    """Produce a single value for `gen_type`.

    Raises `InvalidGeneratorTypeError` for anything outside the enumeration.
    """

    handler = _HANDLERS[GeneratorType.parse(gen_type)]
    return handler(provider or FakeDataProvider(), length)


def generate(
    request: GenerationRequest,
    *,
    provider: FakeDataProvider | None = None,
) -> GenerationResult:
    """Run the request: `count` independent calls to the type's handler."""

    gen_type = GeneratorType.parse(request.type)
    handler = _HANDLERS[gen_type]
    provider = provider or FakeDataProvider()

    items = [handler(provider, request.length) for _ in range(request.count)]
    logger.debug("Generated %d x %s", len(items), gen_type.value)
    return GenerationResult(type=gen_type, items=items)


def format_output(result: GenerationResult, *, indent: int = 2) -> str:
    """Render records as a JSON array and scalars one per line."""

    if result.type.is_record:
        payload = [
            item.model_dump(mode="json", by_alias=True) if not isinstance(item, str) else item
            for item in result.items
        ]
        return json.dumps(payload, ensure_ascii=False, indent=indent)
    return "\n".join(str(item) for item in result.items)
