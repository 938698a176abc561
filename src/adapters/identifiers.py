"""Identifier providers.

Each function wraps one third-party (or stdlib) generator so the dispatcher
only deals with `(length) -> str` callables.
"""

from __future__ import annotations

import secrets
import uuid

import shortuuid
from nanoid import generate as nanoid_generate
from ulid import ULID


UUIDV5_NAME = "cli-fabric"
SHORTID_LENGTH = 10

_shortid = shortuuid.ShortUUID()


def uuid_v4() -> str:
    return str(uuid.uuid4())


def uuid_v5() -> str:
    """Name-based UUID over a freshly generated v4 namespace.

    The namespace changes on every call, so the output is as random as v4.
    """

    namespace = uuid.uuid4()
    return str(uuid.uuid5(namespace, UUIDV5_NAME))


def crypto_uuid() -> str:
    """v4 UUID built straight from the OS CSPRNG."""

    return str(uuid.UUID(bytes=secrets.token_bytes(16), version=4))


def nano_id(length: int) -> str:
    if length <= 0:
        return ""
    return nanoid_generate(size=length)


def short_id() -> str:
    return _shortid.random(length=SHORTID_LENGTH)


def ulid() -> str:
    return str(ULID())
