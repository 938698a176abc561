"""Fake-data provider (Faker).

Why a class:
- One `Faker` instance per run, configured once (locale, seed) from
  `AppSettings`.
- Tests can seed it and get reproducible records.
"""

from __future__ import annotations

import logging
from datetime import timezone
from functools import cached_property

from faker import Faker

from core.config import AppSettings
from core.domain.models import DateRecord, LocationRecord, UserRecord

logger = logging.getLogger(__name__)

AVATAR_SIZE = 128

# Locales name their first-level subdivision differently; first match wins.
REGION_PROVIDERS = ("state", "administrative_unit", "prefecture", "province", "region")


class FakeDataProvider:
    """Builds lorem text and user/location/date records."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @cached_property
    def _faker(self) -> Faker:
        # Built on first use: identifier-only runs never touch Faker.
        fake = Faker(self._settings.faker_locale)
        if self._settings.faker_seed is not None:
            fake.seed_instance(self._settings.faker_seed)
        logger.debug(
            "Faker ready (locale=%s, seeded=%s)",
            self._settings.faker_locale,
            self._settings.faker_seed is not None,
        )
        return fake

    def _region(self) -> str:
        for name in REGION_PROVIDERS:
            provider = getattr(self._faker, name, None)
            if provider is not None:
                return provider()
        return ""

    def lorem(self, length: int) -> str:
        """Exactly `length` lorem words separated by single spaces."""

        if length <= 0:
            return ""
        return " ".join(self._faker.words(nb=length))

    def user(self) -> UserRecord:
        f = self._faker
        return UserRecord(
            id=f.uuid4(),
            first_name=f.first_name(),
            last_name=f.last_name(),
            email=f.email(),
            username=f.user_name(),
            avatar=f.image_url(width=AVATAR_SIZE, height=AVATAR_SIZE),
            birth_date=f.date_time_between(start_date="-80y", end_date="-18y", tzinfo=timezone.utc),
            phone=f.phone_number(),
            website=f.url(),
        )

    def location(self) -> LocationRecord:
        f = self._faker
        return LocationRecord(
            id=f.uuid4(),
            street=f.street_name(),
            city=f.city(),
            state=self._region(),
            country=f.country(),
            zip_code=f.postcode(),
            latitude=float(f.latitude()),
            longitude=float(f.longitude()),
            timezone=f.timezone(),
        )

    def date(self) -> DateRecord:
        f = self._faker
        return DateRecord(
            past=f.date_time_between(start_date="-1y", end_date="now", tzinfo=timezone.utc),
            future=f.date_time_between(start_date="now", end_date="+1y", tzinfo=timezone.utc),
            recent=f.date_time_between(start_date="-1d", end_date="now", tzinfo=timezone.utc),
            birthdate=f.date_time_between(start_date="-80y", end_date="-18y", tzinfo=timezone.utc),
            weekday=f.day_of_week(),
            month=f.month_name(),
        )
