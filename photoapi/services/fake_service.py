"""
Photo API: Fake Photo Factory
=============================

What:  Generates random but plausible photo payloads with Faker.
Who:   POST /api/photos/fake, and tests that need sample payloads.
How:   One Faker instance per factory; seeding it makes the output reproducible.

Generated fields:
    price: 1.00 - 1000.00 with two decimals
    url:   placeholder image URL, 1234 x 2345
    date:  some moment within the last year (UTC)
    theme: a random noun
"""

import logging
from datetime import timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from faker import Faker

from photoapi.config import settings

logger = logging.getLogger(__name__)

IMAGE_WIDTH = 1234
IMAGE_HEIGHT = 2345


class FakePhotoFactory:
    """Builds payloads accepted by PhotoCreate."""

    def __init__(self, seed: Optional[int] = None, locale: str = "en_US"):
        self.faker = Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)
            logger.debug("FakePhotoFactory seeded with %d", seed)

    def build(self) -> Dict[str, Any]:
        cents = self.faker.random_int(min=100, max=100_000)
        return {
            "price": Decimal(cents).scaleb(-2),
            "url": self.faker.image_url(width=IMAGE_WIDTH, height=IMAGE_HEIGHT),
            "date": self.faker.date_time_between(
                start_date="-1y", end_date="now", tzinfo=timezone.utc
            ),
            "theme": self.faker.word(part_of_speech="noun"),
        }


# ── Singleton Instance ────────────────────────────────────────────────────
fake_photo_factory = FakePhotoFactory(seed=settings.fake_data_seed)
