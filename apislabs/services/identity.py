"""
ApisLabs Catalog API - Identifier Generation
=============================================

Two deliberately different strategies; the id format is part of the API
contract, so they are not unified.

Book: "book-<n>", n uniform in [100, 1000000). About 999,900 possible
      values; collisions are possible and not checked (create is a plain
      insert and fails on a duplicate).
Pet:  random UUID4 in canonical text form; collisions are negligible.
"""

import random
import uuid
from typing import Optional

BOOK_ID_PREFIX = "book-"
BOOK_ID_MIN = 100
BOOK_ID_MAX = 1_000_000  # exclusive


def generate_book_id(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return f"{BOOK_ID_PREFIX}{rng.randrange(BOOK_ID_MIN, BOOK_ID_MAX)}"


def generate_pet_id() -> str:
    return str(uuid.uuid4())
