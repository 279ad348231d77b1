"""
ApisLabs Catalog API - Merge Engine Unit Tests
===============================================

What we test:
    ✅ Each MergePolicy in isolation
    ✅ Book table: blank/empty values keep stored required fields
    ✅ Pet table: breed/age/color/weight are cleared when omitted
    ✅ id / createdAt never change, updatedAt always advances
    ✅ The existing entity is not mutated
"""

from datetime import datetime, timedelta, timezone

import pytest

from apislabs.schemas.book import AuthorInfo, BookInput, PriceInfo
from apislabs.schemas.pet import PetInput
from apislabs.services.merge import (
    BOOK_MERGE_POLICY,
    PET_MERGE_POLICY,
    MergePolicy,
    merge,
)


class TestMergePolicy:

    @pytest.mark.parametrize(
        "incoming, expected",
        [(None, "old"), ("", "old"), ("   ", "old"), ("new", "new")],
    )
    def test_overwrite_if_not_blank(self, incoming, expected):
        assert MergePolicy.OVERWRITE_IF_NOT_BLANK.resolve("old", incoming) == expected

    @pytest.mark.parametrize(
        "incoming, expected",
        [(None, ["a"]), ([], ["a"]), (["b"], ["b"])],
    )
    def test_overwrite_if_not_empty(self, incoming, expected):
        assert MergePolicy.OVERWRITE_IF_NOT_EMPTY.resolve(["a"], incoming) == expected

    def test_coalesce(self):
        assert MergePolicy.COALESCE.resolve(5, None) == 5
        assert MergePolicy.COALESCE.resolve(5, 0) == 0
        assert MergePolicy.COALESCE.resolve(True, False) is False

    def test_always(self):
        assert MergePolicy.ALWAYS.resolve("Lab", None) is None
        assert MergePolicy.ALWAYS.resolve("Lab", "Poodle") == "Poodle"


class TestBookMerge:

    def setup_method(self):
        self.now = datetime(2024, 2, 1, 9, 30, tzinfo=timezone.utc)

    def test_empty_patch_keeps_everything_but_updated_at(self, sample_book):
        result = merge(sample_book, BookInput(), BOOK_MERGE_POLICY, now=self.now)

        assert result.model_dump(exclude={"updated_at"}) == sample_book.model_dump(
            exclude={"updated_at"}
        )
        assert result.updated_at == self.now

    def test_blank_strings_keep_required_fields(self, sample_book):
        patch = BookInput(isbn="", title="   ", language="")
        result = merge(sample_book, patch, BOOK_MERGE_POLICY, now=self.now)

        assert result.isbn == sample_book.isbn
        assert result.title == sample_book.title
        assert result.language == sample_book.language

    def test_empty_categories_preserved(self, sample_book):
        result = merge(sample_book, BookInput(categories=[]), BOOK_MERGE_POLICY, now=self.now)
        assert result.categories == ["software", "craft"]

    def test_categories_replaced(self, sample_book):
        result = merge(sample_book, BookInput(categories=["classics"]), BOOK_MERGE_POLICY)
        assert result.categories == ["classics"]

    def test_author_with_blank_fields_overwrites(self, sample_book):
        """author has no blank check: any non-null author replaces the stored one."""
        patch = BookInput(author=AuthorInfo(id="", name=""))
        result = merge(sample_book, patch, BOOK_MERGE_POLICY, now=self.now)
        assert result.author == AuthorInfo(id="", name="")

    def test_optional_fields_coalesce(self, sample_book):
        patch = BookInput(
            pages=500,
            available=False,
            rating=0.0,
            reviewCount=0,
            price=PriceInfo(amount=10.0, currency="EUR"),
        )
        result = merge(sample_book, patch, BOOK_MERGE_POLICY, now=self.now)

        assert result.pages == 500
        assert result.available is False
        assert result.rating == 0.0
        assert result.review_count == 0
        assert result.price == PriceInfo(amount=10.0, currency="EUR")
        # Not sent → kept
        assert result.publisher == "Prentice Hall"
        assert result.cover_image == sample_book.cover_image

    def test_publication_year_overwritten_when_present(self, sample_book):
        result = merge(sample_book, BookInput(publicationYear=2009), BOOK_MERGE_POLICY)
        assert result.publication_year == 2009

    def test_identity_and_created_at_untouched(self, sample_book):
        result = merge(sample_book, BookInput(title="New"), BOOK_MERGE_POLICY, now=self.now)

        assert result.id == sample_book.id
        assert result.created_at == sample_book.created_at
        assert result.updated_at == self.now

    def test_existing_not_mutated(self, sample_book):
        before = sample_book.model_dump()
        merge(sample_book, BookInput(title="New", categories=["x"]), BOOK_MERGE_POLICY)
        assert sample_book.model_dump() == before

    def test_full_update_is_idempotent(self, sample_book):
        patch = BookInput(
            isbn="111",
            title="Other",
            author=AuthorInfo(id="a9", name="Someone"),
            categories=["a", "b"],
            publicationYear=1999,
            language="fr",
            pages=10,
            publisher="P",
            description="D",
            coverImage="C",
            available=False,
            rating=1.5,
            reviewCount=3,
            price=PriceInfo(amount=1.0, currency="GBP"),
        )
        later = self.now + timedelta(minutes=5)

        once = merge(sample_book, patch, BOOK_MERGE_POLICY, now=self.now)
        twice = merge(once, patch, BOOK_MERGE_POLICY, now=later)

        assert twice.model_dump(exclude={"updated_at"}) == once.model_dump(
            exclude={"updated_at"}
        )
        assert twice.updated_at > once.updated_at

    def test_default_now_is_utc(self, sample_book):
        result = merge(sample_book, BookInput(), BOOK_MERGE_POLICY)
        assert result.updated_at.tzinfo is not None
        assert result.updated_at > sample_book.updated_at


class TestPetMerge:

    def test_omitted_optional_fields_are_cleared(self, sample_pet):
        result = merge(sample_pet, PetInput(name="Rex"), PET_MERGE_POLICY)

        assert result.breed is None
        assert result.age is None
        assert result.color is None
        assert result.weight is None

    def test_name_species_status_coalesce(self, sample_pet):
        result = merge(sample_pet, PetInput(breed="Lab"), PET_MERGE_POLICY)

        assert result.name == "Rex"
        assert result.species == "dog"
        assert result.status == "available"
        assert result.breed == "Lab"

    def test_values_replaced_when_sent(self, sample_pet):
        patch = PetInput(
            name="Max", species="wolf", breed="Husky", age=4, color="grey",
            weight=30.0, status="adopted",
        )
        result = merge(sample_pet, patch, PET_MERGE_POLICY)

        assert result.name == "Max"
        assert result.species == "wolf"
        assert result.status == "adopted"
        assert (result.breed, result.age, result.color, result.weight) == ("Husky", 4, "grey", 30.0)

    def test_empty_name_overwrites(self, sample_pet):
        """Pet name coalesces on null only; an empty string replaces it."""
        result = merge(sample_pet, PetInput(name=""), PET_MERGE_POLICY)
        assert result.name == ""

    def test_policy_tables_never_touch_identity_fields(self):
        for table in (BOOK_MERGE_POLICY, PET_MERGE_POLICY):
            assert "id" not in table
            assert "created_at" not in table
            assert "updated_at" not in table
