"""Integration tests for the MassUpdate use case.

Uses in-memory fake repositories: no file I/O.
"""

import pytest

from massupdater.application.dto import UpdateRequest
from massupdater.application.mass_update import BATCH_SIZE, MassUpdateHandler
from massupdater.domain.exceptions import ValidationError
from massupdater.domain.model.product import Product
from massupdater.domain.model.value_objects import ProductAttribute
from tests.fakes import FakeProductRepository, RecordingProgressReporter, make_products


def _setup(
    products: list[Product] | None = None, **repo_kwargs
) -> tuple[MassUpdateHandler, FakeProductRepository, RecordingProgressReporter]:
    if products is None:
        products = make_products(120)
    product_repo = FakeProductRepository(products, **repo_kwargs)
    progress = RecordingProgressReporter()
    handler = MassUpdateHandler(product_repo, progress)
    return handler, product_repo, progress


def _request(amount: int, attribute=ProductAttribute.NAME, text=" SALE", store_id=1):
    return UpdateRequest(
        store_id=store_id,
        requested_amount=amount,
        attribute=attribute,
        append_text=text,
    )


class TestMassUpdateHappyPath:

    def test_clamps_amount_to_catalog_size(self):
        handler, product_repo, progress = _setup()

        result = handler.handle(_request(200))

        assert result.success
        assert result.clamped
        assert result.effective_amount == 120
        assert result.processed == 120
        assert len(progress.notes) == 1
        assert "120" in progress.notes[0]
        assert progress.total == 120

    def test_pages_split_into_batches_of_fifty(self):
        handler, product_repo, _ = _setup()

        result = handler.handle(_request(200))

        assert BATCH_SIZE == 50
        assert [page for _, page, _ in product_repo.fetched_pages] == [1, 2, 3]
        assert {size for _, _, size in product_repo.fetched_pages} == {50}
        assert result.pages_fetched == 3
        assert len(product_repo.saved_ids) == 120

    def test_appends_suffix_to_every_name(self):
        handler, product_repo, _ = _setup()

        handler.handle(_request(200))

        for i in range(1, 121):
            product = product_repo.get_by_id(i)
            assert product.name == f"Product {i} SALE"
            assert product.description == f"Description {i}"

    def test_description_mutates_only_description(self):
        handler, product_repo, _ = _setup(make_products(3))

        handler.handle(_request(3, attribute=ProductAttribute.DESCRIPTION, text="!"))

        for i in range(1, 4):
            product = product_repo.get_by_id(i)
            assert product.description == f"Description {i}!"
            assert product.name == f"Product {i}"

    def test_no_advisory_when_amount_within_catalog(self):
        handler, _, progress = _setup()

        result = handler.handle(_request(10))

        assert not result.clamped
        assert progress.notes == []

    def test_progress_advances_once_per_record(self):
        handler, _, progress = _setup()

        handler.handle(_request(75))

        assert progress.total == 75
        assert progress.advanced == 75
        assert progress.finished

    def test_running_twice_appends_twice(self):
        handler, product_repo, _ = _setup(make_products(2))

        handler.handle(_request(2, text="-x"))
        handler.handle(_request(2, text="-x"))

        assert product_repo.get_by_id(1).name == "Product 1-x-x"

    def test_empty_append_text_changes_nothing(self):
        handler, product_repo, _ = _setup(make_products(2))

        result = handler.handle(_request(2, text=""))

        assert result.success
        assert product_repo.get_by_id(2).name == "Product 2"


class TestMassUpdatePagination:

    @pytest.mark.parametrize(
        "amount, expected_pages, expected_size",
        [
            (1, 1, 1),
            (49, 1, 49),
            (50, 1, 50),
            (51, 2, 50),
            (100, 2, 50),
            (101, 3, 50),
        ],
    )
    def test_fetches_exactly_the_pages_needed(self, amount, expected_pages, expected_size):
        handler, product_repo, _ = _setup(make_products(200))

        result = handler.handle(_request(amount))

        assert result.success
        assert result.pages_fetched == expected_pages
        assert all(size == expected_size for _, _, size in product_repo.fetched_pages)
        assert len(product_repo.saved_ids) == amount

    def test_last_page_is_truncated_to_amount(self):
        handler, product_repo, _ = _setup(make_products(200))

        handler.handle(_request(120))

        assert product_repo.saved_ids == list(range(1, 121))
        assert product_repo.get_by_id(121).name == "Product 121"

    def test_only_selected_store_is_touched(self):
        products = make_products(3, store_id=1) + [
            Product(id=10, name="Other", description="", store_ids=[2]),
        ]
        handler, product_repo, _ = _setup(products)

        result = handler.handle(_request(10, store_id=2))

        assert result.effective_amount == 1
        assert product_repo.saved_ids == [10]
        assert product_repo.get_by_id(1).name == "Product 1"

    def test_empty_page_ends_run_early(self):
        class ShrinkingRepository(FakeProductRepository):
            def fetch_page(self, store_id, page_number, page_size):
                if page_number > 1:
                    self.fetched_pages.append((store_id, page_number, page_size))
                    return []
                return super().fetch_page(store_id, page_number, page_size)

        progress = RecordingProgressReporter()
        product_repo = ShrinkingRepository(make_products(120))
        handler = MassUpdateHandler(product_repo, progress)

        result = handler.handle(_request(120))

        assert result.success
        assert result.processed == 50
        assert result.pages_fetched == 2


class TestMassUpdateEdgeCases:

    def test_zero_amount_saves_nothing(self):
        handler, product_repo, progress = _setup()

        result = handler.handle(_request(0))

        assert result.success
        assert result.processed == 0
        assert product_repo.fetched_pages == []
        assert product_repo.saved_ids == []
        assert progress.finished

    def test_empty_store_fails_before_fetching(self):
        handler, product_repo, progress = _setup([])

        result = handler.handle(_request(10))

        assert not result.success
        assert "No products" in result.reason
        assert product_repo.fetched_pages == []
        assert product_repo.saved_ids == []
        assert progress.total is None

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _request(-1)

    def test_non_integer_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _request("10")


class TestMassUpdateFailures:

    def test_save_failure_keeps_prior_saves(self):
        handler, product_repo, progress = _setup(fail_on_save=57)

        result = handler.handle(_request(120))

        assert not result.success
        assert result.processed == 56
        assert product_repo.saved_ids == list(range(1, 57))
        assert "record 57" in result.reason
        assert "Disk full" in result.reason
        assert not progress.finished

    def test_save_failure_stops_further_pages(self):
        handler, product_repo, _ = _setup(fail_on_save=57)

        result = handler.handle(_request(120))

        assert result.pages_fetched == 2
        assert [page for _, page, _ in product_repo.fetched_pages] == [1, 2]
        assert product_repo.get_by_id(57).name == "Product 57"

    def test_failure_on_first_record(self):
        handler, product_repo, _ = _setup(fail_on_save=1)

        result = handler.handle(_request(5))

        assert not result.success
        assert product_repo.saved_ids == []

    def test_invalid_product_aborts_run(self):
        products = make_products(3)
        products[1].name = "   "
        handler, product_repo, _ = _setup(products)

        result = handler.handle(_request(3, attribute=ProductAttribute.DESCRIPTION))

        assert not result.success
        assert "empty name" in result.reason
        assert product_repo.saved_ids == [1]

    def test_page_fetch_failure_aborts_run(self):
        handler, product_repo, _ = _setup(fail_on_page=2)

        result = handler.handle(_request(120))

        assert not result.success
        assert "page 2" in result.reason
        assert len(product_repo.saved_ids) == 50
