"""Integration tests for the JSON-file product repository."""

import json
import logging
import threading

import pytest

from stockapi.application.add_product import AddProductHandler
from stockapi.application.delete_product import DeleteProductHandler
from stockapi.application.update_product import UpdateProductHandler
from stockapi.domain.exceptions import StorageError
from stockapi.domain.model.product import Product
from stockapi.infrastructure.persistence.json_product_repository import JsonProductRepository


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "datasource" / "data.json"


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestLoading:

    def test_missing_file_gives_empty_collection(self, data_file):
        repo = JsonProductRepository(data_file)

        assert repo.list_all() == []
        assert repo.next_id() == 1
        assert not data_file.exists()

    def test_malformed_file_logged_and_empty(self, data_file, caplog):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            repo = JsonProductRepository(data_file)

        assert repo.list_all() == []
        assert "Could not read" in caplog.text

    def test_non_array_document_logged_and_empty(self, data_file, caplog):
        data_file.parent.mkdir(parents=True)
        data_file.write_text('{"id": 1}', encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            repo = JsonProductRepository(data_file)

        assert repo.list_all() == []
        assert "Expected a JSON array" in caplog.text

    def test_non_object_entries_skipped(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text('[{"id": 1, "name": "A"}, 42, {"id": 2}]', encoding="utf-8")

        repo = JsonProductRepository(data_file)

        assert [p.id for p in repo.list_all()] == [1, 2]

    def test_next_id_resumes_after_highest_id(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text('[{"id": 3}, {"id": 8}, {"id": 5}]', encoding="utf-8")

        assert JsonProductRepository(data_file).next_id() == 9


class TestPersistence:

    def test_add_writes_pretty_printed_array(self, data_file):
        repo = JsonProductRepository(data_file)

        repo.add(Product(id=1, created_at="2024-01-01T00:00:00.000Z", name="Widget"))

        text = data_file.read_text(encoding="utf-8")
        assert text.startswith('[\n  {\n    "id": 1,')
        assert text.endswith("\n")
        assert _read(data_file) == [
            {"id": 1, "name": "Widget", "createdAt": "2024-01-01T00:00:00.000Z"}
        ]

    def test_round_trip_preserves_order_and_values(self, data_file):
        records = [
            {"id": 2, "name": "B", "salePrice": 1.25, "stock": 3, "createdAt": "t2"},
            {"id": 3, "name": None, "stock": 3, "color": None, "createdAt": "t3"},
            {"id": 1, "name": "A", "manufacturer": "Acme", "color": "red", "createdAt": "t1"},
        ]
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps(records), encoding="utf-8")

        first = JsonProductRepository(data_file)
        first.replace(first.list_all()[0], first.list_all()[0])
        second = JsonProductRepository(data_file)

        assert [p.to_record() for p in second.list_all()] == [p.to_record() for p in first.list_all()]
        assert _read(data_file) == records

    def test_untouched_null_fields_survive_rewrite(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(
            '[{"id": 1, "name": null, "stock": 3, "createdAt": "t"}, {"id": 2, "createdAt": "t"}]',
            encoding="utf-8",
        )
        repo = JsonProductRepository(data_file)
        second = repo.get_by_id(2)

        repo.replace(second, second)

        assert _read(data_file)[0] == {"id": 1, "name": None, "stock": 3, "createdAt": "t"}

    def test_update_to_null_stored_as_null(self, data_file):
        repo = JsonProductRepository(data_file)
        AddProductHandler(repo).handle({"name": "A", "stock": 1})

        UpdateProductHandler(repo).handle("1", {"name": None})

        stored = _read(data_file)[0]
        assert "name" in stored
        assert stored["name"] is None
        assert stored["stock"] == 1

    def test_non_ascii_written_unescaped(self, data_file):
        repo = JsonProductRepository(data_file)

        AddProductHandler(repo).handle({"name": "Café Crème"})

        text = data_file.read_text(encoding="utf-8")
        assert "Café Crème" in text
        assert "\\u00e9" not in text

    def test_delete_persists(self, data_file):
        repo = JsonProductRepository(data_file)
        handler = AddProductHandler(repo)
        handler.handle({"name": "A"})
        handler.handle({"name": "B"})

        DeleteProductHandler(repo).handle("1")

        assert [r["id"] for r in _read(data_file)] == [2]
        assert [p.id for p in JsonProductRepository(data_file).list_all()] == [2]

    def test_ids_not_reused_across_restart(self, data_file):
        repo = JsonProductRepository(data_file)
        handler = AddProductHandler(repo)
        handler.handle({"name": "A"})
        handler.handle({"name": "B"})
        DeleteProductHandler(repo).handle("2")

        reopened = JsonProductRepository(data_file)
        ack = AddProductHandler(reopened).handle({"name": "C"})

        assert ack.message == "Product 3 created successfully!"
        assert data_file.with_name("data.json.seq").read_text(encoding="utf-8").strip() == "3"

    def test_id_changed_by_update_not_reused(self, data_file):
        repo = JsonProductRepository(data_file)
        handler = AddProductHandler(repo)
        handler.handle({"name": "A"})

        UpdateProductHandler(repo).handle("1", {"id": 2})
        handler.handle({"name": "B"})

        ids = [p.id for p in repo.list_all()]
        assert ids == [2, 3]
        assert data_file.with_name("data.json.seq").read_text(encoding="utf-8").strip() == "3"

    def test_no_temp_files_left_behind(self, data_file):
        repo = JsonProductRepository(data_file)
        AddProductHandler(repo).handle({"name": "A"})

        assert sorted(p.name for p in data_file.parent.iterdir()) == ["data.json", "data.json.seq"]

    def test_failed_write_leaves_memory_unchanged(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        repo = JsonProductRepository(blocker / "data.json")

        with pytest.raises(StorageError):
            repo.add(Product(id=1, name="Lost"))

        assert repo.list_all() == []
        assert repo.next_id() == 1


class TestConcurrency:

    def test_concurrent_creates_get_distinct_ids(self, data_file):
        repo = JsonProductRepository(data_file)
        handler = AddProductHandler(repo)

        threads = [
            threading.Thread(target=handler.handle, args=({"name": f"P{i}"},))
            for i in range(20)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [p.id for p in repo.list_all()]
        assert sorted(ids) == list(range(1, 21))
        assert len(_read(data_file)) == 20
