"""Tests for the typed list adapter."""

import json
from pathlib import Path

import pytest

from listfile.errors import ConversionError
from listfile.store.line_store import ListFile
from listfile.store.serialization import SerializationSettings
from listfile.store.typed import TypedListFile


class TestTypedListFile:
    def test_add_then_get(self, tmp_path: Path):
        items = TypedListFile(tmp_path / "ints.txt", item_type=int)
        items.add(5)
        assert items[0] == 5
        assert (tmp_path / "ints.txt").read_text() == "5\n"

    def test_defaults_to_strings(self, tmp_path: Path):
        items = TypedListFile(tmp_path / "items.txt")
        items.add("a")
        assert items[0] == "a"

    def test_contains_compares_serialized_text(self, tmp_path: Path):
        items = TypedListFile(tmp_path / "floats.txt", item_type=float)
        items.add(1.0)
        assert items.contains(1) is True
        assert 1 in items
        assert items.index_of(1) == 0

    def test_semantic_equal_but_different_text(self, tmp_path: Path):
        settings = SerializationSettings(
            serialize=lambda value: value,
            deserialize=lambda line: line,
        )
        items = TypedListFile(tmp_path / "items.txt", settings=settings)
        items.add("a b")
        assert items.contains("a  b") is False

    def test_insert_and_remove(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        items = TypedListFile(path, item_type=int)
        items.add(1)
        items.add(3)
        items.insert(1, 2)
        assert list(items) == [1, 2, 3]
        assert items.remove(2) is True
        assert items.remove(7) is False
        assert path.read_text().splitlines() == ["1", "3"]

    def test_set_is_memory_only(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        items = TypedListFile(path, item_type=int)
        items.add(1)
        items[0] = 9
        assert items[0] == 9
        assert path.read_text().splitlines() == ["1"]

    def test_set_element_persists(self, tmp_path: Path):
        path = tmp_path / "items.txt"
        items = TypedListFile(path)
        items.set_element(2, "x")
        assert path.read_text().splitlines() == ["", "", "x"]

    def test_remove_at_and_clear(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        items = TypedListFile(path, item_type=int)
        items.add(1)
        items.add(2)
        items.remove_at(0)
        assert items.to_list() == [2]
        del items[0]
        assert len(items) == 0
        items.add(3)
        items.clear()
        assert not path.exists()

    def test_index_errors_propagate(self, tmp_path: Path):
        items = TypedListFile(tmp_path / "ints.txt", item_type=int)
        with pytest.raises(IndexError):
            items[0]
        with pytest.raises(IndexError):
            items.insert(1, 5)

    def test_iteration_is_lazy(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        path.write_text("1\nbad\n3\n")
        items = TypedListFile(path, item_type=int)
        it = iter(items)
        assert next(it) == 1
        with pytest.raises(ConversionError):
            next(it)

    def test_get_malformed_line(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        path.write_text("oops\n")
        items = TypedListFile(path, item_type=int)
        with pytest.raises(ConversionError):
            items[0]

    def test_iteration_uses_snapshot(self, tmp_path: Path):
        items = TypedListFile(tmp_path / "ints.txt", item_type=int, auto_flush=False)
        items.add(1)
        it = iter(items)
        items.add(2)
        assert list(it) == [1]
        assert list(items) == [1, 2]

    def test_settings_and_item_type_conflict(self, tmp_path: Path):
        with pytest.raises(ValueError, match="not both"):
            TypedListFile(
                tmp_path / "ints.txt",
                settings=SerializationSettings.for_type(int),
                item_type=int,
            )

    def test_needs_path_or_store(self, tmp_path: Path):
        with pytest.raises(ValueError, match="exactly one"):
            TypedListFile()
        with pytest.raises(ValueError, match="exactly one"):
            TypedListFile(tmp_path / "a.txt", store=ListFile(tmp_path / "b.txt"))

    def test_adopts_store_argument(self, tmp_path: Path):
        store = ListFile(tmp_path / "ints.txt")
        items = TypedListFile(store=store, item_type=int)
        items.add(3)
        assert items.store is store
        assert store.lines == ["3"]

    def test_custom_json_settings(self, tmp_path: Path):
        settings = SerializationSettings(
            serialize=lambda value: json.dumps(value, sort_keys=True),
            deserialize=json.loads,
        )
        path = tmp_path / "records.jsonl"
        with TypedListFile(path, settings=settings) as items:
            items.add({"b": 2, "a": 1})
        reopened = TypedListFile(path, settings=settings)
        assert reopened[0] == {"a": 1, "b": 2}
        assert reopened.contains({"a": 1, "b": 2})

    def test_malformed_json_wrapped(self, tmp_path: Path):
        path = tmp_path / "records.jsonl"
        path.write_text("{not json\n")
        settings = SerializationSettings(serialize=json.dumps, deserialize=json.loads)
        items = TypedListFile(path, settings=settings)
        with pytest.raises(ConversionError):
            items[0]

    def test_deferred_mode(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        with TypedListFile(path, item_type=int, auto_flush=False) as items:
            items.add(1)
            assert items.is_dirty is True
            assert not path.exists()
        assert path.read_text().splitlines() == ["1"]

    def test_flush(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        items = TypedListFile(path, item_type=int, auto_flush=False)
        items.add(4)
        items.flush()
        assert items.is_dirty is False
        assert path.read_text().splitlines() == ["4"]

    def test_wrap_existing_store(self, tmp_path: Path):
        path = tmp_path / "ints.txt"
        store = ListFile(path, auto_flush=False)
        items = TypedListFile.wrap(store, SerializationSettings.for_type(int))
        items.add(7)
        assert items.store is store
        assert items.path == path
        items.close()
        assert store.closed is True
        assert path.read_text().splitlines() == ["7"]

    def test_copy_to(self, tmp_path: Path):
        items = TypedListFile(tmp_path / "ints.txt", item_type=int)
        items.add(1)
        items.add(2)
        target = [0, 0, 0]
        items.copy_to(target, 1)
        assert target == [0, 1, 2]

    def test_round_trip_across_instances(self, tmp_path: Path):
        path = tmp_path / "floats.txt"
        values = [0.5, 2.0, -1.25, 1e-7]
        with TypedListFile(path, item_type=float) as items:
            for value in values:
                items.add(value)
        assert TypedListFile(path, item_type=float).to_list() == values

    def test_bool_round_trip(self, tmp_path: Path):
        path = tmp_path / "flags.txt"
        with TypedListFile(path, item_type=bool) as items:
            items.add(True)
            items.add(False)
        assert path.read_text().splitlines() == ["True", "False"]
        assert TypedListFile(path, item_type=bool).to_list() == [True, False]
