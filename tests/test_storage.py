"""
Tests for key-value stores and HighScoreStore.

Tests cover:
- MemoryStore get/set
- JsonFileStore persistence, missing and corrupt files
- HighScoreStore tolerant reads (absent, non-numeric, negative)
- HighScoreStore write validation
"""

import json

import pytest

from clicker.storage import (
    HIGH_SCORE_KEY,
    HighScoreStore,
    JsonFileStore,
    MemoryStore,
)


class TestMemoryStore:
    """Test the dict-backed store."""

    def test_missing_key_is_none(self):
        assert MemoryStore().get('record') is None

    def test_set_then_get(self):
        store = MemoryStore()
        store.set('record', '7')
        assert store.get('record') == '7'

    def test_initial_values_are_copied(self):
        """Test the store does not alias the initial dict."""
        initial = {'record': '3'}
        store = MemoryStore(initial)
        store.set('record', '4')
        assert initial == {'record': '3'}


class TestJsonFileStore:
    """Test the JSON file store."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileStore(tmp_path / 'missing.json')
        assert store.get('record') is None

    def test_set_creates_parent_dirs(self, tmp_path):
        path = tmp_path / 'nested' / 'dir' / 'store.json'
        JsonFileStore(path).set('record', '12')

        assert json.loads(path.read_text(encoding='utf-8')) == {'record': '12'}

    def test_values_survive_new_instance(self, tmp_path):
        """Test persistence across store instances (sessions)."""
        path = tmp_path / 'store.json'
        JsonFileStore(path).set('record', '5')

        assert JsonFileStore(path).get('record') == '5'

    def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / 'store.json'
        path.write_text(json.dumps({'volume': '3'}), encoding='utf-8')

        JsonFileStore(path).set('record', '9')

        assert json.loads(path.read_text(encoding='utf-8')) == {'volume': '3', 'record': '9'}

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / 'store.json'
        path.write_text('{not json', encoding='utf-8')

        assert JsonFileStore(path).get('record') is None

    def test_non_object_json_reads_empty(self, tmp_path):
        path = tmp_path / 'store.json'
        path.write_text('[1, 2, 3]', encoding='utf-8')

        assert JsonFileStore(path).get('record') is None

    def test_non_string_values_read_as_strings(self, tmp_path):
        path = tmp_path / 'store.json'
        path.write_text(json.dumps({'record': 42}), encoding='utf-8')

        assert JsonFileStore(path).get('record') == '42'


class TestHighScoreStore:
    """Test high score parsing and saving."""

    def test_default_key(self):
        store = MemoryStore()
        HighScoreStore(store).save(3)
        assert store.get(HIGH_SCORE_KEY) == '3'
        assert HIGH_SCORE_KEY == 'record'

    def test_absent_value_is_zero(self):
        assert HighScoreStore(MemoryStore()).load() == 0

    @pytest.mark.parametrize('raw', ['', 'abc', '3.5', 'NaN', '1e3'])
    def test_non_numeric_value_is_zero(self, raw):
        assert HighScoreStore(MemoryStore({'record': raw})).load() == 0

    def test_negative_value_is_zero(self):
        assert HighScoreStore(MemoryStore({'record': '-4'})).load() == 0

    def test_whitespace_is_tolerated(self):
        assert HighScoreStore(MemoryStore({'record': ' 8\n'})).load() == 8

    def test_round_trip_through_file(self, tmp_path):
        path = tmp_path / 'store.json'
        HighScoreStore(JsonFileStore(path)).save(11)
        assert HighScoreStore(JsonFileStore(path)).load() == 11

    def test_save_rejects_negative(self):
        with pytest.raises(ValueError):
            HighScoreStore(MemoryStore()).save(-1)

    def test_custom_key(self):
        store = MemoryStore({'best': '6'})
        assert HighScoreStore(store, key='best').load() == 6
