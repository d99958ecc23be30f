"""Tests for the JSON/CSV boundary adapters."""

import json

import pytest

from subpath.adapters.io import CSVQuerySource, JSONResultSink, JSONUserSource
from subpath.adapters.io.csv_queries import parse_queries
from subpath.adapters.io.json_users import parse_users
from subpath.config import OutputConfig
from subpath.domain.errors import (
    EmptyQuerySetError,
    EmptyUserSetError,
    InputUnreadableError,
    OutputUnwritableError,
)
from subpath.domain.models import PathEntry, ResultRecord, SubscriberRef


class TestJSONUserSource:
    def test_load_users(self, data_dir):
        users = JSONUserSource(data_dir / "users.json").load()

        assert [u.email for u in users] == ["a@x.io", "b@x.io", "c@x.io"]
        assert users[0].subscribers == (SubscriberRef(email="b@x.io", created="ignored"),)
        assert users[1].created == "2021"
        assert users[0].nick == "a"

    def test_null_or_missing_subscribers(self):
        users = parse_users(
            '[{"Nick": "n", "Email": "a@x.io", "Created_at": "2020", "Subscribers": null},'
            ' {"Email": "b@x.io", "Created_at": "2021"}]'
        )

        assert [u.subscribers for u in users] == [(), ()]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputUnreadableError) as excinfo:
            JSONUserSource(tmp_path / "nope.json").load()
        assert excinfo.value.file_path.endswith("nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(InputUnreadableError):
            JSONUserSource(path).load()

    def test_wrong_layout(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text('[{"Nick": "no email"}]', encoding="utf-8")

        with pytest.raises(InputUnreadableError):
            JSONUserSource(path).load()

    @pytest.mark.parametrize("content", ["[]", "null"])
    def test_empty_user_set(self, tmp_path, content):
        path = tmp_path / "users.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(EmptyUserSetError):
            JSONUserSource(path).load()


class TestCSVQuerySource:
    def test_load_queries_in_file_order(self, data_dir):
        queries = CSVQuerySource(data_dir / "input.csv").load()

        assert list(queries) == [
            ("a@x.io", "c@x.io"),
            ("c@x.io", "a@x.io"),
            ("a@x.io", "a@x.io"),
        ]

    def test_parse_keeps_fields_verbatim_and_skips_only_empty_lines(self):
        pairs = parse_queries([[" a@x.io", "c@x.io "], [], ["", ""], ["a", "b"]])

        assert pairs == [(" a@x.io", "c@x.io "), ("", ""), ("a", "b")]

    def test_load_keeps_one_query_per_row(self, tmp_path):
        path = tmp_path / "input.csv"
        path.write_text(" a@x.io,c@x.io \n\n,\na,b\n", encoding="utf-8")

        queries = CSVQuerySource(path).load()

        assert list(queries) == [(" a@x.io", "c@x.io "), ("", ""), ("a", "b")]

    def test_short_row_is_unreadable(self):
        with pytest.raises(InputUnreadableError):
            parse_queries([["a", "b"], ["lonely"]])

    def test_single_field_first_row_is_unreadable(self):
        with pytest.raises(InputUnreadableError):
            parse_queries([["lonely"], ["also"]])

    def test_field_count_must_match_first_row(self):
        with pytest.raises(InputUnreadableError) as excinfo:
            parse_queries([["a", "b"], ["c", "d", "extra"]])
        assert "line 2" in excinfo.value.message

    def test_consistent_extra_fields_are_accepted(self):
        pairs = parse_queries([["a", "b", "x"], ["c", "d", "y"]])

        assert pairs == [("a", "b"), ("c", "d")]

    def test_invalid_utf8_is_unreadable(self, tmp_path):
        path = tmp_path / "input.csv"
        path.write_bytes(b"a@x.io,\xff\xfe@x.io\n")

        with pytest.raises(InputUnreadableError) as excinfo:
            CSVQuerySource(path).load()
        assert isinstance(excinfo.value.cause, UnicodeDecodeError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputUnreadableError):
            CSVQuerySource(tmp_path / "nope.csv").load()

    def test_empty_query_set(self, tmp_path):
        path = tmp_path / "input.csv"
        path.write_text("\n\n", encoding="utf-8")

        with pytest.raises(EmptyQuerySetError):
            CSVQuerySource(path).load()


class TestJSONResultSink:
    RECORDS = [
        ResultRecord(id=1, source="a", target="c", path=(PathEntry("b", "2021"),)),
        ResultRecord(id=2, source="c", target="a"),
    ]

    def test_write_omits_empty_path(self, tmp_path):
        path = tmp_path / "result.json"

        JSONResultSink(path, OutputConfig()).write(self.RECORDS)

        assert json.loads(path.read_text(encoding="utf-8")) == [
            {"id": 1, "from": "a", "to": "c", "path": [{"email": "b", "created_at": "2021"}]},
            {"id": 2, "from": "c", "to": "a"},
        ]

    def test_write_keeps_empty_path_when_configured(self, tmp_path):
        path = tmp_path / "result.json"

        JSONResultSink(path, OutputConfig(omit_empty_path=False, indent=2)).write(self.RECORDS)

        text = path.read_text(encoding="utf-8")
        assert json.loads(text)[1]["path"] == []
        assert text.endswith("\n")
        assert '\n  {\n    "id": 1' in text

    def test_unwritable_destination(self, tmp_path):
        with pytest.raises(OutputUnwritableError):
            JSONResultSink(tmp_path / "missing" / "result.json", OutputConfig()).write(
                self.RECORDS
            )
