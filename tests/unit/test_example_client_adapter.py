"""Tests for ExampleClientAdapter (offline provider)."""

import json

from app.extraction.example_client_adapter import ExampleClientAdapter
from app.extraction.validator import build_records


class TestExampleClientAdapter:
    def test_returns_wrapped_company_list(self) -> None:
        adapter = ExampleClientAdapter()
        result = adapter.create_chat_completion(
            model="any",
            temperature=0.0,
            system_prompt="sys",
            user_prompt="user",
            json_schema={"type": "object"},
        )
        parsed = json.loads(result)
        assert len(parsed["companies"]) == 2

    def test_response_builds_valid_records(self) -> None:
        adapter = ExampleClientAdapter()
        result = adapter.create_chat_completion(
            model="x",
            temperature=0.1,
            system_prompt="",
            user_prompt="",
            json_schema={},
        )
        records = build_records(json.loads(result))
        assert records[0].company_name == "Example Builders Inc."
        assert records[1].website == "N/A"

    def test_ignores_input_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        r1 = adapter.create_chat_completion(
            model="a",
            temperature=0.0,
            system_prompt="s1",
            user_prompt="u1",
            json_schema={"k": "v"},
        )
        r2 = adapter.create_chat_completion(
            model="b",
            temperature=1.0,
            system_prompt="s2",
            user_prompt="u2",
            json_schema={},
        )
        assert r1 == r2
