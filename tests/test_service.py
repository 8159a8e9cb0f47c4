"""Tests for CasefyService, the object-oriented entry point."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest

from json_casefy import CasefyService, TransformResult, TraversalOptions
from json_casefy.errors import ConfigurationError
from json_casefy.hooks import RenameEvent
from json_casefy.registry import TransformerRegistry
from json_casefy.strategies import CamelCaseStrategy, SnakeCaseStrategy


class TestConstruction:
    """Style names are validated when the service is built."""

    def test_unsupported_source(self) -> None:
        with pytest.raises(
            ConfigurationError, match="Unsupported source case style: bogus_style"
        ):
            CasefyService("bogus_style", "camelCase")

    def test_unsupported_target(self) -> None:
        with pytest.raises(
            ConfigurationError, match="Unsupported target case style: bogus_style"
        ):
            CasefyService("snake_case", "bogus_style")

    def test_source_checked_before_target(self) -> None:
        with pytest.raises(ConfigurationError, match="source"):
            CasefyService("nope", "nope")

    def test_strategies_and_default_options(self) -> None:
        service = CasefyService("snake_case", "camelCase")
        assert isinstance(service.from_strategy, SnakeCaseStrategy)
        assert isinstance(service.to_strategy, CamelCaseStrategy)
        assert service.options == TraversalOptions()

    def test_injected_registry(self) -> None:
        registry = TransformerRegistry()
        service = CasefyService("snake_case", "camelCase", registry=registry)
        assert service.from_strategy is registry.resolve("snake_case")


class TestTransform:
    """transform() rewrites keys and reports bad data instead of raising."""

    def test_success(self) -> None:
        service = CasefyService("snake_case", "camelCase")
        result = service.transform({"user_name": "John", "user_age": 30})
        assert result == TransformResult(
            data={"userName": "John", "userAge": 30},
            transformed_keys=2,
            from_case="snake_case",
            to_case="camelCase",
            success=True,
            error=None,
        )

    def test_reusable_across_calls(self) -> None:
        service = CasefyService("camelCase", "kebab-case")
        first = service.transform({"userName": 1})
        second = service.transform([{"userName": 2}, {"lastLogin": 3}])
        assert first.data == {"user-name": 1}
        assert second.data == [{"user-name": 2}, {"last-login": 3}]
        assert second.transformed_keys == 2

    def test_options_applied(self) -> None:
        service = CasefyService(
            "snake_case",
            "PascalCase",
            TraversalOptions(field_mappings={"user_id": "ID"}, deep=False),
        )
        result = service.transform({"user_id": 1, "user_info": {"first_name": "J"}})
        assert result.data == {"ID": 1, "UserInfo": {"first_name": "J"}}

    def test_cycle_reported_not_raised(self) -> None:
        data: dict[str, Any] = {"user_name": "x"}
        data["self_ref"] = data
        result = CasefyService("snake_case", "camelCase").transform(data)
        assert result.success is False
        assert result.data is data
        assert result.transformed_keys == 0
        assert result.error is not None
        assert "Circular reference" in result.error

    def test_failure_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        items: list[Any] = []
        items.append(items)
        with caplog.at_level(logging.WARNING, logger="json_casefy.service"):
            CasefyService("snake_case", "camelCase").transform(items)
        assert "snake_case -> camelCase failed" in caplog.text


class TestLogging:
    """set_logging() and on_rename control the per-rename records."""

    def test_set_logging_emits_debug_records(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        service = CasefyService("snake_case", "camelCase")
        service.set_logging(True)
        with caplog.at_level(logging.DEBUG, logger="json_casefy.hooks"):
            service.transform({"user_name": "John", "nested": {"deep_property": 1}})

        assert "[camelCase] user_name -> userName" in caplog.text
        assert "[camelCase] deep_property -> deepProperty" in caplog.text

    def test_unchanged_keys_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        service = CasefyService("snake_case", "camelCase")
        service.set_logging(True)
        with caplog.at_level(logging.DEBUG, logger="json_casefy.hooks"):
            service.transform({"id": 1, "name": 2})
        assert caplog.records == []

    def test_logging_off_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="json_casefy"):
            CasefyService("snake_case", "camelCase").transform({"user_name": 1})
        assert caplog.records == []

    def test_set_logging_false_disables(self, caplog: pytest.LogCaptureFixture) -> None:
        service = CasefyService("snake_case", "camelCase")
        service.set_logging(True)
        service.set_logging(False)
        with caplog.at_level(logging.DEBUG, logger="json_casefy"):
            service.transform({"user_name": 1})
        assert caplog.records == []

    def test_on_rename_callback(self) -> None:
        events: list[RenameEvent] = []
        service = CasefyService("snake_case", "camelCase", on_rename=events.append)
        service.transform({"user_list": [{"first_name": "J"}]})
        assert [e.path for e in events] == ["user_list", "user_list[0].first_name"]


class TestStats:
    """stats() reports the bound styles, options and available styles."""

    def test_stats(self) -> None:
        service = CasefyService(
            "snake_case", "camelCase", TraversalOptions(exclude_fields=frozenset({"x"}))
        )
        stats = service.stats()
        assert stats["from_case"] == "snake_case"
        assert stats["to_case"] == "camelCase"
        assert stats["options"]["exclude_fields"] == ["x"]
        assert stats["available_transformers"] == [
            "camelCase",
            "snake_case",
            "PascalCase",
            "kebab-case",
        ]


class TestConcurrentTransform:
    """One service shared across threads renames every payload correctly."""

    def test_shared_service_under_cache_pressure(self) -> None:
        service = CasefyService("snake_case", "camelCase", cache_size=4)

        def worker(n: int) -> list[TransformResult]:
            failures = []
            for i in range(300):
                payload = {f"key_{n}_{i % 37}": 1, f"other_{i % 11}": 2}
                result = service.transform(payload)
                expected = {f"key{n}{i % 37}": 1, f"other{i % 11}": 2}
                if not result.success or result.data != expected:
                    failures.append(result)
            return failures

        with ThreadPoolExecutor(max_workers=8) as pool:
            failures = [r for batch in pool.map(worker, range(8)) for r in batch]

        assert failures == []
