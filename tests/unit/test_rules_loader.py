"""
Rules file loading and schema validation tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from whosenxt.components.availability import load_config_from_rules as availability_config
from whosenxt.components.benefits import load_config_from_rules as discount_config
from whosenxt.components.bundles import load_config_from_rules as bundle_config
from whosenxt.components.onboarding import load_config_from_rules as upload_config
from whosenxt.rules.loader import DEFAULT_RULES_FILENAME, load_rules, resolve_rules_path
from whosenxt.rules.models import Rules

MINIMAL = {"project": {"slug": "whosenxt", "rules_version": "test"}}


def write_rules(tmp_path: Path, data: dict[str, Any]) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


class TestShippedRules:
    """The rules file at the project root."""

    def test_loads(self, rules: Rules) -> None:
        assert rules.project.slug == "whosenxt"
        assert rules.benefits.discount.eligible_categories == [
            "clothing",
            "accessories",
            "fashion",
        ]

    def test_component_configs_match_defaults(self, rules: Rules) -> None:
        """Shipped values equal the components' built-in defaults."""
        data = rules.as_dict()
        assert discount_config(data).eligible_categories == ("clothing", "accessories", "fashion")
        assert availability_config(data).use_store_timezone is False
        assert availability_config(data).default_timezone == "America/New_York"
        assert [(t.min_items, t.percentage) for t in bundle_config(data).tiers] == [
            (3, 15),
            (2, 10),
        ]
        assert upload_config(data).max_upload_bytes == 5 * 1024 * 1024


class TestLoadRules:
    def test_minimal_file_gets_defaults(self, tmp_path: Path) -> None:
        rules = load_rules(write_rules(tmp_path, MINIMAL))
        assert rules.project.rules_version == "test"
        assert rules.availability.default_timezone == "America/New_York"
        assert len(rules.bundles.discount_tiers) == 2

    def test_markdown_fenced_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text(
            "# Rules\n\nSome prose.\n\n```yaml\n"
            + yaml.safe_dump(MINIMAL)
            + "```\n\nTrailing notes.\n"
        )
        rules = load_rules(path)
        assert rules.project.slug == "whosenxt"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("project: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_missing_project_section_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write_rules(tmp_path, {"bundles": {}}))

    def test_unknown_timezone_rejected(self, tmp_path: Path) -> None:
        data = {**MINIMAL, "availability": {"default_timezone": "Mars/Olympus_Mons"}}
        with pytest.raises(ValueError):
            load_rules(write_rules(tmp_path, data))

    @pytest.mark.parametrize("percentage", [-1, 101])
    def test_bundle_percentage_out_of_range(self, tmp_path: Path, percentage: int) -> None:
        data = {
            **MINIMAL,
            "bundles": {"discount_tiers": [{"min_items": 2, "percentage": percentage}]},
        }
        with pytest.raises(ValueError):
            load_rules(write_rules(tmp_path, data))

    def test_custom_categories_flow_to_component(self, tmp_path: Path) -> None:
        data = {**MINIMAL, "benefits": {"discount": {"eligible_categories": ["Shoes"]}}}
        rules = load_rules(write_rules(tmp_path, data))
        assert discount_config(rules.as_dict()).eligible_categories == ("shoes",)


class TestResolveRulesPath:
    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULES_PATH", "/elsewhere.yaml")
        assert resolve_rules_path(tmp_path / "x.yaml") == tmp_path / "x.yaml"

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULES_PATH", "/etc/whosenxt/rules.yaml")
        assert resolve_rules_path() == Path("/etc/whosenxt/rules.yaml")

    def test_default_is_project_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("RULES_PATH", raising=False)
        (tmp_path / "pyproject.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert resolve_rules_path() == tmp_path / DEFAULT_RULES_FILENAME

    def test_load_rules_uses_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULES_PATH", str(write_rules(tmp_path, MINIMAL)))
        assert load_rules().project.rules_version == "test"
