import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from whosenxt.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_FILENAME = "whosenxt_rules.yaml"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """
    Pick the rules file: explicit path, then $RULES_PATH, then the
    project root default.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get("RULES_PATH")
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_FILENAME


def _strip_markdown_fences(content: str) -> str:
    # Look for ```yaml starting block
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    # Otherwise assume the whole file is YAML
    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Loaded rules %s (version %s)", rules_path, rules.project.rules_version)
    return rules
