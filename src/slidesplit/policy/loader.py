"""YAML policy loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union
from .schema import SplitPolicy

class PolicyLoadError(Exception):
    """Exception raised when policy loading or validation fails."""
    pass

def _build_policy(data: Any, source: str) -> SplitPolicy:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PolicyLoadError(f"{source} must contain a YAML mapping, got {type(data)}")

    try:
        policy = SplitPolicy.model_validate(data)
    except Exception as e:
        raise PolicyLoadError(f"Policy validation failed: {e}")

    issues = policy.validate_rules()
    if issues:
        raise PolicyLoadError(f"Policy validation issues: {'; '.join(issues)}")

    return policy

def load_policy(path: Union[str, Path]) -> SplitPolicy:
    """
    Load and validate a split policy from a YAML file.

    An empty file yields the default policy.

    Args:
        path: Path to YAML policy file

    Returns:
        SplitPolicy: Validated policy object

    Raises:
        PolicyLoadError: If file cannot be read or policy is invalid
    """
    path = Path(path)

    if not path.exists():
        raise PolicyLoadError(f"Policy file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PolicyLoadError(f"Invalid YAML in {path}: {e}")
    except Exception as e:
        raise PolicyLoadError(f"Cannot read policy file {path}: {e}")

    return _build_policy(data, f"Policy file {path}")

def load_policy_from_string(yaml_content: str) -> SplitPolicy:
    """
    Load and validate a split policy from a YAML string.

    Args:
        yaml_content: YAML content as string

    Returns:
        SplitPolicy: Validated policy object

    Raises:
        PolicyLoadError: If YAML is invalid or policy validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise PolicyLoadError(f"Invalid YAML content: {e}")

    return _build_policy(data, "Policy content")
