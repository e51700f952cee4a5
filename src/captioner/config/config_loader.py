"""YAML configuration loader for named captioners.

A document usually needs several numbering sequences (figures, tables,
equations). They can be declared together in one file:

    captioners:
      figures:
        prefix: Figure
      tables:
        prefix: Table
        levels: 2
        types: [n, c]
        infix: "."
        link: true
"""

from pathlib import Path
from typing import Optional

import yaml

from captioner.config.captioner_config import CaptionerConfig
from captioner.exceptions import InvalidConfigError


def load_configs_from_yaml(path: Path | str) -> dict[str, CaptionerConfig]:
    """Load named captioner configurations from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Mapping of captioner name to CaptionerConfig, in file order.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        InvalidConfigError: If the YAML structure or an option is invalid.
        yaml.YAMLError: If the YAML is malformed.

    Example:
        >>> configs = load_configs_from_yaml("captioners.yaml")
        >>> configs["tables"].prefix
        'Table'
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise InvalidConfigError(
            f"Invalid YAML structure: expected dict, got {type(data).__name__}"
        )

    captioners = data.get("captioners", {})
    if captioners is None:
        return {}

    if not isinstance(captioners, dict):
        raise InvalidConfigError(
            f"Invalid captioners structure: expected dict, got {type(captioners).__name__}"
        )

    configs = {}
    for name, options in captioners.items():
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise InvalidConfigError(
                f"Captioner '{name}' is not a dict: {type(options).__name__}"
            )
        try:
            configs[str(name)] = CaptionerConfig.from_dict(options)
        except InvalidConfigError as e:
            raise InvalidConfigError(f"Captioner '{name}': {e}") from e

    return configs


def load_configs_from_yaml_safe(
    path: Path | str,
) -> tuple[dict[str, CaptionerConfig], Optional[str]]:
    """Load configurations, returning an error message instead of raising.

    Returns:
        Tuple of (configs, error_message). If successful, error_message is
        None. If failed, configs is empty.
    """
    try:
        return load_configs_from_yaml(path), None
    except FileNotFoundError as e:
        return {}, str(e)
    except InvalidConfigError as e:
        return {}, f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return {}, f"YAML parsing error: {e}"
