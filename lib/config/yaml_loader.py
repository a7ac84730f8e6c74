"""Safe YAML loader."""
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from lib.contracts.errors import ConfigError


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return data
