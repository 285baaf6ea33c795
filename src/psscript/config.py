"""Configuration loading for psscript."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from psscript.detection import POWERSHELL_ENV_VAR
from psscript.models import ExecutionPolicy, PsScriptConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".psscript"
CONFIG_FILE = CONFIG_DIR / "config.json"
EXECUTION_POLICY_ENV_VAR = "PSSCRIPT_EXECUTION_POLICY"


def _read_config_file(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("no config file at %s", path)
        return {}
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data


def _apply_env_overrides(data: dict) -> dict:
    executable = os.environ.get(POWERSHELL_ENV_VAR, "").strip()
    if executable:
        data["executable"] = executable

    policy = os.environ.get(EXECUTION_POLICY_ENV_VAR, "").strip()
    if policy:
        try:
            data["execution_policy"] = ExecutionPolicy(policy)
        except ValueError as e:
            raise ValueError(
                f"Invalid {EXECUTION_POLICY_ENV_VAR}={policy!r}; expected one of "
                + ", ".join(p.value for p in ExecutionPolicy)
            ) from e
    return data


def load_config(path: Path | None = None) -> PsScriptConfig:
    """Load config from disk, then apply environment overrides."""
    config_path = CONFIG_FILE if path is None else path
    data = _apply_env_overrides(_read_config_file(config_path))
    try:
        config = PsScriptConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {config_path}: {e}") from e
    log.debug("loaded config: %s", config.model_dump())
    return config
