import os
import yaml
from pathlib import Path
from typing import Any, Dict, List
from dotenv import dotenv_values, find_dotenv
import logging

from .composer import AutoloadConfig, ComposerConfig, Dependency

logger = logging.getLogger(__name__)

CONFIG_PATH_VARIABLE = "FOREMAN_CONFIG_PATH"


def get_project_root() -> Path:
    """Get the project root directory.

    Returns:
        Path to the project root directory
    """
    return Path(__file__).parent.parent


def _resolve_config_path(config_path: str | None) -> Path:
    if config_path:
        return Path(config_path)
    if CONFIG_PATH_VARIABLE in os.environ:
        return Path(os.environ[CONFIG_PATH_VARIABLE])

    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        logger.debug("No .env file found")
    else:
        env_path = dotenv_values(dotenv_path).get(CONFIG_PATH_VARIABLE)
        if env_path:
            return Path(env_path)

    return get_project_root() / "foreman.yaml"


def get_config(config_path: str | None = None) -> Dict[str, Any]:
    """Load the scaffold configuration file.

    The path is taken from the argument, then the FOREMAN_CONFIG_PATH
    environment variable, then the same variable in a .env file, and finally
    defaults to foreman.yaml in the project root.

    Scalars are loaded as strings exactly as written, so versions such as
    1.10 or ~ reach the manifest unchanged.

    Returns:
        Dictionary containing the configuration
    """
    path = _resolve_config_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info(f"Loading configuration from {path}")
    with open(path, "r") as f:
        config = yaml.load(f, Loader=yaml.BaseLoader)

    return config or {}


def _scalar(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{where} must be a string, found {type(value).__name__}")
    return value


def _dependencies(config: Dict[str, Any], section: str) -> List[Dependency]:
    entries = config.get(section) or []
    if not isinstance(entries, list):
        raise ValueError(f"'{section}' must be a list of package declarations")
    dependencies = []
    for entry in entries:
        if not isinstance(entry, dict) or not {"package", "version"} <= entry.keys():
            raise ValueError(f"Invalid '{section}' declaration: {entry!r}")
        dependencies.append(
            Dependency(
                package=_scalar(entry["package"], f"'{section}' package"),
                version=_scalar(entry["version"], f"'{section}' version"),
            )
        )
    return dependencies


def _namespaces(autoload: Dict[str, Any], section: str) -> Dict[str, str]:
    entries = autoload.get(section) or {}
    if not isinstance(entries, dict):
        raise ValueError(f"'autoload.{section}' must be a mapping of name to path")
    where = f"'autoload.{section}' entry"
    return {
        _scalar(name, where): _scalar(path, where) for name, path in entries.items()
    }


def get_composer_config(config: Dict[str, Any]) -> ComposerConfig:
    """Extract the composer section of a scaffold configuration.

    Args:
        config: Full configuration, or the composer section itself

    Returns:
        ComposerConfig with only the sections that are present. Version
        strings and paths are passed through verbatim.

    Raises:
        ValueError: If a section has the wrong shape or a version, path or
            name is not a string
    """
    section = config.get("composer", config) or {}
    composer: ComposerConfig = {}

    for name in ("require", "require-dev"):
        if name in section:
            composer[name] = _dependencies(section, name)  # type: ignore[literal-required]

    if "autoload" in section:
        autoload_section = section["autoload"] or {}
        if not isinstance(autoload_section, dict):
            raise ValueError("'autoload' must be a mapping")
        autoload: AutoloadConfig = {}
        if "classmap" in autoload_section:
            classmap = autoload_section["classmap"] or []
            if not isinstance(classmap, list):
                raise ValueError("'autoload.classmap' must be a list of paths")
            autoload["classmap"] = [
                _scalar(path, "'autoload.classmap' entry") for path in classmap
            ]
        for name in ("psr-0", "psr-4"):
            if name in autoload_section:
                autoload[name] = _namespaces(autoload_section, name)  # type: ignore[literal-required]
        composer["autoload"] = autoload

    return composer
