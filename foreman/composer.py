import json
import logging
import os
from typing import Any, Dict, List, Literal, TypedDict

from foreman.reporter import Reporter
from foreman.storage import Filesystem
from foreman.utils.manifest import ensure_list, ensure_mapping, set_entry

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "composer.json"

ManifestState = Literal["unloaded", "loaded", "mutated", "persisted"]


class Dependency(TypedDict):
    package: str
    version: str


AutoloadConfig = TypedDict(
    "AutoloadConfig",
    {"classmap": List[str], "psr-0": Dict[str, str], "psr-4": Dict[str, str]},
    total=False,
)

ComposerConfig = TypedDict(
    "ComposerConfig",
    {
        "require": List[Dependency],
        "require-dev": List[Dependency],
        "autoload": AutoloadConfig,
    },
    total=False,
)


class ComposerManifest:
    """Merges scaffold configuration into an application's composer.json."""

    REQUIRE_DEPENDENCIES = "require"
    REQUIRE_DEV_DEPENDENCIES = "require-dev"
    AUTOLOAD_CLASSMAP = "autoload.classmap"
    AUTOLOAD_PSR0 = "autoload.psr-0"
    AUTOLOAD_PSR4 = "autoload.psr-4"

    def __init__(
        self,
        app_dir: str,
        config: ComposerConfig,
        filesystem: Filesystem,
        reporter: Reporter,
        report_reads: bool = False,
    ):
        """Initialize the editor.

        The manifest is not read until it is first needed.

        Args:
            app_dir: Application directory containing composer.json
            config: Packages and autoload entries to merge
            filesystem: Used to read and write the manifest file
            reporter: Receives one progress message per merged item
            report_reads: Also report the one-time read of the manifest
        """
        self.app_dir = app_dir
        self.config = config
        self.filesystem = filesystem
        self.reporter = reporter
        self.report_reads = report_reads
        self.manifest_path = os.path.join(app_dir, MANIFEST_FILENAME)
        self.state: ManifestState = "unloaded"
        self._text: str | None = None
        self._manifest: Dict[str, Any] | None = None

    def _load(self) -> None:
        if self._text is not None:
            return
        message = f"Reading {MANIFEST_FILENAME} from {self.manifest_path}"
        logger.info(message)
        if self.report_reads:
            self.reporter.comment("Foreman", message)
        text = self.filesystem.read(self.manifest_path)
        manifest = json.loads(text)
        if not isinstance(manifest, dict):
            raise ValueError(
                f"Manifest {self.manifest_path} must contain a JSON object, "
                f"found {type(manifest).__name__}"
            )
        self._text = text
        self._manifest = manifest
        self.state = "loaded"

    def get_manifest_text(self) -> str:
        """Return the manifest text exactly as last read or written."""
        self._load()
        assert self._text is not None
        return self._text

    def get_manifest(self) -> Dict[str, Any]:
        """Return the parsed manifest that merge operations mutate."""
        self._load()
        assert self._manifest is not None
        return self._manifest

    def _dependencies(self, section: str) -> List[Dependency]:
        return self.config.get(section, []) or []  # type: ignore[return-value]

    def _autoload(self, section: str) -> Any:
        return (self.config.get("autoload") or {}).get(section)

    def _merge_dependencies(self, section: str, label: str) -> None:
        dependencies = self._dependencies(section)
        if not dependencies:
            return
        manifest = self.get_manifest()
        for dependency in dependencies:
            package, version = dependency["package"], dependency["version"]
            self.reporter.comment("Composer", f"{label}: {package} {version}")
            set_entry(ensure_mapping(manifest, section), package, version)
            self.state = "mutated"

    def require_dependencies(self) -> None:
        """Merge configured runtime packages into ``require``."""
        self._merge_dependencies(self.REQUIRE_DEPENDENCIES, "Require")

    def require_dev_dependencies(self) -> None:
        """Merge configured development packages into ``require-dev``."""
        self._merge_dependencies(self.REQUIRE_DEV_DEPENDENCIES, "Require Dev")

    def add_autoload_classmap_entries(self) -> None:
        """Append configured paths to ``autoload.classmap``.

        Existing entries are kept in order and duplicates are not removed.
        """
        entries = self._autoload("classmap") or []
        if not entries:
            return
        manifest = self.get_manifest()
        for entry in entries:
            self.reporter.comment("Composer", f"Autoload Classmap adding: {entry}")
            ensure_list(manifest, "autoload", "classmap").append(entry)
            self.state = "mutated"

    def _merge_namespaces(self, section: str, label: str) -> None:
        entries = self._autoload(section) or {}
        if not entries:
            return
        manifest = self.get_manifest()
        for name, path in entries.items():
            self.reporter.comment("Composer", f"Adding {label} entry {name} => {path}")
            set_entry(ensure_mapping(manifest, "autoload", section), name, path)
            self.state = "mutated"

    def add_autoload_psr0_entries(self) -> None:
        """Merge configured prefixes into ``autoload.psr-0``."""
        self._merge_namespaces("psr-0", "PSR0")

    def add_autoload_psr4_entries(self) -> None:
        """Merge configured namespaces into ``autoload.psr-4``."""
        self._merge_namespaces("psr-4", "PSR4")

    def apply_config(self) -> None:
        """Run every merge in scaffolding order."""
        self.require_dependencies()
        self.require_dev_dependencies()
        self.add_autoload_classmap_entries()
        self.add_autoload_psr0_entries()
        self.add_autoload_psr4_entries()

    def get_manifest_json(self) -> str:
        """Serialize the manifest with 4-space indentation and unescaped slashes."""
        return json.dumps(self.get_manifest(), indent=4, ensure_ascii=False)

    def persist(self) -> None:
        """Write the serialized manifest back to composer.json."""
        text = self.get_manifest_json()
        self.reporter.comment(
            "Foreman", f"Writing manifest file to {self.manifest_path}"
        )
        self.filesystem.write(self.manifest_path, text)
        self._text = text
        self.state = "persisted"
        logger.info(f"Saved manifest to {self.manifest_path}")
