"""Tasks for the foreman package.

This module contains the scaffolding tasks exposed by the command line.
"""

import logging
from typing import Optional

from foreman.composer import ComposerManifest
from foreman.config import get_composer_config, get_config
from foreman.reporter import ConsoleReporter, Reporter
from foreman.storage import Filesystem, LocalFilesystem

logger = logging.getLogger(__name__)


def merge_composer_config(
    app_dir: str,
    config_file: Optional[str],
    filesystem: Filesystem,
    reporter: Reporter,
) -> ComposerManifest:
    """Load the scaffold configuration and merge it into the app's composer.json.

    Nothing is written; call ``persist`` on the returned editor to save.

    Args:
        app_dir: Application directory containing composer.json
        config_file: Scaffold configuration file. If None, resolved by get_config.
        filesystem: Used to read and write the manifest
        reporter: Progress sink

    Returns:
        The editor holding the merged manifest
    """
    config = get_composer_config(get_config(config_file))
    composer = ComposerManifest(app_dir, config, filesystem, reporter)
    composer.apply_config()
    return composer


def update_composer(
    app_dir: str,
    config_file: Optional[str] = None,
    dry_run: bool = False,
) -> Optional[str]:
    """Merge the configured packages and autoload entries into composer.json.

    Args:
        app_dir: Application directory containing composer.json
        config_file: Scaffold configuration file. If None, resolved by get_config.
        dry_run: If True, the merged manifest is returned instead of written

    Returns:
        The merged manifest as JSON text on a dry run, otherwise None
    """
    composer = merge_composer_config(
        app_dir, config_file, LocalFilesystem(), ConsoleReporter()
    )

    if dry_run:
        logger.info(f"Dry run, not writing {composer.manifest_path}")
        return composer.get_manifest_json()

    composer.persist()
    return None
