"""Shared test fixtures and utilities."""

import os
import pytest
from typing import Any, Dict

COMPOSER_JSON = """{
    "name": "laravel/laravel",
    "description": "The Laravel Framework.",
    "keywords": [
        "framework",
        "laravel"
    ],
    "license": "MIT",
    "require": {
        "laravel/framework": "4.1.*"
    },
    "autoload": {
        "classmap": [
            "app/commands",
            "app/controllers",
            "app/models",
            "app/database/migrations",
            "app/database/seeds",
            "app/tests/TestCase.php"
        ]
    },
    "scripts": {
        "post-install-cmd": [
            "php artisan clear-compiled",
            "php artisan optimize"
        ],
        "post-update-cmd": [
            "php artisan clear-compiled",
            "php artisan optimize"
        ],
        "post-create-project-cmd": [
            "php artisan key:generate"
        ]
    },
    "config": {
        "preferred-install": "dist"
    },
    "minimum-stability": "stable"
}"""


@pytest.fixture
def app_dir() -> str:
    return "/path/to/app"


@pytest.fixture
def composer_path(app_dir: str) -> str:
    return os.path.join(app_dir, "composer.json")


@pytest.fixture
def composer_json() -> str:
    """A composer.json as generated for a fresh Laravel application."""
    return COMPOSER_JSON


@pytest.fixture
def scaffold_config() -> Dict[str, Any]:
    """Composer section of a scaffold configuration."""
    return {
        "require": [
            {"package": "laravel/framework", "version": "4.1.*"},
            {"package": "nesbot/Carbon", "version": "*"},
            {"package": "doctrine/inflector", "version": "1.0.*@dev"},
        ],
        "require-dev": [
            {"package": "mockery/mockery", "version": "dev-master@dev"},
            {"package": "fzaninotto/faker", "version": "1.3.*"},
            {"package": "squizlabs/php_codesniffer", "version": "*"},
        ],
        "autoload": {
            "classmap": ["app/lib"],
            "psr-0": {"Acme": "app/lib"},
            "psr-4": {"Foo\\Bar\\": "src/Foo/Bar/"},
        },
    }
