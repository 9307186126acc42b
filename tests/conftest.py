from __future__ import annotations

from pathlib import Path

import pytest

from tests.utils import TEMPLATE_CONFIG, write_file


@pytest.fixture()
def shop_package(tmp_path: Path) -> Path:
    """Extracted package with files for every step of the copy sequence."""
    package = tmp_path / "package"
    source = package / "source"
    write_file(source / "index.php", "<?php // index v2")
    write_file(source / "config.inc.php.dist", TEMPLATE_CONFIG)
    write_file(source / "Core" / "Shop.php", "<?php // core v2")
    write_file(source / "Setup" / "install.php", "<?php // setup v2")
    write_file(source / "Setup" / "Sql" / "database.sql", "CREATE TABLE oxshops;")
    write_file(source / "favicon.ico", "icon v2")
    write_file(source / "offline.html", "<html>offline v2</html>")
    write_file(source / ".htaccess", "RewriteEngine On")
    write_file(source / "tmp" / ".htaccess", "Deny from all")
    write_file(source / "robots.txt", "User-agent: *")
    write_file(source / "out" / "robots.txt", "Disallow: /")
    write_file(source / ".git" / "HEAD", "ref: refs/heads/main")
    write_file(source / ".gitignore", "tmp/*")
    return package


@pytest.fixture()
def installation_root(tmp_path: Path) -> Path:
    """Empty live installation directory."""
    root = tmp_path / "shop" / "source"
    root.mkdir(parents=True)
    return root
