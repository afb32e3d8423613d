"""
Pytest configuration and shared fixtures.

Provides XML writers backed by tmp_path and keeps reader settings isolated
from the developer's environment.
"""

from pathlib import Path
from typing import Callable

import pytest

from config_file_reader.config import reset_settings


SAMPLE_CONFIG = """<?xml version="1.0" encoding="UTF-8"?>
<config>
    <section1>
        <element1a>alpha</element1a>
        <element1b>beta</element1b>
        <element1c>  padded  </element1c>
        <element1d>42</element1d>
        <element1e>9000000000</element1e>
        <element1f>TRUE</element1f>
        <element1g>notanumber</element1g>
    </section1>
    <section2>
        <flavor>chocolate</flavor>
        <flavor>vanilla</flavor>
        <flavor>rum raisin</flavor>
    </section2>
    <section3>
        <client id="client1">12345</client>
        <client id="client2">dfwop24ur90uqw</client>
        <client>orphan</client>
    </section3>
    <section3b>
        <client car="Honda" wife="Glenda">client1</client>
        <client car="Buick">client1</client>
        <client>client2</client>
    </section3b>
    <section4>
        <subsection>
            <name>alice</name>
            <age>31</age>
        </subsection>
        <subsection>
            <name>bob</name>
            <age>42</age>
        </subsection>
        <subsection>
            <name>carol</name>
            <age>27</age>
        </subsection>
    </section4>
</config>
"""


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """
    Reset the settings singleton and clear CONFIG_READER_* variables.

    Applied to every test so environment-driven settings never leak
    between tests.
    """
    import os

    for key in list(os.environ):
        if key.upper().startswith('CONFIG_READER_'):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def write_xml(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing XML text (or bytes) to a file under tmp_path.

    Usage:
        path = write_xml("<config><s/></config>")
        path = write_xml(b"...", name="legacy.xml")
    """
    def _write(content, name: str = "config.xml") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config_path(write_xml) -> Path:
    """Path to a multi-section sample configuration file."""
    return write_xml(SAMPLE_CONFIG, name="sample.xml")
