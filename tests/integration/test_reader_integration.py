"""
Integration tests reading the showcase configuration file from disk.

Exercises a full start-up style session: construct readers for several
sections of one real file and pull every kind of value out of it.

Run with: pytest tests/integration/ -v
"""

from pathlib import Path

import pytest

from config_file_reader import (
    ConfigParseError,
    ConfigReader,
    ElementNotFoundError,
    ReaderSettings,
)


pytestmark = pytest.mark.integration

SHOWCASE_CONFIG = Path(__file__).resolve().parents[2] / "showcase" / "config.xml"


@pytest.fixture(scope="module")
def settings():
    return ReaderSettings(expected_root="config")


class TestShowcaseConfig:
    """End-to-end reads of showcase/config.xml."""

    def test_file_present(self):
        assert SHOWCASE_CONFIG.is_file()

    def test_scalars(self, settings):
        reader = ConfigReader(SHOWCASE_CONFIG, "section1", settings=settings)

        assert reader.get_string("element1a") == "hello"
        assert reader.get_int("element1d") == 1024
        assert reader.get_long("element1d") == 1024
        assert reader.get_boolean("debug") is True
        assert reader.get_int("timeout", 30, True) == 30

    def test_errors(self, settings):
        with pytest.raises(ElementNotFoundError):
            ConfigReader(SHOWCASE_CONFIG, "section1XXXZ", settings=settings)

        reader = ConfigReader(SHOWCASE_CONFIG, "section1", settings=settings)
        with pytest.raises(ElementNotFoundError):
            reader.get_string("element1z")
        with pytest.raises(ConfigParseError):
            reader.get_int("element1a")

    def test_collections(self, settings):
        assert ConfigReader(SHOWCASE_CONFIG, "section2", settings=settings).get_list("flavor") == [
            "chocolate", "vanilla", "rum raisin",
        ]
        assert ConfigReader(SHOWCASE_CONFIG, "section3", settings=settings).get_map("client", "id", True) == {
            "client1": "12345",
            "client2": "dfwop24ur90uqw",
        }
        assert ConfigReader(SHOWCASE_CONFIG, "section3b", settings=settings).get_maps("client") == {
            "client1": [{"car": "Honda", "wife": "Glenda"}, {"car": "Buick"}],
            "client2": [{}],
        }

    def test_stepping(self, settings):
        reader = ConfigReader(SHOWCASE_CONFIG, "section4", settings=settings)

        reader.step_into("subsection")
        people = []
        while reader.has_next():
            reader.step_next()
            people.append((reader.get_string("name"), reader.get_int("age")))
        reader.step_into(None)

        assert people == [("alice", 31), ("bob", 42), ("carol", 27)]
        assert reader.current_section.tag == "section4"
        assert not reader.has_next()
