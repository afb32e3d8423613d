"""
Showcase 01: Reading an XML Configuration File

This showcase walks through every ConfigReader feature against
showcase/config.xml:
1. Scalar lookups (string, int, boolean) with and without defaults
2. Error handling for missing sections and elements
3. Repeated values as a list
4. Attribute-keyed maps (get_map, get_maps)
5. Stepping through repeated blocks (step_into and caller-owned cursors)

Usage:
    python showcase/showcase_01_read_config.py
"""

import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO, format="  [%(levelname)s] %(name)s: %(message)s")

from config_file_reader import (
    ConfigParseError,
    ConfigReader,
    ElementNotFoundError,
)

CONFIG_PATH = Path(__file__).parent / "config.xml"

print("=" * 80)
print("SHOWCASE 01: Reading an XML Configuration File")
print("=" * 80)
print(f"\nConfig file: {CONFIG_PATH}")

# === Step 1: Scalars ===

print("\n[Step 1] Scalar lookups from 'section1'")
reader = ConfigReader(CONFIG_PATH, "section1")
print(f"  element1a (string): {reader.get_string('element1a')}")
print(f"  element1b (string): {reader.get_string('element1b')}")
print(f"  element1d (int):    {reader.get_int('element1d')}")
print(f"  debug (boolean):    {reader.get_boolean('debug')}")
print(f"  timeout (int, default 30): {reader.get_int('timeout', 30, True)}")

# === Step 2: Errors ===

print("\n[Step 2] Error handling")
try:
    ConfigReader(CONFIG_PATH, "section1XXXZ")
    print("  ❌ ElementNotFoundError was not raised")
except ElementNotFoundError as e:
    print(f"  ✓ Missing section: {e}")

try:
    reader.get_string("element1z")
    print("  ❌ ElementNotFoundError was not raised")
except ElementNotFoundError as e:
    print(f"  ✓ Missing element: {e}")

try:
    reader.get_int("element1a")
    print("  ❌ ConfigParseError was not raised")
except ConfigParseError as e:
    print(f"  ✓ Not a number: {e}")

# === Step 3: Lists ===

print("\n[Step 3] Repeated values from 'section2'")
flavors = ConfigReader(CONFIG_PATH, "section2").get_list("flavor")
print(f"  flavors: {flavors}")

# === Step 4: Maps ===

print("\n[Step 4] Attribute-keyed maps")
clients = ConfigReader(CONFIG_PATH, "section3").get_map("client", "id", True)
print(f"  section3 client id → secret: {clients}")

preferences = ConfigReader(CONFIG_PATH, "section3b").get_maps("client")
print(f"  section3b client → attributes: {preferences}")

# === Step 5: Stepping ===

print("\n[Step 5] Stepping through 'subsection' blocks of 'section4'")
reader4 = ConfigReader(CONFIG_PATH, "section4")
reader4.step_into("subsection")
while reader4.has_next():
    reader4.step_next()
    print(f"  name: {reader4.get_string('name'):<6} age: {reader4.get_int('age')}")
reader4.step_into(None)

print("\n  Same walk with a caller-owned cursor:")
for sub in reader4.cursor("subsection"):
    print(f"  {sub!r}: {sub.get_string('name')}")

# === Summary ===

print("\n" + "=" * 80)
print("SHOWCASE COMPLETE")
print("=" * 80)
