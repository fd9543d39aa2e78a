"""Shared fixtures for sdtd_browser tests."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import orjson
import pytest


def node(attributes: Optional[Dict[str, str]] = None, **children: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build a raw node in the converter's shape: attributes under "$"."""
    raw: Dict[str, Any] = {}
    if attributes is not None:
        raw["$"] = attributes
    raw.update(children)
    return raw


def prop(name: str, value: str) -> Dict[str, Any]:
    return node({"name": name, "value": value})


PISTOL = node(
    {"name": "gunPistol"},
    property=[
        prop("Tags", "weapon,ranged,pistol"),
        prop("CustomIcon", "gunHandgunT1Pistol"),
        prop("Group", "Ammo/Weapons,Ranged Weapons"),
        node(
            {"class": "Action0"},
            property=[
                prop("Delay", ".2"),
                prop("DamageFalloffRange", "30"),
                prop("MaxRange", "100"),
            ],
        ),
    ],
)

PIPE = node({"name": "pipe"}, property=[prop("Group", "Resources")])

PISTOL_RECIPE = node(
    {"name": "gunPistol", "count": "1", "craft_area": "workbench"},
    ingredient=[
        node({"name": "pipe", "count": "2"}),
        node({"name": "resourceForgedIron", "count": "10"}),
    ],
)

CONCRETE = node(
    {"name": "concreteBlock"},
    property=[prop("Material", "Mconcrete"), prop("CustomIconTint", "808080")],
)

BARREL_EXTENDER = node(
    {
        "name": "modGunBarrelExtender",
        "installable_tags": "gun,ranged",
        "modifier_tags": "barrelAttachment",
        "blocked_tags": "noMods",
        "type": "attachment",
    },
    property=[prop("CustomIcon", "modGunBarrelExtender")],
    effect_group=[
        node(
            None,
            passive_effect=[
                node({"name": "MaxRange", "operation": "perc_add", "value": "10,20", "tier": "1,5"}),
                node({"name": "DamageFalloffRange", "operation": "base_add", "value": "4"}),
            ],
        )
    ],
)


def write_document(path: Path, root_tag: str, element_tag: str, elements: List[Dict[str, Any]]) -> Path:
    path.write_bytes(orjson.dumps({root_tag: {element_tag: elements}}))
    return path


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A config folder holding the four converted documents."""
    write_document(tmp_path / "items.xml.json", "items", "item", [PISTOL, PIPE])
    write_document(tmp_path / "recipes.xml.json", "recipes", "recipe", [PISTOL_RECIPE])
    write_document(tmp_path / "blocks.xml.json", "blocks", "block", [CONCRETE])
    write_document(
        tmp_path / "item_modifiers.xml.json", "item_modifiers", "item_modifier", [BARREL_EXTENDER]
    )
    return tmp_path


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """INI file backing AppSettings, isolated per test."""
    return tmp_path / "sdtd_browser.ini"
