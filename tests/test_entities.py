"""Tests for the entity kinds: items, recipes, blocks, item modifiers."""

import pytest

from conftest import BARREL_EXTENDER, CONCRETE, PIPE, PISTOL, PISTOL_RECIPE, node, prop
from sdtd_browser.config_data import (
    BlocksService,
    ItemModifiersService,
    ItemsService,
    MalformedDataError,
    RecipesService,
)


class TestItems:
    def test_item_properties(self) -> None:
        pistol = ItemsService([PISTOL, PIPE]).get("gunPistol")
        assert pistol.groups == ["Ammo/Weapons", "Ranged Weapons"]
        assert pistol.tags == ["weapon", "ranged", "pistol"]
        assert pistol.is_weapon
        assert pistol.custom_icon == "gunHandgunT1Pistol"

    def test_weapon_action_properties(self) -> None:
        pistol = ItemsService([PISTOL]).get("gunPistol")
        assert pistol.damage_falloff_range == "30"
        assert pistol.max_range == "100"
        assert pistol.delay == pytest.approx(0.2)
        assert pistol.rounds_per_minute == pytest.approx(300)

    def test_item_without_action(self) -> None:
        pipe = ItemsService([PIPE]).get("pipe")
        assert not pipe.is_weapon
        assert pipe.action() is None
        assert pipe.max_range is None
        assert pipe.rounds_per_minute is None

    def test_malformed_delay(self) -> None:
        item = ItemsService(
            [node({"name": "gunBroken"}, property=[node({"class": "Action0"}, property=[prop("Delay", "fast")])])]
        ).get("gunBroken")
        with pytest.raises(MalformedDataError):
            item.rounds_per_minute


class TestRecipes:
    def test_recipe_ingredients(self) -> None:
        recipe = RecipesService([PISTOL_RECIPE]).get("gunPistol")
        assert recipe.count == 1
        assert recipe.craft_area == "workbench"
        assert [(i.name, i.count) for i in recipe.ingredients] == [("pipe", 2), ("resourceForgedIron", 10)]

    def test_recipe_defaults(self) -> None:
        recipe = RecipesService([node({"name": "drinkJarBoiledWater"})]).get("drinkJarBoiledWater")
        assert recipe.count == 1
        assert recipe.ingredients == []
        assert recipe.tags == []
        assert recipe.craft_tool is None

    def test_malformed_ingredient_count(self) -> None:
        recipe = RecipesService(
            [node({"name": "r"}, ingredient=[node({"name": "pipe", "count": "two"})])]
        ).get("r")
        with pytest.raises(MalformedDataError):
            recipe.ingredients[0].count

    def test_duplicates_prefer_hand_craftable(self) -> None:
        service = RecipesService(
            [
                node({"name": "resourceGunPowder", "craft_area": "chemistryStation", "count": "2"}),
                node({"name": "resourceGunPowder", "count": "1"}),
            ]
        )
        assert service.get("resourceGunPowder").craft_area is None
        assert service.get_all()[0].count == 1

    def test_duplicates_all_at_workstations_keep_first(self) -> None:
        service = RecipesService(
            [
                node({"name": "ammo9mmBulletBall", "craft_area": "workbench"}),
                node({"name": "ammo9mmBulletBall", "craft_area": "chemistryStation"}),
            ]
        )
        assert service.get("ammo9mmBulletBall").craft_area == "workbench"


class TestBlocks:
    def test_block_properties(self) -> None:
        block = BlocksService([CONCRETE]).get("concreteBlock")
        assert block.material == "Mconcrete"
        assert block.custom_icon_tint == "808080"
        assert block.custom_icon is None
        assert block.shape is None


class TestItemModifiers:
    def test_modifier_attributes(self) -> None:
        modifier = ItemModifiersService([BARREL_EXTENDER]).get("modGunBarrelExtender")
        assert modifier.modifier_type == "attachment"
        assert modifier.installable_tags == ["gun", "ranged"]
        assert modifier.modifier_tags == ["barrelAttachment"]
        assert modifier.blocked_tags == ["noMods"]

    def test_passive_effects(self) -> None:
        modifier = ItemModifiersService([BARREL_EXTENDER]).get("modGunBarrelExtender")
        effects = modifier.passive_effects
        assert [effect.name for effect in effects] == ["MaxRange", "DamageFalloffRange"]
        assert effects[0].operation == "perc_add"
        assert modifier.passive_effect_value("MaxRange", 3) == 15
        assert modifier.passive_effect_value("DamageFalloffRange", 3) == 4
        assert modifier.passive_effect_value("Missing", 3) is None
