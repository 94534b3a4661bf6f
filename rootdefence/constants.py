"""Shared identifiers, colours and timing settings for the game."""

from __future__ import annotations

from dataclasses import dataclass

FPS = 60
DELAY_TIME = int(1000.0 / FPS)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b", "a"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"colour channel {channel!r} must be an int")
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {channel!r} out of range: {value}")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


class Colors:
    GRAY = Color(0x33, 0x33, 0x33, 0x99)
    GREEN = Color(0x00, 0xFF, 0x00, 0x55)
    LIGHT_GREEN = Color(0x66, 0xBB, 0x66, 0x55)
    BLACK = Color(0x00, 0x00, 0x00, 0xFF)
    WHITE = Color(0xFF, 0xFF, 0xFF, 0xFF)
    RED = Color(0xFF, 0x00, 0x00, 0x55)
    LEVEL_BG = Color(0x66, 0x39, 0x31, 0xFF)


class GameObjectIds:
    ENEMY_OBJECT_DATA = "enemyObjectData"
    TOWER_OBJECT_DATA = "towerObjectData"
    TOWER_UPGRADES_DATA = "towerUpgradesData"
    PROJECTILES_DATA = "projectilesData"

    PLAYER = "player"
    GREEN_CHOY = "greenChoy"
    GREEN_PLANT = "greenPlant"
    GREEN_BROCCOLI = "greenBroccoli"
    YELLOW_CARROT = "yellowCarrot"
    YELLOW_ORANGE = "yellowOrange"
    YELLOW_SQUASH = "yellowSquash"
    RED_PEPPER = "redPepper"
    RED_RADISH = "redRadish"
    RED_TOMATO = "redTomato"
    BLUE_BEAN = "blueBean"
    STUMP = "stump"
    PINE = "pine"
    OAK = "oak"
    FROZEN_BUSH = "frozenBush"
    PROJECTILE = "projectile"
    MENU_BUTTON = "menuButton"
    MAP_MENU_BUTTON = "mapMenuButton"
    TOWER_BUTTON = "towerButton"
    TOWER_UPGRADED_BUTTON = "towerUpgradedButton"
    SELL_TOWER_BUTTON = "sellTowerButton"
    ANIMATED_GRAPHIC = "animatedGraphic"
    TEXT = "text"
    TEXTURE = "texture"


class PanelIds:
    GAME_OVER_STATE_PANEL = "gameOverStatePanel"
    VICTORY_STATE_PANEL = "victoryStatePanel"
    MAIN_MENU_PANEL = "mainMenuPanel"
    MAPS_PANEL = "mapsPanel"
    DELETE_PROGRESS_CONFIRMATION_PANEL = "deleteProgressConfirmationPanel"
    PAUSE_STATE_PANEL = "pauseStatePanel"
    TOWERS_PANEL = "towersPanel"
    TOWER_UPGRADE_PANEL = "towerUpgradePanel"
    TIPS_PANEL = "tipsPanel"


class TowerTypes:
    """Tower type names keyed by tower colour."""

    GREEN = "agate"
    YELLOW = "amber"
    RED = "ruby"
    BLUE = "sapphire"


class ParamKeys:
    """Keys used in loader parameters and data files."""

    X = "x"
    Y = "y"
    TEXTURE_ID = "textureID"
    NUM_FRAMES = "numFrames"
    WIDTH = "width"
    HEIGHT = "height"

    CALLBACK_ID = "callbackID"
    PLAY_BUTTON_CALLBACK_ID = "playbuttonCallbackID"
    EXIT_BUTTON_CALLBACK_ID = "exitbuttonCallbackID"
    OPEN_DELETE_CONF_PANEL_CALLBACK_ID = "openDeleteConfPanelCallbackID"
    DELETE_PROGRESS_CALLBACK_ID = "deleteProgressCallbackID"
    MAP_MENU_BUTTON_CALLBACK_ID = "mapMenuButtonCallbackID"
    CLOSE_MAPS_PANEL_CALLBACK_ID = "closeMapsPanelCallbackID"
    MAIN_MENU_BUTTON_CALLBACK_ID = "mainMenuButtonCallbackID"
    RESTART_BUTTON_CALLBACK_ID = "restartButtonCallbackID"
    RESUME_BUTTON_CALLBACK_ID = "resumeButtonCallbackID"
    CREATE_TOWER_CALLBACK_ID = "createTowerCallbackID"
    START_WAVE_CALLBACK_ID = "startWaveCallbackID"
    PAUSE_STATE_CALLBACK_ID = "pauseStateCallbackID"
    TOWER_UPGRADE_CALLBACK_ID = "towerUpgradeCallbackID"
    SELL_TOWER_CALLBACK_ID = "sellTowerCallbackID"
    ANIM_SPEED = "animSpeed"

    MAP_LEVEL_FILE_NAME = "mapLevelFileName"

    TOWER_NAME = "towerName"
    TOWER_COLOR = "towerColor"

    UPGRADE_ID = "upgradeID"

    MOVE_SPEED = "moveSpeed"
    MAX_HEALTH = "maxHealth"
    DEFENCE = "defence"
    DROP_TYPE = "dropType"
    DROP_VALUE = "dropValue"
    EXP = "experience"

    NAME = "name"
    PROJECTILE_ID = "projectileID"
    DAMAGE = "damage"
    RADIUS = "radius"
    COST_TYPE = "costType"
    COST_VALUE = "costValue"
    ATTACK_SPEED = "attackSpeed"
    CAN_BE_COLORED = "canBeColored"
    COLOR = "color"
    TOWER_UPGRADES_DATA = "towerUpgradesData"

    FREEZE_PERCENTAGE = "freezePercentage"

    STAT_NAME = "statName"
    VALUES = "values"
    COSTS = "costs"
    MAX_LEVEL = "maxLevel"
    NEXT_LEVEL = "nextLevel"

    PROJECTILE_SPEED = "projectileSpeed"

    HIDDEN = "hidden"

    CHARACTER_WIDTH = "characterWidth"
    MESSAGE = "message"
    LABEL_ID = "labelId"
    DYNAMIC = "dynamic"


class UILabels:
    TEXT_LABEL_ID = "Label"
    ICON_ID = "Icon"

    COINS_LABEL_ID = "coinsLabel"
    LEVEL_LABEL_ID = "levelLabel"

    MAP_NAME_LABEL_SUFFIX = "NameLabel"
    MAX_WAVE_LABEL_SUFFIX = "MaxWaveLabel"

    HEALTH_LABEL_ID = "healthLabel"
    AGATE_RESOURCE_LABEL_ID = "agateResourceLabelID"
    AMBER_RESOURCE_LABEL_ID = "amberResourceLabelID"
    RUBY_RESOURCE_LABEL_ID = "rubyResourceLabelID"
    SAPPHIRE_RESOURCE_LABEL_ID = "sapphireResourceLabelID"
    WAVE_VALUE_LABEL = "waveValueLabel"

    AGATE_STUMP_COST_LABEL_ID = "agateStumpCostLabelID"
    AGATE_PINE_COST_LABEL_ID = "agatePineCostLabelID"
    AGATE_OAK_COST_LABEL_ID = "agateOakCostLabelID"
    AMBER_STUMP_COST_LABEL_ID = "amberStumpCostLabelID"
    AMBER_PINE_COST_LABEL_ID = "amberPineCostLabelID"
    AMBER_OAK_COST_LABEL_ID = "amberOakCostLabelID"
    RUBY_STUMP_COST_LABEL_ID = "rubyStumpCostLabelID"
    RUBY_PINE_COST_LABEL_ID = "rubyPineCostLabelID"
    RUBY_OAK_COST_LABEL_ID = "rubyOakCostLabelID"
    FROZEN_BUSH_COST_LABEL_ID = "frozenBushCostLabelID"

    TIP_MESSAGE_LABEL = "tipMessageLabel"

    TOWER_NAME_LABEL = "towerNameLabel"
    DAMAGE_DEALT_LABEL = "damageDealtLabel"
    FREEZE_PERCENTAGE_LABEL = "freezePercentageLabel"
    VALUE_LABEL_SUFFIX = "ValueLabel"
    DAMAGE_VALUE_LABEL = "damageValueLabel"
    ATTACK_SPEED_VALUE_LABEL = "attackSpeedValueLabel"
    RADIUS_VALUE_LABEL = "radiusValueLabel"
    FREEZE_PERCENTAGE_VALUE_LABEL = "freezePercentageValueLabel"
    SELL_VALUE_LABEL = "sellValueLabel"
    UPGRADE_BUTTON_COST_PREFIX = "towerUpgrade"
    UPGRADE_BUTTON_COST_SUFFIX = "Label"
    UPGRADE_BUTTON_TEXT_PREFIX = "upgrade"
    UPGRADE_BUTTON_TEXT_SUFFIX = "Label"

    GAME_OVER_WAVE_LABEL = "gameOverWaveLabel"

    REWARD_VALUE_LABEL = "rewardValueLabel"


class UITextures:
    RESOURCE_ICON_SMALL = "ResourceIcon16x16"
    UPGRADE_BUTTON_NOT_AFFORDABLE = "upgradeButtonNotAffordable"
    DISABLED_SUFFIX = "Disabled"