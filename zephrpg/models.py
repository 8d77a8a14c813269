"""Game data: effects, spells, items, quests, characters, dialogs and scenes."""

from dataclasses import dataclass, field
from enum import IntEnum

MAX_ITEMS = 32
MAX_SPELLS = 4
MAX_EFFECTS = 4
MAX_ADJACENT = 4
MAX_SCENE_DIALOGS = 4
MAX_SHOP_ITEMS = 4
MAX_ENEMIES = 4


def _freeze(obj, name: str) -> None:
    object.__setattr__(obj, name, tuple(getattr(obj, name)))


def _check_at_most(what: str, values, limit: int) -> None:
    if len(values) > limit:
        raise ValueError(f"at most {limit} {what}, got {len(values)}")


@dataclass(frozen=True)
class Effect:
    """Changes applied to a character each turn for ``duration`` turns."""

    attack: int = 0
    defense: int = 0
    duration: int = 0
    life: int = 0


@dataclass(frozen=True)
class Spell:
    name: str
    description: str = ""
    effect: Effect = field(default_factory=Effect)
    cost: int = 0
    is_friendly: bool = False


class ItemType(IntEnum):
    NONE = 0
    WEAPON = 1
    ARMOR = 2
    CONSUMABLE = 3
    KEY = 4


@dataclass(frozen=True)
class Line:
    """One line of a dialog and the character who says it."""

    character: str
    text: str


@dataclass(frozen=True)
class Dialog:
    lines: tuple[Line, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "lines")

    @property
    def size(self) -> int:
        return len(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)


class QuestCondition(IntEnum):
    NONE = 0
    GET_ITEM = 1
    GIVE_ITEM = 2
    KILL_ENEMIES = 3
    KILL_ENEMY = 4
    TALK_TO_NPC = 5
    GET_TO_LOCATION = 6


class QuestStatus(IntEnum):
    INACTIVE = 0
    ACTIVE = 1
    COMPLETE = 2


@dataclass
class Quest:
    name: str
    description: str = ""
    status: QuestStatus = QuestStatus.INACTIVE
    condition: QuestCondition = QuestCondition.NONE
    condition_param: tuple[int, int] = (0, 0)
    dialog_start: Dialog | None = None
    dialog_end: Dialog | None = None

    def __post_init__(self) -> None:
        self.condition_param = tuple(self.condition_param)
        if len(self.condition_param) != 2:
            raise ValueError("a quest condition takes exactly two parameters")


@dataclass(frozen=True)
class Item:
    """An item; it carries either an effect or the quest it belongs to."""

    type: ItemType
    name: str
    description: str = ""
    value: int = 0
    effect: Effect | None = None
    quest: Quest | None = None

    def __post_init__(self) -> None:
        if self.effect is not None and self.quest is not None:
            raise ValueError("an item carries an effect or a quest, not both")


def empty_item() -> Item:
    """The placeholder item shown in empty slots."""
    return Item(type=ItemType.NONE, name="--------", description="", value=0, effect=Effect())


@dataclass
class Personality:
    attack_chance: float = 0.0
    defense_chance: float = 0.0
    spell_chance: float = 0.0
    item_chance: float = 0.0


@dataclass
class Character:
    """A character; ``weapon``, ``armor``, ``items`` and ``spells`` are table indices."""

    name: str = ""
    description: str = ""
    max_life: int = 0
    max_mana: int = 0
    life: int = 0
    mana: int = 0
    xp: int = 0
    level: int = 0
    money: int = 0
    attack: int = 0
    defense: int = 0
    weapon: int = 0
    armor: int = 0
    items: list[int] = field(default_factory=list)
    personality: Personality = field(default_factory=Personality)
    effects: list[Effect] = field(default_factory=list)
    spells: list[int] = field(default_factory=list)
    is_boss: bool = False

    def __post_init__(self) -> None:
        _check_at_most("items", self.items, MAX_ITEMS)
        _check_at_most("effects", self.effects, MAX_EFFECTS)
        _check_at_most("spells", self.spells, MAX_SPELLS)
        self.items = list(self.items) + [0] * (MAX_ITEMS - len(self.items))


def new_player() -> Character:
    """The player as a new game starts."""
    return Character(name="Tobias", money=9999, life=100, max_life=100, mana=69, max_mana=100)


@dataclass(frozen=True)
class Npc:
    character: Character
    dialog: Dialog
    total_dialogs: int = 1


class SceneType(IntEnum):
    NONE = 0
    CUTSCENE = 1
    VILLAGE = 2
    SHOP = 3
    DUNGEON = 4
    BOSS = 5


@dataclass(frozen=True)
class CutsceneData:
    dialog: int


def _check_dialogs(data) -> None:
    _freeze(data, "dialog_options")
    _freeze(data, "dialogs")
    if len(data.dialog_options) != len(data.dialogs):
        raise ValueError("every dialog needs exactly one option text")
    _check_at_most("dialogs", data.dialogs, MAX_SCENE_DIALOGS)


@dataclass(frozen=True)
class VillageData:
    npc: int = -1
    dialog_options: tuple[str, ...] = ()
    dialogs: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        _check_dialogs(self)

    @property
    def num_dialogs(self) -> int:
        return len(self.dialogs)


@dataclass(frozen=True)
class ShopData:
    npc: int
    items: tuple[int, ...] = ()
    dialog_options: tuple[str, ...] = ()
    dialogs: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        _check_dialogs(self)
        _freeze(self, "items")
        _check_at_most("items for sale", self.items, MAX_SHOP_ITEMS)

    @property
    def num_dialogs(self) -> int:
        return len(self.dialogs)

    @property
    def num_items(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class DungeonData:
    enemies: tuple[int, ...] = ()
    enemy_chance: int = 0

    def __post_init__(self) -> None:
        _freeze(self, "enemies")
        _check_at_most("enemies", self.enemies, MAX_ENEMIES)

    @property
    def num_enemies(self) -> int:
        return len(self.enemies)


@dataclass(frozen=True)
class BossData:
    enemies: tuple[int, ...] = ()
    start_dialog: int = -1
    defeat_dialog: int = -1

    def __post_init__(self) -> None:
        _freeze(self, "enemies")
        _check_at_most("enemies", self.enemies, MAX_ENEMIES)

    @property
    def num_enemies(self) -> int:
        return len(self.enemies)


_DATA_TYPES = {
    SceneType.CUTSCENE: CutsceneData,
    SceneType.VILLAGE: VillageData,
    SceneType.SHOP: ShopData,
    SceneType.DUNGEON: DungeonData,
    SceneType.BOSS: BossData,
}

SceneData = CutsceneData | VillageData | ShopData | DungeonData | BossData


@dataclass
class Scene:
    """A place; ``adjacent`` holds indices of the scenes reachable from it."""

    type: SceneType
    background_image: int = 0
    adjacent_options: list[str | None] = field(default_factory=list)
    adjacent: list[int] = field(default_factory=list)
    data: SceneData | None = None
    has_visited: bool = False

    def __post_init__(self) -> None:
        _check_at_most("adjacent option texts", self.adjacent_options, MAX_ADJACENT)
        _check_at_most("adjacent scenes", self.adjacent, MAX_ADJACENT)
        expected = _DATA_TYPES.get(self.type)
        if expected is None:
            if self.data is not None:
                raise ValueError(f"a {self.type.name} scene holds no data")
        elif not isinstance(self.data, expected):
            raise ValueError(f"a {self.type.name} scene needs {expected.__name__}")

    @property
    def num_adjacent(self) -> int:
        return len(self.adjacent)