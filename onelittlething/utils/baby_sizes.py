# onelittlething/utils/baby_sizes.py
from typing import Dict, List, NamedTuple, Optional


class BabySizeItem(NamedTuple):
    name: str
    icon: str  # emoji mientras no haya íconos SVG


# Comparaciones de tamaño por semana de embarazo (4 a 40)
BABY_SIZES: Dict[int, List[BabySizeItem]] = {
    4: [BabySizeItem("Poppy seed", "🌱"), BabySizeItem("Sesame seed", "🌾")],
    5: [BabySizeItem("Peppercorn", "⚫"), BabySizeItem("Grain of rice", "🍚")],
    6: [BabySizeItem("Lentil", "🫘"), BabySizeItem("Sweet pea", "🫛")],
    7: [BabySizeItem("Blueberry", "🫐"), BabySizeItem("Coffee bean", "☕")],
    8: [BabySizeItem("Raspberry", "🍇"), BabySizeItem("Kidney bean", "🫘")],
    9: [BabySizeItem("Cherry", "🍒"), BabySizeItem("Grape", "🍇")],
    10: [BabySizeItem("Strawberry", "🍓"), BabySizeItem("Prune", "🫐")],
    11: [BabySizeItem("Lime", "🍋"), BabySizeItem("Brussels sprout", "🥬")],
    12: [BabySizeItem("Plum", "🍑"), BabySizeItem("Key lime", "🍋")],
    13: [BabySizeItem("Peach", "🍑"), BabySizeItem("Lemon", "🍋")],
    14: [BabySizeItem("Navel orange", "🍊"), BabySizeItem("Apple", "🍎")],
    15: [BabySizeItem("Pear", "🍐"), BabySizeItem("Avocado", "🥑")],
    16: [BabySizeItem("Avocado", "🥑"), BabySizeItem("Turnip", "🥔")],
    17: [BabySizeItem("Pomegranate", "🍎"), BabySizeItem("Onion", "🧅")],
    18: [BabySizeItem("Sweet potato", "🍠"), BabySizeItem("Bell pepper", "🫑")],
    19: [BabySizeItem("Mango", "🥭"), BabySizeItem("Heirloom tomato", "🍅")],
    20: [BabySizeItem("Banana", "🍌"), BabySizeItem("Artichoke", "🥬")],
    21: [BabySizeItem("Carrot", "🥕"), BabySizeItem("Pomelo", "🍊")],
    22: [BabySizeItem("Papaya", "🥭"), BabySizeItem("Spaghetti squash", "🎃")],
    23: [BabySizeItem("Grapefruit", "🍊"), BabySizeItem("Large mango", "🥭")],
    24: [BabySizeItem("Cantaloupe", "🍈"), BabySizeItem("Ear of corn", "🌽")],
    25: [BabySizeItem("Rutabaga", "🥔"), BabySizeItem("Cauliflower", "🥦")],
    26: [BabySizeItem("Lettuce head", "🥬"), BabySizeItem("Scallions", "🌿")],
    27: [BabySizeItem("Cauliflower", "🥦"), BabySizeItem("Head of lettuce", "🥬")],
    28: [BabySizeItem("Eggplant", "🍆"), BabySizeItem("Large coconut", "🥥")],
    29: [BabySizeItem("Butternut squash", "🎃"), BabySizeItem("Acorn squash", "🎃")],
    30: [BabySizeItem("Cabbage", "🥬"), BabySizeItem("Large coconut", "🥥")],
    31: [BabySizeItem("Pineapple", "🍍"), BabySizeItem("Coconut", "🥥")],
    32: [BabySizeItem("Jicama", "🥔"), BabySizeItem("Napa cabbage", "🥬")],
    33: [BabySizeItem("Pineapple", "🍍"), BabySizeItem("Butternut squash", "🎃")],
    34: [BabySizeItem("Cantaloupe", "🍈"), BabySizeItem("Honeydew melon", "🍈")],
    35: [BabySizeItem("Honeydew melon", "🍈"), BabySizeItem("Large pineapple", "🍍")],
    36: [BabySizeItem("Papaya", "🥭"), BabySizeItem("Romaine lettuce", "🥬")],
    37: [BabySizeItem("Swiss chard", "🥬"), BabySizeItem("Winter melon", "🍈")],
    38: [BabySizeItem("Leek", "🌿"), BabySizeItem("Rhubarb", "🥬")],
    39: [BabySizeItem("Mini watermelon", "🍉"), BabySizeItem("Small pumpkin", "🎃")],
    40: [BabySizeItem("Watermelon", "🍉"), BabySizeItem("Pumpkin", "🎃")],
}


def get_baby_size_items(week: int) -> List[BabySizeItem]:
    return list(BABY_SIZES.get(week, []))


def pick_baby_size(week: int, index: int = 0) -> Optional[BabySizeItem]:
    """
    Elige una comparación de la semana; el índice da la vuelta
    (también con valores negativos) para poder ir ciclando.
    """
    items = BABY_SIZES.get(week)
    if not items:
        return None
    return items[index % len(items)]
