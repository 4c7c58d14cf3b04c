"""Editable static catalog and word list configuration."""

from __future__ import annotations

ENTREE_CATALOG: list[dict[str, str | None]] = [
    {
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "price": "7.00",
        "image": None,
    },
    {
        "name": "Three Bean Chili",
        "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
        "price": "4.00",
        "image": None,
    },
    {
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, with cherry tomatoes cooked in garlic and olive oil",
        "price": "5.50",
        "image": None,
    },
    {
        "name": "Spicy Black Bean Skillet",
        "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
        "price": "5.50",
        "image": None,
    },
]

SIDE_DISH_CATALOG: list[dict[str, str | None]] = [
    {
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "price": "2.50",
        "image": None,
    },
    {
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "price": "3.00",
        "image": None,
    },
    {
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice blend",
        "price": "2.00",
        "image": None,
    },
    {
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "price": "1.50",
        "image": None,
    },
]

ACCOMPANIMENT_CATALOG: list[dict[str, str | None]] = [
    {
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "price": "0.50",
        "image": None,
    },
    {
        "name": "Mixed Berries",
        "description": "Strawberries, blueberries, raspberries, and huckleberries",
        "price": "1.00",
        "image": None,
    },
    {
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "price": "0.50",
        "image": None,
    },
]

ALL_WORDS: list[str] = [
    "animal", "auto", "anecdote", "alphabet", "all", "awesome", "arise", "balloon", "basket", "bench",
    "best", "birthday", "book", "briefcase", "camera", "camping", "candle", "cat", "cauliflower", "chat",
    "children", "class", "classic", "classroom", "coffee", "colorful", "cookie", "creative", "cruise", "dance",
    "daytime", "dinosaur", "doorknob", "dine", "dream", "dusk", "eating", "elephant", "emerald", "eerie",
    "electric", "finish", "flowers", "follow", "fox", "frame", "free", "frequent", "funnel", "green",
    "guitar", "grocery", "glass", "great", "giggle", "haircut", "half", "homemade", "happen", "honey",
    "hurry", "hundred", "ice", "igloo", "invest", "invite", "icon", "introduce", "joke", "jovial",
    "journal", "jump", "join", "kangaroo", "keyboard", "kitchen", "koala", "kind", "kaleidoscope", "landscape",
    "late", "laugh", "learning", "lemon", "letter", "lily", "magazine", "marine", "marshmallow", "maze",
    "meditate", "melody", "minute", "monument", "moon", "motorcycle", "mountain", "music", "north", "nose",
    "night", "name", "never", "negotiate", "number", "opposite", "octopus", "oak", "order", "open",
    "polar", "pack", "painting", "person", "picnic", "pillow", "pizza", "podcast", "presentation", "puppy",
    "puzzle", "recipe", "release", "restaurant", "revolve", "rewind", "room", "run", "secret", "seed",
    "ship", "shirt", "should", "small", "spaceship", "stargazing", "skill", "street", "style", "sunrise",
    "taxi", "tidy", "timer", "together", "tooth", "tourist", "travel", "truck", "under", "useful",
    "unicorn", "unique", "uplift", "uniform", "vase", "violin", "visitor", "vision", "volume", "view",
    "walrus", "wander", "world", "winter", "well", "whirlwind", "xylophone", "yoga", "yogurt", "yoyo",
    "you", "year", "yummy", "zebra", "zigzag", "zoology", "zone", "zeal",
]
