from __future__ import annotations

import logging
import random
from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from .config import TextTheme

logger = logging.getLogger(__name__)

# No word may repeat within this many consecutive words of a stream.
REPEAT_WINDOW = 10
# Draws allowed per slot before a repeat is accepted (tiny vocabularies).
MAX_RESAMPLE = 64

INITIAL_WORDS = 60
EXTEND_WORDS = 30
EXTEND_MARGIN = 20


# ---------------------------
# Vocabularies (offline)
# ---------------------------

DEFAULT_WORDS: Tuple[str, ...] = (
    "river", "flag", "grit", "yellow", "bounce", "flight", "shallow", "habit", "flame", "wander",
    "pocket", "scrap", "blink", "canvas", "grind", "foggy", "stream", "patrol", "branch", "tunnel",
    "window", "brief", "orbit", "sand", "melt", "parade", "cliff", "border", "charge", "wild",
    "pepper", "crack", "shelter", "gentle", "prize", "canyon", "loop", "motion", "splash", "note",
    "tiger", "shade", "glimpse", "cradle", "velvet", "bucket", "slide", "curve", "dizzy", "ladder",
    "brick", "shadow", "humble", "filter", "stride", "clamp", "rugged", "narrow", "float", "puzzle",
    "string", "burst", "echo", "gleam", "rust", "maze", "spark", "anchor", "gravel", "tremble",
    "whirl", "scrape", "dwell", "crisp", "shiver", "badge", "frame", "cloak", "drift", "sketch",
    "and", "to", "by", "when", "see", "went", "why", "going", "because", "from",
    "did", "he", "she", "them", "pass", "type", "of", "style", "run", "walk",
    "gym", "try", "people", "alien", "horse", "marble", "cactus", "blanket", "owl", "plunge",
    "jigsaw", "mirror", "sneeze", "lantern", "drizzle", "planet", "hazard", "napkin", "monkey", "trick",
    "castle", "windowpane", "cloudy", "teapot", "marsh", "spoon", "ticket", "plasma", "garage", "acorn",
    "swing", "flicker", "giant", "nibble", "timber", "compass", "snore", "zipper", "yawn", "pebble",
    "harbor", "waffle", "candle", "basement", "knock", "murmur", "doodle", "stairs", "plank", "groove",
    "tinsel", "shrug", "breeze", "helmet",
)

LOREM_WORDS: Tuple[str, ...] = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit", "sed", "do",
    "eiusmod", "tempor", "incididunt", "ut", "labore", "et", "dolore", "magna", "aliqua", "enim",
    "ad", "minim", "veniam", "quis", "nostrud", "exercitation", "ullamco", "laboris", "nisi", "aliquip",
    "ex", "ea", "commodo", "consequat", "duis", "aute", "irure", "in", "reprehenderit", "voluptate",
    "velit", "esse", "cillum", "eu", "fugiat", "nulla", "pariatur", "excepteur", "sint", "occaecat",
    "cupidatat", "non", "proident", "sunt", "culpa", "qui", "officia", "deserunt", "mollit", "anim",
    "id", "est", "laborum", "pellentesque", "habitant", "morbi", "tristique", "senectus", "netus", "fames",
    "egestas", "vestibulum", "turpis", "porta", "ac", "rutrum", "ultricies", "tellus", "interdum", "feugiat",
)

TECH_WORDS: Tuple[str, ...] = (
    "protocol", "server", "network", "buffer", "compile", "binary", "virtual", "hardware", "syntax", "bytecode",
    "encryption", "router", "packet", "socket", "script", "kernel", "command", "thread", "function", "object",
    "method", "memory", "cache", "firewall", "stack", "array", "boolean", "debugger", "monitor", "driver",
    "firmware", "algorithm", "bitrate", "latency", "backend", "frontend", "database", "cluster", "token", "gateway",
    "docker", "branch", "commit", "push", "pull", "fork", "instance", "queue", "runtime", "lambda",
    "process", "render", "shader", "sandbox", "version", "editor", "module", "update", "login", "crypto",
    "threading", "cloud", "endpoint", "input", "output", "integer", "float", "pixel", "vector", "api",
    "node", "scripted", "pipeline", "session", "wrapper", "class", "static", "mutex", "ping", "bit",
    "send", "bug", "code", "java", "rust", "hack", "future", "neuron", "optimize", "discover",
    "laptop", "linux", "distributed", "terminal", "protocols", "overflow", "index", "tokenize", "pointer", "emulator",
    "container", "registry", "framework", "decompile", "debug", "bitwise", "microchip", "kernelspace", "iteration", "recursion",
    "heap", "stacktrace", "opcode", "bootloader", "repository", "hypervisor", "threadsafe", "permissions", "clipboard", "filesystem",
    "hotfix", "interface", "interrupt", "macro", "hashmap", "tokenizer", "graphql", "typescript", "npm", "socketio",
    "firestore", "environ", "hostname", "whitespace", "compression", "checksum", "uptime", "localhost", "rollback", "benchmark",
)

FOOD_WORDS: Tuple[str, ...] = (
    "banana", "broccoli", "carrot", "pasta", "basil", "sausage", "chili", "turmeric", "cinnamon", "almond",
    "avocado", "sushi", "taco", "burrito", "noodle", "curry", "cocoa", "flour", "muffin", "bagel",
    "popcorn", "ginger", "apple", "spinach", "cheddar", "gravy", "honey", "pudding", "crumble", "risotto",
    "asparagus", "pancake", "hazelnut", "pomegranate", "licorice", "ravioli", "beetroot", "peanut", "walnut", "toffee",
    "casserole", "scone", "omelette", "truffle", "pesto", "butter", "ketchup", "pickle", "barbecue", "meatball",
    "zucchini", "anchovy", "custard", "steak", "salmon", "parmesan", "tomato", "grapefruit", "lemon", "lime",
    "syrup", "croissant", "crepe", "waffle", "espresso", "latte", "mocha", "cupcake", "cherry", "blueberry",
    "mango", "plum", "fig", "kiwi", "cabbage", "fennel", "turnip", "radish", "eat", "yum",
    "tasty", "cook", "chef", "season", "spice", "salt", "sauce", "juice", "dine", "brisket",
    "coconut", "mustard", "granola", "clove", "noodles", "peach", "bruschetta", "fondue", "sorbet", "jerky",
    "calamari", "gouda", "yogurt", "paprika", "lentil", "okra", "shallot", "tamarind", "caper", "durian",
    "gnocchi", "kombucha", "kale", "brandy", "cider", "miso", "kimchi", "edamame", "quinoa", "arugula",
    "crouton", "tart", "tofu", "aioli", "hummus", "paella", "meringue", "shrimp", "bacon", "ramen",
    "chowder", "schnitzel", "coleslaw", "baguette", "prawn", "margarine", "lollipop", "veal", "churro",
)

VOCABULARIES: Dict[TextTheme, Tuple[str, ...]] = {
    TextTheme.DEFAULT: DEFAULT_WORDS,
    TextTheme.LOREM: LOREM_WORDS,
    TextTheme.TECH: TECH_WORDS,
    TextTheme.FOOD: FOOD_WORDS,
}


def vocabulary_for(theme: TextTheme) -> Tuple[str, ...]:
    return VOCABULARIES[theme]


# ---------------------------
# Word stream
# ---------------------------

def _draw(
    vocabulary: Sequence[str],
    count: int,
    recent: deque,
    rng: random.Random,
) -> List[str]:
    out: List[str] = []
    while len(out) < count:
        word = rng.choice(vocabulary)
        attempts = 1
        while word in recent and attempts < MAX_RESAMPLE:
            word = rng.choice(vocabulary)
            attempts += 1
        if word in recent:
            logger.debug("Vocabulary too small to avoid a repeat of %r", word)
        recent.append(word)
        out.append(word)
    return out


def generate_words(
    vocabulary: Sequence[str],
    count: int,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Draw ``count`` words uniformly from ``vocabulary`` such that no word
    appears twice within any ``REPEAT_WINDOW`` consecutive words.

    When the vocabulary has too few distinct words for that, each slot gets
    ``MAX_RESAMPLE`` draws and then takes whatever came up last.
    """
    if not vocabulary:
        raise ValueError("vocabulary must not be empty")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    recent: deque = deque(maxlen=REPEAT_WINDOW)
    return _draw(vocabulary, count, recent, rng or random.Random())


def extend_words(
    vocabulary: Sequence[str],
    existing: Sequence[str],
    count: int,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Words to append to ``existing``; the repeat window carries over from its tail."""
    if not vocabulary:
        raise ValueError("vocabulary must not be empty")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    recent: deque = deque(existing[-REPEAT_WINDOW:], maxlen=REPEAT_WINDOW)
    return _draw(vocabulary, count, recent, rng or random.Random())


def needs_extension(typed_count: int, target_count: int) -> bool:
    """True once typing gets within ``EXTEND_MARGIN`` words of the stream's end."""
    return typed_count > target_count - EXTEND_MARGIN
