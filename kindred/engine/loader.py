import os, yaml
from functools import lru_cache
from typing import Dict, List

from .patterns import INTENTS
from .templates import format_response

RESPONSES_PATH = os.path.join(os.path.dirname(__file__), "data", "responses.yaml")

def _render(entry: Dict) -> str:
    if "text" in entry:
        return str(entry["text"])
    return format_response(entry["assessment"], list(entry.get("next_steps") or []), entry["follow_up"])

@lru_cache(maxsize=None)
def load_response_pools(path: str = RESPONSES_PATH) -> Dict[str, List[str]]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    pools: Dict[str, List[str]] = {}
    for intent, entries in data.items():
        pools[intent] = [_render(e) for e in entries or []]
    missing = [i for i in INTENTS if not pools.get(i)]
    if missing:
        raise ValueError(f"Response pools missing for intents: {missing}")
    return pools
