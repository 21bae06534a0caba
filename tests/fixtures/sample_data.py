import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

DATA_FILE = Path(__file__).parent / "test_data.json"


@lru_cache(maxsize=1)
def _load() -> Dict[str, Any]:
    with open(DATA_FILE) as f:
        return json.load(f)


class SampleData:
    """Accounts and todos shared by the API tests; every accessor returns a copy"""

    def user(self, name: str) -> Dict[str, str]:
        return copy.deepcopy(_load()["users"][name])

    def todos(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(_load()["todos"])

    def expected_todo(self) -> Dict[str, Any]:
        return copy.deepcopy(_load()["expected_todo"])

    def invalid_emails(self) -> List[str]:
        return list(_load()["invalid_emails"])
