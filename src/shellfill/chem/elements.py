from __future__ import annotations

from functools import lru_cache

from periodic_table_cli.cli import load_data


def _load_elements() -> list[dict]:
    data = load_data()
    return data.get("elements", [])


@lru_cache(maxsize=1)
def _element_index() -> tuple[dict[int, dict], dict[str, dict]]:
    by_number: dict[int, dict] = {}
    by_symbol: dict[str, dict] = {}
    for element in _load_elements():
        z = int(element.get("atomicNumber") or element.get("atomic_number") or 0)
        symbol = str(element.get("symbol") or "").strip()
        if not z or not symbol:
            continue
        by_number[z] = element
        by_symbol[symbol.lower()] = element
    return by_number, by_symbol


def get_element(z: int) -> dict:
    by_number, _ = _element_index()
    return by_number.get(int(z), {})


def get_symbol(z: int) -> str:
    return str(get_element(z).get("symbol") or "")


def get_name(z: int) -> str:
    return str(get_element(z).get("name") or "")


def get_atomic_number(symbol: str) -> int:
    if not symbol:
        return 0
    _, by_symbol = _element_index()
    element = by_symbol.get(symbol.strip().lower())
    return int(element.get("atomicNumber") or element.get("atomic_number") or 0) if element else 0
