from __future__ import annotations

from collections import Counter

from shellfill.chem.aufbau import SUBSHELL_LABELS, ElectronShell, Subshell, fill, subshell_label


NOBLE_GAS_CORES: tuple[tuple[int, str], ...] = (
    (2, "He"),
    (10, "Ne"),
    (18, "Ar"),
    (36, "Kr"),
    (54, "Xe"),
    (86, "Rn"),
    (118, "Og"),
)

_LABEL_TO_L = {label: l for l, label in enumerate(SUBSHELL_LABELS)}


def format_subshell(subshell: Subshell) -> str:
    return f"{subshell.level}{subshell_label(subshell.azimuthal)}{subshell.electrons}"


def config_string(shell: ElectronShell | list[Subshell]) -> str:
    return " ".join(format_subshell(sub) for sub in shell)


def _noble_gas_core(electron_count: int, counts: Counter) -> tuple[str, Counter] | None:
    for core_electrons, symbol in reversed(NOBLE_GAS_CORES):
        if core_electrons >= electron_count:
            continue
        core = Counter(fill(core_electrons).as_dict())
        if all(counts[key] >= value for key, value in core.items()):
            return symbol, core
    return None


def abbreviated_config(shell: ElectronShell) -> str:
    counts = Counter(shell.as_dict())
    core = _noble_gas_core(shell.total_electrons, counts)
    if core is None:
        return config_string(shell)
    symbol, core_counts = core
    rest = []
    for sub in shell:
        remaining = sub.electrons - core_counts.get((sub.level, sub.azimuthal), 0)
        if remaining > 0:
            rest.append(sub.with_electrons(remaining))
    text = config_string(rest)
    return f"[{symbol}] {text}" if text else f"[{symbol}]"


def _parse_label(token: str) -> tuple[int, int, int]:
    idx = 0
    while idx < len(token) and token[idx].isdigit():
        idx += 1
    if idx == 0 or idx >= len(token):
        raise ValueError(f"Malformed subshell token '{token}'.")
    level = int(token[:idx])
    if token[idx] == "n":
        raise ValueError(f"Cannot parse numbered subshell label in '{token}'.")
    l_val = _LABEL_TO_L.get(token[idx])
    count_str = token[idx + 1 :]
    if l_val is None or not count_str.isdigit():
        raise ValueError(f"Malformed subshell token '{token}'.")
    return level, l_val, int(count_str)


def parse_config(config: str) -> dict[tuple[int, int], int]:
    result: dict[tuple[int, int], int] = {}
    for token in config.split():
        level, l_val, count = _parse_label(token)
        result[(level, l_val)] = count
    return result
