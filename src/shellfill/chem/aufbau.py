from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np


# The ladder counters are only validated up to this many electrons.
MAX_ELECTRONS = 5000

SUBSHELL_LABELS: tuple[str, ...] = ("s", "p", "d", "f", "g", "h", "i", "j", "k", "l", "m")


def subshell_label(azimuthal: int) -> str:
    if azimuthal < len(SUBSHELL_LABELS):
        return SUBSHELL_LABELS[azimuthal]
    return f"n{azimuthal - len(SUBSHELL_LABELS) + 1}"


def subshell_capacity(azimuthal: int) -> int:
    return 4 * (azimuthal + 1) - 2


@dataclass(frozen=True)
class Subshell:
    level: int
    azimuthal: int
    electrons: int

    @property
    def capacity(self) -> int:
        return subshell_capacity(self.azimuthal)

    @property
    def label(self) -> str:
        return f"{self.level}{subshell_label(self.azimuthal)}"

    def is_full(self) -> bool:
        return self.electrons == self.capacity

    def with_electrons(self, electrons: int) -> Subshell:
        return Subshell(self.level, self.azimuthal, electrons)


def madelung_order() -> Iterator[tuple[int, int]]:
    """Yield ``(n, l)`` pairs in filling order, without end.

    ``shell`` is the ladder index (``l + 1``) and ``max_level`` is ``n + l``;
    walking down the ladder and restarting one diagonal further reproduces
    1s 2s 2p 3s 3p 4s 3d 4p 5s ...
    """
    shell = 1
    max_level = 1
    while True:
        yield max_level - shell + 1, shell - 1
        if shell == 1:
            max_level += 1
            shell = math.ceil(max_level / 2)
        else:
            shell -= 1


class ElectronShell:
    """Electron configuration produced by the Aufbau filler.

    Electrons are stored per azimuthal quantum number, ``[l][n - l - 1]``,
    the order in which each subshell family fills. ``electron_subshell`` is
    the only public view of that table and always returns fill order.
    """

    def __init__(self, electrons: int) -> None:
        self.total_electrons = electrons
        self.azimuthal_qn = 0
        self.aphelion_shell = 0
        self.last_shell = 1
        self.anomaly_corrected = False
        self._by_azimuthal: list[list[int]] = []
        self._subshells: list[Subshell] | None = None

    def _store(self, level: int, azimuthal: int, electrons: int) -> None:
        while len(self._by_azimuthal) <= azimuthal:
            self._by_azimuthal.append([])
        self._by_azimuthal[azimuthal].append(electrons)
        self.azimuthal_qn = max(self.azimuthal_qn, azimuthal)
        self.aphelion_shell = max(self.aphelion_shell, level)

    def _rebuild(self) -> list[Subshell]:
        subshells: list[Subshell] = []
        for level, azimuthal in madelung_order():
            if azimuthal >= len(self._by_azimuthal):
                break
            row = self._by_azimuthal[azimuthal]
            position = level - azimuthal - 1
            # each family fills in increasing n, so the first gap is the end
            if position >= len(row):
                break
            subshells.append(Subshell(level, azimuthal, row[position]))
        return subshells

    def electron_subshell(self) -> list[Subshell]:
        if self._subshells is None:
            self._subshells = self._rebuild()
        return list(self._subshells)

    def replace_subshells(self, subshells: list[Subshell]) -> None:
        self._subshells = list(subshells)

    def by_principal_level(self) -> list[Subshell]:
        return sorted(self.electron_subshell(), key=lambda sub: (sub.level, sub.azimuthal))

    def electrons_per_shell(self) -> np.ndarray:
        subshells = self.electron_subshell()
        if not subshells:
            return np.zeros(0, dtype=int)
        levels = np.array([sub.level - 1 for sub in subshells], dtype=int)
        weights = np.array([sub.electrons for sub in subshells], dtype=int)
        return np.bincount(levels, weights=weights).astype(int)

    def as_dict(self) -> dict[tuple[int, int], int]:
        return {(sub.level, sub.azimuthal): sub.electrons for sub in self.electron_subshell()}

    def __iter__(self) -> Iterator[Subshell]:
        return iter(self.electron_subshell())

    def __len__(self) -> int:
        return len(self.electron_subshell())

    def __repr__(self) -> str:
        parts = " ".join(f"{sub.label}{sub.electrons}" for sub in self.electron_subshell())
        return f"ElectronShell({self.total_electrons}: {parts})"


def _check_electron_count(electron_count: int) -> int:
    if isinstance(electron_count, bool) or not isinstance(electron_count, (int, np.integer)):
        raise ValueError(f"Electron count must be an integer, got {electron_count!r}.")
    electron_count = int(electron_count)
    if electron_count < 0:
        raise ValueError(f"Electron count cannot be negative, got {electron_count}.")
    if electron_count > MAX_ELECTRONS:
        raise ValueError(
            f"The maximum amount of electrons that can be calculated is {MAX_ELECTRONS}. "
            f"{electron_count} given."
        )
    return electron_count


def fill_subshells(electron_count: int) -> ElectronShell:
    electron_count = _check_electron_count(electron_count)
    result = ElectronShell(electron_count)
    remaining = electron_count
    shell = 1
    max_level = 1
    while remaining > 0:
        capacity = (2 * shell - 1) * 2
        fill = min(capacity, remaining)
        result._store(max_level - shell + 1, shell - 1, fill)
        remaining -= fill
        if remaining == 0:
            break
        if shell == 1:
            max_level += 1
            shell = math.ceil(max_level / 2)
        else:
            shell -= 1
    result.last_shell = shell
    return result


def fill(electron_count: int, apply_exceptions: bool = True) -> ElectronShell:
    shell = fill_subshells(electron_count)
    if apply_exceptions:
        from shellfill.chem.anomalies import correct

        correct(shell)
    return shell


def expected_subshells(electron_count: int) -> list[Subshell]:
    return fill(electron_count, apply_exceptions=False).electron_subshell()


def actual_subshells(electron_count: int) -> list[Subshell]:
    return fill(electron_count, apply_exceptions=True).electron_subshell()
