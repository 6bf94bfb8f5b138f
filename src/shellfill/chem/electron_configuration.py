from __future__ import annotations

from dataclasses import dataclass

from shellfill.chem.aufbau import ElectronShell, Subshell, subshell_label


@dataclass(frozen=True)
class ConfigSummary:
    total_electrons: int
    valence_shell: int
    valence_electrons: int
    d_electrons: int
    f_electrons: int
    unpaired_electrons: int
    block: str
    electrons_per_shell: list[int]


def _count_unpaired(subshells: list[Subshell]) -> int:
    total = 0
    for sub in subshells:
        deg = 2 * sub.azimuthal + 1
        electrons = max(0, min(sub.capacity, int(sub.electrons)))
        if electrons <= deg:
            total += electrons
        else:
            total += sub.capacity - electrons
    return total


def _block(subshells: list[Subshell]) -> str:
    if not subshells:
        return ""
    return subshell_label(subshells[-1].azimuthal)


def summarize_configuration(shell: ElectronShell) -> ConfigSummary:
    subshells = shell.electron_subshell()
    counts = shell.as_dict()
    valence_shell = max((sub.level for sub in subshells if sub.electrons > 0), default=0)
    valence_electrons = sum(sub.electrons for sub in subshells if sub.level == valence_shell)
    d_electrons = counts.get((valence_shell - 1, 2), 0) if valence_shell > 1 else 0
    f_electrons = counts.get((valence_shell - 2, 3), 0) if valence_shell > 2 else 0
    return ConfigSummary(
        total_electrons=sum(sub.electrons for sub in subshells),
        valence_shell=int(valence_shell),
        valence_electrons=int(valence_electrons),
        d_electrons=int(d_electrons),
        f_electrons=int(f_electrons),
        unpaired_electrons=_count_unpaired(subshells),
        block=_block(subshells),
        electrons_per_shell=[int(v) for v in shell.electrons_per_shell()],
    )
