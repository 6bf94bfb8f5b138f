from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from shellfill.chem.aufbau import ElectronShell, Subshell, fill_subshells
from shellfill.chem.notation import config_string


logger = logging.getLogger(__name__)

# Ladder value of a filler that stopped inside a d subshell.
D_BLOCK_LADDER = 3


class Correction(Enum):
    PROMOTE_ONE = "promote_one"
    PROMOTE_TWO = "promote_two"
    REPLACE_WITH_7P = "replace_with_7p"


@dataclass(frozen=True)
class AnomalyRule:
    level: int
    electrons: frozenset[int]
    action: Correction

    def matches(self, level: int, electrons: int) -> bool:
        return level == self.level and electrons in self.electrons


# Known ground-state d-block exceptions, keyed on the (n)d subshell being filled
# before correction. Notes: commonly cited in general and inorganic chemistry
# texts and standard periodic table references.
ANOMALY_RULES: tuple[AnomalyRule, ...] = (
    AnomalyRule(3, frozenset({4, 9}), Correction.PROMOTE_ONE),  # Cr, Cu
    AnomalyRule(4, frozenset({3, 4, 6, 7, 9}), Correction.PROMOTE_ONE),  # Nb, Mo, Ru, Rh, Ag
    AnomalyRule(4, frozenset({8}), Correction.PROMOTE_TWO),  # Pd
    AnomalyRule(5, frozenset({8, 9}), Correction.PROMOTE_ONE),  # Pt, Au
    AnomalyRule(6, frozenset({1}), Correction.REPLACE_WITH_7P),  # Lr
)


def matching_rules(level: int, electrons: int) -> list[AnomalyRule]:
    return [rule for rule in ANOMALY_RULES if rule.matches(level, electrons)]


def _outer_pair(shell: ElectronShell) -> tuple[Subshell, Subshell] | None:
    ordered = shell.by_principal_level()
    if len(ordered) < 2:
        return None
    outer_d, outer_s = ordered[-2], ordered[-1]
    if outer_d.azimuthal != 2 or outer_s.azimuthal != 0:
        return None
    return outer_d, outer_s


def _apply(
    subshells: list[Subshell], outer_d: Subshell, outer_s: Subshell, action: Correction
) -> list[Subshell]:
    d_index = subshells.index(outer_d)
    s_index = subshells.index(outer_s)
    if action is Correction.PROMOTE_ONE:
        subshells[s_index] = outer_s.with_electrons(outer_s.electrons - 1)
        subshells[d_index] = outer_d.with_electrons(outer_d.electrons + 1)
    elif action is Correction.PROMOTE_TWO:
        subshells[d_index] = outer_d.with_electrons(outer_d.electrons + outer_s.electrons)
        del subshells[s_index]
    elif action is Correction.REPLACE_WITH_7P:
        del subshells[d_index]
        subshells.append(Subshell(7, 1, 1))
    return subshells


def correct(shell: ElectronShell) -> ElectronShell:
    """Rewrite the outer d/s pair of ``shell`` for the known d-block anomalies.

    Only configurations whose filler stopped inside a d subshell are looked at.
    The pair is taken from the principal-level view, where the (n)d being
    filled sits just before the (n+1)s that completed earlier. At most one
    rule fires, and a configuration is never corrected twice.
    """
    if shell.anomaly_corrected or shell.last_shell != D_BLOCK_LADDER:
        return shell
    pair = _outer_pair(shell)
    if pair is None:
        return shell
    outer_d, outer_s = pair
    rules = matching_rules(outer_d.level, outer_d.electrons)
    if not rules:
        return shell
    rule = rules[0]
    logger.debug(
        f"{shell.total_electrons} electrons: {rule.action.value} on "
        f"{outer_d.label}{outer_d.electrons} {outer_s.label}{outer_s.electrons}"
    )
    shell.replace_subshells(_apply(shell.electron_subshell(), outer_d, outer_s, rule.action))
    shell.anomaly_corrected = True
    return shell


@dataclass(frozen=True)
class AnomalyNote:
    electron_count: int
    expected_config: str
    actual_config: str
    explanation: str
    impact: str


# Explanation and chemical consequence for every count the rule table corrects.
ANOMALY_NOTES: dict[int, tuple[str, str]] = {
    24: (
        "Moving one electron from 4s into 3d leaves six singly occupied orbitals "
        "(4s1 3d5); the extra exchange stabilization of a half-full d shell outweighs "
        "the cost of the promotion.",
        "Chromium is strongly paramagnetic and spans oxidation states from +2 to +6.",
    ),
    29: (
        "Completing the d shell at 3d10 costs less than keeping the 4s pair, so "
        "copper ends 4s1 3d10.",
        "Copper(I) compounds are d10 and usually colorless; copper(II) is d9 and "
        "gives blue and green complexes.",
    ),
    41: (
        "For niobium the 4d and 5s levels lie so close that 4d4 5s1 is lower than the "
        "idealized 4d3 5s2.",
        "The +5 state dominates niobium chemistry, where all five valence electrons are lost.",
    ),
    42: (
        "As with chromium one level up, a single 5s electron moves to reach the "
        "half-filled 4d5 arrangement.",
        "Molybdenum shows oxidation states from +2 to +6 and appears in many "
        "redox-active enzymes.",
    ),
    44: (
        "Ruthenium keeps one 5s electron and places seven in 4d; the spread of the 4d "
        "band makes the single-s arrangement the ground state.",
        "Ruthenium reaches an unusually wide range of oxidation states, up to +8 in RuO4.",
    ),
    45: (
        "Rhodium follows ruthenium with 4d8 5s1 rather than 4d7 5s2.",
        "Rhodium(I) and rhodium(III) complexes are workhorses of homogeneous catalysis.",
    ),
    46: (
        "Palladium empties 5s completely: both electrons join 4d to close the shell "
        "at 4d10, the only neutral atom with no electron in its outermost s level.",
        "The free palladium atom is diamagnetic, and Pd(0)/Pd(II) cycling "
        "drives cross-coupling reactions.",
    ),
    47: (
        "Silver shifts one 5s electron into 4d to close the shell, giving 4d10 5s1.",
        "The lone 5s electron is easily lost, so silver chemistry is mostly Ag(I).",
    ),
    78: (
        "Platinum prefers 5d9 6s1 over the idealized 5d8 6s2 because the 6s level "
        "contracts and drops close to 5d.",
        "Pt(II) is square planar d8 and Pt(IV) octahedral d6; both are kinetically inert.",
    ),
    79: (
        "Gold closes its 5d shell at 5d10 and keeps a single 6s electron.",
        "The +1 and +3 states dominate, and the contracted 6s level accounts for the "
        "metal's high electron affinity.",
    ),
    103: (
        "Lawrencium places its last electron in 7p instead of 6d, giving 7s2 7p1 "
        "outside the closed 5f14 shell.",
        "Despite the p electron, lawrencium behaves as a trivalent actinide in solution.",
    ),
}


def build_anomaly_note(electron_count: int) -> AnomalyNote | None:
    expected = fill_subshells(electron_count)
    expected_text = config_string(expected)
    actual = correct(fill_subshells(electron_count))
    if not actual.anomaly_corrected:
        return None
    explanation, impact = ANOMALY_NOTES[int(electron_count)]
    return AnomalyNote(
        electron_count=int(electron_count),
        expected_config=expected_text,
        actual_config=config_string(actual),
        explanation=explanation,
        impact=impact,
    )
