from __future__ import annotations

import itertools
import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from shellfill.chem.aufbau import (
    MAX_ELECTRONS,
    Subshell,
    fill,
    fill_subshells,
    madelung_order,
    subshell_capacity,
    subshell_label,
)


def _triples(shell) -> list[tuple[int, int, int]]:
    return [(sub.level, sub.azimuthal, sub.electrons) for sub in shell.electron_subshell()]


class MadelungOrderTests(unittest.TestCase):
    def test_first_nineteen_subshells(self) -> None:
        expected = [
            (1, 0), (2, 0), (2, 1), (3, 0), (3, 1), (4, 0), (3, 2), (4, 1), (5, 0), (4, 2),
            (5, 1), (6, 0), (4, 3), (5, 2), (6, 1), (7, 0), (5, 3), (6, 2), (7, 1),
        ]
        self.assertEqual(list(itertools.islice(madelung_order(), 19)), expected)

    def test_order_sorted_by_n_plus_l_then_n(self) -> None:
        pairs = list(itertools.islice(madelung_order(), 200))
        self.assertEqual(pairs, sorted(pairs, key=lambda p: (p[0] + p[1], p[0])))
        self.assertEqual(len(set(pairs)), len(pairs))

    def test_capacities(self) -> None:
        self.assertEqual([subshell_capacity(l) for l in range(5)], [2, 6, 10, 14, 18])
        self.assertEqual(Subshell(3, 2, 4).capacity, 10)


class SubshellLabelTests(unittest.TestCase):
    def test_letter_labels(self) -> None:
        self.assertEqual("".join(subshell_label(l) for l in range(11)), "spdfghijklm")

    def test_numbered_fallback(self) -> None:
        self.assertEqual(subshell_label(11), "n1")
        self.assertEqual(subshell_label(12), "n2")

    def test_subshell_label_property(self) -> None:
        self.assertEqual(Subshell(4, 3, 7).label, "4f")


class FillScenarioTests(unittest.TestCase):
    def test_zero_electrons(self) -> None:
        shell = fill(0)
        self.assertEqual(_triples(shell), [])
        self.assertEqual(len(shell.electrons_per_shell()), 0)

    def test_hydrogen(self) -> None:
        self.assertEqual(_triples(fill(1)), [(1, 0, 1)])

    def test_helium(self) -> None:
        self.assertEqual(_triples(fill(2)), [(1, 0, 2)])

    def test_neon(self) -> None:
        self.assertEqual(_triples(fill(10)), [(1, 0, 2), (2, 0, 2), (2, 1, 6)])

    def test_iron_fill_order(self) -> None:
        self.assertEqual(
            _triples(fill(26)),
            [(1, 0, 2), (2, 0, 2), (2, 1, 6), (3, 0, 2), (3, 1, 6), (4, 0, 2), (3, 2, 6)],
        )

    def test_partial_last_subshell(self) -> None:
        self.assertEqual(_triples(fill(15))[-1], (3, 1, 3))

    def test_tracked_values(self) -> None:
        shell = fill_subshells(26)
        self.assertEqual(shell.last_shell, 3)
        self.assertEqual(shell.azimuthal_qn, 2)
        self.assertEqual(shell.aphelion_shell, 4)

        small = fill_subshells(1)
        self.assertEqual(small.last_shell, 1)
        self.assertEqual(small.azimuthal_qn, 0)
        self.assertEqual(small.aphelion_shell, 1)

    def test_first_numbered_subshell(self) -> None:
        shell = fill_subshells(2025)
        self.assertEqual(shell.electron_subshell()[-1], Subshell(12, 11, 1))
        self.assertEqual(shell.azimuthal_qn, 11)
        self.assertEqual(shell.aphelion_shell, 22)
        self.assertEqual(shell.last_shell, 12)

    def test_electrons_per_shell(self) -> None:
        self.assertEqual(list(fill(18).electrons_per_shell()), [2, 8, 8])
        self.assertEqual(list(fill(26).electrons_per_shell()), [2, 8, 14, 2])

    def test_as_dict(self) -> None:
        self.assertEqual(fill(5).as_dict(), {(1, 0): 2, (2, 0): 2, (2, 1): 1})


class FillInvariantTests(unittest.TestCase):
    def test_sum_matches_request(self) -> None:
        for count in itertools.chain(range(0, 400), (1000, 2024, 2025, MAX_ELECTRONS)):
            for apply_exceptions in (False, True):
                shell = fill(count, apply_exceptions=apply_exceptions)
                self.assertEqual(sum(sub.electrons for sub in shell), count)

    def test_capacity_and_single_partial_subshell(self) -> None:
        for count in range(1, 400):
            subshells = fill_subshells(count).electron_subshell()
            for sub in subshells:
                self.assertGreater(sub.electrons, 0)
                self.assertLessEqual(sub.electrons, sub.capacity)
            self.assertTrue(all(sub.is_full() for sub in subshells[:-1]), count)

    def test_corrected_capacity(self) -> None:
        for count in range(0, 200):
            for sub in fill(count):
                self.assertGreaterEqual(sub.electrons, 0)
                self.assertLessEqual(sub.electrons, sub.capacity)

    def test_prefix_between_consecutive_counts(self) -> None:
        for count in range(1, 400):
            current = [(s.level, s.azimuthal) for s in fill_subshells(count)]
            following = [(s.level, s.azimuthal) for s in fill_subshells(count + 1)]
            self.assertEqual(following[: len(current) - 1], current[:-1])
            if fill_subshells(count).electron_subshell()[-1].is_full():
                self.assertEqual(len(following), len(current) + 1)
            else:
                self.assertEqual(following, current)


class FillPreconditionTests(unittest.TestCase):
    def test_maximum_is_accepted(self) -> None:
        self.assertEqual(fill(MAX_ELECTRONS).total_electrons, MAX_ELECTRONS)

    def test_above_maximum_raises(self) -> None:
        with self.assertRaises(ValueError):
            fill(MAX_ELECTRONS + 1)

    def test_negative_raises(self) -> None:
        with self.assertRaises(ValueError):
            fill(-1)

    def test_non_integer_raises(self) -> None:
        for value in (2.5, "10", None, True):
            with self.assertRaises(ValueError):
                fill_subshells(value)


if __name__ == "__main__":
    unittest.main()
