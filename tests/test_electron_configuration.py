from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from shellfill.chem.aufbau import fill
from shellfill.chem.electron_configuration import summarize_configuration


class SummaryTests(unittest.TestCase):
    def test_iron(self) -> None:
        summary = summarize_configuration(fill(26))
        self.assertEqual(summary.total_electrons, 26)
        self.assertEqual(summary.valence_shell, 4)
        self.assertEqual(summary.valence_electrons, 2)
        self.assertEqual(summary.d_electrons, 6)
        self.assertEqual(summary.f_electrons, 0)
        self.assertEqual(summary.unpaired_electrons, 4)
        self.assertEqual(summary.block, "d")
        self.assertEqual(summary.electrons_per_shell, [2, 8, 14, 2])

    def test_chromium_unpaired(self) -> None:
        self.assertEqual(summarize_configuration(fill(24)).unpaired_electrons, 6)

    def test_oxygen(self) -> None:
        summary = summarize_configuration(fill(8))
        self.assertEqual(summary.valence_shell, 2)
        self.assertEqual(summary.valence_electrons, 6)
        self.assertEqual(summary.unpaired_electrons, 2)
        self.assertEqual(summary.block, "p")

    def test_noble_gas_is_paired(self) -> None:
        self.assertEqual(summarize_configuration(fill(36)).unpaired_electrons, 0)

    def test_empty(self) -> None:
        summary = summarize_configuration(fill(0))
        self.assertEqual(summary.valence_shell, 0)
        self.assertEqual(summary.block, "")
        self.assertEqual(summary.electrons_per_shell, [])


if __name__ == "__main__":
    unittest.main()
