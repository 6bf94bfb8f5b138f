from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from shellfill.chem.aufbau import Subshell, fill
from shellfill.chem.notation import abbreviated_config, config_string, format_subshell, parse_config


class ConfigStringTests(unittest.TestCase):
    def test_format_subshell(self) -> None:
        self.assertEqual(format_subshell(Subshell(3, 2, 5)), "3d5")
        self.assertEqual(format_subshell(Subshell(12, 11, 1)), "12n11")

    def test_neon(self) -> None:
        self.assertEqual(config_string(fill(10)), "1s2 2s2 2p6")

    def test_empty(self) -> None:
        self.assertEqual(config_string(fill(0)), "")

    def test_follows_corrected_configuration(self) -> None:
        self.assertEqual(config_string(fill(29)), "1s2 2s2 2p6 3s2 3p6 4s1 3d10")
        self.assertEqual(config_string(fill(29, apply_exceptions=False)), "1s2 2s2 2p6 3s2 3p6 4s2 3d9")


class AbbreviatedConfigTests(unittest.TestCase):
    def test_no_core_for_first_period(self) -> None:
        self.assertEqual(abbreviated_config(fill(1)), "1s1")
        self.assertEqual(abbreviated_config(fill(2)), "1s2")

    def test_core_strictly_below_count(self) -> None:
        self.assertEqual(abbreviated_config(fill(10)), "[He] 2s2 2p6")

    def test_transition_metals(self) -> None:
        self.assertEqual(abbreviated_config(fill(26)), "[Ar] 4s2 3d6")
        self.assertEqual(abbreviated_config(fill(24)), "[Ar] 4s1 3d5")
        self.assertEqual(abbreviated_config(fill(46)), "[Kr] 4d10")

    def test_lawrencium(self) -> None:
        self.assertEqual(abbreviated_config(fill(103)), "[Rn] 7s2 5f14 7p1")


class ParseConfigTests(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertEqual(parse_config("1s2 2s2 2p6"), {(1, 0): 2, (2, 0): 2, (2, 1): 6})

    def test_parse_rendered_string(self) -> None:
        shell = fill(79)
        self.assertEqual(parse_config(config_string(shell)), shell.as_dict())

    def test_malformed_tokens_raise(self) -> None:
        for text in ("s2", "2p", "2x3", "2pp", "12n11"):
            with self.assertRaises(ValueError):
                parse_config(text)


if __name__ == "__main__":
    unittest.main()
