from __future__ import annotations

from enum import Enum

from pint import UnitRegistry

from shellfill.chem.aufbau import ElectronShell, fill
from shellfill.chem.elements import get_symbol


ureg = UnitRegistry()
Q_ = ureg.Quantity


class ChemicalSet(Enum):
    ALKALI_METAL = "Alkali Metal"
    ALKALINE_EARTH_METAL = "Alkaline Earth Metal"
    CHALCOGEN = "Chalcogen"
    HALOGEN = "Halogen"
    NOBLE_GAS = "Noble Gas"

    @classmethod
    def from_valence_electrons(cls, electrons: int, azimuthal: int) -> list[ChemicalSet]:
        """Classify by the electron count of the valence subshell.

        Only the s and p families are recognised; anything else gives an
        empty list.
        """
        chemical_set = _VALENCE_SETS.get((azimuthal, electrons))
        return [chemical_set] if chemical_set is not None else []


_VALENCE_SETS: dict[tuple[int, int], ChemicalSet] = {
    (0, 1): ChemicalSet.ALKALI_METAL,
    (0, 2): ChemicalSet.ALKALINE_EARTH_METAL,
    (1, 4): ChemicalSet.CHALCOGEN,
    (1, 5): ChemicalSet.HALOGEN,
    (1, 6): ChemicalSet.NOBLE_GAS,
}


class Atom:
    def __init__(self, protons: int, electrons: int, neutrons: int) -> None:
        if protons < 0 or neutrons < 0:
            raise ValueError(f"Proton and neutron counts must be non-negative, got {protons} and {neutrons}.")
        self._protons = int(protons)
        self._electrons = int(electrons)
        self._neutrons = int(neutrons)
        self._weight = float(protons + neutrons)
        self._electron_shell = fill(electrons)

    @classmethod
    def from_p_e_n(cls, protons: int, electrons: int, neutrons: int) -> Atom:
        return cls(protons, electrons, neutrons)

    @classmethod
    def from_pe_n(cls, protons_and_electrons: int, neutrons: int) -> Atom:
        return cls(protons_and_electrons, protons_and_electrons, neutrons)

    @classmethod
    def from_pen(cls, protons_electrons_and_neutrons: int) -> Atom:
        return cls.from_pe_n(protons_electrons_and_neutrons, protons_electrons_and_neutrons)

    @property
    def electron_shell(self) -> ElectronShell:
        return self._electron_shell

    @property
    def protons(self) -> int:
        return self._protons

    @property
    def electrons(self) -> int:
        return self._electrons

    @property
    def neutrons(self) -> int:
        return self._neutrons

    @property
    def symbol(self) -> str:
        return get_symbol(self._protons)

    @property
    def atomic_mass(self) -> float:
        return self._weight

    @property
    def atomic_mass_quantity(self):
        return Q_(self._weight, ureg.dalton)

    @property
    def ion_electric_charge(self) -> int:
        return self._protons - self._electrons

    def is_isotope_of(self, other: Atom) -> bool:
        return self._protons == other._protons

    def chemical_sets(self) -> list[ChemicalSet]:
        ordered = self._electron_shell.by_principal_level()
        if not ordered:
            return []
        valence = ordered[-1]
        return ChemicalSet.from_valence_electrons(valence.electrons, valence.azimuthal)

    def __repr__(self) -> str:
        return f"Atom(protons={self._protons}, electrons={self._electrons}, neutrons={self._neutrons})"
