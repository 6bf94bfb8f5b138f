from __future__ import annotations

import sys

from PySide6 import QtCore, QtWidgets

from shellfill.chem.anomalies import build_anomaly_note
from shellfill.chem.atom import Atom
from shellfill.chem.elements import get_name, get_symbol
from shellfill.chem.electron_configuration import summarize_configuration
from shellfill.chem.notation import abbreviated_config, config_string, format_subshell


MAX_VIEWER_ELECTRONS = 118


class SubshellTable(QtWidgets.QTableWidget):
    HEADERS = ("Subshell", "Electrons", "Capacity")

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setColumnCount(len(self.HEADERS))
        self.setHorizontalHeaderLabels(list(self.HEADERS))
        self.verticalHeader().setVisible(False)
        self.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.setSelectionMode(QtWidgets.QAbstractItemView.NoSelection)

    def set_atom(self, atom: Atom) -> None:
        subshells = atom.electron_shell.electron_subshell()
        self.setRowCount(len(subshells))
        for row, sub in enumerate(subshells):
            values = (sub.label, str(sub.electrons), str(sub.capacity))
            for col, value in enumerate(values):
                item = QtWidgets.QTableWidgetItem(value)
                item.setTextAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
                self.setItem(row, col, item)


class ConfigurationTab(QtWidgets.QWidget):
    def __init__(self, electrons: int = 1, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.table = SubshellTable()
        self.controls = self._build_controls(electrons)

        self.config_label = QtWidgets.QLabel()
        self.config_label.setWordWrap(True)
        self.note_label = QtWidgets.QLabel()
        self.note_label.setWordWrap(True)

        right = QtWidgets.QVBoxLayout()
        right.addWidget(self.config_label)
        right.addWidget(self.note_label)
        right.addStretch()

        layout = QtWidgets.QHBoxLayout(self)
        layout.addWidget(self.controls, 1)
        layout.addWidget(self.table, 2)
        layout.addLayout(right, 2)

        self._refresh()

    def _build_controls(self, electrons: int) -> QtWidgets.QWidget:
        container = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(container)

        group = QtWidgets.QGroupBox("Atom")
        form = QtWidgets.QFormLayout(group)

        self.electron_spin = QtWidgets.QSpinBox()
        self.electron_spin.setRange(1, MAX_VIEWER_ELECTRONS)
        self.electron_spin.setValue(electrons)
        self.electron_spin.valueChanged.connect(self._refresh)
        form.addRow("Electrons", self.electron_spin)

        self.abbrev_toggle = QtWidgets.QCheckBox("Noble-gas core")
        self.abbrev_toggle.toggled.connect(self._refresh)
        form.addRow(self.abbrev_toggle)

        layout.addWidget(group)
        layout.addStretch()
        return container

    @property
    def electrons(self) -> int:
        return self.electron_spin.value()

    def _refresh(self) -> None:
        electrons = self.electrons
        atom = Atom.from_pen(electrons)
        shell = atom.electron_shell
        self.table.set_atom(atom)

        summary = summarize_configuration(shell)
        text = abbreviated_config(shell) if self.abbrev_toggle.isChecked() else config_string(shell)
        sets = ", ".join(s.value for s in atom.chemical_sets())
        outer = format_subshell(shell.by_principal_level()[-1])
        self.config_label.setText(
            f"<b>{get_name(electrons)} ({get_symbol(electrons)})</b><br>"
            f"{text}<br>"
            f"Valence shell n={summary.valence_shell}, outermost {outer}, "
            f"{summary.unpaired_electrons} unpaired, {summary.block} block"
            f"{f'<br>{sets}' if sets else ''}"
        )

        note = build_anomaly_note(electrons)
        if note is None:
            self.note_label.clear()
        else:
            self.note_label.setText(
                f"<p><b>Aufbau exception</b>: expected {note.expected_config}</p>"
                f"<p>{note.explanation}</p><p>{note.impact}</p>"
            )


class ShellfillWindow(QtWidgets.QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("shellfill")
        self.setMinimumSize(960, 540)
        self._settings = QtCore.QSettings("shellfill", "shellfill")
        electrons = int(self._settings.value("electrons", 1))

        self.tab = ConfigurationTab(min(max(electrons, 1), MAX_VIEWER_ELECTRONS))
        self.setCentralWidget(self.tab)
        self.statusBar().showMessage("Pick an electron count to see its configuration.")

    def closeEvent(self, event) -> None:
        self._settings.setValue("electrons", self.tab.electrons)
        super().closeEvent(event)


def main() -> None:
    app = QtWidgets.QApplication(sys.argv)
    app.setStyle("Fusion")
    window = ShellfillWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
