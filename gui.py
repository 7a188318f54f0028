import logging
import numpy as np
from PyQt6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                            QGridLayout, QPushButton, QLabel, QFileDialog,
                            QTableWidget, QTableWidgetItem, QButtonGroup,
                            QAbstractItemView, QHeaderView)
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from circlefit.circle_fitting import fit_circle
from circlefit.data_io import (finite_points, load_csv_points, sample_points,
                               save_csv_points)
from circlefit.formatting import Unit, format_result
from circlefit.visualization import plot_fit

logger = logging.getLogger(__name__)


class CircleFitGUI(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Circle Fit")
        self.setMinimumSize(1000, 640)
        self.unit = Unit.INCH
        self.points = np.empty((0, 2))

        # Main widget and layout
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QHBoxLayout(main_widget)

        # Left panel for point entry and results
        control_panel = QWidget()
        control_layout = QVBoxLayout(control_panel)
        control_panel.setMaximumWidth(360)

        # Unit toggle
        unit_row = QHBoxLayout()
        unit_row.addWidget(QLabel("Unit:"))
        self.unit_group = QButtonGroup(self)
        self.unit_buttons = {}
        for unit, text in ((Unit.INCH, "Inches"), (Unit.MILLIMETER, "Millimeters")):
            btn = QPushButton(text)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked, u=unit: self.set_unit(u))
            self.unit_group.addButton(btn)
            self.unit_buttons[unit] = btn
            unit_row.addWidget(btn)
        self.unit_buttons[self.unit].setChecked(True)
        control_layout.addLayout(unit_row)

        # Point table
        self.table = QTableWidget(0, 2)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.table.itemChanged.connect(self.on_table_changed)
        control_layout.addWidget(self.table)

        self.npts_label = QLabel("Points: 0")
        control_layout.addWidget(self.npts_label)

        # Table actions
        buttons = QGridLayout()
        actions = [
            ("Add Row", self.add_row),
            ("Delete Row", self.delete_selected_rows),
            ("Clear", self.clear_table),
            ("Sample Data", self.load_sample),
            ("Import CSV", self.import_csv),
            ("Export CSV", self.export_csv),
        ]
        for i, (text, slot) in enumerate(actions):
            btn = QPushButton(text)
            btn.clicked.connect(lambda _checked, s=slot: s())
            buttons.addWidget(btn, i // 2, i % 2)
        control_layout.addLayout(buttons)

        fit_btn = QPushButton("Fit Circle")
        fit_btn.clicked.connect(lambda _checked: self.refresh())
        control_layout.addWidget(fit_btn)

        # Results
        results = QGridLayout()
        self.result_labels = {}
        self.unit_labels = []
        rows = [("cx", "Center X"), ("cy", "Center Y"), ("r", "Radius"),
                ("d", "Diameter"), ("rmse", "RMSE")]
        for i, (key, text) in enumerate(rows):
            results.addWidget(QLabel(text), i, 0)
            value = QLabel(format_result(None, self.unit)[key])
            self.result_labels[key] = value
            results.addWidget(value, i, 1)
            unit_label = QLabel(self.unit.label)
            self.unit_labels.append(unit_label)
            results.addWidget(unit_label, i, 2)
        control_layout.addLayout(results)
        control_layout.addStretch()

        layout.addWidget(control_panel)

        # Right panel for the preview
        self.figure = Figure(figsize=(6, 6))
        self.canvas = FigureCanvasQTAgg(self.figure)
        self.ax = self.figure.add_subplot(111)
        layout.addWidget(self.canvas, stretch=1)

        for _ in range(4):
            self.add_row()
        self.update_headers()
        self.refresh()

    def update_headers(self):
        self.table.setHorizontalHeaderLabels([f"X {self.unit.label}", f"Y {self.unit.label}"])
        for label in self.unit_labels:
            label.setText(self.unit.label)

    def set_unit(self, unit):
        self.unit = Unit(unit)
        self.unit_buttons[self.unit].setChecked(True)
        self.update_headers()
        self.refresh()

    def add_row(self, x='', y=''):
        row = self.table.rowCount()
        self.table.blockSignals(True)
        self.table.insertRow(row)
        self.table.setItem(row, 0, QTableWidgetItem(str(x)))
        self.table.setItem(row, 1, QTableWidgetItem(str(y)))
        self.table.blockSignals(False)

    def delete_selected_rows(self):
        rows = sorted({idx.row() for idx in self.table.selectedIndexes()}, reverse=True)
        for row in rows:
            self.table.removeRow(row)
        self.refresh()

    def clear_table(self):
        self.table.setRowCount(0)
        self.refresh()

    def set_points(self, points):
        self.table.setRowCount(0)
        for x, y in points:
            self.add_row(x, y)
        self.refresh()

    def load_sample(self):
        self.set_points(sample_points())

    def read_points(self) -> np.ndarray:
        """Read numeric rows from the table, skipping blanks and junk"""
        pts = []
        for row in range(self.table.rowCount()):
            cells = [self.table.item(row, col) for col in (0, 1)]
            try:
                x, y = (float(c.text()) for c in cells if c is not None)
            except ValueError:
                continue
            pts.append((x, y))
        return finite_points(pts)

    def on_table_changed(self, _item):
        self.refresh()

    def refresh(self):
        self.points = self.read_points()
        self.npts_label.setText(f"Points: {len(self.points)}")
        result = fit_circle(self.points)
        for key, text in format_result(result, self.unit).items():
            self.result_labels[key].setText(text)
        self.draw_preview(result)
        return result

    def draw_preview(self, result):
        self.ax.clear()
        if len(self.points):
            plot_fit(self.ax, self.points, result, self.unit)
        else:
            self.ax.grid(True)
        self.canvas.draw_idle()

    def import_csv(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Import Points", "", "CSV Files (*.csv);;All Files (*)")
        if not path:
            return
        try:
            points = load_csv_points(path)
        except (OSError, RuntimeError) as e:
            logger.warning("Import failed for %s: %s", path, e)
            self.statusBar().showMessage(f"Error importing points: {e}")
            return
        self.set_points(points)
        self.statusBar().showMessage(f"Imported {len(points)} points from {path}")

    def export_csv(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Points", f"points_{self.unit.value}.csv", "CSV Files (*.csv)")
        if not path:
            return
        try:
            save_csv_points(self.points, path, self.unit)
        except OSError as e:
            logger.warning("Export failed for %s: %s", path, e)
            self.statusBar().showMessage(f"Error exporting points: {e}")
            return
        self.statusBar().showMessage(f"Points exported to {path}")
