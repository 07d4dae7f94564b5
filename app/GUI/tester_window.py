"""Tester Window - interactive front end for applying, undoing and redoing transactions."""

import logging

from PyQt6.QtCore import QSettings, Qt
from PyQt6.QtGui import QAction, QFontDatabase, QKeySequence
from PyQt6.QtWidgets import (QComboBox, QFormLayout, QGroupBox, QHBoxLayout,
                             QLabel, QListWidget, QMainWindow, QPushButton,
                             QSpinBox, QVBoxLayout, QWidget)

from controllers.number_controller import NumberController

logger = logging.getLogger(__name__)

SETTINGS_ORG = "TPS"
SETTINGS_APP = "TPS Tester"

OPERATIONS = ["Add", "And Mask", "Or Mask"]


class TesterWindow(QMainWindow):
    """Main window showing the number, its history and the undo/redo controls.

    The window never mutates the number itself; every button routes through
    the NumberController and the display refreshes from observer events.
    """

    def __init__(self, controller: NumberController = None):
        super().__init__()
        self.controller = controller or NumberController()
        self.setWindowTitle("TPS Tester")

        self._init_ui()
        self._create_menu_bar()

        self.controller.add_observer(self._on_model_changed)
        self._restore_settings()
        self.refresh()

    def _init_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)

        # --- Input row ---
        input_row = QHBoxLayout()
        self.operation_combo = QComboBox()
        self.operation_combo.addItems(OPERATIONS)
        input_row.addWidget(self.operation_combo)

        self.amount_spin = QSpinBox()
        self.amount_spin.setRange(-1_000_000, 1_000_000)
        input_row.addWidget(self.amount_spin)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self._on_apply)
        input_row.addWidget(self.apply_button)
        layout.addLayout(input_row)

        # --- History buttons ---
        button_row = QHBoxLayout()
        self.undo_button = QPushButton("Undo")
        self.undo_button.clicked.connect(self._on_undo)
        button_row.addWidget(self.undo_button)

        self.redo_button = QPushButton("Redo")
        self.redo_button.clicked.connect(self._on_redo)
        button_row.addWidget(self.redo_button)

        self.clear_button = QPushButton("Clear History")
        self.clear_button.clicked.connect(self.controller.clear_history)
        button_row.addWidget(self.clear_button)

        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self.controller.reset)
        button_row.addWidget(self.reset_button)
        layout.addLayout(button_row)

        # --- Summary ---
        summary_group = QGroupBox("Transaction Stack")
        form = QFormLayout(summary_group)
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)

        self.value_label = QLabel("0")
        form.addRow("Value:", self.value_label)
        self.size_label = QLabel("0")
        form.addRow("Number of Transactions:", self.size_label)
        self.index_label = QLabel("-1")
        form.addRow("Current Index on Stack:", self.index_label)
        self.undo_count_label = QLabel("0")
        form.addRow("Undoable:", self.undo_count_label)
        self.redo_count_label = QLabel("0")
        form.addRow("Redoable:", self.redo_count_label)
        layout.addWidget(summary_group)

        self.transaction_list = QListWidget()
        self.transaction_list.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        layout.addWidget(self.transaction_list)

        self.setCentralWidget(central)

    def _create_menu_bar(self):
        edit_menu = self.menuBar().addMenu("&Edit")

        self.undo_action = QAction("&Undo", self)
        self.undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        self.undo_action.triggered.connect(self._on_undo)
        edit_menu.addAction(self.undo_action)

        self.redo_action = QAction("&Redo", self)
        self.redo_action.setShortcut(QKeySequence.StandardKey.Redo)
        self.redo_action.triggered.connect(self._on_redo)
        edit_menu.addAction(self.redo_action)

        edit_menu.addSeparator()

        clear_action = QAction("&Clear History", self)
        clear_action.triggered.connect(self.controller.clear_history)
        edit_menu.addAction(clear_action)

        reset_action = QAction("Rese&t", self)
        reset_action.triggered.connect(self.controller.reset)
        edit_menu.addAction(reset_action)

    # --- Actions ---

    def _on_apply(self):
        """Build the selected transaction and run it through the controller."""
        amount = self.amount_spin.value()
        operation = self.operation_combo.currentText()
        if operation == "Add":
            self.controller.add(amount)
        elif operation == "And Mask":
            self.controller.and_mask(amount)
        elif operation == "Or Mask":
            self.controller.or_mask(amount)
        else:
            logger.warning("Unknown operation %r, ignoring", operation)

    def _on_undo(self):
        """Undo the last transaction."""
        self.controller.undo()

    def _on_redo(self):
        """Redo the last undone transaction."""
        self.controller.redo()

    # --- Observer callback ---

    def _on_model_changed(self, event: str, data) -> None:
        """Handle change events from the controller."""
        self.refresh()

    # --- Refresh ---

    def refresh(self):
        """Redisplay the value, counters, action states and transaction list."""
        manager = self.controller.undo_manager

        self.value_label.setText(str(self.controller.value))
        self.size_label.setText(str(manager.get_size()))
        self.index_label.setText(str(manager.get_cursor()))
        self.undo_count_label.setText(str(manager.get_undo_count()))
        self.redo_count_label.setText(str(manager.get_redo_count()))

        self.transaction_list.clear()
        for command in manager.get_applied():
            self.transaction_list.addItem(command.describe())

        self._update_undo_redo_actions()

    def _update_undo_redo_actions(self):
        """Update the enabled state and text of undo/redo actions."""
        can_undo = self.controller.can_undo()
        self.undo_action.setEnabled(can_undo)
        self.undo_button.setEnabled(can_undo)
        desc = self.controller.get_undo_description()
        self.undo_action.setText(f"&Undo {desc}" if desc else "&Undo")

        can_redo = self.controller.can_redo()
        self.redo_action.setEnabled(can_redo)
        self.redo_button.setEnabled(can_redo)
        desc = self.controller.get_redo_description()
        self.redo_action.setText(f"&Redo {desc}" if desc else "&Redo")

    # --- Settings ---

    def _save_settings(self):
        """Save user preferences via QSettings"""
        settings = QSettings(SETTINGS_ORG, SETTINGS_APP)
        settings.setValue("window/geometry", self.saveGeometry())
        settings.setValue("input/operation", self.operation_combo.currentText())
        settings.setValue("input/amount", self.amount_spin.value())

    def _restore_settings(self):
        """Restore user preferences from QSettings"""
        settings = QSettings(SETTINGS_ORG, SETTINGS_APP)

        geometry = settings.value("window/geometry")
        if geometry:
            self.restoreGeometry(geometry)

        operation = settings.value("input/operation")
        if operation in OPERATIONS:
            self.operation_combo.setCurrentText(operation)

        amount = settings.value("input/amount")
        if amount is not None:
            try:
                self.amount_spin.setValue(int(amount))
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid saved amount %r", amount)

    def closeEvent(self, event):
        self._save_settings()
        self.controller.remove_observer(self._on_model_changed)
        super().closeEvent(event)
