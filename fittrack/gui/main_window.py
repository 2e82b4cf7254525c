from __future__ import annotations

"""Main window: entry form, summary tiles, animated chart and the entry list."""

import logging
from typing import Any, Dict, List, Optional

from PySide6.QtCore import QDate, Qt, QTimer
from PySide6.QtGui import QFont, QPalette, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QDateEdit,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from fittrack.config import settings as cfg
from fittrack.core.app_config import AppConfig
from fittrack.gui.chart_widget import WeightChart
from fittrack.gui.ui_state import UIState, load_ui_state, save_ui_state
from fittrack.services.entries import EntryStore, EntryValidationError, today_iso, validate_entry
from fittrack.services.labels import format_date
from fittrack.services.stats import calc_stats, format_weight_diff

log = logging.getLogger(__name__)

CHART_FIELD_LABELS = {"weight": "Weight", "calories": "Calories"}
CHART_FIELD_UNITS = {"weight": cfg.WEIGHT_UNIT, "calories": "kcal"}
FONT_SIZES = {"Small": 9, "Normal": 10, "Large": 12}

_OK_STYLE = "color:#05400A; background:#e6ffed; border:1px solid #7fd18b; padding:4px;"
_ERR_STYLE = "color:#680000; background:#ffecec; border:1px solid #e0a0a0; padding:4px;"
_TILE_STYLE = "QFrame {border:1px solid #94a3b8; border-radius:6px; padding:6px;}"


def _fmt(value: Any) -> str:
    if value is None:
        return "—"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class StatTile(QFrame):
    def __init__(self, title: str) -> None:
        super().__init__()
        self.setFrameShape(QFrame.Box)
        self.setStyleSheet(_TILE_STYLE)
        v = QVBoxLayout(self)
        v.setContentsMargins(6, 4, 6, 4)
        v.addWidget(QLabel(title))
        self.value = QLabel("—")
        self.value.setStyleSheet("font-weight:700; border:none;")
        v.addWidget(self.value)

    def set_value(self, text: str) -> None:
        self.value.setText(text)


class MainWindow(QMainWindow):
    """Single-page log: add/overwrite an entry per date, review trend and history."""

    def __init__(self, config: Optional[AppConfig] = None, store: Optional[EntryStore] = None) -> None:
        super().__init__()
        self.setWindowTitle(f"{cfg.APP_INFO.name} — Weight & Calories")
        self.config = config or AppConfig.load()
        self.store = store or EntryStore(self.config.entries_path)
        self.ui_state: UIState = load_ui_state()
        self.resize(self.ui_state.window_width, self.ui_state.window_height)

        root = QWidget()
        outer = QVBoxLayout(root)
        outer.setContentsMargins(12, 12, 12, 12)
        outer.setSpacing(10)

        # Entry form
        form = QHBoxLayout()
        self.date_edit = QDateEdit()
        self.date_edit.setDisplayFormat("yyyy-MM-dd")
        self.date_edit.setCalendarPopup(True)
        self.weight_edit = QLineEdit()
        self.weight_edit.setPlaceholderText(f"Weight, {cfg.WEIGHT_UNIT}")
        self.calories_edit = QLineEdit()
        self.calories_edit.setPlaceholderText("Calories")
        self.btn_add = QPushButton("Add")
        self.btn_clear = QPushButton("Clear all")
        form.addWidget(self.date_edit)
        form.addWidget(self.weight_edit, 1)
        form.addWidget(self.calories_edit, 1)
        form.addWidget(self.btn_add)
        form.addWidget(self.btn_clear)
        outer.addLayout(form)

        self.msg_label = QLabel("")
        self.msg_label.setVisible(False)
        outer.addWidget(self.msg_label)
        self._msg_timer = QTimer(self)
        self._msg_timer.setSingleShot(True)
        self._msg_timer.timeout.connect(self._clear_msg)

        # Stats tiles
        tiles = QHBoxLayout()
        self.tile_count = StatTile("Entries")
        self.tile_avg_cal = StatTile("Avg calories")
        self.tile_start = StatTile("Starting weight")
        self.tile_diff = StatTile("Weight change")
        for tile in (self.tile_count, self.tile_avg_cal, self.tile_start, self.tile_diff):
            tiles.addWidget(tile)
        outer.addLayout(tiles)

        # Chart
        chart_head = QHBoxLayout()
        chart_head.addWidget(QLabel("Trend"))
        chart_head.addStretch(1)
        self.field_combo = QComboBox()
        for key, label in CHART_FIELD_LABELS.items():
            self.field_combo.addItem(label, key)
        self.field_combo.setCurrentIndex(max(0, self.field_combo.findData(self.config.chart_field)))
        chart_head.addWidget(self.field_combo)
        self.font_combo = QComboBox()
        self.font_combo.addItems(list(FONT_SIZES))
        self.font_combo.setCurrentIndex(max(0, self.font_combo.findText(self.ui_state.font_size)))
        chart_head.addWidget(self.font_combo)
        self.dark_toggle = QCheckBox("Dark mode")
        self.dark_toggle.setChecked(self.ui_state.dark_mode)
        chart_head.addWidget(self.dark_toggle)
        outer.addLayout(chart_head)

        self.chart = WeightChart(
            value_field=self.config.chart_field,
            unit=CHART_FIELD_UNITS.get(self.config.chart_field, cfg.WEIGHT_UNIT),
        )
        outer.addWidget(self.chart)

        # History, newest first
        self.entry_list = QListWidget()
        outer.addWidget(self.entry_list, 1)

        self.setCentralWidget(root)

        self.btn_add.clicked.connect(self.add_entry)
        self.btn_clear.clicked.connect(self.clear_all)
        self.weight_edit.returnPressed.connect(self.add_entry)
        self.calories_edit.returnPressed.connect(self.add_entry)
        self.field_combo.currentIndexChanged.connect(self._on_field_changed)
        self.dark_toggle.toggled.connect(self._on_dark_toggled)
        self.font_combo.currentTextChanged.connect(self._on_font_size_changed)

        self._install_shortcuts()
        self._apply_appearance(self.ui_state.dark_mode, self.ui_state.font_size)
        self._reset_form()
        self.refresh()

    def _install_shortcuts(self) -> None:
        shortcut = QShortcut("Ctrl+Return", self)
        shortcut.activated.connect(self.add_entry)

    def _apply_appearance(self, dark: bool, font_size: str) -> None:
        app = QApplication.instance()
        if app is None:
            return
        if dark:
            palette = QPalette()
            palette.setColor(QPalette.Window, Qt.black)
            palette.setColor(QPalette.WindowText, Qt.white)
            palette.setColor(QPalette.Base, Qt.black)
            palette.setColor(QPalette.AlternateBase, Qt.gray)
            palette.setColor(QPalette.Text, Qt.white)
            palette.setColor(QPalette.Button, Qt.black)
            palette.setColor(QPalette.ButtonText, Qt.white)
            palette.setColor(QPalette.Highlight, Qt.darkGray)
            palette.setColor(QPalette.HighlightedText, Qt.white)
            app.setPalette(palette)
        else:
            app.setPalette(app.style().standardPalette())

        font = QFont()
        font.setPointSize(FONT_SIZES.get(font_size, 10))
        app.setFont(font)

    def _reset_form(self) -> None:
        self.weight_edit.clear()
        self.calories_edit.clear()
        self.date_edit.setDate(QDate.fromString(today_iso(), "yyyy-MM-dd"))

    def show_msg(self, text: str, ok: bool = True) -> None:
        self.msg_label.setText(text)
        self.msg_label.setStyleSheet(_OK_STYLE if ok else _ERR_STYLE)
        self.msg_label.setVisible(bool(text))
        if text:
            self._msg_timer.start(cfg.STATUS_MESSAGE_MS)

    def _clear_msg(self) -> None:
        self.msg_label.setText("")
        self.msg_label.setVisible(False)

    def add_entry(self) -> None:
        date = self.date_edit.date().toString("yyyy-MM-dd")
        try:
            entry = validate_entry(date, self.weight_edit.text(), self.calories_edit.text())
        except EntryValidationError as exc:
            self.show_msg(str(exc), ok=False)
            return
        try:
            replaced = self.store.upsert(entry)
        except OSError:
            self.show_msg("Could not save the entry", ok=False)
            return
        log.info("%s entry for %s", "Updated" if replaced else "Added", entry["date"])
        self.show_msg("Entry updated ✅" if replaced else "Entry added ✅")
        self._reset_form()
        self.refresh()

    def clear_all(self) -> None:
        try:
            self.store.clear()
        except OSError:
            self.show_msg("Could not clear entries", ok=False)
            return
        log.info("Cleared all entries")
        self.refresh()
        self.show_msg("Everything cleared ✅")

    def refresh(self) -> None:
        entries = self.store.load()
        self._render_stats(entries)
        self._render_list(entries)
        self.chart.render_chart(entries)

    def _render_stats(self, entries: List[Dict[str, Any]]) -> None:
        s = calc_stats(entries)
        if s is None:
            for tile in (self.tile_count, self.tile_avg_cal, self.tile_start, self.tile_diff):
                tile.set_value("—")
            return
        self.tile_count.set_value(str(s.count))
        self.tile_avg_cal.set_value(_fmt(s.avg_calories))
        self.tile_start.set_value(f"{_fmt(s.first_weight)} {cfg.WEIGHT_UNIT}")
        self.tile_diff.set_value(format_weight_diff(s.weight_diff))

    def _render_list(self, entries: List[Dict[str, Any]]) -> None:
        self.entry_list.clear()
        ordered = sorted(entries, key=lambda e: str(e.get("date", "")), reverse=True)
        if not ordered:
            self.entry_list.addItem(QListWidgetItem("No entries yet. Add the first one 🙂"))
            return
        for e in ordered:
            text = (
                f"{format_date(str(e.get('date', '')))}   "
                f"Weight: {_fmt(e.get('weight'))} {cfg.WEIGHT_UNIT}   "
                f"Calories: {_fmt(e.get('calories'))}   (id: {e.get('id', '?')})"
            )
            self.entry_list.addItem(QListWidgetItem(text))

    def _on_field_changed(self, index: int) -> None:
        field = self.field_combo.itemData(index)
        if not field:
            return
        self.config.chart_field = field
        try:
            self.config.save()
        except OSError:
            log.warning("Could not persist chart field", exc_info=True)
        self.chart.set_value_field(field, CHART_FIELD_UNITS.get(field, cfg.WEIGHT_UNIT))

    def _on_dark_toggled(self, checked: bool) -> None:
        self.ui_state.dark_mode = checked
        self._apply_appearance(checked, self.ui_state.font_size)
        save_ui_state(self.ui_state)

    def _on_font_size_changed(self, size: str) -> None:
        self.ui_state.font_size = size
        self._apply_appearance(self.ui_state.dark_mode, size)
        save_ui_state(self.ui_state)

    def closeEvent(self, e):
        self.ui_state.window_width = self.width()
        self.ui_state.window_height = self.height()
        save_ui_state(self.ui_state)
        super().closeEvent(e)


def launch_gui() -> None:
    import sys

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    win = MainWindow()
    win.show()
    sys.exit(app.exec())
