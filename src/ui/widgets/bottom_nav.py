# ui/widgets/bottom_nav.py
from __future__ import annotations

from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QToolButton

from core.view_models import NavItem, build_nav_items
from ui import theme
from ui.icons import svg_icon


class BottomNavigation(QWidget):
    navigateRequested = Signal(object)  # Destination

    def __init__(self, items: list[NavItem] | None = None, parent=None):
        super().__init__(parent)
        self.items = list(items) if items is not None else build_nav_items()
        self.setObjectName("BottomNav")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setFixedHeight(theme.NAV_HEIGHT)

        root = QHBoxLayout(self)
        root.setContentsMargins(0, 4, 0, 4)
        root.setSpacing(0)

        self.buttons: list[QToolButton] = []
        for item in self.items:
            color = theme.TEXT if item.selected else theme.ICON_MUTED
            btn = QToolButton()
            btn.setObjectName("NavItemSelected" if item.selected else "NavItem")
            btn.setText(item.label)
            btn.setIcon(svg_icon(item.icon, 24, color))
            btn.setIconSize(QSize(24, 24))
            btn.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextUnderIcon)
            btn.setAccessibleName(item.label)
            btn.setCheckable(True)
            btn.setChecked(item.selected)
            btn.clicked.connect(lambda _checked=False, it=item: self._on_clicked(it))
            root.addWidget(btn, 1)
            self.buttons.append(btn)

        self._apply_styles()

    def selected_index(self) -> int:
        for i, btn in enumerate(self.buttons):
            if btn.isChecked():
                return i
        return -1

    def _on_clicked(self, item: NavItem):
        # No router behind the bar: restore the declared selection and report the tap.
        for btn, it in zip(self.buttons, self.items):
            btn.setChecked(it.selected)
        self.navigateRequested.emit(item.destination)

    def _apply_styles(self):
        self.setStyleSheet(f"""
        QWidget#BottomNav {{
            background-color: {theme.BACKGROUND};
        }}
        QToolButton {{
            border: none;
            background: transparent;
            font-size: 11px;
            padding: 4px;
        }}
        QToolButton#NavItem {{
            color: {theme.TEXT_70};
        }}
        QToolButton#NavItemSelected {{
            color: {theme.TEXT};
        }}
        """)
