# Fixed palette for the playlist screen.
BACKGROUND = "#000000"
ACCENT = "#1DB954"
TEXT = "#ffffff"
TEXT_80 = "rgba(255, 255, 255, 0.8)"
TEXT_70 = "rgba(255, 255, 255, 0.7)"
ICON_MUTED = "#b3b3b3"
PLACEHOLDER = "#282828"
PLACEHOLDER_FAILED = "#3a1d1d"

HEADER_HEIGHT = 350
THUMB_SIZE = 48
PLAY_BUTTON_SIZE = 56
NAV_HEIGHT = 70
# keeps the last row clear of the bottom navigation bar
TRAILING_SPACER = NAV_HEIGHT
