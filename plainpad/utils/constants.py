APP_ORG = "PlainPad"
APP_NAME = "PlainPad"
WINDOW_TITLE = "PlainPad"

OPEN_DIALOG_CAPTION = "Choose a text file..."
SAVE_DIALOG_CAPTION = "Choose a file name..."
TEXT_FILE_FILTER = "Text files (*.txt *.md *.py *.rs *.toml *.ini *.json);;All files (*)"

SETTINGS_GEOMETRY = "window/geometry"

THEME_DARK = "dark"
THEME_LIGHT = "light"

LOG_FILE_NAME = "plainpad.log"
