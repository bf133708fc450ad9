APP_ORG = "LightweightTools"
APP_NAME = "Lightweight Code Editor"

MSG_TITLE = "Message"
MSG_SAVED = "File saved successfully!"
MSG_NEED_FILENAME = "Please enter a filename"
MSG_NEED_TEXT = "Please enter some text"
MSG_OPEN_FAILED = "Failed to open file"
MSG_SAVE_FAILED = "Failed to save file: {error}"
MSG_SAVE_CANCELLED = "Save cancelled"

FILENAME_PLACEHOLDER = "Enter filename (any extension)"

# Import dialog is restricted to plain text, Python and source code. No "All files" entry.
OPEN_FILTERS = (
    "Plain text (*.txt *.text *.md *.log *.csv);;"
    "Python scripts (*.py *.pyw *.pyi);;"
    "Source code (*.c *.h *.cc *.cpp *.hpp *.cs *.java *.kt *.swift *.m *.go *.rs "
    "*.js *.ts *.rb *.php *.sh *.pl *.lua *.sql *.html *.css *.json *.xml *.yaml *.yml *.toml)"
)
EXPORT_FILTER = "All files (*)"

STAGING_DIR_PREFIX = "lce-staging-"

# (window background, editor background, editor foreground)
LIGHT_COLORS = ("#ffffff", "#f2f2f2", "#000000")
DARK_COLORS = ("#1a1a1a", "#333333", "#ffffff")
SUN_COLOR = "#ffa500"
MOON_COLOR = "#ffff00"
