"""Event kinds consumed by the generator and the line tags it emits."""

# DOM events forwarded by the capture agent
CLICK = "click"
CHANGE = "change"
KEYDOWN = "keydown"
SUBMIT = "submit"

# Control events, marked with a trailing "*"
GOTO = "goto*"
VIEWPORT = "viewport*"
NAVIGATION = "navigation*"

# Line tags that only exist in generated output
NAVIGATION_PROMISE = "navigation-promise"
FRAME_SET = "frame-set"

FORM_TAG = "FORM"
SELECT_TAG = "SELECT"
TAB_KEY_CODE = 9

TOP_LEVEL_FRAME = "page"
