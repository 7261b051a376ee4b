import re

# styled<sep><identifier>[)] where sep is "." (native), "(" (custom) or nothing (custom)
STYLED_PATTERN = re.compile(r"styled([.(]?)(\w+)\)?")
