# regex.py

import re


# --- Validation ---
INTEGER_LITERAL = re.compile(r"[-+]?(?:[1-9][0-9]+|0)")
