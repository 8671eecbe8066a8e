import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Delay before the calculator page clears an error display (milliseconds)
CALCULATOR_ERROR_RESET_MS = int(os.getenv("CALCULATOR_ERROR_RESET_MS", "2000"))

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
