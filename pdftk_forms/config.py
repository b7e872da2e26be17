"""
Configuration settings for pdftk_forms.
Defaults can be overridden through the environment where noted.
"""

import os

# Binary
PDFTK_PATH = os.environ.get("PDFTK_PATH", "pdftk")

# Field dump mode; values arrive XML-escaped, newlines and non-ASCII as
# numeric entities, so every value fits on its key line
DUMP_COMMAND = "dump_data_fields"

# pdftk releases before 1.40 cannot read XFDF in fill_form
XFDF_MIN_VERSION = (1, 40)

# Suffix appended to the template path when saving without a destination
FILLED_SUFFIX = ".filled"

# Temporary data files
DATA_FILE_PREFIX = ".pdftk_forms_"

