import logging
from os import getenv

# Debian architecture used when the package does not name one
DEFAULT_ARCHITECTURE = "amd64"

# Installed-Size is expressed in kibibytes
KIB = 1024

# unknown level names fall back to INFO
LOG_LEVEL = logging.getLevelNamesMapping().get(getenv("DEBPKG_LOG_LEVEL", "INFO").upper(), logging.INFO)
