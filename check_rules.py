# check_rules.py

import logging
import sys
from uasift.extensions import EXTENSIONS
from uasift.regexes import DEFAULT_RULES
from uasift.safety import audit_rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

if __name__ == "__main__":
    sys.exit(0 if audit_rules([DEFAULT_RULES, *EXTENSIONS.values()]) else 1)
