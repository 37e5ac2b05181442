"""keyshortcuts.config
Package-wide settings.  Read at call time, so hosts and tests may assign
new values after import.
"""
import os
# =============================================================================
# MODIFIER CONSTRAINTS
# =============================================================================
# Environment variable consulted once at import for the default below.
STRICT_ENV_VAR = "KEYSHORTCUTS_STRICT"
_FALSE_VALUES = {"0", "false", "no", "off"}
# True: constraining an already-constrained modifier channel raises
# DuplicateModifierError.  False: the first constraint is kept and a
# warning is logged.
STRICT_MODIFIERS = os.environ.get(STRICT_ENV_VAR, "1").strip().lower() not in _FALSE_VALUES
# =============================================================================
# LISTENER
# =============================================================================
# Seconds to wait for the pynput listener thread on stop().
LISTENER_JOIN_TIMEOUT = 1.0
