"""
Diagnostic sink for commonlib.

Log wraps the package logger with the small assertion vocabulary the
containers use to report misuse:

    Log.log(...)          - informational message
    Log.warn(...)         - warning
    Log.error(cond, ...)  - raise PreconditionError when cond holds
    Log.assert_(cond, ...) - report when cond does NOT hold; raises only
                             when strict assertions are enabled

Log.info builds the human-readable messages passed to those calls, e.g.
``Log.info.func_must_be("value", "Collection")`` -> "value must be Collection".
"""

from __future__ import annotations

import os
from typing import Any, Final

from ._logging import null_logger


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

LOGGER_NAME = "commonlib"

STRICT_ASSERT_ENV = "COMMONLIB_STRICT_ASSERT"

STRICT_ASSERTIONS = os.environ.get(STRICT_ASSERT_ENV, "").strip().lower() in (
    "1", "true", "yes",
)

logger: Final = null_logger(LOGGER_NAME)


class PreconditionError(Exception):
    """Raised when a container is used in a way its contract forbids."""
    pass


# =============================================================================
# MESSAGE BUILDERS
# =============================================================================

def _join(*args: Any) -> str:
    return " ".join(str(arg) for arg in args)


def _assertion(*args: Any) -> str:
    """
    Order a verb phrase and its operands into a sentence.

    ("must be", x)     -> "must be x"
    ("must be", a, b)  -> "a must be b"
    """
    if len(args) == 2:
        return _join(args[0], args[1])
    if len(args) == 3:
        return _join(args[1], args[0], args[2])
    raise ValueError("message builders accept one or two operands")


def _builder(verb: str):
    def build(*args: Any) -> str:
        return _assertion(verb, *args)
    build.__name__ = "func_" + verb.replace(" ", "_").replace("'", "")
    return build


class LogInfo:
    """Message builders for Log calls."""

    INVALID_PARAM = "invalid parameter"

    func_must = staticmethod(_builder("must"))
    func_must_be = staticmethod(_builder("must be"))
    func_must_not_be = staticmethod(_builder("must not be"))
    func_should = staticmethod(_builder("should"))
    func_should_not = staticmethod(_builder("should not"))
    func_support = staticmethod(_builder("support"))
    func_not_support = staticmethod(_builder("not support"))
    func_must_define = staticmethod(_builder("must define"))
    func_must_not_define = staticmethod(_builder("must not define"))
    func_expect = staticmethod(_builder("expect"))
    func_unexpect = staticmethod(_builder("unexpect"))
    func_exist = staticmethod(_builder("exist"))
    func_not_exist = staticmethod(_builder("not exist"))
    func_only = staticmethod(_builder("only"))
    func_can_not = staticmethod(_builder("can't"))

    @staticmethod
    def func_invalid(value: Any) -> str:
        return _assertion("invalid", value)

    @staticmethod
    def func_unknow(value: Any) -> str:
        return _assertion("unknow", value)


# =============================================================================
# LOG
# =============================================================================

class Log:
    """Process-wide diagnostic sink. All methods are static."""

    info = LogInfo

    @staticmethod
    def set_strict(flag: bool) -> None:
        """Toggle raising on failed ``assert_`` calls."""
        global STRICT_ASSERTIONS
        STRICT_ASSERTIONS = bool(flag)

    @staticmethod
    def log(*messages: Any) -> None:
        logger.info(_join(*messages))

    @staticmethod
    def warn(*messages: Any) -> None:
        logger.warning(_join(*messages))

    @staticmethod
    def error(cond: Any, *messages: Any) -> None:
        """
        Fail loudly when ``cond`` is truthy.

        Raises:
            PreconditionError: carrying the joined messages
        """
        if cond:
            message = _join(*messages)
            logger.error(message)
            raise PreconditionError(message)

    @staticmethod
    def assert_(cond: Any, *messages: Any) -> None:
        """Report a failed assertion; raise only in strict mode."""
        if cond:
            return

        message = _join(*messages) if messages else "assertion failed"
        logger.error("Assertion failed: %s", message)

        if STRICT_ASSERTIONS:
            raise PreconditionError(message)
