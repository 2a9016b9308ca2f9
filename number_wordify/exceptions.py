"""
exceptions.py
=============
number-wordify — Hierarchical Exception System

All library exceptions inherit from WordifyError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
WordifyError
├── ValidationError
│   ├── InvalidValueError
│   │   ├── OutOfRangeError
│   │   ├── NegativeAmountError
│   │   └── InvalidAmountError
│   └── ScaleOverflowError
└── ConfigurationError
    ├── UnknownScaleError
    └── UnknownCurrencyError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class WordifyError(Exception):
    """Base exception for all number-wordify errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "SCALE_OVERFLOW"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(WordifyError):
    """Raised when a caller passes input outside an operation's contract."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidValueError(ValidationError):
    """Raised when an argument is out of range or has an invalid type."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


class OutOfRangeError(InvalidValueError):
    """Raised when a three-digit group is not an integer in [0, 999]."""

    def __init__(self, value=None, field: str = "n", **kwargs):
        kwargs.setdefault("code", "OUT_OF_RANGE")
        super().__init__(field, value, "expected an integer in [0, 999]", **kwargs)


class NegativeAmountError(InvalidValueError):
    """Raised when a negative amount reaches any entry point."""

    def __init__(self, value=None, field: str = "amount", **kwargs):
        kwargs.setdefault("code", "NEGATIVE_AMOUNT")
        super().__init__(field, value, "amount must not be negative", **kwargs)


class InvalidAmountError(InvalidValueError):
    """Raised when an amount is not a finite number."""

    def __init__(self, value=None, field: str = "amount", **kwargs):
        kwargs.setdefault("code", "INVALID_AMOUNT")
        super().__init__(field, value, "amount must be a finite number", **kwargs)


class ScaleOverflowError(ValidationError):
    """Raised when an amount needs more digit groups than the scale names."""

    def __init__(self, amount=None, scale_name: str = "", max_amount=None, **kwargs):
        msg = f"Amount {amount!r} exceeds the '{scale_name}' scale"
        if max_amount is not None:
            msg += f" (largest supported: {max_amount})"
        kwargs.setdefault("code", "SCALE_OVERFLOW")
        super().__init__(msg, field="amount", **kwargs)
        self.amount = amount
        self.scale_name = scale_name
        self.max_amount = max_amount


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(WordifyError):
    """Raised when a scale system, currency or setting is invalid."""


class UnknownScaleError(ConfigurationError):
    """Raised when no scale system is registered under a given name."""

    def __init__(self, name: str = "", **kwargs):
        super().__init__(f"Unknown scale system: '{name}'", **kwargs)
        self.name = name


class UnknownCurrencyError(ConfigurationError):
    """Raised when no currency is registered under a given code."""

    def __init__(self, currency_code: str = "", **kwargs):
        super().__init__(f"Unknown currency code: '{currency_code}'", **kwargs)
        self.currency_code = currency_code
