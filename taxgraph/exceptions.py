"""Custom exceptions for taxgraph."""


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class DataValidationError(TaxComputationError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class UnsupportedTaxYearError(DataValidationError):
    """Raised when no policy tables exist for the requested tax year."""

    def __init__(self, tax_year: int, table: str):
        self.tax_year = tax_year
        self.table = table
        super().__init__("tax_year", f"No {table} data for tax year {tax_year}")


class LineComputationError(TaxComputationError):
    """Raised when a line formula fails for well-formed input.

    This is a defect in the formula, never a user-facing condition.
    """

    def __init__(self, form: str, line: str, message: str):
        self.form = form
        self.line = line
        super().__init__(f"Form {form} line {line}: {message}")


class FormCycleError(LineComputationError):
    """Raised when a line (or subordinate form) is read while it is being computed."""

    def __init__(self, form: str, line: str, chain: list[str]):
        self.chain = chain
        super().__init__(form, line, f"circular reference ({' -> '.join(chain)})")
