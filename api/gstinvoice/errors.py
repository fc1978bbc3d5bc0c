class GstRatesError(Exception):
    """Base error for the rate extraction pipeline."""


class TableNotFoundError(GstRatesError):
    """The source page has no goods rate table."""

    def __init__(self, anchor: str):
        self.anchor = anchor
        super().__init__(f"table not found: no element with id '{anchor}' in source HTML")
