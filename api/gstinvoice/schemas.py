from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawGoodsRateRecord(BaseModel):
    """One row of the CBIC goods rate table, text exactly as cleaned."""

    model_config = ConfigDict(populate_by_name=True)

    chapter_heading: str = Field("", alias="chapterHeading")
    description: str = ""
    cgst_rate: str = Field("", alias="cgstRate")
    sgst_rate: str = Field("", alias="sgstRate")
    igst_rate: str = Field("", alias="igstRate")

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    def has_content(self) -> bool:
        return any(
            (self.chapter_heading, self.description, self.cgst_rate, self.sgst_rate, self.igst_rate)
        )


class HSNCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    description: str
    cgst: float = 0.0
    sgst: float = 0.0
    igst: float = 0.0
    cess: float = 0.0

    @property
    def score(self) -> float:
        # Used to pick between duplicate rows for the same code
        return (self.cgst + self.sgst + self.igst) * len(self.description)


class IndianState(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    code: str


class InvoiceLineItem(BaseModel):
    description: str = ""
    hsn_code: str = ""
    quantity: float = 0.0
    rate: float = 0.0
    uom: str = "NOS"
    # Percent overrides; None means "take it from the HSN table"
    cgst_rate: float | None = None
    sgst_rate: float | None = None
    igst_rate: float | None = None


class LineItemTax(BaseModel):
    description: str = ""
    hsn_code: str = ""
    taxable_value: float = 0.0
    cgst_rate: float = 0.0
    sgst_rate: float = 0.0
    igst_rate: float = 0.0
    cgst_amount: float = 0.0
    sgst_amount: float = 0.0
    igst_amount: float = 0.0
    total_amount: float = 0.0


class InvoiceTotals(BaseModel):
    sale_type: str
    items: List[LineItemTax] = []
    total_taxable_value: float = 0.0
    total_cgst: float = 0.0
    total_sgst: float = 0.0
    total_igst: float = 0.0
    total_tax: float = 0.0
    grand_total: float = 0.0
    amount_in_words: str = ""
