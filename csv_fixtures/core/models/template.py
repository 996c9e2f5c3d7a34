"""
Record template model — the single fixed payment record.

Every generated row is this record with two markers substituted:
``{POSITION_8}`` takes the running counter and ``{POSITION_9}`` the
value date.  Nothing else in the string is interpreted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

COUNTER_MARKER = "{POSITION_8}"
DATE_MARKER = "{POSITION_9}"

PAYMENT_RECORD = (
    "31024000,,Template001,F15-796-514200,Internal Transfer,INR,"
    "{POSITION_8},+{POSITION_9},Cust_Ref_0001,1,,,,,,,,,,,,,,,,,,,"
    "SG123456789012345678,,Beneficiary_1,Beneficiary_2,Townsville,"
    "Bank Branch,,,,,,,SBIN0000001,,,,,,State Bank,,,,,,,,,,,,2,,,,,,,,,,,"
    "H2H UFF Test file,,,,,,,abc@gmail.com,,,,,,,,,,,,,,,,,,,,,,,,,,,,,,,,"
    ",,,,,,,,,,,,,,,,,Individual Debit,Y,"
    "Invoice Date|Invoice No|Description|Amount~20230801|INV001|Goods|1000.00"
)


class RecordTemplate(BaseModel):
    """An immutable record string with a counter and a date marker.

    Attributes:
        text: The raw record, containing each marker exactly once.
    """

    model_config = ConfigDict(frozen=True)

    text: str = PAYMENT_RECORD

    @model_validator(mode="after")
    def _check_markers(self) -> RecordTemplate:
        for marker in self.placeholders():
            found = self.text.count(marker)
            if found != 1:
                raise ValueError(
                    f"Template must contain {marker} exactly once (found {found})"
                )
        return self

    @staticmethod
    def placeholders() -> tuple[str, str]:
        """Return the (counter, date) marker tokens."""
        return COUNTER_MARKER, DATE_MARKER

    def render(self, counter: int, date: str) -> str:
        """Substitute the counter and the date into the record."""
        return (
            self.text
            .replace(COUNTER_MARKER, str(counter), 1)
            .replace(DATE_MARKER, date, 1)
        )


DEFAULT_TEMPLATE = RecordTemplate()
