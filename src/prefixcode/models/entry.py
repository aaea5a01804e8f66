"""Validated table entry model.

This module provides the TableEntry class used by the table file layer to
validate (element, codeword) pairs before they reach a PrefixTable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..codeword import CodeWord

UINT32_MAX = 0xFFFFFFFF


class TableEntry(BaseModel):
    """One ``<element> <bits>`` entry of a prefix table.

    Validation context keys (optional, passed to ``model_validate``):
        max_element: Upper bound for ``element`` (default: UINT32_MAX)
        max_code_length: Upper bound for ``len(code)`` (default: unbounded)

    Example:
        >>> entry = TableEntry(element=888, code="10")
        >>> entry.codeword()
        CodeWord('10')
        >>> TableEntry.model_validate(
        ...     {"element": 300, "code": "0"}, context={"max_element": 255}
        ... )
        Traceback (most recent call last):
        pydantic_core._pydantic_core.ValidationError: ...
    """

    model_config = ConfigDict(
        # Table files are text, so "888" must coerce to 888
        strict=False,
        frozen=True,
        extra="forbid",
    )

    element: int = Field(ge=0, le=UINT32_MAX, description="Unsigned 32-bit element")
    code: str = Field(pattern=r"^[01]*$", description="Codeword as a '0'/'1' string")

    @field_validator("element")
    @classmethod
    def check_max_element(cls, value: int, info: ValidationInfo) -> int:
        max_element = (info.context or {}).get("max_element")
        if max_element is not None and value > max_element:
            raise ValueError(f"element {value} exceeds maximum {max_element}")
        return value

    @field_validator("code")
    @classmethod
    def check_code_length(cls, value: str, info: ValidationInfo) -> str:
        max_code_length = (info.context or {}).get("max_code_length")
        if max_code_length is not None and len(value) > max_code_length:
            raise ValueError(f"codeword length {len(value)} exceeds maximum {max_code_length}")
        return value

    def codeword(self) -> CodeWord:
        """Return the entry's codeword as a CodeWord."""
        return CodeWord.from_string(self.code)

    def to_line(self) -> str:
        """Render the entry in table file format."""
        return f"{self.element} {self.code}"
