# leapwire/models.py
"""Field types for remote APIs that are loose about JSON shapes.

Some providers encode the same field differently depending on context: a
version number arrives as ``1`` or ``"1"``, a platform type as a string or a
list of strings, a status code as a number, a list, or null. Forcing these
into a single Python type would reject half of the real responses, so this
module provides:

- ``FlexInt``: an ``int`` that also accepts a numeric string.
- Small root models (``StrOrList``, ``StrOrNumber``, ``IntOrList``) that
  keep whichever shape arrived and offer accessors that interpret it lazily.
- ``ResultPage``: a page of items with the provider's total count.
- ``NullTolerantModel``: a base for response models of providers that send
  ``null`` where a field is simply absent.
"""

import re
from functools import lru_cache
from typing import Annotated, Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    RootModel,
    TypeAdapter,
    model_validator,
)

ItemT = TypeVar("ItemT")

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


@lru_cache(maxsize=256)
def type_adapter(target: Any) -> TypeAdapter:
    """Cached ``TypeAdapter`` for ``target`` (a model, ``list[Model]``, ...)."""
    return TypeAdapter(target)


def parse_flex_int(value: Any) -> int:
    """Accepts a JSON integer or a string holding one.

    Raises:
        ValueError: If the value is neither (booleans and floats included).
    """
    if isinstance(value, bool):
        raise ValueError(f"FlexInt: cannot unmarshal {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        # Plain ASCII decimal only: no whitespace, underscores or other digits
        if not _DECIMAL_INT.fullmatch(value):
            raise ValueError(f"FlexInt: cannot parse {value!r} as int")
        return int(value)
    raise ValueError(f"FlexInt: cannot unmarshal {value!r}")


FlexInt = Annotated[int, BeforeValidator(parse_flex_int)]
"""Integer field that accepts ``1`` and ``"1"`` alike."""


class StrOrList(RootModel[str | list[str] | None]):
    """A field sent either as a single string or as a list of strings."""

    root: str | list[str] | None = None

    def as_list(self) -> list[str]:
        if self.root is None:
            return []
        if isinstance(self.root, str):
            return [self.root] if self.root else []
        return list(self.root)


class StrOrNumber(RootModel[str | int | float | None]):
    """A field sent either as a string or as a number."""

    root: str | int | float | None = None

    def as_str(self) -> str:
        if self.root is None:
            return ""
        if isinstance(self.root, float) and self.root.is_integer():
            return str(int(self.root))
        return str(self.root)

    def as_int(self) -> int | None:
        """The value as an integer, or None if it does not hold one."""
        if isinstance(self.root, bool) or self.root is None:
            return None
        if isinstance(self.root, int):
            return self.root
        if isinstance(self.root, float):
            return int(self.root) if self.root.is_integer() else None
        try:
            return int(self.root)
        except ValueError:
            return None


class IntOrList(RootModel[int | list[int] | None]):
    """A field sent as a number, a list of numbers, or null."""

    root: int | list[int] | None = None

    def as_list(self) -> list[int]:
        if self.root is None:
            return []
        if isinstance(self.root, int):
            return [self.root]
        return list(self.root)


class ResultPage(BaseModel, Generic[ItemT]):
    """One page of a paginated endpoint.

    Attributes:
        items: The items on this page (empty when the provider found nothing).
        total_count: Total number of items reported by the provider.
    """

    items: list[ItemT] = Field(default_factory=list)
    total_count: int = 0

    model_config = ConfigDict(extra="allow")


class NullTolerantModel(BaseModel):
    """Base for response models whose provider sends ``null`` for absent fields.

    A ``null`` value is treated exactly like a missing key, so the field's
    default applies instead of failing validation (``"tasks": null`` becomes
    an empty list, ``"cost": null`` becomes ``0.0``).
    """

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _drop_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
